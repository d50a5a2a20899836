import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "quizapp.main:app",
        host="0.0.0.0",
        port=settings.BACKEND_PORT,
        reload=settings.APP_ENV == "dev",
        log_config=None,  # keep the handlers from setup_logging
    )
