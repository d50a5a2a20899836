import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .core.config import settings
from .core.cors import setup_cors
from .core.logging import setup_logging
from .api.routers import questions as questions_router
from .api.routers import quizzes as quizzes_router

logger = logging.getLogger(__name__)

setup_logging()

app = FastAPI(title=settings.APP_NAME)
setup_cors(app)

app.include_router(questions_router.router, prefix=settings.API_PREFIX)
app.include_router(quizzes_router.router, prefix=settings.API_PREFIX)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # malformed path/query/body is a plain 400, not FastAPI's default 422
    logger.info("rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )

@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
