import logging

from .config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str | None = None) -> None:
    """Attaches a stream handler to the root logger once; later calls only change the level."""
    global _configured
    root = logging.getLogger()
    root.setLevel(level or settings.LOG_LEVEL)
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # httpx logs every PostgREST call at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _configured = True
