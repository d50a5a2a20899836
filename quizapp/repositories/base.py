import logging
from typing import Any, List

from ..domain.errors import StorageError

logger = logging.getLogger(__name__)


def execute(query: Any, action: str) -> List[dict]:
    """Runs a PostgREST query builder and returns its rows.

    Any failure from the client (HTTP, PostgREST, constraint violations) is
    logged here and re-raised as StorageError so callers never see driver types.
    """
    try:
        res = query.execute()
    except Exception as exc:
        logger.exception("storage failure while trying to %s", action)
        raise StorageError(f"cannot {action}") from exc
    return res.data or []
