import time
from fastapi import Request
from core.i18n_logger import get_i18n_logger

logger = get_i18n_logger(__name__)


async def log_requests(request: Request, call_next):
    """
    HTTP middleware logging method, path, status and duration of each request.
    """
    started = time.perf_counter()
    response = await call_next(request)
    logger.debug(
        "http.request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        elapsed_ms=(time.perf_counter() - started) * 1000
    )
    return response
