import logging
import time
from fastapi import Request

logger = logging.getLogger("bloglist.requests")

class RequestLoggingMiddleware:
    """Log method, path, status and duration of every request"""

    async def __call__(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

def configure_logging(level: str) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # basicConfig only applies once per process; each app sets its own level
    logging.getLogger().setLevel(level.upper())
