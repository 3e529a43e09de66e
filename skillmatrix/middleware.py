"""
Middleware that logs one line per HTTP request with method, path, status and
duration. Unexpected exceptions are logged with traceback and re-raised.
"""
import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("skillmatrix.http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        method = request.method
        path = request.url.path

        # Skip health checks (too noisy)
        if path == "/health":
            return await call_next(request)

        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(f"{method} {path} 500 {duration_ms:.1f}ms - {e}", exc_info=True)
            raise

        duration_ms = (time.time() - start_time) * 1000
        log = logger.warning if response.status_code >= 500 else logger.info
        log(f"{method} {path} {response.status_code} {duration_ms:.1f}ms")
        return response
