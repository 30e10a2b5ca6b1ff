import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from raffle_agent.core.logger import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every HTTP request with its status and duration."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        elapsed = time.time() - start_time
        logger.info(f'{request.method} {request.url.path} -> {response.status_code} ({elapsed:.3f}s)')
        return response
