"""Request logging middleware."""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept"]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
    "Access-Control-Allow-Methods": ", ".join(CORS_ALLOW_METHODS),
}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request and answer ``OPTIONS`` requests directly.

    Must be the outermost middleware: every ``OPTIONS`` request, preflight
    or not, gets 200 with the fixed CORS headers and never reaches a route.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.info(f"[REQUEST] {request.method} {target}")

        if request.method == "OPTIONS":
            return PlainTextResponse("OK", status_code=200, headers=CORS_HEADERS)

        start_time = time.time()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            latency_ms = (time.time() - start_time) * 1000
            logger.info(
                f"[RESPONSE] {request.method} {target} "
                f"{status_code} ({latency_ms:.0f}ms)"
            )
