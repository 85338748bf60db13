
import time
import uuid
import logging
from typing import Iterable, Optional
from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

def is_origin_allowed(origin: Optional[str], allowed_origins: Iterable[str]) -> bool:
    """
    Requests without an Origin header come from same-origin pages or
    non-browser clients and are always let through.
    """
    if not origin:
        return True
    return origin in allowed_origins

class OriginGateMiddleware(BaseHTTPMiddleware):
    """
    Rejects requests whose Origin is not on the allow-list before any
    route handler runs. Response headers for allowed origins are left to
    CORSMiddleware.
    """
    def __init__(self, app: ASGIApp, allowed_origins: Iterable[str]):
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if is_origin_allowed(origin, self.allowed_origins):
            return await call_next(request)

        logger.warning(
            "Origin rejected",
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "origin": origin,
                "path": request.url.path,
                "method": request.method,
            }
        )
        return PlainTextResponse("Not allowed by CORS", status_code=403)

class RequestTrackingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add correlation ID (request_id) and log request timing.
    """
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        # Downstream handlers read it from request state
        request.state.request_id = request_id

        start_time = time.time()

        try:
            response = await call_next(request)

            process_time = (time.time() - start_time) * 1000
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = str(process_time)

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": round(process_time, 2),
                    "user_agent": request.headers.get("user-agent"),
                }
            )

            return response

        except Exception as e:
            process_time = (time.time() - start_time) * 1000
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": round(process_time, 2),
                    "error": str(e)
                },
                exc_info=True
            )
            raise
