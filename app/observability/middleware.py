import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from app.observability.events import log_event


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Tags every request with an x-request-id (client supplied or generated) and logs path, method, status and latency as one JSON line."""

    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        start = time.perf_counter()

        # summary events carry it via get_request_id
        request.state.request_id = rid

        response = await call_next(request)

        dur_ms = (time.perf_counter() - start) * 1000.0
        log_event(
            "request",
            request_id=rid,
            path=request.url.path,
            method=request.method,
            status=response.status_code,
            latency_ms=round(dur_ms, 2),
        )
        response.headers["x-request-id"] = rid
        return response


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")
