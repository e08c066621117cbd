import time
import uuid
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from hrms.utils.logger import Logger

request_logger = Logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log method, path, status and duration"""

    def __init__(self, app, excluded_paths: Optional[set] = None):
        super().__init__(app)
        self.excluded_paths = excluded_paths or {"/health", "/favicon.ico"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.perf_counter()
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id

        if request.url.path not in self.excluded_paths:
            duration_ms = (time.perf_counter() - start_time) * 1000
            request_logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} "
                f"({duration_ms:.1f}ms) [{request_id}]"
            )
        return response
