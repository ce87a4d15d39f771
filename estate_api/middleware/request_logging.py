"""
Request logging middleware.
Assigns a request ID, times each request and logs slow or failing requests.
"""

from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import logging
import time
import uuid

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware tagging each request with an ID and timing it.
    Adds `X-Request-ID` and `X-Processing-Time` headers to every response.
    """

    def __init__(
        self,
        app: ASGIApp,
        enable_detailed_logging: bool = False,
        slow_request_threshold: float = 1.0  # seconds
    ):
        super().__init__(app)
        self.enable_detailed_logging = enable_detailed_logging
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request through the logging middleware.

        Args:
            request: FastAPI request object
            call_next: Next middleware/handler in chain

        Returns:
            Response object with request ID and timing headers
        """
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            processing_time = time.perf_counter() - start_time
            logger.error(
                f"Request error [{request_id}]: {type(exc).__name__} - {str(exc)} "
                f"(processing_time: {processing_time:.3f}s)",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "method": request.method,
                    "processing_time": processing_time,
                    "error_type": type(exc).__name__
                },
                exc_info=True
            )
            raise

        processing_time = time.perf_counter() - start_time
        self._log_request(request, response, request_id, processing_time)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Processing-Time"] = f"{processing_time:.3f}"
        return response

    def _log_request(
        self,
        request: Request,
        response: Response,
        request_id: str,
        processing_time: float
    ) -> None:
        endpoint = f"{request.method} {request.url.path}"
        extra = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "processing_time": processing_time
        }

        if processing_time > self.slow_request_threshold:
            logger.warning(f"SLOW REQUEST [{request_id}]: {endpoint} - {processing_time:.3f}s", extra=extra)
        elif self.enable_detailed_logging:
            logger.info(
                f"Request [{request_id}]: {endpoint} - {response.status_code} - {processing_time:.3f}s",
                extra=extra
            )
