"""
Error handlers for the FastAPI application.

Client input errors are rendered as ``{"message": ...}``; everything else gets
the message plus an error code and the request id.
"""

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import httpx
import logging
import time
from typing import Dict, Any, Optional

from travel_lens.core.exceptions import ClientInputError, ErrorCode
from travel_lens.schemas.base import ErrorResponse, Message

logger = logging.getLogger(__name__)


class ErrorHandler:
    """
    Translates exceptions into JSON responses and keeps per-code error counts.
    """

    def __init__(self):
        self.error_counts: Dict[str, int] = {}
        self.last_error_time: Dict[str, float] = {}

    async def handle_client_input_error(
        self,
        request: Request,
        exc: ClientInputError
    ) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.info(
            f"Rejected request {request_id}: {exc.message}",
            extra={
                'request_id': request_id,
                'error_code': exc.error_code.value,
                'request_path': request.url.path,
            }
        )

        self._track_error(exc.error_code.value)

        return JSONResponse(
            status_code=exc.status_code,
            content=Message(message=exc.message).model_dump()
        )

    async def handle_upstream_status_error(
        self,
        request: Request,
        exc: httpx.HTTPStatusError
    ) -> JSONResponse:
        """
        Handle a non-2xx answer from the model provider.

        The provider's status (bad key, unknown model, quota) is reported in
        ``details`` while the relay itself answers 502.
        """
        request_id = getattr(request.state, 'request_id', 'unknown')
        upstream_status = exc.response.status_code

        logger.warning(
            f"Upstream error in request {request_id}: {upstream_status} from {exc.request.url.host}",
            extra={
                'request_id': request_id,
                'upstream_status': upstream_status,
                'request_path': request.url.path,
            }
        )

        self._track_error(ErrorCode.UPSTREAM_ERROR.value)

        return self._create_error_response(
            error_code=ErrorCode.UPSTREAM_ERROR.value,
            message=f"Upstream provider returned HTTP {upstream_status}",
            details={'upstream_status': upstream_status, 'upstream_body': _safe_body(exc.response)},
            request_id=request_id,
            status_code=502
        )

    async def handle_upstream_request_error(
        self,
        request: Request,
        exc: httpx.RequestError
    ) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')

        if isinstance(exc, httpx.TimeoutException):
            error_code, status_code = ErrorCode.UPSTREAM_TIMEOUT, 504
            message = "Upstream provider timed out"
        else:
            error_code, status_code = ErrorCode.UPSTREAM_UNAVAILABLE, 502
            message = "Upstream provider is unreachable"

        logger.error(
            f"Upstream request failed in request {request_id}: {type(exc).__name__}: {exc}",
            extra={
                'request_id': request_id,
                'request_path': request.url.path,
            }
        )

        self._track_error(error_code.value)

        return self._create_error_response(
            error_code=error_code.value,
            message=message,
            request_id=request_id,
            status_code=status_code
        )

    async def handle_http_exception(
        self,
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')

        if exc.status_code == 404:
            error_code = ErrorCode.NOT_FOUND.value
        elif exc.status_code < 500:
            error_code = ErrorCode.VALIDATION_ERROR.value
        else:
            error_code = ErrorCode.INTERNAL_SERVER_ERROR.value

        logger.warning(
            f"HTTP exception in request {request_id}: {exc.status_code} - {exc.detail}",
            extra={
                'request_id': request_id,
                'status_code': exc.status_code,
                'request_path': request.url.path
            }
        )

        return self._create_error_response(
            error_code=error_code,
            message=str(exc.detail),
            request_id=request_id,
            status_code=exc.status_code
        )

    async def handle_generic_exception(
        self,
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.error(
            f"Unhandled exception in request {request_id}: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                'request_id': request_id,
                'exception_type': type(exc).__name__,
                'request_path': request.url.path,
                'request_method': request.method,
            }
        )

        self._track_error(ErrorCode.INTERNAL_SERVER_ERROR.value)

        return self._create_error_response(
            error_code=ErrorCode.INTERNAL_SERVER_ERROR.value,
            message="An internal server error occurred",
            request_id=request_id,
            status_code=500
        )

    def _create_error_response(
        self,
        error_code: str,
        message: str,
        request_id: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None
    ) -> JSONResponse:
        error_response = ErrorResponse(
            error_code=error_code,
            message=message,
            details=details or None,
            request_id=request_id,
        )

        return JSONResponse(
            status_code=status_code,
            content=error_response.model_dump(mode="json", exclude_none=True)
        )

    def _track_error(self, error_code: str) -> None:
        current_time = time.time()

        self.error_counts[error_code] = self.error_counts.get(error_code, 0) + 1
        self.last_error_time[error_code] = current_time

        if self.error_counts[error_code] % 10 == 0:
            logger.warning(
                f"High frequency error detected: {error_code} occurred {self.error_counts[error_code]} times"
            )

    def get_error_statistics(self) -> Dict[str, Any]:
        """
        Get error statistics for monitoring.

        Returns:
            Dictionary with error statistics
        """
        current_time = time.time()

        return {
            'error_counts': dict(self.error_counts),
            'recent_errors': {
                code: count for code, count in self.error_counts.items()
                if current_time - self.last_error_time.get(code, 0) < 3600  # Last hour
            },
            'total_errors': sum(self.error_counts.values())
        }


def _safe_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text[:500]


# Global error handler instance
error_handler = ErrorHandler()


def setup_error_handlers(app):
    """
    Set up all error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(ClientInputError)
    async def client_input_error_handler(request: Request, exc: ClientInputError):
        return await error_handler.handle_client_input_error(request, exc)

    @app.exception_handler(httpx.HTTPStatusError)
    async def upstream_status_error_handler(request: Request, exc: httpx.HTTPStatusError):
        return await error_handler.handle_upstream_status_error(request, exc)

    @app.exception_handler(httpx.RequestError)
    async def upstream_request_error_handler(request: Request, exc: httpx.RequestError):
        return await error_handler.handle_upstream_request_error(request, exc)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return await error_handler.handle_http_exception(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(request: Request, exc: StarletteHTTPException):
        return await error_handler.handle_http_exception(request, exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        return await error_handler.handle_generic_exception(request, exc)
