"""
Error handlers for the FastAPI application.
Every error leaves the API as a StandardErrorResponse body.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time
from typing import Dict, Any, Optional

from app.core.exceptions import ConverterException, ErrorCode
from app.models.api_models import StandardErrorResponse

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "The requested endpoint does not exist"

HTTP_STATUS_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.NOT_FOUND,
    503: ErrorCode.NOT_INITIALIZED,
}


def _request_context(request: Request) -> Dict[str, Any]:
    return {
        'request_id': getattr(request.state, 'request_id', 'unknown'),
        'request_path': request.url.path,
        'request_method': request.method,
    }


class ErrorHandler:
    """
    Turns exceptions into error envelopes and counts them per error code.
    """

    def __init__(self):
        self.error_counts: Dict[str, int] = {}
        self.last_error_time: Dict[str, float] = {}

    async def handle_converter_exception(
        self,
        request: Request,
        exc: ConverterException
    ) -> JSONResponse:
        """
        Client errors log at warning level, server-side failures at error.
        The exception's own status code and details are passed through.
        """
        context = _request_context(request)
        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            f"{type(exc).__name__} in request {context['request_id']}: {exc.message}",
            extra={**context, 'error_code': exc.error_code.value, 'status_code': exc.status_code},
        )

        self._track_error(exc.error_code.value)
        return self._create_error_response(
            error_code=exc.error_code,
            message=exc.message,
            request_id=context['request_id'],
            status_code=exc.status_code,
            details=exc.details,
        )

    async def handle_validation_error(
        self,
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed JSON or a body of the wrong shape."""
        context = _request_context(request)
        validation_errors = [
            {
                'field': '.'.join(str(loc) for loc in error['loc']),
                'message': error['msg'],
                'type': error['type'],
            }
            for error in exc.errors()
        ]
        logger.warning(
            f"Request {context['request_id']} failed validation with {len(validation_errors)} errors",
            extra={**context, 'validation_errors': validation_errors},
        )

        self._track_error(ErrorCode.VALIDATION_ERROR.value)
        return self._create_error_response(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Request validation failed",
            request_id=context['request_id'],
            status_code=400,
            details={'validation_errors': validation_errors},
        )

    async def handle_http_exception(
        self,
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        context = _request_context(request)
        error_code = HTTP_STATUS_CODES.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR)
        message = NOT_FOUND_MESSAGE if exc.status_code == 404 else str(exc.detail)

        logger.warning(
            f"HTTP {exc.status_code} for {context['request_method']} {context['request_path']}",
            extra={**context, 'status_code': exc.status_code},
        )

        return self._create_error_response(
            error_code=error_code,
            message=message,
            request_id=context['request_id'],
            status_code=exc.status_code,
        )

    async def handle_generic_exception(
        self,
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        context = _request_context(request)
        logger.error(
            f"Unhandled {type(exc).__name__} in request {context['request_id']}: {exc}",
            exc_info=True,
            extra={**context, 'exception_type': type(exc).__name__},
        )

        self._track_error(ErrorCode.INTERNAL_SERVER_ERROR.value)
        return self._create_error_response(
            error_code=ErrorCode.INTERNAL_SERVER_ERROR,
            message="An unexpected error occurred",
            request_id=context['request_id'],
            status_code=500,
        )

    def _create_error_response(
        self,
        error_code: ErrorCode,
        message: str,
        request_id: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None
    ) -> JSONResponse:
        body = StandardErrorResponse(
            error_code=error_code.value,
            message=message,
            details=details or None,
            request_id=request_id,
        )
        return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

    def _track_error(self, error_code: str) -> None:
        count = self.error_counts.get(error_code, 0) + 1
        self.error_counts[error_code] = count
        self.last_error_time[error_code] = time.time()

        if count % 10 == 0:
            logger.warning(f"Error {error_code} has occurred {count} times")

    def get_error_statistics(self) -> Dict[str, Any]:
        """
        Error counts since start-up, plus the codes seen in the last hour.
        """
        hour_ago = time.time() - 3600
        return {
            'error_counts': dict(self.error_counts),
            'recent_errors': {
                code: count for code, count in self.error_counts.items()
                if self.last_error_time.get(code, 0) > hour_ago
            },
            'total_errors': sum(self.error_counts.values()),
        }


# Global error handler instance
error_handler = ErrorHandler()


def setup_error_handlers(app):
    """Register the error handlers on the FastAPI application."""
    app.add_exception_handler(ConverterException, error_handler.handle_converter_exception)
    app.add_exception_handler(RequestValidationError, error_handler.handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, error_handler.handle_http_exception)
    app.add_exception_handler(Exception, error_handler.handle_generic_exception)
