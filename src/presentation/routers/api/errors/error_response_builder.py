"""Error response builder.

Converts dispatcher Failure results (ApplicationError) and raw HTTP status
codes into the uniform ErrorResponse body.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from datetime import UTC, datetime
from http import HTTPStatus

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.presentation.routers.api.errors.error_response import ErrorResponse


class ErrorResponseBuilder:
    """Build uniform error responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_ACCEPTABLE,
        ...     message="Could not find acceptable representation for application/json",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert ApplicationError to an error JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for the path)
            trace_id: Request correlation id

        Returns:
            JSONResponse with ErrorResponse content

        Example:
            >>> error = ApplicationError(
            ...     code=ApplicationErrorCode.NOT_FOUND,
            ...     message="No route registered for /flip/unknown",
            ... )
            >>> response = ErrorResponseBuilder.from_application_error(
            ...     error, request, trace_id
            ... )
            >>> # Returns 404 with ErrorResponse JSON
        """
        return ErrorResponseBuilder.build(
            status_code=ErrorResponseBuilder._get_status_code(error.code),
            message=error.message,
            request=request,
            trace_id=trace_id,
        )

    @staticmethod
    def build(
        *,
        status_code: int,
        message: str,
        request: Request,
        trace_id: str | None,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Build an error response for an HTTP status code.

        The correlation header is echoed whenever a trace id is known.

        Args:
            status_code: HTTP status code.
            message: Human-readable explanation.
            request: FastAPI Request object.
            trace_id: Request correlation id.
            headers: Extra response headers (e.g., Allow on 405).

        Returns:
            JSONResponse with ErrorResponse content.
        """
        body = ErrorResponse(
            timestamp=datetime.now(UTC),
            status=status_code,
            error=ErrorResponseBuilder._get_reason(status_code),
            message=message,
            path=str(request.url.path),
            trace_id=trace_id,
        )

        response_headers = dict(headers or {})
        if trace_id:
            response_headers[settings.correlation_header] = trace_id

        return JSONResponse(
            status_code=status_code,
            content=body.to_content(),
            headers=response_headers,
        )

    @staticmethod
    def _get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(
            ...     ApplicationErrorCode.NOT_ACCEPTABLE
            ... )
            406
        """
        mapping = {
            ApplicationErrorCode.NOT_ACCEPTABLE: status.HTTP_406_NOT_ACCEPTABLE,
            ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
            ApplicationErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
            ApplicationErrorCode.HANDLER_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
        }
        return mapping.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _get_reason(status_code: int) -> str:
        """HTTP reason phrase, "Error" for unknown codes."""
        try:
            return HTTPStatus(status_code).phrase
        except ValueError:
            return "Error"
