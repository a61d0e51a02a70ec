# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Render dtokit errors as framework-agnostic error payloads.

Request handlers can turn any exception raised by the param validators or
the DTO helpers into a JSON-ready dict carrying an HTTP status code:
CLIENT_ERROR categories map to 400, everything else to 500.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from functools import wraps
import logging
from typing import Any, TypeVar

from .exceptions import DtoKitError, DtoValidationError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

STATUS_BY_CATEGORY = {
    "CLIENT_ERROR": 400,
    "SERVER_ERROR": 500,
}


def create_error_response(
    message: str,
    context: str,
    status_code: int,
    error_code: str | None = None,
    error_category: str | None = None,
    recovery_suggestion: str | None = None,
    diagnostic_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a standardized error payload.

    Args:
        message: The error message shown to the caller
        context: Operation the error happened in
        status_code: HTTP status code to respond with
        error_code: Optional error code for tracking
        error_category: Optional error category (CLIENT_ERROR, SERVER_ERROR)
        recovery_suggestion: Optional suggestion for error recovery
        diagnostic_context: Optional diagnostic information for debugging

    Returns:
        Error payload dictionary
    """
    error_response: dict[str, Any] = {
        "error": message,
        "context": context,
        "status_code": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    if error_code:
        error_response["error_code"] = error_code
    if error_category:
        error_response["error_category"] = error_category
    if recovery_suggestion:
        error_response["recovery_suggestion"] = recovery_suggestion
    if diagnostic_context:
        error_response["diagnostic_context"] = diagnostic_context
    return error_response


class ErrorHandler:
    """Turn exceptions into error payloads."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def handle_exception(self, exc: Exception, operation: str) -> dict[str, Any]:
        """Handle any exception and return a standardized error payload.

        Args:
            exc: The exception that occurred
            operation: Name of the operation that failed

        Returns:
            Error payload dictionary
        """
        if isinstance(exc, DtoKitError):
            return self._handle_dtokit_error(exc, operation)
        if isinstance(exc, ValueError):
            return self._handle_value_error(exc, operation)
        return self._handle_unexpected_error(exc, operation)

    def _handle_dtokit_error(self, exc: DtoKitError, operation: str) -> dict[str, Any]:
        status_code = STATUS_BY_CATEGORY.get(exc.error_category, 500)
        self.logger.warning(
            "%s failed: %s",
            operation,
            exc,
            extra={
                "error_code": exc.error_code,
                "error_category": exc.error_category,
                "context": exc.context,
                "operation": operation,
            },
        )

        diagnostic_context = dict(exc.context)
        if isinstance(exc, DtoValidationError):
            diagnostic_context["errors"] = [
                {"field": field, "message": message} for field, message in exc.errors
            ]
        # client errors carry the full message; server errors only the safe summary
        message = str(exc) if exc.error_category == "CLIENT_ERROR" else exc.user_message

        return create_error_response(
            message=message,
            context=operation,
            status_code=status_code,
            error_code=exc.error_code,
            error_category=exc.error_category,
            recovery_suggestion=exc.recovery_suggestion,
            diagnostic_context=diagnostic_context,
        )

    def _handle_value_error(self, exc: ValueError, operation: str) -> dict[str, Any]:
        self.logger.warning("Value error in %s: %s", operation, exc)

        return create_error_response(
            message="Invalid input provided",
            context=operation,
            status_code=400,
            error_code="DTK_1099",
            error_category="CLIENT_ERROR",
            recovery_suggestion="Check input values and try again",
            diagnostic_context={"original_error": str(exc)},
        )

    def _handle_unexpected_error(self, exc: Exception, operation: str) -> dict[str, Any]:
        self.logger.exception("Unexpected error in %s", operation)

        return create_error_response(
            message="An unexpected error occurred",
            context=operation,
            status_code=500,
            error_code="DTK_9999",
            error_category="SERVER_ERROR",
            recovery_suggestion="Please try again or contact support if the issue persists",
            diagnostic_context={"error_type": type(exc).__name__, "error_message": str(exc)},
        )

    def with_error_handling(self, operation: str) -> Callable[[F], F]:
        """Decorator returning an error payload instead of raising.

        Args:
            operation: Name of the operation for error context

        Returns:
            Decorator function
        """

        def decorator(func: F) -> F:
            @wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    return self.handle_exception(e, operation)

            return wrapper  # type: ignore[return-value]

        return decorator
