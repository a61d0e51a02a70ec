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

"""Custom exceptions for dtokit."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class DtoKitError(Exception):
    """Base exception for all dtokit errors."""

    ERROR_CATEGORY = "SERVER_ERROR"
    ERROR_CODE = "DTK_0000"

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        recovery_suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.user_message = user_message or "An error occurred"
        self.error_code = error_code or self.ERROR_CODE
        self.error_category = self.ERROR_CATEGORY
        self.context = context or {}
        self.recovery_suggestion = recovery_suggestion
        self.timestamp = datetime.now(timezone.utc)


class DtoValidationError(DtoKitError):
    """A DTO failed its declared constraints.

    ``errors`` holds every ``(field, message)`` pair reported by the model,
    in the order pydantic reported them.
    """

    ERROR_CODE = "DTK_1000"

    def __init__(self, model_name: str, errors: list[tuple[str, str]]) -> None:
        lines = "".join(f"- {field}: {message}\n" for field, message in errors)
        message = f"DTO {model_name} validation failed:\n{lines}"
        user_message = f"{model_name} contains invalid values"
        context = {"model": model_name, "error_count": len(errors)}
        recovery_suggestion = "Fix the listed fields and try again"
        super().__init__(message, user_message, self.ERROR_CODE, context, recovery_suggestion)
        self.model_name = model_name
        self.errors = list(errors)


class MalformedInputError(DtoKitError):
    """A raw value could not be parsed into the requested type."""

    ERROR_CODE = "DTK_1001"

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        user_message = f"Invalid value for {field}"
        context = {"field": field, "value": repr(value)}
        super().__init__(message, user_message, self.ERROR_CODE, context)
        self.field = field
        self.value = value


class DtoConversionError(DtoKitError):
    """Converting one element of a list of plain objects failed."""

    ERROR_CODE = "DTK_1002"

    def __init__(self, model_name: str, index: int, original_error: Exception) -> None:
        message = f"Failed to convert {model_name}[{index}]: {original_error}"
        user_message = f"Invalid item at index {index}"
        context = {"model": model_name, "index": index, "original_error": str(original_error)}
        super().__init__(message, user_message, self.ERROR_CODE, context)
        self.index = index
        self.original_error = original_error


class UnsupportedShapeError(DtoKitError):
    """Data has a shape the merge cannot handle, e.g. a list of mappings."""

    ERROR_CODE = "DTK_2000"

    def __init__(self, key: str, message: str) -> None:
        user_message = "Unsupported data shape"
        context = {"key": key}
        recovery_suggestion = "Use lists of scalar values only"
        super().__init__(message, user_message, self.ERROR_CODE, context, recovery_suggestion)
        self.key = key


class ConfigurationError(DtoKitError):
    """Configuration loading errors."""

    ERROR_CODE = "DTK_4000"


class MissingConfigFileError(ConfigurationError):
    """The requested configuration file does not exist."""

    ERROR_CODE = "DTK_4001"

    def __init__(self, path: Path | str) -> None:
        message = f"Missing config file: {path}"
        user_message = "Configuration file not found"
        context = {"path": str(path)}
        recovery_suggestion = f"Create {path} or point the loader at another base directory"
        super().__init__(message, user_message, self.ERROR_CODE, context, recovery_suggestion)
        self.path = Path(path)


class PlaceholderError(ConfigurationError):
    """A ``${NAME}`` placeholder in an env mapping cannot be resolved."""

    ERROR_CODE = "DTK_4002"

    SELF_REFERENCE = "self_reference"
    MISSING_KEY = "missing_key"
    CIRCULAR_REFERENCE = "circular_reference"

    def __init__(self, key: str, placeholder: str, reason: str) -> None:
        if reason == self.SELF_REFERENCE:
            message = f"Env variable {key} references itself"
        elif reason == self.MISSING_KEY:
            message = f"Env variable {key} references undefined variable {placeholder}"
        else:
            message = f"Env variable {key} has a circular reference through {placeholder}"
        user_message = "Environment variable interpolation failed"
        context = {"key": key, "placeholder": placeholder, "reason": reason}
        super().__init__(message, user_message, self.ERROR_CODE, context)
        self.key = key
        self.placeholder = placeholder
        self.reason = reason


class ClientInputError(DtoKitError):
    """Caller supplied an invalid request parameter (HTTP 400)."""

    ERROR_CATEGORY = "CLIENT_ERROR"
    ERROR_CODE = "DTK_5000"
    status_code = 400

    def __init__(self, field: str, message: str) -> None:
        context = {"field": field}
        recovery_suggestion = f"Provide a valid value for {field}"
        super().__init__(message, message, self.ERROR_CODE, context, recovery_suggestion)
        self.field = field


class FrozenError(TypeError):
    """Raised when mutating a deep-frozen container or object."""
