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

"""Field-level value coercions applied during DTO conversion.

Each coercer has the signature ``fn(value, key, obj)`` where ``value`` is the
raw field value, ``key`` the field key and ``obj`` the whole plain mapping
being converted. Attach coercers to model fields with :class:`Transform`:

    >>> class ServerConfig(BaseModel):
    ...     debug: Annotated[bool, Transform(string_to_boolean)] = False
    ...     ports: Annotated[
    ...         list[int] | None, Transform(string_to_array(element_type="number"))
    ...     ] = None

Fields parsed from a delimited string default to ``None`` rather than a list:
when the default is a list, :func:`merge_default` keeps it unless the data
value is itself a sequence, so a raw env string would never reach the coercer.

Absent keys reach a coercer as :data:`UNDEFINED`, and a coercer returning
:data:`UNDEFINED` removes the key so the model default applies. Non-string
input passes through the string coercers unchanged.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
import json
import math
import re
from typing import Any, Literal

from ..exceptions import MalformedInputError

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


class _Undefined:
    """Marker for a value that is absent, as opposed to ``None``."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()

TransformFn = Callable[[Any, str, Mapping[str, Any]], Any]


@dataclass(frozen=True, slots=True)
class Transform:
    """``Annotated`` metadata attaching a coercer to a model field."""

    fn: TransformFn

    def __call__(self, value: Any, key: str, obj: Mapping[str, Any]) -> Any:
        return self.fn(value, key, obj)


def string_to_boolean(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    """Convert ``'true'``/``'false'`` (trimmed, case-insensitive) to a bool."""
    if not isinstance(value, str):
        return value
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise MalformedInputError(
        key, f"Value of {key} must be 'true' or 'false' but got {normalized}", value
    )


def string_to_integer(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    """Convert a decimal digit string to an int."""
    if not isinstance(value, str):
        return value
    text = value.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise MalformedInputError(key, f"Value of {key} must be an integer but got {value}", value)
    return int(text)


def string_to_number(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    """Convert a numeric string to an int (integer literals) or a float."""
    if not isinstance(value, str):
        return value
    return _parse_number(value, key, f"Value of {key} must be a number but got {value}")


def string_to_date(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    """Convert an ISO-8601 date or datetime string to a ``datetime``."""
    if not isinstance(value, str):
        return value
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise MalformedInputError(
            key, f"Value of {key} must be a valid date string but got {value}", value
        ) from None


def string_to_null(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    """Convert the literal ``'null'`` to ``None``."""
    if value == "null":
        return None
    return value


def null_to_undefined(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    if value is None:
        return UNDEFINED
    return value


def undefined_to_null(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    if value is UNDEFINED:
        return None
    return value


def empty_string_to_null(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    if value == "":
        return None
    return value


def empty_string_to_undefined(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    if value == "":
        return UNDEFINED
    return value


def json_string_to_object(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
    """Parse a JSON document held in a string."""
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise MalformedInputError(key, f"Value of {key} must be valid JSON: {e}", value) from e


def string_to_array(
    delimiter: str = ",",
    element_type: Literal["string", "number"] = "string",
) -> TransformFn:
    """Build a coercer splitting a delimited string into a list.

    Args:
        delimiter: Separator between elements
        element_type: ``"string"`` keeps trimmed substrings, ``"number"``
            converts each element like :func:`string_to_number`

    Returns:
        Coercer usable with :class:`Transform`
    """
    if element_type not in ("string", "number"):
        raise ValueError(f"Unknown element_type: {element_type}")

    def transform(value: Any, key: str, obj: Mapping[str, Any] | None = None) -> Any:
        if not isinstance(value, str):
            return value
        items = [item.strip() for item in value.split(delimiter)]
        if element_type == "string":
            return items
        return [
            _parse_number(item, key, f"Value of {key}[{index}] must be a number but got '{item}'")
            for index, item in enumerate(items)
        ]

    return transform


def copy_from(source: str, overwrite: bool = True, copy_undefined: bool = False) -> TransformFn:
    """Build a coercer copying the value of another field.

    Args:
        source: Key of the field to copy from
        overwrite: When False, only copy if the current value is undefined
        copy_undefined: When False, an undefined source leaves the value alone

    Returns:
        Coercer usable with :class:`Transform`
    """

    def transform(value: Any, key: str, obj: Mapping[str, Any]) -> Any:
        if not overwrite and value is not UNDEFINED:
            return value
        new_value = obj.get(source, UNDEFINED)
        if not copy_undefined and new_value is UNDEFINED:
            return value
        return new_value

    return transform


def _parse_number(text: str, key: str, message: str) -> int | float:
    stripped = text.strip()
    if _INTEGER_PATTERN.fullmatch(stripped):
        return int(stripped)
    try:
        number = float(stripped)
    except ValueError:
        raise MalformedInputError(key, message, text) from None
    if math.isnan(number):
        raise MalformedInputError(key, message, text)
    return number
