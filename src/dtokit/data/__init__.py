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

"""Plain-data merging, freezing and DTO conversion."""

from .array_utils import difference, unique
from .conditions import (
    is_falsy,
    is_not_null,
    is_not_undefined,
    is_null,
    is_truthy,
    is_undefined,
)
from .freeze import FrozenDict, FrozenList, deep_freeze, is_frozen
from .operations import (
    FieldError,
    PlainObject,
    ValidationResult,
    default_data,
    from_dto,
    merge_data,
    merge_default,
    to_dto,
    to_dto_list,
    validate_dto,
)
from .transforms import (
    UNDEFINED,
    Transform,
    copy_from,
    empty_string_to_null,
    empty_string_to_undefined,
    json_string_to_object,
    null_to_undefined,
    string_to_array,
    string_to_boolean,
    string_to_date,
    string_to_integer,
    string_to_null,
    string_to_number,
    undefined_to_null,
)

__all__ = [
    "UNDEFINED",
    "FieldError",
    "FrozenDict",
    "FrozenList",
    "PlainObject",
    "Transform",
    "ValidationResult",
    "copy_from",
    "deep_freeze",
    "default_data",
    "difference",
    "empty_string_to_null",
    "empty_string_to_undefined",
    "from_dto",
    "is_falsy",
    "is_frozen",
    "is_not_null",
    "is_not_undefined",
    "is_null",
    "is_truthy",
    "is_undefined",
    "json_string_to_object",
    "merge_data",
    "merge_default",
    "null_to_undefined",
    "string_to_array",
    "string_to_boolean",
    "string_to_date",
    "string_to_integer",
    "string_to_null",
    "string_to_number",
    "to_dto",
    "to_dto_list",
    "undefined_to_null",
    "unique",
    "validate_dto",
]
