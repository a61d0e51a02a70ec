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

"""dtokit: config loading and DTO helpers for web backends.

- Load JSON, YAML and ``.env`` configuration into validated, frozen
  pydantic models
- Merge partial data onto model defaults
- Convert between plain data and DTOs with declarative field coercions
- Validate raw request parameters as integer or string IDs
"""

import logging

from .configs import (
    build_config,
    load_env_config,
    load_json_config,
    load_yaml_config,
    read_env,
    replace_env_variable,
)
from .data import (
    UNDEFINED,
    FieldError,
    FrozenDict,
    FrozenList,
    Transform,
    ValidationResult,
    copy_from,
    deep_freeze,
    default_data,
    difference,
    empty_string_to_null,
    empty_string_to_undefined,
    from_dto,
    is_falsy,
    is_frozen,
    is_not_null,
    is_not_undefined,
    is_null,
    is_truthy,
    is_undefined,
    json_string_to_object,
    merge_data,
    merge_default,
    null_to_undefined,
    string_to_array,
    string_to_boolean,
    string_to_date,
    string_to_integer,
    string_to_null,
    string_to_number,
    to_dto,
    to_dto_list,
    undefined_to_null,
    unique,
    validate_dto,
)
from .error_handling import ErrorHandler, create_error_response
from .exceptions import (
    ClientInputError,
    ConfigurationError,
    DtoConversionError,
    DtoKitError,
    DtoValidationError,
    FrozenError,
    MalformedInputError,
    MissingConfigFileError,
    PlaceholderError,
    UnsupportedShapeError,
)
from .params import IntIdParam, StringIdParam

__all__ = [
    "UNDEFINED",
    "ClientInputError",
    "ConfigurationError",
    "DtoConversionError",
    "DtoKitError",
    "DtoValidationError",
    "ErrorHandler",
    "FieldError",
    "FrozenDict",
    "FrozenError",
    "FrozenList",
    "IntIdParam",
    "MalformedInputError",
    "MissingConfigFileError",
    "PlaceholderError",
    "StringIdParam",
    "Transform",
    "UnsupportedShapeError",
    "ValidationResult",
    "build_config",
    "copy_from",
    "create_error_response",
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
    "load_env_config",
    "load_json_config",
    "load_yaml_config",
    "merge_data",
    "merge_default",
    "null_to_undefined",
    "read_env",
    "replace_env_variable",
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

__version__ = "0.1.0"

# Applications configure handlers; the library only emits records
logging.getLogger(__name__).addHandler(logging.NullHandler())
