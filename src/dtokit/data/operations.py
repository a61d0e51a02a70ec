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

"""Merging plain data and converting it to and from pydantic DTOs.

Key Functions:
    - merge_default: overlay partial data on a model's defaults
    - merge_data: generic recursive merge of two mappings
    - default_data: plain mapping of a model's field defaults
    - to_dto / to_dto_list: plain data -> model instance(s)
    - from_dto: model instance -> plain data
    - validate_dto: run model constraints and collect every violation

Fields annotated with ``Annotated[T, Transform(fn)]`` have ``fn`` applied to
their raw value before the model is built (see :mod:`dtokit.data.transforms`).
Keys not declared on the model are dropped, nested models included.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import logging
import types
from typing import Any, NamedTuple, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo

from ..exceptions import (
    DtoConversionError,
    DtoKitError,
    DtoValidationError,
    MalformedInputError,
    UnsupportedShapeError,
)
from .transforms import UNDEFINED, Transform

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

PlainObject = dict[str, Any]
ValidateOption = bool | Mapping[str, Any]

DEFAULT_VALIDATE_OPTIONS: dict[str, Any] = {"strict": False}

_CONTAINER_TYPES = (Mapping, list, tuple, set, frozenset, BaseModel)


def merge_data(data1: Mapping[str, Any], data2: Mapping[str, Any]) -> PlainObject:
    """Recursively merge two mappings, values from ``data2`` winning.

    The result is a new mapping; nested mappings are merged into new dicts.
    Sequences are not merged, the ``data2`` value replaces the ``data1`` one.
    """
    output: PlainObject = {}
    for key in dict.fromkeys([*data1, *data2]):
        value1 = data1.get(key, UNDEFINED)
        value2 = data2.get(key, UNDEFINED)
        if isinstance(value1, Mapping) and isinstance(value2, Mapping):
            output[key] = merge_data(value1, value2)
        elif value2 is not UNDEFINED:
            output[key] = value2
        else:
            output[key] = value1
    return output


def merge_default(data: Mapping[str, Any], default_data: Mapping[str, Any]) -> PlainObject:
    """Overlay partial ``data`` on ``default_data``.

    ``default_data`` decides the shape: mapping defaults are merged
    recursively, sequence defaults are replaced by a copy of the data
    sequence (or copied themselves when data has none), scalars are taken
    from ``data`` when present. Lists of containers are not supported.

    Args:
        data: Partial data, e.g. parsed from a config file
        default_data: Fully populated defaults

    Returns:
        New merged mapping. Neither input is modified.

    Raises:
        UnsupportedShapeError: If either side holds a list of containers
    """
    result: PlainObject = {}
    for key in dict.fromkeys([*default_data, *data]):
        value = data.get(key, UNDEFINED)
        default_value = default_data.get(key, UNDEFINED)

        if isinstance(default_value, Mapping):
            result[key] = merge_default(value if isinstance(value, Mapping) else {}, default_value)
            continue

        if isinstance(default_value, list | tuple):
            if isinstance(value, list | tuple):
                _check_scalar_sequence(key, value, f"Array of object is not supported in key {key}")
                result[key] = list(value)
            else:
                _check_scalar_sequence(
                    key,
                    default_value,
                    f"Invalid default data: Array of object is not supported in key {key}",
                )
                result[key] = list(default_value)
            continue

        result[key] = default_value if value is UNDEFINED else value
    return result


def _check_scalar_sequence(key: str, sequence: Iterable[Any], message: str) -> None:
    for element in sequence:
        if isinstance(element, _CONTAINER_TYPES):
            raise UnsupportedShapeError(key, message)


def default_data(model: type[BaseModel]) -> PlainObject:
    """Build the plain mapping of a model's defaults, keyed by alias.

    Required fields are left out. Nested model defaults are dumped to plain
    mappings so they can take part in :func:`merge_default`.
    """
    data: PlainObject = {}
    for name, field_info in model.model_fields.items():
        if field_info.is_required():
            continue
        value = field_info.get_default(call_default_factory=True)
        if isinstance(value, BaseModel):
            value = value.model_dump(by_alias=True)
        data[field_info.alias or name] = value
    return data


class FieldError(NamedTuple):
    """One violated constraint."""

    field: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating plain data against a model.

    Holds either the built instance or every violation found, never both.
    """

    model_name: str
    instance: BaseModel | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> BaseModel:
        """Return the instance, or raise one error listing every violation."""
        if self.errors or self.instance is None:
            raise DtoValidationError(self.model_name, list(self.errors))
        return self.instance


def validate_dto(
    model: type[BaseModel],
    plain: Mapping[str, Any],
    **options: Any,
) -> ValidationResult:
    """Validate ``plain`` against ``model`` without raising.

    Args:
        model: Target model class
        plain: Prepared plain data
        **options: Keyword arguments for ``model_validate`` (``strict``, ``context``)

    Returns:
        ValidationResult with the instance or the ordered field errors
    """
    try:
        instance = model.model_validate(plain, **options)
    except PydanticValidationError as e:
        errors = [
            FieldError(_format_location(error["loc"], model), error["msg"])
            for error in e.errors()
        ]
        return ValidationResult(model.__name__, errors=errors)
    return ValidationResult(model.__name__, instance=instance)


def _format_location(loc: tuple[int | str, ...], model: type[BaseModel]) -> str:
    if not loc:
        return model.__name__
    return ".".join(str(part) for part in loc)


def to_dto(
    model: type[ModelT],
    plain: Mapping[str, Any],
    validate: ValidateOption = False,
) -> ModelT:
    """Convert plain data into a model instance.

    Undeclared keys are dropped and ``Transform`` coercions applied. With
    ``validate`` set (``True`` or a mapping of ``model_validate`` options)
    the model constraints are checked and all violations reported together;
    otherwise the instance is assembled without validation.

    Raises:
        MalformedInputError: If ``plain`` is not a mapping or a coercion fails
        DtoValidationError: If validation is requested and fails
    """
    if not isinstance(plain, Mapping):
        raise MalformedInputError(
            model.__name__,
            f"DTO {model.__name__} expects a mapping but got {type(plain).__name__}",
            plain,
        )
    prepared = _prepare(model, plain)
    if not validate:
        return _construct(model, prepared)

    result = validate_dto(model, prepared, **_validate_options(validate))
    if not result.ok:
        logger.warning(
            "Validation of %s failed with %d error(s)", model.__name__, len(result.errors)
        )
    return result.raise_for_errors()  # type: ignore[return-value]


def from_dto(
    dto: BaseModel,
    validate: ValidateOption = False,
    *,
    by_alias: bool = True,
    exclude_none: bool = False,
) -> PlainObject:
    """Dump a model instance to plain data, optionally validating it first."""
    if validate:
        model = type(dto)
        result = validate_dto(model, dto.model_dump(by_alias=True), **_validate_options(validate))
        result.raise_for_errors()
    return dto.model_dump(by_alias=by_alias, exclude_none=exclude_none)


def to_dto_list(
    model: type[ModelT],
    items: Iterable[Mapping[str, Any]],
    validate: ValidateOption = False,
) -> list[ModelT]:
    """Convert each plain item with :func:`to_dto`.

    Raises:
        DtoConversionError: Naming the index of the first item that failed
    """
    dtos: list[ModelT] = []
    for index, item in enumerate(items):
        try:
            dtos.append(to_dto(model, item, validate))
        except DtoKitError as e:
            raise DtoConversionError(model.__name__, index, e) from e
    return dtos


def _validate_options(validate: ValidateOption) -> dict[str, Any]:
    if validate is True:
        return dict(DEFAULT_VALIDATE_OPTIONS)
    return merge_data(DEFAULT_VALIDATE_OPTIONS, validate)  # type: ignore[arg-type]


def _prepare(model: type[BaseModel], plain: Mapping[str, Any]) -> PlainObject:
    prepared: PlainObject = {}
    for name, field_info in model.model_fields.items():
        key = field_info.alias or name
        value = plain.get(key, UNDEFINED)
        for transform in _transforms(field_info):
            value = transform(value, key, plain)
        if value is UNDEFINED:
            continue
        nested = _nested_model(field_info)
        if nested is not None and isinstance(value, Mapping):
            value = _prepare(nested, value)
        prepared[key] = value
    return prepared


def _construct(model: type[ModelT], prepared: Mapping[str, Any]) -> ModelT:
    values: PlainObject = {}
    for name, field_info in model.model_fields.items():
        key = field_info.alias or name
        if key not in prepared:
            continue
        value = prepared[key]
        nested = _nested_model(field_info)
        if nested is not None and isinstance(value, Mapping):
            value = _construct(nested, value)
        values[name] = value
    return model.model_construct(**values)


def _transforms(field_info: FieldInfo) -> list[Transform]:
    return [item for item in field_info.metadata if isinstance(item, Transform)]


def _nested_model(field_info: FieldInfo) -> type[BaseModel] | None:
    annotation = field_info.annotation
    if get_origin(annotation) in (Union, types.UnionType):
        models = [arg for arg in get_args(annotation) if _is_model(arg)]
        return models[0] if len(models) == 1 else None
    return annotation if _is_model(annotation) else None


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)
