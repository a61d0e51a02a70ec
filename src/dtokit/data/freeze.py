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

"""Recursive immutability for configuration object graphs.

:func:`deep_freeze` walks a value depth-first and returns its frozen form:

- ``dict``/``Mapping`` -> :class:`FrozenDict`
- ``list`` -> :class:`FrozenList`, ``tuple`` -> ``tuple``, ``set`` -> ``frozenset``
- pydantic models -> frozen in place (same object, class swapped for a
  ``frozen=True`` subclass)
- other objects with a ``__dict__`` -> frozen in place
- scalars are returned unchanged

Containers are registered before their children are visited, so reference
cycles resolve to the frozen container instead of recursing forever.
"""

from collections.abc import Mapping
from enum import Enum
import logging
from typing import Any, NoReturn, TypeVar

from pydantic import BaseModel, ConfigDict

from ..exceptions import FrozenError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_frozen_model_classes: dict[type, type] = {}
_frozen_object_classes: dict[type, type] = {}
# frozen class -> class it was derived from
_origin_classes: dict[type, type] = {}


def _raise_frozen(self: Any, *args: Any, **kwargs: Any) -> NoReturn:
    raise FrozenError(f"{type(self).__name__} is frozen and cannot be modified")


class FrozenDict(dict):
    """A ``dict`` whose contents cannot change after :func:`deep_freeze`."""

    __slots__ = ()

    __setitem__ = _raise_frozen
    __delitem__ = _raise_frozen
    __ior__ = _raise_frozen
    clear = _raise_frozen
    pop = _raise_frozen
    popitem = _raise_frozen
    setdefault = _raise_frozen
    update = _raise_frozen

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(frozenset(self.items()))

    def __repr__(self) -> str:
        return f"FrozenDict({dict.__repr__(self)})"

    def __reduce__(self) -> tuple[Any, ...]:
        return FrozenDict, (dict(self),)

    def __copy__(self) -> dict:
        return dict(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> dict:
        from copy import deepcopy

        return {deepcopy(k, memo): deepcopy(v, memo) for k, v in self.items()}


class FrozenList(list):
    """A ``list`` whose contents cannot change after :func:`deep_freeze`."""

    __slots__ = ()

    __setitem__ = _raise_frozen
    __delitem__ = _raise_frozen
    __iadd__ = _raise_frozen
    __imul__ = _raise_frozen
    append = _raise_frozen
    clear = _raise_frozen
    extend = _raise_frozen
    insert = _raise_frozen
    pop = _raise_frozen
    remove = _raise_frozen
    reverse = _raise_frozen
    sort = _raise_frozen

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"FrozenList({list.__repr__(self)})"

    def __reduce__(self) -> tuple[Any, ...]:
        return FrozenList, (list(self),)

    def __copy__(self) -> list:
        return list(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> list:
        from copy import deepcopy

        return [deepcopy(item, memo) for item in self]


def deep_freeze(obj: T) -> T:
    """Make ``obj`` and everything reachable from it immutable.

    Args:
        obj: Value to freeze

    Returns:
        The frozen value. Models and plain objects are frozen in place and
        returned as the same reference; containers are returned as frozen
        copies.
    """
    return _freeze(obj, {})


def is_frozen(obj: Any) -> bool:
    """Check whether ``obj`` was produced or frozen by :func:`deep_freeze`."""
    if isinstance(obj, FrozenDict | FrozenList | tuple | frozenset):
        return True
    return type(obj) in _origin_classes


def _freeze(obj: Any, memo: dict[int, Any]) -> Any:
    if obj is None or isinstance(obj, str | bytes | int | float | complex):
        return obj

    obj_id = id(obj)
    if obj_id in memo:
        return memo[obj_id]

    if isinstance(obj, FrozenDict | FrozenList | frozenset):
        memo[obj_id] = obj
        return obj

    if isinstance(obj, BaseModel):
        return _freeze_model(obj, memo)

    if isinstance(obj, Mapping):
        frozen_dict = FrozenDict()
        memo[obj_id] = frozen_dict
        for key, value in obj.items():
            dict.__setitem__(frozen_dict, key, _freeze(value, memo))
        return frozen_dict

    if isinstance(obj, list):
        frozen_list = FrozenList()
        memo[obj_id] = frozen_list
        list.extend(frozen_list, (_freeze(item, memo) for item in obj))
        return frozen_list

    if isinstance(obj, tuple):
        # a tuple cannot reference itself, so no placeholder is needed
        frozen_tuple = tuple(_freeze(item, memo) for item in obj)
        if hasattr(obj, "_fields"):
            frozen_tuple = type(obj)(*frozen_tuple)
        memo[obj_id] = frozen_tuple
        return frozen_tuple

    if isinstance(obj, set | frozenset):
        frozen_set = frozenset(_freeze(item, memo) for item in obj)
        memo[obj_id] = frozen_set
        return frozen_set

    if isinstance(obj, Enum | type) or callable(obj):
        return obj

    if hasattr(obj, "__dict__"):
        return _freeze_object(obj, memo)

    return obj


def _freeze_model(model: BaseModel, memo: dict[int, Any]) -> BaseModel:
    memo[id(model)] = model
    values = model.__dict__
    for name in list(values):
        values[name] = _freeze(values[name], memo)
    if model.__pydantic_extra__:
        for name in list(model.__pydantic_extra__):
            model.__pydantic_extra__[name] = _freeze(model.__pydantic_extra__[name], memo)
    if not model.model_config.get("frozen"):
        object.__setattr__(model, "__class__", _frozen_model_class(type(model)))
    return model


def _frozen_model_class(cls: type[BaseModel]) -> type[BaseModel]:
    frozen_cls = _frozen_model_classes.get(cls)
    if frozen_cls is None:
        logger.debug("Creating frozen variant of %s", cls.__qualname__)
        namespace = {
            "__module__": cls.__module__,
            "__qualname__": cls.__qualname__,
            "__doc__": cls.__doc__,
            "model_config": ConfigDict(frozen=True),
            "__eq__": _frozen_model_eq,
            "__reduce__": _reduce_frozen_model,
        }
        frozen_cls = type(cls)(cls.__name__, (cls,), namespace)
        _frozen_model_classes[cls] = frozen_cls
        _origin_classes[frozen_cls] = cls
    return frozen_cls


def _origin_class(cls: type) -> type:
    return _origin_classes.get(cls, cls)


def _frozen_model_eq(self: BaseModel, other: Any) -> bool:
    # compares like BaseModel.__eq__, treating the frozen class as its origin
    if not isinstance(other, BaseModel):
        return NotImplemented
    if _origin_class(type(self)) is not _origin_class(type(other)):
        return False
    return (
        self.__dict__ == other.__dict__
        and self.__pydantic_private__ == other.__pydantic_private__
        and self.__pydantic_extra__ == other.__pydantic_extra__
    )


def _reduce_frozen_model(self: BaseModel) -> tuple[Any, ...]:
    return _restore_frozen_model, (_origin_class(type(self)), self.__getstate__())


def _restore_frozen_model(cls: type[BaseModel], state: dict[str, Any]) -> BaseModel:
    """Unpickle a frozen model as its origin class, then freeze it again."""
    model = cls.__new__(cls)
    model.__setstate__(state)
    return deep_freeze(model)


def _freeze_object(obj: Any, memo: dict[int, Any]) -> Any:
    memo[id(obj)] = obj
    values = vars(obj)
    for name in list(values):
        values[name] = _freeze(values[name], memo)
    cls = type(obj)
    if cls not in _origin_classes:
        try:
            object.__setattr__(obj, "__class__", _frozen_object_class(cls))
        except TypeError:
            logger.debug("Cannot freeze attributes of %s instance", cls.__qualname__)
    return obj


def _frozen_object_class(cls: type) -> type:
    frozen_cls = _frozen_object_classes.get(cls)
    if frozen_cls is None:
        namespace = {
            "__module__": cls.__module__,
            "__qualname__": cls.__qualname__,
            "__doc__": cls.__doc__,
            "__setattr__": _raise_frozen,
            "__delattr__": _raise_frozen,
            "__reduce__": _reduce_frozen_object,
            "__slots__": (),
        }
        frozen_cls = type(cls.__name__, (cls,), namespace)
        _frozen_object_classes[cls] = frozen_cls
        _origin_classes[frozen_cls] = cls
    return frozen_cls


def _reduce_frozen_object(self: Any) -> tuple[Any, ...]:
    return _restore_frozen_object, (_origin_class(type(self)), dict(vars(self)))


def _restore_frozen_object(cls: type, state: dict[str, Any]) -> Any:
    obj = cls.__new__(cls)
    vars(obj).update(state)
    return deep_freeze(obj)
