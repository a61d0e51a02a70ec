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

"""Shared config pipeline: defaults, merge, convert, validate, freeze.

Every loader reads raw key-value data from its source and hands it to
:func:`build_config`, which:

1. builds the model's default data
2. overlays the raw data with :func:`merge_default`
3. converts the result with :func:`to_dto` (validating unless disabled)
4. deep-freezes the instance unless disabled

Config is meant to be loaded once at startup and passed around as a
constant; the frozen instance enforces that.
"""

from collections.abc import Mapping
import logging
from typing import Any, TypeVar

from pydantic import BaseModel

from ..data.freeze import deep_freeze
from ..data.operations import ValidateOption, default_data, merge_default, to_dto

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_config(
    model: type[ModelT],
    raw: Mapping[str, Any],
    *,
    validate: ValidateOption = True,
    freeze: bool = True,
) -> ModelT:
    """Turn raw config data into a (frozen) model instance.

    Args:
        model: Target config model
        raw: Raw data from a file or the environment
        validate: ``False`` to skip constraint checks, or ``model_validate`` options
        freeze: Deep-freeze the result (default: True)

    Returns:
        Config instance

    Raises:
        UnsupportedShapeError: If the data holds a list of containers
        MalformedInputError: If a field coercion fails
        DtoValidationError: If validation fails
    """
    merged = merge_default(raw, default_data(model))
    config = to_dto(model, merged, validate)
    if freeze:
        deep_freeze(config)
    logger.debug("Built %s from %d raw key(s)", model.__name__, len(raw))
    return config
