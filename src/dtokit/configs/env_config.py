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

"""Load ``.env`` files and the process environment into config models.

Values may reference other keys of the same file with ``${NAME}``
placeholders, resolved by :func:`replace_env_variable` before the values
reach the model. Env values are always strings, so model fields usually
pair with coercers such as ``string_to_boolean`` or ``string_to_integer``.

Example:
    >>> class EnvConfig(BaseModel):
    ...     DB_HOST: str = "localhost"
    ...     DB_PORT: Annotated[int, Transform(string_to_integer)] = 5432
    >>> config = load_env_config(EnvConfig)
"""

from collections.abc import MutableMapping
import logging
import os
from pathlib import Path
import re
from typing import TypeVar

from dotenv import dotenv_values
from pydantic import BaseModel

from ..constants import default_dotenv_path
from ..data.operations import ValidateOption
from ..exceptions import PlaceholderError
from .loader import build_config

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}]*)\}")


def replace_env_variable(env: MutableMapping[str, str | None]) -> dict[str, str]:
    """Resolve ``${NAME}`` placeholders against the other keys of ``env``.

    Resolved values are written back into ``env`` as they are found, so
    later keys see earlier substitutions. Keys whose value is ``None`` are
    left out of the result.

    Args:
        env: Flat key to raw value mapping, modified in place

    Returns:
        New mapping with every placeholder substituted

    Raises:
        PlaceholderError: On a self reference, a reference to a missing key
            or a reference cycle between keys
    """
    result: dict[str, str] = {}
    for key in list(env):
        value = _resolve(env, key, ())
        if value is not None:
            result[key] = value
    return result


def _resolve(env: MutableMapping[str, str | None], key: str, chain: tuple[str, ...]) -> str | None:
    value = env[key]
    if value is None:
        return None
    chain = (*chain, key)
    while (match := PLACEHOLDER_PATTERN.search(value)) is not None:
        name = match.group(1)
        if name == key:
            raise PlaceholderError(key, name, PlaceholderError.SELF_REFERENCE)
        if env.get(name) is None:
            raise PlaceholderError(key, name, PlaceholderError.MISSING_KEY)
        if name in chain:
            raise PlaceholderError(key, name, PlaceholderError.CIRCULAR_REFERENCE)
        replacement = _resolve(env, name, chain)
        value = value.replace(match.group(0), replacement or "", 1)
        env[key] = value
    return value


def read_env(dotenv_path: str | Path | None = None, *, interpolate: bool = True) -> dict[str, str]:
    """Parse a ``.env`` file into a plain string mapping.

    Args:
        dotenv_path: File to read (default: ``DTOKIT_DOTENV_PATH`` or ``<cwd>/.env``)
        interpolate: Resolve ``${NAME}`` placeholders (default: True)

    Returns:
        Parsed values; empty if the file does not exist
    """
    path = Path(dotenv_path) if dotenv_path is not None else default_dotenv_path()
    if not path.is_file():
        logger.warning("Env file %s not found, no values loaded from it", path)
        return {}

    values = dotenv_values(path, interpolate=False, encoding="utf-8")
    if interpolate:
        return replace_env_variable(values)
    return {key: value for key, value in values.items() if value is not None}


def load_env_config(
    model: type[ModelT],
    *,
    dotenv_path: str | Path | None = None,
    interpolate: bool = True,
    populate_environ: bool = True,
    override: bool = False,
    from_environ: bool = False,
    validate: ValidateOption = True,
    freeze: bool = True,
) -> ModelT:
    """Load env configuration, validate, convert and freeze it.

    Args:
        model: Target config model, fields named after the env keys
        dotenv_path: ``.env`` file to read (see :func:`read_env`)
        interpolate: Resolve ``${NAME}`` placeholders in the file
        populate_environ: Export the file values into ``os.environ`` once the
            config was built successfully
        override: Let file values replace variables already in ``os.environ``
        from_environ: Build from the whole process environment, together
            with the file values being exported, instead of the file values alone
        validate: ``False`` to skip constraint checks, or ``model_validate`` options
        freeze: Deep-freeze the result (default: True)

    Returns:
        Config instance

    Raises:
        PlaceholderError: If interpolation fails
        DtoValidationError: If validation fails
    """
    values = read_env(dotenv_path, interpolate=interpolate)

    exports: dict[str, str] = {}
    if populate_environ:
        exports = {
            key: value for key, value in values.items() if override or key not in os.environ
        }

    raw = {**os.environ, **exports} if from_environ else values
    config = build_config(model, raw, validate=validate, freeze=freeze)

    # nothing is exported unless the config was built
    os.environ.update(exports)
    if populate_environ:
        logger.debug("Exported %d of %d env file value(s)", len(exports), len(values))
    logger.info("Loaded %s from environment (%d value(s))", model.__name__, len(raw))
    return config
