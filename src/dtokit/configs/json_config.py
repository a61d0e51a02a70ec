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

"""Load JSON or YAML config files into validated, frozen models.

Files are looked up relative to a base directory, ``<cwd>/config`` unless
``DTOKIT_CONFIG_DIR`` or the ``base_dir`` argument says otherwise. The file
must hold a single object whose shape is a subset of the target model; any
key it leaves out keeps the model default.

Example:
    >>> class AppConfig(BaseModel):
    ...     port: int = 8080
    ...     debug: bool = False
    >>> config = load_json_config(AppConfig, "app.json")
"""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
import yaml

from ..constants import default_config_dir
from ..data.operations import ValidateOption
from ..exceptions import MalformedInputError, MissingConfigFileError
from .loader import build_config

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_json_config(
    model: type[ModelT],
    relative_file_path: str | Path,
    *,
    base_dir: str | Path | None = None,
    validate: ValidateOption = True,
    freeze: bool = True,
) -> ModelT:
    """Load a JSON config file, validate, convert and freeze it.

    Args:
        model: Target config model
        relative_file_path: File path relative to ``base_dir``
        base_dir: Config root directory (created if absent)
        validate: ``False`` to skip constraint checks, or ``model_validate`` options
        freeze: Deep-freeze the result (default: True)

    Returns:
        Config instance

    Raises:
        MissingConfigFileError: If the file does not exist
        MalformedInputError: If the file is not a JSON object
        DtoValidationError: If validation fails
    """
    file_path = _resolve_config_path(relative_file_path, base_dir)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise MalformedInputError(str(file_path), f"Invalid JSON in {file_path}: {e}") from e
    config = build_config(model, _require_mapping(raw, file_path), validate=validate, freeze=freeze)
    logger.info("Loaded configuration from %s", file_path)
    return config


def load_yaml_config(
    model: type[ModelT],
    relative_file_path: str | Path,
    *,
    base_dir: str | Path | None = None,
    validate: ValidateOption = True,
    freeze: bool = True,
) -> ModelT:
    """Load a YAML config file; same contract as :func:`load_json_config`.

    An empty document counts as an empty mapping.
    """
    file_path = _resolve_config_path(relative_file_path, base_dir)
    try:
        raw = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise MalformedInputError(str(file_path), f"Invalid YAML in {file_path}: {e}") from e
    if raw is None:
        raw = {}
    config = build_config(model, _require_mapping(raw, file_path), validate=validate, freeze=freeze)
    logger.info("Loaded configuration from %s", file_path)
    return config


def _resolve_config_path(relative_file_path: str | Path, base_dir: str | Path | None) -> Path:
    root = Path(base_dir) if base_dir is not None else default_config_dir()
    root.mkdir(parents=True, exist_ok=True)
    file_path = (root / relative_file_path).resolve()
    if not file_path.is_file():
        raise MissingConfigFileError(file_path)
    return file_path


def _require_mapping(raw: Any, file_path: Path) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise MalformedInputError(
            str(file_path),
            f"Top-level value of {file_path} must be an object, got: {type(raw).__name__}",
            raw,
        )
    return raw
