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

"""Library-wide constants and environment-driven defaults.

Environment Variables:
- DTOKIT_CONFIG_DIR: base directory for JSON/YAML config files
  (default: ``<cwd>/config``)
- DTOKIT_DOTENV_PATH: path of the ``.env`` file read by the env loader
  (default: ``<cwd>/.env``)

Both are resolved at call time, not at import time.
"""

import os
from pathlib import Path

CONFIG_DIR_ENV_VAR = "DTOKIT_CONFIG_DIR"
DOTENV_PATH_ENV_VAR = "DTOKIT_DOTENV_PATH"

DEFAULT_CONFIG_DIR_NAME = "config"
DEFAULT_DOTENV_NAME = ".env"

# Request parameter limits
MAX_INT32 = 2147483647
INT_ID_MAX_LENGTH = 10
DEFAULT_PARAM_NAME = "id"
DEFAULT_STRING_ID_MAX_LENGTH = 255


def default_config_dir() -> Path:
    """Base directory for config files."""
    configured = os.getenv(CONFIG_DIR_ENV_VAR)
    if configured:
        return Path(configured).resolve()
    return Path.cwd() / DEFAULT_CONFIG_DIR_NAME


def default_dotenv_path() -> Path:
    """Location of the ``.env`` file."""
    configured = os.getenv(DOTENV_PATH_ENV_VAR)
    if configured:
        return Path(configured).resolve()
    return Path.cwd() / DEFAULT_DOTENV_NAME
