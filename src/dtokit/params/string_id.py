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

"""String ID request parameter validation."""

from ..constants import DEFAULT_PARAM_NAME, DEFAULT_STRING_ID_MAX_LENGTH
from ..exceptions import ClientInputError


class StringIdParam:
    """Validate a raw parameter as a non-empty, length-bounded string ID."""

    def __init__(
        self,
        name: str = DEFAULT_PARAM_NAME,
        max_length: int = DEFAULT_STRING_ID_MAX_LENGTH,
    ) -> None:
        self.name = name
        self.max_length = max_length

    def transform(self, value: str) -> str:
        if not value:
            raise ClientInputError(self.name, f"{self.name} is required")
        if len(value) > self.max_length:
            raise ClientInputError(
                self.name, f"{self.name} length must be less than {self.max_length}"
            )
        return value

    __call__ = transform

    def __repr__(self) -> str:
        return f"StringIdParam(name={self.name!r}, max_length={self.max_length})"
