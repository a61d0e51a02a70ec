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

"""Integer ID request parameter validation."""

from ..constants import DEFAULT_PARAM_NAME, INT_ID_MAX_LENGTH, MAX_INT32
from ..exceptions import ClientInputError


class IntIdParam:
    """Validate a raw path/query parameter as a positive 32-bit integer ID.

    Example:
        >>> IntIdParam("user_id")("42")
        42
    """

    def __init__(self, name: str = DEFAULT_PARAM_NAME) -> None:
        self.name = name

    def transform(self, value: str) -> int:
        """Parse ``value`` into an ID.

        Raises:
            ClientInputError: If the value is too long, not a positive
                integer, or beyond the 32-bit signed range
        """
        if len(value) > INT_ID_MAX_LENGTH:
            raise ClientInputError(
                self.name, f"{self.name} length must be less than {INT_ID_MAX_LENGTH}"
            )
        if not (value.isascii() and value.isdigit()) or int(value) <= 0:
            raise ClientInputError(self.name, f"{self.name} must be a positive integer")
        number = int(value)
        if number > MAX_INT32:
            raise ClientInputError(self.name, f"{self.name} must be less than {MAX_INT32}")
        return number

    __call__ = transform

    def __repr__(self) -> str:
        return f"IntIdParam(name={self.name!r})"
