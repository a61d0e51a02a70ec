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

"""Predicates for conditional validation.

Each predicate takes ``(obj, value)`` like a coercer minus the key, so a
``model_validator`` can decide whether a field's checks apply:

    >>> class Payment(BaseModel):
    ...     method: str
    ...     card_number: str | None = None
    ...
    ...     @model_validator(mode="after")
    ...     def check_card(self):
    ...         if is_not_null(self, self.card_number) and len(self.card_number) != 16:
    ...             raise ValueError("card_number must have 16 digits")
    ...         return self
"""

from typing import Any

from .transforms import UNDEFINED


def is_truthy(obj: Any, value: Any) -> bool:
    return bool(value)


def is_falsy(obj: Any, value: Any) -> bool:
    return not value


def is_null(obj: Any, value: Any) -> bool:
    return value is None


def is_not_null(obj: Any, value: Any) -> bool:
    return value is not None


def is_undefined(obj: Any, value: Any) -> bool:
    """``True`` only for the :data:`UNDEFINED` sentinel; ``None`` is defined."""
    return value is UNDEFINED


def is_not_undefined(obj: Any, value: Any) -> bool:
    return value is not UNDEFINED
