"""
Exceptions raised by the 亞 function calculator.

- TermSyntaxError: the parser could not read the input text
- InvariantViolation: an intermediate degree had an impossible shape
- MissingOperand: a two-operand operation was requested with one term
"""

from __future__ import annotations
from typing import Optional


class TermSyntaxError(SyntaxError):
    """Malformed term text. Carries the source text and the failing column."""

    def __init__(self, message: str, text: Optional[str] = None, column: Optional[int] = None):
        super().__init__(message)
        self.text = text
        self.offset = column

    @property
    def column(self) -> Optional[int]:
        return self.offset


class InvariantViolation(RuntimeError):
    """A degree or fundamental-sequence value did not have the expected shape."""


class MissingOperand(ValueError):
    """The second operand (B) is required for this operation."""
