"""
Error Taxonomy
==============
Every rejected input is reported with one of four exception types. The set is
closed: callers can handle ``ShapeError`` and branch on ``error.kind``.

``ShapeError`` derives from ``ValueError`` so code that already guards
numeric input with ``except ValueError`` keeps working.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Optional


class ErrorKind(StrEnum):
    NEGATIVE_VALUE = "negative_value"
    ZERO_VALUE = "zero_value"
    INVALID_ANGLE = "invalid_angle"
    INVALID_INPUT = "invalid_input"


class ShapeError(ValueError):
    """
    Base class for all validation failures.

    Attributes:
        kind: Which of the four error kinds this is.
        message: Human-readable description.
        parameter: Name of the offending argument, if a single one is to blame.
        value: The offending value, if a single one is to blame.
    """
    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        parameter: Optional[str] = None,
        value: Optional[float] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.parameter = parameter
        self.value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class NegativeValueError(ShapeError):
    """A strictly positive measurement was zero or negative."""
    kind = ErrorKind.NEGATIVE_VALUE


class ZeroValueError(ShapeError):
    """Reserved. Zero is currently reported as ``NegativeValueError``."""
    kind = ErrorKind.ZERO_VALUE


class InvalidAngleError(ShapeError):
    """An angle was outside (0, 360] degrees."""
    kind = ErrorKind.INVALID_ANGLE


class InvalidInputError(ShapeError):
    """Any other impossible shape: degenerate triangle, inverted annulus, too few sides."""
    kind = ErrorKind.INVALID_INPUT


ERROR_TYPES: dict[ErrorKind, type[ShapeError]] = {
    ErrorKind.NEGATIVE_VALUE: NegativeValueError,
    ErrorKind.ZERO_VALUE: ZeroValueError,
    ErrorKind.INVALID_ANGLE: InvalidAngleError,
    ErrorKind.INVALID_INPUT: InvalidInputError,
}
