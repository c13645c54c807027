"""
Input Validation
================
Precondition checks shared by every formula module.

Each check either returns the argument as a ``float`` (or ``int`` for side
counts) or raises the matching ``ShapeError`` subclass. Rejections are
logged at DEBUG level before raising.
"""
from __future__ import annotations

import logging
import math
import numbers
from typing import Any

from shapecalc.constants import FULL_TURN_DEGREES, MIN_POLYGON_SIDES
from shapecalc.errors import (
    InvalidAngleError,
    InvalidInputError,
    NegativeValueError,
    ShapeError,
)

logger = logging.getLogger(__name__)


def _reject(error: ShapeError) -> ShapeError:
    logger.debug("Rejected input: %s", error.message)
    return error


def _as_real(name: str, value: Any) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"'{name}' must be a real number, got {type(value).__name__}.")

    try:
        number = float(value)
    except OverflowError:
        raise _reject(InvalidInputError(
            f"'{name}' must be finite, got a value too large for a float.", parameter=name
        )) from None
    if not math.isfinite(number):
        raise _reject(InvalidInputError(
            f"'{name}' must be finite, got {number}.", parameter=name, value=number
        ))
    return number


def positive(name: str, value: Any) -> float:
    """
    Check that a measurement is strictly positive.

    Args:
        name: Parameter name, used in the error message.
        value: The measurement.

    Returns:
        The value as a float.

    Raises:
        TypeError: If ``value`` is not a real number.
        InvalidInputError: If ``value`` is NaN or infinite.
        NegativeValueError: If ``value`` <= 0.
    """
    number = _as_real(name, value)
    if number <= 0.0:
        raise _reject(NegativeValueError(
            f"'{name}' must be greater than zero, got {number}.", parameter=name, value=number
        ))
    return number


def angle(name: str, value: Any) -> float:
    """Check that an angle in degrees lies in (0, 360]."""
    number = _as_real(name, value)
    if not 0.0 < number <= FULL_TURN_DEGREES:
        raise _reject(InvalidAngleError(
            f"'{name}' must be in (0, {FULL_TURN_DEGREES:g}] degrees, got {number}.",
            parameter=name,
            value=number
        ))
    return number


def side_count(name: str, value: Any) -> int:
    """Check that a polygon side count is an integer of at least three."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        if isinstance(value, numbers.Real):
            raise _reject(InvalidInputError(
                f"'{name}' must be an integer, got {value!r}.", parameter=name
            ))
        raise TypeError(f"'{name}' must be an integer, got {type(value).__name__}.")

    count = int(value)
    if count < MIN_POLYGON_SIDES:
        raise _reject(InvalidInputError(
            f"A polygon needs at least {MIN_POLYGON_SIDES} sides, got {count}.",
            parameter=name,
            value=count
        ))
    return count


def triangle_sides(a: float, b: float, c: float) -> None:
    """Check the strict triangle inequality for three already-positive sides."""
    if a + b <= c or a + c <= b or b + c <= a:
        raise _reject(InvalidInputError(
            f"Sides {a}, {b}, {c} do not form a triangle: "
            "each pair of sides must sum to more than the third."
        ))


def annulus_radii(outer_radius: float, inner_radius: float) -> None:
    """Check that the inner radius of a ring is smaller than the outer one."""
    if inner_radius >= outer_radius:
        raise _reject(InvalidInputError(
            f"Inner radius ({inner_radius}) must be smaller than outer radius ({outer_radius})."
        ))
