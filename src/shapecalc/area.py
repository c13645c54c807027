"""
Planar Areas
============
Areas of 2D shapes from their defining measurements.

All lengths must be strictly positive and all angles are in degrees within
(0, 360]. Results are floats in the square of the input length unit.
"""
from __future__ import annotations

import math

from shapecalc import validation
from shapecalc.constants import PI
from shapecalc.utils import deg2rad

# Area of a regular pentagon with unit side
_PENTAGON_FACTOR: float = 0.25 * math.sqrt(5.0 * (5.0 + 2.0 * math.sqrt(5.0)))
_HEXAGON_FACTOR: float = 3.0 * math.sqrt(3.0) / 2.0
_SMALL_ANGLE_RAD: float = 1e-2


def circle(radius: float) -> float:
    """
    Area of a circle.

    Args:
        radius: Circle radius.

    Returns:
        pi * r^2
    """
    r = validation.positive("radius", radius)
    return PI * r * r


def triangle(height: float, width: float) -> float:
    """Area of a triangle from its height and base width."""
    h = validation.positive("height", height)
    w = validation.positive("width", width)
    return 0.5 * h * w


def square(side: float) -> float:
    s = validation.positive("side", side)
    return s * s


def rectangle(height: float, width: float) -> float:
    h = validation.positive("height", height)
    w = validation.positive("width", width)
    return h * w


def trapezoid(base1: float, base2: float, height: float) -> float:
    """Area of a trapezoid with parallel sides ``base1`` and ``base2``."""
    b1 = validation.positive("base1", base1)
    b2 = validation.positive("base2", base2)
    h = validation.positive("height", height)
    return 0.5 * (b1 + b2) * h


def parallelogram(base: float, height: float) -> float:
    b = validation.positive("base", base)
    h = validation.positive("height", height)
    return b * h


def ellipse(major_axis: float, minor_axis: float) -> float:
    """
    Area of an ellipse.

    Args:
        major_axis: Semi-major axis length.
        minor_axis: Semi-minor axis length.

    Returns:
        pi * a * b
    """
    a = validation.positive("major_axis", major_axis)
    b = validation.positive("minor_axis", minor_axis)
    return PI * a * b


def sector(radius: float, angle: float) -> float:
    """
    Area of a circular sector.

    Args:
        radius: Circle radius.
        angle: Central angle in degrees, 0 < angle <= 360.
    """
    r = validation.positive("radius", radius)
    theta = validation.angle("angle", angle)
    return 0.5 * r * r * theta * PI / 180.0


def rhombus(diagonal1: float, diagonal2: float) -> float:
    d1 = validation.positive("diagonal1", diagonal1)
    d2 = validation.positive("diagonal2", diagonal2)
    return 0.5 * d1 * d2


def kite(diagonal1: float, diagonal2: float) -> float:
    d1 = validation.positive("diagonal1", diagonal1)
    d2 = validation.positive("diagonal2", diagonal2)
    return 0.5 * d1 * d2


def regular_polygon(perimeter: float, apothem: float) -> float:
    """
    Area of a regular polygon from its perimeter and apothem.

    The apothem is the distance from the centre to the midpoint of a side.
    See ``polygon`` for the side-count form.
    """
    p = validation.positive("perimeter", perimeter)
    a = validation.positive("apothem", apothem)
    return 0.5 * p * a


def annulus(outer_radius: float, inner_radius: float) -> float:
    """
    Area of the ring between two concentric circles.

    Args:
        outer_radius: Radius of the outer circle.
        inner_radius: Radius of the inner circle, strictly smaller than ``outer_radius``.

    Raises:
        NegativeValueError: If either radius is <= 0.
        InvalidInputError: If ``inner_radius`` >= ``outer_radius``.
    """
    big_r = validation.positive("outer_radius", outer_radius)
    small_r = validation.positive("inner_radius", inner_radius)
    validation.annulus_radii(big_r, small_r)
    return PI * (big_r * big_r - small_r * small_r)


def pentagon(side_length: float) -> float:
    s = validation.positive("side_length", side_length)
    return _PENTAGON_FACTOR * s * s


def hexagon(side_length: float) -> float:
    s = validation.positive("side_length", side_length)
    return _HEXAGON_FACTOR * s * s


def polygon(sides: int, side_length: float) -> float:
    """
    Area of a regular polygon with ``sides`` equal sides.

    Args:
        sides: Number of sides, an integer >= 3.
        side_length: Length of each side.

    Returns:
        n * s^2 / (4 * tan(pi / n))

    Raises:
        InvalidInputError: If ``sides`` is not an integer or is < 3.
        NegativeValueError: If ``side_length`` <= 0.
    """
    n = validation.side_count("sides", sides)
    s = validation.positive("side_length", side_length)
    return n * s * s / (4.0 * math.tan(PI / n))


def circular_segment(radius: float, angle: float) -> float:
    """
    Area of the region between a chord and its arc.

    Args:
        radius: Circle radius.
        angle: Central angle subtended by the chord, in degrees, 0 < angle <= 360.

    Returns:
        0.5 * r^2 * (theta - sin(theta)) with theta in radians.
    """
    r = validation.positive("radius", radius)
    theta = deg2rad(validation.angle("angle", angle))
    return 0.5 * r * r * _theta_minus_sin(theta)


def _theta_minus_sin(theta: float) -> float:
    # theta - sin(theta) cancels to zero for small angles; use its Taylor series there
    if theta < _SMALL_ANGLE_RAD:
        t2 = theta * theta
        return theta * t2 * (1.0 / 6.0 - t2 * (1.0 / 120.0 - t2 / 5040.0))
    return theta - math.sin(theta)
