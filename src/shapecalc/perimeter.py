"""
Perimeters
==========
Boundary lengths of 2D shapes.
"""
from __future__ import annotations

import math

from shapecalc import validation
from shapecalc.constants import PI


def circle(radius: float) -> float:
    """Circumference of a circle, 2 * pi * r."""
    r = validation.positive("radius", radius)
    return 2.0 * PI * r


def rectangle(length: float, width: float) -> float:
    ln = validation.positive("length", length)
    w = validation.positive("width", width)
    return 2.0 * (ln + w)


def square(side: float) -> float:
    s = validation.positive("side", side)
    return 4.0 * s


def triangle(a: float, b: float, c: float) -> float:
    """
    Perimeter of a triangle from its three side lengths.

    Raises:
        NegativeValueError: If any side is <= 0.
        InvalidInputError: If the sides violate the strict triangle inequality,
            including degenerate (flat) triangles such as (1, 1, 2).
    """
    a = validation.positive("a", a)
    b = validation.positive("b", b)
    c = validation.positive("c", c)
    validation.triangle_sides(a, b, c)
    return a + b + c


def regular_polygon(sides: int, side_length: float) -> float:
    """
    Perimeter of a regular polygon.

    Args:
        sides: Number of sides, an integer >= 3.
        side_length: Length of each side.
    """
    n = validation.side_count("sides", sides)
    s = validation.positive("side_length", side_length)
    return n * s


def ellipse(major_axis: float, minor_axis: float) -> float:
    """
    Approximate circumference of an ellipse.

    There is no closed form; this uses Ramanujan's second approximation,
    which is exact for a circle and within ~0.04 % for any eccentricity.

    Args:
        major_axis: Semi-major axis length.
        minor_axis: Semi-minor axis length.
    """
    a = validation.positive("major_axis", major_axis)
    b = validation.positive("minor_axis", minor_axis)
    h = ((a - b) / (a + b)) ** 2
    return PI * (a + b) * (1.0 + 3.0 * h / (10.0 + math.sqrt(4.0 - 3.0 * h)))
