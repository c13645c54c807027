"""
Volumes
=======
Volumes of 3D solids.
"""
from __future__ import annotations

from shapecalc import validation
from shapecalc.constants import PI


def cube(side: float) -> float:
    s = validation.positive("side", side)
    return s * s * s


def sphere(radius: float) -> float:
    """(4/3) * pi * r^3"""
    r = validation.positive("radius", radius)
    return 4.0 / 3.0 * PI * r * r * r


def cylinder(radius: float, height: float) -> float:
    r = validation.positive("radius", radius)
    h = validation.positive("height", height)
    return PI * r * r * h


def cone(radius: float, height: float) -> float:
    """Right circular cone, pi * r^2 * h / 3."""
    r = validation.positive("radius", radius)
    h = validation.positive("height", height)
    return PI * r * r * h / 3.0


def rectangular_prism(length: float, width: float, height: float) -> float:
    ln = validation.positive("length", length)
    w = validation.positive("width", width)
    h = validation.positive("height", height)
    return ln * w * h


def pyramid(base_area: float, height: float) -> float:
    """
    Any pyramid or cone-like solid with a flat base.

    Args:
        base_area: Area of the base, e.g. from ``shapecalc.area``.
        height: Perpendicular height from base to apex.
    """
    a = validation.positive("base_area", base_area)
    h = validation.positive("height", height)
    return a * h / 3.0
