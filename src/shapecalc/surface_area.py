"""
Surface Areas
=============
Total outer surface of 3D solids, including bases.
"""
from __future__ import annotations

import math

from shapecalc import validation
from shapecalc.constants import PI


def cube(side: float) -> float:
    s = validation.positive("side", side)
    return 6.0 * s * s


def sphere(radius: float) -> float:
    r = validation.positive("radius", radius)
    return 4.0 * PI * r * r


def cylinder(radius: float, height: float) -> float:
    """Closed right circular cylinder: both caps plus the lateral surface."""
    r = validation.positive("radius", radius)
    h = validation.positive("height", height)
    return 2.0 * PI * r * (r + h)


def cone(radius: float, height: float) -> float:
    """
    Right circular cone: base disc plus lateral surface.

    Args:
        radius: Base radius.
        height: Perpendicular height from base to apex.

    Returns:
        pi * r * (r + l), where l = sqrt(r^2 + h^2) is the slant height.
    """
    r = validation.positive("radius", radius)
    h = validation.positive("height", height)
    slant_height = math.hypot(r, h)
    return PI * r * (r + slant_height)


def rectangular_prism(length: float, width: float, height: float) -> float:
    ln = validation.positive("length", length)
    w = validation.positive("width", width)
    h = validation.positive("height", height)
    return 2.0 * (ln * w + ln * h + w * h)
