"""
shapecalc
=========
Closed-form areas, perimeters, surface areas and volumes of standard shapes.

Every function validates its arguments before computing anything and raises
a ``ShapeError`` subclass when a shape cannot exist with the given
measurements.

    >>> from shapecalc import area, volume
    >>> area.rectangle(2.0, 3.0)
    6.0
    >>> round(volume.sphere(3.0), 6)
    113.097336
"""
import logging

from shapecalc import area, constants, perimeter, surface_area, volume
from shapecalc.errors import (
    ErrorKind,
    InvalidAngleError,
    InvalidInputError,
    NegativeValueError,
    ShapeError,
    ZeroValueError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "area",
    "constants",
    "perimeter",
    "surface_area",
    "volume",
    "ErrorKind",
    "ShapeError",
    "NegativeValueError",
    "ZeroValueError",
    "InvalidAngleError",
    "InvalidInputError",
]
