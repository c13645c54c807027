"""Mathematical and catalog constants shared by all shape formulas."""
import math

PI: float = math.pi
TAU: float = math.tau
E: float = math.e

# Angles are given in degrees; a full turn is the largest valid angle.
FULL_TURN_DEGREES: float = 360.0

MIN_POLYGON_SIDES: int = 3
