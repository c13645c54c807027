from shapecalc.constants import PI


def deg2rad(degrees: float) -> float:
    return degrees * PI / 180.0
