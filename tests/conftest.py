import numpy as np
import pytest

from shapecalc import area, perimeter, surface_area, volume

# (function, names of its strictly positive arguments)
POSITIVE_ARG_FUNCTIONS = [
    (area.circle, ["radius"]),
    (area.triangle, ["height", "width"]),
    (area.square, ["side"]),
    (area.rectangle, ["height", "width"]),
    (area.trapezoid, ["base1", "base2", "height"]),
    (area.parallelogram, ["base", "height"]),
    (area.ellipse, ["major_axis", "minor_axis"]),
    (area.rhombus, ["diagonal1", "diagonal2"]),
    (area.kite, ["diagonal1", "diagonal2"]),
    (area.regular_polygon, ["perimeter", "apothem"]),
    (area.pentagon, ["side_length"]),
    (area.hexagon, ["side_length"]),
    (perimeter.circle, ["radius"]),
    (perimeter.rectangle, ["length", "width"]),
    (perimeter.square, ["side"]),
    (perimeter.ellipse, ["major_axis", "minor_axis"]),
    (surface_area.cube, ["side"]),
    (surface_area.sphere, ["radius"]),
    (surface_area.cylinder, ["radius", "height"]),
    (surface_area.cone, ["radius", "height"]),
    (surface_area.rectangular_prism, ["length", "width", "height"]),
    (volume.cube, ["side"]),
    (volume.sphere, ["radius"]),
    (volume.cylinder, ["radius", "height"]),
    (volume.cone, ["radius", "height"]),
    (volume.rectangular_prism, ["length", "width", "height"]),
    (volume.pyramid, ["base_area", "height"]),
]


def _id(func) -> str:
    return f"{func.__module__.rsplit('.', 1)[-1]}.{func.__name__}"


def pytest_generate_tests(metafunc):
    if "positive_func" in metafunc.fixturenames:
        metafunc.parametrize(
            ("positive_func", "param_names"),
            POSITIVE_ARG_FUNCTIONS,
            ids=[_id(f) for f, _ in POSITIVE_ARG_FUNCTIONS],
        )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(seed=1234)


@pytest.fixture
def lengths(rng) -> np.ndarray:
    """Strictly positive lengths spread over several orders of magnitude."""
    return 10.0 ** rng.uniform(-3.0, 3.0, size=50)
