import logging

import numpy as np
import pytest

from shapecalc import validation
from shapecalc.errors import (
    ERROR_TYPES,
    ErrorKind,
    InvalidAngleError,
    InvalidInputError,
    NegativeValueError,
    ShapeError,
    ZeroValueError,
)


class TestPositive:
    def test_returns_float(self):
        assert validation.positive("x", 3) == 3.0
        assert isinstance(validation.positive("x", 3), float)

    @pytest.mark.parametrize("value", [0, 0.0, -0.0, -1e-12, -5])
    def test_rejects_zero_and_negative(self, value):
        with pytest.raises(NegativeValueError) as exc_info:
            validation.positive("radius", value)
        assert exc_info.value.parameter == "radius"
        assert exc_info.value.kind is ErrorKind.NEGATIVE_VALUE

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite(self, value):
        with pytest.raises(InvalidInputError):
            validation.positive("radius", value)

    def test_rejects_int_too_large_for_float(self):
        with pytest.raises(InvalidInputError, match="too large"):
            validation.positive("side", 10 ** 400)

    @pytest.mark.parametrize("value", ["3", None, [1.0], 1 + 2j])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(TypeError):
            validation.positive("radius", value)

    def test_accepts_numpy_scalars(self):
        assert validation.positive("x", np.float64(2.5)) == 2.5
        assert validation.positive("x", np.int32(4)) == 4.0


class TestAngle:
    @pytest.mark.parametrize("value", [1e-9, 30, 180.0, 360.0])
    def test_accepts_open_closed_range(self, value):
        assert validation.angle("angle", value) == float(value)

    @pytest.mark.parametrize("value", [0.0, -30.0, 360.0001, 720.0])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(InvalidAngleError):
            validation.angle("angle", value)


class TestSideCount:
    def test_accepts_integers(self):
        assert validation.side_count("sides", 3) == 3
        assert validation.side_count("sides", np.int64(12)) == 12

    @pytest.mark.parametrize("value", [2, 1, 0, -4])
    def test_rejects_too_few(self, value):
        with pytest.raises(InvalidInputError, match="at least 3 sides"):
            validation.side_count("sides", value)

    @pytest.mark.parametrize("value", [5.0, 4.5, True])
    def test_rejects_non_integers(self, value):
        with pytest.raises(InvalidInputError):
            validation.side_count("sides", value)

    def test_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            validation.side_count("sides", "5")


def test_triangle_inequality_is_strict():
    validation.triangle_sides(3.0, 4.0, 5.0)
    for sides in [(1.0, 1.0, 2.0), (1.0, 2.0, 1.0), (2.0, 1.0, 1.0), (1.0, 1.0, 3.0)]:
        with pytest.raises(InvalidInputError):
            validation.triangle_sides(*sides)


def test_rejection_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="shapecalc"):
        with pytest.raises(NegativeValueError):
            validation.positive("side", -1.0)
    assert "'side' must be greater than zero" in caplog.text


class TestErrorTaxonomy:
    def test_closed_set(self):
        assert set(ErrorKind) == set(ERROR_TYPES)
        for kind, error_type in ERROR_TYPES.items():
            assert error_type.kind is kind
            assert issubclass(error_type, ShapeError)

    def test_shape_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validation.positive("side", 0.0)

    def test_invalid_input_carries_message(self):
        error = InvalidInputError("bad ring")
        assert error.message == "bad ring"
        assert str(error) == "bad ring"
        assert "invalid_input" in repr(error)

    def test_zero_value_is_reserved(self):
        # Zero is reported as a negative value, never as ZeroValueError
        with pytest.raises(NegativeValueError):
            validation.positive("side", 0.0)
        assert ZeroValueError("unused").kind is ErrorKind.ZERO_VALUE
