import pytest

from validator import (
    OutOfRangeError,
    PsychrometricError,
    as_number,
    validate_arguments,
)


@pytest.mark.parametrize("temp,rh", [(0, 0), (120, 100), (72.5, 45.5), (32, 10)])
def test_accepts_bounds(temp, rh):
    assert validate_arguments(temp, rh) == (float(temp), float(rh))


@pytest.mark.parametrize("rh", [-0.01, 100.01, 150, float("nan"), float("inf")])
def test_rejects_humidity(rh):
    with pytest.raises(OutOfRangeError) as exc:
        validate_arguments(70, rh)
    assert exc.value.parameter == "rel_humidity"
    assert "rel_humidity" in str(exc.value)


@pytest.mark.parametrize("temp", [-5, -0.01, 120.01, float("nan"), float("-inf")])
def test_rejects_temperature(temp):
    with pytest.raises(OutOfRangeError) as exc:
        validate_arguments(temp, 50)
    assert exc.value.parameter == "dry_bulb_temp"
    assert exc.value.minimum == 0
    assert exc.value.maximum == 120


def test_humidity_checked_first():
    with pytest.raises(OutOfRangeError) as exc:
        validate_arguments(-5, 150)
    assert exc.value.parameter == "rel_humidity"


def test_out_of_range_is_value_error():
    assert issubclass(OutOfRangeError, PsychrometricError)
    assert issubclass(OutOfRangeError, ValueError)


@pytest.mark.parametrize("value", [True, "70", None, [70]])
def test_as_number_rejects_non_numbers(value):
    with pytest.raises(TypeError):
        as_number("dry_bulb_temp", value)
