"""Unit tests for units.py module."""

import pytest

from seawater_calcs.units import (
    conductivity_ratio,
    fahrenheit_to_celsius,
    pressure_to_dbar,
)


def test_fahrenheit_to_celsius():
    assert fahrenheit_to_celsius(32.0) == pytest.approx(0.0)
    assert fahrenheit_to_celsius(59.0) == pytest.approx(15.0)


@pytest.mark.parametrize(
    "value, unit, expected",
    [
        (100.0, "dbar", 100.0),
        (10.0, "bar", 100.0),
        (1.0, "atm", 10.1325),
        (14.5038, "psi", 10.0),
    ],
)
def test_pressure_to_dbar(value, unit, expected):
    assert pressure_to_dbar(value, unit) == pytest.approx(expected, rel=1e-4)


def test_unknown_pressure_unit():
    with pytest.raises(ValueError, match="unknown pressure unit"):
        pressure_to_dbar(1.0, "mmHg")


def test_standard_seawater_ratio():
    assert conductivity_ratio(42.914) == pytest.approx(1.0)
