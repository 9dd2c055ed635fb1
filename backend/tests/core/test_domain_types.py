"""Domain Types — verifies fuel components and fixed constants.

Tests:
    - Every FuelComponent has a density
    - Densities match the published fuel data
    - Default tolerance is binary64 machine epsilon
"""

import sys

from fuelmix.core.domain_types import (
    DENSITY_G_PER_ML, PERCENTAGE_TOLERANCE,
    FuelComponent, Grams, Milliliters, MassFraction,
)


def test_value_types_wrap_float():
    assert Grams(1000.0) == 1000.0
    assert Milliliters(250.0) == 250.0
    assert MassFraction(0.8) == 0.8


def test_fuel_component_has_two_members():
    assert set(FuelComponent) == {FuelComponent.NITRO, FuelComponent.M5}
    assert FuelComponent.NITRO.value == "nitro"
    assert FuelComponent.M5.value == "m5"


def test_every_component_has_density():
    assert set(DENSITY_G_PER_ML) == set(FuelComponent)


def test_density_values():
    assert DENSITY_G_PER_ML[FuelComponent.NITRO] == 0.74
    assert DENSITY_G_PER_ML[FuelComponent.M5] == 0.80


def test_default_tolerance_is_machine_epsilon():
    assert PERCENTAGE_TOLERANCE == sys.float_info.epsilon
