import math

import pytest

from physunits.measures import Energy, Frequency, Length, Mass, Speed, Temperature
from physunits.physics import constants as c
from physunits.physics import dimensional as dim


def test_typed_constants() -> None:
    assert isinstance(c.SPEED_OF_LIGHT, Speed)
    assert c.SPEED_OF_LIGHT.base_value == 299_792_458.0
    assert isinstance(c.EARTH_RADIUS, Length)
    assert isinstance(c.ABSOLUTE_ZERO, Temperature)


def test_masses_stored_in_grams() -> None:
    assert isinstance(c.ELECTRON_MASS, Mass)
    assert c.ELECTRON_MASS.base_value == pytest.approx(9.1093837015e-28)
    assert c.PROTON_MASS.kilograms == pytest.approx(1.67262192369e-27)
    assert c.EARTH_MASS.kilograms == pytest.approx(5.9722e24)


def test_reference_temperatures() -> None:
    assert c.ABSOLUTE_ZERO.celsius == pytest.approx(-273.15)
    assert c.WATER_FREEZING_POINT.kelvin == pytest.approx(273.15)
    assert c.WATER_BOILING_POINT.kelvin == pytest.approx(373.15)
    assert c.STANDARD_TEMPERATURE == c.WATER_FREEZING_POINT


def test_standard_conditions() -> None:
    assert c.STANDARD_GRAVITY.base_value == pytest.approx(9.80665)
    assert c.STANDARD_PRESSURE.atmospheres == pytest.approx(1.0)


def test_mathematical_constants() -> None:
    assert c.PI == math.pi
    assert c.GOLDEN_RATIO == pytest.approx(1.618033988749894)
    assert c.SQRT2 * c.SQRT2 == pytest.approx(2.0)
    assert c.LN10 == pytest.approx(2.302585092994046)


def test_photon_energy() -> None:
    energy = c.photon_energy(Frequency.from_unit(1.0, 1e15))
    assert isinstance(energy, Energy)
    assert energy.base_value == pytest.approx(6.62607015e-19)
    assert energy.electron_volts == pytest.approx(4.135667696, rel=1e-9)


def test_light_travels_one_light_year() -> None:
    year = dim.time_from_distance(c.LIGHT_YEAR, c.SPEED_OF_LIGHT)
    assert year.days == pytest.approx(365.25, rel=1e-3)


def test_weight_on_earth() -> None:
    weight = dim.force_from_mass(Mass.from_kilograms(1.0), c.STANDARD_GRAVITY)
    assert weight.newtons == pytest.approx(9.80665)
