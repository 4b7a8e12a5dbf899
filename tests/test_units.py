"""
Unit Tests for powermonitor.core.units

Tests for:
    - Unit abbreviations and lookup
    - Quantity conversion between energy units
    - CO2 conversion
"""

import pytest

from powermonitor.core import Quantity, Unit, co2_grams, DEFAULT_CO2_EMISSION_FACTOR


class TestUnit:

    def test_abbreviations(self):
        assert Unit.WATT.abbreviation == "W"
        assert Unit.JOULE.abbreviation == "J"
        assert Unit.GRAMS_CO2.abbreviation == "g CO2"
        assert str(Unit.KILOWATT_HOURS) == "kWh"

    def test_from_abbreviation(self):
        assert Unit.from_abbreviation("J") is Unit.JOULE
        assert Unit.from_abbreviation(" W ") is Unit.WATT

    def test_from_unknown_abbreviation(self):
        with pytest.raises(ValueError):
            Unit.from_abbreviation("hp")

    def test_energy_units(self):
        assert Unit.JOULE.is_energy
        assert Unit.WATT_HOURS.is_energy
        assert not Unit.WATT.is_energy
        assert not Unit.GRAMS_CO2.is_energy


class TestQuantity:

    def test_is_immutable(self):
        q = Quantity(1.0, Unit.WATT)
        with pytest.raises(AttributeError):
            q.value = 2.0

    def test_convert_watt_hours_to_joules(self):
        q = Quantity(1.0, Unit.WATT_HOURS).to(Unit.JOULE)
        assert q.unit is Unit.JOULE
        assert q.value == pytest.approx(3600.0)

    def test_convert_joules_to_kilowatt_hours(self):
        q = Quantity(7_200_000.0, Unit.JOULE).to(Unit.KILOWATT_HOURS)
        assert q.value == pytest.approx(2.0)

    def test_convert_to_same_unit_returns_self(self):
        q = Quantity(5.0, Unit.WATT)
        assert q.to(Unit.WATT) is q

    def test_convert_across_dimensions_fails(self):
        with pytest.raises(ValueError):
            Quantity(5.0, Unit.WATT).to(Unit.JOULE)


class TestCo2:

    def test_one_kwh_yields_emission_factor(self):
        assert co2_grams(3_600_000.0) == pytest.approx(DEFAULT_CO2_EMISSION_FACTOR)

    def test_custom_factor(self):
        assert co2_grams(36_000.0, emission_factor=400.0) == pytest.approx(4.0)

    def test_zero_energy(self):
        assert co2_grams(0.0) == 0.0
