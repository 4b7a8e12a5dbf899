"""Physical units and quantities."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Average grid emission factor in g CO2 per kWh
DEFAULT_CO2_EMISSION_FACTOR = 485.0

JOULES_PER_KWH = 3_600_000.0


class Unit(Enum):
    """Measurement unit with its display abbreviation."""
    WATT = ("W", None)
    JOULE = ("J", 1.0)
    WATT_HOURS = ("Wh", 3600.0)
    KILOWATT_HOURS = ("kWh", JOULES_PER_KWH)
    GRAMS_CO2 = ("g CO2", None)

    def __init__(self, abbreviation: str, joule_factor: Optional[float]):
        self.abbreviation = abbreviation
        self.joule_factor = joule_factor

    @property
    def is_energy(self) -> bool:
        return self.joule_factor is not None

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> 'Unit':
        """Look up a unit by the abbreviation written to result files."""
        abbreviation = abbreviation.strip()
        for unit in cls:
            if unit.abbreviation == abbreviation:
                return unit
        raise ValueError(f"Unknown unit: {abbreviation!r}")

    def __str__(self) -> str:
        return self.abbreviation


@dataclass(frozen=True)
class Quantity:
    """Numeric magnitude tagged with its unit."""
    value: float
    unit: Unit

    def to(self, unit: Unit) -> 'Quantity':
        """Convert to another unit of the same dimension."""
        if unit is self.unit:
            return self
        if not (self.unit.is_energy and unit.is_energy):
            raise ValueError(f"Cannot convert {self.unit.name} to {unit.name}")
        return Quantity(self.value * self.unit.joule_factor / unit.joule_factor, unit)

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"


def co2_grams(joules: float, emission_factor: float = DEFAULT_CO2_EMISSION_FACTOR) -> float:
    """Grams of CO2 for an amount of energy.

    Args:
        joules: Energy in joules
        emission_factor: Grid emission factor in g CO2/kWh

    Returns:
        Equivalent CO2 mass in grams
    """
    return joules / JOULES_PER_KWH * emission_factor
