"""Measurement data structures."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .units import Unit


@dataclass(frozen=True)
class DataPoint:
    """One power or energy sample attributed to a method."""
    system_time: int  # Epoch milliseconds at capture
    time: datetime
    thread_name: str
    name: str
    value: float
    unit: Unit
    co2_value: Optional[float] = None  # Only meaningful for JOULE

    @property
    def has_co2(self) -> bool:
        return self.unit is Unit.JOULE and self.co2_value is not None
