"""Contract for exporting per-method measurement results."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Mapping

from ..core import DataPoint


class ResultsWriter(ABC):
    """Writes power and energy results, once per reporting cycle.

    Every ``measurements`` argument maps a method identifier to the data
    point reported for it; order is irrelevant. Implementations only read
    the data points and keep no reference to the mapping after returning.

    Write failures are never raised to the caller. The monitored process
    must keep running when its results can't be written, so implementations
    log the failure and return normally; the rows of that call are lost.
    """

    @abstractmethod
    def write_headers(self) -> None:
        """Create or truncate all result files and write their header rows.

        Call once per process before any other write. Calling it again
        discards everything written so far.
        """

    @abstractmethod
    def write_power_consumption_per_method(self, measurements: Mapping[str, DataPoint]) -> None:
        """Append power rows per method."""

    @abstractmethod
    def write_power_consumption_per_method_filtered(self, measurements: Mapping[str, DataPoint]) -> None:
        """Append power rows per filtered method."""

    @abstractmethod
    def write_energy_consumption_per_method(self, measurements: Mapping[str, DataPoint]) -> None:
        """Append energy rows per method."""

    @abstractmethod
    def write_energy_consumption_per_method_filtered(self, measurements: Mapping[str, DataPoint]) -> None:
        """Append energy rows per filtered method."""
