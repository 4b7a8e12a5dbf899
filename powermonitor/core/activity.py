"""Method activities tracked between reporting cycles."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .units import Quantity


class Activity(ABC):
    """Something a measured quantity can be attributed to."""

    @abstractmethod
    def get_identifier(self, as_filtered: bool) -> Optional[str]:
        """Key under which this activity is reported."""

    @abstractmethod
    def is_finalized(self) -> bool:
        """True once the measured quantity is known."""

    @abstractmethod
    def get_system_time(self) -> int:
        """Epoch milliseconds at which the activity was captured."""


@dataclass
class MethodActivity(Activity):
    """Execution window of a method on one thread.

    ``represented_quantity`` stays ``None`` until the measurement side
    computes this invocation's share of power or energy.
    """
    thread_name: str
    time: datetime
    method_qualifier: Optional[str]
    filtered_method_qualifier: Optional[str]
    system_time: int
    represented_quantity: Optional[Quantity] = None

    def get_identifier(self, as_filtered: bool) -> Optional[str]:
        if as_filtered or self.method_qualifier is None:
            return self.filtered_method_qualifier
        return self.method_qualifier

    def is_finalized(self) -> bool:
        return self.represented_quantity is not None

    def get_system_time(self) -> int:
        return self.system_time

    def finalize(self, quantity: Quantity) -> None:
        """Attach the measured quantity. Allowed exactly once."""
        if self.represented_quantity is not None:
            raise ValueError(
                f"Activity {self.get_identifier(False)!r} is already finalized"
            )
        self.represented_quantity = quantity
