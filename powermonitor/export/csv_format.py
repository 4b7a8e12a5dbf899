"""Locale dependent CSV formatting."""

from __future__ import annotations
import locale
import math
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional


# Spelling of non-finite values in result files
NAN_TEXT = "NaN"
INFINITY_TEXT = "\u221e"

# Windows reports locales as "German_Germany"
_COUNTRY_NAMES = {
    'germany': 'DE',
}


def default_country() -> str:
    """Country code of the process's default locale, or '' if unknown."""
    language_code, _ = locale.getlocale()
    if not language_code or '_' not in language_code:
        return ""
    territory = language_code.split('.')[0].split('_')[-1]
    return _COUNTRY_NAMES.get(territory.lower(), territory.upper())


@dataclass(frozen=True)
class CsvFormat:
    """Delimiter, decimal and timestamp conventions for result rows.

    Built once at startup and handed to the writer, so every row of a
    process uses the same conventions.
    """
    delimiter: str = ","
    decimal_separator: str = "."
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"

    # Equivalent of the pattern ###0.#####
    FRACTION_DIGITS: ClassVar[int] = 5

    @classmethod
    def for_country(cls, country: Optional[str]) -> 'CsvFormat':
        """German locale gets ';' columns and ',' decimals, everything else ',' and '.'."""
        if (country or "").strip().upper() == "DE":
            return cls(delimiter=";", decimal_separator=",")
        return cls()

    @classmethod
    def from_default_locale(cls) -> 'CsvFormat':
        return cls.for_country(default_country())

    def format_decimal(self, value: float) -> str:
        """Format with up to five fraction digits, no grouping, no trailing zeros."""
        if math.isnan(value):
            return NAN_TEXT
        if math.isinf(value):
            return INFINITY_TEXT if value > 0 else "-" + INFINITY_TEXT
        text = f"{value:.{self.FRACTION_DIGITS}f}"
        if '.' in text:
            text = text.rstrip('0').rstrip('.')
        if text == "-0":
            text = "0"
        return text.replace('.', self.decimal_separator)

    def format_time(self, time: datetime) -> str:
        return time.strftime(self.timestamp_format)
