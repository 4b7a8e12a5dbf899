"""Reading exported result files back for analysis."""

from __future__ import annotations
import csv
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..core import DataPoint, Unit
from .csv_format import INFINITY_TEXT

logger = logging.getLogger(__name__)


@dataclass
class MethodSummary:
    """Totals of all rows reported for one method."""
    name: str
    unit: Unit
    count: int
    total: float
    mean: float
    maximum: float
    co2_total: Optional[float] = None


class ResultsReader:
    """Import result files written by CsvResultsWriter."""

    # Checked in this order: ';' files also contain ',' as decimal separator
    SEPARATORS = [';', ',']

    # Minimum column count of a data row
    MIN_COLUMNS = 6

    TIMESTAMP_FORMATS = [
        '%Y-%m-%d %H:%M:%S',
        '%Y-%m-%d %H:%M:%S.%f',
        '%Y-%m-%dT%H:%M:%S',
        '%Y-%m-%dT%H:%M:%S.%f',
    ]

    @classmethod
    def detect_separator(cls, filepath: Path) -> str:
        """Detect the row delimiter of a result file.

        The header line is always comma separated, so only data lines are
        inspected. Files holding just a header are reported as ','.

        Raises:
            ValueError: If the file is empty or no separator fits
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            lines = [f.readline() for _ in range(6)]

        lines = [line.strip() for line in lines if line.strip()]
        if not lines:
            raise ValueError("File is empty")

        data_lines = lines[1:]
        if not data_lines:
            return ','

        for sep in cls.SEPARATORS:
            counts = [line.count(sep) for line in data_lines]
            if min(counts) >= cls.MIN_COLUMNS - 1:
                return sep

        raise ValueError(
            "Could not detect CSV separator. "
            "Supported separators: comma, semicolon"
        )

    @classmethod
    def parse_timestamp(cls, ts_str: str) -> datetime:
        """Parse timestamp string trying the supported formats.

        Raises:
            ValueError: If timestamp format is not recognized
        """
        ts_str = ts_str.strip()

        for fmt in cls.TIMESTAMP_FORMATS:
            try:
                return datetime.strptime(ts_str, fmt)
            except ValueError:
                continue

        raise ValueError(f"Unrecognized timestamp format: {ts_str}")

    @staticmethod
    def parse_decimal(value: str) -> float:
        value = value.strip()
        if value.endswith(INFINITY_TEXT):
            return float(value.replace(INFINITY_TEXT, "inf"))
        return float(value.replace(',', '.'))

    @classmethod
    def parse_row(cls, row: List[str], separator: str) -> DataPoint:
        """Build a data point from the fields of one data line.

        Rows are written unquoted, so a method name holding the separator
        spans several fields. Columns are located from both ends; the
        thread name is assumed to be free of separators.

        Raises:
            ValueError: If the row doesn't hold a valid data point
        """
        if len(row) >= cls.MIN_COLUMNS + 2 and row[-1].strip() == Unit.GRAMS_CO2.abbreviation:
            unit_index = len(row) - 3
            co2_field = row[-2].strip()
        else:
            unit_index = len(row) - 1
            co2_field = ""
        value_index = unit_index - 1
        if value_index < 4:
            raise ValueError(f"Too few columns: {len(row)}")

        unit = Unit.from_abbreviation(row[unit_index])
        co2_value = None
        if unit is Unit.JOULE and co2_field:
            co2_value = cls.parse_decimal(co2_field)

        return DataPoint(
            system_time=int(row[0].strip()),
            time=cls.parse_timestamp(row[1]),
            thread_name=row[2],
            name=separator.join(row[3:value_index]),
            value=cls.parse_decimal(row[value_index]),
            unit=unit,
            co2_value=co2_value,
        )

    @classmethod
    def read(cls, filepath: Path) -> List[DataPoint]:
        """Read all data rows of a result file.

        Args:
            filepath: Path to a power or energy result file

        Returns:
            Data points in file order

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the header is missing or the separator is unknown
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        separator = cls.detect_separator(filepath)
        points: List[DataPoint] = []
        skipped = 0

        with open(filepath, 'r', encoding='utf-8', newline='') as f:
            header = f.readline().strip().split(',')
            if len(header) < cls.MIN_COLUMNS or header[0] != 'SystemTime':
                raise ValueError(
                    "Invalid results file. Expected header starting with "
                    "SystemTime,Time,ThreadName,Method,Value,Unit"
                )

            for row in csv.reader(f, delimiter=separator, quoting=csv.QUOTE_NONE):
                if len(row) < cls.MIN_COLUMNS:
                    skipped += 1
                    continue

                try:
                    points.append(cls.parse_row(row, separator))
                except ValueError:
                    skipped += 1
                    continue

        if skipped:
            logger.debug(f"Skipped {skipped} malformed rows in {filepath}")

        return points

    @staticmethod
    def summarize(points: List[DataPoint]) -> List[MethodSummary]:
        """Summarize data points per method and unit, largest total first."""
        groups: Dict[Tuple[str, Unit], List[DataPoint]] = {}
        for dp in points:
            groups.setdefault((dp.name, dp.unit), []).append(dp)

        summaries = []
        for (name, unit), group in groups.items():
            values = np.array([dp.value for dp in group], dtype=float)
            co2 = [dp.co2_value for dp in group if dp.has_co2]
            summaries.append(MethodSummary(
                name=name,
                unit=unit,
                count=len(group),
                total=float(np.sum(values)),
                mean=float(np.mean(values)),
                maximum=float(np.max(values)),
                co2_total=float(np.sum(co2)) if co2 else None,
            ))

        summaries.sort(key=lambda s: s.total, reverse=True)
        return summaries
