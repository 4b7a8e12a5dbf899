"""CSV results export for PowerMonitor."""

from __future__ import annotations
import io
import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional

from ..core import DataPoint, ExportSettings, Unit
from ..version import APP_NAME
from .csv_format import CsvFormat
from .results_writer import ResultsWriter

logger = logging.getLogger(__name__)


class CsvResultsWriter(ResultsWriter):
    """Write power and energy results to one CSV file per result kind.

    Data rows use the delimiter of the given CsvFormat. Header rows are
    always comma separated, which existing consumers of these files rely on.
    """

    ENERGY_PER_METHOD_HEADER = "SystemTime,Time,ThreadName,Method,Value,Unit,CO2Value,CO2Unit\n"
    ENERGY_PER_METHOD_FILTERED_HEADER = "SystemTime,Time,ThreadName,Method,Value,Unit,CO2Value\n"
    POWER_PER_METHOD_HEADER = "SystemTime,Time,ThreadName,Method,Value,Unit\n"
    POWER_PER_METHOD_FILTERED_HEADER = "SystemTime,Time,ThreadName,Method,Value,Unit\n"

    def __init__(self, pid: int, csv_format: CsvFormat,
                 results_directory: Optional[str] = None,
                 app_title: str = APP_NAME):
        """Resolve the result file names for this process.

        Args:
            pid: Process id, keeps concurrent instances on one host apart
            csv_format: Row formatting conventions
            results_directory: Output directory, None for the working directory
            app_title: File name prefix
        """
        self.pid = pid
        self.csv_format = csv_format
        self.results_directory = results_directory or None

        prefix = f"{app_title}_{pid}_"
        self.energy_per_method_file = self._resolve(prefix + "energy_per_method.csv")
        self.energy_per_method_filtered_file = self._resolve(prefix + "energy_per_method_filtered.csv")
        self.power_per_method_file = self._resolve(prefix + "power_per_method.csv")
        self.power_per_method_filtered_file = self._resolve(prefix + "power_per_method_filtered.csv")

        logger.debug(f"Energy consumption per method is written to '{self.energy_per_method_file}'")
        logger.debug(f"Energy consumption per filtered method is written to '{self.energy_per_method_filtered_file}'")
        logger.debug(f"Power consumption per method is written to '{self.power_per_method_file}'")
        logger.debug(f"Power consumption per filtered method is written to '{self.power_per_method_filtered_file}'")

    @classmethod
    def from_settings(cls, settings: Optional[ExportSettings] = None,
                      pid: Optional[int] = None) -> 'CsvResultsWriter':
        """Create a writer for the current process from export settings."""
        if settings is None:
            settings = ExportSettings.load()
        csv_format = (CsvFormat.for_country(settings.country) if settings.country
                      else CsvFormat.from_default_locale())
        return cls(
            pid=os.getpid() if pid is None else pid,
            csv_format=csv_format,
            results_directory=settings.results_directory_override,
            app_title=settings.app_title,
        )

    @property
    def files(self) -> List[Path]:
        """All result files, in header-writing order."""
        return [
            self.energy_per_method_filtered_file,
            self.power_per_method_filtered_file,
            self.energy_per_method_file,
            self.power_per_method_file,
        ]

    def _resolve(self, file_name: str) -> Path:
        if self.results_directory:
            return Path(self.results_directory) / file_name
        return Path(file_name)

    def write_headers(self) -> None:
        self._write_to_file(self.ENERGY_PER_METHOD_FILTERED_HEADER, self.energy_per_method_filtered_file, append=False)
        self._write_to_file(self.POWER_PER_METHOD_FILTERED_HEADER, self.power_per_method_filtered_file, append=False)
        self._write_to_file(self.ENERGY_PER_METHOD_HEADER, self.energy_per_method_file, append=False)
        self._write_to_file(self.POWER_PER_METHOD_HEADER, self.power_per_method_file, append=False)

    def write_power_consumption_per_method(self, measurements: Mapping[str, DataPoint]) -> None:
        self._write_to_file(self.create_csv(measurements), self.power_per_method_file)

    def write_power_consumption_per_method_filtered(self, measurements: Mapping[str, DataPoint]) -> None:
        self._write_to_file(self.create_csv(measurements), self.power_per_method_filtered_file)

    def write_energy_consumption_per_method(self, measurements: Mapping[str, DataPoint]) -> None:
        self._write_to_file(self.create_csv(measurements), self.energy_per_method_file)

    def write_energy_consumption_per_method_filtered(self, measurements: Mapping[str, DataPoint]) -> None:
        self._write_to_file(self.create_csv(measurements), self.energy_per_method_filtered_file)

    def create_csv(self, measurements: Mapping[str, DataPoint]) -> str:
        """Format all data points of one call into a single buffer."""
        delimiter = self.csv_format.delimiter
        buffer = io.StringIO()
        for data_point in measurements.values():
            # Plain join, no quoting: names containing the delimiter are written as is
            buffer.write(delimiter.join(self.create_row(data_point)) + '\n')
        return buffer.getvalue()

    def create_row(self, dp: DataPoint) -> List[str]:
        """Columns for one data point; energy rows carry the CO2 columns."""
        fmt = self.csv_format
        row = [
            str(dp.system_time),
            fmt.format_time(dp.time),
            dp.thread_name,
            dp.name,
            fmt.format_decimal(dp.value),
            dp.unit.abbreviation,
        ]
        if dp.unit is Unit.JOULE:
            co2_value = "" if dp.co2_value is None else fmt.format_decimal(dp.co2_value)
            row += [co2_value, Unit.GRAMS_CO2.abbreviation]
        return row

    def _write_to_file(self, content: str, path: Path, append: bool = True) -> None:
        # I/O errors end here: logged, never raised to the monitored process
        mode = 'a' if append else 'w'
        try:
            with open(path, mode, encoding='utf-8', newline='') as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write results to '{path}': {e}", exc_info=True)
