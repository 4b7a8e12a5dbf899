"""PowerMonitor results export package."""

from .version import __version__, __version_info__, APP_NAME
from .core import (
    Unit,
    Quantity,
    DataPoint,
    Activity,
    MethodActivity,
    aggregate_activities,
    ExportSettings,
)
from .export import ResultsWriter, CsvFormat, CsvResultsWriter, ResultsReader

__all__ = [
    "__version__",
    "__version_info__",
    "APP_NAME",
    "Unit",
    "Quantity",
    "DataPoint",
    "Activity",
    "MethodActivity",
    "aggregate_activities",
    "ExportSettings",
    "ResultsWriter",
    "CsvFormat",
    "CsvResultsWriter",
    "ResultsReader",
]
