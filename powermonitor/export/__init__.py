"""Export functionality for PowerMonitor."""

from .results_writer import ResultsWriter
from .csv_format import CsvFormat, default_country
from .csv_writer import CsvResultsWriter
from .csv_importer import ResultsReader, MethodSummary

__all__ = [
    "ResultsWriter",
    "CsvFormat",
    "default_country",
    "CsvResultsWriter",
    "ResultsReader",
    "MethodSummary",
]
