"""Shared fixtures for the PowerMonitor tests."""

from datetime import datetime

import pytest

from powermonitor.core import DataPoint, MethodActivity, Quantity, Unit, RESULTS_DIRECTORY_ENV
from powermonitor.export import CsvFormat, CsvResultsWriter


@pytest.fixture(autouse=True)
def no_directory_override(monkeypatch):
    """Keep a directory override from the developer's shell out of the tests."""
    monkeypatch.delenv(RESULTS_DIRECTORY_ENV, raising=False)


@pytest.fixture
def sample_time():
    return datetime(2023, 1, 1, 0, 0, 0)


@pytest.fixture
def power_point(sample_time):
    return DataPoint(
        system_time=1000,
        time=sample_time,
        thread_name="main",
        name="foo()",
        value=12.345,
        unit=Unit.WATT,
    )


@pytest.fixture
def energy_point(sample_time):
    return DataPoint(
        system_time=1000,
        time=sample_time,
        thread_name="main",
        name="foo()",
        value=12.345,
        unit=Unit.JOULE,
        co2_value=0.002,
    )


@pytest.fixture
def writer(tmp_path):
    """Comma-delimited writer for pid 4711 writing into tmp_path."""
    return CsvResultsWriter(pid=4711, csv_format=CsvFormat.for_country("US"),
                            results_directory=str(tmp_path))


@pytest.fixture
def german_writer(tmp_path):
    return CsvResultsWriter(pid=4711, csv_format=CsvFormat.for_country("DE"),
                            results_directory=str(tmp_path))


@pytest.fixture
def make_activity(sample_time):
    """Factory for method activities, finalized when a quantity is given."""
    def _make(method, filtered, value=None, unit=Unit.WATT, system_time=1000, thread="main"):
        activity = MethodActivity(
            thread_name=thread,
            time=sample_time,
            method_qualifier=method,
            filtered_method_qualifier=filtered,
            system_time=system_time,
        )
        if value is not None:
            activity.finalize(Quantity(value, unit))
        return activity
    return _make
