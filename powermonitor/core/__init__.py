"""Core data structures and models for PowerMonitor."""

from .units import Unit, Quantity, co2_grams, DEFAULT_CO2_EMISSION_FACTOR
from .measurement import DataPoint
from .activity import Activity, MethodActivity
from .aggregation import aggregate_activities
from .settings import ExportSettings, RESULTS_DIRECTORY_ENV

__all__ = [
    'Unit',
    'Quantity',
    'co2_grams',
    'DEFAULT_CO2_EMISSION_FACTOR',
    'DataPoint',
    'Activity',
    'MethodActivity',
    'aggregate_activities',
    'ExportSettings',
    'RESULTS_DIRECTORY_ENV',
]
