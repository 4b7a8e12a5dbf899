"""Export settings with persistence."""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

from PySide6.QtCore import QSettings

from ..version import APP_NAME
from .units import DEFAULT_CO2_EMISSION_FACTOR

logger = logging.getLogger(__name__)

# Process-level directory override, wins over the persisted value
RESULTS_DIRECTORY_ENV = "POWERMONITOR_CSV_RESULTS_DIRECTORY"


@dataclass
class ExportSettings:
    """Settings for the results export."""
    # Output location; empty means the current working directory
    results_directory: str = ""

    # File name prefix
    app_title: str = APP_NAME

    # g CO2 per kWh used for the CO2 columns
    co2_emission_factor: float = DEFAULT_CO2_EMISSION_FACTOR

    # Country code driving delimiter/decimal format; empty means detect from locale
    country: str = ""

    @property
    def results_directory_override(self) -> Optional[str]:
        """Directory override, environment first, then persisted value."""
        env_value = os.environ.get(RESULTS_DIRECTORY_ENV)
        if env_value:
            return env_value
        return self.results_directory or None

    @staticmethod
    def _qsettings(path: Optional[str] = None) -> QSettings:
        if path:
            return QSettings(path, QSettings.Format.IniFormat)
        return QSettings(APP_NAME, APP_NAME)

    def save(self, path: Optional[str] = None) -> None:
        """Save settings to persistent storage.

        Without ``path`` QSettings picks the native location:
        - Linux: ~/.config/PowerMonitor/PowerMonitor.conf
        - Windows: Registry HKEY_CURRENT_USER\\Software\\PowerMonitor
        - macOS: ~/Library/Preferences/com.PowerMonitor.plist

        With ``path`` an INI file at that location is used.
        """
        settings = self._qsettings(path)
        for f in fields(self):
            settings.setValue(f.name, getattr(self, f.name))
        settings.sync()
        if settings.status() != QSettings.Status.NoError:
            logger.warning(f"Settings could not be written: {settings.status()}")

    @classmethod
    def load(cls, path: Optional[str] = None) -> 'ExportSettings':
        """Load settings from persistent storage.

        Returns default settings if nothing is stored or the stored values
        can't be read.
        """
        instance = cls()  # Start with defaults

        try:
            settings = cls._qsettings(path)

            for f in fields(instance):
                if settings.contains(f.name):
                    stored = settings.value(f.name)
                    default_val = getattr(instance, f.name)

                    # INI and some native backends hand everything back as strings
                    if isinstance(default_val, float):
                        value = float(stored)
                    else:
                        value = "" if stored is None else str(stored)
                    setattr(instance, f.name, value)
        except (TypeError, ValueError) as e:
            logger.warning(f"Ignoring stored settings, using defaults: {e}")
            return cls()

        return instance
