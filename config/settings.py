# config/settings.py
"""Configuration management for the date range picker."""

import os
from datetime import datetime
from typing import List, Optional

from dotenv import load_dotenv

from core.types import DEFAULT_FORMAT, DEFAULT_LOCALE, PickerConfig, QuickOption


class Config:
    """Centralized configuration management."""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration by loading environment variables.

        Args:
            env_file: Explicit .env path; searched for when omitted
        """
        load_dotenv(env_file)
        self._validate_environment()

    @property
    def locale(self) -> str:
        """Locale tag for weekday and month names."""
        return os.getenv("PICKER_LOCALE") or DEFAULT_LOCALE

    @property
    def date_format(self) -> str:
        """Token pattern for the button label."""
        return os.getenv("PICKER_FORMAT") or DEFAULT_FORMAT

    @property
    def max_date(self) -> Optional[datetime]:
        """Last selectable instant; None means now."""
        value = os.getenv("PICKER_MAX_DATE")
        if not value:
            return None
        return datetime.fromisoformat(value.strip())

    @property
    def quick_options(self) -> List[QuickOption]:
        """Quick options in display order."""
        value = os.getenv("PICKER_QUICK_OPTIONS")
        if not value:
            return list(QuickOption)
        return [QuickOption(key) for key in self._split_keys(value)]

    @property
    def log_level(self) -> str:
        """Logging level name."""
        return os.getenv("LOG_LEVEL", "INFO").upper()

    def to_picker_config(self, on_apply=None, on_close=None) -> PickerConfig:
        """Build picker construction options from the environment."""
        return PickerConfig(
            locale=self.locale,
            max_date=self.max_date,
            format=self.date_format,
            quick_options=self.quick_options,
            on_apply=on_apply,
            on_close=on_close,
        )

    @staticmethod
    def _split_keys(value: str) -> List[str]:
        return [key.strip() for key in value.split(",") if key.strip()]

    def _validate_environment(self):
        """Validate optional environment variables."""
        invalid = []

        max_date = os.getenv("PICKER_MAX_DATE")
        if max_date:
            try:
                datetime.fromisoformat(max_date.strip())
            except ValueError:
                invalid.append("PICKER_MAX_DATE")

        quick_options = os.getenv("PICKER_QUICK_OPTIONS")
        if quick_options:
            known = {option.value for option in QuickOption}
            if any(key not in known for key in self._split_keys(quick_options)):
                invalid.append("PICKER_QUICK_OPTIONS")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            invalid.append("LOG_LEVEL")

        if invalid:
            raise RuntimeError(
                f"Invalid environment variables: {', '.join(invalid)}"
            )
