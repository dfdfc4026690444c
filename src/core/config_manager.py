"""
Configuration manager for the Sign-Up Form GUI.

Provides QSettings-backed configuration management with default fallbacks
and type safety.
"""

import logging
from typing import Any

from PySide6.QtCore import QSettings

from .config import DEFAULT_CONFIG, LOG_LEVELS, setup_qsettings
from .form_validators import ValidationRules

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    QSettings-backed configuration manager with robust defaults.

    Every supported key has a default in DEFAULT_CONFIG; stored values are
    coerced to the default's type and replaced by the default when they
    cannot be.
    """

    def __init__(self) -> None:
        """Initialize the ConfigManager with QSettings."""
        # QSettings picks up the organization and application names set here
        setup_qsettings()

        self._settings = QSettings()

    def get(self, key: str, default: Any | None = None) -> Any:
        """
        Get a configuration value with fallback to defaults.

        Args:
            key: Configuration key
            default: Override default value (if None, uses DEFAULT_CONFIG)

        Returns:
            Configuration value coerced to the default's type
        """
        fallback = default if default is not None else DEFAULT_CONFIG.get(key)
        value = self._settings.value(key, fallback)

        if fallback is None:
            return value

        # INI-backed storage hands numbers back as strings
        try:
            return type(fallback)(value)
        except (ValueError, TypeError) as e:
            logger.warning(f"Failed to coerce config key '{key}': {e}, using default")
            return fallback

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key
            value: Value to store
        """
        self._settings.setValue(key, value)
        self._settings.sync()  # Persist immediately

    def log_level(self) -> str:
        """Return the configured log level name, falling back to the default."""
        level = str(self.get("log_level")).upper()
        if level not in LOG_LEVELS:
            logger.warning(f"Unknown log level '{level}', using default")
            return str(DEFAULT_CONFIG["log_level"])
        return level

    def validation_rules(self) -> ValidationRules:
        """
        Build the validator thresholds from configuration.

        Non-positive values are replaced by their defaults.
        """
        thresholds: dict[str, int] = {}
        for key in ("min_password_length", "min_phone_digits", "min_age_years"):
            value = self.get(key)
            # A zero or negative threshold would accept everything
            if value <= 0:
                logger.warning(f"Config key '{key}' must be positive, got {value}, using default")
                value = DEFAULT_CONFIG[key]
            thresholds[key] = value

        return ValidationRules(**thresholds)
