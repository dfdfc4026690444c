"""
Configuration defaults for the Sign-Up Form GUI.

This module provides the application identifiers and the default settings
backing ConfigManager.
"""

from typing import Any

from PySide6.QtCore import QCoreApplication

# Application identifiers for QSettings
APP_ORGANIZATION = "SignUpForm"
APP_NAME = "GUI"

# Default configuration with all supported keys and QSettings-friendly types
DEFAULT_CONFIG: dict[str, Any] = {
    # Validation rules
    "min_password_length": 8,
    "min_phone_digits": 10,
    "min_age_years": 17,
    # Debug settings
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
    # Window state
    "window_width": 420,
    "window_height": 560,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    This should be called early in application startup to ensure
    QSettings uses the correct organization and application names.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
