"""
Shared fixtures for the sign-up form tests.
"""

import os
from datetime import date
from unittest.mock import Mock

import pytest

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from core.config_manager import ConfigManager  # noqa: E402
from core.form_validators import ValidationRules  # noqa: E402

FIXED_TODAY = date(2026, 10, 19)


@pytest.fixture
def today():
    """Fixed evaluation date so age checks do not depend on the clock."""
    return FIXED_TODAY


@pytest.fixture
def clock(today):
    """Callable clock returning the fixed date."""
    return lambda: today


@pytest.fixture
def rules():
    """Default validation rules."""
    return ValidationRules()


@pytest.fixture
def mock_config_manager(rules):
    """ConfigManager stand-in that never touches QSettings."""
    config_manager = Mock(spec=ConfigManager)
    config_manager.validation_rules.return_value = rules
    config_manager.get.side_effect = lambda key, default=None: {"window_width": 420, "window_height": 560}.get(
        key, default
    )
    return config_manager
