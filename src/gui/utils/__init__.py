"""
GUI-specific utilities for the Sign-Up Form application.

This module contains utility functions and classes that are specific
to the GUI implementation.
"""

from .styling import (
    AccessiblePalette,
    StyleSheets,
    apply_message_style,
    apply_submit_button_style,
)

__all__ = [
    "AccessiblePalette",
    "StyleSheets",
    "apply_message_style",
    "apply_submit_button_style",
]
