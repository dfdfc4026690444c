"""
Shared styling utilities for the Sign-Up Form GUI.

This module contains the colour palette and stylesheet helpers used by the
form: message labels turn blue or red with validity and the submit button
switches between its primary colour and light gray.
"""

from typing import Any, Protocol


class StyleableWidget(Protocol):
    """Protocol for widgets that can be styled."""

    def setStyleSheet(self, styleSheet: str) -> None: ...
    def style(self) -> Any: ...


class AccessiblePalette:
    """Centralized color palette for the form."""

    # Validation message colors
    VALID_TEXT = "#0a84ff"  # System blue
    INVALID_TEXT = "#ff3b30"  # System red
    NEUTRAL_TEXT = "#212529"

    # UI element colors
    BORDER_DEFAULT = "#dee2e6"
    BORDER_FOCUS = "#0d6efd"

    BACKGROUND_DEFAULT = "#ffffff"

    # Submit button colors
    BUTTON_ENABLED_BG = "#0a84ff"
    BUTTON_DISABLED_BG = "#d3d3d3"  # Light gray
    BUTTON_TEXT = "#ffffff"


class StyleSheets:
    """Collection of reusable stylesheet definitions using the palette."""

    @staticmethod
    def get_message_label_style(is_valid: bool | None) -> str:
        """Get the stylesheet for a field's message label; None means neutral."""
        if is_valid is None:
            color = AccessiblePalette.NEUTRAL_TEXT
        elif is_valid:
            color = AccessiblePalette.VALID_TEXT
        else:
            color = AccessiblePalette.INVALID_TEXT
        return f"""
            QLabel {{
                color: {color};
                font-size: 13px;
            }}
        """

    @staticmethod
    def get_input_style() -> str:
        """Get the stylesheet for the form's line edits."""
        return f"""
            QLineEdit {{
                border: 1px solid {AccessiblePalette.BORDER_DEFAULT};
                border-radius: 6px;
                padding: 6px 8px;
                background-color: {AccessiblePalette.BACKGROUND_DEFAULT};
                min-height: 36px;
            }}

            QLineEdit:focus {{
                border: 2px solid {AccessiblePalette.BORDER_FOCUS};
            }}
        """

    @staticmethod
    def get_submit_button_style(enabled: bool) -> str:
        """Get the submit button stylesheet for the given submittability."""
        background = AccessiblePalette.BUTTON_ENABLED_BG if enabled else AccessiblePalette.BUTTON_DISABLED_BG
        return f"""
            QPushButton {{
                background-color: {background};
                color: {AccessiblePalette.BUTTON_TEXT};
                border: none;
                border-radius: 10px;
                padding: 8px 16px;
                font-weight: bold;
                min-height: 36px;
            }}
        """


def apply_message_style(widget: StyleableWidget, is_valid: bool | None) -> None:
    """
    Apply validity-based colouring to a message label.

    Args:
        widget: The label to style
        is_valid: Whether the field is valid, or None for neutral text
    """
    widget.setStyleSheet(StyleSheets.get_message_label_style(is_valid))


def apply_submit_button_style(widget: StyleableWidget, enabled: bool) -> None:
    """
    Apply the enabled or disabled colour to the submit button.

    Args:
        widget: The button to style
        enabled: Whether the form can be submitted
    """
    widget.setStyleSheet(StyleSheets.get_submit_button_style(enabled))

    # Force style refresh
    widget.style().unpolish(widget)
    widget.style().polish(widget)
