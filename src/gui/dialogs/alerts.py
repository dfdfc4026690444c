"""
Alert dialogs for the Sign-Up Form GUI.

This module provides the alert surface shown after a successful submission
and the dialog used to report application errors to the user.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject
from PySide6.QtWidgets import QMessageBox, QWidget

from core.error_handler import get_error_handler
from core.errors import BaseAppError, ErrorSeverity

CONFIRM_BUTTON_TEXT = "OK"


class AlertPresenter(QObject):
    """
    Presents modal alerts on behalf of the form window.

    Callers do not consume any result; the dialogs only acknowledge.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        """
        Initialize the alert presenter.

        Args:
            parent: Parent widget for the dialogs (typically the main window)
        """
        super().__init__(parent)
        self._parent_widget = parent
        self._logger = logging.getLogger(__name__)

    def show_alert(self, title: str, message: str | None = None) -> None:
        """
        Show a modal alert with a single confirm button.

        Args:
            title: Alert title
            message: Optional body text
        """
        msg_box = QMessageBox(self._parent_widget)
        msg_box.setWindowTitle(title)
        msg_box.setText(title)
        if message:
            msg_box.setInformativeText(message)
        msg_box.setIcon(QMessageBox.Icon.Information)
        msg_box.addButton(CONFIRM_BUTTON_TEXT, QMessageBox.ButtonRole.AcceptRole)

        self._logger.debug(f"Showing alert '{title}'")
        msg_box.exec()

    def show_error(self, app_error: BaseAppError) -> None:
        """
        Show an application error.

        Args:
            app_error: The error to display
        """
        icon_map = {
            ErrorSeverity.LOW: QMessageBox.Icon.Information,
            ErrorSeverity.MEDIUM: QMessageBox.Icon.Warning,
            ErrorSeverity.HIGH: QMessageBox.Icon.Critical,
            ErrorSeverity.CRITICAL: QMessageBox.Icon.Critical,
        }

        msg_box = QMessageBox(self._parent_widget)
        msg_box.setWindowTitle("Error")
        msg_box.setText(app_error.user_message)
        msg_box.setIcon(icon_map.get(app_error.severity, QMessageBox.Icon.Warning))
        if app_error.technical_message:
            msg_box.setDetailedText(get_error_handler().to_user_message(app_error))
        msg_box.addButton(CONFIRM_BUTTON_TEXT, QMessageBox.ButtonRole.AcceptRole)

        self._logger.debug(f"Showing error dialog for {app_error.code.value}")
        msg_box.exec()
