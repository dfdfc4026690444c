"""
Main window for the Sign-Up Form GUI application.

This module contains the SignUpWindow class which hosts the form widget,
connects its edits to the form controller and reflects the controller's
results back onto the widgets.
"""

import logging
from collections.abc import Callable
from datetime import date

from PySide6.QtCore import QDate
from PySide6.QtGui import QCloseEvent, QShowEvent
from PySide6.QtWidgets import QMainWindow

from core.config_manager import ConfigManager
from core.form_state import FormState
from core.form_validators import FormField, ValidationResult
from gui.dialogs.alerts import AlertPresenter
from gui.validation.form_controller import SignUpFormController
from gui.widgets.sign_up_form_ui import SignUpFormUI

WINDOW_TITLE = "Sign Up"
SUBMITTED_ALERT_TITLE = "Complete"


class SignUpWindow(QMainWindow):
    """
    Main application window.

    Presents the sign-up form; the controller owns all form state. Closing
    the window discards the entered values, so showing it again starts over.
    """

    def __init__(
        self,
        config_manager: ConfigManager | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """
        Initialize the main window.

        Args:
            config_manager: Source of validation rules and window size
            today: Clock used for age checks and the default birthday
        """
        super().__init__()
        self._logger = logging.getLogger(__name__)

        self.config_manager = config_manager or ConfigManager()
        self._today = today or date.today
        self._closed = False

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(self.config_manager.get("window_width"), self.config_manager.get("window_height"))

        self.ui = SignUpFormUI(today=self._today)
        self.setCentralWidget(self.ui)

        self.alert_presenter = AlertPresenter(self)
        self.controller = SignUpFormController(
            rules=self.config_manager.validation_rules(),
            today=self._today,
            parent=self,
        )

        self._connect_signals()
        self.controller.start()

    def _connect_signals(self) -> None:
        """Connect UI signals to the controller and the controller back to the UI."""
        # Edits into the controller
        self.ui.email_input.textChanged.connect(self.controller.set_email)
        self.ui.password_input.textChanged.connect(self.controller.set_password)
        self.ui.phone_input.textChanged.connect(self.controller.set_phone)
        self.ui.birthday_input.dateChanged.connect(self._on_birthday_changed)
        self.ui.submit_button.clicked.connect(self.on_submit_clicked)

        # Results back into the UI
        self.controller.fieldValidated.connect(self._on_field_validated)
        self.controller.formStateChanged.connect(self._on_form_state_changed)
        self.controller.submittableChanged.connect(self.ui.set_submittable)
        self.controller.submitted.connect(self._on_submitted)

    def _on_birthday_changed(self, value: QDate) -> None:
        self.controller.set_birthday(value)

    def _on_field_validated(self, key: str, result: ValidationResult) -> None:
        form_field = FormField(key)
        if form_field is FormField.BIRTHDAY:
            self.ui.show_birthday(self.controller.value(FormField.BIRTHDAY))
        self.ui.show_result(form_field, result)

    def _on_form_state_changed(self, state: FormState) -> None:
        self.ui.show_phase(state.phase)

    def on_submit_clicked(self) -> None:
        """Handle submit button click."""
        self.controller.submit()

    def _on_submitted(self) -> None:
        self.alert_presenter.show_alert(SUBMITTED_ALERT_TITLE)

    def reset_form(self) -> None:
        """Clear the inputs and return the controller to its defaults."""
        self.ui.clear_inputs()
        self.controller.reset()
        self._logger.debug("Sign-up form reset")

    def showEvent(self, event: QShowEvent) -> None:
        """Handle window show event."""
        if self._closed:
            self._closed = False
            self.reset_form()
        else:
            self.ui.refresh_date_range()

        super().showEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle window close event."""
        self._closed = True
        self.config_manager.set("window_width", self.width())
        self.config_manager.set("window_height", self.height())

        super().closeEvent(event)
