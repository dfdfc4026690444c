"""
UI setup and layout for the sign-up form.

This module builds the form's widgets and exposes small setters the window
uses to reflect validation results, separating layout concerns from the
validation logic.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from PySide6.QtCore import QDate, Qt
from PySide6.QtWidgets import (
    QDateEdit,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.form_state import FormPhase
from core.form_validators import FormField, ValidationResult, format_birthday
from gui.utils.styling import StyleSheets, apply_message_style, apply_submit_button_style

FIELD_SPACING = 20
MESSAGE_SPACING = 4

EDITING_TOOLTIP = "Available once every field is valid"
SUBMITTED_TOOLTIP = "This form has already been submitted"


def _to_qdate(value: date) -> QDate:
    return QDate(value.year, value.month, value.day)


class SignUpFormUI(QWidget):
    """
    Sign-up form widget.

    Holds the email, password and phone inputs with a message label under
    each, the birthday info label and date editor with their message label,
    and the submit button.
    """

    def __init__(self, today: Callable[[], date] | None = None, parent: QWidget | None = None) -> None:
        """
        Initialize the form widget.

        Args:
            today: Clock giving the latest selectable birthday
            parent: Parent widget
        """
        super().__init__(parent)
        self._today = today or date.today
        self._message_labels: dict[FormField, QLabel] = {}
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the complete user interface."""
        self.setObjectName("signUpForm")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(30, 30, 30, 30)
        layout.setSpacing(0)

        self.email_input = self._create_line_edit("Enter your email")
        self.password_input = self._create_line_edit("Enter your password")
        self.password_input.setEchoMode(QLineEdit.EchoMode.Password)
        self.phone_input = self._create_line_edit("Enter your phone number")
        self.phone_input.setInputMethodHints(Qt.InputMethodHint.ImhDigitsOnly)

        for form_field, line_edit in (
            (FormField.EMAIL, self.email_input),
            (FormField.PASSWORD, self.password_input),
            (FormField.PHONE, self.phone_input),
        ):
            layout.addWidget(line_edit)
            layout.addSpacing(MESSAGE_SPACING)
            layout.addWidget(self._create_message_label(form_field))
            layout.addSpacing(FIELD_SPACING)

        self.birthday_info_label = QLabel()
        self.birthday_info_label.setObjectName("birthdayInfoLabel")
        layout.addWidget(self.birthday_info_label)
        layout.addSpacing(8)

        self.birthday_input = QDateEdit()
        self.birthday_input.setObjectName("birthdayInput")
        self.birthday_input.setCalendarPopup(True)
        self.birthday_input.setDisplayFormat("yyyy-MM-dd")
        self.refresh_date_range()
        self.birthday_input.setDate(_to_qdate(self._today()))
        layout.addWidget(self.birthday_input)
        layout.addSpacing(MESSAGE_SPACING)
        layout.addWidget(self._create_message_label(FormField.BIRTHDAY))
        layout.addSpacing(FIELD_SPACING)

        self.submit_button = QPushButton("Sign Up")
        self.submit_button.setObjectName("submitButton")
        self.submit_button.setToolTip(EDITING_TOOLTIP)
        layout.addWidget(self.submit_button)
        self.set_submittable(False)

        layout.addStretch()

    def _create_line_edit(self, placeholder: str) -> QLineEdit:
        line_edit = QLineEdit()
        line_edit.setPlaceholderText(placeholder)
        line_edit.setStyleSheet(StyleSheets.get_input_style())
        return line_edit

    def _create_message_label(self, form_field: FormField) -> QLabel:
        label = QLabel()
        label.setObjectName(f"{form_field.value}MessageLabel")
        label.setWordWrap(True)
        self._message_labels[form_field] = label
        return label

    def message_label(self, form_field: FormField) -> QLabel:
        """Return the label showing the message for ``form_field``."""
        return self._message_labels[form_field]

    def show_result(self, form_field: FormField, result: ValidationResult) -> None:
        """Show a field's message in blue when valid and red when not."""
        label = self._message_labels[form_field]
        label.setText(result.message)
        apply_message_style(label, result.valid)

    def show_birthday(self, value: date) -> None:
        """Show the selected birthday in the info label."""
        self.birthday_info_label.setText(format_birthday(value))
        apply_message_style(self.birthday_info_label, None)

    def set_submittable(self, submittable: bool) -> None:
        """Recolour and enable or disable the submit button."""
        self.submit_button.setEnabled(submittable)
        apply_submit_button_style(self.submit_button, submittable)


    def show_phase(self, phase: FormPhase) -> None:
        """Explain through the submit button's tooltip why it may be disabled."""
        self.submit_button.setToolTip(SUBMITTED_TOOLTIP if phase is FormPhase.SUBMITTED else EDITING_TOOLTIP)

    def refresh_date_range(self) -> None:
        """Move the latest selectable birthday to the current date."""
        self.birthday_input.setMaximumDate(_to_qdate(self._today()))

    def clear_inputs(self) -> None:
        """Empty the text fields and put the birthday back on today, without emitting edits."""
        self.refresh_date_range()

        inputs = (self.email_input, self.password_input, self.phone_input, self.birthday_input)
        # Block signals so the controller is not fed the intermediate values
        for widget in inputs:
            widget.blockSignals(True)

        try:
            self.email_input.clear()
            self.password_input.clear()
            self.phone_input.clear()
            self.birthday_input.setDate(_to_qdate(self._today()))
        finally:
            for widget in inputs:
                widget.blockSignals(False)
