"""
Real-time validation controller for the sign-up form.

This module owns the current field values and the FormState snapshot. Each
edit re-runs the matching validator and pushes the result, the new snapshot
and any change in submittability to the presentation layer through Qt
signals, all within the same event-loop turn.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Any

from PySide6.QtCore import QDate, QObject, Signal, Slot

from core.form_state import FormPhase, FormState
from core.form_validators import FormField, ValidationResult, ValidationRules


class SignUpFormController(QObject):
    """
    Single owner of the sign-up form state.

    The presentation layer feeds raw edits into the ``set_*`` slots and
    listens to the signals below; it never mutates the state directly.
    """

    # Signals
    fieldValidated = Signal(str, object)  # key, ValidationResult
    formStateChanged = Signal(object)  # FormState
    submittableChanged = Signal(bool)  # submittable
    submitted = Signal()
    submitIgnored = Signal(str)  # reason

    def __init__(
        self,
        rules: ValidationRules | None = None,
        today: Callable[[], date] | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._logger = logging.getLogger(__name__)
        self._rules = rules or ValidationRules()
        self._today = today or date.today
        self._values: dict[FormField, Any] = self._default_values()
        self._state = FormState()
        self._submittable = False

    def _default_values(self) -> dict[FormField, Any]:
        return {
            FormField.EMAIL: "",
            FormField.PASSWORD: "",
            FormField.PHONE: "",
            FormField.BIRTHDAY: self._today(),
        }

    @property
    def state(self) -> FormState:
        """Current FormState snapshot."""
        return self._state

    @property
    def rules(self) -> ValidationRules:
        return self._rules

    def value(self, key: FormField | str) -> Any:
        """Return the current raw value of a field."""
        return self._values[FormField.from_key(key)]

    def result(self, key: FormField | str) -> ValidationResult | None:
        """Return the latest result for a field, or None before its first edit."""
        return self._state.result(FormField.from_key(key))

    def is_submittable(self) -> bool:
        return self._submittable

    def start(self) -> None:
        """Validate every current value once so the combined state is defined."""
        for form_field in FormField:
            self.update_field(form_field, self._values[form_field])

    def update_field(self, key: FormField | str, value: Any) -> ValidationResult:
        """
        Store a new value for a field and propagate its validation result.

        Args:
            key: Field or field key
            value: ``str`` for text fields, ``date`` or ``QDate`` for the birthday

        Returns:
            The fresh ValidationResult

        Raises:
            ValidationError: If the key is unknown or the value has the wrong type
        """
        form_field = FormField.from_key(key)
        if isinstance(value, QDate):
            value = value.toPython()

        result = self._rules.validate(form_field, value, self._today())

        self._values[form_field] = value
        self._state = self._state.with_result(form_field, result)
        self._logger.debug(f"Field '{form_field.value}' validated: valid={result.valid}")

        self.fieldValidated.emit(form_field.value, result)
        self.formStateChanged.emit(self._state)
        self._update_submittable()

        return result

    @Slot(str)
    def set_email(self, email: str) -> None:
        self.update_field(FormField.EMAIL, email)

    @Slot(str)
    def set_password(self, password: str) -> None:
        self.update_field(FormField.PASSWORD, password)

    @Slot(str)
    def set_phone(self, phone: str) -> None:
        self.update_field(FormField.PHONE, phone)

    @Slot(QDate)
    def set_birthday(self, birthday: date | QDate) -> None:
        self.update_field(FormField.BIRTHDAY, birthday)

    @Slot()
    def submit(self) -> bool:
        """
        Submit the form.

        Moves EDITING to SUBMITTED when every field is valid. In any other
        case the call changes nothing and emits ``submitIgnored``.

        Returns:
            True if the form was submitted by this call
        """
        if self._state.phase is FormPhase.SUBMITTED:
            return self._ignore_submit("Form was already submitted")

        if not self._state.all_valid:
            return self._ignore_submit("Form has invalid fields")

        self._state = self._state.with_phase(FormPhase.SUBMITTED)
        self._logger.info("Sign-up form submitted")

        self.formStateChanged.emit(self._state)
        self._update_submittable()
        self.submitted.emit()
        return True

    def reset(self) -> None:
        """Return to default values and the EDITING phase."""
        self._values = self._default_values()
        self._state = FormState()
        self._update_submittable()
        self.start()

    def _ignore_submit(self, reason: str) -> bool:
        self._logger.debug(f"Submit ignored: {reason}")
        self.submitIgnored.emit(reason)
        return False

    def _update_submittable(self) -> None:
        """Recompute submittability and emit only when it flips."""
        submittable = self._state.phase is FormPhase.EDITING and self._state.all_valid
        if submittable != self._submittable:
            self._submittable = submittable
            self.submittableChanged.emit(submittable)
