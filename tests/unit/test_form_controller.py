"""
Tests for SignUpFormController.

Tests cover:
- Warm-up with default values
- Per-field validation signals
- Submittability tracking
- Submit transitions and ignored submits
- Error handling for unknown fields and wrong value types
"""

from datetime import date
from unittest.mock import Mock

import pytest
from PySide6.QtCore import QDate

from core.errors import ErrorCode, ValidationError
from core.form_state import FormPhase, FormState
from core.form_validators import FormField, ValidationResult, ValidationRules
from gui.validation.form_controller import SignUpFormController

VALID_EMAIL = "a@a.aa"
VALID_PASSWORD = "password1"
VALID_PHONE = "01012345678"


@pytest.fixture
def controller(qapp, clock):
    """Controller started with the default values."""
    controller = SignUpFormController(today=clock)
    controller.start()
    return controller


def fill_valid(controller: SignUpFormController, today: date) -> None:
    controller.set_email(VALID_EMAIL)
    controller.set_password(VALID_PASSWORD)
    controller.set_phone(VALID_PHONE)
    controller.set_birthday(date(today.year - 20, 5, 1))


class TestInitialization:
    """Test controller defaults."""

    def test_state_is_cold_before_start(self, qapp, clock):
        controller = SignUpFormController(today=clock)

        assert controller.state.is_warm is False
        assert controller.is_submittable() is False
        assert controller.result(FormField.EMAIL) is None

    def test_default_values(self, qapp, clock, today):
        controller = SignUpFormController(today=clock)

        assert controller.value(FormField.EMAIL) == ""
        assert controller.value("password") == ""
        assert controller.value(FormField.PHONE) == ""
        assert controller.value(FormField.BIRTHDAY) == today

    def test_start_validates_every_field(self, qapp, clock):
        controller = SignUpFormController(today=clock)
        validated = Mock()
        controller.fieldValidated.connect(validated)

        controller.start()

        keys = [call.args[0] for call in validated.call_args_list]
        assert keys == ["email", "password", "phone", "birthday"]
        assert controller.state.is_warm is True
        assert controller.state.all_valid is False
        assert controller.is_submittable() is False

    def test_default_rules(self, qapp):
        assert SignUpFormController().rules == ValidationRules()


class TestFieldUpdates:
    """Test that each edit is validated and published."""

    def test_field_validated_signal(self, controller, qtbot):
        with qtbot.waitSignal(controller.fieldValidated) as blocker:
            controller.set_email("not-an-email")

        key, result = blocker.args
        assert key == "email"
        assert isinstance(result, ValidationResult)
        assert result.valid is False

    def test_form_state_changed_signal(self, controller, qtbot):
        with qtbot.waitSignal(controller.formStateChanged) as blocker:
            controller.set_password(VALID_PASSWORD)

        state = blocker.args[0]
        assert isinstance(state, FormState)
        assert state.result(FormField.PASSWORD).valid is True
        assert state is controller.state

    def test_phone_messages(self, controller):
        assert controller.update_field("phone", "010-1234").message == "Enter digits only."
        assert controller.update_field("phone", "010").message == "Enter at least 10 digits."
        assert controller.update_field("phone", VALID_PHONE).message == "Valid phone number."

    def test_value_is_stored(self, controller):
        controller.set_email(VALID_EMAIL)

        assert controller.value(FormField.EMAIL) == VALID_EMAIL

    def test_birthday_accepts_qdate(self, controller, today):
        controller.set_birthday(QDate(today.year - 17, today.month, today.day))

        assert controller.value(FormField.BIRTHDAY) == date(today.year - 17, today.month, today.day)
        assert controller.result(FormField.BIRTHDAY).valid is True

    def test_birthday_sixteen_years_is_invalid(self, controller, today):
        controller.set_birthday(date(today.year - 16, today.month, today.day))

        assert controller.result("birthday").valid is False

    def test_custom_rules(self, qapp, clock):
        controller = SignUpFormController(rules=ValidationRules(min_password_length=4), today=clock)

        assert controller.update_field(FormField.PASSWORD, "abcd").valid is True

    def test_unknown_field_raises(self, controller):
        with pytest.raises(ValidationError) as exc_info:
            controller.update_field("nickname", "bob")

        assert exc_info.value.code == ErrorCode.UNKNOWN_FIELD

    def test_wrong_type_leaves_state_untouched(self, controller):
        before = controller.state

        with pytest.raises(ValidationError):
            controller.update_field(FormField.EMAIL, None)

        assert controller.state is before
        assert controller.value(FormField.EMAIL) == ""


class TestSubmittability:
    """Test that the overall flag tracks every field."""

    def test_becomes_submittable_when_all_valid(self, controller, today):
        changes = Mock()
        controller.submittableChanged.connect(changes)

        fill_valid(controller, today)

        assert controller.is_submittable() is True
        assert controller.state.all_valid is True
        changes.assert_called_once_with(True)

    @pytest.mark.parametrize(
        ("key", "bad_value"),
        [
            ("email", "a@a"),
            ("password", "short"),
            ("phone", "010"),
            ("birthday", None),
        ],
    )
    def test_any_invalid_field_flips_back(self, controller, today, key, bad_value):
        fill_valid(controller, today)
        if bad_value is None:
            bad_value = today

        changes = Mock()
        controller.submittableChanged.connect(changes)
        controller.update_field(key, bad_value)

        assert controller.is_submittable() is False
        changes.assert_called_once_with(False)

    def test_only_emits_on_change(self, controller, today):
        fill_valid(controller, today)
        changes = Mock()
        controller.submittableChanged.connect(changes)

        controller.set_email("b@b.bb")
        controller.set_password("another-password")

        changes.assert_not_called()


class TestSubmit:
    """Test the EDITING to SUBMITTED transition."""

    def test_submit_when_invalid_is_ignored(self, controller):
        submitted = Mock()
        ignored = Mock()
        controller.submitted.connect(submitted)
        controller.submitIgnored.connect(ignored)

        assert controller.submit() is False

        submitted.assert_not_called()
        ignored.assert_called_once_with("Form has invalid fields")
        assert controller.state.phase is FormPhase.EDITING

    def test_submit_before_start_is_ignored(self, qapp, clock):
        controller = SignUpFormController(today=clock)

        assert controller.submit() is False
        assert controller.state.phase is FormPhase.EDITING

    def test_submit_when_valid(self, controller, today, qtbot):
        fill_valid(controller, today)

        with qtbot.waitSignal(controller.submitted):
            assert controller.submit() is True

        assert controller.state.phase is FormPhase.SUBMITTED
        assert controller.is_submittable() is False

    def test_second_submit_is_ignored(self, controller, today):
        fill_valid(controller, today)
        submitted = Mock()
        ignored = Mock()
        controller.submitted.connect(submitted)
        controller.submitIgnored.connect(ignored)

        controller.submit()
        assert controller.submit() is False

        submitted.assert_called_once()
        ignored.assert_called_once_with("Form was already submitted")

    def test_edits_after_submit_keep_validating(self, controller, today):
        fill_valid(controller, today)
        controller.submit()

        result = controller.update_field(FormField.EMAIL, "broken")

        assert result.valid is False
        assert controller.state.phase is FormPhase.SUBMITTED
        assert controller.is_submittable() is False

    def test_reset_returns_to_editing(self, controller, today):
        fill_valid(controller, today)
        controller.submit()

        controller.reset()

        assert controller.state.phase is FormPhase.EDITING
        assert controller.state.is_warm is True
        assert controller.value(FormField.EMAIL) == ""
        assert controller.value(FormField.BIRTHDAY) == today
        assert controller.is_submittable() is False
