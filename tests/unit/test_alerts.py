"""
Tests for AlertPresenter.

Tests cover:
- Submission alert with and without a message
- Error dialog icon mapping based on severity
"""

from unittest.mock import patch

import pytest
from PySide6.QtWidgets import QMessageBox, QWidget

from core.errors import ErrorCode, ErrorSeverity, SystemError
from gui.dialogs.alerts import CONFIRM_BUTTON_TEXT, AlertPresenter


@pytest.fixture
def presenter(qapp):
    return AlertPresenter()


class TestShowAlert:
    """Test the alert surface."""

    @patch("gui.dialogs.alerts.QMessageBox")
    def test_alert_without_message(self, mock_message_box, presenter):
        msg_box = mock_message_box.return_value

        result = presenter.show_alert("Complete")

        assert result is None
        msg_box.setWindowTitle.assert_called_once_with("Complete")
        msg_box.setText.assert_called_once_with("Complete")
        msg_box.setInformativeText.assert_not_called()
        msg_box.addButton.assert_called_once_with(CONFIRM_BUTTON_TEXT, mock_message_box.ButtonRole.AcceptRole)
        msg_box.exec.assert_called_once()

    @patch("gui.dialogs.alerts.QMessageBox")
    def test_alert_with_message(self, mock_message_box, presenter):
        msg_box = mock_message_box.return_value

        presenter.show_alert("Complete", "Welcome aboard")

        msg_box.setText.assert_called_once_with("Complete")
        msg_box.setInformativeText.assert_called_once_with("Welcome aboard")

    @patch("gui.dialogs.alerts.QMessageBox")
    def test_alert_uses_parent(self, mock_message_box, qapp):
        parent = QWidget()
        presenter = AlertPresenter(parent)

        presenter.show_alert("Complete")

        mock_message_box.assert_called_once_with(parent)


class TestShowError:
    """Test the error dialog."""

    @pytest.mark.parametrize(
        ("severity", "icon"),
        [
            (ErrorSeverity.LOW, QMessageBox.Icon.Information),
            (ErrorSeverity.MEDIUM, QMessageBox.Icon.Warning),
            (ErrorSeverity.HIGH, QMessageBox.Icon.Critical),
            (ErrorSeverity.CRITICAL, QMessageBox.Icon.Critical),
        ],
    )
    def test_icon_follows_severity(self, presenter, severity, icon):
        error = SystemError(code=ErrorCode.UNKNOWN, user_message="Something broke", severity=severity)

        with patch.object(QMessageBox, "exec") as mock_exec, patch.object(QMessageBox, "setIcon") as mock_set_icon:
            presenter.show_error(error)

        mock_set_icon.assert_called_once_with(icon)
        mock_exec.assert_called_once()

    @patch("gui.dialogs.alerts.QMessageBox")
    def test_error_details(self, mock_message_box, presenter):
        msg_box = mock_message_box.return_value
        error = SystemError(
            code=ErrorCode.OS_ERROR,
            user_message="Settings could not be read",
            technical_message="OSError: bad file",
        )

        presenter.show_error(error)

        msg_box.setText.assert_called_once_with("Settings could not be read")
        detailed = msg_box.setDetailedText.call_args.args[0]
        assert "OSError: bad file" in detailed
