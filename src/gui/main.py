"""
Main entry point for the Sign-Up Form GUI application.
"""

import sys

from PySide6.QtWidgets import QApplication

from core.config_manager import ConfigManager
from core.error_handler import init_logging, setup_error_handling
from gui.sign_up_window import SignUpWindow


def main() -> int:
    """Main application entry point."""
    app = QApplication(sys.argv)

    config_manager = ConfigManager()
    init_logging(config_manager.log_level())
    error_handler = setup_error_handling()

    window = SignUpWindow(config_manager)
    error_handler.errorOccurred.connect(window.alert_presenter.show_error)
    window.show()

    try:
        return app.exec()
    finally:
        error_handler.restore_hooks()


if __name__ == "__main__":
    raise SystemExit(main())
