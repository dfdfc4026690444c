"""
Centralized error handling and logging infrastructure for the Sign-Up Form GUI.

This module provides a singleton ErrorHandler that captures, logs, and translates
exceptions into user-friendly messages while maintaining full diagnostic information.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
import traceback
from pathlib import Path
from typing import Any, ClassVar

from PySide6.QtCore import QObject, QStandardPaths, Signal

from .config import APP_NAME, APP_ORGANIZATION, DEFAULT_CONFIG
from .errors import BaseAppError, from_exception

SENSITIVE_KEYS = ("password", "token", "secret", "phone", "email", "birthday")


class ErrorHandler(QObject):
    """
    Centralized error handler with logging and user message translation.

    This singleton class provides:
    - Exception capture and normalization
    - Rotating file logging
    - User-friendly message generation
    - Qt signal emission for UI integration
    """

    # Emitted after an error has been logged, for the alert surface
    errorOccurred = Signal(object)  # BaseAppError

    _instance: ClassVar[ErrorHandler | None] = None
    _logger: ClassVar[logging.Logger | None] = None

    def __new__(cls) -> ErrorHandler:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the error handler (called only once due to singleton)."""
        if hasattr(self, "_initialized"):
            return

        super().__init__()
        self._initialized = True
        self._original_excepthook = sys.excepthook

        # File logging is set up once, on first construction
        self._setup_logging()

    def capture(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Capture and normalize an exception into a BaseAppError.

        Args:
            exception: The exception to capture
            context: Optional context information

        Returns:
            BaseAppError with normalized metadata
        """
        safe_context = self._sanitize_context(context or {})

        # Normalize through the error hierarchy
        app_error = from_exception(exception, safe_context)

        if not app_error.technical_message:
            app_error.technical_message = f"{type(exception).__name__}: {exception}"

        # Keep the traceback with the error for the log file
        if "traceback" not in app_error.context:
            tb_str = traceback.format_exc()
            if tb_str == "NoneType: None\n":
                # Not in exception context, create traceback from exception
                tb_str = f"{type(exception).__name__}: {exception}\n"
            app_error.context["traceback"] = tb_str

        return app_error

    def handle(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Handle an exception by capturing, logging, and emitting signals.

        Args:
            exception: The exception to handle
            context: Optional context information

        Returns:
            BaseAppError for further processing
        """
        # Exits and Ctrl+C are never turned into error dialogs
        if isinstance(exception, SystemExit | KeyboardInterrupt):
            raise exception

        app_error = self.capture(exception, context)

        # Full details go to the log file, the user only sees user_message
        if self._logger:
            self._logger.error(
                f"[{app_error.code.value}] {app_error.user_message}",
                extra={
                    "app_code": app_error.code.value,
                    "error_type": app_error.type.value,
                    "severity": app_error.severity.value,
                },
                exc_info=exception,
            )

        # Notify UI listeners
        self.errorOccurred.emit(app_error)

        return app_error

    def to_user_message(self, app_error: BaseAppError) -> str:
        """
        Generate a concise, user-friendly message from a BaseAppError.

        Args:
            app_error: The error to convert

        Returns:
            User-friendly message string
        """
        message = app_error.user_message
        if app_error.technical_message and app_error.technical_message != message:
            message += f"\n\nDetails: {app_error.technical_message}"
        return message

    def _setup_logging(self) -> None:
        """Set up rotating file logging in the app data directory."""
        try:
            # Per-user app data directory, e.g. ~/.local/share/SignUpForm/GUI
            app_data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)

            if not app_data_location:
                # Some platforms report no app data location
                app_data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
                app_data_path = Path(app_data_location) / APP_ORGANIZATION / APP_NAME
            else:
                app_data_path = Path(app_data_location)

            logs_dir = app_data_path / "logs"
            logs_dir.mkdir(parents=True, exist_ok=True)

            ErrorHandler._logger = logging.getLogger("signup_form_gui.errors")
            ErrorHandler._logger.setLevel(logging.DEBUG)
            ErrorHandler._logger.propagate = False

            # Avoid duplicate handlers
            if not ErrorHandler._logger.handlers:
                log_file = logs_dir / "app.log"
                file_handler = logging.handlers.RotatingFileHandler(
                    log_file,
                    maxBytes=5_242_880,  # 5MB
                    backupCount=5,
                    encoding="utf-8",
                )

                formatter = logging.Formatter(
                    "%(asctime)s | %(levelname)s | %(name)s | code=%(app_code)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
                file_handler.setFormatter(formatter)
                ErrorHandler._logger.addHandler(file_handler)

                # Warnings and errors also go to the console outside optimized runs
                if __debug__:
                    console_handler = logging.StreamHandler()
                    console_handler.setFormatter(formatter)
                    console_handler.setLevel(logging.WARNING)
                    ErrorHandler._logger.addHandler(console_handler)

        except OSError as e:
            # Read-only home or similar; keep logging to stderr
            logging.basicConfig(level=logging.ERROR)
            logging.error(f"Failed to setup error logging: {e}")

    def _sanitize_context(self, context: dict[str, Any]) -> dict[str, Any]:
        """
        Sanitize context so form values never reach the logs.

        Args:
            context: Raw context dictionary

        Returns:
            Sanitized context dictionary
        """
        safe_context: dict[str, Any] = {}

        max_items = 20

        for item_count, (key, value) in enumerate(context.items()):
            if item_count >= max_items:
                safe_context["..."] = f"({len(context) - max_items} more items truncated)"
                break

            # Field values must never reach the log file
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                safe_context[key] = "[REDACTED]"
            # Long values are truncated
            elif isinstance(value, str) and len(value) > 200:
                safe_context[key] = value[:200] + "..."
            elif isinstance(value, str):
                safe_context[key] = value
            else:
                safe_context[key] = repr(value)[:200]

        return safe_context

    def install_hooks(self) -> None:
        """Install an exception hook for unhandled exceptions."""

        def exception_hook(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: Any) -> None:
            """Handle unhandled exceptions."""
            if issubclass(exc_type, KeyboardInterrupt) or not isinstance(exc_value, Exception):
                # Ctrl+C and interpreter-level exits keep their usual behaviour
                self._original_excepthook(exc_type, exc_value, exc_traceback)
                return

            try:
                self.handle(exc_value, {"source": "sys.excepthook"})
            except Exception:
                # The handler itself failed; let Python report the original error
                self._original_excepthook(exc_type, exc_value, exc_traceback)

        sys.excepthook = exception_hook

    def restore_hooks(self) -> None:
        """Restore the original exception hook."""
        sys.excepthook = self._original_excepthook


def get_error_handler() -> ErrorHandler:
    """
    Get the global ErrorHandler instance.

    Returns:
        The singleton ErrorHandler instance
    """
    return ErrorHandler()


def setup_error_handling() -> ErrorHandler:
    """
    Set up global error handling for the application.

    This should be called once during application startup.
    """
    handler = get_error_handler()
    handler.install_hooks()
    return handler


def init_logging(level: str | None = None) -> None:
    """
    Initialize logging configuration.

    This sets up the basic logging infrastructure and should be called
    early in application startup.

    Args:
        level: Level name such as "INFO"; defaults to the configured default
    """
    # The ErrorHandler configures its own file logger on first use
    get_error_handler()

    level_name = (level or DEFAULT_CONFIG["log_level"]).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
