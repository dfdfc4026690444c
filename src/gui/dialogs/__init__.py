"""
Dialog windows for the Sign-Up Form application.

This module contains dialog windows and modal interfaces.
"""

from .alerts import AlertPresenter

__all__ = ["AlertPresenter"]
