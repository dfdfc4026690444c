"""
Real-time form validation for the Sign-Up Form GUI.

This package wires the pure field validators to Qt signals so every edit
is validated immediately and the overall submittability is kept current.
"""

from .form_controller import SignUpFormController

__all__ = [
    "SignUpFormController",
]
