"""
Reusable GUI widgets for the Sign-Up Form application.

This module contains the widgets that make up the sign-up screen.
"""

from .sign_up_form_ui import SignUpFormUI

__all__ = ["SignUpFormUI"]
