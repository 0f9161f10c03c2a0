"""
Core functionality for the evorules application.

This package contains the application settings shared by the command line
entry point and the tests.
"""

from src.core.config import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
]
