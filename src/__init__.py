"""
evorules - Source Package

This package contains the application settings and the evorules genetic
algorithm for association rule search.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__"
]
