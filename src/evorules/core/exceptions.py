"""
Exceptions for the evorules genetic algorithm.

Every failure the engine can raise derives from EvolutionError, so callers
can catch the whole family or a single condition.
"""

from typing import Any, Dict, Optional


class EvolutionError(Exception):
    """Base exception for evolution errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidConfiguration(EvolutionError):
    """Raised when evolution parameters cannot describe a valid run."""


class DatasetError(EvolutionError):
    """Base exception for transaction dataset problems."""


class EmptyDataset(DatasetError):
    """Raised when a dataset holds no transactions (support is undefined)."""


class UnknownItem(DatasetError):
    """Raised when a transaction mentions an item outside the universe."""


class DegenerateUniverse(EvolutionError):
    """Raised when the item universe cannot hold any valid rule."""


class RetryLimitExceeded(EvolutionError):
    """Raised when a rejection-sampling loop runs out of attempts."""
