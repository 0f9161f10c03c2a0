"""
Fitness functions for association rule evaluation.

This module provides the base fitness interface and the weighted
support/confidence fitness used by the evolution engine.
"""

from src.evorules.fitness.base import (
    FitnessFunction,
    RuleMetrics
)

from src.evorules.fitness.support_confidence import (
    SupportConfidenceFitness
)

__all__ = [
    # Base classes
    "FitnessFunction",
    "RuleMetrics",

    # Support / confidence
    "SupportConfidenceFitness",
]
