"""
Base classes for fitness evaluation of association rules.

This module provides the abstract base class that scores an individual
against a transaction dataset, plus the detailed metrics record.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from src.evorules.core.chromosome import RuleChromosome
from src.evorules.core.population import Individual
from src.evorules.data.transactions import TransactionDataset


@dataclass
class RuleMetrics:
    """Detailed interestingness measures of one rule."""
    support: float
    confidence: float
    fitness: float
    lift: float
    rule_count: int  # transactions containing X and Y
    antecedent_count: int  # transactions containing X
    consequent_count: int  # transactions containing Y
    details: Dict[str, Any] = field(default_factory=dict)


class FitnessFunction(ABC):
    """
    Abstract base class for fitness functions.

    A fitness function is a pure function of a rule and a dataset, apart
    from writing the resulting score onto the evaluated individual.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize fitness function with optional configuration.

        Args:
            config: Configuration parameters for the fitness function
        """
        self.config = config or {}

    @abstractmethod
    def calculate_metrics(self, chromosome: RuleChromosome, dataset: TransactionDataset) -> RuleMetrics:
        """
        Calculate detailed metrics for a rule chromosome.

        Args:
            chromosome: The rule to analyze
            dataset: Transactions the rule is measured against

        Returns:
            Metrics including the fitness score
        """
        pass

    @abstractmethod
    def evaluate(self, individual: Individual, dataset: TransactionDataset) -> float:
        """
        Score an individual and store the result on it.

        Args:
            individual: The individual to evaluate
            dataset: Transactions the rule is measured against

        Returns:
            Fitness score between 0 and 1, where 1 is optimal
        """
        pass
