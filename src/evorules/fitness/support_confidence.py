"""
Support/confidence fitness for association rules.

The fitness of a rule X -> Y is a weighted sum of its support (how often X
and Y occur together) and its confidence (how often Y follows X).
"""

from typing import Dict, Any, Optional

from src.evorules.core.chromosome import RuleChromosome
from src.evorules.core.config import FitnessConfig
from src.evorules.core.exceptions import InvalidConfiguration
from src.evorules.core.population import Individual, RuleScore
from src.evorules.data.transactions import TransactionDataset
from src.evorules.fitness.base import FitnessFunction, RuleMetrics


class SupportConfidenceFitness(FitnessFunction):
    """
    Linear combination of rule support and confidence.

    Confidence is defined as 0 when no transaction contains the antecedent,
    treating an unobserved antecedent as having no predictive value.
    """

    def __init__(
        self,
        support_weight: float = 0.5,
        confidence_weight: float = 0.5,
        config: Optional[Dict[str, Any]] = None
    ):
        super().__init__(config)
        weights = {"support_weight": support_weight, "confidence_weight": confidence_weight}
        if support_weight < 0 or confidence_weight < 0:
            raise InvalidConfiguration("Fitness weights must be non-negative", details=weights)
        # Support and confidence lie in [0, 1]; the weights keep fitness there too
        if support_weight + confidence_weight > 1.0 + 1e-9:
            raise InvalidConfiguration(
                f"Fitness weights sum to {support_weight + confidence_weight}, above 1.0",
                details=weights
            )
        self.support_weight = support_weight
        self.confidence_weight = confidence_weight

    @classmethod
    def from_config(cls, config: FitnessConfig) -> "SupportConfidenceFitness":
        return cls(
            support_weight=config.support_weight,
            confidence_weight=config.confidence_weight,
            config=config.model_dump()
        )

    def calculate_metrics(self, chromosome: RuleChromosome, dataset: TransactionDataset) -> RuleMetrics:
        """Compute support, confidence, fitness and lift of a rule."""
        antecedent = chromosome.antecedent_indices
        consequent = chromosome.consequent_indices

        total = len(dataset)
        rule_count = dataset.count_containing(antecedent + consequent)
        antecedent_count = dataset.count_containing(antecedent)
        consequent_count = dataset.count_containing(consequent)

        support = rule_count / total
        confidence = rule_count / antecedent_count if antecedent_count > 0 else 0.0
        fitness = self.support_weight * support + self.confidence_weight * confidence

        consequent_support = consequent_count / total
        lift = confidence / consequent_support if consequent_support > 0 else 0.0

        return RuleMetrics(
            support=support,
            confidence=confidence,
            fitness=fitness,
            lift=lift,
            rule_count=rule_count,
            antecedent_count=antecedent_count,
            consequent_count=consequent_count,
            details={
                "transactions": total,
                "support_weight": self.support_weight,
                "confidence_weight": self.confidence_weight
            }
        )

    def evaluate(self, individual: Individual, dataset: TransactionDataset) -> float:
        """Score the individual and attach a fresh RuleScore to it."""
        metrics = self.calculate_metrics(individual.chromosome, dataset)
        individual.update_score(RuleScore(
            support=metrics.support,
            confidence=metrics.confidence,
            fitness=metrics.fitness,
            lift=metrics.lift
        ))
        return metrics.fitness
