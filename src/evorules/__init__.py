"""
evorules - Genetic Algorithm Search for Association Rules.

This module evolves association rules X -> Y over a fixed item universe,
ranking candidates by a weighted combination of support and confidence
measured on a transaction dataset.
"""

from src.evorules.core import (
    EvolutionError,
    InvalidConfiguration,
    DatasetError,
    EmptyDataset,
    UnknownItem,
    DegenerateUniverse,
    RetryLimitExceeded,
    EvolutionConfig,
    EvolutionParameters,
    FitnessConfig,
    LoggingConfig,
    create_config,
    create_default_config,
    create_test_config,
    Item,
    ItemUniverse,
    DEFAULT_UNIVERSE,
    GeneRole,
    RuleChromosome,
    is_valid_genes,
    Population,
    Individual,
    RuleScore,
    GenerationStatistics,
    GeneticAlgorithmEngine,
    EngineState,
    EvolutionResult
)
from src.evorules.data import TransactionDataset, load_sample_dataset
from src.evorules.fitness import FitnessFunction, RuleMetrics, SupportConfidenceFitness

__version__ = "1.0.0"

__all__ = [
    # Errors
    "EvolutionError",
    "InvalidConfiguration",
    "DatasetError",
    "EmptyDataset",
    "UnknownItem",
    "DegenerateUniverse",
    "RetryLimitExceeded",
    # Configuration
    "EvolutionConfig",
    "EvolutionParameters",
    "FitnessConfig",
    "LoggingConfig",
    "create_config",
    "create_default_config",
    "create_test_config",
    # Items and chromosomes
    "Item",
    "ItemUniverse",
    "DEFAULT_UNIVERSE",
    "GeneRole",
    "RuleChromosome",
    "is_valid_genes",
    # Population
    "Population",
    "Individual",
    "RuleScore",
    "GenerationStatistics",
    # Engine
    "GeneticAlgorithmEngine",
    "EngineState",
    "EvolutionResult",
    # Data
    "TransactionDataset",
    "load_sample_dataset",
    # Fitness
    "FitnessFunction",
    "RuleMetrics",
    "SupportConfidenceFitness",
]
