"""
Evolution Core Module - Genetic Algorithm Components.

This module contains the core components of the association rule genetic
algorithm, including configuration, item universe, chromosome representation,
population management and the main evolution engine.
"""

from src.evorules.core.exceptions import (
    EvolutionError,
    InvalidConfiguration,
    DatasetError,
    EmptyDataset,
    UnknownItem,
    DegenerateUniverse,
    RetryLimitExceeded
)

from src.evorules.core.config import (
    EvolutionConfig,
    EvolutionParameters,
    FitnessConfig,
    LoggingConfig,
    create_config,
    create_default_config,
    create_test_config
)

from src.evorules.core.items import (
    Item,
    ItemUniverse,
    DEFAULT_UNIVERSE
)

from src.evorules.core.chromosome import (
    GeneRole,
    RuleChromosome,
    is_valid_genes
)

from src.evorules.core.population import (
    Population,
    Individual,
    RuleScore,
    GenerationStatistics
)

from src.evorules.core.engine import (
    GeneticAlgorithmEngine,
    EngineState,
    EvolutionResult
)

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

    # Items
    "Item",
    "ItemUniverse",
    "DEFAULT_UNIVERSE",

    # Chromosome representation
    "GeneRole",
    "RuleChromosome",
    "is_valid_genes",

    # Population management
    "Population",
    "Individual",
    "RuleScore",
    "GenerationStatistics",

    # Engine
    "GeneticAlgorithmEngine",
    "EngineState",
    "EvolutionResult"
]
