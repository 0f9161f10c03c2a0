"""
Evolution Configuration Module.

This module defines configuration classes for the association rule genetic
algorithm, including evolution parameters, fitness weights and logging.
"""

from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, Field, ConfigDict, ValidationError

from src.evorules.core.exceptions import InvalidConfiguration


class EvolutionParameters(BaseModel):
    """Parameters controlling the genetic algorithm evolution process."""

    model_config = ConfigDict(validate_assignment=True)

    # Population parameters
    population_size: int = Field(
        default=100,
        ge=1,
        description="Number of individuals in the population"
    )
    generations: int = Field(
        default=100,
        ge=1,
        description="Number of generations to evolve"
    )

    # Genetic operators
    mutation_rate: float = Field(
        default=0.05,
        ge=0.0,
        le=1.0,
        description="Probability of mutation for each gene"
    )
    crossover_rate: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Probability of crossover between parents"
    )

    # Selection parameters
    elite_count: int = Field(
        default=1,
        ge=0,
        description="Number of best individuals copied unchanged into the next generation"
    )
    tournament_size: int = Field(
        default=3,
        ge=1,
        description="Number of individuals drawn per tournament"
    )

    max_sampling_attempts: int = Field(
        default=1000,
        ge=1,
        description="Attempts allowed to draw a valid rule or admit an offspring"
    )


class FitnessConfig(BaseModel):
    """Weights of the linear support/confidence fitness."""

    model_config = ConfigDict(validate_assignment=True)

    support_weight: float = Field(
        default=0.5,
        ge=0.0,
        description="Weight on rule support"
    )
    confidence_weight: float = Field(
        default=0.5,
        ge=0.0,
        description="Weight on rule confidence"
    )

    @property
    def total_weight(self) -> float:
        return self.support_weight + self.confidence_weight


class LoggingConfig(BaseModel):
    """Configuration for logging and monitoring."""

    model_config = ConfigDict(validate_assignment=True)

    enable_logging: bool = Field(
        default=True,
        description="Enable evolution progress logging"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_interval: int = Field(
        default=10,
        ge=1,
        description="Generations between progress logs"
    )
    metrics_export: bool = Field(
        default=True,
        description="Send per-generation metrics to Logfire"
    )


class EvolutionConfig(BaseModel):
    """Main configuration class for an evolution run."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid'
    )

    # Sub-configurations
    evolution: EvolutionParameters = Field(
        default_factory=EvolutionParameters,
        description="Evolution parameters"
    )
    fitness: FitnessConfig = Field(
        default_factory=FitnessConfig,
        description="Fitness weights"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging and monitoring configuration"
    )

    random_seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducibility"
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()

    def validate_consistency(self) -> None:
        """
        Validate configuration consistency across components.

        Raises:
            InvalidConfiguration: If the options cannot describe a valid run
        """
        evolution = self.evolution

        if evolution.elite_count > evolution.population_size:
            raise InvalidConfiguration(
                f"Elite count ({evolution.elite_count}) must not exceed "
                f"population size ({evolution.population_size})",
                details={"elite_count": evolution.elite_count,
                         "population_size": evolution.population_size}
            )

        if not 1 <= evolution.tournament_size <= evolution.population_size:
            raise InvalidConfiguration(
                f"Tournament size ({evolution.tournament_size}) must be within "
                f"[1, {evolution.population_size}]",
                details={"tournament_size": evolution.tournament_size,
                         "population_size": evolution.population_size}
            )

        # Fitness must stay within [0, 1] for support and confidence in [0, 1]
        if self.fitness.total_weight > 1.0 + 1e-9:
            raise InvalidConfiguration(
                f"Fitness weights sum to {self.fitness.total_weight}, above 1.0",
                details={"support_weight": self.fitness.support_weight,
                         "confidence_weight": self.fitness.confidence_weight}
            )


_EVOLUTION_OPTIONS = set(EvolutionParameters.model_fields)
_FITNESS_OPTIONS = set(FitnessConfig.model_fields)
_LOGGING_OPTIONS = set(LoggingConfig.model_fields)


def create_config(**options: Any) -> EvolutionConfig:
    """
    Build a configuration from flat options.

    Recognized options are the fields of EvolutionParameters,
    FitnessConfig and LoggingConfig plus random_seed.

    Raises:
        InvalidConfiguration: On unknown options, out-of-range values or
            inconsistent combinations
    """
    evolution: Dict[str, Any] = {}
    fitness: Dict[str, Any] = {}
    logging_options: Dict[str, Any] = {}
    root: Dict[str, Any] = {}

    for name, value in options.items():
        if name in _EVOLUTION_OPTIONS:
            evolution[name] = value
        elif name in _FITNESS_OPTIONS:
            fitness[name] = value
        elif name in _LOGGING_OPTIONS:
            logging_options[name] = value
        elif name == "random_seed":
            root[name] = value
        else:
            raise InvalidConfiguration(f"Unknown configuration option: {name}", details={"option": name})

    try:
        config = EvolutionConfig(
            evolution=EvolutionParameters(**evolution),
            fitness=FitnessConfig(**fitness),
            logging=LoggingConfig(**logging_options),
            **root
        )
    except ValidationError as e:
        raise InvalidConfiguration(
            f"Invalid configuration: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)}
        ) from e

    config.validate_consistency()
    return config


# Convenience functions
def create_default_config() -> EvolutionConfig:
    """Create a default configuration (population 100, 100 generations)."""
    return EvolutionConfig()


def create_test_config(random_seed: int = 42) -> EvolutionConfig:
    """Create a configuration suitable for testing (smaller, faster, seeded)."""
    return EvolutionConfig(
        evolution=EvolutionParameters(
            population_size=20,
            generations=10,
            mutation_rate=0.1,
            crossover_rate=0.8,
            elite_count=2,
            tournament_size=3
        ),
        logging=LoggingConfig(
            log_interval=1,
            metrics_export=False
        ),
        random_seed=random_seed
    )
