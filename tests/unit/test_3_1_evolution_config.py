"""
Unit tests for Evolution Configuration (Subtask 3.1).

Tests cover:
- Default parameters
- Field validation
- Cross-field consistency checks
- Flat option routing
"""

import pytest
from pydantic import ValidationError

from src.evorules.core.config import (
    EvolutionConfig,
    EvolutionParameters,
    FitnessConfig,
    LoggingConfig,
    create_config,
    create_default_config,
    create_test_config,
)
from src.evorules.core.exceptions import EvolutionError, InvalidConfiguration


class TestDefaults:
    """Test suite for default configuration values."""

    def test_default_config(self):
        """Test defaults: population 100, 100 generations, 0.5/0.5 weights."""
        config = create_default_config()

        assert config.evolution.population_size == 100
        assert config.evolution.generations == 100
        assert config.evolution.mutation_rate == 0.05
        assert config.evolution.crossover_rate == 0.8
        assert config.evolution.elite_count == 1
        assert config.evolution.tournament_size == 3
        assert config.fitness.support_weight == 0.5
        assert config.fitness.confidence_weight == 0.5
        assert config.random_seed is None

    def test_test_config(self):
        """Test the small seeded configuration used by tests."""
        config = create_test_config(random_seed=5)

        assert config.evolution.population_size == 20
        assert config.evolution.generations == 10
        assert config.random_seed == 5
        assert config.logging.metrics_export is False
        config.validate_consistency()

    def test_to_dict(self):
        """Test configuration dumps to nested dictionaries."""
        data = create_test_config().to_dict()

        assert data["evolution"]["population_size"] == 20
        assert data["fitness"]["support_weight"] == 0.5
        assert data["random_seed"] == 42


class TestFieldValidation:
    """Test suite for per-field validation."""

    @pytest.mark.parametrize("field,value", [
        ("population_size", 0),
        ("generations", 0),
        ("mutation_rate", 1.5),
        ("crossover_rate", -0.1),
        ("elite_count", -1),
        ("tournament_size", 0),
    ])
    def test_out_of_range_parameters(self, field, value):
        """Test out-of-range values are refused at construction."""
        with pytest.raises(ValidationError):
            EvolutionParameters(**{field: value})

    def test_validate_assignment(self):
        """Test assignments are validated too."""
        params = EvolutionParameters()
        with pytest.raises(ValidationError):
            params.mutation_rate = 2.0

    def test_negative_weight(self):
        """Test fitness weights must be non-negative."""
        with pytest.raises(ValidationError):
            FitnessConfig(support_weight=-0.5)

    def test_logging_assignment_validated(self):
        """Test a zero log interval is refused on assignment."""
        config = create_test_config()
        with pytest.raises(ValidationError):
            config.logging.log_interval = 0

        assert config.logging.log_interval == 1

    def test_logging_level_validated(self):
        """Test unknown log levels are refused."""
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="VERBOSE")

    def test_extra_fields_forbidden(self):
        """Test unknown top-level fields are refused."""
        with pytest.raises(ValidationError):
            EvolutionConfig(unknown_field=1)


class TestConsistency:
    """Test suite for cross-field consistency."""

    def test_elite_count_above_population(self):
        """Test elites cannot outnumber the population."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            create_config(population_size=5, elite_count=6, tournament_size=2)

        assert exc_info.value.details["elite_count"] == 6

    def test_elite_count_equal_population(self):
        """Test a population made entirely of elites is allowed."""
        config = create_config(population_size=5, elite_count=5, tournament_size=2)

        assert config.evolution.elite_count == 5

    def test_tournament_above_population(self):
        """Test tournaments cannot be larger than the population."""
        with pytest.raises(InvalidConfiguration):
            create_config(population_size=4, tournament_size=5, elite_count=1)

    def test_weights_above_one(self):
        """Test weights summing above 1 are refused."""
        with pytest.raises(InvalidConfiguration):
            create_config(support_weight=0.7, confidence_weight=0.7)

    def test_weights_below_one_allowed(self):
        """Test weights summing below 1 are accepted."""
        config = create_config(support_weight=0.2, confidence_weight=0.3)

        assert config.fitness.total_weight == pytest.approx(0.5)

    def test_direct_construction_checked_later(self):
        """Test inconsistent models can be built but fail validate_consistency."""
        config = EvolutionConfig(evolution=EvolutionParameters(population_size=2, tournament_size=3))

        with pytest.raises(InvalidConfiguration):
            config.validate_consistency()


class TestCreateConfig:
    """Test suite for flat option routing."""

    def test_routes_options(self, ga_test_options):
        """Test flat options land in the right sub-configuration."""
        config = create_config(support_weight=0.4, confidence_weight=0.6, **ga_test_options)

        assert config.evolution.population_size == 10
        assert config.evolution.generations == 5
        assert config.fitness.support_weight == 0.4
        assert config.random_seed == 7

    def test_unknown_option(self):
        """Test unknown option names fail fast."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            create_config(populaton_size=10)

        assert exc_info.value.details["option"] == "populaton_size"

    @pytest.mark.parametrize("options", [
        {"population_size": 0},
        {"mutation_rate": 1.5},
        {"crossover_rate": 2.0},
        {"generations": -3},
    ])
    def test_field_errors_are_wrapped(self, options):
        """Test field-level failures surface as InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            create_config(**options)

        assert isinstance(exc_info.value, EvolutionError)
        assert exc_info.value.details["errors"]


    def test_routes_logging_options(self):
        """Test logging options land in LoggingConfig."""
        config = create_config(log_interval=5, enable_logging=False)

        assert config.logging.log_interval == 5
        assert config.logging.enable_logging is False

    def test_zero_log_interval(self):
        """Test a zero log interval is reported as InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration):
            create_config(log_interval=0)
