"""
PyTest configuration and fixtures for evorules.

This module provides shared test fixtures: the item universe, the sample
transaction dataset, seeded random sources and small evolution configs.
"""

import os
import sys
import random

import pytest
import logfire

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.evorules.core.config import EvolutionConfig, create_test_config
from src.evorules.core.items import DEFAULT_UNIVERSE, Item, ItemUniverse
from src.evorules.data.sample import load_sample_dataset
from src.evorules.data.transactions import TransactionDataset


# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def universe() -> ItemUniverse:
    """The six-item bakery universe."""
    return DEFAULT_UNIVERSE


@pytest.fixture
def sample_dataset(universe) -> TransactionDataset:
    """The 15 sample bakery transactions."""
    return load_sample_dataset(universe)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source, fresh for each test."""
    return random.Random(1234)


# Genetic Algorithm test fixtures
@pytest.fixture
def ga_test_config() -> EvolutionConfig:
    """Small, seeded evolution configuration."""
    return create_test_config(random_seed=42)


@pytest.fixture
def ga_test_options():
    """Flat evolution options, as accepted by create_config."""
    return {
        "population_size": 10,
        "generations": 5,
        "mutation_rate": 0.1,
        "crossover_rate": 0.8,
        "elite_count": 2,
        "tournament_size": 3,
        "random_seed": 7
    }


@pytest.fixture
def bread_butter_rule(universe):
    """Chromosome of the rule {PAO} -> {MANTEIGA}."""
    from src.evorules.core.chromosome import RuleChromosome
    return RuleChromosome.from_itemsets(universe, [Item.PAO], [Item.MANTEIGA])


# Test markers
pytest.mark.slow = pytest.mark.slow
pytest.mark.integration = pytest.mark.integration
pytest.mark.unit = pytest.mark.unit
