"""
Population Management for the Association Rule Genetic Algorithm.

This module manages populations of individuals (candidate rules) throughout
the evolution process, including initialization, selection, elitism and
per-generation statistics.
"""

from typing import List, Optional, Dict, Any
from dataclasses import dataclass, asdict, replace
import random

import numpy as np

from src.evorules.core.chromosome import RuleChromosome
from src.evorules.core.config import EvolutionConfig
from src.evorules.core.items import ItemUniverse


@dataclass
class RuleScore:
    """Scores produced by a fitness function for one rule."""
    support: float = 0.0
    confidence: float = 0.0
    fitness: float = 0.0
    lift: float = 0.0


@dataclass
class Individual:
    """
    Represents one candidate association rule in the population.

    An individual pairs an immutable chromosome with a separate scoring
    record. The record stays None until a fitness function evaluates the
    individual, so an unscored rule can never pass for a scored one.
    """

    chromosome: RuleChromosome
    score: Optional[RuleScore] = None
    age: int = 0

    @classmethod
    def random_rule(
        cls,
        universe: ItemUniverse,
        rng: random.Random,
        max_attempts: int = 1000
    ) -> "Individual":
        """Create an unscored individual with a random valid chromosome."""
        return cls(chromosome=RuleChromosome.random_valid(universe, rng, max_attempts))

    @classmethod
    def from_chromosome(cls, chromosome: RuleChromosome) -> "Individual":
        """Wrap a chromosome as-is; callers must check validity before admission."""
        return cls(chromosome=chromosome)

    @property
    def evaluated(self) -> bool:
        return self.score is not None

    @property
    def fitness(self) -> Optional[float]:
        return self.score.fitness if self.score else None

    @property
    def support(self) -> Optional[float]:
        return self.score.support if self.score else None

    @property
    def confidence(self) -> Optional[float]:
        return self.score.confidence if self.score else None

    @property
    def antecedent(self):
        return self.chromosome.antecedent

    @property
    def consequent(self):
        return self.chromosome.consequent

    def update_score(self, score: RuleScore) -> None:
        """Attach a fresh scoring record to this individual."""
        self.score = score

    def clone(self) -> "Individual":
        """Copy this individual, keeping its score (chromosomes are shared, being immutable)."""
        return Individual(
            chromosome=self.chromosome,
            score=replace(self.score) if self.score else None,
            age=self.age
        )

    def increment_age(self) -> None:
        """Increment the individual's age by one generation."""
        self.age += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert individual to dictionary representation."""
        return {
            "rule": str(self.chromosome),
            "chromosome": self.chromosome.to_dict(),
            "score": asdict(self.score) if self.score else None,
            "age": self.age
        }

    def __str__(self) -> str:
        if self.score is None:
            return f"Rule: {self.chromosome} (not evaluated)"
        return f"Rule: {self.chromosome} (Fitness: {self.score.fitness:.4f})"


def _fitness_key(individual: Individual) -> float:
    return individual.fitness if individual.fitness is not None else float("-inf")


@dataclass
class GenerationStatistics:
    """Aggregates reported for one generation."""
    generation: int
    best_fitness: float
    mean_fitness: float
    worst_fitness: float
    fitness_std: float
    best_support: float
    best_confidence: float
    unique_rules: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Population:
    """
    Manages a population of individuals in the genetic algorithm.

    Handles population initialization, tournament selection, elitism,
    statistics and generation management.
    """

    def __init__(self, config: EvolutionConfig, universe: ItemUniverse, generation: int = 0):
        """Initialize an empty population with configuration."""
        self.config = config
        self.universe = universe
        self.individuals: List[Individual] = []
        self.generation = generation

    def initialize_random(self, rng: random.Random) -> None:
        """Fill the population with random valid individuals."""
        max_attempts = self.config.evolution.max_sampling_attempts
        for _ in range(self.config.evolution.population_size):
            self.individuals.append(Individual.random_rule(self.universe, rng, max_attempts))

    def tournament_select(self, rng: random.Random, tournament_size: Optional[int] = None) -> Individual:
        """
        Select one individual by tournament.

        Contestants are drawn uniformly with replacement. The winner is the
        first contestant whose fitness is strictly greater than every earlier
        one, so ties go to the earliest draw.
        """
        if not self.individuals:
            raise ValueError("Cannot select from an empty population")

        k = tournament_size or self.config.evolution.tournament_size
        winner: Optional[Individual] = None
        for _ in range(k):
            contestant = self.individuals[rng.randrange(len(self.individuals))]
            if winner is None or _fitness_key(contestant) > _fitness_key(winner):
                winner = contestant
        return winner

    def select_parents(self, rng: random.Random, num_parents: int = 2) -> List[Individual]:
        """Run one independent tournament per parent slot."""
        return [self.tournament_select(rng) for _ in range(num_parents)]

    def sort_by_fitness(self) -> None:
        """Stable sort, best fitness first; ties keep their current order."""
        self.individuals.sort(key=_fitness_key, reverse=True)

    def get_elite(self) -> List[Individual]:
        """Get clones of the elite individuals to preserve."""
        ranked = sorted(self.individuals, key=_fitness_key, reverse=True)
        return [ind.clone() for ind in ranked[:self.config.evolution.elite_count]]

    @property
    def best_individual(self) -> Optional[Individual]:
        """Best evaluated individual; the earliest one wins ties."""
        evaluated = [ind for ind in self.individuals if ind.evaluated]
        if not evaluated:
            return None
        return max(evaluated, key=_fitness_key)

    def replace_population(self, new_individuals: List[Individual]) -> None:
        """Replace current population with new individuals."""
        self.individuals = new_individuals
        self.generation += 1
        for ind in self.individuals:
            ind.increment_age()

    def fitness_values(self) -> List[float]:
        """Fitness of every evaluated individual, in population order."""
        return [ind.fitness for ind in self.individuals if ind.fitness is not None]

    def unique_chromosomes(self) -> int:
        return len({ind.chromosome for ind in self.individuals})

    def calculate_statistics(self) -> Optional[GenerationStatistics]:
        """Calculate statistics of the evaluated individuals."""
        fitnesses = np.array(self.fitness_values(), dtype=float)
        if fitnesses.size == 0:
            return None

        best = self.best_individual
        return GenerationStatistics(
            generation=self.generation,
            best_fitness=float(fitnesses.max()),
            mean_fitness=float(fitnesses.mean()),
            worst_fitness=float(fitnesses.min()),
            fitness_std=float(fitnesses.std()),
            best_support=best.support,
            best_confidence=best.confidence,
            unique_rules=self.unique_chromosomes()
        )

    def calculate_diversity(self) -> Dict[str, float]:
        """Calculate population diversity metrics."""
        if not self.individuals:
            return {}

        chromosomes = [ind.chromosome for ind in self.individuals]
        unique = len(set(chromosomes))

        distances = [
            chromosomes[i].hamming_distance(chromosomes[j])
            for i in range(len(chromosomes))
            for j in range(i + 1, len(chromosomes))
        ]

        return {
            "uniqueness_ratio": unique / len(chromosomes),
            "avg_hamming_distance": float(np.mean(distances)) if distances else 0.0,
            "unique_chromosomes": unique
        }

    def __len__(self) -> int:
        return len(self.individuals)
