"""
Genetic Algorithm Engine for association rule search.

This module implements the engine that orchestrates the evolution process:
population initialization, fitness evaluation, tournament selection,
crossover, mutation, elitism and replacement, for a fixed number of
generations.
"""

import random
import logging
from typing import List, Optional, Dict, Any, Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

import logfire

from src.evorules.core.config import EvolutionConfig
from src.evorules.core.exceptions import RetryLimitExceeded
from src.evorules.core.population import Population, Individual, GenerationStatistics
from src.evorules.core.chromosome import RuleChromosome
from src.evorules.data.transactions import TransactionDataset
from src.evorules.fitness.base import FitnessFunction, RuleMetrics
from src.evorules.fitness.support_confidence import SupportConfidenceFitness


class EngineState(str, Enum):
    """Lifecycle of an evolution run."""
    INIT = "init"
    EVALUATING = "evaluating"
    SELECTING_REPRODUCING = "selecting_reproducing"
    TERMINATED = "terminated"


@dataclass
class EvolutionResult:
    """Outcome of an evolution run."""
    best_individual: Individual
    history: List[GenerationStatistics]
    final_fitness: List[float]
    total_evaluations: int
    runtime_seconds: float
    config: EvolutionConfig = field(repr=False)
    final_population: List[Individual] = field(default_factory=list, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        return {
            "best_individual": self.best_individual.to_dict(),
            "history": [stats.to_dict() for stats in self.history],
            "final_fitness": self.final_fitness,
            "total_evaluations": self.total_evaluations,
            "runtime_seconds": self.runtime_seconds,
            "config": self.config.to_dict()
        }


class GeneticAlgorithmEngine:
    """
    Main engine for running the association rule genetic algorithm.

    The engine is single-threaded. All randomness comes from one private
    random.Random seeded from the configuration, so a fixed seed yields a
    fixed run.
    """

    def __init__(
        self,
        config: EvolutionConfig,
        dataset: TransactionDataset,
        fitness_function: Optional[FitnessFunction] = None,
        logger: Optional[logging.Logger] = None,
        on_generation: Optional[Callable[[GenerationStatistics], None]] = None
    ):
        """
        Initialize the genetic algorithm engine.

        Args:
            config: Evolution configuration, checked for consistency here
            dataset: Transactions the rules are measured against
            fitness_function: Rule scorer (support/confidence from config by default)
            logger: Optional logger instance
            on_generation: Optional sink receiving each generation's statistics

        Raises:
            InvalidConfiguration: If the configuration is inconsistent
        """
        config.validate_consistency()

        self.config = config
        self.dataset = dataset
        self.universe = dataset.universe
        self.fitness_function = fitness_function or SupportConfidenceFitness.from_config(config.fitness)
        self.logger = logger or self._setup_logger()
        self.on_generation = on_generation

        self.rng = random.Random(config.random_seed)

        # State tracking
        self.state = EngineState.INIT
        self.current_population: Optional[Population] = None
        self.history: List[GenerationStatistics] = []
        self.total_evaluations = 0
        self.start_time: Optional[datetime] = None

    def _setup_logger(self) -> logging.Logger:
        """Setup default logger."""
        logger = logging.getLogger("evorules.engine")
        logger.setLevel(getattr(logging, self.config.logging.log_level))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def evolve(self) -> EvolutionResult:
        """
        Run the genetic algorithm for the configured number of generations.

        Returns:
            Best rule of the last generation, per-generation statistics and
            the final population's fitness values
        """
        generations = self.config.evolution.generations

        with logfire.span("GA Evolution",
                          population_size=self.config.evolution.population_size,
                          generations=generations):

            self.start_time = datetime.now()
            self.history = []
            self.total_evaluations = 0
            self._log(f"Starting evolution with population size {self.config.evolution.population_size}")

            self.state = EngineState.INIT
            self.current_population = self._initialize_population()

            for generation in range(generations):
                with logfire.span("Generation", generation=generation):
                    self.state = EngineState.EVALUATING
                    self._evaluate_population()
                    self.current_population.sort_by_fitness()

                    stats = self.current_population.calculate_statistics()
                    self.history.append(stats)
                    if self.on_generation:
                        self.on_generation(stats)

                    if generation % self.config.logging.log_interval == 0 or generation == generations - 1:
                        self._log_progress(stats)

                    if generation < generations - 1:
                        self.state = EngineState.SELECTING_REPRODUCING
                        self._create_next_generation()

            self.state = EngineState.TERMINATED

            best = self.current_population.individuals[0]
            runtime = (datetime.now() - self.start_time).total_seconds()
            self._log(f"Evolution completed in {runtime:.3f}s, best {best}")

            return EvolutionResult(
                best_individual=best,
                history=list(self.history),
                final_fitness=self.current_population.fitness_values(),
                total_evaluations=self.total_evaluations,
                runtime_seconds=runtime,
                config=self.config,
                final_population=list(self.current_population.individuals)
            )

    def _initialize_population(self) -> Population:
        """Initialize the population with random valid rules."""
        with logfire.span("Initialize Population"):
            population = Population(self.config, self.universe, generation=0)
            population.initialize_random(self.rng)

            self._log(f"Initialized population with {len(population.individuals)} individuals")
            return population

    def _evaluate_population(self) -> None:
        """Evaluate fitness for all unscored individuals in the population."""
        with logfire.span("Evaluate Population", size=len(self.current_population.individuals)):
            unevaluated = [ind for ind in self.current_population.individuals if not ind.evaluated]

            for individual in unevaluated:
                self.fitness_function.evaluate(individual, self.dataset)

            self.total_evaluations += len(unevaluated)

    def _create_next_generation(self) -> None:
        """
        Create the next generation of individuals.

        Elites are cloned first; the remaining slots are filled by mating
        events whose mutated children are admitted only when valid.
        """
        with logfire.span("Create Next Generation"):
            evolution = self.config.evolution
            new_individuals: List[Individual] = self.current_population.get_elite()

            failed_matings = 0
            while len(new_individuals) < evolution.population_size:
                parents = self.current_population.select_parents(self.rng, 2)
                admitted = 0

                for child in self._breed(parents[0], parents[1]):
                    if len(new_individuals) >= evolution.population_size:
                        break
                    if child.chromosome.is_valid():
                        new_individuals.append(child)
                        admitted += 1

                if admitted:
                    failed_matings = 0
                else:
                    failed_matings += 1
                    if failed_matings >= evolution.max_sampling_attempts:
                        raise RetryLimitExceeded(
                            f"No valid offspring after {failed_matings} consecutive matings",
                            details={"generation": self.current_population.generation,
                                     "admitted": len(new_individuals)}
                        )

            self.current_population.replace_population(new_individuals)

    def _breed(self, parent1: Individual, parent2: Individual) -> List[Individual]:
        """Produce two mutated, unvalidated children from two parents."""
        evolution = self.config.evolution

        if self.rng.random() < evolution.crossover_rate:
            chromosomes = parent1.chromosome.crossover(parent2.chromosome, self.rng)
        else:
            chromosomes = (parent1.chromosome, parent2.chromosome)

        return [
            Individual.from_chromosome(chromosome.mutate(evolution.mutation_rate, self.rng))
            for chromosome in chromosomes
        ]

    def _log(self, message: str) -> None:
        if self.config.logging.enable_logging:
            self.logger.info(message)

    def _log_progress(self, stats: GenerationStatistics) -> None:
        """Log evolution progress."""
        diversity = self.current_population.calculate_diversity()

        self._log(
            f"Generation {stats.generation}: "
            f"Best: {stats.best_fitness:.4f}, "
            f"Avg: {stats.mean_fitness:.4f}, "
            f"Support: {stats.best_support:.4f}, "
            f"Confidence: {stats.best_confidence:.4f}, "
            f"Diversity: {diversity.get('uniqueness_ratio', 0):.2f}"
        )

        if self.config.logging.metrics_export:
            metrics = {
                "evolution_generation": stats.generation,
                **{k: v for k, v in stats.to_dict().items() if k != "generation"},
                **diversity
            }
            logfire.info("Evolution Progress", **metrics)

    def evaluate_single(self, chromosome: RuleChromosome) -> RuleMetrics:
        """Evaluate a single chromosome against the engine's dataset (useful for testing)."""
        return self.fitness_function.calculate_metrics(chromosome, self.dataset)
