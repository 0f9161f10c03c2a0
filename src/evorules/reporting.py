"""
Reporting helpers for evolution runs.

The engine hands GenerationStatistics to an optional sink after every
generation; HistoryCollector is the simplest such sink. The format_*
functions render results as plain text for the command line.
"""

from typing import List

from src.evorules.core.engine import EvolutionResult
from src.evorules.core.population import GenerationStatistics, Individual


class HistoryCollector:
    """Sink that keeps every generation's statistics in arrival order."""

    def __init__(self):
        self.history: List[GenerationStatistics] = []

    def __call__(self, stats: GenerationStatistics) -> None:
        self.history.append(stats)

    def best_fitness_series(self) -> List[float]:
        return [stats.best_fitness for stats in self.history]

    def mean_fitness_series(self) -> List[float]:
        return [stats.mean_fitness for stats in self.history]


def format_rule(individual: Individual) -> str:
    """Render one scored rule on a single line."""
    if not individual.evaluated:
        return f"{individual.chromosome} (not evaluated)"
    score = individual.score
    return (
        f"{individual.chromosome}  "
        f"support={score.support:.4f} confidence={score.confidence:.4f} "
        f"lift={score.lift:.4f} fitness={score.fitness:.4f}"
    )


def format_history(history: List[GenerationStatistics]) -> str:
    """Render per-generation statistics as a fixed-width table."""
    lines = [f"{'gen':>4} {'best':>8} {'mean':>8} {'support':>8} {'conf':>8} {'unique':>6}"]
    for stats in history:
        lines.append(
            f"{stats.generation:>4} {stats.best_fitness:>8.4f} {stats.mean_fitness:>8.4f} "
            f"{stats.best_support:>8.4f} {stats.best_confidence:>8.4f} {stats.unique_rules:>6}"
        )
    return "\n".join(lines)


def top_rules(result: EvolutionResult, k: int = 5) -> List[Individual]:
    """Best k distinct rules of the final population, best first."""
    seen = set()
    ranked = []
    for individual in result.final_population:
        if individual.chromosome in seen:
            continue
        seen.add(individual.chromosome)
        ranked.append(individual)
        if len(ranked) == k:
            break
    return ranked


def format_report(result: EvolutionResult, k: int = 5) -> str:
    """Render the full text report of an evolution run."""
    final = result.final_fitness
    sections = [
        "Per-generation statistics",
        format_history(result.history),
        "",
        f"Best rule: {format_rule(result.best_individual)}",
        "",
        f"Top {k} distinct rules:",
        *[f"  {i + 1}. {format_rule(ind)}" for i, ind in enumerate(top_rules(result, k))],
        "",
        f"Final population fitness: min={min(final):.4f} max={max(final):.4f} "
        f"evaluations={result.total_evaluations} runtime={result.runtime_seconds:.3f}s",
    ]
    return "\n".join(sections)
