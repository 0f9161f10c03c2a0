"""
evorules - Main Application Entry Point

Runs the association rule genetic algorithm on the sample bakery
transactions and prints the per-generation statistics and the best rules.
Defaults come from the environment (see src/core/config.py); command line
flags override them.
"""

import sys
import json
import argparse
from typing import Dict, Any, List, Optional

from dotenv import load_dotenv
import logfire

# Load environment variables
load_dotenv()

from src.core.config import Settings, load_settings
from src.evorules.core.config import create_config
from src.evorules.core.engine import GeneticAlgorithmEngine
from src.evorules.core.exceptions import EvolutionError
from src.evorules.data.sample import load_sample_dataset
from src.evorules.reporting import format_report


def configure_observability(settings: Settings) -> None:
    """Configure Logfire; spans are only exported when a token is set."""
    logfire.configure(
        send_to_logfire="if-token-present",
        console=None if settings.logfire_console else False,
        **settings.get_logfire_settings()
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evolve association rules over the sample bakery transactions"
    )
    parser.add_argument("--population-size", type=int, help="Individuals per generation")
    parser.add_argument("--generations", type=int, help="Number of generations")
    parser.add_argument("--tournament-size", type=int, help="Contestants per tournament")
    parser.add_argument("--crossover-rate", type=float, help="Crossover probability per mating")
    parser.add_argument("--mutation-rate", type=float, help="Mutation probability per gene")
    parser.add_argument("--elite-count", type=int, help="Individuals copied unchanged each generation")
    parser.add_argument("--support-weight", type=float, help="Fitness weight on support")
    parser.add_argument("--confidence-weight", type=float, help="Fitness weight on confidence")
    parser.add_argument("--seed", type=int, dest="random_seed", help="Random seed")
    parser.add_argument("--top", type=int, default=5, help="Distinct rules to list (default: 5)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--quiet", action="store_true", help="Disable progress logging")
    return parser


def collect_options(args: argparse.Namespace, settings: Settings) -> Dict[str, Any]:
    """Merge settings defaults with the flags given on the command line."""
    options = settings.get_evolution_options()
    for name in options:
        value = getattr(args, name, None)
        if value is not None:
            options[name] = value
    return options


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        configure_observability(settings)

        config = create_config(
            log_interval=settings.evorules_log_interval,
            enable_logging=not args.quiet,
            **collect_options(args, settings)
        )

        engine = GeneticAlgorithmEngine(config, load_sample_dataset())
        result = engine.evolve()
    except EvolutionError as e:
        logfire.error("Evolution failed", error=e.message, error_type=type(e).__name__, **e.details)
        print(f"error: {e.message}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        print(format_report(result, k=args.top))
    return 0


if __name__ == "__main__":
    sys.exit(main())
