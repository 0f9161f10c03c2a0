"""
Core configuration module for the evorules application.

This module manages application settings using Pydantic Settings,
providing type-safe configuration with environment variable support.
Range checks on the evolution defaults are left to create_config, so a
bad EVORULES_* value is reported the same way as a bad command line flag.
"""

from typing import Optional, Dict, Any
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.evorules.core.exceptions import InvalidConfiguration


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logfire settings
    logfire_token: str = ""
    logfire_service_name: str = "evorules-cli"
    logfire_environment: str = "development"
    logfire_console: bool = False

    # Evolution defaults used by the command line
    evorules_population_size: int = 100
    evorules_generations: int = 100
    evorules_tournament_size: int = 3
    evorules_crossover_rate: float = 0.8
    evorules_mutation_rate: float = 0.05
    evorules_elite_count: int = 1
    evorules_support_weight: float = 0.5
    evorules_confidence_weight: float = 0.5
    evorules_random_seed: Optional[int] = None
    evorules_log_interval: int = 10

    @field_validator("evorules_random_seed", mode="before")
    @classmethod
    def parse_random_seed(cls, v):
        """Treat an empty EVORULES_RANDOM_SEED as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def get_logfire_settings(self) -> Dict[str, Any]:
        """Get Logfire configuration."""
        return {
            "token": self.logfire_token or None,
            "service_name": self.logfire_service_name,
            "environment": self.logfire_environment,
        }

    def get_evolution_options(self) -> Dict[str, Any]:
        """Get the flat evolution options understood by create_config."""
        return {
            "population_size": self.evorules_population_size,
            "generations": self.evorules_generations,
            "tournament_size": self.evorules_tournament_size,
            "crossover_rate": self.evorules_crossover_rate,
            "mutation_rate": self.evorules_mutation_rate,
            "elite_count": self.evorules_elite_count,
            "support_weight": self.evorules_support_weight,
            "confidence_weight": self.evorules_confidence_weight,
            "random_seed": self.evorules_random_seed,
        }


def load_settings(**overrides: Any) -> Settings:
    """
    Load settings from the environment and .env.

    Raises:
        InvalidConfiguration: If a value cannot be parsed
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise InvalidConfiguration(
            f"Invalid settings: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)}
        ) from e
