"""
Infrastructure Configuration

Base configuration for infrastructure-level settings.
Contains environment and data path configurations.
"""

import os
from enum import Enum
from pathlib import Path


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


def _get_environment() -> Environment:
    """Get and validate ENVIRONMENT variable."""
    env_value = os.getenv("ENVIRONMENT")
    if env_value is None:
        raise RuntimeError(
            "ENVIRONMENT is required. Set to 'production', 'development', or 'test'."
        )
    try:
        return Environment(env_value.lower())
    except ValueError:
        raise RuntimeError(
            f"Invalid ENVIRONMENT value: '{env_value}'. "
            "Must be 'production', 'development', or 'test'."
        )


class InfrastructureSettings:
    """Infrastructure-level configuration (paths, logging)"""

    # Project Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"

    # Corpus bundle written by the exporter (window.searchData / window.imageData)
    CORPUS_PATH: str = os.getenv("CORPUS_PATH", str(DATA_DIR / "search-data.js"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Environment
    ENVIRONMENT: Environment = _get_environment()


settings = InfrastructureSettings()
