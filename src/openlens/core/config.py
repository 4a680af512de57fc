"""
Service Configuration

Search and API settings for the OpenLens service.
Inherits infrastructure settings from infrastructure_config.
"""

import os

from openlens.core.infrastructure_config import InfrastructureSettings


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings(InfrastructureSettings):
    """OpenLens service configuration"""

    # Search Settings
    MAX_QUERY_LEN: int = int(os.getenv("MAX_QUERY_LEN", "200"))
    RESULTS_LIMIT: int = int(os.getenv("RESULTS_LIMIT", "10"))
    MAX_RESULTS: int = int(os.getenv("MAX_RESULTS", "100"))

    # Escape non-highlighted snippet text before embedding <b> markers
    SNIPPET_ESCAPE_HTML: bool = _get_bool("SNIPPET_ESCAPE_HTML", "true")

    # Rate limiting for the search endpoint (slowapi syntax)
    RATE_LIMIT_ENABLED: bool = _get_bool("RATE_LIMIT_ENABLED", "true")
    SEARCH_RATE_LIMIT: str = os.getenv("SEARCH_RATE_LIMIT", "100/minute")

    # Security
    ALLOWED_HOSTS: list[str] = os.getenv(
        "ALLOWED_HOSTS", "localhost,127.0.0.1,testclient,testserver"
    ).split(",")
    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))
    DEBUG: bool = _get_bool("DEBUG", "false")


settings = Settings()
