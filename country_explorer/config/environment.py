"""Environment variable loading and validation."""

import os
from typing import Optional

from .exceptions import ConfigurationError

DEFAULT_PORT = 3000
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Values read from the process environment at startup."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        port: int = DEFAULT_PORT,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        self.api_key = api_key
        self.port = port
        self.log_level = log_level
        self.environment = environment or "local"

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    Optional environment variables:
    - COUNTRYLAYER_API_KEY: credential for the country-data service
    - PORT: web server listen port (1-65535, default 3000)
    - LOG_LEVEL: override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: label attached to every log line (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set but invalid
    """
    errors = []

    api_key = os.getenv("COUNTRYLAYER_API_KEY") or None
    port_str = os.getenv("PORT")
    log_level = os.getenv("LOG_LEVEL") or None
    environment = os.getenv("ENVIRONMENT") or None

    port = DEFAULT_PORT
    if port_str:
        try:
            port = int(port_str)
            if port < 1 or port > 65535:
                errors.append(f"Invalid PORT: {port}. Must be between 1 and 65535.")
        except ValueError:
            errors.append(f"Invalid PORT: '{port_str}'. Must be a valid integer.")

    if log_level:
        if log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        else:
            log_level = log_level.upper()

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and adjust the values",
                "Unset variables you do not need; all of them have defaults",
            ],
        )

    return EnvironmentConfig(
        api_key=api_key,
        port=port,
        log_level=log_level,
        environment=environment,
    )
