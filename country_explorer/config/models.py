"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://restcountries.com/v3.1"
DEFAULT_USER_AGENT = "Global-Country-Explorer/1.0"
DEFAULT_TIMEOUT_SECONDS = 10


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class HttpConfig(BaseModel):
    """Settings for outbound calls to the country-data service."""

    base_url: str = Field(DEFAULT_BASE_URL, min_length=1, description="REST Countries API root")
    timeout_seconds: int = Field(
        DEFAULT_TIMEOUT_SECONDS, ge=1, le=300, description="Upper bound on each request (seconds)"
    )
    user_agent: str = Field(
        DEFAULT_USER_AGENT, min_length=1, description="User-Agent header for outbound requests"
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be appended with a single slash."""
        stripped = v.strip().rstrip("/")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got: {v}")
        return stripped

    @field_validator("user_agent")
    @classmethod
    def strip_user_agent(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("user_agent cannot be empty")
        return stripped


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class ServerConfig(BaseModel):
    """Web server settings. The listen port comes from the environment."""

    host: str = Field("127.0.0.1", min_length=1, description="Interface to bind")


class AppConfig(BaseModel):
    """Root configuration object for the Global Country Explorer."""

    http: HttpConfig = Field(default_factory=HttpConfig, description="Outbound HTTP settings")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    server: ServerConfig = Field(default_factory=ServerConfig, description="Web server settings")
