"""
Configuration Management.

Loads settings from the process environment and an optional .env file in
the working directory. All variables share the ENDPOINTS_ prefix.

Required:
    ENDPOINTS_API_URL   - Base URL of the Endpoints API
    ENDPOINTS_API_KEY   - API key sent as a bearer token

Optional:
    ENDPOINTS_TIMEOUT     - Request timeout in seconds (no timeout if unset)
    ENDPOINTS_LOG_LEVEL   - DEBUG, INFO, WARNING, ERROR (default WARNING)
    ENDPOINTS_LOG_FORMAT  - console or json (default console)
    ENDPOINTS_LOG_FILE    - Path of a rotating JSONL log file

The CLI resolves settings once at process start and passes them to the
HTTP client. Library callers get the same through get_client().
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from endpoint_assistant.core.exceptions import ConfigurationError

ENV_PREFIX = "ENDPOINTS_"

# Pydantic error types that mean "the variable was not provided".
_MISSING_ERROR_TYPES = frozenset({"missing", "string_too_short"})


class Settings(BaseSettings):
    """Resolved configuration. Immutable once constructed."""

    api_url: str = Field(min_length=1)
    api_key: str = Field(min_length=1)
    timeout: float | None = None
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"
    log_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_settings()."""

    valid: bool
    errors: list[str] = field(default_factory=list)


def _describe_errors(exc: ValidationError) -> list[str]:
    """Turn a pydantic ValidationError into one message per offending variable."""
    messages: list[str] = []
    for error in exc.errors():
        env_name = f"{ENV_PREFIX}{str(error['loc'][0]).upper()}"
        if error["type"] in _MISSING_ERROR_TYPES:
            message = f"{env_name} is required"
        else:
            message = f"{env_name}: {error['msg']}"
        if message not in messages:
            messages.append(message)
    return messages


def validate_settings() -> ValidationResult:
    """
    Check the environment without raising.

    Every problem is collected in a single pass, so a caller sees all
    missing variables at once rather than only the first.
    """
    try:
        Settings()
    except ValidationError as e:
        return ValidationResult(valid=False, errors=_describe_errors(e))
    return ValidationResult(valid=True)


def get_settings() -> Settings:
    """
    Resolve settings from the environment.

    Raises:
        ConfigurationError: If any required variable is missing or invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(_describe_errors(e)) from e
