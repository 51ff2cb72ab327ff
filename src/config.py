"""Configuration loading and validation.

This module is responsible for:

- Loading `.env` into the process environment (without overriding existing vars).
- Converting environment variables into a strongly-typed Pydantic model.
- Validating required fields and providing actionable error messages.
"""

import os
import re
from typing import TypeVar

import dotenv
from pydantic import BaseModel, Field, field_validator

_T = TypeVar("_T", int, float)

US_TELEMETRY_ENDPOINT = "https://cloud-collector.newrelic.com/aws/lambda/v1"
EU_TELEMETRY_ENDPOINT = "https://cloud-collector.eu01.nr-data.net/aws/lambda/v1"

# License keys issued outside the US region start with e.g. "eu01xx".
_REGION_PREFIX = re.compile(r"^([a-z]{2,3}[0-9]{2})x{1,2}")


def _get_required_env(name: str) -> str:
    """Read a required env var or raise a helpful error."""
    value = os.getenv(name, "").strip()
    if not value:
        raise ValueError(f"{name} is required. Please set it in your .env file.")
    if value.startswith("your_") and value.endswith("_here"):
        raise ValueError(f"{name} is required. Please replace the placeholder value in your .env file.")
    return value


def _get_env_number(name: str, default: _T, cast: type[_T]) -> _T:
    """Read an int/float env var with a default."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a {cast.__name__}. Got: {raw!r}") from exc


def license_key_region(license_key: str) -> str | None:
    """Return the region encoded in a license key prefix (e.g. "eu01"), if any."""
    match = _REGION_PREFIX.match(license_key)
    if match is None:
        return None
    return match.group(1)


class TelemetryConfig(BaseModel):
    """Credentials and tuning for building ingest requests."""

    license_key: str = Field(..., description="Account license key sent as X-License-Key")
    function_name: str = Field(..., description="Name of the Lambda function being instrumented")
    endpoint_override: str | None = Field(default=None, description="Explicit ingest URL")
    user_agent: str = Field(default="newrelic-lambda-extension", description="User-Agent header value")
    compression_level: int = Field(default=6, description="Gzip compression level (0-9)")
    log_level: str = Field(default="INFO", description="Loguru level for the extension process")

    @property
    def telemetry_endpoint(self) -> str:
        """Get the ingest URL, honoring an explicit override first."""
        if self.endpoint_override:
            return self.endpoint_override
        region = license_key_region(self.license_key)
        if region is not None and region.startswith("eu"):
            return EU_TELEMETRY_ENDPOINT
        return US_TELEMETRY_ENDPOINT

    @field_validator("license_key")
    def validate_license_key(cls, v: str) -> str:
        """Validate license key is set (not empty/placeholder)."""
        if not v or v == "your_license_key_here":
            raise ValueError("NEW_RELIC_LICENSE_KEY is required. Please set it in your .env file.")
        return v

    @field_validator("compression_level")
    def validate_compression_level(cls, v: int) -> int:
        """Gzip only accepts levels 0 through 9."""
        if not 0 <= v <= 9:
            raise ValueError(f"NEW_RELIC_COMPRESSION_LEVEL must be between 0 and 9. Got: {v}")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the loguru level name."""
        level = v.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"NEW_RELIC_LOG_LEVEL must be a log level name. Got: {v!r}")
        return level


class Config(BaseModel):
    """Top-level application configuration."""

    telemetry: TelemetryConfig = Field(..., description="Telemetry configuration")


def load_config() -> Config:
    """Load application configuration from environment variables.

    Notes:
    - Calls `dotenv.load_dotenv()` so local `.env` values are visible to the process.
    - Raises `ValueError` with actionable messages when required configuration is
      missing or still contains placeholder values.
    """
    dotenv.load_dotenv()

    telemetry = TelemetryConfig(
        license_key=_get_required_env("NEW_RELIC_LICENSE_KEY"),
        function_name=_get_required_env("AWS_LAMBDA_FUNCTION_NAME"),
        endpoint_override=os.getenv("NEW_RELIC_TELEMETRY_ENDPOINT") or None,
        user_agent=os.getenv("NEW_RELIC_USER_AGENT") or "newrelic-lambda-extension",
        compression_level=_get_env_number("NEW_RELIC_COMPRESSION_LEVEL", 6, int),
        log_level=os.getenv("NEW_RELIC_LOG_LEVEL") or "INFO",
    )
    return Config(telemetry=telemetry)
