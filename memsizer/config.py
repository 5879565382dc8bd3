"""
Configuration management for the collection memory calculator.
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Try loading from env.example if .env doesn't exist
    example_env_path = Path(__file__).parent.parent / "env.example"
    if example_env_path.exists():
        load_dotenv(example_env_path)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TypesenseSettings(BaseSettings):
    """Connection settings for the Typesense indexing service."""

    model_config = ConfigDict(extra="allow")

    host: str = Field(default="localhost", validation_alias="TYPESENSE_HOST")
    port: int = Field(default=8108, validation_alias="TYPESENSE_PORT")
    protocol: str = Field(default="http", validation_alias="TYPESENSE_PROTOCOL")
    api_key: Optional[str] = Field(default=None, validation_alias="TYPESENSE_API_KEY")

    # Transport behaviour, handled by the typesense library
    connection_timeout: float = Field(default=10.0, validation_alias="TYPESENSE_CONNECTION_TIMEOUT")
    num_retries: int = Field(default=3, validation_alias="TYPESENSE_NUM_RETRIES")
    retry_interval: float = Field(default=1.0, validation_alias="TYPESENSE_RETRY_INTERVAL")

    @field_validator("protocol")
    @classmethod
    def validate_protocol(cls, v):
        v = v.lower().strip()
        if v not in ("http", "https"):
            raise ValueError("Protocol must be 'http' or 'https'")
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        if not 0 < v < 65536:
            raise ValueError("Port must be between 1 and 65535")
        return v


class EstimatorSettings(BaseSettings):
    """Memory estimation settings."""

    model_config = ConfigDict(extra="allow")

    # Compensates for index structures, object/auto underestimation and replication
    safety_multiplier: float = Field(default=3.2, validation_alias="ESTIMATOR_SAFETY_MULTIPLIER")
    # Price int32[]/int64[]/float[] at one byte per element like historical reports
    legacy_array_widths: bool = Field(default=False, validation_alias="ESTIMATOR_LEGACY_ARRAY_WIDTHS")
    max_concurrency: int = Field(default=4, validation_alias="ESTIMATOR_MAX_CONCURRENCY")
    fail_fast: bool = Field(default=False, validation_alias="ESTIMATOR_FAIL_FAST")

    @field_validator("safety_multiplier")
    @classmethod
    def validate_multiplier(cls, v):
        if v <= 0:
            raise ValueError("Safety multiplier must be positive")
        return v

    @field_validator("max_concurrency")
    @classmethod
    def validate_concurrency(cls, v):
        if v < 1:
            raise ValueError("Max concurrency must be at least 1")
        return v


class MonitoringSettings(BaseSettings):
    """Logging and observability settings."""

    model_config = ConfigDict(extra="allow")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: str = Field(default="text", validation_alias="LOG_FORMAT")
    log_file: Optional[str] = Field(default=None, validation_alias="LOG_FILE")
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        v = v.upper().strip()
        if v not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v


class Settings(BaseSettings):
    """Main application settings."""

    model_config = ConfigDict(extra="allow")

    typesense: TypesenseSettings = Field(default_factory=TypesenseSettings)
    estimator: EstimatorSettings = Field(default_factory=EstimatorSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
