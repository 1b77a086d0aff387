"""
Application Settings - Main Layer

Pydantic Settings for configuration management: environment
variables, a .env file and defaults, grouped by concern.
"""

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gridcast.shared import EnumEnvironment, EnumLogLevel


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/power_forecast",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="power_forecast", description="Name of the MongoDB database"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class GESettings(BaseSettings):
    """Service metadata and server settings."""

    title: str = Field(default="GridCast", description="API title")
    description: str = Field(
        default="Hourly electricity demand forecasting per grid station",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=1234, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class TrainingSettings(BaseSettings):
    """Training job settings."""

    epochs: int = Field(default=50, ge=1, description="Full-batch training passes")
    learning_rate: float = Field(default=0.001, gt=0, description="Adam learning rate")
    min_data_points: int = Field(
        default=50, ge=1, description="Fewest usable records required to train"
    )
    timeout_seconds: float = Field(
        default=600.0, gt=0, description="Upper bound on a single fit"
    )

    model_config = SettingsConfigDict(
        env_prefix="TRAINING_", case_sensitive=False, extra="ignore"
    )


class ForecastSettings(BaseSettings):
    """Synthetic exogenous inputs used when generating forecasts."""

    temperature_min: float = 30.0
    temperature_max: float = 35.0
    humidity_min: float = 40.0
    humidity_max: float = 50.0
    prior_demand_min: float = 100.0
    prior_demand_max: float = 150.0
    seed: Optional[int] = Field(
        default=None, description="Fix to make forecasts reproducible"
    )

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_", case_sensitive=False, extra="ignore"
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "ForecastSettings":
        for name in ("temperature", "humidity", "prior_demand"):
            if getattr(self, f"{name}_min") > getattr(self, f"{name}_max"):
                raise ValueError(f"{name}_min must not exceed {name}_max")
        return self


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    ge: GESettings = Field(default_factory=GESettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    training: TrainingSettings = Field(default_factory=TrainingSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Patched in tests to provide settings per scenario.
    """
    return AppSettings()
