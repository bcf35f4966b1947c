"""
Configuration management with environment variable support and validation.

Design principles:
- Environment-specific configs (dev, staging, prod)
- Validation at startup (fail fast)
- Type safety with Pydantic
"""

import os
from functools import lru_cache
from typing import Literal, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator
from rich.console import Console

# Load environment variables from .env file
load_dotenv()

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO", description="Logging level")
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class RegistryConfig(BaseModel):
    """In-memory registry behaviour."""

    log_overwrites: bool = Field(
        default=True, description="Log id replacements at info level instead of debug"
    )


class ReportConfig(BaseModel):
    """Report export and placeholder settings."""

    default_export_format: str = Field(default="pdf", description="Format used by the demo export")
    placeholder_report_id: str = Field(default="R001")
    placeholder_date_range: str = Field(default="2025-01-01 ~ 2025-01-31")
    placeholder_summary: str = Field(default="Initial Summary")

    @field_validator("default_export_format")
    def validate_export_format(cls, v: str) -> str:
        v = v.strip().lstrip(".").lower()
        if not v:
            raise ValueError("Export format must not be empty")
        return v


class AppConfig(BaseModel):
    """Main application configuration combining all subsystems."""

    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    reports: ReportConfig = Field(default_factory=ReportConfig)

    @model_validator(mode="after")
    def debug_only_in_dev(self) -> "AppConfig":
        """Ensure debug mode is only allowed in development environment."""
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables with validation."""

    def _env_to_literal(val: str) -> Literal["development", "staging", "production"]:
        v = val.strip().lower()
        if v in {"dev", "development"}:
            return "development"
        if v in {"stage", "staging"}:
            return "staging"
        return "production"

    def _level_to_literal(val: str) -> LogLevel:
        v = val.strip().upper()
        return cast(LogLevel, v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO")

    def _parse_bool(val: str | None, default: bool) -> bool:
        if val is None:
            return default
        return val.strip().lower() in {"1", "true", "yes", "on"}

    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    log_format = os.getenv("LOG_FORMAT", "").strip().lower()
    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if log_format == "console" or (not log_format and debug) else "json",
    )

    registry_config = RegistryConfig(
        log_overwrites=_parse_bool(os.getenv("REGISTRY_LOG_OVERWRITES"), True),
    )

    report_config = ReportConfig(
        default_export_format=os.getenv("REPORT_EXPORT_FORMAT", "pdf"),
    )

    return AppConfig(
        environment=environment,
        debug=debug,
        logging=logging_config,
        registry=registry_config,
        reports=report_config,
    )


@lru_cache
def get_config() -> AppConfig:
    """Get cached application configuration."""
    return load_config_from_env()


def reset_config_cache() -> None:
    """Forget the cached configuration so the next get_config() re-reads the environment."""
    get_config.cache_clear()


def print_config_summary(console: Console | None = None) -> None:
    """Print configuration summary for debugging."""
    console = console or Console()
    config = get_config()

    console.print("\n[bold]CONFIGURATION SUMMARY[/bold]")
    console.print(f"Environment: {config.environment}")
    console.print(f"Debug Mode: {config.debug}")
    console.print(f"Log Level: {config.logging.level} ({config.logging.format})")
    console.print(f"Log Registry Overwrites: {config.registry.log_overwrites}")
    console.print(f"Report Export Format: {config.reports.default_export_format}")


if __name__ == "__main__":
    print_config_summary()
