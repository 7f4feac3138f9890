"""
Configuration management for the GitHub profile report.

Uses Pydantic for type-safe, validated configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ReportSettings(BaseSettings):
    """Main configuration for the report generator.

    Settings can be overridden via:
    1. Environment variables (prefixed with GHR_)
    2. .env file in the working directory
    3. Programmatic overrides

    Example:
        export GHR_API_BASE_URL=https://github.example.com/api/v3
        export GHR_LOG_LEVEL=DEBUG
    """

    # === GitHub API ===
    api_base_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API",
    )
    http_timeout: float = Field(
        default=30, ge=1, le=300, description="HTTP request timeout in seconds"
    )
    user_agent: str = Field(
        default="github-profile-report/1.0",
        min_length=1,
        description="User-Agent header sent with every API request",
    )

    # === Report ===
    report_filename: str = Field(
        default="GitHub_Profile_Report.pdf",
        min_length=1,
        description="File name offered for the downloaded report",
    )
    pdf_font_path: Optional[Path] = Field(
        default=None,
        description="TrueType font for characters the built-in PDF fonts lack",
    )

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_to_file: bool = Field(default=False, description="Enable file logging")
    logs_dir: Path = Field(default=Path("logs"), description="Log files directory")
    log_rotation: str = Field(default="10 MB", description="Log file rotation size")
    log_retention: str = Field(
        default="10 days", description="Log file retention period"
    )

    # === Dashboard ===
    dashboard_host: str = Field(default="127.0.0.1", description="Dashboard host")
    dashboard_port: int = Field(
        default=5001, ge=1024, le=65535, description="Dashboard port"
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the base URL without a trailing slash."""
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    model_config = {
        "env_prefix": "GHR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Global settings instance
settings = ReportSettings()


def get_settings() -> ReportSettings:
    """Return the current global settings instance."""
    return settings


def reload_settings() -> ReportSettings:
    """Reload settings from environment and .env file.

    Useful for testing or runtime configuration changes.
    """
    global settings
    settings = ReportSettings()
    return settings
