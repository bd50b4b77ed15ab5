"""
Application Settings

Configuration classes using Pydantic for validation.
"""

from typing import Any, Dict

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingConfig(BaseSettings):
    """Market board pricing service settings."""

    model_config = SettingsConfigDict(
        env_prefix="PRICING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="https://universalis.app/api/v2",
        description="Pricing service base URL"
    )
    region: str = Field(
        default="Japan",
        description="World, data center or region to price against"
    )
    language: str = Field(
        default="en",
        description="Response language"
    )
    entries: int = Field(
        default=1,
        description="Number of listings to request per item"
    )
    timeout: int = Field(
        default=10,
        description="Request timeout in seconds"
    )
    max_attempts: int = Field(
        default=3,
        description="Total tries per request, counting the first; only timeouts and network errors are retried"
    )
    max_concurrency: int = Field(
        default=8,
        description="Max concurrent price requests"
    )

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Region is part of the request path and cannot be blank."""
        v = v.strip()
        if not v:
            raise ValueError("Pricing region must not be empty")
        return v

    @field_validator("entries", "max_concurrency")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v


class AdvisorConfig(BaseSettings):
    """Recommendation and display settings."""

    model_config = SettingsConfigDict(
        env_prefix="ADVISOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    high_profit_threshold: int = Field(
        default=10000,
        description="Profit at or above which a result is highlighted as high"
    )
    medium_profit_threshold: int = Field(
        default=1000,
        description="Profit at or above which a result is highlighted as medium"
    )
    filter_criteria: str = Field(
        default="",
        description="Saved filter string, e.g. 'itemlevel:50;craftingclass:Weaver'"
    )
    max_history_entries: int = Field(
        default=100,
        description="Max completed crafts kept in history"
    )
    page_size: int = Field(
        default=10,
        description="Recommendations per page"
    )
    export_dir: str = Field(
        default=".",
        description="Directory CSV exports are written to"
    )

    @field_validator("max_history_entries", "page_size")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @model_validator(mode="after")
    def validate_thresholds(self) -> "AdvisorConfig":
        if self.high_profit_threshold < self.medium_profit_threshold:
            raise ValueError(
                "high_profit_threshold must be >= medium_profit_threshold"
            )
        return self


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields from .env
    )

    # Application info
    app_name: str = Field(
        default="Craft Advisor",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )

    pricing: PricingConfig
    advisor: AdvisorConfig

    def __init__(self, **kwargs: Any):
        # Sub-configs read their own prefixed environment variables
        env_file = kwargs.pop("_env_file", None)
        sub_kwargs: Dict[str, Any] = {}
        if env_file:
            sub_kwargs["_env_file"] = env_file
            kwargs["_env_file"] = env_file

        kwargs.setdefault("pricing", PricingConfig(**sub_kwargs))
        kwargs.setdefault("advisor", AdvisorConfig(**sub_kwargs))

        super().__init__(**kwargs)
