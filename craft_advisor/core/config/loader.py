"""
Configuration Loader

Handles loading and validation of configuration.
"""

import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from .settings import Settings
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and manages application configuration."""

    _settings: Optional[Settings] = None

    @classmethod
    def load_config(cls, env_file: Optional[str] = None) -> Settings:
        """
        Load configuration from environment and files.

        Args:
            env_file: Path to .env file

        Returns:
            Loaded settings

        Raises:
            ConfigurationError: If a value fails validation
        """
        if cls._settings is not None:
            return cls._settings

        try:
            if env_file:
                cls._settings = Settings(_env_file=env_file)
            else:
                cls._settings = Settings()
        except PydanticValidationError as e:
            logger.error(f"Failed to load configuration: {e}")
            raise ConfigurationError(
                "Invalid configuration",
                details={"errors": e.errors()},
            ) from e

        logger.info(
            f"Configuration loaded successfully "
            f"(debug={cls._settings.debug})"
        )

        # Log non-sensitive config info
        cls._log_config_info()

        return cls._settings

    @classmethod
    def get_settings(cls) -> Settings:
        """
        Get current settings instance.

        Returns:
            Current settings

        Raises:
            ConfigurationError: If config not loaded
        """
        if cls._settings is None:
            raise ConfigurationError(
                "Configuration not loaded. Call load_config() first."
            )
        return cls._settings

    @classmethod
    def _log_config_info(cls) -> None:
        """Log non-sensitive configuration information."""
        if not cls._settings:
            return

        logger.info(f"App: {cls._settings.app_name} v{cls._settings.app_version}")
        logger.info(f"Pricing: {cls._settings.pricing.base_url} ({cls._settings.pricing.region})")
        logger.info(f"Page size: {cls._settings.advisor.page_size}")
        logger.info(f"History cap: {cls._settings.advisor.max_history_entries}")


# Convenience function
def get_settings() -> Settings:
    """Get current settings instance."""
    return ConfigLoader.get_settings()
