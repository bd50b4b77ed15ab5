"""
Configuration Management

Centralized configuration for the application.
"""

from .settings import (
    Settings,
    PricingConfig,
    AdvisorConfig,
)
from .loader import ConfigLoader, get_settings

__all__ = [
    "Settings",
    "PricingConfig",
    "AdvisorConfig",
    "ConfigLoader",
    "get_settings",
]
