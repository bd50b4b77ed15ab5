"""
Core Exceptions

Base exception classes for the application.
"""

from .base import (
    CraftAdvisorError,
    APIError,
    SnapshotError,
    NotFoundError,
    ConfigurationError,
)

__all__ = [
    "CraftAdvisorError",
    "APIError",
    "SnapshotError",
    "NotFoundError",
    "ConfigurationError",
]
