"""
API Infrastructure

HTTP clients for external services.
"""

from .base_client import BaseAPIClient
from .universalis import UniversalisClient

__all__ = [
    "BaseAPIClient",
    "UniversalisClient",
]
