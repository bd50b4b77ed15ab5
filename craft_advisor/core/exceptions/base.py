"""
Exception hierarchy.

Everything raised on purpose by craft_advisor derives from
``CraftAdvisorError`` so the CLI can report it without a traceback.
"""

from typing import Optional, Dict, Any


class CraftAdvisorError(Exception):
    """Base exception for all craft advisor errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class APIError(CraftAdvisorError):
    """The pricing service failed or answered with an unusable body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None
    ):
        super().__init__(
            message, {"status_code": status_code, "endpoint": endpoint}
        )
        self.status_code = status_code
        self.endpoint = endpoint


class SnapshotError(CraftAdvisorError):
    """A game data snapshot has the wrong shape."""

    def __init__(self, message: str, section: str, value: Any = None):
        super().__init__(message, {"section": section, "value": value})
        self.section = section
        self.value = value


class NotFoundError(CraftAdvisorError):
    """Master data has no row for the requested id."""

    def __init__(self, kind: str, key: int):
        super().__init__(f"{kind} not found: {key}", {"kind": kind, "key": key})
        self.kind = kind
        self.key = key


class ConfigurationError(CraftAdvisorError):
    """Settings could not be loaded or are not loaded yet."""
