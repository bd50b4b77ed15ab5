"""
Chat Commands

Entry points for the ``recommend``, ``refresh``, ``export``, ``history``
and ``filter`` commands.
"""

from .handler import CommandHandler, RECOMMEND_FAILED_MESSAGE

__all__ = [
    "CommandHandler",
    "RECOMMEND_FAILED_MESSAGE",
]
