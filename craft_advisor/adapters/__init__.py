"""
Adapter Layer

Game data sources implementing the game data protocol.
"""

from .snapshot_game_data import SnapshotGameData

__all__ = [
    "SnapshotGameData",
]
