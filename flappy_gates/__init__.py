"""Fixed-tick flap-through-the-gaps arcade game with a pygame front end."""

from .avatar import Avatar
from .config import ConfigError, GameConfig
from .session import GameSession, GameState, Snapshot
from .track import ObstaclePair, ObstacleTrack

__all__ = [
    "Avatar",
    "ConfigError",
    "GameConfig",
    "GameSession",
    "GameState",
    "ObstaclePair",
    "ObstacleTrack",
    "Snapshot",
]
