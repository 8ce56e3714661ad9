"""Infrastructure repositories module."""
from .player_repository import PlayerRepository

__all__ = [
    'PlayerRepository',
]
