"""Domain interfaces."""
from .repository import IPlayerRepository

__all__ = [
    'IPlayerRepository',
]
