"""Domain layer - Business entities, enums, and interfaces."""
from .entities import (
    GameProfile, PlayerDetails, PlayerRecord,
    StatKind, StatValue, StatsMap,
    PlayerGameStats, PlayerStatsInRange,
)
from .enums import Metric
from .interfaces import IPlayerRepository

__all__ = [
    # Entities
    'GameProfile',
    'PlayerDetails',
    'PlayerRecord',
    'StatKind',
    'StatValue',
    'StatsMap',
    'PlayerGameStats',
    'PlayerStatsInRange',
    # Enums
    'Metric',
    # Interfaces
    'IPlayerRepository',
]
