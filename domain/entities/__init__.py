"""Domain entities."""
from .player import GameProfile, PlayerDetails, PlayerRecord
from .resources import (
    Ban, PlayerBans,
    MatchHistoryItem, PlayerMatches,
    Team, TeamMember, PlayerTeams,
    Tournament, PlayerTournaments,
    RankingEntry, PlayerGlobalRanking,
)
from .stats import StatKind, StatValue, StatsMap, PlayerStatsInRange, PlayerGameStats

__all__ = [
    'GameProfile',
    'PlayerDetails',
    'PlayerRecord',
    'Ban',
    'PlayerBans',
    'MatchHistoryItem',
    'PlayerMatches',
    'Team',
    'TeamMember',
    'PlayerTeams',
    'Tournament',
    'PlayerTournaments',
    'RankingEntry',
    'PlayerGlobalRanking',
    'StatKind',
    'StatValue',
    'StatsMap',
    'PlayerStatsInRange',
    'PlayerGameStats',
]
