"""Secondary player resources: bans, match history, teams, tournaments, rankings."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Ban:
    nickname: str = ""
    user_id: str = ""
    game: str = ""
    reason: str = ""
    type: str = ""
    starts_at: str = ""
    ends_at: str = ""


@dataclass
class PlayerBans:
    items: List[Ban] = field(default_factory=list)
    start: int = 0
    end: int = 0


@dataclass
class MatchHistoryItem:
    match_id: str = ""
    game_id: str = ""
    region: str = ""
    game_mode: str = ""
    match_type: str = ""
    competition_id: str = ""
    competition_name: str = ""
    competition_type: str = ""
    organizer_id: str = ""
    status: str = ""
    started_at: int = 0
    finished_at: int = 0
    winner: str = ""
    score: Dict[str, int] = field(default_factory=dict)
    playing_players: List[str] = field(default_factory=list)
    faceit_url: str = ""

    @property
    def duration_seconds(self) -> int:
        if not self.started_at or not self.finished_at:
            return 0
        return max(self.finished_at - self.started_at, 0)


@dataclass
class PlayerMatches:
    items: List[MatchHistoryItem] = field(default_factory=list)
    start: int = 0
    end: int = 0
    from_: Optional[int] = None
    to: Optional[int] = None


@dataclass
class TeamMember:
    user_id: str = ""
    nickname: str = ""
    country: str = ""
    skill_level: int = 0
    membership_type: str = ""


@dataclass
class Team:
    team_id: str = ""
    name: str = ""
    nickname: str = ""
    game: str = ""
    leader: str = ""
    team_type: str = ""
    members: List[TeamMember] = field(default_factory=list)
    faceit_url: str = ""


@dataclass
class PlayerTeams:
    items: List[Team] = field(default_factory=list)
    start: int = 0
    end: int = 0


@dataclass
class Tournament:
    tournament_id: str = ""
    name: str = ""
    game_id: str = ""
    region: str = ""
    status: str = ""
    match_type: str = ""
    membership_type: str = ""
    started_at: int = 0
    team_size: int = 0
    min_skill: int = 0
    max_skill: int = 0
    number_of_players: int = 0
    number_of_players_joined: int = 0
    prize_type: str = ""
    faceit_url: str = ""


@dataclass
class PlayerTournaments:
    items: List[Tournament] = field(default_factory=list)
    start: int = 0
    end: int = 0


@dataclass
class RankingEntry:
    player_id: str = ""
    nickname: str = ""
    country: str = ""
    faceit_elo: int = 0
    game_skill_level: int = 0
    position: int = 0


@dataclass
class PlayerGlobalRanking:
    """Ranking window centred on a player; ``position`` is that player's rank."""
    items: List[RankingEntry] = field(default_factory=list)
    position: int = 0
    start: int = 0
    end: int = 0
