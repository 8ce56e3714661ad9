"""Player profile entities."""
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class GameProfile:
    """Per-game sub-record of a player profile (``games.<game_id>``)."""
    faceit_elo: int = 0
    skill_level: int = 0
    skill_level_label: str = ""
    region: str = ""
    game_player_id: str = ""
    game_player_name: str = ""
    game_profile_id: str = ""


@dataclass
class PlayerDetails:
    """Profile returned by ``/players`` and ``/players/{player_id}``.

    ``player_id`` is the stable key; ``nickname`` is a display name that the
    player can change. ``games`` keeps the order the response listed them in.
    """

    # Identity
    player_id: str
    nickname: str

    avatar: str = ""
    country: str = ""
    faceit_url: str = ""
    activated_at: str = ""
    verified: bool = False

    games: Dict[str, GameProfile] = field(default_factory=dict)
    platforms: Dict[str, str] = field(default_factory=dict)

    # Membership
    membership_type: str = ""
    memberships: List[str] = field(default_factory=list)

    # Steam
    steam_id_64: str = ""
    new_steam_id: str = ""
    steam_nickname: str = ""

    friends_ids: List[str] = field(default_factory=list)


@dataclass
class PlayerRecord:
    """Row of the local ``players`` table."""
    player_id: str
    nickname: str
    steam_id: str = ""

    @classmethod
    def from_details(cls, details: PlayerDetails) -> "PlayerRecord":
        return cls(
            player_id=details.player_id,
            nickname=details.nickname,
            steam_id=details.steam_id_64,
        )
