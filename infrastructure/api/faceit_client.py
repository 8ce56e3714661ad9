"""FACEIT Data API client."""
from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

import httpx

from config import settings
from core.errors import DomainInvariantError, ParameterValidationError
from core.logging.logger import get_logger, traceable
from domain.entities import (
    PlayerBans, PlayerDetails, PlayerGameStats, PlayerGlobalRanking,
    PlayerMatches, PlayerStatsInRange, PlayerTeams, PlayerTournaments,
)
from . import parsers
from .transport import HTTPTransport


def _require(**params: Optional[str]) -> None:
    missing = [name for name, value in params.items() if not (value or "").strip()]
    if missing:
        raise ParameterValidationError(missing)


class FaceitClient:
    """Synchronous client, one method per Data API resource.

    Every method other than :meth:`get_player_by_nickname` takes the stable
    ``player_id``; nicknames can change.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = settings.DEFAULT_BASE_URL,
        timeout: float = settings.DEFAULT_TIMEOUT,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.strip().rstrip("/") or settings.DEFAULT_BASE_URL
        self.transport = HTTPTransport(api_key, timeout, client=http_client)
        self._log = get_logger(__name__, service="faceit")

    def __enter__(self) -> "FaceitClient":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def close(self) -> None:
        self.transport.close()

    def _url(self, *segments: str) -> str:
        # Escape per segment so an id containing "/" cannot shift the path.
        return self.base_url + "/" + "/".join(quote(s.strip(), safe="") for s in segments)

    # ── Players ────────────────────────────────────────────────────────

    @traceable
    def get_player_by_nickname(self, nickname: str, game: str = "") -> PlayerDetails:
        """GET /players?nickname=&game="""
        _require(nickname=nickname)
        params = {"nickname": nickname.strip()}
        if game and game.strip():
            params["game"] = game.strip()
        self._log.debug(lambda: f"lookup nickname={params['nickname']} game={params.get('game', '-')}")
        player = self.transport.get(self._url("players"), parsers.parse_player_details, params=params)
        if not player.player_id.strip():
            raise DomainInvariantError(f"player_id missing in response for nickname={nickname!r}")
        return player

    @traceable
    def get_player(self, player_id: str) -> PlayerDetails:
        """GET /players/{player_id}"""
        _require(player_id=player_id)
        player = self.transport.get(self._url("players", player_id), parsers.parse_player_details)
        if not player.player_id.strip():
            raise DomainInvariantError(f"player_id missing in response for player_id={player_id!r}")
        return player

    @traceable
    def get_player_bans(self, player_id: str) -> PlayerBans:
        """GET /players/{player_id}/bans"""
        _require(player_id=player_id)
        return self.transport.get(self._url("players", player_id, "bans"), parsers.parse_bans)

    # ── Stats ──────────────────────────────────────────────────────────

    @traceable
    def get_player_stats_in_range(self, player_id: str, game_id: str) -> PlayerStatsInRange:
        """GET /players/{player_id}/games/{game_id}/stats, one stat map per match."""
        _require(player_id=player_id, game_id=game_id)
        url = self._url("players", player_id, "games", game_id, "stats")
        return self.transport.get(url, parsers.parse_stats_in_range)

    @traceable
    def get_player_stats(self, player_id: str, game_id: str) -> PlayerGameStats:
        """GET /players/{player_id}/games/{game_id}/stats, lifetime aggregate."""
        _require(player_id=player_id, game_id=game_id)
        url = self._url("players", player_id, "games", game_id, "stats")
        return self.transport.get(url, parsers.parse_game_stats)

    @traceable
    def get_player_matches(self, player_id: str) -> PlayerMatches:
        """GET /players/{player_id}/history"""
        _require(player_id=player_id)
        return self.transport.get(self._url("players", player_id, "history"), parsers.parse_matches)

    # ── Teams & tournaments ────────────────────────────────────────────

    @traceable
    def get_player_teams(self, player_id: str) -> PlayerTeams:
        """GET /players/{player_id}/teams"""
        _require(player_id=player_id)
        return self.transport.get(self._url("players", player_id, "teams"), parsers.parse_teams)

    @traceable
    def get_player_tournaments(self, player_id: str) -> PlayerTournaments:
        """GET /players/{player_id}/tournaments"""
        _require(player_id=player_id)
        return self.transport.get(self._url("players", player_id, "tournaments"), parsers.parse_tournaments)

    # ── Rankings ───────────────────────────────────────────────────────

    @traceable
    def get_player_global_ranking(self, game_id: str, region: str, player_id: str) -> PlayerGlobalRanking:
        """GET /rankings/games/{game_id}/regions/{region}/players/{player_id}"""
        _require(game_id=game_id, region=region, player_id=player_id)
        url = self._url("rankings", "games", game_id, "regions", region, "players", player_id)
        return self.transport.get(url, parsers.parse_global_ranking)
