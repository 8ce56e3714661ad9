"""Use case for resolving a nickname, with the cs2 → csgo fallback."""
from __future__ import annotations

from dataclasses import dataclass

from config import settings
from core.errors import StatClockError
from core.logging.logger import get_logger
from domain.entities import PlayerDetails
from infrastructure.api import FaceitClient


@dataclass(frozen=True, slots=True)
class LookupResult:
    player: PlayerDetails
    effective_game: str
    used_fallback: bool = False


class LookupPlayerUseCase:
    """
    Two-state lookup: Primary, then at most one Fallback.
    ─────────────────────────────────────────────────────────────────
    Primary   lookup against the configured game.
    Fallback  only when the configured game is the default (cs2):
              one retry against csgo, which then becomes the game for
              every later call in the run.
    Anything else surfaces the error. No backoff, no third attempt.
    ─────────────────────────────────────────────────────────────────
    """

    def __init__(
        self,
        client: FaceitClient,
        default_game: str = settings.DEFAULT_GAME,
        fallback_game: str = settings.FALLBACK_GAME,
    ):
        self.client = client
        self.default_game = default_game
        self.fallback_game = fallback_game
        self._log = get_logger(__name__, service="lookup")

    def execute(self, nickname: str, game: str) -> LookupResult:
        try:
            player = self.client.get_player_by_nickname(nickname, game)
            return LookupResult(player=player, effective_game=game)
        except StatClockError as primary:
            if game != self.default_game:
                self._log.error(lambda: f"lookup-failed game={game}: {primary}")
                raise
            self._log.warning(lambda: f"lookup-failed game={game}, retrying with {self.fallback_game}: {primary}")
            primary_error = primary

        try:
            player = self.client.get_player_by_nickname(nickname, self.fallback_game)
        except StatClockError as fallback:
            self._log.error(lambda: f"fallback-failed game={self.fallback_game}: {fallback}")
            raise fallback from primary_error
        self._log.info(lambda: f"fallback-succeeded game={self.fallback_game}")
        return LookupResult(player=player, effective_game=self.fallback_game, used_fallback=True)
