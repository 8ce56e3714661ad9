"""Metric derivation over already-decoded payloads.

The module-level functions are pure; :class:`MetricService` adds the one
extra fetch (game stats) that the ``matches`` and ``wl`` metrics need.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional, Sequence, Union

from core.errors import DomainInvariantError
from core.logging.logger import get_logger
from domain.entities import GameProfile, PlayerDetails, StatsMap
from domain.enums import Metric
from infrastructure.api import FaceitClient

# Key spellings vary between CS:GO and CS2 stat payloads.
MATCH_KEYS = ("Matches", "matches", "Total Matches")
WIN_KEYS = ("Wins", "wins", "Total Wins")

# RFC3339 variants, tried in order.
TIMESTAMP_LAYOUTS = (
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
)
# strptime's %f stops at microseconds; nanosecond timestamps are cut down.
_LONG_FRACTION = re.compile(r"(\.\d{6})\d+")

_SECONDS_PER_DAY = 86400

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class WinLoss:
    wins: int
    losses: int
    matches: int


@dataclass(frozen=True, slots=True)
class MetricResult:
    metric: Metric
    game: str
    value: Union[int, WinLoss]

    def render(self) -> str:
        """Single output line for the CLI."""
        label = self.metric.label
        if self.metric is Metric.AGE:
            return f"{label}: {self.value} days"
        if isinstance(self.value, WinLoss):
            return f"{label} ({self.game}): {self.value.wins}W / {self.value.losses}L"
        return f"{label} ({self.game}): {self.value}"


def effective_elo(games: Mapping[str, GameProfile], game: str) -> int:
    """Elo for ``game``, else the first positive elo in ``games`` order, else 0.

    The scan order is the order the API listed the games in. When several
    games carry a positive elo the pick is incidental, not a priority rule.
    """
    profile = games.get(game)
    if profile is not None:
        return profile.faceit_elo
    for profile in games.values():
        if profile.faceit_elo > 0:
            return profile.faceit_elo
    return 0


def extract_lifetime_stat(stats: StatsMap, candidates: Sequence[str]) -> int:
    """First candidate key present in ``stats`` whose value coerces to an int."""
    for key in candidates:
        value = stats.get(key)
        if value is None:
            continue
        number = value.as_int()
        if number is not None:
            return number
    raise DomainInvariantError(f"no numeric lifetime stat found for keys {list(candidates)}")


def parse_timestamp(value: str) -> datetime:
    text = _LONG_FRACTION.sub(r"\1", value.strip())
    for layout in TIMESTAMP_LAYOUTS:
        try:
            parsed = datetime.strptime(text, layout)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    raise DomainInvariantError(f"activated_at: unrecognised timestamp {value!r}")


def account_age_days(activated_at: str, now: Optional[datetime] = None) -> int:
    """Whole days between ``activated_at`` and ``now``, truncated."""
    activated = parse_timestamp(activated_at)
    current = now or _utcnow()
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    if activated > current:
        raise DomainInvariantError(f"activated_at {activated_at!r} is in the future")
    elapsed = current - activated
    return int(elapsed.total_seconds() // _SECONDS_PER_DAY)


def win_loss(stats: StatsMap) -> WinLoss:
    matches = extract_lifetime_stat(stats, MATCH_KEYS)
    wins = extract_lifetime_stat(stats, WIN_KEYS)
    # Upstream occasionally reports more wins than matches.
    return WinLoss(wins=wins, losses=max(matches - wins, 0), matches=matches)


class MetricService:
    """Computes the selected :class:`Metric` for a looked-up player."""

    def __init__(self, client: FaceitClient, clock: Optional[Clock] = None) -> None:
        self.client = client
        self._clock = clock or _utcnow
        self._log = get_logger(__name__, service="metrics")

    def compute(self, metric: Metric, player: PlayerDetails, game: str) -> MetricResult:
        value: Union[int, WinLoss]
        if metric.needs_stats:
            stats = self.client.get_player_stats(player.player_id, game)
            if metric is Metric.MATCHES:
                value = extract_lifetime_stat(stats.lifetime, MATCH_KEYS)
            else:
                value = win_loss(stats.lifetime)
        elif metric is Metric.AGE:
            value = account_age_days(player.activated_at, now=self._clock())
        else:
            value = effective_elo(player.games, game)
        self._log.info(lambda: f"metric-computed {metric.value}={value}")
        return MetricResult(metric=metric, game=game, value=value)
