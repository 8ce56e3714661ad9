"""Loosely-typed statistics values as returned by the Data API."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class StatKind(Enum):
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class StatValue:
    """One value of a stats map, tagged with the JSON type it arrived as.

    The API is inconsistent: the same statistic may be ``42``, ``42.0`` or
    ``"42"`` depending on the endpoint, so callers go through :meth:`as_int`.
    """
    kind: StatKind
    raw: Any

    @classmethod
    def from_json(cls, value: Any) -> "StatValue":
        # bool is an int subclass in Python but never a count.
        if isinstance(value, bool):
            return cls(StatKind.OTHER, value)
        if isinstance(value, int):
            return cls(StatKind.INTEGER, value)
        if isinstance(value, float):
            return cls(StatKind.FLOAT, value)
        if isinstance(value, str):
            return cls(StatKind.STRING, value)
        return cls(StatKind.OTHER, value)

    def as_int(self) -> Optional[int]:
        """Tolerant integer coercion; ``None`` when the value is not numeric."""
        if self.kind is StatKind.INTEGER:
            return self.raw
        if self.kind is StatKind.FLOAT:
            return int(self.raw) if math.isfinite(self.raw) else None
        if self.kind is StatKind.STRING:
            text = self.raw.strip()
            try:
                return int(text)
            except ValueError:
                pass
            try:
                number = float(text)
            except ValueError:
                return None
            return int(number) if math.isfinite(number) else None
        return None


StatsMap = Dict[str, StatValue]


@dataclass
class PlayerStatsInRange:
    """``/players/{id}/games/{game}/stats`` as a list of per-match stat maps."""
    items: List[StatsMap] = field(default_factory=list)
    start: int = 0
    end: int = 0


@dataclass
class PlayerGameStats:
    """Lifetime and per-segment statistics of one player in one game."""
    player_id: str = ""
    game_id: str = ""
    lifetime: StatsMap = field(default_factory=dict)
    segments: List[Dict[str, Any]] = field(default_factory=list)
