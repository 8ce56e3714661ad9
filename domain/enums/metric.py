"""Metric selection for the report command."""
from enum import Enum


class Metric(Enum):
    """Derived metrics the CLI can print.

    Provides:
    - label: human-readable name for output
    - needs_stats: whether the game stats endpoint must be queried
    """

    ELO = "elo"
    MATCHES = "matches"
    AGE = "age"
    WL = "wl"

    @property
    def label(self) -> str:
        names = {
            "elo": "Elo",
            "matches": "Matches",
            "age": "Account age",
            "wl": "Win/Loss",
        }
        return names[self.value]

    @property
    def needs_stats(self) -> bool:
        return self in (Metric.MATCHES, Metric.WL)

    @classmethod
    def from_string(cls, value: str) -> "Metric":
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = "|".join(m.value for m in cls)
            raise ValueError(f"unknown metric {value!r}, expected one of {{{choices}}}") from None

    @classmethod
    def choices(cls) -> list[str]:
        return [m.value for m in cls]
