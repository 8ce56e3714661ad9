"""Application settings and configuration."""
from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.errors import ConfigurationError

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / '.env'
load_dotenv(dotenv_path=ENV_PATH)

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|us|µs|ns|h|m|s)")
_UNIT_SECONDS = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "µs": 1e-6,
    "ns": 1e-9,
}


class Settings:
    """Defaults and environment-backed values, read once at import."""

    # ── Data API ───────────────────────────────────────────────────────────
    DEFAULT_BASE_URL: str   = 'https://open.faceit.com/data/v4'
    DEFAULT_TIMEOUT:  float = 60.0

    # cs2 lookups retry once against csgo for players who never migrated.
    DEFAULT_GAME:  str = 'cs2'
    FALLBACK_GAME: str = 'csgo'

    DEFAULT_METRIC: str = 'elo'

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = BASE_DIR
    DATA_DIR: Path = BASE_DIR / 'data'
    LOG_DIR:  Path = DATA_DIR / 'logs'
    DB_PATH:  Path = DATA_DIR / 'statclock.db'

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')


def parse_duration(value: str) -> float:
    """Parse ``30s``, ``1m30s``, ``500ms`` or a bare number of seconds."""
    text = value.strip()
    if not text:
        raise ConfigurationError("timeout must not be empty")
    try:
        seconds = float(text)
    except ValueError:
        pos = 0
        seconds = 0.0
        for m in _DURATION_PART.finditer(text):
            if m.start() != pos:
                break
            seconds += float(m.group(1)) * _UNIT_SECONDS[m.group(2)]
            pos = m.end()
        if pos != len(text):
            raise ConfigurationError(f"invalid timeout duration {value!r}")
    if not math.isfinite(seconds) or seconds <= 0:
        raise ConfigurationError(f"timeout must be positive, got {value!r}")
    return seconds


def _pick(flag: Optional[str], env: Mapping[str, str], name: str, default: str) -> str:
    if flag is not None and flag.strip():
        return flag.strip()
    from_env = env.get(name, '').strip()
    return from_env or default


@dataclass(frozen=True, slots=True)
class EndpointConfig:
    """Where and how to reach the Data API; immutable once resolved."""
    base_url: str
    timeout: float
    game: str

    @classmethod
    def resolve(
        cls,
        *,
        api: Optional[str] = None,
        timeout: Optional[str] = None,
        game: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "EndpointConfig":
        """Flag beats environment, environment beats built-in default."""
        env = os.environ if environ is None else environ
        base_url = _pick(api, env, 'FACEIT_API_URL', Settings.DEFAULT_BASE_URL).rstrip('/')
        raw_timeout = _pick(timeout, env, 'FACEIT_TIMEOUT', '')
        return cls(
            base_url=base_url or Settings.DEFAULT_BASE_URL,
            timeout=parse_duration(raw_timeout) if raw_timeout else Settings.DEFAULT_TIMEOUT,
            game=_pick(game, env, 'FACEIT_GAME', Settings.DEFAULT_GAME),
        )


settings = Settings()
