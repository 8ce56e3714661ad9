"""SQLite-backed store of looked-up players."""
from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any, Optional

from core.errors import PersistenceError
from core.logging.logger import get_logger
from domain.entities import PlayerRecord
from domain.interfaces import IPlayerRepository


class PlayerRepository(IPlayerRepository):
    """Keyed upsert/lookup of :class:`PlayerRecord` rows.

    One connection per instance; single writer, no transactions beyond the
    implicit one per statement.
    """

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        self._log = get_logger(__name__, service="db")
        try:
            if str(self.db_path) != ":memory:":
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self.db_path))
        except (OSError, sqlite3.Error) as e:
            raise PersistenceError(f"cannot open player database {self.db_path}: {e}") from e
        try:
            self._create_table()
        except sqlite3.Error as e:
            self._conn.close()
            raise PersistenceError(f"cannot open player database {self.db_path}: {e}") from e

    def __enter__(self) -> "PlayerRepository":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def _create_table(self) -> None:
        self._conn.execute(
            "CREATE TABLE IF NOT EXISTS players (player_id TEXT PRIMARY KEY, nickname TEXT NOT NULL, steam_id TEXT)"
        )
        self._conn.commit()

    def upsert(self, record: PlayerRecord) -> None:
        if not record.player_id.strip():
            raise PersistenceError("refusing to save a player without player_id")
        try:
            self._conn.execute(
                "INSERT INTO players (player_id, nickname, steam_id) VALUES (?, ?, ?) "
                "ON CONFLICT(player_id) DO UPDATE SET nickname = excluded.nickname, steam_id = excluded.steam_id",
                (record.player_id, record.nickname, record.steam_id),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            raise PersistenceError(f"saving player {record.player_id}: {e}") from e
        self._log.debug(lambda: f"player-saved {record.player_id}")

    def lookup(self, player_id: str) -> Optional[PlayerRecord]:
        try:
            row = self._conn.execute(
                "SELECT player_id, nickname, steam_id FROM players WHERE player_id = ?",
                (player_id,),
            ).fetchone()
        except sqlite3.Error as e:
            raise PersistenceError(f"loading player {player_id}: {e}") from e
        if row is None:
            return None
        return PlayerRecord(player_id=row[0], nickname=row[1], steam_id=row[2] or "")
