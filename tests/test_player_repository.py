import sqlite3

import pytest

from core.errors import PersistenceError
from domain.entities import PlayerRecord
from infrastructure.repositories import PlayerRepository

PLAYER_ID = "ac71ba3c-d3d4-45e7-8be2-26aa3986867d"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "nested" / "players.db"


def test_creates_parent_directory_and_table(db_path):
    with PlayerRepository(db_path):
        pass

    assert db_path.exists()
    with sqlite3.connect(db_path) as conn:
        columns = [row[1] for row in conn.execute("PRAGMA table_info(players)")]
    assert columns == ["player_id", "nickname", "steam_id"]


def test_upsert_then_lookup(db_path):
    with PlayerRepository(db_path) as repo:
        repo.upsert(PlayerRecord(PLAYER_ID, "s1mple", "76561198034202275"))
        assert repo.lookup(PLAYER_ID) == PlayerRecord(PLAYER_ID, "s1mple", "76561198034202275")


def test_second_upsert_updates_in_place(db_path):
    with PlayerRepository(db_path) as repo:
        repo.upsert(PlayerRecord(PLAYER_ID, "s1mple", "76561198034202275"))
        repo.upsert(PlayerRecord(PLAYER_ID, "s1mple-renamed", ""))

    with sqlite3.connect(db_path) as conn:
        rows = conn.execute("SELECT player_id, nickname, steam_id FROM players").fetchall()
    assert rows == [(PLAYER_ID, "s1mple-renamed", "")]


def test_rows_survive_reopen(db_path):
    with PlayerRepository(db_path) as repo:
        repo.upsert(PlayerRecord(PLAYER_ID, "s1mple"))

    with PlayerRepository(db_path) as repo:
        assert repo.lookup(PLAYER_ID).nickname == "s1mple"


def test_unknown_player_is_none(db_path):
    with PlayerRepository(db_path) as repo:
        assert repo.lookup("nobody") is None


@pytest.mark.parametrize("player_id", ["", "   "])
def test_empty_player_id_is_rejected(db_path, player_id):
    with PlayerRepository(db_path) as repo:
        with pytest.raises(PersistenceError, match="without player_id"):
            repo.upsert(PlayerRecord(player_id, "ghost"))


def test_unopenable_database_is_a_persistence_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    with pytest.raises(PersistenceError, match="cannot open player database"):
        PlayerRepository(blocker / "players.db")


def test_connection_is_closed_when_file_is_not_a_database(tmp_path, monkeypatch):
    path = tmp_path / "players.db"
    path.write_bytes(b"definitely not sqlite" * 64)
    opened = []
    real_connect = sqlite3.connect

    def tracking_connect(*args, **kwargs):
        conn = real_connect(*args, **kwargs)
        opened.append(conn)
        return conn

    monkeypatch.setattr(sqlite3, "connect", tracking_connect)

    with pytest.raises(PersistenceError, match="cannot open player database"):
        PlayerRepository(path)

    assert len(opened) == 1
    with pytest.raises(sqlite3.ProgrammingError):
        opened[0].execute("SELECT 1")
