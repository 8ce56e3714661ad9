"""Shared fixtures: a scripted Data API behind httpx.MockTransport."""
from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from infrastructure.api import FaceitClient

BASE_URL = "https://api.test/data/v4"
PLAYER_ID = "ac71ba3c-d3d4-45e7-8be2-26aa3986867d"

PLAYER_PAYLOAD: Dict[str, Any] = {
    "player_id": PLAYER_ID,
    "nickname": "s1mple",
    "avatar": "https://assets.faceit-cdn.net/avatars/s1mple.jpg",
    "country": "ua",
    "faceit_url": "https://www.faceit.com/{lang}/players/s1mple",
    "activated_at": "2016-02-06T21:05:48.394Z",
    "verified": True,
    "membership_type": "",
    "memberships": ["free"],
    "platforms": {"steam": "STEAM_1:1:36968273"},
    "steam_id_64": "76561198034202275",
    "new_steam_id": "[U:1:73936547]",
    "steam_nickname": "s1mple",
    "friends_ids": ["f1", "f2"],
    "games": {
        "csgo": {
            "faceit_elo": 3120,
            "skill_level": 10,
            "skill_level_label": "10",
            "region": "EU",
            "game_player_id": "76561198034202275",
            "game_player_name": "s1mple",
            "game_profile_id": "b2b5e0a4",
        },
        "cs2": {
            "faceit_elo": 3450,
            "skill_level": 10,
            "region": "EU",
            "game_player_id": "76561198034202275",
            "game_player_name": "s1mple",
        },
    },
}

GAME_STATS_PAYLOAD: Dict[str, Any] = {
    "player_id": PLAYER_ID,
    "game_id": "cs2",
    "lifetime": {
        "Matches": "412",
        "Wins": "251",
        "Win Rate %": "61",
        "Average K/D Ratio": "1.41",
        "Recent Results": ["1", "1", "0", "1", "1"],
    },
    "segments": [{"label": "Mirage", "mode": "5v5", "type": "Map"}],
}

Responder = Callable[[httpx.Request], httpx.Response]


class FakeDataAPI:
    """Routes requests by raw path (and optionally query params) to canned responses."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: List[Tuple[str, Dict[str, str], Responder]] = []

    def route(self, path: str, responder: Responder, **params: str) -> None:
        self._routes.append((path, params, responder))

    def json(self, path: str, body: Any, status: int = 200, **params: str) -> None:
        self.route(path, lambda _r: httpx.Response(status, json=copy.deepcopy(body)), **params)

    def text(self, path: str, body: str, status: int = 200, **params: str) -> None:
        self.route(path, lambda _r: httpx.Response(status, text=body), **params)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        for path, params, responder in self._routes:
            if path != raw_path:
                continue
            if all(request.url.params.get(k) == v for k, v in params.items()):
                return responder(request)
        return httpx.Response(404, json={"code": "err_nf0", "message": "The resource was not found."})

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))

    def paths(self) -> List[str]:
        return [r.url.raw_path.decode("ascii").split("?", 1)[0] for r in self.requests]


@pytest.fixture
def api() -> FakeDataAPI:
    return FakeDataAPI()


@pytest.fixture
def make_client(api: FakeDataAPI) -> Callable[..., FaceitClient]:
    clients: List[FaceitClient] = []

    def _make(api_key: str = "  secret-token \n", base_url: Optional[str] = None, timeout: float = 5.0) -> FaceitClient:
        client = FaceitClient(api_key, base_url=base_url or BASE_URL, timeout=timeout, http_client=api.http_client())
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()


@pytest.fixture
def player_payload() -> Dict[str, Any]:
    return copy.deepcopy(PLAYER_PAYLOAD)


@pytest.fixture
def game_stats_payload() -> Dict[str, Any]:
    return copy.deepcopy(GAME_STATS_PAYLOAD)
