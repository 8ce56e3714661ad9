"""Raw Data API JSON into domain entities.

Every parser raises :class:`DecodeError` when a field has the wrong JSON
type. Missing fields take their zero value, as the API omits empty ones.
"""
from __future__ import annotations

import math
from typing import Any, Dict, List

from core.errors import DecodeError
from domain.entities import (
    Ban, PlayerBans,
    GameProfile, PlayerDetails,
    MatchHistoryItem, PlayerMatches,
    PlayerGameStats, PlayerStatsInRange, StatValue, StatsMap,
    RankingEntry, PlayerGlobalRanking,
    Team, TeamMember, PlayerTeams,
    Tournament, PlayerTournaments,
)


def _obj(data: Any, what: str) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError(f"{what}: expected object, got {type(data).__name__}")
    return data


def _list(data: Any, what: str) -> List[Any]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise DecodeError(f"{what}: expected array, got {type(data).__name__}")
    return data


def _str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"{key}: expected string, got {type(value).__name__}")
    return value


def _int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{key}: expected number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise DecodeError(f"{key}: number out of range")
    return int(value)


def _bool(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DecodeError(f"{key}: expected boolean, got {type(value).__name__}")
    return value


def _str_list(data: Dict[str, Any], key: str) -> List[str]:
    return [str(v) for v in _list(data.get(key), key)]


def parse_stats_map(data: Any, what: str = "stats") -> StatsMap:
    return {str(k): StatValue.from_json(v) for k, v in _obj(data, what).items()}


# ── Players ────────────────────────────────────────────────────────────

def parse_game_profile(data: Any) -> GameProfile:
    g = _obj(data, "games entry")
    return GameProfile(
        faceit_elo=_int(g, "faceit_elo"),
        skill_level=_int(g, "skill_level"),
        skill_level_label=_str(g, "skill_level_label"),
        region=_str(g, "region"),
        game_player_id=_str(g, "game_player_id"),
        game_player_name=_str(g, "game_player_name"),
        game_profile_id=_str(g, "game_profile_id"),
    )


def parse_player_details(data: Any) -> PlayerDetails:
    p = _obj(data, "player")
    games = {str(k): parse_game_profile(v) for k, v in _obj(p.get("games"), "games").items()}
    platforms = {str(k): str(v) for k, v in _obj(p.get("platforms"), "platforms").items() if v is not None}
    return PlayerDetails(
        player_id=_str(p, "player_id"),
        nickname=_str(p, "nickname"),
        avatar=_str(p, "avatar"),
        country=_str(p, "country"),
        faceit_url=_str(p, "faceit_url"),
        activated_at=_str(p, "activated_at"),
        verified=_bool(p, "verified"),
        games=games,
        platforms=platforms,
        membership_type=_str(p, "membership_type"),
        memberships=_str_list(p, "memberships"),
        steam_id_64=_str(p, "steam_id_64"),
        new_steam_id=_str(p, "new_steam_id"),
        steam_nickname=_str(p, "steam_nickname"),
        friends_ids=_str_list(p, "friends_ids"),
    )


def parse_bans(data: Any) -> PlayerBans:
    d = _obj(data, "bans")
    items = []
    for raw in _list(d.get("items"), "items"):
        b = _obj(raw, "ban")
        items.append(Ban(
            nickname=_str(b, "nickname"),
            user_id=_str(b, "user_id"),
            game=_str(b, "game"),
            reason=_str(b, "reason"),
            type=_str(b, "type"),
            starts_at=_str(b, "starts_at"),
            ends_at=_str(b, "ends_at"),
        ))
    return PlayerBans(items=items, start=_int(d, "start"), end=_int(d, "end"))


# ── Stats ──────────────────────────────────────────────────────────────

def parse_stats_in_range(data: Any) -> PlayerStatsInRange:
    d = _obj(data, "stats")
    items = [parse_stats_map(_obj(raw, "item").get("stats"), "item stats") for raw in _list(d.get("items"), "items")]
    return PlayerStatsInRange(items=items, start=_int(d, "start"), end=_int(d, "end"))


def parse_game_stats(data: Any) -> PlayerGameStats:
    d = _obj(data, "stats")
    lifetime = parse_stats_map(d.get("lifetime"), "lifetime")
    if not lifetime:
        # Range-shaped bodies carry the aggregate in the first item.
        items = _list(d.get("items"), "items")
        if items:
            lifetime = parse_stats_map(_obj(items[0], "item").get("stats"), "item stats")
    segments = [_obj(s, "segment") for s in _list(d.get("segments"), "segments")]
    return PlayerGameStats(
        player_id=_str(d, "player_id"),
        game_id=_str(d, "game_id"),
        lifetime=lifetime,
        segments=segments,
    )


# ── Match history ──────────────────────────────────────────────────────

def _parse_history_item(raw: Any) -> MatchHistoryItem:
    m = _obj(raw, "match")
    results = _obj(m.get("results"), "results")
    raw_score = _obj(results.get("score"), "score")
    # Non-numeric score entries (e.g. team names) are skipped.
    score = {
        str(k): _int(raw_score, k)
        for k, v in raw_score.items()
        if isinstance(v, (int, float)) and not isinstance(v, bool)
    }
    return MatchHistoryItem(
        match_id=_str(m, "match_id"),
        game_id=_str(m, "game_id"),
        region=_str(m, "region"),
        game_mode=_str(m, "game_mode"),
        match_type=_str(m, "match_type"),
        competition_id=_str(m, "competition_id"),
        competition_name=_str(m, "competition_name"),
        competition_type=_str(m, "competition_type"),
        organizer_id=_str(m, "organizer_id"),
        status=_str(m, "status"),
        started_at=_int(m, "started_at"),
        finished_at=_int(m, "finished_at"),
        winner=_str(results, "winner"),
        score=score,
        playing_players=_str_list(m, "playing_players"),
        faceit_url=_str(m, "faceit_url"),
    )


def parse_matches(data: Any) -> PlayerMatches:
    d = _obj(data, "history")
    return PlayerMatches(
        items=[_parse_history_item(raw) for raw in _list(d.get("items"), "items")],
        start=_int(d, "start"),
        end=_int(d, "end"),
        from_=_int(d, "from") if "from" in d else None,
        to=_int(d, "to") if "to" in d else None,
    )


# ── Teams & tournaments ────────────────────────────────────────────────

def parse_teams(data: Any) -> PlayerTeams:
    d = _obj(data, "teams")
    items = []
    for raw in _list(d.get("items"), "items"):
        t = _obj(raw, "team")
        members = []
        for rm in _list(t.get("members"), "members"):
            m = _obj(rm, "member")
            members.append(TeamMember(
                user_id=_str(m, "user_id"),
                nickname=_str(m, "nickname"),
                country=_str(m, "country"),
                skill_level=_int(m, "skill_level"),
                membership_type=_str(m, "membership_type"),
            ))
        items.append(Team(
            team_id=_str(t, "team_id"),
            name=_str(t, "name"),
            nickname=_str(t, "nickname"),
            game=_str(t, "game"),
            leader=_str(t, "leader"),
            team_type=_str(t, "team_type"),
            members=members,
            faceit_url=_str(t, "faceit_url"),
        ))
    return PlayerTeams(items=items, start=_int(d, "start"), end=_int(d, "end"))


def parse_tournaments(data: Any) -> PlayerTournaments:
    d = _obj(data, "tournaments")
    items = []
    for raw in _list(d.get("items"), "items"):
        t = _obj(raw, "tournament")
        items.append(Tournament(
            tournament_id=_str(t, "tournament_id"),
            name=_str(t, "name"),
            game_id=_str(t, "game_id"),
            region=_str(t, "region"),
            status=_str(t, "status"),
            match_type=_str(t, "match_type"),
            membership_type=_str(t, "membership_type"),
            started_at=_int(t, "started_at"),
            team_size=_int(t, "team_size"),
            min_skill=_int(t, "min_skill"),
            max_skill=_int(t, "max_skill"),
            number_of_players=_int(t, "number_of_players"),
            number_of_players_joined=_int(t, "number_of_players_joined"),
            prize_type=_str(t, "prize_type"),
            faceit_url=_str(t, "faceit_url"),
        ))
    return PlayerTournaments(items=items, start=_int(d, "start"), end=_int(d, "end"))


# ── Rankings ───────────────────────────────────────────────────────────

def parse_global_ranking(data: Any) -> PlayerGlobalRanking:
    d = _obj(data, "ranking")
    items = []
    for raw in _list(d.get("items"), "items"):
        r = _obj(raw, "ranking entry")
        items.append(RankingEntry(
            player_id=_str(r, "player_id"),
            nickname=_str(r, "nickname"),
            country=_str(r, "country"),
            faceit_elo=_int(r, "faceit_elo"),
            game_skill_level=_int(r, "game_skill_level"),
            position=_int(r, "position"),
        ))
    return PlayerGlobalRanking(
        items=items,
        position=_int(d, "position"),
        start=_int(d, "start"),
        end=_int(d, "end"),
    )
