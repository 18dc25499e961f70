"""Points and records across finished matches."""

from __future__ import annotations

from typing import Sequence

from ..schemas import (
    HALVED,
    MATCH_HALVED,
    NOT_FINISHED,
    TEAM_A,
    TEAM_A_WIN,
    TEAM_B,
    TEAM_B_WIN,
    ClutchRecord,
    MatchFinalResult,
    MatchRecord,
    PlayerRecord,
    SessionPoints,
)
from ..scoring.match_play import finalize_match, match_points

CLUTCH_HOLES = 3


def _finished(matches: Sequence[MatchRecord]):
    for match in matches:
        result = finalize_match(match.hole_results)
        if result.outcome != NOT_FINISHED:
            yield match, result


def _side_of(player_id: str, match: MatchRecord) -> str | None:
    if player_id in match.team_a_ids:
        return TEAM_A
    if player_id in match.team_b_ids:
        return TEAM_B
    return None


def player_points(player_id: str, matches: Sequence[MatchRecord]) -> float:
    """Total points a player earned for their side in finished matches."""
    points = 0.0
    for match, result in _finished(matches):
        side = _side_of(player_id, match)
        if side is None:
            continue
        team_a, team_b = match_points(result, match.points_per_match)
        points += team_a if side == TEAM_A else team_b
    return points


def player_record(player_id: str, matches: Sequence[MatchRecord]) -> PlayerRecord:
    wins = losses = halves = 0
    for match, result in _finished(matches):
        side = _side_of(player_id, match)
        if side is None:
            continue
        if result.outcome == MATCH_HALVED:
            halves += 1
        elif (result.outcome == TEAM_A_WIN) == (side == TEAM_A):
            wins += 1
        else:
            losses += 1
    return PlayerRecord(wins=wins, losses=losses, halves=halves)


def clutch_performance(player_id: str, matches: Sequence[MatchRecord]) -> ClutchRecord:
    """Holes won and lost over the closing holes of each finished match.

    Uses the last three recorded holes, so a match closed out early counts
    the holes that decided it.
    """
    won = lost = 0
    for match, _ in _finished(matches):
        side = _side_of(player_id, match)
        if side is None:
            continue
        for result in match.hole_results[-CLUTCH_HOLES:]:
            if result.winner == HALVED:
                continue
            if result.winner == side:
                won += 1
            else:
                lost += 1
    return ClutchRecord(holes_won=won, holes_lost=lost)


def session_points(matches: Sequence[MatchRecord]) -> SessionPoints:
    team_a = team_b = 0.0
    for match, result in _finished(matches):
        a, b = match_points(result, match.points_per_match)
        team_a += a
        team_b += b
    total = sum(match.points_per_match for match in matches)
    return SessionPoints(team_a=team_a, team_b=team_b, total_available=total)


def final_results(matches: Sequence[MatchRecord]) -> list[MatchFinalResult]:
    return [finalize_match(match.hole_results) for match in matches]
