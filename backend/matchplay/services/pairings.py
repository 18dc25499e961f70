"""Pairing fairness, validation and draft helpers for match organisers."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .. import config
from ..schemas import (
    DraftPick,
    PairingSession,
    PairingValidation,
    Player,
    ProposedMatch,
    SuggestedPairing,
    players_per_team,
)

logger = logging.getLogger(__name__)

# Each stroke of average handicap gap between the sides costs this many points.
FAIRNESS_PENALTY_PER_STROKE = 10.0


def _side_average(player_ids: Iterable[str], lookup: dict[str, Player]) -> float:
    handicaps = [lookup[pid].handicap_index for pid in player_ids if pid in lookup]
    if not handicaps:
        return 0.0
    return sum(handicaps) / len(handicaps)


def calculate_fairness_score(
    matches: Sequence[ProposedMatch],
    team_a_players: Sequence[Player],
    team_b_players: Sequence[Player],
) -> float:
    """Return a 0-100 score where 100 means the sides are evenly matched.

    Player ids that are not found in the corresponding roster are skipped.
    An empty match list is considered perfectly fair.
    """
    if not matches:
        return 100.0

    team_a = {p.id: p for p in team_a_players}
    team_b = {p.id: p for p in team_b_players}

    total_diff = 0.0
    for match in matches:
        total_diff += abs(
            _side_average(match.team_a_ids, team_a)
            - _side_average(match.team_b_ids, team_b)
        )
    avg_diff = total_diff / len(matches)
    return max(0.0, 100.0 - avg_diff * FAIRNESS_PENALTY_PER_STROKE)


def _duplicate_warnings(
    matches: Sequence[ProposedMatch],
    side_label: str,
    attr: str,
    roster: Sequence[Player],
) -> list[str]:
    names = {p.id: p.name for p in roster}
    used: set[str] = set()
    warnings: list[str] = []
    for match in matches:
        for pid in getattr(match, attr):
            if pid in used:
                warnings.append(
                    f"{names.get(pid, 'Unknown')} appears in multiple {side_label} pairings"
                )
            used.add(pid)
    return warnings


def validate_pairings(
    session: PairingSession,
    team_a_players: Sequence[Player],
    team_b_players: Sequence[Player],
) -> PairingValidation:
    """Check a session lineup before it is published.

    Wrong player counts are errors and make the lineup invalid. Players
    used twice on the same side and a poor fairness score only produce
    warnings.
    """
    matches = session.sorted_matches()
    required = players_per_team(session.session_type)

    errors: list[str] = []
    for number, match in enumerate(matches, start=1):
        if len(match.team_a_ids) != required:
            errors.append(f"Match {number} needs {required} Team A players")
        if len(match.team_b_ids) != required:
            errors.append(f"Match {number} needs {required} Team B players")

    warnings = _duplicate_warnings(matches, "Team A", "team_a_ids", team_a_players)
    warnings += _duplicate_warnings(matches, "Team B", "team_b_ids", team_b_players)

    fairness = calculate_fairness_score(matches, team_a_players, team_b_players)
    if fairness < config.FAIRNESS_WARNING_THRESHOLD:
        warnings.append(
            f"Handicap spread seems unbalanced (Fairness: {int(fairness)}%)"
        )

    if errors:
        logger.debug("pairing validation found %d error(s)", len(errors))

    return PairingValidation(
        is_valid=not errors,
        warnings=warnings,
        errors=errors,
        fairness_score=fairness,
    )


def snake_draft_order(total_picks: int, teams: int = 2) -> list[DraftPick]:
    """Return the snake draft pick order.

    Even rounds run 0..teams-1, odd rounds run back the other way. ``pick``
    is a running 1-based counter across all teams.
    """
    if total_picks <= 0 or teams <= 0:
        return []

    order: list[DraftPick] = []
    round_number = 0
    while len(order) < total_picks:
        indices = range(teams) if round_number % 2 == 0 else range(teams - 1, -1, -1)
        for team in indices:
            order.append(DraftPick(team=team, pick=len(order) + 1))
            if len(order) >= total_picks:
                break
        round_number += 1
    return order


def suggest_pairings(
    team_a_players: Sequence[Player],
    team_b_players: Sequence[Player],
    match_count: int,
) -> list[SuggestedPairing]:
    """Pair players of similar rank on each side by handicap index.

    A side that runs out of players gets an empty slot for the remaining
    matches.
    """
    if match_count <= 0:
        return []

    sorted_a = sorted(team_a_players, key=lambda p: p.handicap_index)
    sorted_b = sorted(team_b_players, key=lambda p: p.handicap_index)

    return [
        SuggestedPairing(team_a=sorted_a[i : i + 1], team_b=sorted_b[i : i + 1])
        for i in range(match_count)
    ]
