"""Handicap allowances for the team match formats.

All fractional strokes are truncated toward zero.
"""

from typing import List, Literal, Optional, Sequence, Tuple

from ..schemas import SessionType

AllowanceKind = Literal["singles", "fourball", "foursomes", "custom"]

DEFAULT_ALLOWANCES = {
    "singles": 1.0,
    "fourball": 0.9,
    "foursomes": 0.5,
}

_DESCRIPTIONS = {
    "singles": "100% of the difference in course handicaps",
    "fourball": "90% of lowest handicap, others play off that",
    "foursomes": "50% of combined team handicaps",
}


def default_allowance(session_type: SessionType) -> float:
    return DEFAULT_ALLOWANCES[session_type]


def describe_allowance(kind: AllowanceKind, allowance: Optional[float] = None) -> str:
    if kind == "custom" or kind not in _DESCRIPTIONS:
        return f"{int((allowance or 0) * 100)}% of handicap"
    return _DESCRIPTIONS[kind]


def singles_strokes(
    player_a_course_handicap: int,
    player_b_course_handicap: int,
    allowance: float = 1.0,
) -> Tuple[int, int]:
    """The higher handicap receives the (scaled) difference."""
    difference = player_a_course_handicap - player_b_course_handicap
    adjusted = int(abs(difference) * allowance)
    if difference > 0:
        return adjusted, 0
    if difference < 0:
        return 0, adjusted
    return 0, 0


def fourball_strokes(
    team_a_course_handicaps: Sequence[int],
    team_b_course_handicaps: Sequence[int],
    allowance: float = 0.9,
) -> Tuple[List[int], List[int]]:
    """The lowest handicap plays off scratch, the rest off the difference."""
    everyone = list(team_a_course_handicaps) + list(team_b_course_handicaps)
    if not everyone:
        return [], []
    lowest = min(everyone)
    return (
        [int((hcp - lowest) * allowance) for hcp in team_a_course_handicaps],
        [int((hcp - lowest) * allowance) for hcp in team_b_course_handicaps],
    )


def foursomes_strokes(
    team_a_course_handicaps: Sequence[int],
    team_b_course_handicaps: Sequence[int],
    allowance: float = 0.5,
) -> Tuple[int, int]:
    team_a = int(sum(team_a_course_handicaps) * allowance)
    team_b = int(sum(team_b_course_handicaps) * allowance)
    difference = team_a - team_b
    if difference > 0:
        return difference, 0
    if difference < 0:
        return 0, -difference
    return 0, 0


def strokes_for_session(
    session_type: SessionType,
    team_a_course_handicaps: Sequence[int],
    team_b_course_handicaps: Sequence[int],
    allowance: Optional[float] = None,
) -> Tuple[List[int], List[int]]:
    """Per-player strokes for each side under the format's allowance.

    Singles and foursomes hand out one figure per side, returned as a
    single-item list so every format has the same shape.
    """
    pct = default_allowance(session_type) if allowance is None else allowance
    if session_type == "fourball":
        return fourball_strokes(team_a_course_handicaps, team_b_course_handicaps, pct)
    if session_type == "foursomes":
        a, b = foursomes_strokes(team_a_course_handicaps, team_b_course_handicaps, pct)
        return [a], [b]
    a, b = singles_strokes(
        team_a_course_handicaps[0] if team_a_course_handicaps else 0,
        team_b_course_handicaps[0] if team_b_course_handicaps else 0,
        pct,
    )
    return [a], [b]
