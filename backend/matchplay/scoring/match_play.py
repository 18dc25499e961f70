"""Match play scoring engine.

Each hole is worth +1 (team A), -1 (team B) or 0 (halved). The match score
is the running sum, positive when team A leads. A side is *dormie* when its
lead equals the holes left to play and the match is *closed out* once the
lead exceeds them, which produces the familiar "4&3" result.

State is always derived from the full ordered list of hole results; nothing
here keeps state between calls.
"""

import logging
import math
from typing import Sequence, Tuple

from ..schemas import (
    HALVED,
    HOLES_PER_ROUND,
    MATCH_HALVED,
    NOT_FINISHED,
    TEAM_A,
    TEAM_A_WIN,
    TEAM_B,
    TEAM_B_WIN,
    HoleResult,
    HoleWinner,
    MatchFinalResult,
    MatchState,
    Momentum,
    PlayerScore,
    SessionType,
)

logger = logging.getLogger(__name__)

_HOLE_VALUE = {TEAM_A: 1, TEAM_B: -1, HALVED: 0}


def determine_hole_winner(team_a_net_score: float, team_b_net_score: float) -> HoleWinner:
    if team_a_net_score < team_b_net_score:
        return TEAM_A
    if team_b_net_score < team_a_net_score:
        return TEAM_B
    return HALVED


def _best_net(scores: Sequence[PlayerScore]) -> float:
    if not scores:
        return math.inf
    return min(score.gross - score.strokes for score in scores)


def fourball_hole_winner(
    team_a_scores: Sequence[PlayerScore], team_b_scores: Sequence[PlayerScore]
) -> HoleWinner:
    """Compare each side's best net ball."""
    return determine_hole_winner(_best_net(team_a_scores), _best_net(team_b_scores))


def hole_winner_for_format(
    session_type: SessionType,
    team_a_scores: Sequence[PlayerScore],
    team_b_scores: Sequence[PlayerScore],
) -> HoleWinner:
    """Pick the hole winner using the rule for ``session_type``.

    Singles and foursomes put a single ball in play per side, so only the
    first score of each side counts. Fourball takes the better ball.
    """
    if session_type == "fourball":
        return fourball_hole_winner(team_a_scores, team_b_scores)
    if session_type in ("singles", "foursomes"):
        return determine_hole_winner(
            _best_net(team_a_scores[:1]), _best_net(team_b_scores[:1])
        )
    raise ValueError(f"unsupported session type: {session_type!r}")


def _score(hole_results: Sequence[HoleResult]) -> int:
    return sum(_HOLE_VALUE[result.winner] for result in hole_results)


def _side(match_score: int) -> str:
    return "Team A" if match_score > 0 else "Team B"


def _status_text(
    match_score: int,
    holes_played: int,
    holes_remaining: int,
    is_dormie: bool,
    is_closed_out: bool,
) -> str:
    lead = abs(match_score)
    if holes_remaining == 0:
        if match_score == 0:
            return "Match Halved"
        return f"{_side(match_score)} wins {lead} UP"
    if is_closed_out:
        return f"{_side(match_score)} wins {lead}&{holes_remaining}"
    if is_dormie:
        return f"{_side(match_score)} Dormie ({lead} UP, {holes_remaining} to play)"
    if match_score == 0:
        return f"All Square through {holes_played}"
    return f"{_side(match_score)} {lead} UP through {holes_played}"


def calculate_match_state(hole_results: Sequence[HoleResult]) -> MatchState:
    match_score = _score(hole_results)
    holes_played = len(hole_results)
    holes_remaining = max(0, HOLES_PER_ROUND - holes_played)
    lead = abs(match_score)

    is_dormie = lead > 0 and lead == holes_remaining and holes_remaining > 0
    is_closed_out = lead > holes_remaining
    can_continue = not is_closed_out and holes_remaining > 0

    return MatchState(
        match_score=match_score,
        holes_played=holes_played,
        holes_remaining=holes_remaining,
        is_dormie=is_dormie,
        is_closed_out=is_closed_out,
        can_continue=can_continue,
        status_text=_status_text(
            match_score, holes_played, holes_remaining, is_dormie, is_closed_out
        ),
    )


def _decided(match_score: int, holes_remaining: int) -> MatchFinalResult:
    if match_score > 0:
        outcome = TEAM_A_WIN
    elif match_score < 0:
        outcome = TEAM_B_WIN
    else:
        return MatchFinalResult(outcome=MATCH_HALVED, margin=0, holes_remaining=0)
    return MatchFinalResult(
        outcome=outcome, margin=abs(match_score), holes_remaining=holes_remaining
    )


def finalize_match(hole_results: Sequence[HoleResult]) -> MatchFinalResult:
    """Walk the history and report the result at the first closeout.

    A match that reaches 18 holes without a closeout is decided on the final
    score. Anything shorter is ``notFinished``.

    Holes recorded after a closeout are ignored here but still count in
    ``calculate_match_state``, so its status text can differ from this result.
    """
    match_score = 0
    for holes_played, result in enumerate(hole_results, start=1):
        match_score += _HOLE_VALUE[result.winner]
        holes_remaining = max(0, HOLES_PER_ROUND - holes_played)
        if abs(match_score) > holes_remaining:
            return _decided(match_score, holes_remaining)
        if holes_remaining == 0:
            return _decided(match_score, 0)
    return MatchFinalResult(outcome=NOT_FINISHED, margin=0, holes_remaining=0)


def result_notation(result: MatchFinalResult) -> str:
    if result.outcome == NOT_FINISHED:
        return "Not Finished"
    if result.outcome == MATCH_HALVED:
        return "Halved"
    if result.holes_remaining > 0:
        return f"{result.margin}&{result.holes_remaining}"
    return f"{result.margin} UP"


def match_points(
    result: MatchFinalResult, points_per_match: float = 1.0
) -> Tuple[float, float]:
    """Points earned by (team A, team B) for a match."""
    if result.outcome == TEAM_A_WIN:
        return points_per_match, 0.0
    if result.outcome == TEAM_B_WIN:
        return 0.0, points_per_match
    if result.outcome == MATCH_HALVED:
        return points_per_match / 2, points_per_match / 2
    return 0.0, 0.0


def momentum(hole_results: Sequence[HoleResult], last_n: int = 5) -> Momentum:
    """Tally the most recent ``last_n`` holes for streak indicators."""
    if last_n <= 0:
        return Momentum()
    recent = list(hole_results)[-last_n:]
    return Momentum(
        team_a_wins=sum(1 for r in recent if r.winner == TEAM_A),
        team_b_wins=sum(1 for r in recent if r.winner == TEAM_B),
        halves=sum(1 for r in recent if r.winner == HALVED),
    )
