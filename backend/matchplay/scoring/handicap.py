"""Course handicap, per-hole stroke allocation and net score helpers.

Malformed structural input (short or duplicated hole tables, score arrays
of the wrong length) never raises; each helper returns its documented
all-zero default instead.
"""

import logging
import math
from typing import List, Optional, Sequence

from ..schemas import (
    HOLES_PER_ROUND,
    CourseDifficulty,
    ScoringBreakdown,
    StablefordPointTable,
)
from .stableford import stableford_points

logger = logging.getLogger(__name__)

STANDARD_SLOPE = 113


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return int(-rounded if value < 0 else rounded)


def calculate_course_handicap(
    handicap_index: float, slope_rating: int, course_rating: float, par: int
) -> int:
    """Return the course handicap for a player on a given tee.

    ``round(index * slope / 113 + (rating - par))`` with halves rounded away
    from zero. Negative results are valid.
    """
    raw = handicap_index * (slope_rating / STANDARD_SLOPE) + (course_rating - par)
    return _round_half_away(raw)


def course_handicap_for_tee(handicap_index: float, tee: CourseDifficulty) -> int:
    return calculate_course_handicap(
        handicap_index, tee.slope_rating, tee.course_rating, tee.par
    )


def is_valid_hole_table(hole_handicaps: Sequence[int]) -> bool:
    if len(hole_handicaps) != HOLES_PER_ROUND:
        return False
    return sorted(hole_handicaps) == list(range(1, HOLES_PER_ROUND + 1))


def allocate_strokes(course_handicap: int, hole_handicaps: Sequence[int]) -> List[int]:
    """Spread ``course_handicap`` strokes over the 18 holes.

    Every hole gets the same base allowance and the hardest holes (lowest
    hole handicap first) pick up the remainder one stroke each. Plus
    handicaps give strokes back on the hardest holes, so ``-3`` means the
    three hardest holes each get ``-1``. The remainder keeps the sign of the
    course handicap rather than wrapping the way ``%`` does for negatives.
    """
    if not is_valid_hole_table(hole_handicaps):
        logger.debug("invalid hole handicap table %r; allocating no strokes", hole_handicaps)
        return [0] * HOLES_PER_ROUND

    sign = -1 if course_handicap < 0 else 1
    base, extra = divmod(abs(course_handicap), HOLES_PER_ROUND)

    hardest_first = sorted(range(HOLES_PER_ROUND), key=lambda i: hole_handicaps[i])
    strokes = [sign * base] * HOLES_PER_ROUND
    for index in hardest_first[:extra]:
        strokes[index] += sign
    return strokes


def strokes_on_hole(
    hole_number: int, course_handicap: int, hole_handicaps: Sequence[int]
) -> int:
    if not 1 <= hole_number <= HOLES_PER_ROUND:
        return 0
    return allocate_strokes(course_handicap, hole_handicaps)[hole_number - 1]


def calculate_net_score(gross_strokes: int, strokes_received: int) -> int:
    return gross_strokes - strokes_received


def best_ball_net_score(scores: Sequence[int], strokes_allocations: Sequence[int]) -> int:
    """Lowest net score in the group; 0 for empty or mismatched input."""
    if not scores or len(scores) != len(strokes_allocations):
        return 0
    return min(
        calculate_net_score(gross, received)
        for gross, received in zip(scores, strokes_allocations)
    )


def best_ball_stableford_points(
    scores: Sequence[int],
    par: int,
    strokes_allocations: Sequence[int],
    table: Optional[StablefordPointTable] = None,
) -> int:
    # Points are taken per player, not from the best net score: with a
    # custom table the two can disagree.
    if not scores or len(scores) != len(strokes_allocations):
        return 0
    return max(
        stableford_points(gross, par, received, table)
        for gross, received in zip(scores, strokes_allocations)
    )


def scoring_breakdown(
    hole_scores: Sequence[int], strokes_allocation: Sequence[int]
) -> ScoringBreakdown:
    if len(hole_scores) != HOLES_PER_ROUND or len(strokes_allocation) != HOLES_PER_ROUND:
        logger.debug(
            "scoring_breakdown needs %d holes (got %d scores, %d strokes)",
            HOLES_PER_ROUND,
            len(hole_scores),
            len(strokes_allocation),
        )
        return ScoringBreakdown()

    nets = [
        calculate_net_score(gross, received)
        for gross, received in zip(hole_scores, strokes_allocation)
    ]
    return ScoringBreakdown(
        front9=sum(nets[:9]),
        back9=sum(nets[9:]),
        last6=sum(nets[-6:]),
        last3=sum(nets[-3:]),
        last1=nets[-1],
        total=sum(nets),
    )
