"""Stableford points tables and lookup.

Net scores are bucketed by their difference to par:

======== ============
delta    bucket
======== ============
<= -3    albatross
-2       eagle
-1       birdie
0        par
+1       bogey
+2       double bogey
>= +3    worse
======== ============

Both built-in tables can be overridden key by key from an organizer's
configuration, which uses the camelCase names ``doubleBogey`` etc.
"""

import logging
from typing import Mapping, Optional, Sequence

from ..schemas import StablefordPointTable, StablefordVariant

logger = logging.getLogger(__name__)

STANDARD_TABLE = StablefordPointTable()
MODIFIED_TABLE = StablefordPointTable(
    albatross=8,
    eagle=5,
    birdie=2,
    par=0,
    bogey=-1,
    double_bogey=-3,
    worse=-5,
)

_BUCKETS = {
    -2: "eagle",
    -1: "birdie",
    0: "par",
    1: "bogey",
    2: "double_bogey",
}

_CONFIG_KEYS = {
    "albatross": "albatross",
    "eagle": "eagle",
    "birdie": "birdie",
    "par": "par",
    "bogey": "bogey",
    "doubleBogey": "double_bogey",
    "double_bogey": "double_bogey",
    "worse": "worse",
}


def bucket_for(delta: int) -> str:
    """Return the table field name for a net score ``delta`` to par."""
    if delta <= -3:
        return "albatross"
    if delta >= 3:
        return "worse"
    return _BUCKETS[delta]


def build_table(
    variant: StablefordVariant = "standard",
    overrides: Optional[Mapping[str, int]] = None,
) -> StablefordPointTable:
    """Start from the built-in table for ``variant`` and apply ``overrides``.

    Unrecognised keys are ignored.
    """
    base = MODIFIED_TABLE if variant == "modified" else STANDARD_TABLE
    if not overrides:
        return base
    updates = {}
    for key, value in overrides.items():
        field = _CONFIG_KEYS.get(key)
        if field is None:
            logger.debug("ignoring unknown stableford option %r", key)
            continue
        updates[field] = int(value)
    return base.model_copy(update=updates)


def points_for_delta(delta: int, table: Optional[StablefordPointTable] = None) -> int:
    table = table or STANDARD_TABLE
    return getattr(table, bucket_for(delta))


def stableford_points(
    gross_score: int,
    par: int,
    strokes_received: int,
    table: Optional[StablefordPointTable] = None,
) -> int:
    net = gross_score - strokes_received
    return points_for_delta(net - par, table)


def stableford_total(
    gross_scores: Sequence[int],
    pars: Sequence[int],
    strokes: Sequence[int],
    table: Optional[StablefordPointTable] = None,
) -> int:
    if not (len(gross_scores) == len(pars) == len(strokes)):
        logger.debug(
            "stableford_total length mismatch (%d scores, %d pars, %d strokes)",
            len(gross_scores),
            len(pars),
            len(strokes),
        )
        return 0
    return sum(
        stableford_points(gross, par, received, table)
        for gross, par, received in zip(gross_scores, pars, strokes)
    )
