"""Internal application services (pure helpers, no I/O)."""

from .pairings import (
    calculate_fairness_score,
    snake_draft_order,
    suggest_pairings,
    validate_pairings,
)
from .allowances import (
    default_allowance,
    fourball_strokes,
    foursomes_strokes,
    singles_strokes,
    strokes_for_session,
)
from .standings import (
    clutch_performance,
    player_points,
    player_record,
    session_points,
)

__all__ = [
    "calculate_fairness_score",
    "validate_pairings",
    "snake_draft_order",
    "suggest_pairings",
    "default_allowance",
    "singles_strokes",
    "fourball_strokes",
    "foursomes_strokes",
    "strokes_for_session",
    "player_points",
    "player_record",
    "clutch_performance",
    "session_points",
]
