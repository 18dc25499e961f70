from typing import List

from fastapi import APIRouter, Request

from ..exceptions import checked_hole_history
from ..ratelimit import compute_rate_limit, limiter
from ..schemas import (
    MatchRecord,
    MatchResultOut,
    PlayerStandingsIn,
    PlayerStandingsOut,
    SessionStandingsIn,
    SessionStandingsOut,
)
from ..scoring.match_play import result_notation
from ..services import standings

router = APIRouter(prefix="/standings", tags=["standings"])


def _checked_matches(matches: List[MatchRecord]) -> List[MatchRecord]:
    for match in matches:
        checked_hole_history(match.hole_results)
    return matches


# POST /api/standings/session
@router.post("/session", response_model=SessionStandingsOut)
@limiter.limit(compute_rate_limit)
async def session_standings(
    request: Request, body: SessionStandingsIn
) -> SessionStandingsOut:
    matches = _checked_matches(body.matches)
    results = [
        MatchResultOut(result=result, notation=result_notation(result))
        for result in standings.final_results(matches)
    ]
    return SessionStandingsOut(
        points=standings.session_points(matches), results=results
    )


# POST /api/standings/player
@router.post("/player", response_model=PlayerStandingsOut)
@limiter.limit(compute_rate_limit)
async def player_standings(
    request: Request, body: PlayerStandingsIn
) -> PlayerStandingsOut:
    matches = _checked_matches(body.matches)
    return PlayerStandingsOut(
        player_id=body.player_id,
        points=standings.player_points(body.player_id, matches),
        record=standings.player_record(body.player_id, matches),
        clutch=standings.clutch_performance(body.player_id, matches),
    )
