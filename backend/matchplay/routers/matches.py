from fastapi import APIRouter, Request

from ..exceptions import checked_hole_history
from ..ratelimit import compute_rate_limit, limiter
from ..schemas import (
    FinalResultOut,
    HoleHistoryIn,
    HoleWinnerIn,
    HoleWinnerOut,
    MatchState,
    Momentum,
    MomentumIn,
)
from ..scoring import match_play

router = APIRouter(prefix="/matches", tags=["matches"])


# POST /api/matches/state
@router.post("/state", response_model=MatchState)
@limiter.limit(compute_rate_limit)
async def match_state(request: Request, body: HoleHistoryIn) -> MatchState:
    return match_play.calculate_match_state(checked_hole_history(body.hole_results))


# POST /api/matches/finalize
@router.post("/finalize", response_model=FinalResultOut)
@limiter.limit(compute_rate_limit)
async def finalize(request: Request, body: HoleHistoryIn) -> FinalResultOut:
    result = match_play.finalize_match(checked_hole_history(body.hole_results))
    team_a, team_b = match_play.match_points(result)
    return FinalResultOut(
        result=result,
        notation=match_play.result_notation(result),
        team_a_points=team_a,
        team_b_points=team_b,
    )


# POST /api/matches/momentum
@router.post("/momentum", response_model=Momentum)
@limiter.limit(compute_rate_limit)
async def momentum(request: Request, body: MomentumIn) -> Momentum:
    return match_play.momentum(checked_hole_history(body.hole_results), body.last_n)


# POST /api/matches/hole-winner
@router.post("/hole-winner", response_model=HoleWinnerOut)
@limiter.limit(compute_rate_limit)
async def hole_winner(request: Request, body: HoleWinnerIn) -> HoleWinnerOut:
    winner = match_play.hole_winner_for_format(
        body.session_type, body.team_a, body.team_b
    )
    return HoleWinnerOut(winner=winner)
