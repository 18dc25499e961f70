from fastapi import APIRouter, Query, Request

from ..exceptions import http_problem
from ..ratelimit import compute_rate_limit, limiter
from ..schemas import (
    DraftPick,
    FairnessIn,
    FairnessOut,
    PairingValidation,
    PairingValidationIn,
    SuggestedPairing,
    SuggestPairingsIn,
)
from ..services import pairings

router = APIRouter(prefix="/pairings", tags=["pairings"])

MAX_DRAFT_PICKS = 200


# POST /api/pairings/fairness
@router.post("/fairness", response_model=FairnessOut)
@limiter.limit(compute_rate_limit)
async def fairness(request: Request, body: FairnessIn) -> FairnessOut:
    score = pairings.calculate_fairness_score(
        body.matches, body.team_a_players, body.team_b_players
    )
    return FairnessOut(fairness_score=score)


# POST /api/pairings/validate
@router.post("/validate", response_model=PairingValidation)
@limiter.limit(compute_rate_limit)
async def validate(request: Request, body: PairingValidationIn) -> PairingValidation:
    return pairings.validate_pairings(
        body.session, body.team_a_players, body.team_b_players
    )


# GET /api/pairings/draft-order?picks=12&teams=2
@router.get("/draft-order", response_model=list[DraftPick])
@limiter.limit(compute_rate_limit)
async def draft_order(
    request: Request,
    picks: int = Query(..., ge=0),
    teams: int = Query(2),
) -> list[DraftPick]:
    if teams < 1:
        raise http_problem(422, "teams must be at least 1", "invalid_draft_teams")
    if picks > MAX_DRAFT_PICKS:
        raise http_problem(
            422,
            f"at most {MAX_DRAFT_PICKS} picks can be drafted",
            "invalid_draft_picks",
        )
    return pairings.snake_draft_order(picks, teams)


# POST /api/pairings/suggest
@router.post("/suggest", response_model=list[SuggestedPairing])
@limiter.limit(compute_rate_limit)
async def suggest(request: Request, body: SuggestPairingsIn) -> list[SuggestedPairing]:
    return pairings.suggest_pairings(
        body.team_a_players, body.team_b_players, body.match_count
    )
