from fastapi import APIRouter, Request

from ..ratelimit import compute_rate_limit, limiter
from ..schemas import (
    AllowanceIn,
    AllowanceOut,
    BreakdownIn,
    CourseHandicapIn,
    CourseHandicapOut,
    ScoringBreakdown,
    StablefordIn,
    StablefordOut,
    StrokeAllocationIn,
    StrokeAllocationOut,
)
from ..scoring import handicap, stableford
from ..services import allowances

router = APIRouter(prefix="/handicap", tags=["handicap"])


# POST /api/handicap/course-handicap
@router.post("/course-handicap", response_model=CourseHandicapOut)
@limiter.limit(compute_rate_limit)
async def course_handicap(request: Request, body: CourseHandicapIn) -> CourseHandicapOut:
    value = handicap.course_handicap_for_tee(body.handicap_index, body.tee)
    return CourseHandicapOut(course_handicap=value)


# POST /api/handicap/strokes
@router.post("/strokes", response_model=StrokeAllocationOut)
@limiter.limit(compute_rate_limit)
async def stroke_allocation(
    request: Request, body: StrokeAllocationIn
) -> StrokeAllocationOut:
    strokes = handicap.allocate_strokes(body.course_handicap, body.hole_handicaps)
    return StrokeAllocationOut(strokes=strokes, total=sum(strokes))


# POST /api/handicap/stableford
@router.post("/stableford", response_model=StablefordOut)
@limiter.limit(compute_rate_limit)
async def stableford_card(request: Request, body: StablefordIn) -> StablefordOut:
    table = stableford.build_table(body.variant, body.points)
    received = body.strokes or [0] * len(body.gross_scores)
    points = [
        stableford.stableford_points(gross, par, strokes, table)
        for gross, par, strokes in zip(body.gross_scores, body.pars, received)
    ]
    return StablefordOut(points=points, total=sum(points), table=table)


# POST /api/handicap/breakdown
@router.post("/breakdown", response_model=ScoringBreakdown)
@limiter.limit(compute_rate_limit)
async def breakdown(request: Request, body: BreakdownIn) -> ScoringBreakdown:
    return handicap.scoring_breakdown(body.hole_scores, body.strokes)


# POST /api/handicap/allowances
@router.post("/allowances", response_model=AllowanceOut)
@limiter.limit(compute_rate_limit)
async def format_allowances(request: Request, body: AllowanceIn) -> AllowanceOut:
    pct = (
        allowances.default_allowance(body.session_type)
        if body.allowance is None
        else body.allowance
    )
    team_a, team_b = allowances.strokes_for_session(
        body.session_type, body.team_a_handicaps, body.team_b_handicaps, pct
    )
    kind = body.session_type if body.allowance is None else "custom"
    return AllowanceOut(
        session_type=body.session_type,
        allowance=pct,
        description=allowances.describe_allowance(kind, pct),
        team_a_strokes=team_a,
        team_b_strokes=team_b,
    )
