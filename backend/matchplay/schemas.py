from typing import Dict, List, Literal, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

HOLES_PER_ROUND = 18

HoleWinner = Literal["teamA", "teamB", "halved"]
TEAM_A: HoleWinner = "teamA"
TEAM_B: HoleWinner = "teamB"
HALVED: HoleWinner = "halved"

MatchResultType = Literal["teamAWin", "teamBWin", "halved", "notFinished"]
TEAM_A_WIN: MatchResultType = "teamAWin"
TEAM_B_WIN: MatchResultType = "teamBWin"
MATCH_HALVED: MatchResultType = "halved"
NOT_FINISHED: MatchResultType = "notFinished"

SessionType = Literal["singles", "fourball", "foursomes"]

PLAYERS_PER_TEAM: Dict[str, int] = {
    "singles": 1,
    "fourball": 2,
    "foursomes": 2,
}

StablefordVariant = Literal["standard", "modified"]


def players_per_team(session_type: SessionType) -> int:
    return PLAYERS_PER_TEAM[session_type]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ---------------------------------------------------------------------------
# Course / handicap value objects
# ---------------------------------------------------------------------------


class CourseDifficulty(_Frozen):
    slope_rating: int = Field(alias="slopeRating")
    course_rating: float = Field(alias="courseRating")
    par: int


class ScoringBreakdown(_Frozen):
    """Net totals over the ranges used for count-back tiebreaks."""

    front9: int = 0
    back9: int = 0
    last6: int = 0
    last3: int = 0
    last1: int = 0
    total: int = 0


class StablefordPointTable(_Frozen):
    """Points awarded per net score relative to par."""

    albatross: int = 5
    eagle: int = 4
    birdie: int = 3
    par: int = 2
    bogey: int = 1
    double_bogey: int = Field(default=0, alias="doubleBogey")
    worse: int = 0


class PlayerScore(_Frozen):
    gross: int
    strokes: int = 0


# ---------------------------------------------------------------------------
# Match play value objects
# ---------------------------------------------------------------------------


class HoleResult(_Frozen):
    hole_number: int = Field(alias="holeNumber", ge=1, le=HOLES_PER_ROUND)
    winner: HoleWinner


class MatchState(_Frozen):
    match_score: int = Field(alias="matchScore")
    holes_played: int = Field(alias="holesPlayed")
    holes_remaining: int = Field(alias="holesRemaining")
    is_dormie: bool = Field(alias="isDormie")
    is_closed_out: bool = Field(alias="isClosedOut")
    can_continue: bool = Field(alias="canContinue")
    status_text: str = Field(alias="statusText")


class MatchFinalResult(_Frozen):
    outcome: MatchResultType
    margin: int = 0
    holes_remaining: int = Field(default=0, alias="holesRemaining")


class Momentum(_Frozen):
    team_a_wins: int = Field(default=0, alias="teamAWins")
    team_b_wins: int = Field(default=0, alias="teamBWins")
    halves: int = 0


class UndoAction(_Frozen):
    hole_number: int = Field(alias="holeNumber", ge=1, le=HOLES_PER_ROUND)
    previous_winner: Optional[HoleWinner] = Field(default=None, alias="previousWinner")
    timestamp: datetime = Field(default_factory=_utcnow)


class MatchRecord(_Frozen):
    """A match as seen by standings: who played and what happened."""

    team_a_ids: List[str] = Field(default_factory=list, alias="teamAIds")
    team_b_ids: List[str] = Field(default_factory=list, alias="teamBIds")
    hole_results: List[HoleResult] = Field(default_factory=list, alias="holeResults")
    points_per_match: float = Field(default=1.0, alias="pointsPerMatch", ge=0)


class PlayerRecord(_Frozen):
    wins: int = 0
    losses: int = 0
    halves: int = 0


class ClutchRecord(_Frozen):
    holes_won: int = Field(default=0, alias="holesWon")
    holes_lost: int = Field(default=0, alias="holesLost")


class SessionPoints(_Frozen):
    team_a: float = Field(default=0.0, alias="teamA")
    team_b: float = Field(default=0.0, alias="teamB")
    total_available: float = Field(default=0.0, alias="totalAvailable")


# ---------------------------------------------------------------------------
# Pairing value objects
# ---------------------------------------------------------------------------


class Player(_Frozen):
    id: str = Field(..., min_length=1)
    name: str = ""
    handicap_index: float = Field(alias="handicapIndex")


class ProposedMatch(_Frozen):
    team_a_ids: List[str] = Field(default_factory=list, alias="teamAIds")
    team_b_ids: List[str] = Field(default_factory=list, alias="teamBIds")
    match_order: int = Field(default=0, alias="matchOrder")


class PairingSession(_Frozen):
    session_type: SessionType = Field(alias="sessionType")
    matches: List[ProposedMatch] = Field(default_factory=list)
    points_per_match: float = Field(default=1.0, alias="pointsPerMatch", ge=0)

    def sorted_matches(self) -> List[ProposedMatch]:
        return sorted(self.matches, key=lambda m: m.match_order)


class PairingValidation(_Frozen):
    is_valid: bool = Field(alias="isValid")
    warnings: List[str] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    fairness_score: float = Field(alias="fairnessScore")


class DraftPick(_Frozen):
    team: int
    pick: int


class SuggestedPairing(_Frozen):
    team_a: List[Player] = Field(default_factory=list, alias="teamA")
    team_b: List[Player] = Field(default_factory=list, alias="teamB")


# ---------------------------------------------------------------------------
# Request / response bodies
# ---------------------------------------------------------------------------


class CourseHandicapIn(BaseModel):
    handicap_index: float = Field(alias="handicapIndex")
    tee: CourseDifficulty

    model_config = ConfigDict(populate_by_name=True)


class CourseHandicapOut(BaseModel):
    course_handicap: int = Field(alias="courseHandicap")

    model_config = ConfigDict(populate_by_name=True)


class StrokeAllocationIn(BaseModel):
    course_handicap: int = Field(alias="courseHandicap")
    hole_handicaps: List[int] = Field(alias="holeHandicaps")

    model_config = ConfigDict(populate_by_name=True)


class StrokeAllocationOut(BaseModel):
    strokes: List[int]
    total: int


class StablefordIn(BaseModel):
    gross_scores: List[int] = Field(alias="grossScores", min_length=1)
    pars: List[int] = Field(min_length=1)
    strokes: Optional[List[int]] = None
    variant: StablefordVariant = "standard"
    points: Optional[Dict[str, int]] = None

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _check_lengths(self):
        if len(self.pars) != len(self.gross_scores):
            raise ValueError("pars must have one entry per gross score")
        if self.strokes is not None and len(self.strokes) != len(self.gross_scores):
            raise ValueError("strokes must have one entry per gross score")
        return self


class StablefordOut(BaseModel):
    points: List[int]
    total: int
    table: StablefordPointTable

    model_config = ConfigDict(populate_by_name=True)


class BreakdownIn(BaseModel):
    hole_scores: List[int] = Field(alias="holeScores")
    strokes: List[int]

    model_config = ConfigDict(populate_by_name=True)


class AllowanceIn(BaseModel):
    session_type: SessionType = Field(alias="sessionType")
    team_a_handicaps: List[int] = Field(alias="teamAHandicaps", min_length=1)
    team_b_handicaps: List[int] = Field(alias="teamBHandicaps", min_length=1)
    allowance: Optional[float] = Field(default=None, ge=0, le=1)

    model_config = ConfigDict(populate_by_name=True)


class AllowanceOut(BaseModel):
    session_type: SessionType = Field(alias="sessionType")
    allowance: float
    description: str
    team_a_strokes: List[int] = Field(alias="teamAStrokes")
    team_b_strokes: List[int] = Field(alias="teamBStrokes")

    model_config = ConfigDict(populate_by_name=True)


class HoleHistoryIn(BaseModel):
    hole_results: List[HoleResult] = Field(alias="holeResults")

    model_config = ConfigDict(populate_by_name=True)


class MomentumIn(HoleHistoryIn):
    last_n: int = Field(default=5, alias="lastN", ge=0)


class FinalResultOut(BaseModel):
    result: MatchFinalResult
    notation: str
    team_a_points: float = Field(alias="teamAPoints")
    team_b_points: float = Field(alias="teamBPoints")

    model_config = ConfigDict(populate_by_name=True)


class HoleWinnerIn(BaseModel):
    session_type: SessionType = Field(alias="sessionType")
    team_a: List[PlayerScore] = Field(alias="teamA", min_length=1)
    team_b: List[PlayerScore] = Field(alias="teamB", min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class HoleWinnerOut(BaseModel):
    winner: HoleWinner


class FairnessIn(BaseModel):
    matches: List[ProposedMatch] = Field(default_factory=list)
    team_a_players: List[Player] = Field(default_factory=list, alias="teamAPlayers")
    team_b_players: List[Player] = Field(default_factory=list, alias="teamBPlayers")

    model_config = ConfigDict(populate_by_name=True)


class FairnessOut(BaseModel):
    fairness_score: float = Field(alias="fairnessScore")

    model_config = ConfigDict(populate_by_name=True)


class PairingValidationIn(BaseModel):
    session: PairingSession
    team_a_players: List[Player] = Field(default_factory=list, alias="teamAPlayers")
    team_b_players: List[Player] = Field(default_factory=list, alias="teamBPlayers")

    model_config = ConfigDict(populate_by_name=True)


class SuggestPairingsIn(BaseModel):
    team_a_players: List[Player] = Field(default_factory=list, alias="teamAPlayers")
    team_b_players: List[Player] = Field(default_factory=list, alias="teamBPlayers")
    match_count: int = Field(alias="matchCount", ge=0, le=50)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("team_a_players", "team_b_players")
    @classmethod
    def _unique_ids(cls, players: List[Player]) -> List[Player]:
        seen: set[str] = set()
        for player in players:
            if player.id in seen:
                raise ValueError(f"duplicate player id {player.id!r}")
            seen.add(player.id)
        return players


class SessionStandingsIn(BaseModel):
    matches: List[MatchRecord] = Field(default_factory=list)


class MatchResultOut(BaseModel):
    result: MatchFinalResult
    notation: str


class SessionStandingsOut(BaseModel):
    points: SessionPoints
    results: List[MatchResultOut]


class PlayerStandingsIn(BaseModel):
    player_id: str = Field(alias="playerId", min_length=1)
    matches: List[MatchRecord] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class PlayerStandingsOut(BaseModel):
    player_id: str = Field(alias="playerId")
    points: float
    record: PlayerRecord
    clutch: ClutchRecord

    model_config = ConfigDict(populate_by_name=True)
