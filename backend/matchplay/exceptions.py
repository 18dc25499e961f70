from fastapi import HTTPException
from pydantic import BaseModel
from typing import Optional, Sequence

from .schemas import HOLES_PER_ROUND, HoleResult


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class InvalidHoleHistory(DomainException):
    def __init__(self, detail: str) -> None:
        super().__init__(
            status_code=422,
            title="Invalid hole history",
            detail=detail,
            code="invalid_hole_history",
        )


def checked_hole_history(hole_results: Sequence[HoleResult]) -> Sequence[HoleResult]:
    """Reject histories the engine would otherwise take on trust."""
    if len(hole_results) > HOLES_PER_ROUND:
        raise InvalidHoleHistory(
            f"at most {HOLES_PER_ROUND} hole results are allowed, got {len(hole_results)}"
        )
    previous = 0
    for result in hole_results:
        if result.hole_number <= previous:
            raise InvalidHoleHistory(
                f"hole {result.hole_number} is out of order or duplicated"
            )
        previous = result.hole_number
    return hole_results


def http_problem(
    status_code: int,
    detail: str,
    code: str,
    *,
    headers: Optional[dict[str, str]] = None,
) -> HTTPException:
    """Create an HTTPException with an attached problem code."""

    exc = HTTPException(status_code=status_code, detail=detail, headers=headers)
    setattr(exc, "code", code)
    return exc
