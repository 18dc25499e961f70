import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# main.py refuses to start without explicit CORS origins.
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:3000")
os.environ.setdefault("DISABLE_RATE_LIMITS", "true")

from matchplay.schemas import HoleResult  # noqa: E402


def make_results(*winners: str) -> list[HoleResult]:
    """Build a hole history from winners in play order, starting at hole 1."""
    return [
        HoleResult(hole_number=number, winner=winner)
        for number, winner in enumerate(winners, start=1)
    ]


@pytest.fixture()
def results():
    return make_results


@pytest.fixture(autouse=True)
def rate_limits_off(monkeypatch):
    monkeypatch.setenv("DISABLE_RATE_LIMITS", "true")
    yield
