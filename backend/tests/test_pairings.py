import pytest
from matchplay.schemas import PairingSession, Player, ProposedMatch
from matchplay.services import pairings


@pytest.fixture()
def rosters():
    team_a = [
        Player(id="a1", name="Alice", handicap_index=10.0),
        Player(id="a2", name="Anna", handicap_index=20.0),
    ]
    team_b = [
        Player(id="b1", name="Bob", handicap_index=12.0),
        Player(id="b2", name="Ben", handicap_index=20.0),
    ]
    return team_a, team_b


def test_fairness_of_balanced_singles(rosters) -> None:
    team_a, team_b = rosters
    matches = [
        ProposedMatch(team_a_ids=["a1"], team_b_ids=["b1"]),
        ProposedMatch(team_a_ids=["a2"], team_b_ids=["b2"]),
    ]
    assert pairings.calculate_fairness_score(matches, team_a, team_b) == pytest.approx(90.0)


def test_fairness_uses_side_averages(rosters) -> None:
    team_a, team_b = rosters
    matches = [ProposedMatch(team_a_ids=["a1", "a2"], team_b_ids=["b1", "b2"])]
    assert pairings.calculate_fairness_score(matches, team_a, team_b) == pytest.approx(90.0)


def test_fairness_without_matches_is_perfect(rosters) -> None:
    assert pairings.calculate_fairness_score([], *rosters) == 100.0


def test_fairness_is_clamped_at_zero(rosters) -> None:
    team_a, team_b = rosters
    matches = [ProposedMatch(team_a_ids=["ghost"], team_b_ids=["b1"])]
    assert pairings.calculate_fairness_score(matches, team_a, team_b) == 0.0


def test_validate_flags_wrong_player_counts(rosters) -> None:
    session = PairingSession(
        session_type="fourball",
        matches=[ProposedMatch(team_a_ids=["a1"], team_b_ids=["b1", "b2"])],
    )
    report = pairings.validate_pairings(session, *rosters)
    assert report.is_valid is False
    assert report.errors == ["Match 1 needs 2 Team A players"]


def test_validate_warns_about_reused_players(rosters) -> None:
    session = PairingSession(
        session_type="singles",
        matches=[
            ProposedMatch(team_a_ids=["a1"], team_b_ids=["b1"], match_order=1),
            ProposedMatch(team_a_ids=["a1"], team_b_ids=["b2"], match_order=2),
        ],
    )
    report = pairings.validate_pairings(session, *rosters)
    assert report.is_valid is True
    assert "Alice appears in multiple Team A pairings" in report.warnings


def test_validate_warns_about_unbalanced_lineup(rosters) -> None:
    team_a, team_b = rosters
    session = PairingSession(
        session_type="singles",
        matches=[ProposedMatch(team_a_ids=["a2"], team_b_ids=["b1"])],
    )
    report = pairings.validate_pairings(session, team_a, team_b)
    assert report.fairness_score == pytest.approx(20.0)
    assert "Handicap spread seems unbalanced (Fairness: 20%)" in report.warnings
    assert report.is_valid is True


def test_validate_checks_matches_in_play_order(rosters) -> None:
    session = PairingSession(
        session_type="singles",
        matches=[
            ProposedMatch(team_a_ids=["a2"], team_b_ids=["b2"], match_order=2),
            ProposedMatch(team_a_ids=[], team_b_ids=["b1"], match_order=1),
        ],
    )
    report = pairings.validate_pairings(session, *rosters)
    assert report.errors == ["Match 1 needs 1 Team A players"]


def test_snake_draft_two_teams() -> None:
    order = pairings.snake_draft_order(6)
    assert [p.team for p in order] == [0, 1, 1, 0, 0, 1]
    assert [p.pick for p in order] == [1, 2, 3, 4, 5, 6]


def test_snake_draft_three_teams_partial_round() -> None:
    order = pairings.snake_draft_order(7, teams=3)
    assert [p.team for p in order] == [0, 1, 2, 2, 1, 0, 0]


@pytest.mark.parametrize("picks, teams", [(0, 2), (-3, 2), (4, 0)])
def test_snake_draft_degenerate_input(picks, teams) -> None:
    assert pairings.snake_draft_order(picks, teams) == []


def test_suggest_pairs_by_handicap_rank() -> None:
    team_a = [
        Player(id="a1", handicap_index=18.0),
        Player(id="a2", handicap_index=4.0),
    ]
    team_b = [
        Player(id="b1", handicap_index=9.0),
        Player(id="b2", handicap_index=2.0),
        Player(id="b3", handicap_index=14.0),
    ]
    suggestions = pairings.suggest_pairings(team_a, team_b, 3)
    assert [[p.id for p in s.team_a] for s in suggestions] == [["a2"], ["a1"], []]
    assert [[p.id for p in s.team_b] for s in suggestions] == [["b2"], ["b1"], ["b3"]]


def test_suggest_no_matches() -> None:
    assert pairings.suggest_pairings([], [], 0) == []


def test_duplicate_warning_keeps_blank_roster_name() -> None:
    team_a = [Player(id="a1", name="", handicap_index=10.0)]
    team_b = [
        Player(id="b1", name="Bob", handicap_index=10.0),
        Player(id="b2", name="Ben", handicap_index=10.0),
    ]
    session = PairingSession(
        session_type="singles",
        matches=[
            ProposedMatch(team_a_ids=["a1"], team_b_ids=["b1"], match_order=1),
            ProposedMatch(team_a_ids=["a1"], team_b_ids=["b2"], match_order=2),
            ProposedMatch(team_a_ids=["ghost"], team_b_ids=["b2"], match_order=3),
            ProposedMatch(team_a_ids=["ghost"], team_b_ids=["b1"], match_order=4),
        ],
    )
    report = pairings.validate_pairings(session, team_a, team_b)
    assert " appears in multiple Team A pairings" in report.warnings
    assert "Unknown appears in multiple Team A pairings" in report.warnings
