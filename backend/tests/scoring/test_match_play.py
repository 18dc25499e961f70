import os, sys
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
from matchplay.schemas import HoleResult, PlayerScore
from matchplay.scoring import match_play


def make_results(*winners):
    return [HoleResult(hole_number=n, winner=w) for n, w in enumerate(winners, start=1)]


def test_determine_hole_winner():
    assert match_play.determine_hole_winner(3, 4) == "teamA"
    assert match_play.determine_hole_winner(5, 4) == "teamB"
    assert match_play.determine_hole_winner(4, 4) == "halved"


def test_fourball_compares_best_net_balls():
    team_a = [PlayerScore(gross=5, strokes=1), PlayerScore(gross=6, strokes=0)]
    team_b = [PlayerScore(gross=5, strokes=0), PlayerScore(gross=7, strokes=2)]
    assert match_play.fourball_hole_winner(team_a, team_b) == "teamA"


def test_fourball_equal_best_balls_halve():
    team_a = [PlayerScore(gross=4), PlayerScore(gross=6)]
    team_b = [PlayerScore(gross=5, strokes=1), PlayerScore(gross=4)]
    assert match_play.fourball_hole_winner(team_a, team_b) == "halved"


def test_fourball_side_without_scores_loses():
    assert match_play.fourball_hole_winner([PlayerScore(gross=9)], []) == "teamA"
    assert match_play.fourball_hole_winner([], []) == "halved"


def test_hole_winner_for_format_dispatch():
    team_a = [PlayerScore(gross=5), PlayerScore(gross=3)]
    team_b = [PlayerScore(gross=4), PlayerScore(gross=6)]
    assert match_play.hole_winner_for_format("fourball", team_a, team_b) == "teamA"
    assert match_play.hole_winner_for_format("singles", team_a, team_b) == "teamB"
    assert match_play.hole_winner_for_format("foursomes", team_a, team_b) == "teamB"


def test_empty_match_is_all_square():
    state = match_play.calculate_match_state([])
    assert state.match_score == 0
    assert state.holes_played == 0
    assert state.holes_remaining == 18
    assert state.can_continue is True
    assert state.status_text == "All Square through 0"


def test_running_lead_status():
    state = match_play.calculate_match_state(make_results("teamA", "halved", "teamA"))
    assert state.match_score == 2
    assert state.status_text == "Team A 2 UP through 3"

    state = match_play.calculate_match_state(make_results("teamB", "teamA", "teamB"))
    assert state.match_score == -1
    assert state.status_text == "Team B 1 UP through 3"


def test_all_square_mid_round():
    state = match_play.calculate_match_state(make_results("teamA", "teamB"))
    assert state.status_text == "All Square through 2"


def test_dormie_after_fifteen():
    history = make_results(*(["teamA"] * 3 + ["halved"] * 12))
    state = match_play.calculate_match_state(history)
    assert state.match_score == 3
    assert state.holes_remaining == 3
    assert state.is_dormie is True
    assert state.is_closed_out is False
    assert state.can_continue is True
    assert "Dormie" in state.status_text
    assert state.status_text == "Team A Dormie (3 UP, 3 to play)"


def test_team_b_dormie():
    history = make_results(*(["teamB"] * 1 + ["halved"] * 16))
    state = match_play.calculate_match_state(history)
    assert state.is_dormie is True
    assert state.status_text == "Team B Dormie (1 UP, 1 to play)"


def test_closeout_after_fifteen():
    history = make_results(*(["teamA"] * 4 + ["halved"] * 11))
    state = match_play.calculate_match_state(history)
    assert state.match_score == 4
    assert state.holes_remaining == 3
    assert state.is_closed_out is True
    assert state.is_dormie is False
    assert state.can_continue is False
    assert state.status_text == "Team A wins 4&3"

    final = match_play.finalize_match(history)
    assert final.outcome == "teamAWin"
    assert final.margin == 4
    assert final.holes_remaining == 3
    assert match_play.result_notation(final) == "4&3"


def test_win_on_eighteenth():
    history = make_results(*(["teamA", "teamB"] * 8 + ["halved", "teamA"]))
    state = match_play.calculate_match_state(history)
    assert state.holes_remaining == 0
    assert state.status_text == "Team A wins 1 UP"
    assert state.can_continue is False

    final = match_play.finalize_match(history)
    assert (final.outcome, final.margin, final.holes_remaining) == ("teamAWin", 1, 0)
    assert match_play.result_notation(final) == "1 UP"


def test_halved_match():
    history = make_results(*(["teamA", "teamB", "halved"] * 6))
    state = match_play.calculate_match_state(history)
    assert state.status_text == "Match Halved"
    assert state.is_dormie is False

    final = match_play.finalize_match(history)
    assert (final.outcome, final.margin, final.holes_remaining) == ("halved", 0, 0)
    assert match_play.result_notation(final) == "Halved"


def test_unfinished_match():
    final = match_play.finalize_match(make_results("teamA", "teamA"))
    assert (final.outcome, final.margin, final.holes_remaining) == ("notFinished", 0, 0)
    assert match_play.result_notation(final) == "Not Finished"


def test_finalize_stops_at_first_closeout():
    # Sixteen holes were recorded, but the match was already over after 15.
    history = make_results(
        "teamA", "teamA", "teamB", "teamA", "teamA", "teamB", "teamA", "teamB",
        "teamA", "teamB", "teamA", "teamB", "teamA", "halved", "teamA", "teamB",
    )
    state = match_play.calculate_match_state(history)
    assert state.is_closed_out is True
    assert state.status_text == "Team A wins 3&2"

    final = match_play.finalize_match(history)
    assert (final.outcome, final.margin, final.holes_remaining) == ("teamAWin", 4, 3)


def test_team_b_closeout():
    history = make_results(*(["teamB"] * 10))
    final = match_play.finalize_match(history)
    assert (final.outcome, final.margin, final.holes_remaining) == ("teamBWin", 10, 8)
    assert match_play.calculate_match_state(history).status_text == "Team B wins 10&8"


def test_match_state_is_pure():
    history = make_results("teamA", "halved", "teamB", "teamB")
    assert match_play.calculate_match_state(history) == match_play.calculate_match_state(history)


@pytest.mark.parametrize("played", range(0, 19))
@pytest.mark.parametrize("lead", range(-10, 11))
def test_dormie_and_closeout_never_both(played, lead):
    if abs(lead) > played:
        pytest.skip("lead cannot exceed holes played")
    winners = ["teamA" if lead > 0 else "teamB"] * abs(lead)
    winners += ["halved"] * (played - abs(lead))
    state = match_play.calculate_match_state(make_results(*winners))
    assert not (state.is_dormie and state.is_closed_out)


def test_match_points():
    win = match_play.finalize_match(make_results(*(["teamA"] * 10)))
    assert match_play.match_points(win) == (1.0, 0.0)
    halved = match_play.finalize_match(make_results(*(["halved"] * 18)))
    assert match_play.match_points(halved, 2.0) == (1.0, 1.0)
    unfinished = match_play.finalize_match(make_results("teamA", "teamB"))
    assert match_play.match_points(unfinished) == (0.0, 0.0)


def test_momentum_over_last_holes():
    history = make_results("teamB", "teamB", "teamA", "teamA", "halved", "teamA", "teamB")
    tally = match_play.momentum(history, 5)
    assert (tally.team_a_wins, tally.team_b_wins, tally.halves) == (3, 1, 1)


def test_momentum_short_history_and_zero_window():
    history = make_results("teamA", "halved")
    tally = match_play.momentum(history, 5)
    assert (tally.team_a_wins, tally.team_b_wins, tally.halves) == (1, 0, 1)
    empty = match_play.momentum(history, 0)
    assert (empty.team_a_wins, empty.team_b_wins, empty.halves) == (0, 0, 0)
