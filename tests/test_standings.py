import pytest

from leaguepairing.controllers.tournament import (
    StandingsCalculator,
    compute_standings,
    record_result,
)
from leaguepairing.exceptions import ParticipantNotFoundException
from leaguepairing.models.fixture import Fixture
from leaguepairing.models.participant import Participant
from leaguepairing.pairing import generate_fixtures

A = Participant("A", id="a")
B = Participant("B", id="b")
C = Participant("C", id="c")
D = Participant("D", id="d")


def _fixture(fixture_id, home, away, home_score=None, away_score=None):
    status = "pending" if home_score is None else "completed"
    return Fixture(
        id=fixture_id,
        round=1,
        home=home,
        away=away,
        home_score=home_score,
        away_score=away_score,
        status=status,
    )


def _by_name(rows):
    return {row.participant.name: row for row in rows}


def test_no_results_gives_zero_rows_in_input_order():
    participants = [C, A, D, B]
    rows = compute_standings(generate_fixtures(participants, "single"), participants)

    assert [row.participant.name for row in rows] == ["C", "A", "D", "B"]
    assert [row.position for row in rows] == [1, 2, 3, 4]
    for row in rows:
        assert (row.played, row.wins, row.draws, row.losses) == (0, 0, 0, 0)
        assert (row.goals_for, row.goals_against, row.goal_difference) == (0, 0, 0)
        assert row.points == 0


def test_home_win():
    rows = compute_standings([_fixture(1, A, B, 2, 1)], [A, B])
    table = _by_name(rows)

    a, b = table["A"], table["B"]
    assert (a.played, a.wins, a.draws, a.losses) == (1, 1, 0, 0)
    assert (a.goals_for, a.goals_against, a.goal_difference, a.points) == (2, 1, 1, 3)
    assert (b.played, b.wins, b.draws, b.losses) == (1, 0, 0, 1)
    assert (b.goals_for, b.goals_against, b.goal_difference, b.points) == (1, 2, -1, 0)
    assert [row.participant.name for row in rows] == ["A", "B"]


def test_away_win_ranks_away_side_first():
    rows = compute_standings([_fixture(1, A, B, 0, 3)], [A, B])
    assert [row.participant.name for row in rows] == ["B", "A"]
    assert rows[0].points == 3


def test_draw_gives_one_point_each():
    rows = compute_standings([_fixture(1, A, B, 1, 1)], [A, B])
    for row in rows:
        assert (row.played, row.draws, row.points) == (1, 1, 1)
        assert row.goal_difference == 0


def test_goal_difference_breaks_points_tie():
    fixtures = [
        _fixture(1, A, C, 1, 0),
        _fixture(2, B, D, 3, 0),
    ]
    rows = compute_standings(fixtures, [A, B, C, D])
    assert [row.participant.name for row in rows] == ["B", "A", "C", "D"]


def test_goals_for_breaks_goal_difference_tie():
    fixtures = [
        _fixture(1, A, C, 1, 0),
        _fixture(2, B, D, 3, 2),
    ]
    rows = compute_standings(fixtures, [A, B, C, D])
    assert [row.participant.name for row in rows][:2] == ["B", "A"]
    # C: 0-1, D: 2-3 -> same GD, D scored more
    assert [row.participant.name for row in rows][2:] == ["D", "C"]


def test_full_tie_keeps_input_order():
    fixtures = [
        _fixture(1, A, B, 1, 1),
        _fixture(2, C, D, 1, 1),
    ]
    rows = compute_standings(fixtures, [D, B, A, C])
    assert [row.participant.name for row in rows] == ["D", "B", "A", "C"]


def test_pending_fixtures_are_ignored():
    fixtures = [_fixture(1, A, B, 2, 0), _fixture(2, A, C), _fixture(3, B, C)]
    table = _by_name(compute_standings(fixtures, [A, B, C]))
    assert table["A"].played == 1
    assert table["C"].played == 0


def test_points_and_goals_balance():
    participants = [A, B, C, D]
    fixtures = generate_fixtures(participants, "double")
    scores = [(2, 1), (0, 0), (3, 3), (1, 4), (2, 0), (1, 1), (0, 2)]
    for fixture, (home, away) in zip(fixtures, scores):
        fixtures = record_result(fixtures, fixture.id, home, away)

    rows = compute_standings(fixtures, participants)
    total_goals = sum(h + a for h, a in scores)
    assert sum(row.goals_for for row in rows) == total_goals
    assert sum(row.goals_against for row in rows) == total_goals
    assert sum(row.goal_difference for row in rows) == 0
    assert sum(row.played for row in rows) == 2 * len(scores)
    for row in rows:
        assert row.played == row.wins + row.draws + row.losses
        assert row.points == 3 * row.wins + row.draws


def test_ranking_is_sorted_by_points_gd_gf():
    participants = [A, B, C, D]
    fixtures = generate_fixtures(participants, "single")
    for fixture, (home, away) in zip(fixtures, [(4, 0), (1, 2), (0, 0), (3, 1)]):
        fixtures = record_result(fixtures, fixture.id, home, away)

    keys = [row.sort_key() for row in compute_standings(fixtures, participants)]
    assert keys == sorted(keys, reverse=True)


def test_calculation_is_repeatable():
    fixtures = [_fixture(1, A, B, 2, 1), _fixture(2, C, D, 0, 0)]
    calculator = StandingsCalculator()
    first = [row.to_dict() for row in calculator.compute(fixtures, [A, B, C, D])]
    second = [row.to_dict() for row in calculator.compute(fixtures, [A, B, C, D])]
    assert first == second


def test_unknown_participant_raises():
    stranger = Participant("Stranger", id="x")
    with pytest.raises(ParticipantNotFoundException):
        compute_standings([_fixture(1, A, stranger, 1, 0)], [A, B])


def test_unknown_participant_in_pending_fixture_raises():
    stranger = Participant("Stranger", id="x")
    with pytest.raises(ParticipantNotFoundException):
        compute_standings([_fixture(1, stranger, B)], [A, B])


def test_renamed_participant_keeps_stats():
    renamed_a = A.renamed("Alpha")
    rows = compute_standings([_fixture(1, A, B, 2, 1)], [renamed_a, B])
    assert rows[0].participant.name == "Alpha"
    assert rows[0].points == 3


def test_three_way_tie_on_points_and_goal_difference():
    fixtures = [
        _fixture(1, A, D, 1, 0),
        _fixture(2, B, D, 2, 1),
        _fixture(3, C, D, 3, 2),
    ]
    rows = compute_standings(fixtures, [A, B, C, D])
    assert [row.participant.name for row in rows] == ["C", "B", "A", "D"]
    assert {row.goal_difference for row in rows[:3]} == {1}
