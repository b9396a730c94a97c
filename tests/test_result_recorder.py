import logging

import pytest

from leaguepairing.controllers.tournament import ResultRecorder, record_result
from leaguepairing.exceptions import FixtureNotFoundException, InvalidResultException
from leaguepairing.models.fixture import Fixture
from leaguepairing.models.participant import Participant
from leaguepairing.pairing import generate_fixtures


def _fixtures():
    teams = [Participant(name, id=name.lower()) for name in ["Lions", "Tigers", "Bears"]]
    return generate_fixtures(teams, "single")


def test_record_result_completes_only_that_fixture():
    fixtures = _fixtures()
    updated = record_result(fixtures, 2, 3, 1)

    changed = [f for f in updated if f.id == 2][0]
    assert changed.status == "completed"
    assert (changed.home_score, changed.away_score) == (3, 1)
    assert changed.result_display == "3 - 1"
    for before, after in zip(fixtures, updated):
        if before.id != 2:
            assert after == before


def test_record_result_leaves_input_untouched():
    fixtures = _fixtures()
    snapshot = list(fixtures)
    updated = record_result(fixtures, 1, 0, 0)
    assert fixtures == snapshot
    assert updated is not fixtures
    assert all(f.status == "pending" for f in fixtures)


def test_record_result_overwrites_previous_score():
    fixtures = record_result(_fixtures(), 1, 1, 0)
    fixtures = record_result(fixtures, 1, 2, 2)
    assert fixtures[0].result_display == "2 - 2"


def test_zero_zero_is_a_valid_result():
    fixtures = record_result(_fixtures(), 3, 0, 0)
    assert fixtures[2].is_completed


def test_unknown_fixture_raises():
    with pytest.raises(FixtureNotFoundException):
        record_result(_fixtures(), 99, 1, 0)


@pytest.mark.parametrize(
    "home, away",
    [(-1, 0), (0, -2), (1.5, 0), ("2", 1), (True, 0), (None, 1)],
)
def test_invalid_scores_raise(home, away):
    fixtures = _fixtures()
    with pytest.raises(InvalidResultException):
        record_result(fixtures, 1, home, away)
    assert fixtures[0].status == "pending"


def test_clear_result_reverts_to_pending():
    recorder = ResultRecorder()
    fixtures = recorder.record_result(_fixtures(), 1, 4, 2)
    cleared = recorder.clear_result(fixtures, 1)

    assert cleared[0].status == "pending"
    assert cleared[0].home_score is None
    assert cleared[0].result_display == "vs"
    assert fixtures[0].is_completed


def test_clear_pending_fixture_is_a_no_op():
    fixtures = _fixtures()
    assert ResultRecorder().clear_result(fixtures, 1) == fixtures


def test_clear_unknown_fixture_raises():
    with pytest.raises(FixtureNotFoundException):
        ResultRecorder().clear_result(_fixtures(), 42)


@pytest.mark.parametrize("bad_score", [-3, "2", True, 1.5])
def test_fixture_rejects_invalid_scores_on_construction(bad_score):
    home, away = _fixtures()[0].home, _fixtures()[0].away
    with pytest.raises(InvalidResultException):
        Fixture(
            id=1,
            round=1,
            home=home,
            away=away,
            home_score=bad_score,
            away_score=0,
            status="completed",
        )
    with pytest.raises(InvalidResultException):
        Fixture(
            id=1,
            round=1,
            home=home,
            away=away,
            home_score=0,
            away_score=bad_score,
            status="completed",
        )


def test_clear_pending_fixture_logs_at_info(caplog):
    with caplog.at_level(logging.INFO):
        ResultRecorder().clear_result(_fixtures(), 1)
    records = [r for r in caplog.records if "nothing to clear" in r.getMessage()]
    assert [r.levelno for r in records] == [logging.INFO]
