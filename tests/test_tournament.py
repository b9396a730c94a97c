import random
from datetime import datetime

import pytest

from leaguepairing.exceptions import (
    DuplicateParticipantException,
    FixtureNotFoundException,
    InvalidConfigurationException,
    InvalidParticipantDataException,
    ParticipantNotFoundException,
    TournamentNameValidationException,
)
from leaguepairing.models.participant import Participant, create_participant
from leaguepairing.models.tournament import Tournament


def _teams(*names):
    return [Participant(name, id=f"id-{name.lower()}") for name in names]


def _league(format="single", **kwargs):
    return Tournament.create(
        "Sunday League", _teams("Lions", "Tigers", "Bears", "Wolves"), format, **kwargs
    )


def test_create_generates_pending_schedule():
    tournament = _league("double")
    assert tournament.name == "Sunday League"
    assert tournament.format == "double"
    assert len(tournament.fixtures) == 12
    assert len(tournament.rounds) == 6
    assert tournament.progress == (0, 12, 0)
    assert not tournament.is_finished
    assert tournament.id.startswith("tournament_")


def test_create_strips_name():
    tournament = Tournament.create("  Cup  ", _teams("A", "B"))
    assert tournament.name == "Cup"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_create_requires_a_name(name):
    with pytest.raises(TournamentNameValidationException):
        Tournament.create(name, _teams("A", "B"))


def test_create_requires_two_participants():
    with pytest.raises(InvalidParticipantDataException):
        Tournament.create("Cup", _teams("Solo"))


def test_create_rejects_duplicate_names_ignoring_case():
    teams = [Participant("Lions", id="1"), Participant("lions ", id="2")]
    with pytest.raises(DuplicateParticipantException):
        Tournament.create("Cup", teams)


def test_create_rejects_unknown_format():
    with pytest.raises(InvalidConfigurationException):
        Tournament.create("Cup", _teams("A", "B"), format="triple")


def test_seeded_shuffle_is_reproducible():
    first = _league(shuffle_rounds=True, seed=5)
    second = _league(shuffle_rounds=True, seed=5)
    assert [(f.round, f.home.id, f.away.id) for f in first.fixtures] == [
        (f.round, f.home.id, f.away.id) for f in second.fixtures
    ]


def test_explicit_rng_is_used():
    first = _league(shuffle_rounds=True, rng=random.Random(9))
    second = _league(shuffle_rounds=True, rng=random.Random(9))
    assert [f.home.id for f in first.fixtures] == [f.home.id for f in second.fixtures]


def test_record_result_returns_new_tournament():
    tournament = _league()
    updated = tournament.record_result(1, 2, 0)

    assert updated is not tournament
    assert tournament.fixtures[0].status == "pending"
    assert updated.get_fixture(1).result_display == "2 - 0"
    assert updated.id == tournament.id
    assert updated.standings[0].participant == updated.get_fixture(1).home
    assert updated.progress == (1, 6, 17)


def test_clear_result():
    tournament = _league().record_result(1, 1, 1).clear_result(1)
    assert tournament.progress[0] == 0
    assert all(row.points == 0 for row in tournament.standings)


def test_unknown_fixture():
    with pytest.raises(FixtureNotFoundException):
        _league().record_result(100, 1, 0)


def test_finished_when_all_fixtures_played():
    tournament = _league()
    for fixture in tournament.fixtures:
        tournament = tournament.record_result(fixture.id, 1, 0)
    assert tournament.is_finished
    assert tournament.progress == (6, 6, 100)


def test_find_participant_is_case_insensitive():
    tournament = _league()
    assert tournament.find_participant(" tigers").id == "id-tigers"
    with pytest.raises(ParticipantNotFoundException):
        tournament.find_participant("Eagles")


def test_schedule_for_unknown_participant():
    with pytest.raises(ParticipantNotFoundException):
        _league().schedule_for("nobody")


def test_schedule_for_lists_every_round():
    schedule = _league().schedule_for("id-lions")
    assert [entry[0] for entry in schedule] == [1, 2, 3]
    assert all(entry[1] is not None for entry in schedule)


def test_rename_keeps_results_and_identity():
    tournament = _league().record_result(1, 3, 1)
    winner_id = tournament.get_fixture(1).home.id

    renamed = tournament.rename_participant(winner_id, "Champions")

    assert renamed.get_participant(winner_id).name == "Champions"
    assert renamed.get_fixture(1).home.name == "Champions"
    assert renamed.get_fixture(1).result_display == "3 - 1"
    assert renamed.standings[0].participant.name == "Champions"
    assert tournament.get_participant(winner_id).name != "Champions"


def test_rename_to_existing_name_rejected():
    with pytest.raises(DuplicateParticipantException):
        _league().rename_participant("id-lions", "TIGERS")


def test_rename_to_own_name_with_new_case_allowed():
    renamed = _league().rename_participant("id-lions", "LIONS")
    assert renamed.get_participant("id-lions").name == "LIONS"


def test_reconfigure_name_only_keeps_results():
    tournament = _league().record_result(2, 0, 1)
    edited = tournament.reconfigure(name="Monday League")

    assert edited.name == "Monday League"
    assert edited.id == tournament.id
    assert edited.created_at == tournament.created_at
    assert edited.fixtures == tournament.fixtures


def test_reconfigure_with_same_participants_updates_colours():
    tournament = _league().record_result(1, 2, 2)
    recoloured = [
        Participant(p.name, color="#000000", id=p.id) for p in tournament.participants
    ]
    edited = tournament.reconfigure(participants=recoloured)

    assert edited.progress[0] == 1
    assert all(f.home.color == "#000000" for f in edited.fixtures)


def test_reconfigure_format_regenerates():
    tournament = _league().record_result(1, 2, 2)
    edited = tournament.reconfigure(format="double")

    assert len(edited.fixtures) == 12
    assert edited.progress[0] == 0
    assert edited.id == tournament.id


def test_reconfigure_new_participant_regenerates():
    tournament = _league().record_result(1, 2, 2)
    teams = list(tournament.participants) + [create_participant("Eagles", index=4)]
    edited = tournament.reconfigure(participants=teams)

    assert len(edited.participants) == 5
    assert len(edited.fixtures) == 10
    assert edited.progress == (0, 10, 0)


def test_reconfigure_validates():
    with pytest.raises(TournamentNameValidationException):
        _league().reconfigure(name=" ")


def test_round_dates():
    tournament = _league().with_round_dates(datetime(2025, 5, 4))
    dates = {f.round: f.date for f in tournament.fixtures}
    assert dates == {
        1: datetime(2025, 5, 4),
        2: datetime(2025, 5, 11),
        3: datetime(2025, 5, 18),
    }


def test_dict_round_trip():
    tournament = (
        _league("double", shuffle_rounds=True, seed=1)
        .record_result(3, 4, 2)
        .with_round_dates(datetime(2025, 8, 1, 18, 30))
    )
    restored = Tournament.from_dict(tournament.to_dict())

    assert restored == tournament
    assert restored.config.seed == 1
    assert restored.get_fixture(3).result_display == "4 - 2"
    assert [r.to_dict() for r in restored.standings] == [
        r.to_dict() for r in tournament.standings
    ]


def test_from_dict_with_unknown_participant_reference():
    data = _league().to_dict()
    data["fixtures"][0]["home_id"] = "ghost"
    with pytest.raises(ParticipantNotFoundException):
        Tournament.from_dict(data)


def test_create_rejects_shared_participant_ids():
    teams = [Participant("Lions", id="dup"), Participant("Tigers", id="dup")]
    with pytest.raises(DuplicateParticipantException):
        Tournament.create("Cup", teams)


def test_reconfigure_seed_of_shuffled_schedule_regenerates():
    tournament = _league(shuffle_rounds=True, seed=1).record_result(1, 2, 0)
    edited = tournament.reconfigure(seed=2)

    assert edited.config.seed == 2
    assert edited.progress[0] == 0
    expected = _league(shuffle_rounds=True, seed=2)
    assert [(f.round, f.home.id, f.away.id) for f in edited.fixtures] == [
        (f.round, f.home.id, f.away.id) for f in expected.fixtures
    ]


def test_reconfigure_seed_without_shuffle_keeps_results():
    tournament = _league().record_result(1, 2, 0)
    edited = tournament.reconfigure(seed=7)
    assert edited.progress[0] == 1
