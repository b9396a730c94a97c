import random
from collections import Counter
from itertools import combinations

import pytest

from leaguepairing.exceptions import InvalidPairingException, PairingException
from leaguepairing.models.participant import Participant
from leaguepairing.pairing.round_robin import (
    RoundRobin,
    circle_method_rounds,
    generate_fixtures,
    rounds_per_cycle,
    shuffle_rounds,
)


def _teams(n):
    return [Participant(name=chr(ord("A") + i), id=f"t{i}") for i in range(n)]


def _pair(fixture):
    return frozenset((fixture.home.id, fixture.away.id))


def _matchups(fixtures):
    return [(f.round, f.home.name, f.away.name) for f in fixtures]


class _ZeroRandom:
    """Random source whose draws are always the lowest index."""

    def randint(self, a, b):
        return a


@pytest.mark.parametrize("n", range(2, 13))
def test_single_round_robin_pairs_everyone_exactly_once(n):
    teams = _teams(n)
    fixtures = generate_fixtures(teams, "single")

    assert len(fixtures) == n * (n - 1) // 2
    counts = Counter(_pair(f) for f in fixtures)
    expected = {frozenset((a.id, b.id)) for a, b in combinations(teams, 2)}
    assert set(counts) == expected
    assert all(count == 1 for count in counts.values())


@pytest.mark.parametrize("n", range(2, 13))
def test_double_round_robin_pairs_everyone_once_per_cycle(n):
    teams = _teams(n)
    fixtures = generate_fixtures(teams, "double")
    per_cycle = rounds_per_cycle(n)

    assert len(fixtures) == n * (n - 1)
    for cycle in range(2):
        in_cycle = [
            f
            for f in fixtures
            if cycle * per_cycle < f.round <= (cycle + 1) * per_cycle
        ]
        counts = Counter(_pair(f) for f in in_cycle)
        assert len(counts) == n * (n - 1) // 2
        assert set(counts.values()) == {1}


@pytest.mark.parametrize("n", range(2, 13))
@pytest.mark.parametrize("format", ["single", "double"])
def test_rounds_are_well_formed(n, format):
    fixtures = generate_fixtures(_teams(n), format)
    cycles = 2 if format == "double" else 1
    expected_rounds = cycles * (n - 1 if n % 2 == 0 else n)

    rounds = {}
    for fixture in fixtures:
        assert fixture.home.id != fixture.away.id
        rounds.setdefault(fixture.round, []).append(fixture)

    assert sorted(rounds) == list(range(1, expected_rounds + 1))
    for round_fixtures in rounds.values():
        seen = [p for f in round_fixtures for p in (f.home.id, f.away.id)]
        assert len(seen) == len(set(seen))
        assert len(round_fixtures) == n // 2


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
def test_odd_field_each_participant_sits_out_once_per_cycle(n):
    teams = _teams(n)
    fixtures = generate_fixtures(teams, "single")
    sat_out = Counter()
    for round_number in range(1, n + 1):
        playing = {
            p
            for f in fixtures
            if f.round == round_number
            for p in (f.home.id, f.away.id)
        }
        (resting,) = {t.id for t in teams} - playing
        sat_out[resting] += 1
    assert set(sat_out.values()) == {1}
    assert len(sat_out) == n


def test_fixtures_are_pending_with_sequential_ids():
    fixtures = generate_fixtures(_teams(6), "double", shuffle=True, rng=random.Random(3))
    assert [f.id for f in fixtures] == list(range(1, len(fixtures) + 1))
    assert all(f.status == "pending" for f in fixtures)
    assert all(f.home_score is None and f.away_score is None for f in fixtures)
    rounds = [f.round for f in fixtures]
    assert rounds == sorted(rounds)


def test_four_teams_unshuffled_schedule():
    fixtures = generate_fixtures(_teams(4), "single")
    assert _matchups(fixtures) == [
        (1, "A", "B"),
        (1, "C", "D"),
        (2, "A", "C"),
        (2, "D", "B"),
        (3, "A", "D"),
        (3, "B", "C"),
    ]


def test_two_teams_double_keeps_home_side():
    fixtures = generate_fixtures(_teams(2), "double")
    assert _matchups(fixtures) == [(1, "A", "B"), (2, "A", "B")]


def test_three_teams_schedule():
    fixtures = generate_fixtures(_teams(3), "single")
    assert _matchups(fixtures) == [(1, "B", "C"), (2, "C", "A"), (3, "A", "B")]


def test_shuffle_with_fixed_draws_reorders_rounds():
    fixtures = generate_fixtures(_teams(4), "single", shuffle=True, rng=_ZeroRandom())
    assert _matchups(fixtures) == [
        (1, "A", "C"),
        (1, "D", "B"),
        (2, "A", "D"),
        (2, "B", "C"),
        (3, "A", "B"),
        (3, "C", "D"),
    ]


def test_shuffle_only_permutes_rounds_within_a_cycle():
    teams = _teams(6)
    plain = circle_method_rounds(teams)
    fixtures = generate_fixtures(teams, "double", shuffle=True, rng=random.Random(11))

    def as_sets(rounds):
        return sorted(
            sorted(tuple(sorted((h.id, a.id))) for h, a in pairings)
            for pairings in rounds
        )

    for cycle in range(2):
        cycle_rounds = []
        for r in range(cycle * 5 + 1, cycle * 5 + 6):
            cycle_rounds.append([(f.home, f.away) for f in fixtures if f.round == r])
        assert as_sets(cycle_rounds) == as_sets(plain)


def test_same_seed_gives_same_schedule():
    teams = _teams(8)
    first = generate_fixtures(teams, "double", shuffle=True, rng=random.Random(42))
    second = generate_fixtures(teams, "double", shuffle=True, rng=random.Random(42))
    assert _matchups(first) == _matchups(second)


def test_shuffle_rounds_returns_new_list():
    items = [1, 2, 3, 4, 5]
    shuffled = shuffle_rounds(items, random.Random(1))
    assert items == [1, 2, 3, 4, 5]
    assert sorted(shuffled) == items


def test_shuffle_rounds_with_zero_draws():
    assert shuffle_rounds(["r0", "r1", "r2"], _ZeroRandom()) == ["r1", "r2", "r0"]


@pytest.mark.parametrize("n", [0, 1])
def test_too_few_participants_rejected(n):
    with pytest.raises(InvalidPairingException):
        generate_fixtures(_teams(n), "single")


def test_unknown_format_rejected():
    with pytest.raises(InvalidPairingException):
        RoundRobin(_teams(4), format="triple")


def test_round_robin_round_lookup():
    rr = RoundRobin(_teams(5), format="double")
    assert rr.rounds_per_cycle == 5
    assert rr.number_of_rounds == 10
    assert len(rr.get_round_fixtures(10)) == 2
    with pytest.raises(PairingException):
        rr.get_round_fixtures(11)
    assert "participants=5" in repr(rr)


def test_input_participants_not_modified():
    teams = _teams(5)
    before = list(teams)
    generate_fixtures(teams, "double", shuffle=True, rng=random.Random(0))
    assert teams == before
