# League Pairing
# Copyright (C) 2025  League Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
Round Robin Schedule Generator

This module builds the complete fixture list of a round-robin league with the
circle method. Every participant meets every other participant once per
cycle; a double round robin plays two cycles.

The pairing step is deterministic. The optional round shuffle is a separate
step that only permutes whole rounds within a cycle and takes an injectable
``random.Random`` so a seed (or a stub) gives exact, repeatable output.

Even number of participants:
- participant 0 keeps a stationary seat, the other N-1 rotate
- N-1 rounds per cycle, nobody rests

Odd number of participants:
- no stationary seat, the participant at index ``r`` sits round ``r`` out
- N rounds per cycle

Example:
    >>> from leaguepairing.models import Participant
    >>> teams = [Participant("Orange"), Participant("Blue"), Participant("Green")]
    >>> rr = RoundRobin(teams)
    >>> rr.number_of_rounds
    3
    >>> [str(f) for f in rr.get_round_fixtures(1)]
"""

import random
from typing import Iterable, List, Optional, Sequence, TypeVar

from leaguepairing.constants import CYCLES_PER_FORMAT, DEFAULT_FORMAT, MIN_PARTICIPANTS
from leaguepairing.exceptions import InvalidPairingException, PairingException
from leaguepairing.models.fixture import Fixture
from leaguepairing.models.participant import Participant
from leaguepairing.type_hints import Fixtures, Format, RoundPairings
from leaguepairing.utils import setup_logger

logger = setup_logger(__name__)

T = TypeVar("T")


def rounds_per_cycle(n_participants: int) -> int:
    """Number of rounds one cycle takes for ``n_participants``."""
    return n_participants - 1 if n_participants % 2 == 0 else n_participants


def _even_round(
    fixed: Participant, rotating: Sequence[Participant], round_idx: int
) -> RoundPairings:
    """Pair one round when the field is even.

    ``rotating`` holds the N-1 participants without a fixed seat.
    """
    m = len(rotating)
    pairings = [(fixed, rotating[round_idx % m])]
    for i in range(1, (m + 1) // 2):
        home_idx = (round_idx + i) % m
        away_idx = (round_idx - i + m) % m
        pairings.append((rotating[home_idx], rotating[away_idx]))
    return pairings


def _odd_round(participants: Sequence[Participant], round_idx: int) -> RoundPairings:
    """Pair one round when the field is odd; one participant sits out."""
    n = len(participants)
    sitting_out = round_idx % n
    playing = [p for idx, p in enumerate(participants) if idx != sitting_out]
    m = len(playing)

    pairings = []
    for i in range(m // 2):
        home_idx = (round_idx + i) % m
        away_idx = (round_idx - i - 1 + m) % m
        # cannot coincide for a correctly derived field, kept as a guard
        if home_idx == away_idx:
            logger.debug("Round %d: skipped self pairing at slot %d", round_idx, i)
            continue
        pairings.append((playing[home_idx], playing[away_idx]))
    return pairings


def circle_method_rounds(participants: Sequence[Participant]) -> List[RoundPairings]:
    """Generate one cycle of round-robin pairings with the circle method.

    Args:
        participants: Ordered participants, at least two

    Returns:
        One list of (home, away) pairs per round, in round order

    Raises:
        InvalidPairingException: If fewer than two participants are given
    """
    n = len(participants)
    if n < MIN_PARTICIPANTS:
        logger.error("Invalid participant count for round robin: %d", n)
        raise InvalidPairingException(
            f"Round robin needs at least {MIN_PARTICIPANTS} participants, got {n}"
        )

    total_rounds = rounds_per_cycle(n)
    if n % 2 == 0:
        fixed, rotating = participants[0], list(participants[1:])
        return [_even_round(fixed, rotating, r) for r in range(total_rounds)]
    return [_odd_round(participants, r) for r in range(total_rounds)]


def shuffle_rounds(rounds: Sequence[T], rng: random.Random) -> List[T]:
    """Return a uniformly shuffled copy of ``rounds`` (Fisher-Yates).

    Walks from the last index down to 1, swapping with an index drawn from
    ``rng.randint(0, i)``. The input is not modified.
    """
    shuffled = list(rounds)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


class RoundRobin:
    """A complete round-robin fixture list.

    The schedule is computed once on construction and exposed as an
    immutable tuple of fixtures.

    Attributes:
        participants: Immutable tuple of participants in entry order
        format: ``"single"`` or ``"double"``
        rounds_per_cycle: Rounds needed for one full cycle
        number_of_rounds: Total rounds over all cycles
        fixtures: Tuple of generated fixtures, ids 1..len in emission order

    Example:
        >>> rr = RoundRobin(teams, format="double", shuffle=True, rng=random.Random(7))
        >>> rr.number_of_rounds
        6
    """

    def __init__(
        self,
        participants: Iterable[Participant],
        format: Format = DEFAULT_FORMAT,
        shuffle: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize and generate a round-robin schedule.

        Args:
            participants: Participants in seeding order (2 or more)
            format: ``"single"`` (one cycle) or ``"double"`` (two cycles)
            shuffle: Permute the order of rounds within every cycle
            rng: Random source for the shuffle; a fresh ``random.Random()``
                is used when omitted

        Raises:
            InvalidPairingException: Unknown format or fewer than 2 participants
        """
        if format not in CYCLES_PER_FORMAT:
            raise InvalidPairingException(f"Unknown round robin format: {format!r}")

        self.participants = tuple(participants)
        self.format = format
        self.shuffle = shuffle
        self._rng = rng if rng is not None else random.Random()

        self.cycles = CYCLES_PER_FORMAT[format]
        self.rounds_per_cycle = rounds_per_cycle(len(self.participants))
        self.number_of_rounds = self.cycles * self.rounds_per_cycle

        self.fixtures = tuple(self._generate_fixtures())

    def _generate_fixtures(self) -> Fixtures:
        """Generate fixtures for every cycle, numbering ids in emission order."""
        logger.info(
            "Generating %s round robin for %d participants (shuffle=%s)",
            self.format,
            len(self.participants),
            self.shuffle,
        )

        fixtures: Fixtures = []
        fixture_id = 1
        for cycle in range(self.cycles):
            cycle_rounds = circle_method_rounds(self.participants)
            if self.shuffle:
                cycle_rounds = shuffle_rounds(cycle_rounds, self._rng)

            offset = cycle * self.rounds_per_cycle
            for round_idx, pairings in enumerate(cycle_rounds):
                round_number = round_idx + 1 + offset
                for home, away in pairings:
                    fixtures.append(
                        Fixture(id=fixture_id, round=round_number, home=home, away=away)
                    )
                    logger.debug(
                        "Fixture %d, round %d: %s vs %s",
                        fixture_id,
                        round_number,
                        home,
                        away,
                    )
                    fixture_id += 1

        logger.info(
            "Generated %d fixtures over %d rounds", len(fixtures), self.number_of_rounds
        )
        return fixtures

    def get_round_fixtures(self, round_number: int) -> List[Fixture]:
        """
        Get the fixtures of a specific round.

        Args:
            round_number: 1-indexed round number

        Returns:
            Fixtures of that round in emission order

        Raises:
            PairingException: If round_number is outside the schedule
        """
        if not (1 <= round_number <= self.number_of_rounds):
            raise PairingException(
                f"Round {round_number} is not valid. Schedule has "
                f"{self.number_of_rounds} rounds (1-{self.number_of_rounds})"
            )
        return [f for f in self.fixtures if f.round == round_number]

    def __str__(self) -> str:
        """String representation of the schedule."""
        lines = [
            f"Round Robin ({self.format}): {len(self.participants)} participants, "
            f"{self.number_of_rounds} rounds"
        ]
        for round_number in range(1, self.number_of_rounds + 1):
            lines.append(f"\nRound {round_number}:")
            for fixture in self.get_round_fixtures(round_number):
                lines.append(f"  {fixture.home} vs {fixture.away}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RoundRobin(participants={len(self.participants)}, "
            f"format={self.format!r}, rounds={self.number_of_rounds}, "
            f"fixtures={len(self.fixtures)})"
        )


def generate_fixtures(
    participants: Sequence[Participant],
    format: Format = DEFAULT_FORMAT,
    shuffle: bool = False,
    rng: Optional[random.Random] = None,
) -> Fixtures:
    """
    Generate the full fixture list of a round-robin tournament.

    Args:
        participants: Ordered participants (2 or more, distinct)
        format: ``"single"`` or ``"double"``
        shuffle: Randomise round order within each cycle
        rng: Random source for the shuffle

    Returns:
        New list of pending fixtures

    Example:
        >>> fixtures = generate_fixtures(teams, "single")
        >>> len(fixtures) == len(teams) * (len(teams) - 1) // 2
        True
    """
    return list(RoundRobin(participants, format=format, shuffle=shuffle, rng=rng).fixtures)


#  LocalWords:  RoundRobin RoundPairings
