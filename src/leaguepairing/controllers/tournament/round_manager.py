"""Round bookkeeping on top of a generated fixture list."""

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

from datetime import datetime
from typing import List, Optional, Sequence

from dateutil.relativedelta import relativedelta

from leaguepairing.constants import DEFAULT_ROUND_INTERVAL_DAYS
from leaguepairing.exceptions import PairingException
from leaguepairing.models.fixture import Fixture
from leaguepairing.type_hints import Fixtures, RoundGroups, ScheduleEntry
from leaguepairing.utils import setup_logger

logger = setup_logger(__name__)


def group_by_round(fixtures: Sequence[Fixture]) -> RoundGroups:
    """Group fixtures under their round number, rounds in ascending order."""
    groups: RoundGroups = {}
    for fixture in sorted(fixtures, key=lambda f: (f.round, f.id)):
        groups.setdefault(fixture.round, []).append(fixture)
    return groups


class RoundManager:
    """Read-only view of a fixture list organised by round.

    This class is responsible for:
    - Grouping fixtures into rounds
    - Tracking which rounds are fully played
    - Building the schedule of a single participant
    - Assigning kick-off dates per round (as a new fixture list)
    """

    def __init__(self, fixtures: Sequence[Fixture]):
        """Initialize the round manager.

        Args:
            fixtures: Fixture snapshot to organise
        """
        self.fixtures: Fixtures = list(fixtures)
        self.rounds: RoundGroups = group_by_round(self.fixtures)

    @property
    def number_of_rounds(self) -> int:
        return len(self.rounds)

    @property
    def completed_rounds_count(self) -> int:
        """Get the number of rounds whose fixtures all have results."""
        return sum(
            1
            for round_fixtures in self.rounds.values()
            if all(f.is_completed for f in round_fixtures)
        )

    @property
    def current_round_number(self) -> Optional[int]:
        """First round that still has a pending fixture, None when all are played."""
        for round_number, round_fixtures in self.rounds.items():
            if any(not f.is_completed for f in round_fixtures):
                return round_number
        return None

    def get_round(self, round_number: int) -> List[Fixture]:
        """Get the fixtures of a specific round.

        Raises:
            PairingException: If the round does not exist
        """
        if round_number not in self.rounds:
            raise PairingException(
                f"Round {round_number} is not valid. Schedule has "
                f"{self.number_of_rounds} rounds"
            )
        return list(self.rounds[round_number])

    def participant_schedule(self, participant_id: str) -> List[ScheduleEntry]:
        """
        Get the complete schedule for a specific participant.

        Args:
            participant_id: Id of the participant

        Returns:
            List of (round, opponent, is_home, fixture) tuples, one per round.
            Opponent and fixture are None for rounds the participant sits out.
        """
        schedule: List[ScheduleEntry] = []
        for round_number, round_fixtures in self.rounds.items():
            entry: ScheduleEntry = (round_number, None, False, None)
            for fixture in round_fixtures:
                if fixture.home.id == participant_id:
                    entry = (round_number, fixture.away, True, fixture)
                    break
                if fixture.away.id == participant_id:
                    entry = (round_number, fixture.home, False, fixture)
                    break
            schedule.append(entry)
        return schedule

    def with_round_dates(
        self,
        start: datetime,
        interval: Optional[relativedelta] = None,
    ) -> Fixtures:
        """Assign a kick-off date to every fixture, one date per round.

        Round ``r`` is dated ``start + (r - 1) * interval``.

        Args:
            start: Kick-off of round 1
            interval: Gap between consecutive rounds, one week by default

        Returns:
            New fixture list in the original order
        """
        if interval is None:
            interval = relativedelta(days=DEFAULT_ROUND_INTERVAL_DAYS)

        logger.info(
            "Scheduling %d rounds from %s every %s",
            self.number_of_rounds,
            start.isoformat(),
            interval,
        )
        return [
            f.with_date(start + interval * (f.round - 1)) for f in self.fixtures
        ]


def assign_round_dates(
    fixtures: Sequence[Fixture],
    start: datetime,
    interval: Optional[relativedelta] = None,
) -> Fixtures:
    """Date every round; see :meth:`RoundManager.with_round_dates`."""
    return RoundManager(fixtures).with_round_dates(start, interval)
