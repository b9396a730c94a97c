"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
"""

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

from typing import Any, List, Sequence

from leaguepairing.exceptions import FixtureNotFoundException, InvalidResultException
from leaguepairing.models.fixture import Fixture
from leaguepairing.type_hints import Fixtures
from leaguepairing.utils import setup_logger
from leaguepairing.utils.validation import validate_score

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Validating scores before they touch a fixture
    - Producing an updated fixture list where exactly one fixture changed
    - Reverting a fixture to pending

    Fixture lists are never modified in place: each operation returns a new
    list and leaves the one passed in untouched, also when it fails.
    """

    def record_result(
        self,
        fixtures: Sequence[Fixture],
        fixture_id: int,
        home_score: Any,
        away_score: Any,
    ) -> Fixtures:
        """Record the result of a single fixture.

        Args:
            fixtures: Current fixture list
            fixture_id: Id of the fixture that was played
            home_score: Goals of the home side, non-negative integer
            away_score: Goals of the away side, non-negative integer

        Returns:
            New fixture list with that fixture completed

        Raises:
            InvalidResultException: If a score is negative or not an integer
            FixtureNotFoundException: If no fixture has ``fixture_id``
        """
        self._validate_scores(fixture_id, home_score, away_score)
        index = self._index_of(fixtures, fixture_id)

        fixture = fixtures[index]
        if fixture.is_completed:
            logger.info(
                f"Fixture {fixture_id} already has result {fixture.result_display}, "
                "overwriting"
            )

        updated = fixture.with_result(home_score, away_score)
        logger.info(
            f"Recorded: {updated.home.name} {home_score} - {away_score} {updated.away.name}"
        )
        return self._replace_at(fixtures, index, updated)

    def clear_result(self, fixtures: Sequence[Fixture], fixture_id: int) -> Fixtures:
        """Revert a fixture to pending.

        Args:
            fixtures: Current fixture list
            fixture_id: Id of the fixture to clear

        Returns:
            New fixture list with that fixture pending; an already pending
            fixture is returned unchanged

        Raises:
            FixtureNotFoundException: If no fixture has ``fixture_id``
        """
        index = self._index_of(fixtures, fixture_id)
        fixture = fixtures[index]
        if not fixture.is_completed:
            logger.info(f"Fixture {fixture_id} is not completed, nothing to clear")
            return list(fixtures)

        logger.info(f"Cleared result of fixture {fixture_id}")
        return self._replace_at(fixtures, index, fixture.cleared())

    def _validate_scores(self, fixture_id: int, home_score: Any, away_score: Any) -> None:
        for side, score in (("home", home_score), ("away", away_score)):
            result = validate_score(score)
            if not result.is_valid:
                logger.error(f"Fixture {fixture_id}: invalid {side} score {score!r}")
                raise InvalidResultException(result.error_message)

    def _index_of(self, fixtures: Sequence[Fixture], fixture_id: int) -> int:
        for index, fixture in enumerate(fixtures):
            if fixture.id == fixture_id:
                return index
        logger.error(f"Cannot find fixture {fixture_id}")
        raise FixtureNotFoundException(f"No fixture with id {fixture_id}")

    @staticmethod
    def _replace_at(
        fixtures: Sequence[Fixture], index: int, fixture: Fixture
    ) -> List[Fixture]:
        updated = list(fixtures)
        updated[index] = fixture
        return updated


def record_result(
    fixtures: Sequence[Fixture], fixture_id: int, home_score: Any, away_score: Any
) -> Fixtures:
    """Record a result; see :meth:`ResultRecorder.record_result`."""
    return ResultRecorder().record_result(fixtures, fixture_id, home_score, away_score)
