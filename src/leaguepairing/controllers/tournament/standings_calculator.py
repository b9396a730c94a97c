"""Standings calculation for round-robin leagues.

This module folds completed fixtures into a ranked league table.
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

from typing import Dict, Iterable, List, Sequence

from leaguepairing.constants import DRAW_POINTS, LOSS_POINTS, WIN_POINTS
from leaguepairing.exceptions import ParticipantNotFoundException
from leaguepairing.models.fixture import Fixture
from leaguepairing.models.participant import Participant
from leaguepairing.models.standings_row import StandingsRow
from leaguepairing.utils import setup_logger

logger = setup_logger(__name__)


class StandingsCalculator:
    """Computes the league table from a fixture list.

    The calculation is a pure function of its inputs: every call starts from
    zeroed rows, so nothing carries over between calls.

    Ranking order:
    - Points (3 for a win, 1 for a draw)
    - Goal difference
    - Goals scored
    - Entry order of the participants (stable sort, no further tiebreak)
    """

    def compute(
        self, fixtures: Iterable[Fixture], participants: Sequence[Participant]
    ) -> List[StandingsRow]:
        """Compute ranked standings.

        Args:
            fixtures: Fixture list, pending fixtures add nothing
            participants: Participants in entry order

        Returns:
            One row per participant, best first, with ``position`` set

        Raises:
            ParticipantNotFoundException: If any fixture references a
                participant that is not in ``participants``
        """
        table: Dict[str, StandingsRow] = {
            p.id: StandingsRow(participant=p) for p in participants
        }

        completed = 0
        for fixture in fixtures:
            home = self._row_for(table, fixture, fixture.home)
            away = self._row_for(table, fixture, fixture.away)
            if not fixture.is_completed:
                continue
            self._apply_fixture(home, away, fixture)
            completed += 1

        # Goal difference is derived only after every fixture is folded in
        for row in table.values():
            row.goal_difference = row.goals_for - row.goals_against

        ranked = sorted(table.values(), key=StandingsRow.sort_key, reverse=True)
        for position, row in enumerate(ranked, start=1):
            row.position = position

        logger.debug(
            "Computed standings for %d participants from %d completed fixtures",
            len(ranked),
            completed,
        )
        return ranked

    def _apply_fixture(
        self, home: StandingsRow, away: StandingsRow, fixture: Fixture
    ) -> None:
        """Fold one completed fixture into the two rows it involves."""
        home.played += 1
        away.played += 1

        home.goals_for += fixture.home_score
        home.goals_against += fixture.away_score
        away.goals_for += fixture.away_score
        away.goals_against += fixture.home_score

        if fixture.home_score > fixture.away_score:
            home.wins += 1
            home.points += WIN_POINTS
            away.losses += 1
            away.points += LOSS_POINTS
        elif fixture.home_score < fixture.away_score:
            away.wins += 1
            away.points += WIN_POINTS
            home.losses += 1
            home.points += LOSS_POINTS
        else:
            home.draws += 1
            away.draws += 1
            home.points += DRAW_POINTS
            away.points += DRAW_POINTS

    def _row_for(
        self, table: Dict[str, StandingsRow], fixture: Fixture, participant: Participant
    ) -> StandingsRow:
        row = table.get(participant.id)
        if row is None:
            logger.error(
                "Fixture %d references unknown participant %s (%s)",
                fixture.id,
                participant.name,
                participant.id,
            )
            raise ParticipantNotFoundException(
                f"Fixture {fixture.id} references {participant.name!r}, "
                "who is not part of this tournament"
            )
        return row


def compute_standings(
    fixtures: Iterable[Fixture], participants: Sequence[Participant]
) -> List[StandingsRow]:
    """Compute ranked standings; see :meth:`StandingsCalculator.compute`."""
    return StandingsCalculator().compute(fixtures, participants)
