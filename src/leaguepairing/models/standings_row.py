"""Standings row data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from leaguepairing.models.participant import Participant


@dataclass
class StandingsRow:
    """Aggregated performance record for one participant.

    Attributes
    ----------
    participant : Participant
        The participant the row belongs to.
    played, wins, draws, losses : int
        Completed fixture counts.
    goals_for, goals_against : int
        Goals scored and conceded over completed fixtures.
    goal_difference : int
        ``goals_for - goals_against``, filled in once every fixture is folded in.
    points : int
        League points (3 per win, 1 per draw).
    position : int
        1-based rank after sorting, 0 until ranked.
    """

    participant: Participant
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0
    position: int = 0

    def sort_key(self):
        """Ranking key: points, then goal difference, then goals scored."""
        return (self.points, self.goal_difference, self.goals_for)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standings row to dictionary (for export)."""
        return {
            "position": self.position,
            "participant": self.participant.to_dict(),
            "played": self.played,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
            "points": self.points,
        }
