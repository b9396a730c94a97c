"""Fixture data class."""

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

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from dateutil.parser import isoparse

from leaguepairing.constants import (
    PENDING_RESULT_DISPLAY,
    STATUS_COMPLETED,
    STATUS_PENDING,
)
from leaguepairing.exceptions import (
    InvalidPairingException,
    InvalidResultException,
    ParticipantNotFoundException,
)
from leaguepairing.models.participant import Participant
from leaguepairing.type_hints import FixtureStatus
from leaguepairing.utils.validation import validate_score


@dataclass(frozen=True)
class Fixture:
    """One scheduled match between two participants.

    Fixtures are immutable; recording or clearing a result produces a new
    instance through :meth:`with_result` / :meth:`cleared`.

    Attributes
    ----------
    id : int
        Unique, 1-based, assigned in emission order by the generator.
    round : int
        Round the fixture belongs to (1-indexed).
    home : Participant
        Home side.
    away : Participant
        Away side, never the same participant as ``home``.
    home_score : int or None
        Goals scored by the home side, None while pending.
    away_score : int or None
        Goals scored by the away side, None while pending.
    status : str
        ``"completed"`` exactly when both scores are set, else ``"pending"``.
    date : datetime or None
        Kick-off, unset when generated.
    """

    id: int
    round: int
    home: Participant
    away: Participant
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    status: FixtureStatus = STATUS_PENDING
    date: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.home.id == self.away.id:
            raise InvalidPairingException(
                f"Fixture {self.id} pairs {self.home.name} against itself"
            )
        if self.round < 1:
            raise InvalidPairingException(
                f"Fixture {self.id} has invalid round {self.round}"
            )
        for side, score in (("home", self.home_score), ("away", self.away_score)):
            if score is None:
                continue
            result = validate_score(score)
            if not result.is_valid:
                raise InvalidResultException(
                    f"Fixture {self.id}: invalid {side} score. {result.error_message}"
                )
        scores_set = self.home_score is not None and self.away_score is not None
        if scores_set != (self.status == STATUS_COMPLETED):
            raise InvalidResultException(
                f"Fixture {self.id}: status {self.status!r} does not match scores "
                f"{self.home_score!r}-{self.away_score!r}"
            )

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    @property
    def result_display(self) -> str:
        """Score as shown in a schedule, e.g. ``"2 - 1"``, or ``"vs"``."""
        if self.is_completed:
            return f"{self.home_score} - {self.away_score}"
        return PENDING_RESULT_DISPLAY

    def involves(self, participant_id: str) -> bool:
        return participant_id in (self.home.id, self.away.id)

    def with_result(self, home_score: int, away_score: int) -> "Fixture":
        """Return a completed copy carrying the given scores."""
        return replace(
            self,
            home_score=home_score,
            away_score=away_score,
            status=STATUS_COMPLETED,
        )

    def cleared(self) -> "Fixture":
        """Return a pending copy with both scores unset."""
        return replace(
            self, home_score=None, away_score=None, status=STATUS_PENDING
        )

    def with_date(self, date: Optional[datetime]) -> "Fixture":
        """Return a copy with the kick-off set (or unset with None)."""
        return replace(self, date=date)

    def with_participant(self, participant: Participant) -> "Fixture":
        """Return a copy where the side with ``participant.id`` is replaced."""
        if self.home.id == participant.id:
            return replace(self, home=participant)
        if self.away.id == participant.id:
            return replace(self, away=participant)
        return self

    def __str__(self) -> str:
        return f"#{self.id} R{self.round}: {self.home} {self.result_display} {self.away}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize fixture to dictionary.

        Participants are stored by id; the owning tournament stores the
        participant records themselves.
        """
        return {
            "id": self.id,
            "round": self.round,
            "home_id": self.home.id,
            "away_id": self.away.id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "status": self.status,
            "date": self.date.isoformat() if self.date else None,
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], participants: Mapping[str, Participant]
    ) -> "Fixture":
        """Deserialize fixture from dictionary.

        Args:
            data: Dictionary produced by :meth:`to_dict`
            participants: Participants of the tournament keyed by id

        Raises:
            ParticipantNotFoundException: If a side references an unknown id
        """
        try:
            home = participants[data["home_id"]]
            away = participants[data["away_id"]]
        except KeyError as e:
            raise ParticipantNotFoundException(
                f"Fixture {data.get('id')} references unknown participant {e}"
            ) from e

        raw_date = data.get("date")
        return cls(
            id=int(data["id"]),
            round=int(data["round"]),
            home=home,
            away=away,
            home_score=data.get("home_score"),
            away_score=data.get("away_score"),
            status=data.get("status", STATUS_PENDING),
            date=isoparse(raw_date) if raw_date else None,
        )
