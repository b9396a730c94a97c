"""Tournament record - the snapshot every operation works on.

A tournament is immutable: recording a result, renaming a participant or
changing the setup returns a new Tournament and leaves the old one intact,
so anyone still holding the previous snapshot keeps a consistent view.
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

import math
import random
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from leaguepairing.controllers.tournament import (
    ResultRecorder,
    RoundManager,
    StandingsCalculator,
)
from leaguepairing.exceptions import (
    DuplicateParticipantException,
    FixtureNotFoundException,
    ParticipantNotFoundException,
)
from leaguepairing.models.fixture import Fixture
from leaguepairing.models.participant import Participant
from leaguepairing.models.standings_row import StandingsRow
from leaguepairing.models.tournament_config import TournamentConfig
from leaguepairing.pairing.round_robin import generate_fixtures
from leaguepairing.type_hints import Format, RoundGroups, ScheduleEntry
from leaguepairing.utils import generate_id, setup_logger
from leaguepairing.utils.validation import (
    find_duplicate_names,
    validate_participant_name_strict,
    validate_participants_strict,
    validate_tournament_name_strict,
)

logger = setup_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Tournament:
    """A round-robin tournament: setup, fixtures and derived standings.

    Standings are never stored; they are recomputed from the fixtures on
    every access.

    Attributes
    ----------
    config : TournamentConfig
        Name, format, shuffle flag and shuffle seed.
    participants : tuple of Participant
        Participants in entry order.
    fixtures : tuple of Fixture
        Generated schedule, with any results recorded so far.
    id : str
        Stable tournament identifier.
    created_at : datetime
        Creation timestamp (UTC).
    """

    config: TournamentConfig
    participants: Tuple[Participant, ...]
    fixtures: Tuple[Fixture, ...]
    id: str = field(default_factory=lambda: generate_id("tournament_"))
    created_at: datetime = field(default_factory=_utcnow)

    # ========== Creation ==========

    @classmethod
    def create(
        cls,
        name: str,
        participants: Sequence[Participant],
        format: Format = "single",
        shuffle_rounds: bool = False,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Tournament":
        """Validate the setup and generate the schedule.

        Args:
            name: Tournament name, must not be blank
            participants: Two or more participants with unique names
            format: ``"single"`` or ``"double"``
            shuffle_rounds: Randomise round order within each cycle
            seed: Seed for the round shuffle, stored with the tournament
            rng: Explicit random source, overrides ``seed``

        Raises:
            TournamentNameValidationException: Blank name
            InvalidParticipantDataException: Fewer than two participants
            DuplicateParticipantException: Duplicate participant names
            InvalidConfigurationException: Unknown format
        """
        config = TournamentConfig(
            name=validate_tournament_name_strict(name),
            format=format,
            shuffle_rounds=shuffle_rounds,
            seed=seed,
        )
        participants = tuple(participants)
        validate_participants_strict(participants)

        tournament = cls(
            config=config,
            participants=participants,
            fixtures=tuple(cls._schedule(config, participants, rng)),
        )
        logger.info(
            f"Created tournament {tournament.name!r} ({tournament.id}): "
            f"{len(participants)} teams, {len(tournament.fixtures)} fixtures"
        )
        return tournament

    @staticmethod
    def _schedule(
        config: TournamentConfig,
        participants: Sequence[Participant],
        rng: Optional[random.Random] = None,
    ) -> List[Fixture]:
        if rng is None:
            rng = random.Random(config.seed)
        return generate_fixtures(
            participants,
            format=config.format,
            shuffle=config.shuffle_rounds,
            rng=rng,
        )

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def format(self) -> Format:
        return self.config.format

    @property
    def standings(self) -> List[StandingsRow]:
        """Current league table, recomputed from the fixtures."""
        return StandingsCalculator().compute(self.fixtures, self.participants)

    @property
    def progress(self) -> Tuple[int, int, int]:
        """Return (completed fixtures, total fixtures, percentage rounded)."""
        total = len(self.fixtures)
        completed = sum(1 for f in self.fixtures if f.is_completed)
        percentage = math.floor(completed * 100 / total + 0.5) if total else 0
        return completed, total, percentage

    @property
    def is_finished(self) -> bool:
        """Is every fixture played?"""
        completed, total, _ = self.progress
        return total > 0 and completed == total

    @property
    def rounds(self) -> RoundGroups:
        """Fixtures grouped under their round number."""
        return RoundManager(self.fixtures).rounds

    # ========== Lookups ==========

    def get_participant(self, participant_id: str) -> Participant:
        """Find a participant by id.

        Raises:
            ParticipantNotFoundException: If the id is not part of the tournament
        """
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        raise ParticipantNotFoundException(
            f"No participant with id {participant_id} in {self.name!r}"
        )

    def find_participant(self, name: str) -> Participant:
        """Find a participant by case-insensitive name.

        Raises:
            ParticipantNotFoundException: If no participant has that name
        """
        key = name.strip().lower()
        for participant in self.participants:
            if participant.key == key:
                return participant
        raise ParticipantNotFoundException(f"No team named {name!r} in {self.name!r}")

    def get_fixture(self, fixture_id: int) -> Fixture:
        for fixture in self.fixtures:
            if fixture.id == fixture_id:
                return fixture
        raise FixtureNotFoundException(f"No fixture with id {fixture_id}")

    def schedule_for(self, participant_id: str) -> List[ScheduleEntry]:
        """Round-by-round schedule of one participant."""
        self.get_participant(participant_id)
        return RoundManager(self.fixtures).participant_schedule(participant_id)

    # ========== Results ==========

    def record_result(
        self, fixture_id: int, home_score: Any, away_score: Any
    ) -> "Tournament":
        """Return a tournament where ``fixture_id`` is completed with the given score.

        Raises:
            FixtureNotFoundException: Unknown fixture id
            InvalidResultException: Negative or non-integer score
        """
        fixtures = ResultRecorder().record_result(
            self.fixtures, fixture_id, home_score, away_score
        )
        return replace(self, fixtures=tuple(fixtures))

    def clear_result(self, fixture_id: int) -> "Tournament":
        """Return a tournament where ``fixture_id`` is pending again."""
        fixtures = ResultRecorder().clear_result(self.fixtures, fixture_id)
        return replace(self, fixtures=tuple(fixtures))

    def with_round_dates(
        self, start: datetime, interval: Optional[relativedelta] = None
    ) -> "Tournament":
        """Return a tournament with a kick-off date on every fixture."""
        fixtures = RoundManager(self.fixtures).with_round_dates(start, interval)
        return replace(self, fixtures=tuple(fixtures))

    # ========== Setup changes ==========

    def rename_participant(self, participant_id: str, new_name: str) -> "Tournament":
        """Rename a participant, keeping every fixture and result attached.

        Raises:
            ParticipantNotFoundException: Unknown participant id
            InvalidParticipantDataException: Blank name
            DuplicateParticipantException: Name taken by another participant
        """
        current = self.get_participant(participant_id)
        clean_name = validate_participant_name_strict(new_name)
        others = [p.name for p in self.participants if p.id != participant_id]
        if find_duplicate_names(others + [clean_name]):
            raise DuplicateParticipantException(
                f"A team named {clean_name!r} already exists"
            )

        renamed = current.renamed(clean_name)
        logger.info(f"Renamed {current.name!r} to {renamed.name!r}")
        return self._with_updated_participant(renamed)

    def _with_updated_participant(self, participant: Participant) -> "Tournament":
        participants = tuple(
            participant if p.id == participant.id else p for p in self.participants
        )
        fixtures = tuple(f.with_participant(participant) for f in self.fixtures)
        return replace(self, participants=participants, fixtures=fixtures)

    def reconfigure(
        self,
        name: Optional[str] = None,
        participants: Optional[Sequence[Participant]] = None,
        format: Optional[Format] = None,
        shuffle_rounds: Optional[bool] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Tournament":
        """Apply an edited setup, keeping id and creation time.

        Fixtures are regenerated (and results dropped) only when the entry
        list, the format or the shuffle flag changed, or when the seed
        of a shuffled schedule changed. Changing only the name,
        or only names and colours of the same participants, keeps results.

        Args:
            name: New tournament name
            participants: New entry list; same ids in the same order count as unchanged
            format: New format
            shuffle_rounds: New shuffle flag
            seed: New shuffle seed
            rng: Explicit random source for a regenerated schedule

        Raises:
            Same validation errors as :meth:`create`.
        """
        config = TournamentConfig(
            name=validate_tournament_name_strict(
                self.config.name if name is None else name
            ),
            format=self.config.format if format is None else format,
            shuffle_rounds=(
                self.config.shuffle_rounds if shuffle_rounds is None else shuffle_rounds
            ),
            seed=self.config.seed if seed is None else seed,
        )
        new_participants = (
            self.participants if participants is None else tuple(participants)
        )
        validate_participants_strict(new_participants)

        same_entry = [p.id for p in new_participants] == [
            p.id for p in self.participants
        ]
        structure_changed = (
            not same_entry
            or config.format != self.config.format
            or config.shuffle_rounds != self.config.shuffle_rounds
            or (config.shuffle_rounds and config.seed != self.config.seed)
        )

        if structure_changed:
            logger.info(f"Setup of {config.name!r} changed, regenerating fixtures")
            return replace(
                self,
                config=config,
                participants=new_participants,
                fixtures=tuple(self._schedule(config, new_participants, rng)),
            )

        updated = replace(self, config=config)
        for participant in new_participants:
            updated = updated._with_updated_participant(participant)
        return updated

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "config": self.config.to_dict(),
            "participants": [p.to_dict() for p in self.participants],
            "fixtures": [f.to_dict() for f in self.fixtures],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object

        Raises:
            ParticipantNotFoundException: A fixture references an unknown participant
            DuplicateParticipantException: Two participants share a name or an id
        """
        config = TournamentConfig.from_dict(data.get("config", data))
        participants = tuple(Participant.from_dict(p) for p in data["participants"])
        validate_participants_strict(participants)
        by_id = {p.id: p for p in participants}
        fixtures = tuple(Fixture.from_dict(f, by_id) for f in data.get("fixtures", []))

        kwargs: Dict[str, Any] = {
            "config": config,
            "participants": participants,
            "fixtures": fixtures,
        }
        if data.get("id"):
            kwargs["id"] = data["id"]
        if data.get("created_at"):
            kwargs["created_at"] = isoparse(data["created_at"])

        tournament = cls(**kwargs)
        logger.debug(f"Loaded tournament: {tournament.name}")
        return tournament
