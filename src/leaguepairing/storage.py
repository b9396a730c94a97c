"""JSON persistence for the list of tournaments."""

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

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from leaguepairing.constants import (
    DEFAULT_STORE_FILE,
    STORE_ENV_VAR,
    STORE_FORMAT_VERSION,
)
from leaguepairing.exceptions import (
    FileLoadException,
    FileSaveException,
    LeaguePairingException,
    TournamentNotFoundException,
)
from leaguepairing.models.tournament import Tournament
from leaguepairing.utils import setup_logger

logger = setup_logger(__name__)


def default_store_path() -> Path:
    """Store file from ``LEAGUE_PAIRING_STORE``, else ``tournaments.json`` in cwd."""
    return Path(os.environ.get(STORE_ENV_VAR) or DEFAULT_STORE_FILE)


class TournamentStore:
    """Ordered collection of tournaments backed by one JSON file.

    The in-memory list is the source of truth; call :meth:`save` to write
    it out. Every mutator replaces whole Tournament records, which are
    themselves immutable.

    File layout::

        {"version": 1, "tournaments": [<Tournament.to_dict()>, ...]}
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else default_store_path()
        self._tournaments: List[Tournament] = []

    # ========== Collection ==========

    def __len__(self) -> int:
        return len(self._tournaments)

    def __iter__(self):
        return iter(list(self._tournaments))

    def list(self) -> List[Tournament]:
        """Tournaments in insertion order."""
        return list(self._tournaments)

    def add(self, tournament: Tournament) -> Tournament:
        if any(t.id == tournament.id for t in self._tournaments):
            raise FileSaveException(f"Tournament {tournament.id} is already stored")
        self._tournaments.append(tournament)
        logger.info(f"Added tournament {tournament.name!r} ({tournament.id})")
        return tournament

    def get(self, tournament_id: str) -> Tournament:
        """Look up a tournament by id.

        Raises:
            TournamentNotFoundException: Unknown id
        """
        return self._tournaments[self._index_of(tournament_id)]

    def find(self, reference: str) -> Tournament:
        """Look up a tournament by id, or failing that by case-insensitive name.

        Raises:
            TournamentNotFoundException: Nothing matches
        """
        for tournament in self._tournaments:
            if tournament.id == reference:
                return tournament
        wanted = reference.strip().lower()
        for tournament in self._tournaments:
            if tournament.name.strip().lower() == wanted:
                return tournament
        raise TournamentNotFoundException(f"No tournament matching {reference!r}")

    def replace(self, tournament: Tournament) -> Tournament:
        """Swap in a new snapshot of an already stored tournament."""
        self._tournaments[self._index_of(tournament.id)] = tournament
        logger.debug(f"Updated tournament {tournament.id}")
        return tournament

    def delete(self, tournament_id: str) -> Tournament:
        removed = self._tournaments.pop(self._index_of(tournament_id))
        logger.info(f"Deleted tournament {removed.name!r} ({removed.id})")
        return removed

    def _index_of(self, tournament_id: str) -> int:
        for index, tournament in enumerate(self._tournaments):
            if tournament.id == tournament_id:
                return index
        raise TournamentNotFoundException(f"No tournament with id {tournament_id}")

    # ========== Persistence ==========

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": STORE_FORMAT_VERSION,
            "tournaments": [t.to_dict() for t in self._tournaments],
        }

    def load(self) -> "TournamentStore":
        """Read the store file; a missing file gives an empty store.

        Raises:
            FileLoadException: Unreadable file, malformed JSON or records
        """
        if not self.path.exists():
            logger.info(f"No store at {self.path}, starting empty")
            self._tournaments = []
            return self

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.exception(f"Error reading store {self.path}")
            raise FileLoadException(f"Could not load {self.path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("tournaments"), list):
            raise FileLoadException(f"{self.path} is not a tournament store")
        version = data.get("version", STORE_FORMAT_VERSION)
        if version > STORE_FORMAT_VERSION:
            raise FileLoadException(
                f"{self.path} was written by a newer version (format {version})"
            )

        try:
            self._tournaments = [Tournament.from_dict(t) for t in data["tournaments"]]
        except (KeyError, TypeError, ValueError, LeaguePairingException) as e:
            logger.exception(f"Malformed tournament record in {self.path}")
            raise FileLoadException(f"Could not load {self.path}: {e}") from e

        logger.info(f"Loaded {len(self._tournaments)} tournaments from {self.path}")
        return self

    def save(self) -> None:
        """Write the store file, creating parent folders as needed.

        Raises:
            FileSaveException: The file could not be written
        """
        try:
            if self.path.parent and not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=4)
        except OSError as e:
            logger.exception(f"Error saving store {self.path}")
            raise FileSaveException(f"Could not save {self.path}: {e}") from e
        logger.info(f"Saved {len(self._tournaments)} tournaments to {self.path}")
