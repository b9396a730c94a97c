"""TournamentConfig data class."""

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
from typing import Any, Dict, Optional

from leaguepairing.constants import DEFAULT_FORMAT, FORMAT_NAMES, FORMATS
from leaguepairing.exceptions import InvalidConfigurationException
from leaguepairing.type_hints import Format


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    format : str
        ``"single"`` or ``"double"`` round robin.
    shuffle_rounds : bool
        Whether the order of rounds within each cycle is randomised.
    seed : int or None
        Seed for the round shuffle. With a seed the same entry list always
        yields the same schedule.
    """

    name: str
    format: Format = DEFAULT_FORMAT
    shuffle_rounds: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.format not in FORMATS:
            raise InvalidConfigurationException(
                f"Unknown tournament format {self.format!r}, expected one of {FORMATS}"
            )

    @property
    def format_name(self) -> str:
        """Human readable format, e.g. "Double Round Robin"."""
        return FORMAT_NAMES[self.format]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "format": self.format,
            "shuffle_rounds": self.shuffle_rounds,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Tournament"),
            format=data.get("format", DEFAULT_FORMAT),
            shuffle_rounds=data.get("shuffle_rounds", False),
            seed=data.get("seed"),
        )
