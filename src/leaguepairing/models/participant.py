"""Participant data class."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from leaguepairing.constants import DEFAULT_COLORS
from leaguepairing.utils import generate_id
from leaguepairing.utils.validation import (
    validate_color_strict,
    validate_participant_name_strict,
)


@dataclass(frozen=True)
class Participant:
    """A competing entity (team) in a tournament.

    Attributes
    ----------
    name : str
        Display name, unique per tournament ignoring case.
    color : str
        Opaque display token, normally a hex colour.
    id : str
        Stable identifier. Fixtures and standings rows reference the
        participant through it, so renaming never orphans history.
    """

    name: str
    color: str = DEFAULT_COLORS[0]
    id: str = field(default_factory=lambda: generate_id("team_"))

    @property
    def key(self) -> str:
        """Identity used for duplicate detection: the lower-cased name."""
        return self.name.strip().lower()

    def renamed(self, new_name: str) -> "Participant":
        """Return a copy with a new name and the same id."""
        return replace(self, name=validate_participant_name_strict(new_name))

    def __str__(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {"id": self.id, "name": self.name, "color": self.color}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary.

        Records written before ids existed get one generated.
        """
        kwargs = {"name": data["name"], "color": data.get("color", DEFAULT_COLORS[0])}
        if data.get("id"):
            kwargs["id"] = data["id"]
        return cls(**kwargs)


def create_participant(
    name: str, color: Optional[str] = None, index: int = 0
) -> Participant:
    """Create a validated participant.

    Args:
        name: Team name, stripped of surrounding whitespace
        color: Hex colour; when omitted the default palette is cycled by ``index``
        index: Seat of the participant in the entry list

    Returns:
        The new Participant

    Raises:
        InvalidParticipantDataException: If the name is empty
        ColorValidationException: If the colour is not a hex colour
    """
    clean_name = validate_participant_name_strict(name)
    if color is None:
        clean_color = DEFAULT_COLORS[index % len(DEFAULT_COLORS)]
    else:
        clean_color = validate_color_strict(color)
    return Participant(name=clean_name, color=clean_color)
