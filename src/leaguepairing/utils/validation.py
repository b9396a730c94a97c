"""Validation utilities for League Pairing.

This module provides reusable validation functions with consistent error handling.
Everything here runs on the caller side, before the schedule generator or the
standings engine is invoked.
"""

import re
from typing import Any, Iterable, List, Optional

from leaguepairing.constants import MIN_PARTICIPANTS
from leaguepairing.exceptions import (
    ColorValidationException,
    DuplicateParticipantException,
    InvalidParticipantDataException,
    ScoreValidationException,
    TournamentNameValidationException,
)

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Name Validation ==========


def validate_tournament_name(name: Optional[str]) -> ValidationResult:
    """Validate a tournament name.

    Args:
        name: Name entered by the organizer

    Returns:
        ValidationResult with the stripped name when valid
    """
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Please enter a name for your tournament.",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_tournament_name_strict(name: Optional[str]) -> str:
    """Validate a tournament name and return it stripped or raise exception.

    Raises:
        TournamentNameValidationException: If the name is empty
    """
    result = validate_tournament_name(name)
    if not result.is_valid:
        raise TournamentNameValidationException(result.error_message)
    return result.sanitized_value or ""


def validate_participant_name(name: Optional[str]) -> ValidationResult:
    """Validate a participant (team) name.

    Any non-blank text is accepted; surrounding whitespace is stripped.
    """
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Team name cannot be empty",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_participant_name_strict(name: Optional[str]) -> str:
    """Validate a participant name and return it stripped or raise exception.

    Raises:
        InvalidParticipantDataException: If the name is empty
    """
    result = validate_participant_name(name)
    if not result.is_valid:
        raise InvalidParticipantDataException(result.error_message)
    return result.sanitized_value or ""


# ========== Colour Validation ==========


def validate_color(color: Optional[str], required: bool = False) -> ValidationResult:
    """Validate a display colour.

    Accepts ``#rgb`` and ``#rrggbb`` hex notation; the sanitized value is
    lower-cased.

    Args:
        color: Colour to validate
        required: Whether a colour is required (empty = invalid)

    Returns:
        ValidationResult with validation status
    """
    if not color or not color.strip():
        if required:
            return ValidationResult(
                is_valid=False,
                error_message="Colour is required",
            )
        return ValidationResult(is_valid=True, sanitized_value=None)

    color = color.strip()
    if HEX_COLOR_PATTERN.match(color):
        return ValidationResult(is_valid=True, sanitized_value=color.lower())

    return ValidationResult(
        is_valid=False,
        error_message=f"Invalid colour format: {color}",
    )


def validate_color_strict(color: str) -> str:
    """Validate colour and return the normalized value or raise exception.

    Raises:
        ColorValidationException: If the colour is invalid
    """
    result = validate_color(color, required=True)
    if not result.is_valid:
        raise ColorValidationException(result.error_message)
    return result.sanitized_value or ""


# ========== Participant List Validation ==========


def find_duplicate_names(names: Iterable[str]) -> List[str]:
    """Return every name whose case-insensitive identity was already seen.

    Example:
        >>> find_duplicate_names(["Blue", "Red", "blue"])
        ['blue']
    """
    seen = set()
    duplicates = []
    for name in names:
        key = name.strip().lower()
        if key in seen:
            duplicates.append(name)
        seen.add(key)
    return duplicates


def validate_participants(participants: Iterable[Any]) -> ValidationResult:
    """Validate the participant field of a tournament.

    Args:
        participants: Objects exposing a ``name`` attribute

    Returns:
        ValidationResult, invalid when fewer than two participants are given
        or two of them share a case-insensitive name
    """
    names = [p.name for p in participants]
    if len(names) < MIN_PARTICIPANTS:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"A round robin needs at least {MIN_PARTICIPANTS} teams, "
                f"got {len(names)}"
            ),
        )

    duplicates = find_duplicate_names(names)
    if duplicates:
        return ValidationResult(
            is_valid=False,
            error_message=(
                "Each team must have a unique name. Duplicates: "
                + ", ".join(duplicates)
            ),
        )

    return ValidationResult(is_valid=True)


def validate_participants_strict(participants: Iterable[Any]) -> None:
    """Validate participants and raise the matching exception if invalid.

    Raises:
        InvalidParticipantDataException: Fewer than two participants
        DuplicateParticipantException: Two participants share an identity
            or an id
    """
    participants = list(participants)
    for participant in participants:
        validate_participant_name_strict(participant.name)

    ids = [p.id for p in participants]
    if len(set(ids)) != len(ids):
        raise DuplicateParticipantException(
            "Each team must have its own id. Shared: "
            + ", ".join(sorted({i for i in ids if ids.count(i) > 1}))
        )

    result = validate_participants(participants)
    if result.is_valid:
        return
    if len(participants) < MIN_PARTICIPANTS:
        raise InvalidParticipantDataException(result.error_message)
    raise DuplicateParticipantException(result.error_message)


# ========== Score Validation ==========


def validate_score(score: Any) -> ValidationResult:
    """Validate a match score (must be a non-negative integer).

    Booleans and floats are rejected rather than coerced, so ``True`` or
    ``2.5`` never silently become a goal count.

    Args:
        score: Score to validate

    Returns:
        ValidationResult with validation status
    """
    if isinstance(score, bool) or not isinstance(score, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be a whole number: {score!r}",
        )
    if score < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score cannot be negative: {score}",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(score))


def validate_score_strict(score: Any) -> int:
    """Validate a score and return it or raise exception.

    Raises:
        ScoreValidationException: If the score is invalid
    """
    result = validate_score(score)
    if not result.is_valid:
        raise ScoreValidationException(result.error_message)
    return score
