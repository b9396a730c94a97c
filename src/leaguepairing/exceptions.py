"""Exceptions for use in League Pairing"""

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


# ========== Base Application Exception ==========


class LeaguePairingException(Exception):
    """Base exception for all League Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(LeaguePairingException):
    """Base exception for schedule generation errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when the generator is asked for an impossible schedule."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(LeaguePairingException):
    """Base exception for tournament-related errors."""

    pass


class DuplicateParticipantException(TournamentException):
    """Raised when two participants collapse to the same identity."""

    pass


class TournamentNotFoundException(TournamentException):
    """Raised when a requested tournament does not exist in the store."""

    pass


# ========== Participant Exceptions ==========


class ParticipantException(LeaguePairingException):
    """Base exception for participant-related errors."""

    pass


class ParticipantNotFoundException(ParticipantException):
    """Raised when a fixture or request references an unknown participant."""

    pass


class InvalidParticipantDataException(ParticipantException):
    """Raised when participant data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(LeaguePairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., negative score)."""

    pass


class FixtureNotFoundException(ResultException):
    """Raised when a result references a fixture id that does not exist."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(LeaguePairingException):
    """Base exception for validation errors."""

    pass


class TournamentNameValidationException(ValidationException):
    """Raised when a tournament name is missing."""

    pass


class ColorValidationException(ValidationException):
    """Raised when a display colour is not a hex colour."""

    pass


class ScoreValidationException(ValidationException):
    """Raised when a score is not a non-negative integer."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(LeaguePairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(LeaguePairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
