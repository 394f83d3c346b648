"""Exceptions for use in Tabletop Pairing"""

# Tabletop Pairing
# Copyright (C) 2025  Tabletop Pairing developers
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


class TabletopPairingException(Exception):
    """Base exception for all Tabletop Pairing errors.

    All custom exceptions in the package inherit from this class, so a host
    can catch every engine error with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(TabletopPairingException):
    """Base exception for pairing-related errors."""

    pass


class PairingNotFoundException(PairingException):
    """Raised when a pairing id does not exist in the requested round."""

    pass


class NoPairingAvailableException(PairingException):
    """Raised when no valid pairing can be generated."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(TabletopPairingException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


# ========== Result Exceptions ==========


class ResultException(TabletopPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., winner is not part of the pairing)."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(TabletopPairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
