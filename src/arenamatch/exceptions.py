"""Exceptions for use in ArenaMatch"""

# ArenaMatch
# Copyright (C) 2025  ArenaMatch developers
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


class ArenaMatchException(Exception):
    """Base exception for all ArenaMatch errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(ArenaMatchException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException, ValueError):
    """Raised when a match is proposed between a player and itself."""

    pass


# ========== Match Exceptions ==========


class MatchException(ArenaMatchException):
    """Base exception for match ledger errors."""

    pass


class MatchNotFoundException(MatchException, KeyError):
    """Raised when a result is recorded against a match id that does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the plain message
        return str(self.args[0]) if self.args else ""


class InvalidResultException(MatchException, ValueError):
    """Raised when a result is invalid (e.g., negative score)."""

    pass


# ========== Player Exceptions ==========


class PlayerException(ArenaMatchException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException, ValueError):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== API Exceptions ==========


class APIException(ArenaMatchException):
    """Base exception for API-related errors."""

    pass


class CommentaryException(APIException):
    """Raised when the text generation service did not return usable text."""

    pass
