"""Match data class."""

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

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict

from arenamatch.exceptions import InvalidResultException
from arenamatch.models.enums import MatchStatus
from arenamatch.type_hints import MatchId, PlayerId, Score


@dataclass(frozen=True, slots=True)
class Match:
    """Represents a head-to-head match between two players.

    Matches are immutable: recording a result replaces the ledger entry
    with a completed copy. Scores are present if and only if the match is
    completed.

    Attributes
    ----------
    _id : str
        Immutable match identifier, exposed as ``id``.
    player1_id : str
        Reference to the first player.
    player2_id : str
        Reference to the second player.
    timestamp : datetime
        Creation time, used to order the history.
    status : MatchStatus
        PENDING until a result is recorded, then COMPLETED.
    score1 : int or None
        Goals scored by player 1.
    score2 : int or None
        Goals scored by player 2.
    """

    _id: MatchId
    player1_id: PlayerId
    player2_id: PlayerId
    timestamp: datetime
    status: MatchStatus = MatchStatus.PENDING
    score1: Score = None
    score2: Score = None

    @property
    def id(self) -> MatchId:
        """Immutable match identifier."""
        return self._id

    @property
    def is_completed(self) -> bool:
        return self.status is MatchStatus.COMPLETED

    @property
    def is_pending(self) -> bool:
        return self.status is MatchStatus.PENDING

    def involves(self, player_id: PlayerId) -> bool:
        """Check whether the player is on either side of this match."""
        return player_id in (self.player1_id, self.player2_id)

    def completed(self, score1: int, score2: int) -> "Match":
        """Return a completed copy of this match with both scores set.

        Args:
            score1: Goals for player 1, must be >= 0
            score2: Goals for player 2, must be >= 0

        Returns:
            The completed Match

        Raises:
            InvalidResultException: If either score is negative or not an int
        """
        for score in (score1, score2):
            if isinstance(score, bool) or not isinstance(score, int):
                raise InvalidResultException(f"Score must be an integer: {score!r}")
            if score < 0:
                raise InvalidResultException(f"Score must not be negative: {score}")

        return replace(
            self, score1=score1, score2=score2, status=MatchStatus.COMPLETED
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "timestamp": self.timestamp.isoformat(),
            "status": self.status.value,
            "score1": self.score1,
            "score2": self.score2,
        }
