"""Match ledger.

This module handles scheduling matches, recording results, deleting
matches and the cascade applied when a player leaves the roster.
"""

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

from datetime import datetime
from typing import Callable, Iterator, List, Optional

from arenamatch.exceptions import InvalidPairingException, MatchNotFoundException
from arenamatch.models import Match
from arenamatch.type_hints import MatchId, PlayerId
from arenamatch.utils import new_id, setup_logger, utc_now

logger = setup_logger(__name__)


class MatchLedger:
    """Holds every match ever scheduled, most recent first.

    Entries are immutable Match values, so every change goes through the
    ledger and bumps its version.

    The ledger keeps non-owning references to players by id. It never
    checks those ids against the roster: completed matches legitimately
    outlive the players they reference.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        # newest first
        self._matches: List[Match] = []
        self._version = 0

    def __len__(self) -> int:
        return len(self._matches)

    def __iter__(self) -> Iterator[Match]:
        return iter(list(self._matches))

    @property
    def version(self) -> int:
        """Counter bumped by every ledger mutation."""
        return self._version

    @property
    def matches(self) -> List[Match]:
        """Snapshot of the ledger in storage order (newest first)."""
        return list(self._matches)

    def get(self, match_id: MatchId) -> Optional[Match]:
        index = self._index_of(match_id)
        return None if index is None else self._matches[index]

    def _index_of(self, match_id: MatchId) -> Optional[int]:
        for index, match in enumerate(self._matches):
            if match.id == match_id:
                return index
        return None

    def pending_matches(self) -> List[Match]:
        """Matches still awaiting a result, in storage order."""
        return [m for m in self._matches if m.is_pending]

    def completed_matches(self) -> List[Match]:
        """Match history, sorted by timestamp descending.

        The sort is stable over storage order, so matches sharing a
        timestamp keep newest-created first.
        """
        completed = [m for m in self._matches if m.is_completed]
        return sorted(completed, key=lambda m: m.timestamp, reverse=True)

    @property
    def pending_count(self) -> int:
        return sum(1 for m in self._matches if m.is_pending)

    def schedule_match(self, player1_id: PlayerId, player2_id: PlayerId) -> Match:
        """Create a pending match between two players.

        Args:
            player1_id: ID of the first player
            player2_id: ID of the second player

        Returns:
            The new pending Match

        Raises:
            InvalidPairingException: If both ids are the same player
        """
        if player1_id == player2_id:
            raise InvalidPairingException(
                f"A player cannot be paired against themselves: {player1_id}"
            )

        match_id = self._id_factory()
        while self.get(match_id) is not None:
            match_id = self._id_factory()

        match = Match(
            _id=match_id,
            player1_id=player1_id,
            player2_id=player2_id,
            timestamp=self._clock(),
        )
        self._matches.insert(0, match)
        self._version += 1
        logger.info(f"Scheduled match {match.id}: {player1_id} vs {player2_id}")
        return match

    def record_result(self, match_id: MatchId, score1: int, score2: int) -> Match:
        """Record the final score of a match.

        Recording against an already completed match overwrites the
        previous score.

        Args:
            match_id: ID of the match
            score1: Goals for player 1, >= 0
            score2: Goals for player 2, >= 0

        Returns:
            The completed Match, which replaces the previous entry

        Raises:
            MatchNotFoundException: If no match has this id
            InvalidResultException: If a score is negative
        """
        index = self._index_of(match_id)
        if index is None:
            raise MatchNotFoundException(f"No match with id {match_id}")

        match = self._matches[index]
        if match.is_completed:
            logger.warning(
                f"Match {match_id} already completed "
                f"({match.score1}-{match.score2}), overwriting result"
            )

        match = match.completed(score1, score2)
        self._matches[index] = match
        self._version += 1
        logger.info(f"Recorded result for match {match_id}: {score1}-{score2}")
        return match

    def delete_match(self, match_id: MatchId) -> bool:
        """Delete a match regardless of its status.

        Returns:
            True if deleted, False if not found
        """
        for index, match in enumerate(self._matches):
            if match.id == match_id:
                del self._matches[index]
                self._version += 1
                logger.info(f"Deleted {match.status.value.lower()} match {match_id}")
                return True
        return False

    def purge_pending_for(self, player_id: PlayerId) -> List[Match]:
        """Delete every pending match that references the player.

        Completed matches referencing the player are kept as history.

        Args:
            player_id: ID of the player leaving the roster

        Returns:
            The deleted matches
        """
        removed = [m for m in self._matches if m.is_pending and m.involves(player_id)]
        if removed:
            removed_ids = {m.id for m in removed}
            self._matches = [m for m in self._matches if m.id not in removed_ids]
            self._version += 1
            logger.info(
                f"Removed {len(removed)} pending match(es) involving {player_id}"
            )
        return removed
