"""Main Tournament class - orchestrates all tournament operations.

This is the single application-state object: one instance is created at
startup and handed to whatever needs it. It coordinates the roster, the
match ledger, pairing proposals, the standings projection and the
commentary service, and emits Qt signals after every change so views can
re-render.
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

import random
from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from PyQt6 import QtCore

from arenamatch.constants import COMMENTARY_NO_PLAYERS, UNKNOWN_PLAYER_NAME
from arenamatch.controllers import (
    MatchLedger,
    PlayerRegistry,
    generate_round,
    quick_match,
)
from arenamatch.models import DashboardSummary, Match, Player, PlayerStats
from arenamatch.services import CommentaryService
from arenamatch.tournament.standings import compute_stats, rank_stats
from arenamatch.type_hints import MatchId, PlayerId
from arenamatch.utils import new_id, setup_logger, utc_now

logger = setup_logger(__name__)


class Tournament(QtCore.QObject):
    """Main tournament management class.

    This class coordinates all tournament operations through specialized
    components:
    - PlayerRegistry: owns player identity
    - MatchLedger: schedules, completes and deletes matches
    - pairing functions: propose random pairings
    - compute_stats: derives the standings table

    Standings are never stored. ``stats`` is memoised against the
    version counters of the roster and the ledger, so it always equals
    ``compute_stats(players, matches)``.

    Signals
    -------
    players_changed()
        The roster changed.
    matches_changed()
        The ledger changed.
    standings_changed(object)
        Emitted after any mutation with the ranked standings.
    commentary_changed(str)
        New commentary text, empty when dismissed.
    """

    players_changed = QtCore.pyqtSignal()
    matches_changed = QtCore.pyqtSignal()
    standings_changed = QtCore.pyqtSignal(object)
    commentary_changed = QtCore.pyqtSignal(str)

    def __init__(
        self,
        name: str = "ArenaMatch",
        commentary_service: Optional[CommentaryService] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        """Initialize an empty tournament.

        Args
        ----
        name: Tournament name
        commentary_service: Text generation client, built from the
            environment on first use when omitted
        rng: Random source for pairing proposals
        clock: Timestamp source for players and matches
        id_factory: Id source for players and matches
        parent: Optional Qt parent object
        """
        super().__init__(parent)
        self.name = name
        self.registry = PlayerRegistry(clock=clock, id_factory=id_factory)
        self.ledger = MatchLedger(clock=clock, id_factory=id_factory)
        self._commentary_service = commentary_service
        self._rng = rng

        self._stats_key: Optional[Tuple[int, int]] = None
        self._stats_cache: List[PlayerStats] = []

        self._commentary = ""
        self._commentary_requests = 0

    # ========== Properties ==========

    @property
    def version(self) -> int:
        """Counter bumped by every roster or ledger mutation."""
        return self.registry.version + self.ledger.version

    @property
    def players(self) -> List[Player]:
        return self.registry.players

    @property
    def matches(self) -> List[Match]:
        return self.ledger.matches

    @property
    def pending_count(self) -> int:
        return self.ledger.pending_count

    @property
    def stats(self) -> List[PlayerStats]:
        """Standings rows in roster order."""
        key = (self.registry.version, self.ledger.version)
        if key != self._stats_key:
            self._stats_cache = compute_stats(self.registry, self.ledger)
            self._stats_key = key
        # the memo itself is never handed out
        return [replace(row) for row in self._stats_cache]

    @property
    def standings(self) -> List[PlayerStats]:
        """Standings rows ranked by points, then goal difference."""
        return rank_stats(self.stats)

    @property
    def commentary(self) -> str:
        return self._commentary

    @property
    def is_commentary_loading(self) -> bool:
        return self._commentary_requests > 0

    @property
    def commentary_service(self) -> CommentaryService:
        if self._commentary_service is None:
            self._commentary_service = CommentaryService()
        return self._commentary_service

    # ========== Player Management ==========

    def add_player(self, name: str) -> Player:
        """Add a player to the end of the roster.

        Args:
            name: Display name

        Returns:
            The created Player
        """
        player = self.registry.add_player(name)
        self._changed(players=True)
        return player

    def remove_player(self, player_id: PlayerId) -> bool:
        """Remove a player and delete their pending matches.

        Completed matches involving the player are kept as history.

        Args:
            player_id: ID of player to remove

        Returns:
            True if a player was removed, False if not found
        """
        removed = self.registry.remove_player(player_id)
        purged = self.ledger.purge_pending_for(player_id)
        if removed or purged:
            self._changed(players=removed, matches=bool(purged))
        return removed

    def player_name(self, player_id: PlayerId) -> str:
        """Display name for a player id, "Unknown" once removed."""
        player = self.registry.get(player_id)
        return player.name if player else UNKNOWN_PLAYER_NAME

    # ========== Match Management ==========

    def schedule_match(self, player1_id: PlayerId, player2_id: PlayerId) -> Match:
        """Schedule a pending match.

        Raises:
            InvalidPairingException: If both ids are the same player
        """
        for player_id in (player1_id, player2_id):
            if player_id not in self.registry:
                logger.warning(f"Scheduling match with unregistered player {player_id}")

        match = self.ledger.schedule_match(player1_id, player2_id)
        self._changed(matches=True)
        return match

    def record_result(self, match_id: MatchId, score1: int, score2: int) -> Match:
        """Record a match score, completing the match.

        Raises:
            MatchNotFoundException: If no match has this id
            InvalidResultException: If a score is negative
        """
        match = self.ledger.record_result(match_id, score1, score2)
        self._changed(matches=True)
        return match

    def delete_match(self, match_id: MatchId) -> bool:
        """Delete a match in any status, returns False if it did not exist."""
        deleted = self.ledger.delete_match(match_id)
        if deleted:
            self._changed(matches=True)
        return deleted

    def pending_matches(self) -> List[Match]:
        return self.ledger.pending_matches()

    def match_history(self) -> List[Match]:
        """Completed matches, newest first."""
        return self.ledger.completed_matches()

    # ========== Pairing ==========

    def quick_match(self) -> Optional[Match]:
        """Schedule one random pairing, or nothing with fewer than two players."""
        pairing = quick_match(self.players, self._rng)
        if pairing is None:
            logger.info("Quick match needs at least two players")
            return None
        return self.schedule_match(*pairing)

    def generate_round(self) -> List[Match]:
        """Schedule a full round of disjoint random pairings.

        Returns:
            The scheduled matches, empty with fewer than two players
        """
        pairings = generate_round(self.players, self._rng)
        if not pairings:
            return []

        scheduled = [self.ledger.schedule_match(p1, p2) for p1, p2 in pairings]
        logger.info(f"Generated round with {len(scheduled)} match(es)")
        self._changed(matches=True)
        return scheduled

    # ========== Overview ==========

    def summary(self) -> DashboardSummary:
        """Headline numbers for the dashboard."""
        standings = self.standings
        return DashboardSummary(
            player_count=len(self.registry),
            match_count=len(self.ledger),
            pending_count=self.ledger.pending_count,
            leader=standings[0] if standings else None,
        )

    # ========== Commentary ==========

    async def generate_commentary(self) -> str:
        """Request commentary for the current standings.

        The state is snapshotted before the request, and roster or match
        edits made while it is outstanding are not blocked. Service
        failures come back as fallback text. Cancelling the awaiting task
        cancels the request.
        Overlapping requests are allowed; the last one to finish sets the
        text and loading stays true until all of them are done.

        Returns:
            The commentary text, also stored in ``commentary``
        """
        if not self.registry:
            self._set_commentary(COMMENTARY_NO_PLAYERS)
            return self._commentary

        standings = self.standings
        history = self.match_history()
        players = self.players

        self._commentary_requests += 1
        try:
            text = await self.commentary_service.get_tournament_commentary(
                standings, history, players
            )
        finally:
            self._commentary_requests -= 1

        self._set_commentary(text)
        return text

    def dismiss_commentary(self) -> None:
        self._set_commentary("")

    # ========== Internal ==========

    def _set_commentary(self, text: str) -> None:
        self._commentary = text
        self.commentary_changed.emit(text)

    def _changed(self, players: bool = False, matches: bool = False) -> None:
        """Notify listeners after a mutation."""
        logger.debug(f"Tournament state version {self.version}")

        if players:
            self.players_changed.emit()
        if matches:
            self.matches_changed.emit()
        self.standings_changed.emit(self.standings)
