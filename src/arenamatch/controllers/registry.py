"""Player registry.

This module owns player identity: creating players with fresh ids and
removing them from the roster.
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
from typing import Callable, Dict, Iterator, List, Optional

from arenamatch.exceptions import InvalidPlayerDataException
from arenamatch.models import Player
from arenamatch.type_hints import PlayerId
from arenamatch.utils import new_id, setup_logger, utc_now

logger = setup_logger(__name__)


class PlayerRegistry:
    """Holds the roster in insertion order.

    Insertion order is the default display order. Names are not unique
    keys, only ids are.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        # dicts keep insertion order
        self._players: Dict[PlayerId, Player] = {}
        self._version = 0

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players.values()))

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    @property
    def version(self) -> int:
        """Counter bumped by every roster mutation."""
        return self._version

    @property
    def players(self) -> List[Player]:
        """Snapshot of the roster in insertion order."""
        return list(self._players.values())

    def get(self, player_id: PlayerId) -> Optional[Player]:
        return self._players.get(player_id)

    def add_player(self, name: str) -> Player:
        """Register a new player at the end of the roster.

        Args:
            name: Display name, must not be blank

        Returns:
            The created Player

        Raises:
            InvalidPlayerDataException: If the name is empty or blank
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidPlayerDataException("Player name must not be empty")

        player_id = self._id_factory()
        while player_id in self._players:
            player_id = self._id_factory()

        player = Player(id=player_id, name=name.strip(), joined_at=self._clock())
        self._players[player.id] = player
        self._version += 1
        logger.info(f"Added player: {player.name} ({player.id})")
        return player

    def remove_player(self, player_id: PlayerId) -> bool:
        """Remove a player from the roster.

        Removing an unknown id is not an error.

        Args:
            player_id: ID of player to remove

        Returns:
            True if removed, False if not found
        """
        player = self._players.pop(player_id, None)
        if player is None:
            logger.debug(f"Remove ignored, no player with id {player_id}")
            return False

        self._version += 1
        logger.info(f"Removed player: {player.name} ({player_id})")
        return True
