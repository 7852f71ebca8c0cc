"""A player registered on the tournament roster."""

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

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from arenamatch.type_hints import PlayerId


@dataclass(frozen=True, slots=True)
class Player:
    """
    A roster entry.

    Players are immutable: there is no rename, a player is only ever
    created by the registry and destroyed by removal.

    Attributes
    ----------
    id : str
        Opaque unique identifier assigned at creation.
    name : str
        Display name. Names are not unique keys.
    joined_at : datetime
        Creation timestamp.
    """

    id: PlayerId
    name: str
    joined_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "joined_at": self.joined_at.isoformat(),
        }
