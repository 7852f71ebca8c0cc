"""Derived per-player statistics."""

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

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from arenamatch.constants import DRAW_POINTS, LOSS_POINTS, WIN_POINTS
from arenamatch.type_hints import PlayerId


@dataclass(slots=True)
class PlayerStats:
    """One row of the standings table.

    Instances are never stored; they are rebuilt from the roster and the
    ledger on every read.

    Attributes
    ----------
    id : str
        Player id this row belongs to.
    name : str
        Player display name.
    played, wins, draws, losses : int
        Completed match counts, ``played == wins + draws + losses``.
    goals_for, goals_against, goal_difference : int
        Goal totals, ``goal_difference == goals_for - goals_against``.
    points : int
        ``3 * wins + draws``.
    """

    id: PlayerId
    name: str
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0

    def add_result(self, scored: int, conceded: int) -> None:
        """Fold one completed match into this row."""
        self.played += 1
        self.goals_for += scored
        self.goals_against += conceded
        self.goal_difference = self.goals_for - self.goals_against

        if scored > conceded:
            self.wins += 1
            self.points += WIN_POINTS
        elif scored < conceded:
            self.losses += 1
            self.points += LOSS_POINTS
        else:
            self.draws += 1
            self.points += DRAW_POINTS

    def to_dict(self) -> Dict[str, Any]:
        """Serialize stats row to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class DashboardSummary:
    """Headline numbers for the tournament overview.

    Attributes
    ----------
    player_count : int
        Players currently on the roster.
    match_count : int
        Every match in the ledger, pending and completed.
    pending_count : int
        Matches still awaiting a result.
    leader : PlayerStats or None
        Top of the ranked table, None when the roster is empty.
    """

    player_count: int
    match_count: int
    pending_count: int
    leader: Optional[PlayerStats] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_count": self.player_count,
            "match_count": self.match_count,
            "pending_count": self.pending_count,
            "leader": self.leader.to_dict() if self.leader else None,
        }
