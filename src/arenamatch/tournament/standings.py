"""Standings calculation for tournaments.

This module folds completed matches into one statistics row per
registered player and ranks those rows for display.
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

from typing import Dict, Iterable, List, Tuple

from arenamatch.models import Match, Player, PlayerStats
from arenamatch.utils import setup_logger

logger = setup_logger(__name__)


def compute_stats(
    players: Iterable[Player], matches: Iterable[Match]
) -> List[PlayerStats]:
    """Build the statistics table from the roster and the ledger.

    Every registered player gets a zeroed row, in roster order. Each
    completed match whose two players are both still registered is then
    folded in. Completed matches against removed players stay in the
    ledger but contribute nothing here.

    This is a pure function: the inputs are never modified and repeated
    calls on the same snapshot give equal results.

    Args:
        players: Current roster
        matches: Every match in the ledger, any order

    Returns:
        List of PlayerStats in roster order
    """
    table: Dict[str, PlayerStats] = {
        p.id: PlayerStats(id=p.id, name=p.name) for p in players
    }

    folded = 0
    for match in matches:
        if not match.is_completed or match.score1 is None or match.score2 is None:
            continue

        row1 = table.get(match.player1_id)
        row2 = table.get(match.player2_id)
        if row1 is None or row2 is None:
            continue

        row1.add_result(match.score1, match.score2)
        row2.add_result(match.score2, match.score1)
        folded += 1

    logger.debug(f"Computed stats for {len(table)} players from {folded} matches")
    return list(table.values())


def standings_sort_key(stats: PlayerStats) -> Tuple[int, int]:
    """Sort key ranking by points, then goal difference, both descending."""
    return (-stats.points, -stats.goal_difference)


def rank_stats(stats: Iterable[PlayerStats]) -> List[PlayerStats]:
    """Return the rows in ranking order.

    Rows equal on points and goal difference keep their input order.
    """
    return sorted(stats, key=standings_sort_key)
