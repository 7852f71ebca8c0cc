"""Tournament management system for ArenaMatch.

This package ties the roster, match ledger and standings together behind
one application-state object.
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

from arenamatch.tournament.standings import (
    compute_stats,
    rank_stats,
    standings_sort_key,
)
from arenamatch.tournament.tournament import Tournament

__all__ = [
    "Tournament",
    "compute_stats",
    "rank_stats",
    "standings_sort_key",
]
