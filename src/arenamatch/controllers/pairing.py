"""Random pairing proposals.

Both generators only read the roster and return player id pairs. The
caller decides whether to schedule them.
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
from typing import Optional, Sequence

from arenamatch.models import Player
from arenamatch.type_hints import MaybePairing, RoundPairings
from arenamatch.utils import setup_logger

logger = setup_logger(__name__)


def _shuffled(players: Sequence[Player], rng: Optional[random.Random]) -> list:
    """Return a uniformly shuffled copy of the roster (Fisher-Yates)."""
    shuffled = list(players)
    (rng or random).shuffle(shuffled)
    return shuffled


def quick_match(
    players: Sequence[Player], rng: Optional[random.Random] = None
) -> MaybePairing:
    """Propose a single random pairing.

    Args:
        players: Current roster
        rng: Optional random source, the module generator is used by default

    Returns:
        A (player1_id, player2_id) tuple, or None with fewer than two players
    """
    if len(players) < 2:
        return None

    first, second = _shuffled(players, rng)[:2]
    return first.id, second.id


def generate_round(
    players: Sequence[Player], rng: Optional[random.Random] = None
) -> RoundPairings:
    """Pair the whole roster into disjoint matches.

    The roster is shuffled once and consecutive players are paired. With
    an odd roster the last shuffled player sits this round out.

    Args:
        players: Current roster
        rng: Optional random source, the module generator is used by default

    Returns:
        List of floor(n / 2) (player1_id, player2_id) tuples
    """
    if len(players) < 2:
        return []

    shuffled = _shuffled(players, rng)
    pairings = [
        (shuffled[i].id, shuffled[i + 1].id) for i in range(0, len(shuffled) - 1, 2)
    ]

    if len(shuffled) % 2:
        logger.warning(f"Odd roster: {shuffled[-1].name} left unpaired this round")

    logger.debug(f"Generated round of {len(pairings)} pairing(s)")
    return pairings
