"""Type hints used in ArenaMatch."""

from typing import List, Optional, Tuple

# Opaque identifiers
PlayerId = str
MatchId = str

# Proposed (player1_id, player2_id) pairing
MatchPairing = Tuple[PlayerId, PlayerId]
# All pairings for one generated round
RoundPairings = List[MatchPairing]
MaybePairing = Optional[MatchPairing]

# Match scores, both None while pending
Score = Optional[int]
