from arenamatch.models.enums import MatchStatus
from arenamatch.models.match import Match
from arenamatch.models.player import Player
from arenamatch.models.stats import DashboardSummary, PlayerStats

__all__ = [
    "Player",
    "Match",
    "MatchStatus",
    "PlayerStats",
    "DashboardSummary",
]
