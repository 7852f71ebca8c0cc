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

# Points awarded per match outcome
WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# Display name for a player id that is no longer on the roster
UNKNOWN_PLAYER_NAME = "Unknown"

# Commentary prompt limits
COMMENTARY_TOP_PLAYERS = 3
COMMENTARY_RECENT_MATCHES = 5
COMMENTARY_MAX_WORDS = 100

# Commentary fallback texts
COMMENTARY_NO_PLAYERS = "Add some players to get the tournament started!"
COMMENTARY_EMPTY_RESPONSE = (
    "The tournament is heating up! Keep playing to generate more insights."
)
COMMENTARY_UNAVAILABLE = (
    "The AI commentator is currently on a coffee break. (Check API Key)"
)

# Text generation service
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
# No request timeout is enforced unless configured
DEFAULT_TIMEOUT = None

# Environment variables read by CommentaryConfig.from_env
ENV_API_KEY = "GEMINI_API_KEY"
ENV_API_KEY_FALLBACK = "API_KEY"
ENV_MODEL = "ARENAMATCH_MODEL"
ENV_API_BASE = "ARENAMATCH_API_BASE"
ENV_TIMEOUT = "ARENAMATCH_TIMEOUT"
