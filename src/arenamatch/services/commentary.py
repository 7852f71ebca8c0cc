"""Tournament commentary from an external text generation service.

The service turns a snapshot of the standings into a short caster-style
paragraph. It is failure tolerant: any problem reaching the service is
logged and replaced with a fixed fallback text, never raised to callers.
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

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

import httpx

from arenamatch.constants import (
    COMMENTARY_EMPTY_RESPONSE,
    COMMENTARY_MAX_WORDS,
    COMMENTARY_RECENT_MATCHES,
    COMMENTARY_TOP_PLAYERS,
    COMMENTARY_UNAVAILABLE,
    DEFAULT_API_BASE,
    DEFAULT_MODEL,
    DEFAULT_TIMEOUT,
    ENV_API_BASE,
    ENV_API_KEY,
    ENV_API_KEY_FALLBACK,
    ENV_MODEL,
    ENV_TIMEOUT,
    UNKNOWN_PLAYER_NAME,
)
from arenamatch.exceptions import CommentaryException
from arenamatch.models import Match, Player, PlayerStats
from arenamatch.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class CommentaryConfig:
    """Text generation service settings.

    Attributes
    ----------
    api_key : str
        Key sent with every request. An empty key makes every request
        fall back without touching the network.
    model : str
        Model name used in the request path.
    base_url : str
        API root, without a trailing slash.
    timeout : float or None
        Request timeout in seconds, None for no timeout.
    """

    api_key: str = ""
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_API_BASE
    timeout: Optional[float] = DEFAULT_TIMEOUT

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary, without the API key."""
        return {
            "model": self.model,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "has_api_key": bool(self.api_key),
        }

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "CommentaryConfig":
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        An unparsable or non-positive timeout is logged and ignored.
        """
        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get(ENV_API_KEY) or env.get(ENV_API_KEY_FALLBACK, ""),
            model=env.get(ENV_MODEL) or DEFAULT_MODEL,
            base_url=env.get(ENV_API_BASE) or DEFAULT_API_BASE,
            timeout=_parse_timeout(env.get(ENV_TIMEOUT)),
        )


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {ENV_TIMEOUT} value: {value!r}")
        return DEFAULT_TIMEOUT
    if not timeout > 0:
        logger.warning(f"Ignoring non-positive {ENV_TIMEOUT} value: {value!r}")
        return DEFAULT_TIMEOUT
    return timeout


def build_commentary_prompt(
    ranked_stats: Sequence[PlayerStats],
    recent_matches: Sequence[Match],
    players: Sequence[Player],
) -> str:
    """Build the prompt sent to the text generation service.

    Args:
        ranked_stats: Standings already in ranking order
        recent_matches: Completed matches, newest first
        players: Current roster, used for names and the player count

    Returns:
        The prompt text
    """
    names = {p.id: p.name for p in players}

    results = []
    for match in recent_matches[:COMMENTARY_RECENT_MATCHES]:
        p1 = names.get(match.player1_id, UNKNOWN_PLAYER_NAME)
        p2 = names.get(match.player2_id, UNKNOWN_PLAYER_NAME)
        results.append(f"{p1} vs {p2}: {match.score1}-{match.score2}")

    top = [f"{s.name} ({s.points}pts)" for s in ranked_stats[:COMMENTARY_TOP_PLAYERS]]

    return (
        "You are an excited e-sports shoutcaster or sports commentator.\n"
        "Analyze the current state of this tournament.\n"
        "\n"
        f"Top Players: {', '.join(top)}\n"
        f"Recent Results: {' | '.join(results)}\n"
        f"Total Players: {len(players)}\n"
        "\n"
        f"Give me a short, hype paragraph (max {COMMENTARY_MAX_WORDS} words) "
        "summarizing the action, mentioning who is dominating, and any "
        "potential upsets.\n"
        "Keep it energetic and fun. Use markdown for bolding key names."
    )


def extract_text(payload: Any) -> str:
    """Join the text parts of the first candidate in a generateContent reply.

    Returns an empty string when the reply carries no candidates.

    Raises:
        CommentaryException: If the payload does not have the expected shape
    """
    if not isinstance(payload, dict):
        raise CommentaryException(
            f"Unexpected response payload: {type(payload).__name__}"
        )

    candidates = payload.get("candidates") or []
    if not candidates:
        return ""

    try:
        parts = candidates[0].get("content", {}).get("parts", [])
        return "".join(part.get("text", "") for part in parts).strip()
    except AttributeError as e:
        raise CommentaryException(f"Malformed candidate in response: {e}") from e


class CommentaryService:
    """Client for the text generation service.

    Args:
        config: Service settings, read from the environment by default
        client: Optional shared ``httpx.AsyncClient``. When omitted a
            client is opened per request.
    """

    def __init__(
        self,
        config: Optional[CommentaryConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config if config is not None else CommentaryConfig.from_env()
        self._client = client
        logger.info(f"CommentaryService initialized with model: {self.config.model}")

    async def generate_text(self, prompt: str) -> str:
        """Send one prompt and return the generated text.

        Raises:
            CommentaryException: If no API key is configured or the reply is malformed
            httpx.HTTPError: On transport failures and non-2xx responses
        """
        if not self.config.api_key:
            raise CommentaryException("No API key configured for commentary")

        body = {"contents": [{"parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self.config.api_key}

        if self._client is not None:
            response = await self._client.post(
                self.config.endpoint, json=body, headers=headers
            )
        else:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.post(
                    self.config.endpoint, json=body, headers=headers
                )

        response.raise_for_status()
        return extract_text(response.json())

    async def get_tournament_commentary(
        self,
        ranked_stats: Sequence[PlayerStats],
        recent_matches: Sequence[Match],
        players: Sequence[Player],
    ) -> str:
        """Produce commentary for a standings snapshot.

        Never raises for service problems: failures return
        ``COMMENTARY_UNAVAILABLE`` and an empty reply returns
        ``COMMENTARY_EMPTY_RESPONSE``.
        """
        prompt = build_commentary_prompt(ranked_stats, recent_matches, players)
        try:
            text = await self.generate_text(prompt)
        except Exception as e:
            logger.error(f"Error generating commentary: {e}")
            return COMMENTARY_UNAVAILABLE

        if not text:
            logger.warning("Commentary service returned no text")
            return COMMENTARY_EMPTY_RESPONSE
        return text
