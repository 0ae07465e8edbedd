# file: league_app/exceptions.py
"""Domain exceptions raised by league services.

Views catch these and turn them into user-facing messages; anything else
propagates to Django's error handling.
"""

from __future__ import annotations


class LeagueError(Exception):
    """Base class for league service failures."""


class StandingsUnavailable(LeagueError):
    """Raised when the data needed for standings could not be loaded.

    The message is generic and safe to show to users; the underlying fetch
    failure is chained as ``__cause__``.
    """

    default_message = "Failed to compute standings. Check permissions and try again."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MediaConfigurationError(LeagueError):
    """Raised when the media host is not configured (e.g. no cloud name)."""


class MediaUploadError(LeagueError):
    """Raised when the media host rejects an upload or answers unexpectedly."""
