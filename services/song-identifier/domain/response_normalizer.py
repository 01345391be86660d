"""Maps ACRCloud identification responses onto RecognitionResult."""

import math
from typing import Any

from .models import (
    FailureReason,
    RecognitionFailure,
    RecognitionResult,
    RecognitionSuccess,
    Song,
)

STATUS_SUCCESS = 0
STATUS_NO_RESULT = 1001
STATUS_INVALID_ACCESS_KEY = 3001
STATUS_LIMIT_EXCEEDED = 3003

DEFAULT_CONFIDENCE = 95

_KNOWN_FAILURES: dict[int, tuple[FailureReason, str]] = {
    STATUS_NO_RESULT: (FailureReason.NOT_FOUND, "No music found in database"),
    STATUS_INVALID_ACCESS_KEY: (FailureReason.INVALID_CREDENTIALS, "Invalid access key"),
    STATUS_LIMIT_EXCEEDED: (FailureReason.RATE_LIMITED, "Rate limit exceeded"),
}


def _get(data: Any, *path: str | int) -> Any:
    """Walks nested dicts and lists, returning None at the first missing step."""
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
        elif not isinstance(current, dict):
            return None
        elif key not in current:
            return None
        current = current[key]
    return current


def _text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


class ResponseNormalizer:
    """Turns raw provider payloads into the client-facing result union."""

    def normalize(self, response: Any) -> RecognitionResult:
        """
        Normalizes an ACRCloud response.

        Never raises: payloads that do not fit any known shape come back as
        an unknown failure carrying the raw payload.
        """
        code = _get(response, "status", "code")
        if isinstance(code, bool) or not isinstance(code, int):
            code = None

        if code == STATUS_SUCCESS:
            music = _get(response, "metadata", "music")
            if isinstance(music, list) and music:
                return RecognitionSuccess(song=self._song(music[0]))
        elif code in _KNOWN_FAILURES:
            reason, message = _KNOWN_FAILURES[code]
            return RecognitionFailure(reason=reason, error=message, code=code)

        return RecognitionFailure(
            reason=FailureReason.UNKNOWN,
            error="Unknown response format",
            code=code,
            data=response,
        )

    def _song(self, music: Any) -> Song:
        youtube_id = _text(_get(music, "external_metadata", "youtube", "vid"))
        release_date = _text(_get(music, "release_date"))

        return Song(
            title=_text(_get(music, "title")) or "Unknown Title",
            artist=_text(_get(music, "artists", 0, "name")) or "Unknown Artist",
            album=_text(_get(music, "album", "name")) or "Unknown Album",
            year=release_date[:4] if release_date else "Unknown",
            confidence=self._confidence(_get(music, "score")),
            duration=self._duration(_get(music, "duration_ms")),
            spotify_url=_text(
                _get(
                    music, "external_metadata", "spotify", "track", "external_urls", "spotify"
                )
            ),
            youtube_url=(
                f"https://www.youtube.com/watch?v={youtube_id}" if youtube_id else None
            ),
            apple_url=_text(_get(music, "external_metadata", "apple_music", "url")),
            cover_art=(
                _text(_get(music, "album", "artwork_url_500"))
                or _text(_get(music, "album", "artwork_url"))
            ),
            preview_url=_text(
                _get(music, "external_metadata", "spotify", "track", "preview_url")
            ),
        )

    def _confidence(self, score: Any) -> int:
        """
        Converts a 0..1 match score into a whole percentage.

        A missing, non-numeric, zero or negative score falls back to
        DEFAULT_CONFIDENCE. Scores above 1 cap at 100.
        """
        if isinstance(score, bool):
            return DEFAULT_CONFIDENCE
        try:
            value = float(score)
        except (TypeError, ValueError):
            return DEFAULT_CONFIDENCE
        if not math.isfinite(value):
            return DEFAULT_CONFIDENCE

        scaled = min(max(value * 100, 0.0), 100.0)
        percent = math.floor(scaled + 0.5)
        if not percent:
            return DEFAULT_CONFIDENCE
        return percent

    def _duration(self, duration_ms: Any) -> int | None:
        if isinstance(duration_ms, bool) or not isinstance(duration_ms, (int, float)):
            return None
        if not duration_ms or not math.isfinite(duration_ms):
            return None
        return int(duration_ms // 1000)
