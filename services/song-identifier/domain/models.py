"""Domain models for the song identification service."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class AudioUpload(BaseModel, frozen=True):
    """Audio sample extracted from an incoming multipart request."""

    data: bytes
    filename: str
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.data)


class SignatureRequest(BaseModel, frozen=True):
    """Fields covered by an ACRCloud request signature."""

    method: str = "POST"
    endpoint_path: str
    access_key: str
    data_type: str = "audio"
    signature_version: int = 1
    timestamp: int

    def canonical_string(self) -> str:
        """Joins the signed fields with newlines in the order ACRCloud expects."""
        return "\n".join(
            [
                self.method,
                self.endpoint_path,
                self.access_key,
                self.data_type,
                str(self.signature_version),
                str(self.timestamp),
            ]
        )


class Song(BaseModel, frozen=True):
    """Metadata of a recognized track."""

    title: str
    artist: str
    album: str
    year: str
    confidence: int = Field(ge=0, le=100)
    duration: int | None = None
    spotify_url: str | None = None
    youtube_url: str | None = None
    apple_url: str | None = None
    cover_art: str | None = None
    preview_url: str | None = None


class FailureReason(str, Enum):
    """Why a recognition attempt produced no song."""

    NOT_FOUND = "not_found"
    INVALID_CREDENTIALS = "invalid_credentials"
    RATE_LIMITED = "rate_limited"
    UNKNOWN = "unknown"


class RecognitionSuccess(BaseModel, frozen=True):
    """A recognition that matched a track."""

    success: Literal[True] = True
    song: Song


class RecognitionFailure(BaseModel, frozen=True):
    """A well-formed provider answer that did not match a track."""

    success: Literal[False] = False
    reason: FailureReason
    error: str
    code: int | None = None
    data: Any = None


RecognitionResult = RecognitionSuccess | RecognitionFailure
