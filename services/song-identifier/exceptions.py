"""Custom exceptions for the song-identifier service."""

from typing import Any


class MultipartParseError(Exception):
    """Raised when the uploaded multipart payload cannot be used."""


class MissingBoundaryError(MultipartParseError):
    """Raised when the Content-Type header carries no boundary token."""

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__("Missing boundary in multipart data")


class FieldNotFoundError(MultipartParseError):
    """Raised when no multipart segment matches the requested field."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"No multipart field named '{field_name}'")


class ProviderHTTPError(Exception):
    """Raised when the recognition provider answers with a non-2xx status."""

    def __init__(self, status_code: int, details: Any = None):
        self.status_code = status_code
        self.details = details
        super().__init__(f"Recognition provider returned HTTP {status_code}")


class RecognitionServiceError(Exception):
    """Raised when the recognition request fails in transport or parsing."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)
