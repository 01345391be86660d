"""Handler orchestrating a single song identification request."""

import base64
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from config import AcrCloudConfig
from domain import ResponseNormalizer, extract_field, parse_boundary
from exceptions import (
    FieldNotFoundError,
    MissingBoundaryError,
    ProviderHTTPError,
)
from infrastructure.interfaces import RecognitionService
from logging_config import setup_logging

logger = setup_logging()

AUDIO_FIELD = "audio"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


class HandlerResponse(BaseModel, frozen=True):
    """Transport-independent response produced by the handler."""

    status_code: int
    headers: dict[str, str] = Field(default_factory=lambda: dict(CORS_HEADERS))
    body: dict[str, Any] | None = None


def _error(status_code: int, body: dict[str, Any]) -> HandlerResponse:
    return HandlerResponse(status_code=status_code, body=body)


def _header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup."""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


class IdentifyRequestHandler:
    """Validates an upload, runs recognition and shapes the response."""

    def __init__(
        self,
        config: AcrCloudConfig,
        recognition_service: RecognitionService,
        normalizer: ResponseNormalizer,
    ):
        self._config = config
        self._recognition_service = recognition_service
        self._normalizer = normalizer

    def handle(
        self,
        method: str,
        headers: Mapping[str, str],
        body: bytes | str | None,
        is_base64_encoded: bool = False,
    ) -> HandlerResponse:
        """
        Processes one identification request end to end.

        Every failure is converted into a HandlerResponse; nothing raised by
        parsing, the provider or normalization escapes this method.

        Args:
            method: HTTP method of the incoming request.
            headers: Request headers, matched case-insensitively.
            body: Raw request body.
            is_base64_encoded: Whether the transport delivered the body base64
                encoded.
        """
        method = method.upper()
        if method == "OPTIONS":
            return HandlerResponse(status_code=200)

        if method != "POST":
            return _error(405, {"error": "Method not allowed"})

        try:
            return self._identify(headers, body, is_base64_encoded)
        except Exception as e:
            logger.exception("Identification request failed")
            return _error(500, {"error": "Internal server error", "message": str(e)})

    def _identify(
        self,
        headers: Mapping[str, str],
        body: bytes | str | None,
        is_base64_encoded: bool,
    ) -> HandlerResponse:
        if not self._config.is_configured:
            logger.error("ACRCloud credentials are not configured")
            return _error(500, {"error": "ACRCloud API keys not configured"})

        content_type = _header(headers, "content-type")
        if not content_type or "multipart/form-data" not in content_type:
            return _error(400, {"error": "Content-Type must be multipart/form-data"})

        try:
            raw_body = self._decode_body(body, is_base64_encoded)
        except ValueError:
            return _error(400, {"error": "Request body is not valid base64"})

        try:
            boundary = parse_boundary(content_type)
            upload = extract_field(raw_body, boundary, AUDIO_FIELD)
        except MissingBoundaryError:
            return _error(400, {"error": "Missing boundary in multipart data"})
        except FieldNotFoundError:
            return _error(400, {"error": "No audio file found in request"})

        logger.info(
            "Audio file received",
            extra={"file_name": upload.filename, "size": upload.size},
        )

        try:
            provider_response = self._recognition_service.recognize(upload)
        except ProviderHTTPError as e:
            return _error(
                e.status_code,
                {"error": "ACRCloud API error", "details": e.details},
            )

        result = self._normalizer.normalize(provider_response)

        logger.info(
            "Identification completed",
            extra={"file_name": upload.filename, "success": result.success},
        )

        return HandlerResponse(
            status_code=200,
            body=result.model_dump(mode="json"),
        )

    def _decode_body(self, body: bytes | str | None, is_base64_encoded: bool) -> bytes:
        if body is None:
            return b""
        if is_base64_encoded:
            return base64.b64decode(body, validate=True)
        if isinstance(body, str):
            return body.encode("utf-8")
        return body
