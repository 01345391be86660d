"""ACRCloud implementation of the RecognitionService interface."""

import time
from collections.abc import Callable
from typing import Any

import requests

from config import AcrCloudConfig
from domain.models import AudioUpload, SignatureRequest
from domain.signature import sign_request
from exceptions import ProviderHTTPError, RecognitionServiceError
from logging_config import setup_logging

from .interfaces import RecognitionService

logger = setup_logging()

SAMPLE_CONTENT_TYPE = "audio/wav"


class AcrCloudClient(RecognitionService):
    """Identifies audio samples with the ACRCloud identification API."""

    def __init__(
        self,
        session: requests.Session,
        config: AcrCloudConfig,
        clock: Callable[[], float] = time.time,
    ):
        self._session = session
        self._config = config
        self._clock = clock

    def recognize(self, upload: AudioUpload) -> Any:
        """
        Signs and posts the sample as a multipart request.

        A fresh timestamp is taken for every call; ACRCloud rejects
        signatures whose timestamp drifts too far from its own clock.
        """
        timestamp = int(self._clock())
        signature = sign_request(
            SignatureRequest(
                endpoint_path=self._config.endpoint,
                access_key=self._config.access_key,
                timestamp=timestamp,
            ),
            self._config.access_secret,
        )

        form = {
            "sample_bytes": str(upload.size),
            "access_key": self._config.access_key,
            "data_type": "audio",
            "signature_version": "1",
            "signature": signature,
            "timestamp": str(timestamp),
        }
        files = {"sample": (upload.filename, upload.data, SAMPLE_CONTENT_TYPE)}

        logger.info(
            "Sending sample to ACRCloud",
            extra={"url": self._config.url, "sample_bytes": upload.size},
        )

        try:
            response = self._session.post(
                self._config.url,
                data=form,
                files=files,
                timeout=self._config.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.exception("ACRCloud request failed", extra={"url": self._config.url})
            raise RecognitionServiceError(f"ACRCloud request failed: {e}", cause=e) from e

        if not response.ok:
            details = self._error_details(response)
            logger.error(
                "ACRCloud API error",
                extra={"status_code": response.status_code, "details": details},
            )
            raise ProviderHTTPError(response.status_code, details)

        try:
            data = response.json()
        except ValueError as e:
            logger.exception("ACRCloud returned invalid JSON")
            raise RecognitionServiceError(
                "ACRCloud returned an invalid response body", cause=e
            ) from e

        logger.info(
            "ACRCloud response received",
            extra={"provider_status": data.get("status") if isinstance(data, dict) else None},
        )
        return data

    def _error_details(self, response: requests.Response) -> Any:
        """Returns the error body as JSON when possible, otherwise as raw text."""
        try:
            return response.json()
        except ValueError:
            return response.text
