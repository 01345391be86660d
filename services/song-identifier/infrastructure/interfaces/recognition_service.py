"""Abstract interface for audio recognition backends."""

from abc import ABC, abstractmethod
from typing import Any

from domain.models import AudioUpload


class RecognitionService(ABC):
    """Abstract base class for audio fingerprinting providers."""

    @abstractmethod
    def recognize(self, upload: AudioUpload) -> Any:
        """
        Submits an audio sample for recognition.

        Args:
            upload: The audio sample extracted from the client request.

        Returns:
            The provider's parsed JSON response, unmodified.

        Raises:
            ProviderHTTPError: If the provider answers with a non-2xx status.
            RecognitionServiceError: If the request or response parsing fails.
        """
        pass
