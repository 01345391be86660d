"""Infrastructure interface exports."""

from .recognition_service import RecognitionService

__all__ = ["RecognitionService"]
