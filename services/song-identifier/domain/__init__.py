"""Domain layer exports."""

from .models import (
    AudioUpload,
    FailureReason,
    RecognitionFailure,
    RecognitionResult,
    RecognitionSuccess,
    SignatureRequest,
    Song,
)
from .multipart import extract_field, parse_boundary
from .response_normalizer import ResponseNormalizer
from .signature import sign, sign_request

__all__ = [
    "AudioUpload",
    "FailureReason",
    "RecognitionFailure",
    "RecognitionResult",
    "RecognitionSuccess",
    "SignatureRequest",
    "Song",
    "extract_field",
    "parse_boundary",
    "ResponseNormalizer",
    "sign",
    "sign_request",
]
