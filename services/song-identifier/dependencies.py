"""Dependency injection configuration for the song-identifier service."""

import requests

from config import AcrCloudConfig, load_config
from domain import ResponseNormalizer
from handlers import IdentifyRequestHandler
from infrastructure import AcrCloudClient
from infrastructure.interfaces import RecognitionService

_config = load_config()

_http_session = requests.Session()

_recognition_service = AcrCloudClient(_http_session, _config.acrcloud)

_normalizer = ResponseNormalizer()


def get_config() -> AcrCloudConfig:
    """Returns the ACRCloud configuration loaded at startup."""
    return _config.acrcloud


def get_recognition_service() -> RecognitionService:
    """Returns the configured recognition service."""
    return _recognition_service


def get_handler() -> IdentifyRequestHandler:
    """Returns the identification request handler."""
    return IdentifyRequestHandler(_config.acrcloud, _recognition_service, _normalizer)
