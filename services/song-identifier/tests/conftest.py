from unittest.mock import Mock

import pytest

from config import AcrCloudConfig
from infrastructure.interfaces import RecognitionService

BOUNDARY = "----SongIdentifierBoundary7MA4YWxk"


def build_multipart(parts, boundary=BOUNDARY) -> bytes:
    """Encodes (name, data, filename, content_type) tuples as multipart/form-data."""
    chunks = []
    for name, data, filename, content_type in parts:
        disposition = f'Content-Disposition: form-data; name="{name}"'
        if filename is not None:
            disposition += f'; filename="{filename}"'
        chunks.append(f"--{boundary}\r\n".encode())
        chunks.append(disposition.encode() + b"\r\n")
        if content_type is not None:
            chunks.append(f"Content-Type: {content_type}\r\n".encode())
        chunks.append(b"\r\n")
        chunks.append(data)
        chunks.append(b"\r\n")
    chunks.append(f"--{boundary}--\r\n".encode())
    return b"".join(chunks)


@pytest.fixture
def boundary():
    return BOUNDARY


@pytest.fixture
def multipart_body():
    return build_multipart


@pytest.fixture
def audio_bytes():
    """1000 bytes of binary data including CR, LF, NUL and dash bytes."""
    return (bytes(range(256)) * 4)[:1000]


@pytest.fixture
def acrcloud_config():
    return AcrCloudConfig(
        host="identify-eu-west-1.acrcloud.com",
        endpoint="/v1/identify",
        access_key="test-access-key",
        access_secret="test-access-secret",
        timeout_seconds=12.5,
    )


@pytest.fixture
def unconfigured_acrcloud_config():
    return AcrCloudConfig(access_key="", access_secret="")


@pytest.fixture
def recognition_service():
    return Mock(spec=RecognitionService)


@pytest.fixture
def music_match():
    return {
        "title": "Blinding Lights",
        "artists": [{"name": "The Weeknd"}, {"name": "Someone Else"}],
        "album": {
            "name": "After Hours",
            "artwork_url_500": "https://img.example.com/after-hours-500.jpg",
            "artwork_url": "https://img.example.com/after-hours.jpg",
        },
        "release_date": "2019-11-29",
        "score": 0.97,
        "duration_ms": 200040,
        "external_metadata": {
            "spotify": {
                "track": {
                    "external_urls": {"spotify": "https://open.spotify.com/track/0VjIjW4GlUZAMYd2vXMi3b"},
                    "preview_url": "https://p.scdn.co/mp3-preview/abc",
                }
            },
            "youtube": {"vid": "4NRXx6U8ABQ"},
            "apple_music": {"url": "https://music.apple.com/us/album/1499378108"},
        },
    }


@pytest.fixture
def provider_success(music_match):
    return {
        "status": {"code": 0, "msg": "Success", "version": "1.0"},
        "metadata": {"music": [music_match]},
        "result_type": 0,
    }


@pytest.fixture
def provider_no_result():
    return {"status": {"code": 1001, "msg": "No result", "version": "1.0"}}
