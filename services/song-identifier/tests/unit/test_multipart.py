import pytest

from domain import extract_field, parse_boundary
from exceptions import FieldNotFoundError, MissingBoundaryError, MultipartParseError


def test_extract_returns_exact_payload_bytes(multipart_body, boundary, audio_bytes):
    body = multipart_body([("audio", audio_bytes, "clip.wav", "audio/wav")])

    upload = extract_field(body, boundary, "audio")

    assert upload.data == audio_bytes
    assert upload.size == 1000


@pytest.mark.parametrize(
    "payload",
    [
        b"RIFF\x00\x00\x00\x00WAVE\r\n\r\nfmt \x10\x00",
        b"\r\n",
        b"ends with crlf\r\n",
        b"\xff\xfe\x00\x80--not-a-boundary\r\n--",
        b"",
    ],
)
def test_extract_preserves_binary_payloads(multipart_body, boundary, payload):
    body = multipart_body([("audio", payload, "clip.wav", "audio/wav")])

    assert extract_field(body, boundary, "audio").data == payload


def test_extract_uses_declared_filename_and_content_type(multipart_body, boundary):
    body = multipart_body([("audio", b"data", "recording.webm", "audio/webm")])

    upload = extract_field(body, boundary, "audio")

    assert upload.filename == "recording.webm"
    assert upload.content_type == "audio/webm"


def test_extract_defaults_filename_and_content_type(multipart_body, boundary):
    body = multipart_body([("audio", b"data", None, None)])

    upload = extract_field(body, boundary, "audio")

    assert upload.filename == "audio.wav"
    assert upload.content_type == "application/octet-stream"


def test_extract_skips_other_fields(multipart_body, boundary):
    body = multipart_body(
        [
            ("title", b"hello", None, None),
            ("audio", b"sample", "a.wav", "audio/wav"),
        ]
    )

    assert extract_field(body, boundary, "audio").data == b"sample"


def test_extract_picks_first_matching_segment(multipart_body, boundary):
    body = multipart_body(
        [
            ("audio", b"first", "one.wav", "audio/wav"),
            ("audio", b"second", "two.wav", "audio/wav"),
        ]
    )

    upload = extract_field(body, boundary, "audio")

    assert upload.data == b"first"
    assert upload.filename == "one.wav"


def test_extract_does_not_match_filename_as_field_name(multipart_body, boundary):
    body = multipart_body([("file", b"data", "audio", "audio/wav")])

    with pytest.raises(FieldNotFoundError):
        extract_field(body, boundary, "audio")


def test_extract_ignores_field_name_inside_payload(multipart_body, boundary):
    body = multipart_body([("other", b'Content-Disposition: form-data; name="audio"', None, None)])

    with pytest.raises(FieldNotFoundError):
        extract_field(body, boundary, "audio")


def test_extract_header_name_is_case_insensitive(boundary):
    body = (
        f"--{boundary}\r\n"
        'content-disposition: form-data; name="audio"; filename="x.wav"\r\n'
        "\r\n"
        "abc\r\n"
        f"--{boundary}--\r\n"
    ).encode()

    assert extract_field(body, boundary, "audio").data == b"abc"


def test_extract_missing_field_raises(multipart_body, boundary):
    body = multipart_body([("title", b"hello", None, None)])

    with pytest.raises(FieldNotFoundError) as exc_info:
        extract_field(body, boundary, "audio")

    assert exc_info.value.field_name == "audio"
    assert isinstance(exc_info.value, MultipartParseError)


def test_extract_with_wrong_boundary_raises(multipart_body):
    body = multipart_body([("audio", b"data", "a.wav", "audio/wav")], boundary="right")

    with pytest.raises(FieldNotFoundError):
        extract_field(body, "wrong", "audio")


def test_extract_decodes_utf8_filename(multipart_body, boundary):
    body = multipart_body([("audio", b"data", "canción.wav", "audio/wav")])

    assert extract_field(body, boundary, "audio").filename == "canción.wav"


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("multipart/form-data; boundary=abc123", "abc123"),
        ('multipart/form-data; boundary="quoted-token"', "quoted-token"),
        ("multipart/form-data; boundary=abc123; charset=utf-8", "abc123"),
        ("multipart/form-data; boundary=----WebKitFormBoundary7MA4YWxkTrZu0gW", "----WebKitFormBoundary7MA4YWxkTrZu0gW"),
    ],
)
def test_parse_boundary(content_type, expected):
    assert parse_boundary(content_type) == expected


@pytest.mark.parametrize(
    "content_type",
    [
        None,
        "",
        "multipart/form-data",
        "multipart/form-data; boundary=",
        'multipart/form-data; boundary=""',
        "multipart/form-data; boundary=\u00e9\u20ac",
    ],
)
def test_parse_boundary_missing(content_type):
    with pytest.raises(MissingBoundaryError) as exc_info:
        parse_boundary(content_type)

    assert str(exc_info.value) == "Missing boundary in multipart data"


def test_parse_boundary_accepts_latin1_token():
    assert parse_boundary("multipart/form-data; boundary=café") == "café"
