"""Minimal multipart/form-data extraction for single audio uploads."""

import re

from exceptions import FieldNotFoundError, MissingBoundaryError

from .models import AudioUpload

DEFAULT_FILENAME = "audio.wav"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

_HEADER_SEPARATOR = b"\r\n\r\n"
_LINE_BREAK = b"\r\n"
_FORM_DATA_PATTERN = re.compile(rb"content-disposition:\s*form-data", re.IGNORECASE)
_FILENAME_PATTERN = re.compile(rb'filename="([^"]+)"')
_CONTENT_TYPE_PATTERN = re.compile(
    rb"^content-type:\s*([^\r\n]+)", re.IGNORECASE | re.MULTILINE
)


def parse_boundary(content_type: str | None) -> str:
    """
    Reads the boundary token from a multipart Content-Type header.

    Raises:
        MissingBoundaryError: If the header has no usable boundary token.
    """
    if not content_type or "boundary=" not in content_type:
        raise MissingBoundaryError(content_type)

    boundary = content_type.split("boundary=", 1)[1].split(";", 1)[0]
    boundary = boundary.strip().strip('"')
    if not boundary:
        raise MissingBoundaryError(content_type)
    try:
        boundary.encode("latin-1")
    except UnicodeEncodeError as e:
        raise MissingBoundaryError(content_type) from e
    return boundary


def extract_field(body: bytes, boundary: str, field_name: str) -> AudioUpload:
    """
    Extracts the first multipart segment named `field_name`.

    Operates on raw bytes throughout so binary payloads survive unchanged.
    A boundary sequence occurring inside the payload itself is not handled.

    Args:
        body: Raw request body.
        boundary: Boundary token from the Content-Type header.
        field_name: Form field to extract.

    Returns:
        AudioUpload with the segment payload, filename and declared type.

    Raises:
        FieldNotFoundError: If no segment carries the field name.
    """
    delimiter = b"--" + boundary.encode("latin-1")
    name_marker = re.compile(
        rb'(?<!\w)name="' + re.escape(field_name.encode("utf-8")) + rb'"'
    )

    # The first segment is the preamble before the opening delimiter.
    for segment in body.split(delimiter)[1:]:
        header_end = segment.find(_HEADER_SEPARATOR)
        if header_end == -1:
            continue

        headers = segment[:header_end]
        if not _FORM_DATA_PATTERN.search(headers) or not name_marker.search(headers):
            continue

        payload = segment[header_end + len(_HEADER_SEPARATOR) :]
        trailing_break = payload.rfind(_LINE_BREAK)
        if trailing_break != -1:
            payload = payload[:trailing_break]

        return AudioUpload(
            data=payload,
            filename=_filename(headers),
            content_type=_content_type(headers),
        )

    raise FieldNotFoundError(field_name)


def _filename(headers: bytes) -> str:
    match = _FILENAME_PATTERN.search(headers)
    if not match:
        return DEFAULT_FILENAME
    return match.group(1).decode("utf-8", errors="replace")


def _content_type(headers: bytes) -> str:
    match = _CONTENT_TYPE_PATTERN.search(headers)
    if not match:
        return DEFAULT_CONTENT_TYPE
    return match.group(1).decode("latin-1").strip()
