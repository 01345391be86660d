"""Request signing for the ACRCloud identification API."""

import base64
import hashlib
import hmac

from .models import SignatureRequest


def sign(canonical_string: str, secret: str) -> str:
    """
    Computes an ACRCloud request signature.

    Args:
        canonical_string: Newline-joined signed fields.
        secret: The ACRCloud access secret.

    Returns:
        Base64-encoded HMAC-SHA1 digest of the canonical string.
    """
    digest = hmac.new(
        secret.encode("utf-8"),
        canonical_string.encode("utf-8"),
        hashlib.sha1,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def sign_request(request: SignatureRequest, secret: str) -> str:
    """Signs the canonical string of a SignatureRequest."""
    return sign(request.canonical_string(), secret)
