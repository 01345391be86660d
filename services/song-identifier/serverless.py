"""
Function-style entry point for serverless deployments.

Accepts the event shape used by function platforms (`httpMethod`,
`headers`, `body`, `isBase64Encoded`) and returns a
`{statusCode, headers, body}` dict with a JSON string body.
"""

import json
from typing import Any

from dependencies import get_handler


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Runs one identification request from a function event."""
    result = get_handler().handle(
        event.get("httpMethod", ""),
        event.get("headers") or {},
        event.get("body"),
        is_base64_encoded=bool(event.get("isBase64Encoded")),
    )

    return {
        "statusCode": result.status_code,
        "headers": result.headers,
        "body": "" if result.body is None else json.dumps(result.body),
    }
