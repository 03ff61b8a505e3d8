"""Verification of signed Slack request payloads."""

from __future__ import annotations

import hashlib
import hmac
import time
from typing import Any, Mapping, Optional, Union

SIGNATURE_HEADER = "X-Slack-Signature"
TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
SIGNATURE_VERSION = "v0"
MAX_TIMESTAMP_SKEW = 5 * 60


class SignatureError(ValueError):
    """Raised when a request payload cannot be verified."""


def _header(headers: Mapping[str, Any], name: str) -> Optional[str]:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def verified_body(
    headers: Mapping[str, Any], body: Union[bytes, str], signing_secret: str
) -> bytes:
    """Return the request body once its Slack signature has been checked.

    Raises SignatureError when the signing headers are missing, the
    timestamp is malformed or more than five minutes off, or the signature
    does not match the body.
    """
    signature = _header(headers, SIGNATURE_HEADER)
    timestamp = _header(headers, TIMESTAMP_HEADER)
    if not signature or not timestamp:
        raise SignatureError("missing headers")
    try:
        stamp = int(timestamp)
    except ValueError as error:
        raise SignatureError(f"invalid request timestamp: {timestamp!r}") from error
    if abs(int(time.time()) - stamp) > MAX_TIMESTAMP_SKEW:
        raise SignatureError("timestamp is too old")

    raw = body.encode("utf-8") if isinstance(body, str) else bytes(body)
    base = f"{SIGNATURE_VERSION}:{timestamp}:".encode("utf-8") + raw
    digest = hmac.new(signing_secret.encode("utf-8"), base, hashlib.sha256).hexdigest()
    computed = f"{SIGNATURE_VERSION}={digest}"
    if not hmac.compare_digest(computed.encode("utf-8"), str(signature).encode("utf-8")):
        raise SignatureError("computed unexpected signature")
    return raw