"""Webhook authenticity checks: X-Hub signature and subscription handshake."""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_HEADER = "X-Hub-Signature-256"
SIGNATURE_PREFIX = "sha256="
SUBSCRIBE_MODE = "subscribe"


def compute_signature(raw_body: bytes | str, secret: str) -> str:
    """Return the ``sha256=<hex>`` signature Instagram sends for ``raw_body``."""
    if isinstance(raw_body, str):
        raw_body = raw_body.encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    return SIGNATURE_PREFIX + digest


def verify_signature(raw_body: bytes | str, signature: str | None, secret: str) -> bool:
    """Check the X-Hub-Signature-256 header against the raw request body.

    Must be given the body exactly as received; a re-serialized payload can
    differ byte-for-byte and will not match.

    Args:
        raw_body: Request body before any JSON parsing
        signature: Header value, ``sha256=<hex>``
        secret: Instagram app secret

    Returns:
        True only when the header matches exactly
    """
    if not signature or not secret:
        return False
    expected = compute_signature(raw_body, secret)
    return hmac.compare_digest(signature.encode("utf-8"), expected.encode("utf-8"))


def verify_webhook_challenge(
    hub_mode: str | None,
    hub_verify_token: str | None,
    hub_challenge: str | None,
    expected_token: str,
) -> str | None:
    """Answer the one-time subscription handshake.

    Returns:
        The challenge to echo back (empty string if none was sent), or None
        when mode or token do not match.
    """
    if not expected_token:
        return None
    if hub_mode != SUBSCRIBE_MODE or hub_verify_token != expected_token:
        return None
    return hub_challenge or ""
