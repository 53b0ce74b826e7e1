"""
JWT-style token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
Nothing is stored server-side, so a token stays valid until it expires
or the secret is rotated.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
from base64 import b64decode, b64encode

from fastapi import HTTPException, status

from config.settings import config

logger = logging.getLogger(__name__)

_TOKEN_SECRET = config.jwt_secret
_TOKEN_EXPIRY_SECONDS = config.access_token_expiry_seconds


def _sign(raw: bytes) -> str:
    return hmac.new(_TOKEN_SECRET.encode(), raw, hashlib.sha256).hexdigest()


def create_token(user_id: str) -> str:
    """Create a signed token containing ``user_id`` and expiry."""
    now = int(time.time())
    payload = {
        "user_id": user_id,
        "iat": now,
        "exp": now + _TOKEN_EXPIRY_SECONDS,
    }
    raw = json.dumps(payload).encode()
    return b64encode(raw).decode() + "." + _sign(raw)


def verify_token(token: str) -> str:
    """
    Verify token and return ``user_id``.

    Raises ``HTTPException(401)`` on invalid or expired tokens.
    """
    try:
        parts = token.split(".", 1)
        if len(parts) != 2:
            raise ValueError("bad format")
        raw = b64decode(parts[0], validate=True)
        if not hmac.compare_digest(parts[1], _sign(raw)):
            raise ValueError("bad signature")
        payload = json.loads(raw)
        if payload.get("exp", 0) < time.time():
            raise ValueError("token expired")
        user_id = payload["user_id"]
        if not isinstance(user_id, str) or not user_id:
            raise ValueError("missing user_id")
        return user_id
    except Exception as exc:
        logger.warning("Rejected access token: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
