"""
Password hashing for stored identities.

bcrypt with a fresh salt per call; the salt and work factor travel inside
the hash string, so the ``users`` table needs a single column.
"""

from __future__ import annotations

import bcrypt

from config.settings import config

# bcrypt only reads the first 72 bytes; newer releases refuse longer input.
_BCRYPT_MAX_BYTES = 72


def _secret_bytes(password: str) -> bytes:
    return password.encode()[:_BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=config.bcrypt_rounds)
    return bcrypt.hashpw(_secret_bytes(password), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """True iff ``password`` matches; malformed hashes count as a mismatch."""
    try:
        return bcrypt.checkpw(_secret_bytes(password), password_hash.encode())
    except (ValueError, TypeError):
        return False
