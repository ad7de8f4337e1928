# File: app/core/security.py

"""
Password hashing helpers.

Passwords are stored as salted bcrypt hashes. bcrypt only looks at the
first 72 bytes of its input, so both helpers cut the encoded password to
that length before handing it over.
"""

import bcrypt

from app.core.config import settings


BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a bcrypt hash of ``password`` as text."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check ``password`` against a hash produced by :func:`hash_password`."""
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        # not a bcrypt hash
        return False
