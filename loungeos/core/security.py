"""Password hashing helpers built on bcrypt."""

from __future__ import annotations

import bcrypt

from .errors import InvalidOperationError

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


def password_fits(password: str) -> bool:
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt.

    Raises:
        InvalidOperationError: If the password is longer than bcrypt accepts
    """
    if not password_fits(password):
        raise InvalidOperationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain password against a stored bcrypt hash.

    Malformed hashes and over-long passwords never match.
    """
    if not password_fits(password):
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False
