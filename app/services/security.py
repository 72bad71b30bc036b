# app/services/security.py
"""
Password hashing helpers (bcrypt).
bcrypt only reads the first 72 bytes of input, so longer passwords are
truncated explicitly before hashing and checking.
"""

import bcrypt
from app.config import settings

BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash with a freshly generated salt. The salt is embedded in the result."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("ascii")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a stored hash. Never decrypts."""
    return bcrypt.checkpw(_encode(password), hashed.encode("ascii"))
