"""
Password credential helpers.
Passwords are hashed with bcrypt via passlib; the work factor comes from settings.
"""
from __future__ import annotations

import logging

from passlib.context import CryptContext

from actrac.core.config import settings

logger = logging.getLogger(__name__)

# ── Password hashing ──────────────────────────────────────────────────────────
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(plain_password: str) -> str:
    """Return a salted bcrypt hash of the given plain-text password."""
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Return True if plain_password matches the stored hash.
    A malformed hash or any backend failure yields False, never an exception,
    so callers cannot tell "wrong password" from "internal error".
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except Exception as exc:
        logger.warning("Password verification failed: %s", type(exc).__name__)
        return False
