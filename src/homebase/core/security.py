# src/homebase/core/security.py

"""Password hashing for stored accounts."""

from __future__ import annotations

import hmac

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def is_hashed(stored: str) -> bool:
    return pwd_context.identify(stored) is not None


def verify_password(plain: str, stored: str) -> bool:
    """
    Check plain against a stored value.

    Records written by older clients hold the password itself; those compare
    in constant time and report True so the caller can re-hash them.
    """
    if not stored:
        return False
    if is_hashed(stored):
        return pwd_context.verify(plain, stored)
    return hmac.compare_digest(plain.encode("utf-8"), stored.encode("utf-8"))


def needs_rehash(stored: str) -> bool:
    return not is_hashed(stored) or pwd_context.needs_update(stored)
