"""Small helpers."""

from __future__ import annotations

import secrets
import string

__all__ = ["generate_random_string"]

_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase


def generate_random_string(length: int) -> str:
    """Return a cryptographically random alphanumeric string of ``length``."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))