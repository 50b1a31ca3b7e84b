"""Random source handles and seeding helpers.

Two independent sources are threaded through every render:

``fast``
    A :class:`random.Random` (Mersenne Twister) used for bulk numeric, time,
    string and lookup-table draws.  It may be seeded for reproducible output.
``secure``
    A :class:`random.SystemRandom` backed by the operating system CSPRNG.  It
    is used only for unique identifiers and is never derived from a user seed.

Seeds are canonicalized and hashed with SHA-256 under a fixed namespace so
that ``"42"`` and ``42`` (or ``" 42 "``) select the same stream, while the
stream never coincides with ``random.Random(42)`` used elsewhere by a caller.

Security notes
--------------
A seeded ``fast`` source is fully predictable.  Nothing that needs
unpredictability may draw from it.
"""

from __future__ import annotations

import hashlib
import random
import threading
import unicodedata
from dataclasses import dataclass, field
from typing import Final

# ---------------------------------------------------------------------------
# Domain separation constants
# ---------------------------------------------------------------------------

_NS_FAST: Final = b"moldova/v1/fast-rng"


# ---------------------------------------------------------------------------
# Canonicalization
# ---------------------------------------------------------------------------


def canonicalize_seed(seed: str | int) -> str:
    """Normalize a user seed for hashing.

    Integers are rendered in decimal.  Strings are stripped and NFC
    normalized; case is preserved because seeds are opaque.
    """

    if isinstance(seed, bool):
        raise TypeError("seed must be a string or an integer")
    if isinstance(seed, int):
        return str(seed)
    return unicodedata.normalize("NFC", seed.strip())


def seed_digest(seed: str | int) -> bytes:
    """Return the 32-byte digest used to seed the fast source."""

    canonical = canonicalize_seed(seed)
    return hashlib.sha256(_NS_FAST + canonical.encode("utf-8")).digest()


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


def fast_rng(seed: str | int | None = None) -> random.Random:
    """Return a fast RNG, reproducible when ``seed`` is given."""

    if seed is None:
        return random.Random()
    return random.Random(int.from_bytes(seed_digest(seed), "big"))


def secure_rng() -> random.SystemRandom:
    """Return an RNG drawing from the operating system CSPRNG."""

    return random.SystemRandom()


@dataclass(slots=True, frozen=True)
class RandomSources:
    """The pair of random sources handed to value generators."""

    fast: random.Random = field(default_factory=fast_rng)
    secure: random.Random = field(default_factory=secure_rng)

    @classmethod
    def from_seed(cls, seed: str | int | None) -> "RandomSources":
        """Build sources with a fast RNG derived from ``seed``.

        The secure source is always OS backed regardless of ``seed``.
        """

        return cls(fast=fast_rng(seed), secure=secure_rng())


_DEFAULT_LOCK = threading.Lock()
_DEFAULT: RandomSources | None = None


def default_sources() -> RandomSources:
    """Return the lazily created process-wide sources."""

    global _DEFAULT
    if _DEFAULT is None:
        with _DEFAULT_LOCK:
            if _DEFAULT is None:
                _DEFAULT = RandomSources()
    return _DEFAULT


__all__ = [
    "RandomSources",
    "canonicalize_seed",
    "default_sources",
    "fast_rng",
    "secure_rng",
    "seed_digest",
]
