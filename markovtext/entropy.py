#!/usr/bin/env python3
"""
Randomness Sources
==================
The generator never calls the ``random`` module directly. It consumes any
object with a ``next()`` method returning an unsigned 32-bit integer, which
keeps generation a deterministic function of the supplied value sequence.

Sources:
- SystemRandomSource: operating system entropy via secrets.SystemRandom()
- SeededRandom: reproducible sequence derived from a short seed string

Usage:
    from markovtext.entropy import SeededRandom, new_seed

    seed = new_seed()            # e.g. '6a4156e2'
    rng = SeededRandom(seed)
    rng.next()                   # same value for the same seed, every run
"""

import hashlib
import random
import secrets
from typing import Protocol, runtime_checkable

UINT32_BITS = 32


@runtime_checkable
class RandomSource(Protocol):
    """Anything that produces unsigned 32-bit values."""

    def next(self) -> int:
        ...


class SystemRandomSource:
    """Cryptographically secure source backed by the OS entropy pool."""

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def next(self) -> int:
        return self._rng.getrandbits(UINT32_BITS)


def stable_hash(seed: str) -> int:
    """
    Hash a seed string to a 64-bit integer.

    The builtin hash() is salted per process, so sha256 is used to keep
    seeds reproducible across runs and machines.
    """
    digest = hashlib.sha256(seed.encode('utf-8')).digest()
    return int.from_bytes(digest[:8], 'big')


class SeededRandom:
    """Deterministic source derived from a seed string."""

    def __init__(self, seed: str):
        self.seed = seed
        self._rng = random.Random(stable_hash(seed))

    def next(self) -> int:
        return self._rng.getrandbits(UINT32_BITS)

    def __repr__(self) -> str:
        return f"SeededRandom({self.seed!r})"


def new_seed(length: int = 8) -> str:
    """Return a fresh random hex seed of ``length`` characters."""
    return secrets.token_hex((length + 1) // 2)[:length]


# Global instance
_system_random = SystemRandomSource()

def get_rng() -> SystemRandomSource:
    """Get the global system randomness source."""
    return _system_random


__all__ = [
    "RandomSource",
    "SystemRandomSource",
    "SeededRandom",
    "stable_hash",
    "new_seed",
    "get_rng",
]
