"""Seedable random sources.

Every randomized operation takes a *source*: any object with a ``random()``
method returning floats in [0, 1). A seed string gives a Mulberry32
generator whose output is identical on every platform; no seed gives the
operating system's entropy pool. Callers never branch on which one they
have, so shuffling and sampling are written once.
"""

import random
from typing import Protocol

MASK32 = 0xFFFFFFFF

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193


class RandomSource(Protocol):
    def random(self) -> float: ...


def fnv1a_32(text: str) -> int:
    """32-bit FNV-1a hash of a string, folded over its UTF-16 code units.

    UTF-16 units (rather than code points) keep the hash identical to what
    a browser computes from charCodeAt for the same seed.
    """
    h = FNV_OFFSET_BASIS
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * FNV_PRIME) & MASK32
    return h


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


class Mulberry32:
    """Small deterministic generator with 32 bits of state.

    Example:
        >>> source = Mulberry32(fnv1a_32("lunch"))
        >>> 0.0 <= source.random() < 1.0
        True
    """

    def __init__(self, state: int):
        self.state = state & MASK32

    def next_uint32(self) -> int:
        self.state = (self.state + 0x6D2B79F5) & MASK32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & MASK32) ^ t
        return (t ^ (t >> 14)) & MASK32

    def random(self) -> float:
        return self.next_uint32() / 4294967296


def make_source(seed: str | None = None) -> RandomSource:
    """Return a fresh source: reproducible for a non-empty seed, else true-random."""
    if seed:
        return Mulberry32(fnv1a_32(seed))
    return random.SystemRandom()
