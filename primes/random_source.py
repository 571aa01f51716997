"""Random bit sources consumed by the generators.

Every generator accepts an optional ``random_source``.  Production code gets a
fresh :class:`SystemRandomSource` per call; tests pass a
:class:`SeededRandomSource` to reproduce the same primes on every run.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol

from Crypto.Random.random import StrongRandom

from .errors import InvalidParameterError


class RandomSource(Protocol):
    def random_bits(self, bits: int) -> int:
        """Uniform integer with exactly ``bits`` bits (top bit set)."""

    def random_range(self, lo: int, hi: int) -> int:
        """Uniform integer in the half-open range ``[lo, hi)``."""


def _check_bits(bits: int) -> None:
    if bits < 1:
        raise InvalidParameterError(f"bit length must be at least 1, got {bits}")


def _check_range(lo: int, hi: int) -> None:
    if hi <= lo:
        raise InvalidParameterError(f"empty range [{lo}, {hi})")


class SystemRandomSource:
    """Cryptographically secure source backed by pycryptodome's ``StrongRandom``."""

    def __init__(self) -> None:
        self._rng = StrongRandom()

    def random_bits(self, bits: int) -> int:
        _check_bits(bits)
        return self._rng.getrandbits(bits) | (1 << (bits - 1))

    def random_range(self, lo: int, hi: int) -> int:
        _check_range(lo, hi)
        return self._rng.randrange(lo, hi)


class SeededRandomSource:
    """Deterministic source for reproducible test vectors.

    Not suitable for key material: the whole stream is determined by ``seed``.
    """

    def __init__(self, seed: int | str | bytes) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def random_bits(self, bits: int) -> int:
        _check_bits(bits)
        return self._rng.getrandbits(bits) | (1 << (bits - 1))

    def random_range(self, lo: int, hi: int) -> int:
        _check_range(lo, hi)
        return self._rng.randrange(lo, hi)


def default_source(source: Optional[RandomSource] = None) -> RandomSource:
    """Return ``source`` or a new secure source when none was given."""

    return source if source is not None else SystemRandomSource()


__all__ = ["RandomSource", "SystemRandomSource", "SeededRandomSource", "default_source"]
