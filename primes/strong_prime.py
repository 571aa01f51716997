"""Strong primes via Gordon's algorithm.

A strong prime ``p`` comes with primes ``r``, ``s`` and ``t`` such that

* ``r`` divides ``p - 1``,
* ``s`` divides ``p + 1``,
* ``t`` divides ``r - 1``,

which defeats Pollard's p-1 and Williams' p+1 factoring methods.  The
construction (Handbook of Applied Cryptography, algorithm 4.53):

1. ``s`` and ``t`` are random primes of about half the requested size.
2. ``r`` is the first prime of the form ``2*i*t + 1``.
3. ``p0 = 2 * (s^(r-2) mod r) * s - 1``; since ``r`` is prime,
   ``s^(r-2)`` is the inverse of ``s`` modulo ``r``, hence
   ``p0 = 1 (mod r)`` and ``p0 = -1 (mod s)``.
4. ``p`` is the first prime of the form ``p0 + 2*j*r*s``, which keeps both
   congruences.

The seed for ``i`` is a quarter of the requested size, which makes ``r`` about
3/4 and ``r*s`` about 5/4 of ``bit_length``.  The seed for ``j`` is capped at
32 bits so the final search adds little on top; see :func:`expected_strong_bits`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidParameterError
from .modexp import modular_exponent
from .random_source import RandomSource, default_source
from .search import SearchStats, search_prime_of_form
from .weak_prime import generate_weak_prime

logger = logging.getLogger(__name__)

MIN_STRONG_BITS = 8
MAX_J_SEED_BITS = 32


def _seed_bits(bit_length: int) -> Tuple[int, int]:
    i_bits = bit_length // 4
    return i_bits, min(MAX_J_SEED_BITS, i_bits)


def expected_strong_bits(bit_length: int) -> int:
    """Typical size of a Gordon prime requested at ``bit_length`` bits (within 3 bits)."""
    i_bits, j_bits = _seed_bits(bit_length)
    return bit_length + i_bits + j_bits + 2


@dataclass(frozen=True)
class GordonPrime:
    """A strong prime together with the primes used to build it."""

    p: int
    r: int
    s: int
    t: int

    def verify(self) -> bool:
        """Check the divisibility relations of the construction."""
        return (
            (self.p - 1) % self.r == 0
            and (self.p + 1) % self.s == 0
            and (self.r - 1) % self.t == 0
        )


def gordon_prime(
    bit_length: int,
    security: int,
    *,
    random_source: Optional[RandomSource] = None,
    max_attempts: Optional[int] = None,
    stats: Optional[SearchStats] = None,
) -> GordonPrime:
    """Run Gordon's algorithm and return ``p`` with its ``r``, ``s``, ``t``."""

    if bit_length < MIN_STRONG_BITS:
        raise InvalidParameterError(
            f"strong prime size must be at least {MIN_STRONG_BITS} bits, got {bit_length}"
        )

    source = default_source(random_source)
    options = dict(random_source=source, max_attempts=max_attempts, stats=stats)

    half = bit_length // 2
    i_bits, j_bits = _seed_bits(bit_length)
    s = generate_weak_prime(half, security, **options)
    t = generate_weak_prime(half + 1, security, **options)
    logger.debug("gordon: s has %d bits, t has %d bits", s.bit_length(), t.bit_length())

    # t | r - 1
    r = search_prime_of_form(
        lambda i: 2 * i * t + 1,
        source.random_bits(i_bits),
        security,
        what="prime r = 2it + 1",
        **options,
    )

    p0 = 2 * modular_exponent(s, r - 2, r) * s - 1

    # r | p - 1 and s | p + 1
    p = search_prime_of_form(
        lambda j: p0 + 2 * j * r * s,
        source.random_bits(j_bits),
        security,
        what="prime p = p0 + 2jrs",
        **options,
    )
    logger.debug("gordon: strong prime has %d bits (requested %d)", p.bit_length(), bit_length)
    return GordonPrime(p=p, r=r, s=s, t=t)


def generate_strong_prime(
    bit_length: int,
    security: int,
    *,
    random_source: Optional[RandomSource] = None,
    max_attempts: Optional[int] = None,
    stats: Optional[SearchStats] = None,
) -> int:
    """Return a Gordon strong prime of at least ``bit_length`` bits."""

    return gordon_prime(
        bit_length,
        security,
        random_source=random_source,
        max_attempts=max_attempts,
        stats=stats,
    ).p


__all__ = ["MIN_STRONG_BITS", "expected_strong_bits", "GordonPrime", "gordon_prime", "generate_strong_prime"]
