"""Cheap trial-division sieve run before Miller-Rabin."""

from __future__ import annotations

from typing import FrozenSet, Tuple

# Odd primes below 256.
SMALL_PRIMES: Tuple[int, ...] = (
    3, 5, 7, 11, 13, 17, 19, 23, 29, 31,
    37, 41, 43, 47, 53, 59, 61, 67, 71, 73,
    79, 83, 89, 97, 101, 103, 107, 109, 113, 127,
    131, 137, 139, 149, 151, 157, 163, 167, 173, 179,
    181, 191, 193, 197, 199, 211, 223, 227, 229, 233,
    239, 241, 251,
)

SMALL_PRIME_SET: FrozenSet[int] = frozenset(SMALL_PRIMES)


def is_obviously_composite(n: int) -> bool:
    """Return ``True`` when ``n`` is a proper multiple of a small odd prime.

    ``False`` only means the sieve found nothing; it says nothing about
    primality.  The table entries themselves are not flagged.
    """

    for p in SMALL_PRIMES:
        if n % p == 0:
            # a table prime is itself prime, so only proper multiples are rejected
            return n != p
    return False


__all__ = ["SMALL_PRIMES", "SMALL_PRIME_SET", "is_obviously_composite"]
