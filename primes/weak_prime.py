from __future__ import annotations

import logging
from typing import Optional

from .errors import InvalidParameterError
from .miller_rabin import passes_primality_pipeline
from .random_source import RandomSource, default_source
from .search import SearchStats, retry_until

logger = logging.getLogger(__name__)

MIN_WEAK_BITS = 2


def generate_weak_prime(
    bit_length: int,
    security: int,
    *,
    random_source: Optional[RandomSource] = None,
    max_attempts: Optional[int] = None,
    stats: Optional[SearchStats] = None,
) -> int:
    """Random-search a probable prime of exactly ``bit_length`` bits.

    Even draws are discarded, the rest go through trial division and
    ``security`` Miller-Rabin rounds.
    """

    if bit_length < MIN_WEAK_BITS:
        raise InvalidParameterError(
            f"prime size must be at least {MIN_WEAK_BITS} bits, got {bit_length}"
        )
    if security < 1:
        raise InvalidParameterError(f"security must be at least 1, got {security}")

    source = default_source(random_source)

    def accept(candidate: int) -> bool:
        if candidate % 2 == 0:
            if stats is not None:
                stats.even += 1
            return False
        return passes_primality_pipeline(candidate, security, random_source=source, stats=stats)

    prime = retry_until(
        lambda: source.random_bits(bit_length),
        accept,
        max_attempts=max_attempts,
        stats=stats,
        what=f"{bit_length}-bit prime",
    )
    logger.debug("generated %d-bit weak prime", bit_length)
    return prime


__all__ = ["MIN_WEAK_BITS", "generate_weak_prime"]
