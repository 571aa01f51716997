from __future__ import annotations

from statistics import mean
from typing import Optional

from utils.entropy import bit_balance, shannon_entropy

from .errors import InvalidParameterError
from .random_source import RandomSource, default_source

# Threshold in bits/byte for a single sample (max 8.0)
ENTROPY_WARN_THRESHOLD = 7.0


def check_random_source(
    source: Optional[RandomSource] = None,
    *,
    samples: int = 16,
    size: int = 64,
    threshold: float = ENTROPY_WARN_THRESHOLD,
) -> dict:
    """Draw ``samples`` byte strings from ``source`` and measure their entropy.

    This is a sanity check, not a statistical test suite: it catches a
    stuck or badly seeded source, nothing subtler.
    """

    if samples < 1 or size < 1:
        raise InvalidParameterError("samples and size must be positive")

    source = default_source(source)
    entropies = []
    balances = []
    for _ in range(samples):
        # random_bits pins the top bit; clear it to look at raw output
        value = source.random_bits(8 * size) ^ (1 << (8 * size - 1))
        entropies.append(shannon_entropy(value.to_bytes(size, "big")))
        balances.append(bit_balance(value, 8 * size - 1))

    low = [e for e in entropies if e < threshold]
    return {
        "entropies": entropies,
        "min": min(entropies),
        "max": max(entropies),
        "avg": mean(entropies),
        "bit_balance": mean(balances),
        "low_samples": len(low),
        "warn": bool(low),
    }


__all__ = ["ENTROPY_WARN_THRESHOLD", "check_random_source"]
