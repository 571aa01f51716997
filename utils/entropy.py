import math
from collections import Counter


def shannon_entropy(data: bytes) -> float:
    """Return bits/byte Shannon entropy of data.

    Samples shorter than 256 bytes cannot reach 8 bits/byte, so the value is
    rescaled by ``8 / log2(len(data))`` to keep short samples comparable.
    """
    if len(data) < 2:
        return 0.0
    n = len(data)
    counts = Counter(data)
    entropy = -sum((count / n) * math.log2(count / n) for count in counts.values())
    if n < 256:
        entropy *= 8.0 / math.log2(n)
    return max(0.0, min(entropy, 8.0))


def bit_balance(value: int, bits: int) -> float:
    """Fraction of set bits among the low ``bits`` bits of ``value``."""
    if bits <= 0:
        return 0.0
    return bin(value & ((1 << bits) - 1)).count("1") / bits
