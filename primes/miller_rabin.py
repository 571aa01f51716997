"""Miller-Rabin probable-prime test.

Each call runs exactly ``security`` independent witness rounds, so a
composite candidate survives with probability at most ``4 ** -security``
(assuming the witnesses are uniform, which is the random source's job).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from .errors import InvalidParameterError
from .modexp import modular_exponent
from .random_source import RandomSource, default_source
from .trial_division import is_obviously_composite

if TYPE_CHECKING:  # pragma: no cover
    from .search import SearchStats


def false_positive_bound(security: int) -> float:
    """Upper bound on the chance that a composite passes ``security`` rounds."""

    return 4.0 ** -security


def factor_powers_of_two(n: int) -> Tuple[int, int]:
    """Split an even ``n > 0`` into ``(power, remainder)`` with ``n == 2**power * remainder``."""

    if n <= 0 or n & 1:
        raise InvalidParameterError("expected a positive even number")
    power = 0
    remainder = n
    while remainder % 2 == 0:
        remainder //= 2
        power += 1
    return power, remainder


def is_probable_prime(
    candidate: int,
    security: int,
    *,
    random_source: Optional[RandomSource] = None,
) -> bool:
    """Return ``True`` when ``candidate`` is probably prime.

    ``False`` is definitive: a witness proved the number composite.
    """

    if security < 1:
        raise InvalidParameterError(f"security must be at least 1, got {security}")

    if candidate <= 1:
        return False
    if candidate == 2:
        return True
    if candidate % 2 == 0:
        return False
    if candidate == 3:
        # [2, candidate - 2] holds no witness
        return True

    bound = candidate - 1
    power, remainder = factor_powers_of_two(bound)
    source = default_source(random_source)

    for _ in range(security):
        a = source.random_range(2, bound)
        x = modular_exponent(a, remainder, candidate)
        if x == 1 or x == bound:
            continue
        for _ in range(power - 1):
            x = modular_exponent(x, 2, candidate)
            if x == bound:
                break
            if x == 1:
                return False
        else:
            return False
    return True


def passes_primality_pipeline(
    candidate: int,
    security: int,
    *,
    random_source: Optional[RandomSource] = None,
    stats: Optional["SearchStats"] = None,
) -> bool:
    """Trial division first, then Miller-Rabin for the survivors."""

    if is_obviously_composite(candidate):
        if stats is not None:
            stats.sieved += 1
        return False
    if not is_probable_prime(candidate, security, random_source=random_source):
        if stats is not None:
            stats.rejected += 1
        return False
    return True


__all__ = [
    "false_positive_bound",
    "factor_powers_of_two",
    "is_probable_prime",
    "passes_primality_pipeline",
]
