"""Resample-and-retest loops shared by every generator."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import GenerationExhausted, InvalidParameterError
from .miller_rabin import passes_primality_pipeline
from .random_source import RandomSource, default_source

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters describing how many candidates a search went through."""

    attempts: int = 0
    even: int = 0
    sieved: int = 0
    rejected: int = 0

    @property
    def accepted(self) -> int:
        return self.attempts - self.even - self.sieved - self.rejected

    def merge(self, other: "SearchStats") -> "SearchStats":
        self.attempts += other.attempts
        self.even += other.even
        self.sieved += other.sieved
        self.rejected += other.rejected
        return self


def retry_until(
    draw: Callable[[], int],
    accept: Callable[[int], bool],
    *,
    max_attempts: Optional[int] = None,
    stats: Optional[SearchStats] = None,
    what: str = "candidate",
) -> int:
    """Call ``draw`` until ``accept`` approves a value and return it.

    Without ``max_attempts`` the loop is unbounded; with it,
    :class:`GenerationExhausted` is raised once that many draws were rejected.
    """

    if max_attempts is not None and max_attempts < 1:
        raise InvalidParameterError("max_attempts must be at least 1")

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        value = draw()
        attempts += 1
        if stats is not None:
            stats.attempts += 1
        if accept(value):
            logger.debug("accepted %s after %d attempt(s)", what, attempts)
            return value

    logger.warning("giving up on %s after %d attempt(s)", what, attempts)
    raise GenerationExhausted(what, attempts)


def search_prime_of_form(
    formula: Callable[[int], int],
    start: int,
    security: int,
    *,
    random_source: Optional[RandomSource] = None,
    max_attempts: Optional[int] = None,
    stats: Optional[SearchStats] = None,
    what: str = "prime",
) -> int:
    """Return the first probable prime among ``formula(start), formula(start + 1), ...``."""

    source = default_source(random_source)
    indices = itertools.count(start)
    return retry_until(
        lambda: formula(next(indices)),
        lambda n: passes_primality_pipeline(n, security, random_source=source, stats=stats),
        max_attempts=max_attempts,
        stats=stats,
        what=what,
    )


__all__ = ["SearchStats", "retry_until", "search_prime_of_form"]
