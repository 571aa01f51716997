"""Exception hierarchy for the prime generation engine.

A candidate that fails a primality test is *not* an error: the tests return
``False`` and the generators simply draw again.  Exceptions are reserved for
precondition violations and for the optional attempt cap.
"""

from __future__ import annotations


class PrimeGenerationError(Exception):
    """Base class for every error raised by :mod:`primes`."""


class InvalidModulusError(PrimeGenerationError, ValueError):
    """Raised when a modular operation is asked to reduce by zero (or less)."""


class InvalidParameterError(PrimeGenerationError, ValueError):
    """Raised for out-of-domain bit lengths, security parameters or ranges."""


class GenerationExhausted(PrimeGenerationError, RuntimeError):
    """The ``max_attempts`` guard stopped a search before a prime was found."""

    def __init__(self, what: str, attempts: int):
        super().__init__(f"no {what} found after {attempts} attempt(s)")
        self.what = what
        self.attempts = attempts


__all__ = [
    "PrimeGenerationError",
    "InvalidModulusError",
    "InvalidParameterError",
    "GenerationExhausted",
]
