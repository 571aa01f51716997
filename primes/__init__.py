"""Probabilistic prime generation: trial division, Miller-Rabin and Gordon strong primes."""

from __future__ import annotations

from .config import GenerationConfig
from .errors import (
    GenerationExhausted,
    InvalidModulusError,
    InvalidParameterError,
    PrimeGenerationError,
)
from .miller_rabin import false_positive_bound, is_probable_prime, passes_primality_pipeline
from .modexp import modular_exponent
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource
from .search import SearchStats
from .strong_prime import GordonPrime, generate_strong_prime, gordon_prime
from .trial_division import SMALL_PRIMES, is_obviously_composite
from .weak_prime import generate_weak_prime

__all__ = [
    "GenerationConfig",
    "GenerationExhausted",
    "InvalidModulusError",
    "InvalidParameterError",
    "PrimeGenerationError",
    "false_positive_bound",
    "is_probable_prime",
    "passes_primality_pipeline",
    "modular_exponent",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "SearchStats",
    "GordonPrime",
    "generate_strong_prime",
    "gordon_prime",
    "SMALL_PRIMES",
    "is_obviously_composite",
    "generate_weak_prime",
]
