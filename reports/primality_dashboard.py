"""Dashboard for the primality pipeline: sieve yield and Miller-Rabin error bounds."""
from __future__ import annotations

import math
from pathlib import Path
from typing import Dict, Optional, Sequence

from primes.miller_rabin import false_positive_bound
from primes.random_source import RandomSource, default_source
from primes.trial_division import SMALL_PRIMES, is_obviously_composite
from utils.plotting import HAS_MPL, ensure_parent, nice_axes, save, wide_grid

_SECURITY_LEVELS: Sequence[int] = (1, 2, 4, 8, 16, 32, 40, 64)


def expected_sieve_survival() -> float:
    """Fraction of random odd integers not divisible by any table prime."""
    return math.prod(1.0 - 1.0 / p for p in SMALL_PRIMES)


def measure_sieve(
    bits: int = 256,
    trials: int = 2000,
    *,
    random_source: Optional[RandomSource] = None,
) -> Dict[str, float]:
    """Sample random odd ``bits``-bit numbers and count how many the sieve rejects."""

    source = default_source(random_source)
    sieved = 0
    for _ in range(trials):
        if is_obviously_composite(source.random_bits(bits) | 1):
            sieved += 1
    return {
        "bits": bits,
        "trials": trials,
        "sieved_fraction": sieved / trials,
        "expected_fraction": 1.0 - expected_sieve_survival(),
    }


def make_primality_dashboard(
    save_path: str | Path,
    *,
    security: int,
    trials: int = 2000,
    random_source: Optional[RandomSource] = None,
) -> Path:
    """Render the primality dashboard to *save_path* and return the file path."""

    target = ensure_parent(save_path)
    if not HAS_MPL:
        return target

    fig, axes = wide_grid(1, 2)
    fig.suptitle("Primality pipeline", fontsize=16)

    ax = nice_axes(
        axes[0][0],
        "Miller-Rabin false-positive bound",
        xlabel="Security (rounds)",
        ylabel="Upper bound (log scale)",
    )
    ax.semilogy(_SECURITY_LEVELS, [false_positive_bound(k) for k in _SECURITY_LEVELS], marker="o")
    ax.axvline(security, color="#ef4444", linestyle="--", label=f"configured ({security})")
    ax.legend()

    measured = [measure_sieve(bits, trials, random_source=random_source) for bits in (64, 256, 1024)]
    ax = nice_axes(axes[0][1], "Trial division rejections", xlabel="Candidate bits", ylabel="Fraction")
    positions = list(range(len(measured)))
    ax.bar(positions, [m["sieved_fraction"] for m in measured], color="#10b981", label="measured")
    ax.axhline(measured[0]["expected_fraction"], color="black", linestyle="--", label="expected")
    ax.set_xticks(positions)
    ax.set_xticklabels([str(m["bits"]) for m in measured])
    ax.set_ylim(0, 1)
    ax.legend()

    fig.tight_layout(rect=(0, 0.03, 1, 0.92))
    return save(fig, target)


__all__ = ["expected_sieve_survival", "measure_sieve", "make_primality_dashboard"]
