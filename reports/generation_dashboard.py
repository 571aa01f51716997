"""Dashboard describing how the weak and strong generators behave."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from primes.random_source import RandomSource, default_source
from primes.search import SearchStats
from primes.strong_prime import MIN_STRONG_BITS, generate_strong_prime
from primes.weak_prime import generate_weak_prime
from utils.plotting import HAS_MPL, ensure_parent, nice_axes, save, wide_grid

DEFAULT_BIT_LENGTHS: Sequence[int] = (32, 64, 128, 256)


@dataclass
class GenerationSample:
    """Measurements for one requested bit length."""

    bits: int
    weak_seconds: float
    strong_seconds: float
    weak_stats: SearchStats = field(default_factory=SearchStats)
    strong_stats: SearchStats = field(default_factory=SearchStats)
    strong_bits: int = 0


def collect_generation_metrics(
    bit_lengths: Sequence[int] = DEFAULT_BIT_LENGTHS,
    *,
    security: int,
    random_source: Optional[RandomSource] = None,
) -> List[GenerationSample]:
    """Generate one weak and one strong prime per bit length and time both."""

    source = default_source(random_source)
    samples: List[GenerationSample] = []
    for bits in bit_lengths:
        weak_stats = SearchStats()
        start = time.perf_counter()
        generate_weak_prime(bits, security, random_source=source, stats=weak_stats)
        weak_seconds = time.perf_counter() - start

        strong_stats = SearchStats()
        strong_bits = 0
        strong_seconds = 0.0
        if bits >= MIN_STRONG_BITS:
            start = time.perf_counter()
            p = generate_strong_prime(bits, security, random_source=source, stats=strong_stats)
            strong_seconds = time.perf_counter() - start
            strong_bits = p.bit_length()

        samples.append(
            GenerationSample(
                bits=bits,
                weak_seconds=weak_seconds,
                strong_seconds=strong_seconds,
                weak_stats=weak_stats,
                strong_stats=strong_stats,
                strong_bits=strong_bits,
            )
        )
    return samples


def make_generation_dashboard(
    save_path: str | Path,
    *,
    bit_lengths: Sequence[int] = DEFAULT_BIT_LENGTHS,
    security: int,
    random_source: Optional[RandomSource] = None,
    samples: Optional[Sequence[GenerationSample]] = None,
) -> Path:
    """Render the generator dashboard to *save_path* and return the file path."""

    target = ensure_parent(save_path)
    if not HAS_MPL:
        return target

    if samples is None:
        samples = collect_generation_metrics(bit_lengths, security=security, random_source=random_source)

    bits = [s.bits for s in samples]
    labels = [str(b) for b in bits]
    positions = list(range(len(samples)))
    width = 0.38

    fig, axes = wide_grid(2, 2)
    fig.suptitle(f"Prime generation (security={security})", fontsize=16)

    ax = nice_axes(axes[0][0], "Generation time", xlabel="Requested bits", ylabel="Seconds")
    ax.plot(bits, [s.weak_seconds for s in samples], marker="o", label="weak")
    ax.plot(bits, [s.strong_seconds for s in samples], marker="s", label="strong (Gordon)")
    ax.legend()

    ax = nice_axes(axes[0][1], "Candidates drawn", xlabel="Requested bits", ylabel="Candidates")
    ax.bar([p - width / 2 for p in positions], [s.weak_stats.attempts for s in samples],
           width=width, label="weak", color="#3b82f6")
    ax.bar([p + width / 2 for p in positions], [s.strong_stats.attempts for s in samples],
           width=width, label="strong", color="#f97316")
    ax.set_xticks(positions)
    ax.set_xticklabels(labels)
    ax.legend()

    totals = SearchStats()
    for s in samples:
        totals.merge(s.weak_stats).merge(s.strong_stats)
    ax = nice_axes(axes[1][0], "Where candidates were rejected")
    parts = [
        ("even", totals.even, "#9ca3af"),
        ("trial division", totals.sieved, "#10b981"),
        ("Miller-Rabin", totals.rejected, "#ef4444"),
        ("accepted", totals.accepted, "#6366f1"),
    ]
    parts = [part for part in parts if part[1] > 0]
    ax.pie([p[1] for p in parts], labels=[p[0] for p in parts], colors=[p[2] for p in parts],
           autopct="%1.0f%%")
    ax.grid(False)

    ax = nice_axes(axes[1][1], "Strong prime size", xlabel="Requested bits", ylabel="Output bits")
    ax.plot(bits, bits, linestyle="--", color="gray", label="requested")
    ax.plot(bits, [s.strong_bits for s in samples], marker="^", color="#f97316", label="Gordon output")
    ax.legend()

    fig.tight_layout(rect=(0, 0.03, 1, 0.94))
    return save(fig, target)


__all__ = ["GenerationSample", "collect_generation_metrics", "make_generation_dashboard"]
