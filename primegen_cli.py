#!/usr/bin/env python3
"""
primegen CLI – one entry point for the prime generation engine.

Usage:
  Interactive menu:
    python primegen_cli.py

  Non-interactive:
    python primegen_cli.py --run weak --bits 512
    python primegen_cli.py --run strong --bits 512 --security 40
    python primegen_cli.py --run test --number 561
    python primegen_cli.py --run modexp --base 4 --exponent 13 --modulus 497
    python primegen_cli.py --run rsa --bits 1024 --strong
    python primegen_cli.py --run all --seed 7

Environment:
  PRIMEGEN_SECURITY, PRIMEGEN_MAX_ATTEMPTS, PRIMEGEN_SEED, PRIMEGEN_LOG_LEVEL
  provide defaults for --security, --max-attempts, --seed and --log-level.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
import textwrap
import time
from typing import Callable, List, Optional, Sequence, Tuple

# Ensure relative repo imports work even if executed from another directory.
sys.path.insert(0, str(pathlib.Path(__file__).parent.resolve()))

from primes import (
    GenerationConfig,
    InvalidModulusError,
    InvalidParameterError,
    PrimeGenerationError,
    SearchStats,
    false_positive_bound,
    generate_weak_prime,
    gordon_prime,
    is_obviously_composite,
    is_probable_prime,
    modular_exponent,
)
from primes.entropy_check import check_random_source
from primes.random_source import RandomSource
from rsakeys.keygen import rsa_roundtrip
from utils import console_ui

logger = logging.getLogger("primegen")

DEFAULT_BITS = {"weak": 512, "strong": 512, "rsa": 1024}
# Sizes used by --run all so the whole tour finishes in seconds.
_TOUR_BITS = {"weak": 256, "strong": 256, "rsa": 512}

EXIT_OK = 0
EXIT_GENERATION_ERROR = 1
EXIT_USAGE = 2


def _bits_or_default(bits: Optional[int], task: str) -> int:
    return DEFAULT_BITS[task] if bits is None else bits


def _print_stats(stats: SearchStats) -> None:
    console_ui.kv(
        "Candidates",
        f"{stats.attempts} drawn | even={stats.even} sieved={stats.sieved} "
        f"miller-rabin={stats.rejected} accepted={stats.accepted}",
    )


def run_weak(config: GenerationConfig, source: RandomSource, bits: int) -> int:
    console_ui.section(f"Weak prime ({bits} bits, random search)")
    stats = SearchStats()
    start = time.perf_counter()
    p = generate_weak_prime(
        bits, config.security, random_source=source, max_attempts=config.max_attempts, stats=stats
    )
    console_ui.number("p", p)
    _print_stats(stats)
    console_ui.kv("False-positive bound", f"{false_positive_bound(config.security):.3e}")
    console_ui.elapsed("Generated in", time.perf_counter() - start)
    return p


def run_strong(config: GenerationConfig, source: RandomSource, bits: int) -> int:
    console_ui.section(f"Strong prime ({bits} bits requested, Gordon's algorithm)")
    stats = SearchStats()
    start = time.perf_counter()
    result = gordon_prime(
        bits, config.security, random_source=source, max_attempts=config.max_attempts, stats=stats
    )
    console_ui.number("p", result.p)
    console_ui.number("r | p-1", result.r)
    console_ui.number("s | p+1", result.s)
    console_ui.number("t | r-1", result.t)
    _print_stats(stats)
    if result.verify():
        console_ui.success("Divisibility relations hold")
    else:  # pragma: no cover - would mean a bug in the construction
        console_ui.error("Divisibility relations do NOT hold")
    console_ui.elapsed("Generated in", time.perf_counter() - start)
    return result.p


def run_test(config: GenerationConfig, source: RandomSource, n: int) -> bool:
    console_ui.section("Primality test")
    console_ui.number("n", n)
    if is_obviously_composite(n):
        console_ui.kv("Trial division", "divisible by a small prime")
    verdict = is_probable_prime(n, config.security, random_source=source)
    if verdict:
        console_ui.success(
            f"probably prime ({config.security} rounds, "
            f"error <= {false_positive_bound(config.security):.3e})"
        )
    else:
        console_ui.warning("composite")
    return verdict


def run_modexp(base: int, exponent: int, modulus: int) -> int:
    console_ui.section("Modular exponentiation")
    result = modular_exponent(base, exponent, modulus)
    console_ui.kv(f"{base}^{exponent} mod {modulus}", result)
    return result


def run_rsa(config: GenerationConfig, source: RandomSource, bits: int, strong: bool) -> bool:
    kind = "strong" if strong else "weak"
    console_ui.section(f"RSA round-trip ({bits}-bit modulus, {kind} primes)")
    start = time.perf_counter()
    key, ok = rsa_roundtrip(bits, security=config.security, strong=strong, random_source=source)
    console_ui.number("n", key.n)
    console_ui.kv("e", key.e)
    console_ui.kv("p / q bits", f"{key.p.bit_length()} / {key.q.bit_length()}")
    if ok:
        console_ui.success("decrypt(encrypt(m)) == m")
    else:
        console_ui.error("round-trip mismatch")
    console_ui.elapsed("Done in", time.perf_counter() - start)
    return ok


def run_entropy(source: RandomSource) -> dict:
    console_ui.section("Random source sanity check")
    result = check_random_source(source)
    console_ui.kv(
        "Entropy (bits/byte)",
        f"min={result['min']:.2f} max={result['max']:.2f} avg={result['avg']:.2f}",
    )
    console_ui.kv("Bit balance", f"{result['bit_balance']:.3f} (ideal 0.5)")
    if result["warn"]:
        console_ui.warning(f"{result['low_samples']} low-entropy sample(s); check the random source")
    else:
        console_ui.success("No low-entropy samples")
    return result


def export_dashboards(
    config: GenerationConfig, source: RandomSource, out_dir: str = "Visualizations"
) -> List[pathlib.Path]:
    console_ui.section("Export dashboards (PNG)")
    from reports.make_all_dashboards import make_all_dashboards

    saved = []
    for result in make_all_dashboards(out_dir, security=config.security, random_source=source):
        if result.status == "saved" and result.output is not None:
            saved.append(result.output)
            console_ui.success(str(result.output.resolve()))
        else:
            console_ui.warning(f"skipped {result.target.name} ({result.reason})")
    return saved


def run_all(config: GenerationConfig, source: RandomSource, strong_rsa: bool = False) -> None:
    steps: Sequence[Tuple[str, Callable[[], object]]] = (
        ("Random source sanity check", lambda: run_entropy(source)),
        ("Modular exponentiation", lambda: run_modexp(4, 13, 497)),
        ("Primality test (Carmichael 561)", lambda: run_test(config, source, 561)),
        ("Weak prime", lambda: run_weak(config, source, _TOUR_BITS["weak"])),
        ("Strong prime", lambda: run_strong(config, source, _TOUR_BITS["strong"])),
        ("RSA round-trip", lambda: run_rsa(config, source, _TOUR_BITS["rsa"], strong_rsa)),
    )
    total = len(steps)
    for index, (title, func) in enumerate(steps, start=1):
        console_ui.step_header(index, total, title)
        start = time.perf_counter()
        func()
        console_ui.elapsed("DONE in", time.perf_counter() - start)
        console_ui.line()
    console_ui.success("All steps completed.")


def _ask_int(prompt: str, default: int) -> int:
    raw = input(f"{prompt} [{default}]: ").strip()
    if not raw:
        return default
    try:
        return int(raw, 0)
    except ValueError:
        console_ui.warning(f"Not a number: {raw!r}; using {default}")
        return default


def menu() -> str:
    console_ui.banner("primegen")
    console_ui.bullet("Choose a task:")
    print("  1) Generate a weak prime (random search)")
    print("  2) Generate a strong prime (Gordon)")
    print("  3) Test a number for primality")
    print("  4) Modular exponentiation")
    print("  5) RSA round-trip")
    print("  6) Random source sanity check")
    print("  7) Run ALL (small sizes)")
    print("  8) Export dashboards (PNG)")
    print("  0) Exit")
    return input("\nEnter choice: ").strip()


def interactive(config: GenerationConfig, source: RandomSource) -> int:
    while True:
        choice = menu()
        try:
            if choice == "1":
                run_weak(config, source, _ask_int("Bits", DEFAULT_BITS["weak"]))
            elif choice == "2":
                run_strong(config, source, _ask_int("Bits", DEFAULT_BITS["strong"]))
            elif choice == "3":
                run_test(config, source, _ask_int("Number", 561))
            elif choice == "4":
                run_modexp(_ask_int("Base", 4), _ask_int("Exponent", 13), _ask_int("Modulus", 497))
            elif choice == "5":
                run_rsa(config, source, _ask_int("Modulus bits", DEFAULT_BITS["rsa"]), strong=False)
            elif choice == "6":
                run_entropy(source)
            elif choice == "7":
                run_all(config, source)
            elif choice == "8":
                export_dashboards(config, source)
            elif choice == "0" or choice.lower() in {"q", "quit", "exit"}:
                print("Goodbye!")
                return EXIT_OK
            else:
                print("Invalid choice. Please select 0–8.")
        except PrimeGenerationError as exc:
            console_ui.error(str(exc))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="primegen",
        description="Probabilistic prime generation: Miller-Rabin, random search and Gordon strong primes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Examples:
          python primegen_cli.py
          python primegen_cli.py --run strong --bits 512
          python primegen_cli.py --run test --number 561 --security 10
        """),
    )
    ap.add_argument(
        "--run",
        choices=["weak", "strong", "test", "modexp", "rsa", "entropy", "dashboards", "all"],
        help="Run a single task non-interactively.",
    )
    ap.add_argument("--bits", type=int, help="Bit length of the prime (or RSA modulus).")
    ap.add_argument("--security", type=int, help="Miller-Rabin rounds (default 40).")
    ap.add_argument("--seed", type=int, help="Seed a deterministic (insecure) random source.")
    ap.add_argument("--max-attempts", type=int, help="Give up after this many candidates per search.")
    ap.add_argument("--number", type=lambda s: int(s, 0), help="Number to test with --run test.")
    ap.add_argument("--base", type=lambda s: int(s, 0), default=4)
    ap.add_argument("--exponent", type=lambda s: int(s, 0), default=13)
    ap.add_argument("--modulus", type=lambda s: int(s, 0), default=497)
    ap.add_argument("--strong", action="store_true", help="Use Gordon strong primes for --run rsa.")
    ap.add_argument("--out-dir", default="Visualizations", help="Output directory for dashboards.")
    ap.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...).")
    ap.add_argument(
        "--plain",
        action="store_true",
        help="Disable colors/banners; print plain ASCII.",
    )
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    console_ui.init(plain=args.plain)

    try:
        config = GenerationConfig.from_env().override(
            security=args.security,
            max_attempts=args.max_attempts,
            seed=args.seed,
            log_level=args.log_level,
        )
    except PrimeGenerationError as exc:
        console_ui.error(str(exc))
        return EXIT_USAGE

    logging.basicConfig(
        level=config.level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    source = config.make_random_source()
    if config.seed is not None:
        logger.warning("Using seeded random source (seed=%d); output is NOT secret", config.seed)

    if not args.run:
        return interactive(config, source)

    if args.run == "test" and args.number is None:
        console_ui.error("--run test needs --number")
        return EXIT_USAGE

    mapping = {
        "weak": lambda: run_weak(config, source, _bits_or_default(args.bits, "weak")),
        "strong": lambda: run_strong(config, source, _bits_or_default(args.bits, "strong")),
        "test": lambda: run_test(config, source, args.number),
        "modexp": lambda: run_modexp(args.base, args.exponent, args.modulus),
        "rsa": lambda: run_rsa(config, source, _bits_or_default(args.bits, "rsa"), args.strong),
        "entropy": lambda: run_entropy(source),
        "dashboards": lambda: export_dashboards(config, source, args.out_dir),
        "all": lambda: run_all(config, source, args.strong),
    }
    try:
        mapping[args.run]()
    except (InvalidModulusError, InvalidParameterError) as exc:
        console_ui.error(str(exc))
        return EXIT_USAGE
    except PrimeGenerationError as exc:
        console_ui.error(str(exc))
        return EXIT_GENERATION_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
