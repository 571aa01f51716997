from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from primes.config import DEFAULT_SECURITY
from primes.random_source import RandomSource
from utils.plotting import HAS_MPL, ensure_out_dir

_DASHBOARD_SPECS: Sequence[Tuple[str, str, str]] = (
    ("reports.generation_dashboard", "make_generation_dashboard", "prime_generation.png"),
    ("reports.primality_dashboard", "make_primality_dashboard", "primality_pipeline.png"),
)


@dataclass
class DashboardResult:
    """Outcome of a single dashboard export attempt."""

    module: str
    attr: str
    target: Path
    status: str
    reason: str = ""
    output: Optional[Path] = None


def _load_callable(module_name: str, attr: str) -> Tuple[Optional[Callable[..., Path]], str]:
    try:
        module = import_module(module_name)
    except ImportError as exc:
        return None, f"import failed: {exc}"

    func = getattr(module, attr, None)
    if func is None:
        return None, f"callable '{attr}' not found in {module_name}"
    return func, ""


def make_all_dashboards(
    out_dir: str | Path = "Visualizations",
    *,
    security: int,
    random_source: Optional[RandomSource] = None,
) -> List[DashboardResult]:
    """Export every dashboard into *out_dir* and describe the outcome of each."""

    out = ensure_out_dir(out_dir)
    results: List[DashboardResult] = []

    for module_name, attr, filename in _DASHBOARD_SPECS:
        target = out / filename
        if not HAS_MPL:
            results.append(DashboardResult(module_name, attr, target, "skipped", "matplotlib not installed"))
            continue

        func, reason = _load_callable(module_name, attr)
        if func is None:
            results.append(DashboardResult(module_name, attr, target, "skipped", reason))
            continue

        output = Path(func(target, security=security, random_source=random_source))
        if not output.exists():
            results.append(DashboardResult(module_name, attr, target, "skipped", "no output generated"))
            continue
        results.append(DashboardResult(module_name, attr, target, "saved", output=output))
    return results


def main() -> None:
    for result in make_all_dashboards(security=DEFAULT_SECURITY):
        if result.status == "saved" and result.output is not None:
            print(result.output.resolve())
        else:
            print(f"skipped {result.module}.{result.attr} ({result.reason})")


if __name__ == "__main__":
    main()
