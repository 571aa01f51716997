from __future__ import annotations

from pathlib import Path
from typing import Optional

HAS_MPL = False
plt = None  # type: ignore[assignment]

try:  # pragma: no cover - optional dependency
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    HAS_MPL = True
except ImportError:  # pragma: no cover - matplotlib missing
    plt = None  # type: ignore[assignment]


def ensure_out_dir(pathlike) -> Path:
    """Create the directory if needed and return it as a Path."""
    path = Path(pathlike)
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_parent(pathlike) -> Path:
    """Create the parent directory of a target file and return the target."""
    target = Path(pathlike)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def wide_grid(rows: int, cols: int):
    """Dashboard-sized grid of subplots, or ``(None, None)`` without matplotlib."""
    if not HAS_MPL:
        return None, None
    fig, axes = plt.subplots(rows, cols, figsize=(cols * 5.5, rows * 3.8), squeeze=False)
    return fig, axes


def nice_axes(ax, title: str, xlabel: Optional[str] = None, ylabel: Optional[str] = None):
    """Title, labels and a light grid."""
    if ax is None:
        return ax
    ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    return ax


def save(fig, path) -> Path:
    """Write the figure as PNG and close it."""
    target = ensure_parent(path)
    if fig is not None and HAS_MPL:
        fig.savefig(str(target), bbox_inches="tight")
        plt.close(fig)
    return target


__all__ = ["HAS_MPL", "ensure_out_dir", "ensure_parent", "wide_grid", "nice_axes", "save"]
