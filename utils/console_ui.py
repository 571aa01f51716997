"""Console presentation helpers for the primegen CLI."""
from __future__ import annotations

import os
import shutil
import sys
from typing import Optional

try:  # optional dependency
    import colorama
    from colorama import Fore, Style
except ImportError:  # pragma: no cover - optional dep
    colorama = None
    Fore = None  # type: ignore[assignment]
    Style = None  # type: ignore[assignment]

try:  # optional dependency
    import pyfiglet
except ImportError:  # pragma: no cover - optional dep
    pyfiglet = None

__all__ = [
    "init",
    "is_plain",
    "banner",
    "step_header",
    "section",
    "kv",
    "number",
    "bullet",
    "info",
    "success",
    "warning",
    "error",
    "elapsed",
    "rule",
    "line",
]

_width = 100
_plain_mode = True
_use_color = False
_styles = {"success": "", "warning": "", "error": "", "info": "", "step": ""}
_symbols = {"success": "[OK]", "warning": "[!]", "error": "[X]", "bullet": "-"}

# Integers longer than this many hex digits are abbreviated in the console.
_MAX_HEX_DIGITS = 64


def init(plain: bool = False) -> None:
    """Pick plain or coloured output for the rest of the process."""

    global _width, _plain_mode, _use_color, _styles, _symbols

    _width = shutil.get_terminal_size(fallback=(100, 24)).columns or 100

    isatty = getattr(sys.stdout, "isatty", None)
    is_tty = bool(isatty()) if callable(isatty) else False
    _plain_mode = plain or bool(os.environ.get("NO_COLOR")) or not is_tty
    _use_color = not _plain_mode and colorama is not None

    if _use_color:
        colorama.init(autoreset=True)
        _styles = {
            "success": Fore.GREEN + Style.BRIGHT,
            "warning": Fore.YELLOW + Style.BRIGHT,
            "error": Fore.RED + Style.BRIGHT,
            "info": Fore.BLUE,
            "step": Fore.CYAN + Style.BRIGHT,
        }
    else:
        _styles = {key: "" for key in _styles}

    if _plain_mode:
        _symbols = {"success": "[OK]", "warning": "[!]", "error": "[X]", "bullet": "-"}
    else:
        _symbols = {"success": "✓", "warning": "!", "error": "✗", "bullet": "•"}


def is_plain() -> bool:
    return _plain_mode


def _apply(kind: str, message: str) -> str:
    style = _styles.get(kind, "")
    if not _use_color or not style:
        return message
    return f"{style}{message}{Style.RESET_ALL}"


def rule(char: str = "=", width: Optional[int] = None) -> None:
    count = width if width is not None else _width
    print(char * max(1, count))


def line() -> None:
    rule("-")


def banner(title: str) -> None:
    """Figlet banner, or a centred heading in plain mode."""

    if _plain_mode or pyfiglet is None:
        print(f"=== {title} ===".center(_width))
        return
    print(pyfiglet.figlet_format(title, width=_width))


def step_header(i: int, n: int, title: str) -> None:
    print(_apply("step", f"[{i}/{n}] {title}"))


def section(title: str) -> None:
    rule("=")
    print(f" {title.upper()}")
    rule("=")


def kv(key: str, value) -> None:
    print(f"{key}: {value}")


def number(label: str, value: int) -> None:
    """Print an integer with its bit length, in hex when it is large."""

    digits = f"{value:x}"
    if len(digits) > _MAX_HEX_DIGITS:
        half = _MAX_HEX_DIGITS // 2
        digits = f"{digits[:half]}...{digits[-half:]}"
    shown = str(value) if value.bit_length() <= 64 else f"0x{digits}"
    print(f"{label} ({value.bit_length()} bits): {shown}")


def bullet(msg: str) -> None:
    print(f"{_symbols['bullet']} {msg}")


def info(msg: str) -> None:
    print(_apply("info", msg))


def success(msg: str) -> None:
    print(_apply("success", f"{_symbols['success']} {msg}"))


def warning(msg: str) -> None:
    print(_apply("warning", f"{_symbols['warning']} {msg}"))


def error(msg: str) -> None:
    print(_apply("error", f"{_symbols['error']} {msg}"))


def elapsed(prefix: str, seconds: float) -> None:
    print(f"{prefix} {seconds:.2f}s")
