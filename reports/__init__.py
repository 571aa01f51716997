from __future__ import annotations

from .generation_dashboard import make_generation_dashboard
from .primality_dashboard import make_primality_dashboard

__all__ = ["make_generation_dashboard", "make_primality_dashboard"]
