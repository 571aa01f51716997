"""Runtime configuration for the command line and other callers.

The generator functions never read this themselves; a caller resolves a
:class:`GenerationConfig` and passes ``security`` explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import InvalidParameterError
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource

ENV_PREFIX = "PRIMEGEN_"
DEFAULT_SECURITY = 40


def _env_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidParameterError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GenerationConfig:
    security: int = DEFAULT_SECURITY
    max_attempts: Optional[int] = None
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.security < 1:
            raise InvalidParameterError(f"security must be at least 1, got {self.security}")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise InvalidParameterError("max_attempts must be at least 1")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidParameterError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GenerationConfig":
        """Build a config from ``PRIMEGEN_*`` environment variables."""
        env = os.environ if env is None else env
        security = _env_int(env, "SECURITY")
        return cls(
            security=DEFAULT_SECURITY if security is None else security,
            max_attempts=_env_int(env, "MAX_ATTEMPTS"),
            seed=_env_int(env, "SEED"),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", "WARNING") or "WARNING",
        )

    def override(self, **changes) -> "GenerationConfig":
        """Return a copy with the non-``None`` entries of ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    def make_random_source(self) -> RandomSource:
        if self.seed is not None:
            return SeededRandomSource(self.seed)
        return SystemRandomSource()


__all__ = ["DEFAULT_SECURITY", "ENV_PREFIX", "GenerationConfig"]
