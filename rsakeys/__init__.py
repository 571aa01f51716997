from __future__ import annotations

from .keygen import RSAKey, generate_key, rsa_roundtrip

__all__ = ["RSAKey", "generate_key", "rsa_roundtrip"]
