from __future__ import annotations

from .errors import InvalidModulusError, InvalidParameterError


def modular_exponent(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` using square-and-multiply.

    The loop runs once per bit of ``exponent``.  A zero modulus is rejected
    up front instead of surfacing as ``ZeroDivisionError`` half-way through.
    """

    if modulus <= 0:
        raise InvalidModulusError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise InvalidParameterError("exponent must be non-negative")

    result = 1 % modulus
    power = base % modulus
    e = exponent
    while e > 0:
        if e & 1:
            result = (result * power) % modulus
        power = (power * power) % modulus
        e >>= 1
    return result


__all__ = ["modular_exponent"]
