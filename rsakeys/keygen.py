"""RSA key generation on top of the :mod:`primes` engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from primes.errors import InvalidParameterError
from primes.modexp import modular_exponent
from primes.random_source import RandomSource, default_source
from primes.strong_prime import MIN_STRONG_BITS, expected_strong_bits, generate_strong_prime
from primes.weak_prime import generate_weak_prime

logger = logging.getLogger(__name__)

MIN_RSA_BITS = 32


def egcd(a: int, b: int):
    """Extended Euclidean algorithm without recursion.

    Returns ``(g, x, y)`` with ``a*x + b*y == g``.  Iterative so that
    multi-thousand-bit operands do not hit the recursion limit.
    """

    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    return old_r, old_s, old_t


def inv_mod(a: int, m: int) -> int:
    g, x, _ = egcd(a, m)
    if g != 1:
        raise ValueError("No modular inverse")
    return x % m


@dataclass(frozen=True)
class RSAKey:
    n: int
    e: int
    d: int
    p: int
    q: int

    @property
    def bits(self) -> int:
        return self.n.bit_length()


def _strong_request(target: int) -> int:
    """Largest Gordon request whose output is expected to fit in ``target`` bits."""
    request = target
    while request > MIN_STRONG_BITS and expected_strong_bits(request) > target:
        request -= 1
    return request


def _prime_size(bits: int, strong: bool) -> Tuple[int, int]:
    if bits < MIN_RSA_BITS:
        raise InvalidParameterError(f"RSA modulus must be at least {MIN_RSA_BITS} bits")
    p_bits = bits // 2
    q_bits = bits - p_bits
    if strong:
        p_bits = _strong_request(p_bits)
        q_bits = _strong_request(q_bits)
    return p_bits, q_bits


def generate_key(
    bits: int = 2048,
    e: int = 65537,
    *,
    security: int,
    strong: bool = False,
    random_source: Optional[RandomSource] = None,
    max_attempts: Optional[int] = None,
) -> RSAKey:
    """Generate an RSA key pair from two distinct probable primes.

    With ``strong=True`` both primes come from Gordon's algorithm; the
    modulus is then only approximately ``bits`` long.
    """

    if e < 3 or e % 2 == 0:
        raise InvalidParameterError("Public exponent must be odd and at least 3")

    source = default_source(random_source)
    generate = generate_strong_prime if strong else generate_weak_prime
    p_bits, q_bits = _prime_size(bits, strong)

    while True:
        p = generate(p_bits, security, random_source=source, max_attempts=max_attempts)
        q = generate(q_bits, security, random_source=source, max_attempts=max_attempts)
        if p == q:
            continue
        phi = (p - 1) * (q - 1)
        if egcd(e, phi)[0] == 1:
            break
        logger.debug("e=%d not invertible modulo phi, drawing new primes", e)

    n = p * q
    d = inv_mod(e, phi)
    logger.info("generated %d-bit RSA modulus (strong=%s)", n.bit_length(), strong)
    return RSAKey(n=n, e=e, d=d, p=p, q=q)


def os2ip(data: bytes) -> int:
    """Convert a byte-string into its non-negative integer representation."""

    return int.from_bytes(data, "big", signed=False)


def i2osp(value: int, length: Optional[int] = None) -> bytes:
    """Convert an integer into a big-endian byte-string."""

    if value < 0:
        raise ValueError("Cannot convert negative integers")

    if length is None:
        length = (value.bit_length() + 7) // 8

    if value.bit_length() > length * 8:
        raise ValueError("Integer too large for the requested length")

    return value.to_bytes(length, "big") if length > 0 else b""


def encrypt_int(m: int, e: int, n: int) -> int:
    if not (0 <= m < n):
        raise ValueError("Message representative out of range")
    return modular_exponent(m, e, n)


def decrypt_int(
    c: int,
    d: int,
    n: int,
    *,
    e: Optional[int] = None,
    random_source: Optional[RandomSource] = None,
) -> int:
    """Compute ``c**d mod n``, blinded with a random ``r`` when ``e`` is given."""

    if not (0 <= c < n):
        raise ValueError("Ciphertext representative out of range")

    if e is None:
        return modular_exponent(c, d, n)

    source = default_source(random_source)
    while True:
        r = source.random_range(1, n)
        if egcd(r, n)[0] == 1:
            break
    blinded = (c * modular_exponent(r, e, n)) % n
    m_blinded = modular_exponent(blinded, d, n)
    return (m_blinded * inv_mod(r, n)) % n


def rsa_roundtrip(
    bits: int = 512,
    *,
    security: int,
    strong: bool = False,
    random_source: Optional[RandomSource] = None,
    message: bytes = b"hi rsa",
) -> Tuple[RSAKey, bool]:
    """Generate a key and check that encrypt/decrypt returns ``message``."""

    key = generate_key(bits, security=security, strong=strong, random_source=random_source)
    m = os2ip(message)
    if m >= key.n:
        raise InvalidParameterError("message does not fit in the modulus")
    c = encrypt_int(m, key.e, key.n)
    dec = decrypt_int(c, key.d, key.n, e=key.e, random_source=random_source)
    return key, i2osp(dec) == message


__all__ = [
    "RSAKey",
    "egcd",
    "inv_mod",
    "generate_key",
    "os2ip",
    "i2osp",
    "encrypt_int",
    "decrypt_int",
    "rsa_roundtrip",
]
