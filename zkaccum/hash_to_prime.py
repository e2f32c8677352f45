"""
Hash-to-Prime and Hash-to-Integer Conversion

Converts arbitrary byte data (element encodings, Fiat-Shamir transcripts) to
primes and large integers suitable for accumulator exponents and challenges.
"""

import hashlib
import struct


def _mr_is_probable_prime(n: int, rounds: int = 64) -> bool:
    """Deterministic Miller-Rabin primality test."""
    if n < 2:
        return False
    small = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    for p in small:
        if n == p:
            return True
        if n % p == 0:
            return False
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    seed = n.to_bytes((n.bit_length() + 7) // 8, "big")
    for i in range(rounds):
        h = hashlib.sha256(seed + i.to_bytes(4, "big")).digest()
        a = 2 + (int.from_bytes(h, "big") % (n - 3))
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True


def is_probable_prime(n: int, rounds: int = 64) -> bool:
    """Public wrapper around the deterministic Miller-Rabin test."""
    return _mr_is_probable_prime(n, rounds)


def hash_to_prime(data: bytes, *, min_bits: int = 256, max_attempts: int = 100_000, mr_rounds: int = 64) -> int:
    """
    Convert bytes to a prime number using deterministic SHA-256 and Miller-Rabin.

    The SHA-256 digest seeds a candidate which is forced odd and at least
    ``min_bits`` long; successive odd candidates are tested until one passes.

    Args:
        data: The input bytes to convert (element encoding or transcript)
        min_bits: Minimum bit length for the prime (default: 256)
        max_attempts: Maximum number of attempts to find a prime (default: 100_000)
        mr_rounds: Number of Miller-Rabin rounds (default: 64)

    Returns:
        int: A prime number derived from the input bytes

    Raises:
        ValueError: If no prime is found within max_attempts
        TypeError: If data is not bytes

    Example:
        >>> prime = hash_to_prime(b"revoked-credential-42")
        >>> assert _mr_is_probable_prime(prime)
    """
    if not isinstance(data, bytes):
        raise TypeError("data must be bytes")
    if not data:
        raise ValueError("data cannot be empty")
    if max_attempts <= 0:
        raise ValueError("max_attempts must be positive")
    if min_bits < 64:
        raise ValueError("min_bits should be >= 64")

    digest = hashlib.sha256(data).digest()
    # Stretch the digest when more than 256 bits are requested
    counter = 0
    while len(digest) * 8 < min_bits:
        counter += 1
        digest += hashlib.sha256(data + counter.to_bytes(4, "big")).digest()

    base = int.from_bytes(digest, "big")
    if base.bit_length() < min_bits:
        base |= (1 << (min_bits - 1))
    if base % 2 == 0:
        base += 1

    cand = base
    for _ in range(max_attempts):
        if _mr_is_probable_prime(cand, mr_rounds):
            return cand
        cand += 2

    raise ValueError("Could not find prime within max_attempts")


def hash_to_int(data: bytes, n_bytes: int = 32) -> int:
    """
    Hash bytes to a non-negative integer of exactly ``n_bytes`` of entropy.

    BLAKE2b output is extended with a block counter when more than 64 bytes
    are requested.

    Raises:
        TypeError: If data is not bytes
        ValueError: If n_bytes is not positive
    """
    if not isinstance(data, bytes):
        raise TypeError("data must be bytes")
    if n_bytes <= 0:
        raise ValueError("n_bytes must be positive")

    out = b""
    block = 0
    while len(out) < n_bytes:
        out += hashlib.blake2b(data, person=b"zkaccum-int", salt=block.to_bytes(16, "big")).digest()
        block += 1
    return int.from_bytes(out[:n_bytes], "big")


def int_to_bytes(n: int) -> bytes:
    """Signed big-endian encoding of an integer, minimal width (at least one byte)."""
    return n.to_bytes((n.bit_length() + 8) // 8, "big", signed=True)


def encode_transcript(*parts: bytes) -> bytes:
    """
    Length-prefix and concatenate byte strings.

    Each part is prefixed with its length as an 8-byte big-endian integer so
    that distinct part sequences never encode to the same transcript.
    """
    out = bytearray()
    for part in parts:
        if not isinstance(part, bytes):
            raise TypeError("transcript parts must be bytes")
        out += struct.pack(">Q", len(part))
        out += part
    return bytes(out)
