"""
Integer Utilities for Accumulator Proofs

Bezout coefficients, Euclidean division and products over arbitrary-size
Python integers.
"""

from functools import reduce
import operator
from typing import Iterable, Optional, Tuple


def bezout(x: int, y: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.

    Computes gcd(x, y) and coefficients a, b such that a*x + b*y = gcd(x, y).

    Args:
        x: First integer
        y: Second integer

    Returns:
        Tuple[int, int, int]: (a, b, gcd) with gcd >= 0

    Example:
        >>> a, b, gcd = bezout(35, 15)
        >>> assert gcd == 5
        >>> assert 35 * a + 15 * b == 5
    """
    a, a1 = 1, 0
    b, b1 = 0, 1
    g, g1 = x, y
    while g1:
        q = g // g1
        a, a1 = a1, a - q * a1
        b, b1 = b1, b - q * b1
        g, g1 = g1, g - q * g1

    if g < 0:
        return -a, -b, -g
    return a, b, g


def mod_euc(x: int, m: int) -> int:
    """
    Euclidean remainder: the unique r with 0 <= r < |m| and x ≡ r (mod m).

    Raises:
        ZeroDivisionError: If m is zero
    """
    return x % abs(m)


def div_floor(x: int, m: int) -> int:
    """Floor of x / m, rounding towards negative infinity."""
    return x // m


def product(elems: Iterable[int]) -> int:
    """Product of all elements; 1 for an empty iterable."""
    return reduce(operator.mul, elems, 1)


def modular_inverse(a: int, m: int) -> Optional[int]:
    """
    Compute modular inverse of a modulo m.

    Finds x such that (a * x) ≡ 1 (mod m), if it exists.

    Args:
        a: Number to find inverse for
        m: Modulus

    Returns:
        Optional[int]: Modular inverse if it exists, None otherwise

    Raises:
        ValueError: If m is not positive

    Example:
        >>> inv = modular_inverse(3, 7)
        >>> assert (3 * inv) % 7 == 1
    """
    if m <= 0:
        raise ValueError("Modulus m must be positive")

    a = a % m
    if a == 0:
        return None

    x, _, gcd = bezout(a, m)

    if gcd != 1:
        return None  # Inverse doesn't exist

    return x % m
