"""
Group Capabilities

Accumulator and proof logic is written against the abstract ``Group`` and
``InvertibleGroup`` interfaces; concrete groups plug in underneath.
"""

import math
from abc import ABC, abstractmethod
from typing import Any, Optional

from .rsa_params import generate_toy_params, load_params, validate_params
from .util import modular_inverse

Elem = Any


class Group(ABC):
    """Operations the accumulator core needs from any group."""

    @abstractmethod
    def base_elem(self) -> Elem:
        """Canonical generator."""

    @abstractmethod
    def op(self, a: Elem, b: Elem) -> Elem:
        """Group operation."""

    @abstractmethod
    def exp(self, a: Elem, n: int) -> Elem:
        """Raise ``a`` to a non-negative power."""

    @abstractmethod
    def elem_to_bytes(self, a: Elem) -> bytes:
        """Canonical encoding used in Fiat-Shamir transcripts."""


class InvertibleGroup(Group):
    """Group with efficiently computable inverses."""

    @abstractmethod
    def inv(self, a: Elem) -> Elem:
        """Group inverse."""

    def exp_signed(self, a: Elem, n: int) -> Elem:
        """Raise ``a`` to a possibly negative power."""
        if n < 0:
            return self.inv(self.exp(a, -n))
        return self.exp(a, n)


class RSAGroup(InvertibleGroup):
    """
    Multiplicative group of integers modulo an RSA modulus N.

    Elements are plain ints in ``[0, N)``. Security relies on nobody knowing
    the factorization of N.
    """

    def __init__(self, modulus: int, generator: int):
        if modulus <= 1:
            raise ValueError("RSA modulus N must be greater than 1")
        if generator <= 0 or generator >= modulus:
            raise ValueError("Generator g must be in (0, N)")
        if math.gcd(modulus, generator) != 1:
            raise ValueError("RSA modulus N and generator g must be coprime")

        self.modulus = modulus
        self.generator = generator
        self._n_bytes = (modulus.bit_length() + 7) // 8

    @classmethod
    def from_params(cls, params_file: Optional[str] = None) -> "RSAGroup":
        """Group over the configured (or demo) 2048-bit parameters."""
        N, g = load_params(params_file)
        validate_params(N, g)
        return cls(N, g)

    def elem_of(self, value: int) -> int:
        """Map an integer into the group."""
        return value % self.modulus

    def base_elem(self) -> int:
        return self.generator

    def op(self, a: int, b: int) -> int:
        return (a * b) % self.modulus

    def exp(self, a: int, n: int) -> int:
        if n < 0:
            raise ValueError("Exponent must be non-negative, use exp_signed")
        return pow(a, n, self.modulus)

    def inv(self, a: int) -> int:
        inverse = modular_inverse(a, self.modulus)
        if inverse is None:
            raise ValueError(f"Element {a} is not invertible modulo N")
        return inverse

    def elem_to_bytes(self, a: int) -> bytes:
        return (a % self.modulus).to_bytes(self._n_bytes, "big")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RSAGroup):
            return NotImplemented
        return self.modulus == other.modulus and self.generator == other.generator

    def __hash__(self) -> int:
        return hash((type(self), self.modulus, self.generator))

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{self.modulus.bit_length()}-bit N, g={self.generator}>"


class ToyRSAGroup(RSAGroup):
    """Small fixed-modulus RSA group for tests. Its factorization is public."""

    def __init__(self) -> None:
        N, g = generate_toy_params()
        super().__init__(N, g)
