"""
Non-Interactive Proof of Exponentiation (Wesolowski NI-PoE)

Certifies ``base^exp == result`` so that a verifier can check the relation
with two small exponentiations instead of one with the full exponent.
"""

from dataclasses import dataclass
from typing import Optional

from .challenge import FiatShamir, resolve
from .group import Elem, Group
from .hash_to_prime import int_to_bytes


@dataclass(frozen=True)
class PoE:
    """Quotient element ``Q = base^(exp // l)``."""

    Q: Elem


def _challenge_prime(group: Group, base: Elem, exp: int, result: Elem, challenge: FiatShamir) -> int:
    return challenge.hash_prime(
        group.elem_to_bytes(base),
        int_to_bytes(exp),
        group.elem_to_bytes(result),
    )


def prove_poe(group: Group, base: Elem, exp: int, result: Elem, *, challenge: Optional[FiatShamir] = None) -> PoE:
    """
    Prove that ``base^exp == result``.

    The relation is not checked; a false triple yields a proof that will
    not verify.

    Raises:
        ValueError: If exp is negative
    """
    if exp < 0:
        raise ValueError("PoE exponent must be non-negative")

    l = _challenge_prime(group, base, exp, result, resolve(challenge))
    return PoE(Q=group.exp(base, exp // l))


def verify_poe(group: Group, base: Elem, exp: int, result: Elem, proof: PoE, *, challenge: Optional[FiatShamir] = None) -> bool:
    """Check ``Q^l * base^(exp mod l) == result``."""
    if exp < 0:
        raise ValueError("PoE exponent must be non-negative")

    l = _challenge_prime(group, base, exp, result, resolve(challenge))
    r = exp % l
    return group.op(group.exp(proof.Q, l), group.exp(base, r)) == result
