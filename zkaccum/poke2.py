"""
Non-Interactive Proof of Knowledge of Exponent (NI-PoKE2)

Proves knowledge of a possibly negative integer ``e`` with ``base^e == result``
without revealing ``e``. See Boneh, Bünz and Fisch, "Batching Techniques for
Accumulators with Applications to IOPs and Stateless Blockchains", section 3.2.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .challenge import FiatShamir, resolve
from .group import Elem, Group, InvertibleGroup
from .hash_to_prime import int_to_bytes
from .util import div_floor, mod_euc

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoKE2:
    """Proof triple ``(z, Q, r)`` with ``0 <= r < l``."""

    z: Elem
    Q: Elem
    r: int

    def __iter__(self) -> Iterator:
        return iter((self.z, self.Q, self.r))


def _challenges(group: Group, base: Elem, result: Elem, z: Elem, challenge: FiatShamir) -> Tuple[int, int]:
    base_bytes = group.elem_to_bytes(base)
    result_bytes = group.elem_to_bytes(result)
    z_bytes = group.elem_to_bytes(z)
    l = challenge.hash_prime(base_bytes, result_bytes, z_bytes)
    alpha = challenge.hash_int(base_bytes, result_bytes, z_bytes, int_to_bytes(l))
    return l, alpha


def prove_poke2(group: InvertibleGroup, base: Elem, exp: int, result: Elem, *, challenge: Optional[FiatShamir] = None) -> PoKE2:
    """Prove knowledge of ``exp`` such that ``base^exp == result``."""
    g = group.base_elem()
    z = group.exp_signed(g, exp)
    l, alpha = _challenges(group, base, result, z, resolve(challenge))

    q = div_floor(exp, l)
    r = mod_euc(exp, l)
    Q = group.exp_signed(group.op(base, group.exp(g, alpha)), q)

    logger.debug(f"PoKE2 proof built with {l.bit_length()}-bit challenge prime")
    return PoKE2(z=z, Q=Q, r=r)


def verify_poke2(group: Group, base: Elem, result: Elem, proof: PoKE2, *, challenge: Optional[FiatShamir] = None) -> bool:
    """Check ``Q^l * (base * g^alpha)^r == result * z^alpha``."""
    z, Q, r = proof
    g = group.base_elem()
    l, alpha = _challenges(group, base, result, z, resolve(challenge))

    if r < 0 or r >= l:
        return False

    lhs = group.op(
        group.exp(Q, l),
        group.exp(group.op(base, group.exp(g, alpha)), r),
    )
    rhs = group.op(result, group.exp(z, alpha))
    return lhs == rhs
