"""
Accumulator Core Operations

Implements add, delete, membership and non-membership proofs for an
accumulator ``g^(product of elements)`` over any group implementing the
``Group`` capability. Accumulator values are passed in and returned; no
state is kept here.
"""

import logging
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

from .challenge import FiatShamir
from .errors import BadWitness, InputsNotCoPrime
from .group import Elem, Group, InvertibleGroup
from .poe import PoE, prove_poe, verify_poe
from .poke2 import PoKE2, prove_poke2, verify_poke2
from .util import bezout, product

logger = logging.getLogger(__name__)


class NonMembershipProof(NamedTuple):
    """Values returned by ``prove_nonmembership``, in verification order."""

    d: Elem
    v: Elem
    gv_inverse: Elem
    poke2_proof: PoKE2
    poe_proof: PoE


def _elements_product(elems: Iterable[int]) -> int:
    elem_list = list(elems)
    for elem in elem_list:
        if elem <= 0:
            raise ValueError("All elements must be positive")
    return product(elem_list)


def setup(group: Group) -> Elem:
    """
    Initial accumulator value, committing to the empty set.

    Example:
        >>> group = ToyRSAGroup()
        >>> acc = setup(group)
        >>> assert acc == group.base_elem()
    """
    return group.base_elem()


def recompute_root(group: Group, elems: Iterable[int]) -> Elem:
    """
    Recompute the accumulator from scratch given every committed element.

    Args:
        group: Group the accumulator lives in
        elems: Elements of the committed set

    Returns:
        Accumulator value ``g^(product of elems)``
    """
    return group.exp(group.base_elem(), _elements_product(elems))


def add(group: Group, acc: Elem, elems: Iterable[int], *, challenge: Optional[FiatShamir] = None) -> Tuple[Elem, PoE]:
    """
    Add ``elems`` to the accumulator ``acc``.

    Args:
        group: Group the accumulator lives in
        acc: Current accumulator value
        elems: Positive integers to add

    Returns:
        Tuple[Elem, PoE]: New accumulator and a proof that
        ``acc^(product of elems) == new_acc``

    Raises:
        ValueError: If any element is not positive

    Example:
        >>> new_acc, proof = add(group, acc, [5, 7, 11])
        >>> assert verify_poe(group, acc, 385, new_acc, proof)
    """
    x = _elements_product(elems)
    new_acc = group.exp(acc, x)
    poe_proof = prove_poe(group, acc, x, new_acc, challenge=challenge)
    logger.debug(f"Added elements with {x.bit_length()}-bit product")
    return new_acc, poe_proof


def delete(
    group: InvertibleGroup,
    acc: Elem,
    elem_witnesses: Sequence[Tuple[int, Elem]],
    *,
    challenge: Optional[FiatShamir] = None,
) -> Tuple[Elem, PoE]:
    """
    Remove the elements in ``elem_witnesses`` from the accumulator ``acc``.

    Pairs are processed left to right. Each witness must satisfy
    ``witness^elem == acc``; witnesses are merged with Shamir's trick into a
    single root of ``acc`` for the product of all removed elements, which is
    the new accumulator.

    Args:
        group: Group the accumulator lives in
        acc: Current accumulator value
        elem_witnesses: Sequence of (element, witness) pairs

    Returns:
        Tuple[Elem, PoE]: New accumulator and a proof that
        ``new_acc^(product of removed elements) == acc``

    Raises:
        BadWitness: On the first witness that does not match ``acc``
        InputsNotCoPrime: On the first element sharing a factor with the
            elements before it
    """
    if not elem_witnesses:
        # Empty product is 1 and acc^1 == acc
        poe_proof = prove_poe(group, acc, 1, acc, challenge=challenge)
        return acc, poe_proof

    elem_aggregate: Optional[int] = None
    acc_next: Elem = None

    for elem, witness in elem_witnesses:
        if elem <= 0:
            raise ValueError("All elements must be positive")

        if group.exp(witness, elem) != acc:
            logger.warning(f"Rejected witness for element {elem}")
            raise BadWitness(elem)

        if elem_aggregate is None:
            elem_aggregate = elem
            acc_next = witness
            continue

        combined = shamir_trick(group, acc_next, witness, elem_aggregate, elem)
        if combined is None:
            logger.warning(f"Element {elem} is not co-prime with previously deleted elements")
            raise InputsNotCoPrime(elem_aggregate, elem)

        acc_next = combined
        elem_aggregate *= elem

    poe_proof = prove_poe(group, acc_next, elem_aggregate, acc, challenge=challenge)
    logger.debug(f"Deleted {len(elem_witnesses)} elements")
    return acc_next, poe_proof


def prove_membership(
    group: InvertibleGroup,
    acc: Elem,
    elem_witnesses: Sequence[Tuple[int, Elem]],
    *,
    challenge: Optional[FiatShamir] = None,
) -> Tuple[Elem, PoE]:
    """
    Aggregate membership proof for every element in ``elem_witnesses``.

    Identical to ``delete``: the returned value is a witness for all the
    given elements at once, and the PoE certifies it.
    """
    return delete(group, acc, elem_witnesses, challenge=challenge)


def verify_membership(
    group: Group,
    witness: Elem,
    elems: Iterable[int],
    result: Elem,
    proof: PoE,
    *,
    challenge: Optional[FiatShamir] = None,
) -> bool:
    """
    Verify the proof returned by ``prove_membership``.

    Returns:
        bool: True if ``witness^(product of elems) == result`` is certified
    """
    exp = _elements_product(elems)
    return verify_poe(group, witness, exp, result, proof, challenge=challenge)


def prove_nonmembership(
    group: InvertibleGroup,
    acc: Elem,
    acc_set: Iterable[int],
    elems: Iterable[int],
    *,
    challenge: Optional[FiatShamir] = None,
) -> NonMembershipProof:
    """
    Prove that none of ``elems`` is in the set committed to by ``acc``.

    With Bezout coefficients ``a*x + b*s = 1`` for ``x = product(elems)`` and
    ``s = product(acc_set)``, publishes ``d = g^a`` and ``v = acc^b`` with a
    PoKE2 for ``b`` and a PoE for ``d^x == g * v^-1``.

    Raises:
        InputsNotCoPrime: If some element shares a factor with the set
    """
    x = _elements_product(elems)
    s = _elements_product(acc_set)
    a, b, gcd = bezout(x, s)

    if gcd != 1:
        logger.warning("Non-membership refused: elements share a factor with the accumulated set")
        raise InputsNotCoPrime(x, s)

    g = group.base_elem()
    d = group.exp_signed(g, a)
    v = group.exp_signed(acc, b)
    gv_inverse = group.op(g, group.inv(v))

    poke2_proof = prove_poke2(group, acc, b, v, challenge=challenge)
    poe_proof = prove_poe(group, d, x, gv_inverse, challenge=challenge)
    return NonMembershipProof(d, v, gv_inverse, poke2_proof, poe_proof)


def verify_nonmembership(
    group: Group,
    acc: Elem,
    elems: Iterable[int],
    d: Elem,
    v: Elem,
    gv_inverse: Elem,
    poke2_proof: PoKE2,
    poe_proof: PoE,
    *,
    challenge: Optional[FiatShamir] = None,
) -> bool:
    """Verify the PoKE2 and PoE returned by ``prove_nonmembership``."""
    x = _elements_product(elems)
    return (
        verify_poke2(group, acc, v, poke2_proof, challenge=challenge)
        and verify_poe(group, d, x, gv_inverse, poe_proof, challenge=challenge)
    )


def shamir_trick(group: InvertibleGroup, xth_root: Elem, yth_root: Elem, x: int, y: int) -> Optional[Elem]:
    """
    Compute the ``(x*y)``-th root of ``v`` from its ``x``-th and ``y``-th roots.

    Returns None when the roots disagree (``xth_root^x != yth_root^y``) or
    when ``x`` and ``y`` are not co-prime.
    """
    if group.exp(xth_root, x) != group.exp(yth_root, y):
        return None

    a, b, gcd = bezout(x, y)

    if gcd != 1:
        return None

    return group.op(
        group.exp_signed(xth_root, b),
        group.exp_signed(yth_root, a),
    )
