"""
Witness Computation and Refresh

Computes membership witnesses from a known committed set and updates
existing witnesses when other elements are added or removed.
"""

from typing import Dict, Iterable, List, Sequence

from .accumulator import recompute_root, shamir_trick
from .errors import BadWitness, InputsNotCoPrime
from .group import Elem, Group, InvertibleGroup
from .util import product


def verify_witness(group: Group, acc: Elem, elem: int, witness: Elem) -> bool:
    """
    Verify that ``elem`` is a member of ``acc`` using ``witness``.

    Verification equation: witness^elem == acc
    """
    if elem <= 0:
        return False
    return group.exp(witness, elem) == acc


def membership_witness(group: Group, acc_set: Iterable[int], elem: int) -> Elem:
    """
    Compute the membership witness for ``elem``.

    The witness is the accumulator of every committed element except one
    occurrence of ``elem``: ``g^(product of acc_set without elem)``.

    Args:
        group: Group the accumulator lives in
        acc_set: Complete list of committed elements
        elem: Element to compute the witness for

    Returns:
        Witness for ``elem``

    Raises:
        ValueError: If ``elem`` is not in ``acc_set``

    Example:
        >>> # If set is {3, 5, 7} and we want witness for 5
        >>> witness = membership_witness(group, [3, 5, 7], 5)
        >>> # witness = g^(3*7)
    """
    remaining = list(acc_set)
    if elem not in remaining:
        raise ValueError(f"Element {elem} not found in acc_set")

    remaining.remove(elem)
    return recompute_root(group, remaining)


def batch_membership_witnesses(group: Group, acc_set: Sequence[int]) -> Dict[int, Elem]:
    """
    Compute witnesses for every element of ``acc_set``.

    Uses the RootFactor divide-and-conquer: each half's witnesses are computed
    from a base already raised to the product of the other half, so the total
    cost is O(n log n) exponentiations instead of O(n^2).

    Returns:
        Dict[int, Elem]: Mapping from element -> witness

    Example:
        >>> witnesses = batch_membership_witnesses(group, [3, 5, 7, 11])
        >>> # witnesses[5] = g^(3*7*11)
    """
    elems = list(acc_set)
    if not elems:
        return {}

    def root_factor(base: Elem, chunk: List[int]) -> List[Elem]:
        if len(chunk) == 1:
            return [base]
        half = len(chunk) // 2
        left, right = chunk[:half], chunk[half:]
        left_base = group.exp(base, product(right))
        right_base = group.exp(base, product(left))
        return root_factor(left_base, left) + root_factor(right_base, right)

    witnesses = root_factor(group.base_elem(), elems)
    return dict(zip(elems, witnesses))


def update_witness_on_addition(group: Group, witness: Elem, added: Iterable[int]) -> Elem:
    """
    Update an existing witness after elements were added to the set.

    new_witness = witness^(product of added)
    """
    added_list = list(added)
    if any(elem <= 0 for elem in added_list):
        raise ValueError("All elements must be positive")

    return group.exp(witness, product(added_list))


def update_witness_on_deletion(
    group: InvertibleGroup,
    witness: Elem,
    elem: int,
    new_acc: Elem,
    deleted: Iterable[int],
) -> Elem:
    """
    Update a witness after other elements were deleted from the set.

    The old witness is an ``elem``-th root of the old accumulator and
    ``new_acc`` is a ``product(deleted)``-th root of it, so Shamir's trick
    yields their joint root, which is the witness for ``elem`` against
    ``new_acc``. No trapdoor is needed.

    Args:
        group: Group the accumulator lives in
        witness: Witness for ``elem`` against the accumulator before deletion
        elem: Element whose witness is refreshed
        new_acc: Accumulator after deletion
        deleted: Elements that were removed

    Returns:
        Witness for ``elem`` against ``new_acc``

    Raises:
        BadWitness: If ``witness`` and ``new_acc`` are not roots of the same value
        InputsNotCoPrime: If ``elem`` shares a factor with the deleted elements
    """
    deleted_product = product(deleted)
    if elem <= 0 or deleted_product <= 0:
        raise ValueError("All elements must be positive")

    if group.exp(witness, elem) != group.exp(new_acc, deleted_product):
        raise BadWitness(elem, "witness and new accumulator are roots of different values")

    updated = shamir_trick(group, witness, new_acc, elem, deleted_product)
    if updated is None:
        raise InputsNotCoPrime(elem, deleted_product)
    return updated
