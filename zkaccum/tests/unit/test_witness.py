"""
Unit Tests for Witness Computation and Refresh

Tests witness generation from a known set and witness updates after
additions and deletions.
"""

import pytest

from zkaccum.accumulator import add, delete, recompute_root
from zkaccum.errors import BadWitness, InputsNotCoPrime
from zkaccum.witness import (
    batch_membership_witnesses,
    membership_witness,
    update_witness_on_addition,
    update_witness_on_deletion,
    verify_witness,
)


class TestWitnessComputation:
    """Test witness generation."""

    def test_membership_witness(self, toy_group, acc_set, init_acc):
        witness = membership_witness(toy_group, acc_set, 67)
        assert witness == toy_group.exp(toy_group.base_elem(), 41 * 89)
        assert verify_witness(toy_group, init_acc, 67, witness)

    def test_membership_witness_single_member(self, toy_group):
        assert membership_witness(toy_group, [13], 13) == toy_group.base_elem()

    def test_membership_witness_not_member(self, toy_group, acc_set):
        with pytest.raises(ValueError, match="not found"):
            membership_witness(toy_group, acc_set, 97)

    def test_verify_witness_rejects(self, toy_group, acc_set, init_acc):
        witness = membership_witness(toy_group, acc_set, 67)
        assert not verify_witness(toy_group, init_acc, 89, witness)
        assert not verify_witness(toy_group, init_acc, 0, witness)

    def test_batch_membership_witnesses(self, toy_group):
        elems = [3, 5, 7, 11, 13, 17, 19]
        acc = recompute_root(toy_group, elems)
        witnesses = batch_membership_witnesses(toy_group, elems)

        assert set(witnesses) == set(elems)
        for elem in elems:
            assert witnesses[elem] == membership_witness(toy_group, elems, elem)
            assert verify_witness(toy_group, acc, elem, witnesses[elem])

    def test_batch_membership_witnesses_empty(self, toy_group):
        assert batch_membership_witnesses(toy_group, []) == {}

    def test_batch_witnesses_feed_delete(self, toy_group, acc_set, init_acc):
        witnesses = batch_membership_witnesses(toy_group, acc_set)
        new_acc, _ = delete(toy_group, init_acc, [(67, witnesses[67]), (89, witnesses[89])])
        assert new_acc == recompute_root(toy_group, [41])


class TestWitnessUpdates:
    """Test witness updates after set changes."""

    def test_update_on_addition(self, toy_group, acc_set, init_acc):
        witness = membership_witness(toy_group, acc_set, 41)
        new_acc, _ = add(toy_group, init_acc, [5, 7])

        updated = update_witness_on_addition(toy_group, witness, [5, 7])
        assert verify_witness(toy_group, new_acc, 41, updated)
        assert updated == membership_witness(toy_group, acc_set + [5, 7], 41)

    def test_update_on_addition_validation(self, toy_group):
        with pytest.raises(ValueError):
            update_witness_on_addition(toy_group, toy_group.base_elem(), [5, -7])

    def test_update_on_deletion(self, toy_group, acc_set, init_acc):
        """A stale witness is refreshed without recomputing from the set."""
        witnesses = batch_membership_witnesses(toy_group, acc_set)
        new_acc, _ = delete(toy_group, init_acc, [(89, witnesses[89])])

        updated = update_witness_on_deletion(toy_group, witnesses[41], 41, new_acc, [89])
        assert verify_witness(toy_group, new_acc, 41, updated)
        assert updated == membership_witness(toy_group, [41, 67], 41)

    def test_update_on_batch_deletion(self, toy_group):
        elems = [3, 5, 7, 11, 13]
        acc = recompute_root(toy_group, elems)
        witnesses = batch_membership_witnesses(toy_group, elems)
        new_acc, _ = delete(toy_group, acc, [(7, witnesses[7]), (13, witnesses[13])])

        updated = update_witness_on_deletion(toy_group, witnesses[5], 5, new_acc, [7, 13])
        assert updated == toy_group.exp(toy_group.base_elem(), 3 * 11)

    def test_update_on_deletion_of_self(self, toy_group, acc_set, init_acc):
        witnesses = batch_membership_witnesses(toy_group, acc_set)
        new_acc, _ = delete(toy_group, init_acc, [(89, witnesses[89])])
        with pytest.raises(InputsNotCoPrime):
            update_witness_on_deletion(toy_group, witnesses[89], 89, new_acc, [89])

    def test_update_on_deletion_mismatch(self, toy_group, acc_set, init_acc):
        witnesses = batch_membership_witnesses(toy_group, acc_set)
        new_acc, _ = delete(toy_group, init_acc, [(89, witnesses[89])])
        with pytest.raises(BadWitness):
            update_witness_on_deletion(toy_group, witnesses[41], 41, new_acc, [67])
