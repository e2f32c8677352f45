"""
Universal Cryptographic Accumulator

This package provides a group-generic accumulator with batch add/delete,
aggregated membership proofs and succinct non-membership proofs built on
PoE, PoKE2 and Shamir's trick.
"""

from .accumulator import (
    NonMembershipProof,
    add,
    delete,
    prove_membership,
    prove_nonmembership,
    recompute_root,
    setup,
    shamir_trick,
    verify_membership,
    verify_nonmembership,
)
from .challenge import FiatShamir, FixedPrimeChallenge, default_challenge
from .errors import AccError, BadWitness, InputsNotCoPrime
from .group import Group, InvertibleGroup, RSAGroup, ToyRSAGroup
from .hash_to_prime import hash_to_int, hash_to_prime
from .poe import PoE, prove_poe, verify_poe
from .poke2 import PoKE2, prove_poke2, verify_poke2
from .rsa_params import load_params
from .witness import (
    batch_membership_witnesses,
    membership_witness,
    update_witness_on_addition,
    update_witness_on_deletion,
    verify_witness,
)

__version__ = "0.1.0"
__all__ = [
    "setup",
    "add",
    "delete",
    "prove_membership",
    "verify_membership",
    "prove_nonmembership",
    "verify_nonmembership",
    "NonMembershipProof",
    "recompute_root",
    "shamir_trick",
    "PoE",
    "prove_poe",
    "verify_poe",
    "PoKE2",
    "prove_poke2",
    "verify_poke2",
    "FiatShamir",
    "FixedPrimeChallenge",
    "default_challenge",
    "AccError",
    "BadWitness",
    "InputsNotCoPrime",
    "Group",
    "InvertibleGroup",
    "RSAGroup",
    "ToyRSAGroup",
    "hash_to_prime",
    "hash_to_int",
    "load_params",
    "verify_witness",
    "membership_witness",
    "batch_membership_witnesses",
    "update_witness_on_addition",
    "update_witness_on_deletion",
]
