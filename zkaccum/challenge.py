"""
Fiat-Shamir Challenge Derivation

PoE and PoKE2 turn interactive challenges into hashes of the public
transcript. The derivation is pluggable: every prover/verifier accepts a
``challenge`` object, and ``default_challenge()`` builds a real
hash-to-prime derivation from the package settings.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .config import Settings, get_settings
from .hash_to_prime import encode_transcript, hash_to_int, hash_to_prime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FiatShamir:
    """Hash-based challenge derivation over length-prefixed transcripts."""

    prime_bits: int = 256
    mr_rounds: int = 64
    max_attempts: int = 100_000
    alpha_bytes: int = 32

    def hash_prime(self, *parts: bytes) -> int:
        """Challenge prime ``l`` for the given transcript parts."""
        return hash_to_prime(
            encode_transcript(*parts),
            min_bits=self.prime_bits,
            max_attempts=self.max_attempts,
            mr_rounds=self.mr_rounds,
        )

    def hash_int(self, *parts: bytes) -> int:
        """Large pseudo-random challenge integer for the given transcript parts."""
        return hash_to_int(encode_transcript(*parts), self.alpha_bytes)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "FiatShamir":
        settings = settings or get_settings()
        return cls(
            prime_bits=settings.challenge_prime_bits,
            mr_rounds=settings.challenge_mr_rounds,
            max_attempts=settings.challenge_max_attempts,
            alpha_bytes=settings.challenge_alpha_bytes,
        )


@dataclass(frozen=True)
class FixedPrimeChallenge(FiatShamir):
    """
    Constant prime challenge, matching reference test vectors.

    A prover who knows ``l`` in advance can forge PoKE2 and PoE proofs, so this
    is only for reproducing the reference behaviour in tests.
    """

    prime: int = 13

    def __post_init__(self) -> None:
        logger.warning(f"Using fixed challenge prime {self.prime}; proofs built with it are not sound")

    def hash_prime(self, *parts: bytes) -> int:
        return self.prime


def default_challenge() -> FiatShamir:
    """Challenge derivation configured from the package settings."""
    return FiatShamir.from_settings()


def resolve(challenge: Optional[FiatShamir]) -> FiatShamir:
    return challenge if challenge is not None else default_challenge()
