"""
Accumulator Configuration

Environment-based configuration for logging and Fiat-Shamir challenge derivation.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings from environment variables (prefix ``ZKACCUM_``)."""

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    log_format: str = Field(
        default="json",
        description="Log format: json or text"
    )

    app_version: str = Field(
        default="0.1.0",
        description="Version reported in structured log records"
    )

    # Fiat-Shamir challenges
    challenge_prime_bits: int = Field(
        default=256,
        description="Minimum bit length of hash-to-prime challenges"
    )

    challenge_mr_rounds: int = Field(
        default=64,
        description="Miller-Rabin rounds used when deriving challenge primes"
    )

    challenge_max_attempts: int = Field(
        default=100_000,
        description="Candidates tried before hash-to-prime gives up"
    )

    challenge_alpha_bytes: int = Field(
        default=32,
        description="Width in bytes of the PoKE2 alpha challenge"
    )

    # RSA parameters
    params_file: Optional[str] = Field(
        default=None,
        description="Path to a JSON file holding hex-encoded N and g"
    )

    model_config = SettingsConfigDict(
        env_prefix="ZKACCUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value.lower() not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value.lower()

    @field_validator("challenge_prime_bits")
    @classmethod
    def _check_prime_bits(cls, value: int) -> int:
        if value < 64:
            raise ValueError("challenge_prime_bits should be >= 64")
        return value

    @field_validator("challenge_mr_rounds", "challenge_max_attempts", "challenge_alpha_bytes")
    @classmethod
    def _check_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be positive")
        return value


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get package settings."""
    return settings
