"""
Unit tests for zkaccum components

Tests individual modules in isolation:
- test_util.py: Bezout coefficients and Euclidean division
- test_hash_to_prime.py: Hash-to-prime and hash-to-int conversion
- test_challenge.py: Fiat-Shamir challenge derivation
- test_rsa_params.py: RSA parameter loading and validation
- test_group.py: Group capabilities and RSA groups
- test_poe.py: Proof of exponentiation
- test_poke2.py: Proof of knowledge of exponent
- test_accumulator.py: Core accumulator operations
- test_witness.py: Witness computation and updates
- test_properties.py: Property-based tests
- test_config.py / test_logging_config.py: ambient configuration
"""
