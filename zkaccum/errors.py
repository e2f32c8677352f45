"""
Accumulator Errors

Recoverable failures raised by accumulator operations. Callers are expected to
catch these: a ``BadWitness`` usually means a malicious or stale witness, and an
``InputsNotCoPrime`` during non-membership proving means an element actually is
a member.
"""


class AccError(Exception):
    """Base class for recoverable accumulator failures."""


class BadWitness(AccError):
    """A supplied witness does not satisfy ``witness^element == accumulator``."""

    def __init__(self, element: int, message: str = "witness does not match accumulator"):
        super().__init__(f"{message} (element={element})")
        self.element = element


class InputsNotCoPrime(AccError):
    """Two exponents expected to be co-prime share a common factor."""

    def __init__(self, x: int, y: int, message: str = "inputs are not co-prime"):
        super().__init__(message)
        self.x = x
        self.y = y
