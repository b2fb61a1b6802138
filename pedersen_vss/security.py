"""
⚠️ DRAFT — requires crypto review before production use

Security utilities for cryptographic operations.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.
"""

import hashlib
import hmac
import os
import secrets

from .config import HASH_FUNCTION
from .exceptions import RandomnessError


# ============================================================================
# RANDOMNESS SOURCE (Fork-Safe)
# ============================================================================


class RandomnessSource:
    """
    Cryptographically secure randomness with fork detection.

    Prevents catastrophic randomness reuse if process forks. A single
    instance may be shared between threads; every draw is independent.

    Example:
        >>> rng = RandomnessSource()
        >>> r = rng.random_nonzero_below(2**255)
        >>> assert 0 < r < 2**255 - 1
    """

    def __init__(self):
        """Initialize randomness source with fork detection."""
        self._pid = os.getpid()
        self._rng = secrets.SystemRandom()

    def _check_fork(self):
        if os.getpid() != self._pid:
            self.__init__()

    def random_below(self, max_value: int, operation: str = "random draw") -> int:
        """
        Get random integer in [0, max_value).

        Args:
            max_value: Upper bound (exclusive)
            operation: Name of the calling step, used in error messages

        Returns:
            Random integer in [0, max_value)

        Raises:
            RandomnessError: If the OS entropy source fails
        """
        self._check_fork()
        try:
            return self._rng.randrange(0, max_value)
        except (OSError, NotImplementedError) as e:
            raise RandomnessError(
                f"failed to generate random number [{e}]", operation
            ) from e

    def random_nonzero_below(self, n: int, operation: str = "random draw") -> int:
        """
        Get random integer in (0, n - 1) by rejection sampling.

        Draws from [0, n - 1) and redraws while the result is zero.
        The bound n - 1 itself is never returned, so the largest possible
        value is n - 2.
        Failures of the entropy source are raised, never retried or
        replaced with weaker randomness.

        Args:
            n: Bound, must be an int greater than 2
            operation: Name of the calling step, used in error messages

        Returns:
            Random integer x with 0 < x < n - 1

        Raises:
            ValueError: If n is not an int greater than 2
            RandomnessError: If the OS entropy source fails
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise ValueError(f"bound must be an integer, got {type(n)}")

        if n <= 2:
            raise ValueError(f"bound must be > 2, got {n}")

        x = 0
        while x == 0:
            x = self.random_below(n - 1, operation)
        return x


# ============================================================================
# HASH FUNCTIONS
# ============================================================================

_HASH_FUNCTIONS = {"SHA-256": hashlib.sha256}


def hash_to_integer(data: bytes, modulus: int) -> int:
    """
    Hash data to an integer in [0, modulus).

    Computes SHA-256(data), reads the digest as a big-endian integer and
    reduces it modulo `modulus`. Any byte string, including an empty one,
    is valid input.

    Args:
        data: Bytes to hash
        modulus: Reduction modulus (must be > 1)

    Returns:
        Integer in [0, modulus)

    Raises:
        TypeError: If data is not bytes-like
        ValueError: If modulus <= 1
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes, got {type(data)}")

    if modulus <= 1:
        raise ValueError(f"modulus must be > 1, got {modulus}")

    digest = _HASH_FUNCTIONS[HASH_FUNCTION](bytes(data)).digest()
    return int.from_bytes(digest, "big") % modulus


# ============================================================================
# ENCODING HELPERS
# ============================================================================


def int_to_bytes(value: int, length: int) -> bytes:
    """
    Fixed-width big-endian encoding of a non-negative integer.

    Raises:
        ValueError: If value is negative
        OverflowError: If value does not fit in length bytes
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return value.to_bytes(length, "big")


def int_from_bytes(data: bytes) -> int:
    """Inverse of int_to_bytes()."""
    return int.from_bytes(data, "big")


# ============================================================================
# CONSTANT-TIME OPERATIONS
# ============================================================================


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Constant-time comparison to prevent timing attacks.

    Uses hmac.compare_digest which is designed to prevent timing attacks
    by taking constant time regardless of the input values.

    Args:
        a: First byte string
        b: Second byte string

    Returns:
        True if a == b, False otherwise
    """
    return hmac.compare_digest(a, b)
