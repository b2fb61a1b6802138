"""
⚠️ DRAFT — requires crypto review before production use

Group parameters for the Pedersen VSS scheme.

The scheme works in the multiplicative group modulo a safe prime p = 2q + 1.
Its order-q subgroup is the group of quadratic residues, which is where the
generators g and h live.

DEFAULT_GROUP is built once, at import time, from the constants in config.
If the constants are malformed the import itself fails: there is no
degraded mode in which commitments could be computed with a broken group.
"""

from dataclasses import dataclass

from .config import (
    MIN_MODULUS_BITS,
    SAFE_PRIME_HEX,
    SOPHIE_GERMAIN_PRIME_HEX,
)
from .exceptions import GroupInitializationError


@dataclass(frozen=True)
class GroupParameters:
    """
    Safe-prime group parameters.

    Attributes:
        p: Safe prime modulus
        q: Sophie Germain prime, order of the subgroup used by the scheme
    """

    p: int
    q: int

    @property
    def cofactor(self) -> int:
        """k = (p - 1) / q, equal to 2 for a safe prime."""
        return (self.p - 1) // self.q

    @property
    def byte_length(self) -> int:
        """Fixed width of a big-endian encoded element of Z*_p."""
        return (self.p.bit_length() + 7) // 8

    def contains(self, element: int) -> bool:
        """Check that element is a member of the order-q subgroup."""
        if not isinstance(element, int) or isinstance(element, bool):
            return False
        if not 0 < element < self.p:
            return False
        return pow(element, self.q, self.p) == 1


def _parse_integer(text: str, name: str) -> int:
    if not isinstance(text, str):
        raise GroupInitializationError(
            f"failed to initialize {name}: expected str, got {type(text)}"
        )
    try:
        # base 0 honours the 0x prefix of the canonical encoding
        return int(text, 0)
    except ValueError as e:
        raise GroupInitializationError(f"failed to initialize {name}") from e


def load_group_parameters(p_text: str, q_text: str) -> GroupParameters:
    """
    Parse and check group parameters from their textual encodings.

    Only cheap structural checks run here. Primality is checked by
    verify_primality(), which is too slow to run on every import.

    Args:
        p_text: Safe prime, e.g. "0xc852..."
        q_text: Sophie Germain prime

    Returns:
        GroupParameters

    Raises:
        GroupInitializationError: If either value fails to parse or the
            pair is not of the form p = 2q + 1
    """
    p = _parse_integer(p_text, "p")
    q = _parse_integer(q_text, "q")

    if p <= 0 or q <= 0:
        raise GroupInitializationError("p and q must be positive")

    if p != 2 * q + 1:
        raise GroupInitializationError("p must equal 2q + 1")

    if p.bit_length() < MIN_MODULUS_BITS:
        raise GroupInitializationError(
            f"p too small: {p.bit_length()} bits < {MIN_MODULUS_BITS}"
        )

    return GroupParameters(p=p, q=q)


def verify_primality(group: GroupParameters) -> bool:
    """
    Probabilistic primality check of p and q.

    Uses petlib (OpenSSL BN_is_prime_ex, error probability below 2^-80).

    Args:
        group: Parameters to check

    Returns:
        True if both p and q are (probably) prime

    Raises:
        GroupInitializationError: If p or q is composite
    """
    from petlib.bn import Bn

    for name, value in (("q", group.q), ("p", group.p)):
        if not Bn.from_decimal(str(value)).is_prime():
            raise GroupInitializationError(f"{name} is not prime")

    return True


# Built once at import; failure aborts startup
DEFAULT_GROUP = load_group_parameters(SAFE_PRIME_HEX, SOPHIE_GERMAIN_PRIME_HEX)
