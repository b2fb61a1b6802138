"""
⚠️ DRAFT — requires crypto review before production use

Pedersen commitments over a safe-prime group, as used by Pedersen VSS.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

Pedersen Commitments:
    A trapdoor commitment scheme with the following properties:
    - Hiding: Commitment reveals nothing about the secret
    - Binding: Committer cannot open to a different secret, as long as
      the committer does not know log_g(h)

Mathematical Definition:
    c = g^digest * h^r mod p
    where digest = SHA-256(secret) mod q, r is the decommitment key and
    g, h are generators of the order-q subgroup of Z*_p (p = 2q + 1).

Lifecycle:
    1. generate_parameters() once per scheme execution
    2. commit() publishes the Commitment, keeps the DecommitmentKey secret
    3. the committer reveals secret + DecommitmentKey, anyone runs verify()

Security Requirements:
    1. Nobody acting as committer may know log_g(h). With the default
       "local" h source the generating party does know it; joint
       generation (coin flipping, section 4.2 of [GJKR 99]) has to be
       plugged in through `h_source`.
    2. r must be fresh cryptographic randomness for every commitment.

Timing Caveat:
    Python's built-in pow() is not constant time. The exponents digest
    and r may leak through timing to a local observer. Only the final
    comparison in verify() is constant time.

References:
    [Ped91b] T. Pedersen. Non-interactive and information-theoretic secure
        verifiable secret sharing. Crypto '91, LNCS 576, pp. 129-140.
    [GJKR 99] R. Gennaro, S. Jarecki, H. Krawczyk, T. Rabin. Secure
        Distributed Key Generation for Discrete-Log Based Cryptosystems.
        EUROCRYPT '99, LNCS 1592.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .exceptions import ConfigurationError, SecurityError
from .feature_flags import get_h_source_mode
from .group import DEFAULT_GROUP, GroupParameters
from .security import (
    RandomnessSource,
    constant_time_compare,
    hash_to_integer,
    int_to_bytes,
)

logger = logging.getLogger(__name__)

# Returns a jointly generated value in (0, p) for deriving h
HSource = Callable[[GroupParameters], int]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_bytes(value) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


# ============================================================================
# DATA TYPES
# ============================================================================


@dataclass(frozen=True)
class VSSParameters:
    """
    Scheme parameters for one execution of the protocol.

    Attributes:
        g: First generator of the order-q subgroup
        h: Second generator of the order-q subgroup
        group: Safe-prime group both generators belong to

    Both generators are checked on construction, so parameters decoded
    from the wire are held to the same invariants as generated ones.

    Raises:
        SecurityError: If g or h is outside [1, p-1] or outside the
            order-q subgroup
    """

    g: int
    h: int
    group: GroupParameters = field(default=DEFAULT_GROUP, repr=False)

    def __post_init__(self):
        for name in ("g", "h"):
            value = getattr(self, name)
            if not _is_int(value):
                raise SecurityError(f"{name} must be an integer, got {type(value)}")
            if not 0 < value < self.group.p:
                raise SecurityError(f"{name} must be in [1, p-1]")
            if not self.group.contains(value):
                raise SecurityError(f"{name} is not in the order-q subgroup")

    def commitment_to(
        self, secret: bytes, randomness_source: Optional[RandomnessSource] = None
    ) -> Tuple["Commitment", "DecommitmentKey"]:
        """Shorthand for commit(self, secret)."""
        return commit(self, secret, randomness_source)

    def to_dict(self) -> dict:
        return {"g": hex(self.g), "h": hex(self.h)}


@dataclass(frozen=True)
class Commitment:
    """
    A commitment to a single secret.

    Shared with verifiers right after it is produced. On its own it is not
    enough to check anything; verification also needs the DecommitmentKey
    and the secret, revealed later by the committer.

    Attributes:
        params: Scheme parameters the commitment was computed under
        value: Commitment value c in [0, p-1]
    """

    params: VSSParameters
    value: int

    def verify(self, decommitment_key: "DecommitmentKey", secret: bytes) -> bool:
        """Check the revealed secret against this commitment."""
        return verify(self, decommitment_key, secret)

    def to_dict(self) -> dict:
        return {"params": self.params.to_dict(), "value": hex(self.value)}


@dataclass(frozen=True)
class DecommitmentKey:
    """
    Key that opens a commitment.

    Kept secret by the committer until the reveal phase.

    Attributes:
        r: Blinding exponent in [1, q-1]
    """

    r: int = field(repr=False)

    def to_dict(self) -> dict:
        return {"r": hex(self.r)}


# ============================================================================
# PARAMETER GENERATION
# ============================================================================


def generate_parameters(
    randomness_source: Optional[RandomnessSource] = None,
    h_source: Optional[HSource] = None,
    group: Optional[GroupParameters] = None,
    mode: Optional[str] = None,
) -> VSSParameters:
    """
    Generate fresh scheme parameters for one protocol execution.

    ⚠️ SECURITY CRITICAL

    g = r1^2 mod p for random r1, a quadratic residue and so an element
    of the order-q subgroup.

    h = r2^k mod p with k = (p - 1) / q. The random value r2 must be
    generated jointly by the players (coin flipping) so that nobody knows
    log_g(h). Pass such a value through `h_source`. Without it, r2 is drawn
    locally, which is only acceptable when the generating party never
    commits (or in tests); the "external" mode forbids it.

    Args:
        randomness_source: Source for r1 (and r2 in local mode)
        h_source: Callable returning a jointly generated r2 in (0, p)
        group: Group parameters (defaults to the built-in 4096-bit group)
        mode: h source mode override ("local" or "external")

    Returns:
        VSSParameters

    Raises:
        RandomnessError: If the secure random generator fails
        ConfigurationError: If mode is "external" and no h_source is given
        SecurityError: If h_source returns a value outside (0, p)

    Example:
        >>> params = generate_parameters()
        >>> commitment, key = commit(params, b"hello")
        >>> assert verify(commitment, key, b"hello")
    """
    if group is None:
        group = DEFAULT_GROUP

    if randomness_source is None:
        randomness_source = RandomnessSource()

    r1 = randomness_source.random_nonzero_below(group.p, "g generation")
    g = pow(r1, 2, group.p)

    if h_source is None:
        if get_h_source_mode(mode) == "external":
            raise ConfigurationError(
                "h source mode is 'external' but no h_source was provided"
            )
        logger.warning(
            "Generating h unilaterally; the generating party may know log_g(h)"
        )
        r2 = randomness_source.random_nonzero_below(group.p, "h generation")
    else:
        r2 = h_source(group)
        if not _is_int(r2) or not 0 < r2 < group.p:
            raise SecurityError("h_source must return an integer in (0, p)")

    h = pow(r2, group.cofactor, group.p)

    logger.debug("Generated VSS parameters (%d-bit group)", group.p.bit_length())
    return VSSParameters(g=g, h=h, group=group)


# ============================================================================
# COMMITMENT OPERATIONS
# ============================================================================


def calculate_commitment(params: VSSParameters, digest: int, r: int) -> int:
    """
    Calculate g^digest * h^r mod p.

    Shared by commit() and verify(); both sides must evaluate exactly the
    same formula.

    Args:
        params: Scheme parameters (g, h, p)
        digest: Hashed secret, reduced mod q
        r: Decommitment key

    Returns:
        Commitment value in [0, p-1]
    """
    p = params.group.p
    return (pow(params.g, digest, p) * pow(params.h, r, p)) % p


def commit(
    params: VSSParameters,
    secret: bytes,
    randomness_source: Optional[RandomnessSource] = None,
) -> Tuple[Commitment, DecommitmentKey]:
    """
    Commit to a secret message.

    ⚠️ SECURITY CRITICAL

    Draws a random r in [1, q-1] as the decommitment key and computes
    c = g^digest * h^r mod p with digest = SHA-256(secret) mod q.
    The key MUST be kept secret until the reveal phase.

    Args:
        params: Scheme parameters from generate_parameters()
        secret: Message to commit to (any length, may be empty)
        randomness_source: Source for r (created if None)

    Returns:
        Tuple of (Commitment, DecommitmentKey)

    Raises:
        TypeError: If params or secret have the wrong type
        RandomnessError: If the secure random generator fails

    Example:
        >>> params = generate_parameters()
        >>> c1, k1 = commit(params, b"hello")
        >>> c2, k2 = commit(params, b"hello")
        >>> assert c1.value != c2.value  # fresh r every time
    """
    if not isinstance(params, VSSParameters):
        raise TypeError(f"params must be VSSParameters, got {type(params)}")

    if not _is_bytes(secret):
        raise TypeError(f"secret must be bytes, got {type(secret)}")

    if randomness_source is None:
        randomness_source = RandomnessSource()

    r = randomness_source.random_nonzero_below(params.group.q, "r generation")

    digest = hash_to_integer(secret, params.group.q)
    value = calculate_commitment(params, digest, r)

    logger.debug("Created commitment to %d-byte secret", len(secret))
    return Commitment(params=params, value=value), DecommitmentKey(r=r)


def verify(
    commitment: Commitment, decommitment_key: DecommitmentKey, secret: bytes
) -> bool:
    """
    Verify a revealed secret against a commitment.

    Recomputes the commitment from the secret and decommitment key and
    compares it to the published value in constant time.

    A mismatch is an expected outcome, not an error: a wrong secret, a
    wrong or out-of-range key, a malformed secret, a corrupted
    commitment value or arguments of the wrong type all return False.

    Args:
        commitment: Commitment received in the commit phase
        decommitment_key: Key revealed by the committer
        secret: Revealed secret

    Returns:
        bool: True if the secret matches the commitment

    Example:
        >>> params = generate_parameters()
        >>> commitment, key = commit(params, b"hello")
        >>> assert verify(commitment, key, b"hello")
        >>> assert not verify(commitment, key, b"hellp")
    """
    if not isinstance(commitment, Commitment):
        return False

    if not isinstance(decommitment_key, DecommitmentKey):
        return False

    if not _is_bytes(secret):
        return False

    params = commitment.params
    if not isinstance(params, VSSParameters):
        return False
    group = params.group

    r = decommitment_key.r
    if not _is_int(r) or not 0 < r < group.q:
        logger.debug("Rejected decommitment key outside [1, q-1]")
        return False

    value = commitment.value
    if not _is_int(value) or not 0 <= value < group.p:
        logger.debug("Rejected commitment value outside [0, p-1]")
        return False

    digest = hash_to_integer(secret, group.q)
    expected = calculate_commitment(params, digest, r)

    width = group.byte_length
    return constant_time_compare(
        int_to_bytes(expected, width), int_to_bytes(value, width)
    )
