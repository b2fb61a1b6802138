"""Public API for pedersen_vss.

Pedersen-style verifiable trapdoor commitments over a fixed 4096-bit
safe-prime group.

    >>> from pedersen_vss import generate_parameters, commit, verify
    >>> params = generate_parameters()
    >>> commitment, key = commit(params, b"hello")
    >>> verify(commitment, key, b"hello")
    True

NOTE:
Importing this package builds the group parameters. A malformed group
constant raises GroupInitializationError from the import itself.
"""
from __future__ import annotations

from importlib import import_module

from .commitments import (
    Commitment,
    DecommitmentKey,
    VSSParameters,
    calculate_commitment,
    commit,
    generate_parameters,
    verify,
)
from .exceptions import (
    ConfigurationError,
    CryptographicError,
    GroupInitializationError,
    PedersenVSSError,
    RandomnessError,
    SecurityError,
    SerializationError,
)
from .feature_flags import get_h_source_mode, set_h_source_mode
from .group import DEFAULT_GROUP, GroupParameters, load_group_parameters
from .security import RandomnessSource

__version__ = "0.1.0"

__all__ = [
    "generate_parameters",
    "commit",
    "verify",
    "calculate_commitment",
    "VSSParameters",
    "Commitment",
    "DecommitmentKey",
    "GroupParameters",
    "DEFAULT_GROUP",
    "load_group_parameters",
    "RandomnessSource",
    "get_h_source_mode",
    "set_h_source_mode",
    "PedersenVSSError",
    "ConfigurationError",
    "GroupInitializationError",
    "CryptographicError",
    "RandomnessError",
    "SecurityError",
    "SerializationError",
    "encode_parameters",
    "decode_parameters",
    "encode_commitment",
    "decode_commitment",
    "encode_decommitment_key",
    "decode_decommitment_key",
]

# cbor2 is only imported when the wire helpers are used
_LAZY_EXPORTS = {
    "encode_parameters": "serialization",
    "decode_parameters": "serialization",
    "encode_commitment": "serialization",
    "decode_commitment": "serialization",
    "encode_decommitment_key": "serialization",
    "decode_decommitment_key": "serialization",
}


def __getattr__(name: str):
    if name in _LAZY_EXPORTS:
        module = import_module(f"{__name__}.{_LAZY_EXPORTS[name]}")
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
