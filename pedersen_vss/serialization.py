"""
⚠️ DRAFT — requires crypto review before production use

CBOR wire encoding for scheme parameters, commitments and decommitment keys.

Transport between participants is up to the calling protocol. These helpers
only guarantee that g, h, c and r survive the trip bit-exact: integers are
written as unsigned big-endian byte strings, never as machine words.

Message layout (CBOR map):
    "v": format version (SERIALIZATION_VERSION)
    "t": type tag ("params", "commitment", "decommitment_key")
    remaining keys: type specific, see the encode_* functions
"""

from typing import Any, Dict

try:
    import cbor2
except ImportError:
    raise ImportError(
        "cbor2 is required for serialization. "
        "Install with: pip install cbor2"
    )

from .commitments import Commitment, DecommitmentKey, VSSParameters
from .config import SERIALIZATION_VERSION
from .exceptions import SerializationError
from .group import DEFAULT_GROUP, GroupParameters
from .security import int_from_bytes

_TYPE_PARAMS = "params"
_TYPE_COMMITMENT = "commitment"
_TYPE_DECOMMITMENT_KEY = "decommitment_key"


def _int_to_wire(value: int) -> bytes:
    if not isinstance(value, int) or isinstance(value, bool):
        raise SerializationError(f"cannot encode {type(value)} as an integer")
    if value < 0:
        raise SerializationError(f"cannot encode negative integer {value}")
    return value.to_bytes((value.bit_length() + 7) // 8 or 1, "big")


def _int_from_wire(obj: Dict[str, Any], key: str) -> int:
    data = obj.get(key)
    if not isinstance(data, bytes) or not data:
        raise SerializationError(f"Invalid field {key!r}: expected non-empty bytes")
    return int_from_bytes(data)


def _dumps(type_tag: str, fields: Dict[str, Any]) -> bytes:
    data = {"v": SERIALIZATION_VERSION, "t": type_tag}
    data.update(fields)
    try:
        return cbor2.dumps(data)
    except Exception as e:
        raise SerializationError(f"Failed to serialize {type_tag}: {e}") from e


def _loads(data: bytes, type_tag: str) -> Dict[str, Any]:
    if not isinstance(data, (bytes, bytearray)):
        raise SerializationError(f"data must be bytes, got {type(data)}")

    try:
        obj = cbor2.loads(data)
    except Exception as e:
        raise SerializationError(f"Failed to deserialize {type_tag}: {e}") from e

    if not isinstance(obj, dict):
        raise SerializationError(f"Invalid {type_tag} format: expected a map")

    version = obj.get("v")
    if version != SERIALIZATION_VERSION:
        raise SerializationError(
            f"Unsupported {type_tag} version: {version} "
            f"(expected {SERIALIZATION_VERSION})"
        )

    if obj.get("t") != type_tag:
        raise SerializationError(
            f"Unexpected message type {obj.get('t')!r} (expected {type_tag!r})"
        )

    return obj


# ============================================================================
# SCHEME PARAMETERS
# ============================================================================


def _params_fields(params: VSSParameters) -> Dict[str, bytes]:
    return {"g": _int_to_wire(params.g), "h": _int_to_wire(params.h)}


def _params_from_fields(obj: Dict[str, Any], group: GroupParameters) -> VSSParameters:
    # VSSParameters re-checks subgroup membership (SecurityError)
    return VSSParameters(
        g=_int_from_wire(obj, "g"), h=_int_from_wire(obj, "h"), group=group
    )


def encode_parameters(params: VSSParameters) -> bytes:
    """
    Serialize scheme parameters.

    Layout: {"v", "t": "params", "g": bytes, "h": bytes}

    Raises:
        SerializationError: If encoding fails
    """
    return _dumps(_TYPE_PARAMS, _params_fields(params))


def decode_parameters(
    data: bytes, group: GroupParameters = DEFAULT_GROUP
) -> VSSParameters:
    """
    Deserialize scheme parameters.

    Args:
        data: CBOR bytes from encode_parameters()
        group: Group the parameters belong to

    Raises:
        SerializationError: If data is malformed
        SecurityError: If g or h is not in the order-q subgroup
    """
    return _params_from_fields(_loads(data, _TYPE_PARAMS), group)


# ============================================================================
# COMMITMENT
# ============================================================================


def encode_commitment(commitment: Commitment) -> bytes:
    """
    Serialize a commitment together with its scheme parameters.

    Layout: {"v", "t": "commitment", "g", "h", "c": bytes}
    """
    fields = _params_fields(commitment.params)
    fields["c"] = _int_to_wire(commitment.value)
    return _dumps(_TYPE_COMMITMENT, fields)


def decode_commitment(
    data: bytes, group: GroupParameters = DEFAULT_GROUP
) -> Commitment:
    """
    Deserialize a commitment.

    The commitment value itself is not range checked here; verify()
    treats an out-of-range value as a failed verification.

    Raises:
        SerializationError: If data is malformed
        SecurityError: If the embedded g or h is not in the subgroup
    """
    obj = _loads(data, _TYPE_COMMITMENT)
    params = _params_from_fields(obj, group)
    return Commitment(params=params, value=_int_from_wire(obj, "c"))


# ============================================================================
# DECOMMITMENT KEY
# ============================================================================


def encode_decommitment_key(key: DecommitmentKey) -> bytes:
    """
    Serialize a decommitment key (reveal phase only).

    Layout: {"v", "t": "decommitment_key", "r": bytes}
    """
    return _dumps(_TYPE_DECOMMITMENT_KEY, {"r": _int_to_wire(key.r)})


def decode_decommitment_key(data: bytes) -> DecommitmentKey:
    """
    Deserialize a decommitment key.

    Raises:
        SerializationError: If data is malformed
    """
    obj = _loads(data, _TYPE_DECOMMITMENT_KEY)
    return DecommitmentKey(r=_int_from_wire(obj, "r"))
