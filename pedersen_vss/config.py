"""
⚠️ DRAFT — requires crypto review before production use

Cryptographic configuration for the Pedersen VSS commitment scheme.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

The scheme works in the order-q subgroup of Z*_p where p = 2q + 1 is a
safe prime. Both primes are fixed constants shared by every participant.
"""

# ============================================================================
# GROUP PARAMETERS
# ============================================================================

# `p` is a 4096-bit safe prime.
SAFE_PRIME_HEX = "0x" + (
    "c8526644a9c4739683742b7003640b2023ca42cc018a42b02a551bb825c6828f"
    "86e2e216ea5d31004c433582a3fa720459efb42e091d73fb281810e1825691f0"
    "799811be62ae57f62ab00670edd35426d108d3b9c4fd008eddc67275a0489fe1"
    "32e4c31bd7069ea7884cbb8f8f9255fe7b87fc0099f246776c340912df48f794"
    "5bc2bc0bc6814978d27b7af2ebc41f458ae795186db0fd7e6151bb8a7fe2b413"
    "70f7a2848ef75d3ec88f3439022c10e78b434c2f24b2f40bd02930e6c8aadef8"
    "7b0dc87cdba07dcfa86884a168bd1381a4f48be12e5d98e41f954c37aec011cc"
    "683570e8890418756ed98ace8c8e59ae1df50962c1622fe66b5409f330cad6b7"
    "c68f2e884786d9807190b89ac4a3b3507e49b2dd3f33d765ad29e2015180c8cd"
    "0258dd8bdaab17be5d74871fec04c492240c6a2692b2c9a62c9adbaac34a333f"
    "135801ff948e8dfb6bbd6212a67950fb8edd628d05d19d1b94e9be7c52ed4848"
    "31d50adaa29e71de197e351878f1c40ec67ee809e824124529e27bd5ecf3054f"
    "6784153f7db27ff0c87420bb2b2754ed363fc2ba8399d49d291f342173e76191"
    "83467a9694efa243e1d41b26c13b38ca0f43bb7c9050eb966461f28436583a9d"
    "13d2c1465b78184eae360f009505ccea288a053d111988d55c12befd882a857a"
    "530efac2c0592987cd83c39844a10e058739ab1c39006a3123e7fc887845675f"
)

# `q` is a 4095-bit Sophie Germain prime, p = 2q + 1.
SOPHIE_GERMAIN_PRIME_HEX = "0x" + (
    "6429332254e239cb41ba15b801b2059011e5216600c52158152a8ddc12e34147"
    "c371710b752e988026219ac151fd39022cf7da17048eb9fd940c0870c12b48f8"
    "3ccc08df31572bfb1558033876e9aa13688469dce27e80476ee3393ad0244ff0"
    "9972618deb834f53c4265dc7c7c92aff3dc3fe004cf9233bb61a04896fa47bca"
    "2de15e05e340a4bc693dbd7975e20fa2c573ca8c36d87ebf30a8ddc53ff15a09"
    "b87bd142477bae9f64479a1c81160873c5a1a61792597a05e814987364556f7c"
    "3d86e43e6dd03ee7d4344250b45e89c0d27a45f0972ecc720fcaa61bd76008e6"
    "341ab87444820c3ab76cc56746472cd70efa84b160b117f335aa04f998656b5b"
    "e347974423c36cc038c85c4d6251d9a83f24d96e9f99ebb2d694f100a8c06466"
    "812c6ec5ed558bdf2eba438ff602624912063513495964d3164d6dd561a5199f"
    "89ac00ffca4746fdb5deb109533ca87dc76eb14682e8ce8dca74df3e2976a424"
    "18ea856d514f38ef0cbf1a8c3c78e207633f7404f412092294f13deaf67982a7"
    "b3c20a9fbed93ff8643a105d9593aa769b1fe15d41ccea4e948f9a10b9f3b0c8"
    "c1a33d4b4a77d121f0ea0d93609d9c6507a1ddbe482875cb3230f9421b2c1d4e"
    "89e960a32dbc0c27571b07804a82e6751445029e888cc46aae095f7ec41542bd"
    "29877d61602c94c3e6c1e1cc22508702c39cd58e1c80351891f3fe443c22b3af"
)

SAFE_PRIME_BITS = 4096
SOPHIE_GERMAIN_PRIME_BITS = 4095

# Smallest modulus accepted by load_group_parameters()
MIN_MODULUS_BITS = 2048

# ============================================================================
# HASH FUNCTIONS
# ============================================================================

# Secrets are hashed to an integer and reduced modulo q before committing
HASH_FUNCTION = "SHA-256"
HASH_OUTPUT_BITS = 256

# ============================================================================
# SECOND GENERATOR (h) SOURCE
# ============================================================================

# "local": h is derived by the generating party alone. The committer may then
#          know log_g(h), so binding does not hold against that party.
# "external": h must be derived from a jointly generated random value
#             (coin flipping) supplied by the caller.
H_SOURCE_MODES = ("local", "external")
DEFAULT_H_SOURCE_MODE = "local"
H_SOURCE_ENV_VAR = "PEDERSEN_VSS_H_SOURCE"

# ============================================================================
# SERIALIZATION
# ============================================================================

SERIALIZATION_FORMAT = "CBOR"
SERIALIZATION_VERSION = 1  # Increment for breaking changes

# ============================================================================
# VALIDATION
# ============================================================================


def validate_config() -> bool:
    """
    Validate configuration parameters.

    Returns:
        True if configuration is valid

    Raises:
        AssertionError: If configuration is invalid
    """
    assert SAFE_PRIME_HEX.startswith("0x"), "p must be hex encoded"
    assert SOPHIE_GERMAIN_PRIME_HEX.startswith("0x"), "q must be hex encoded"
    assert SAFE_PRIME_BITS == SOPHIE_GERMAIN_PRIME_BITS + 1, "p must be 2q + 1"
    assert SAFE_PRIME_BITS >= MIN_MODULUS_BITS, "Modulus too small"
    assert HASH_FUNCTION == "SHA-256", "Invalid hash function"
    assert HASH_OUTPUT_BITS == 256, "Hash output must be 256 bits"
    assert DEFAULT_H_SOURCE_MODE in H_SOURCE_MODES, "Invalid default h source"
    assert SERIALIZATION_FORMAT == "CBOR", "Invalid serialization format"

    return True


# Auto-validate on import
validate_config()
