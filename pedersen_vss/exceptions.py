"""
⚠️ DRAFT — requires crypto review before production use

Custom exceptions for the Pedersen VSS commitment scheme.

These exceptions provide structured error handling for cryptographic operations.
A verification mismatch is deliberately NOT an exception: verify() returns False.
"""


class PedersenVSSError(Exception):
    """Base exception for Pedersen VSS errors."""

    pass


class ConfigurationError(PedersenVSSError):
    """Configuration error."""

    pass


class GroupInitializationError(ConfigurationError):
    """Embedded group parameters are malformed (fatal at startup)."""

    pass


class CryptographicError(PedersenVSSError):
    """Cryptographic operation error."""

    pass


class RandomnessError(CryptographicError):
    """
    Secure random generator failure.

    Attributes:
        operation: Name of the step that requested randomness
            (e.g. "g generation", "r generation")
    """

    def __init__(self, message: str, operation: str = "random draw"):
        super().__init__(f"{operation} failed [{message}]")
        self.operation = operation


class SecurityError(PedersenVSSError):
    """Security requirement violation."""

    pass


class SerializationError(PedersenVSSError):
    """Encoding or decoding of scheme objects failed."""

    pass
