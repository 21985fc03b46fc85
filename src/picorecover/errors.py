"""Typed failures raised by public key recovery."""

from __future__ import annotations


class RecoveryError(ValueError):
    """
    Base class for every recovery failure.

    Attributes:
        kind: Stable failure kind name.
        reason: Fixed, human-readable reason string.
    """

    kind: str = "RecoveryError"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason!r})"


class InvalidArgument(RecoveryError):
    """Malformed, empty or wrong-length input, or a recovery id outside [0, 3]."""

    kind = "InvalidArgument"


class InvalidSignature(RecoveryError):
    """Range or cryptographic validity failure of the signature."""

    kind = "InvalidSignature"


class InternalInvariant(RecoveryError):
    """Arithmetic provider broke its contract."""

    kind = "InternalInvariant"


__all__: tuple[str, ...] = (
    "InternalInvariant",
    "InvalidArgument",
    "InvalidSignature",
    "RecoveryError",
)
