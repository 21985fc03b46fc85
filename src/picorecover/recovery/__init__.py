"""ECDSA public key recovery: validation, point recovery, key derivation, re-verification."""

from .api import candidate_pubkeys, recover_pubkey_base32, recover_pubkey_hex
from .pubkey import (check_recovery_id, derive_key, recover_point,
                     recover_point_pubkey, recover_pubkey, reverify,
                     validate_inputs)

__all__: tuple[str, ...] = (
    "candidate_pubkeys",
    "check_recovery_id",
    "derive_key",
    "recover_point",
    "recover_point_pubkey",
    "recover_pubkey",
    "recover_pubkey_base32",
    "recover_pubkey_hex",
    "reverify",
    "validate_inputs",
)
