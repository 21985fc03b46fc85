"""
ECDSA public key recovery for secp256k1 with a 256-bit digest.
Curve arithmetic is delegated to python-ecdsa.
"""

from .__about__ import __version__
from .errors import (InternalInvariant, InvalidArgument, InvalidSignature,
                     RecoveryError)
from .recovery import (candidate_pubkeys, recover_point_pubkey,
                       recover_pubkey, recover_pubkey_base32,
                       recover_pubkey_hex)
from .serde import (decode_base32_field, decode_pubkey, encode_pubkey,
                    encode_pubkey_base32, encode_pubkey_hex, parse_integer)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Errors
    "InternalInvariant",
    "InvalidArgument",
    "InvalidSignature",
    "RecoveryError",
    # Recovery
    "candidate_pubkeys",
    "recover_point_pubkey",
    "recover_pubkey",
    "recover_pubkey_base32",
    "recover_pubkey_hex",
    # Serde
    "decode_base32_field",
    "decode_pubkey",
    "encode_pubkey",
    "encode_pubkey_base32",
    "encode_pubkey_hex",
    "parse_integer",
)
