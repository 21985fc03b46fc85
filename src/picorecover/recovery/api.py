"""
Text and Base32 entry points for public key recovery.
"""

from __future__ import annotations

import logging

from ..errors import InvalidSignature
from ..serde import (decode_base32_field, encode_pubkey_base32,
                     encode_pubkey_hex, parse_integer)
from .pubkey import (check_recovery_id, recover_point_pubkey, recover_pubkey,
                     validate_inputs)

log = logging.getLogger(__name__)


def recover_pubkey_hex(msg_hash: str, sig_r: str, sig_s: str, recid: int) -> str:
    """
    Recover a public key from textual inputs.

    Args:
        msg_hash: Digest as decimal, 0x-prefixed hex or h-suffixed hex text.
        sig_r, sig_s: Signature components in the same textual forms.
        recid: Recovery id (0-3).

    Returns:
        128 lowercase hex characters: x then y, 64 digits each.
    """
    check_recovery_id(recid)
    e = parse_integer(msg_hash)
    r = parse_integer(sig_r)
    s = parse_integer(sig_s)
    log.debug("text inputs: e=%x r=%d s=%d recid=%d", e, r, s, recid)
    x, y = recover_point_pubkey(e, r, s, recid)
    return encode_pubkey_hex(x, y)


def recover_pubkey_base32(
    msg_hash: str, sig_r: str, sig_s: str, recid: int, alphabet: str = "cryptopp"
) -> str:
    """
    Recover a public key from Base32 inputs, each decoding to exactly 32 bytes.

    All three fields are decoded and length-checked before any curve work.

    Args:
        msg_hash, sig_r, sig_s: Base32 fields.
        recid: Recovery id (0-3).
        alphabet: "cryptopp" (default, Crypto++ Base32 wire format) or "rfc4648".

    Returns:
        Base32 text of the 64-byte public key (x || y), in the same alphabet.
    """
    check_recovery_id(recid)
    e = decode_base32_field(msg_hash, alphabet)
    r = decode_base32_field(sig_r, alphabet)
    s = decode_base32_field(sig_s, alphabet)
    log.debug("base32 inputs: e=%x r=%d s=%d recid=%d", e, r, s, recid)
    x, y = recover_point_pubkey(e, r, s, recid)
    return encode_pubkey_base32(x, y, alphabet)


def candidate_pubkeys(e: int, r: int, s: int) -> dict[int, bytes]:
    """
    Try every recovery id and collect the keys that recover and re-verify.

    Range errors on (e, r, s) are raised, not skipped.

    Returns:
        Mapping recovery id -> 64-byte public key, for the ids that succeed.
    """
    validate_inputs(e, r, s, 0)
    found: dict[int, bytes] = {}
    for recid in range(4):
        try:
            found[recid] = recover_pubkey(e, r, s, recid)
        except InvalidSignature as exc:
            log.debug("recovery id %d rejected: %s", recid, exc)
    return found


__all__: tuple[str, ...] = (
    "candidate_pubkeys",
    "recover_pubkey_base32",
    "recover_pubkey_hex",
)
