"""
Wire formats around recovery: textual big integers, Base32 fields and the
fixed-width 64-byte public key (x || y, big-endian, 32 bytes each).
"""

from __future__ import annotations

import base64
import string

from ..curves import SECP256K1
from ..errors import InternalInvariant, InvalidArgument

FIELD_SIZE = 32
PUBKEY_SIZE = 2 * FIELD_SIZE

_DEC_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)

BASE32_ALPHABETS = {
    "rfc4648": "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567",
    # Crypto++ Base32Encoder/Base32Decoder default; no padding on output.
    "cryptopp": "ABCDEFGHIJKMNPQRSTUVWXYZ23456789",
}
_RFC4648 = BASE32_ALPHABETS["rfc4648"]
_TO_RFC4648 = {
    name: str.maketrans(symbols, _RFC4648) for name, symbols in BASE32_ALPHABETS.items()
}
_FROM_RFC4648 = {
    name: str.maketrans(_RFC4648, symbols) for name, symbols in BASE32_ALPHABETS.items()
}


def parse_integer(text: str) -> int:
    """
    Parse a textual big integer.

    Accepts decimal ("1234"), 0x-prefixed hex ("0xfcde...") and h-suffixed
    hex ("fcde...h"), with an optional leading sign. Surrounding whitespace
    is ignored.

    Args:
        text: Integer text.

    Returns:
        The parsed integer.
    """
    if not isinstance(text, str):
        raise InvalidArgument("malformed integer")
    body = text.strip()
    if not body:
        raise InvalidArgument("empty input")
    sign = 1
    if body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if body[:2] in ("0x", "0X"):
        digits, alphabet, base = body[2:], _HEX_DIGITS, 16
    elif body[-1:] in ("h", "H"):
        digits, alphabet, base = body[:-1], _HEX_DIGITS, 16
    else:
        digits, alphabet, base = body, _DEC_DIGITS, 10
    if not digits or not alphabet.issuperset(digits):
        raise InvalidArgument("malformed integer")
    return sign * int(digits, base)


def _base32_alphabet(alphabet: str) -> str:
    try:
        return BASE32_ALPHABETS[alphabet]
    except KeyError:
        raise InvalidArgument("unknown base32 alphabet") from None


def decode_base32_field(text: str | bytes, alphabet: str = "cryptopp") -> int:
    """
    Decode a Base32 field that must hold exactly 32 raw bytes.

    Args:
        text: Base32 text; case-insensitive, trailing "=" padding optional.
        alphabet: "cryptopp" (ABCDEFGHIJKMNPQRSTUVWXYZ23456789, unpadded)
            or "rfc4648" (A-Z2-7).

    Returns:
        The 32 bytes read as a big-endian unsigned integer.
    """
    symbols = _base32_alphabet(alphabet)
    if isinstance(text, bytes):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidArgument("malformed base32") from exc
    if not isinstance(text, str):
        raise InvalidArgument("malformed base32")
    body = text.strip().upper().rstrip("=")
    if not body:
        raise InvalidArgument("empty input")
    if not frozenset(symbols).issuperset(body):
        raise InvalidArgument("malformed base32")
    body = body.translate(_TO_RFC4648[alphabet])
    body += "=" * (-len(body) % 8)
    try:
        raw = base64.b32decode(body)
    except ValueError as exc:
        raise InvalidArgument("malformed base32") from exc
    if len(raw) != FIELD_SIZE:
        raise InvalidArgument("base32 field must decode to 32 bytes")
    return int.from_bytes(raw, "big")


def encode_pubkey(x: int, y: int) -> bytes:
    """64-byte public key: x then y, each zero-padded big-endian 32 bytes."""
    p = SECP256K1.p
    if not (0 <= x < p and 0 <= y < p):
        raise InternalInvariant("coordinate out of field range")
    return x.to_bytes(FIELD_SIZE, "big") + y.to_bytes(FIELD_SIZE, "big")


def encode_pubkey_hex(x: int, y: int) -> str:
    """128 lowercase hex characters, no separators."""
    return encode_pubkey(x, y).hex()


def encode_pubkey_base32(x: int, y: int, alphabet: str = "cryptopp") -> str:
    """Base32 text of the 64-byte public key; only "rfc4648" output is padded."""
    _base32_alphabet(alphabet)
    text = base64.b32encode(encode_pubkey(x, y)).decode("ascii")
    if alphabet != "rfc4648":
        text = text.rstrip("=")
    return text.translate(_FROM_RFC4648[alphabet])


def decode_pubkey(data: bytes) -> tuple[int, int]:
    """Split a 64-byte public key into its (x, y) coordinates."""
    if len(data) != PUBKEY_SIZE:
        raise InvalidArgument("public key must be 64 bytes")
    return (
        int.from_bytes(data[:FIELD_SIZE], "big"),
        int.from_bytes(data[FIELD_SIZE:], "big"),
    )


__all__: tuple[str, ...] = (
    "BASE32_ALPHABETS",
    "FIELD_SIZE",
    "PUBKEY_SIZE",
    "decode_base32_field",
    "decode_pubkey",
    "encode_pubkey",
    "encode_pubkey_base32",
    "encode_pubkey_hex",
    "parse_integer",
)
