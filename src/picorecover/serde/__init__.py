"""Serialization / deserialization (serde): integer text, Base32 fields, public keys."""

from .codec import (BASE32_ALPHABETS, FIELD_SIZE, PUBKEY_SIZE, decode_base32_field,
                    decode_pubkey, encode_pubkey, encode_pubkey_base32,
                    encode_pubkey_hex, parse_integer)

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
