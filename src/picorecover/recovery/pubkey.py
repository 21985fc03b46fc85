"""
ECDSA public key recovery on secp256k1 with a 256-bit digest.

Given a signature (r, s) over digest e and a recovery id, the signer's key is
Q = r^-1 (sR - eG), where R is the curve point whose x-coordinate reduces to r.
Every recovered key is re-verified against the signature before it is returned.
"""

from __future__ import annotations

import logging

from ecdsa.ellipticcurve import Point

from ..curves import (SECP256K1, inv_mod_n, is_infinity, make_point, on_curve,
                      point_add, point_mul, point_on_curve, point_sub,
                      sqrt_mod_p)
from ..errors import InvalidArgument, InvalidSignature
from ..serde import encode_pubkey

log = logging.getLogger(__name__)

DIGEST_BITS = 256
MAX_RECOVERY_ID = 3


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_recovery_id(recid: int) -> None:
    if not _is_int(recid) or not 0 <= recid <= MAX_RECOVERY_ID:
        raise InvalidArgument("recovery id out of range")


def validate_inputs(e: int, r: int, s: int, recid: int) -> None:
    """
    Range-check the inputs before any curve arithmetic.

    Raises:
        InvalidSignature: r or s outside [1, n), or e negative or wider than 256 bits.
        InvalidArgument: non-integer input or recovery id outside [0, 3].
    """
    if not (_is_int(e) and _is_int(r) and _is_int(s)):
        raise InvalidArgument("malformed integer")
    n = SECP256K1.n
    if not 0 < r < n:
        raise InvalidSignature("r out of range")
    if not 0 < s < n:
        raise InvalidSignature("s out of range")
    if e < 0 or e.bit_length() > DIGEST_BITS:
        raise InvalidSignature("digest out of range")
    check_recovery_id(recid)


def recover_point(r: int, recid: int) -> Point:
    """
    Rebuild the nonce point R from its reduced x-coordinate r.

    Candidates x = r + i*n are tried for i = 0..h; the first one that yields
    an on-curve point with the y parity selected by the low bit of recid wins.
    """
    p, a, b, n, h = SECP256K1.p, SECP256K1.a, SECP256K1.b, SECP256K1.n, SECP256K1.h
    for i in range(h + 1):
        x = r + i * n
        # x is a field element in [0, p).
        if x >= p:
            raise InvalidSignature("x exceeds field modulus")
        y = sqrt_mod_p(x * x * x + a * x + b)
        if (recid & 1) != (y & 1):
            # p is odd, so the other root has the other parity; y == 0 maps to p
            # and is rejected by the on-curve check below.
            y = p - y
        if on_curve(x, y):
            log.debug("recovered R at cofactor offset %d: x=%x y=%x", i, x, y)
            return make_point(x, y)
    raise InvalidSignature("no recoverable point")


def derive_key(R: Point, r: int, s: int, e: int) -> Point:
    """Candidate public key Q = r^-1 (sR - eG)."""
    n = SECP256K1.n
    D = point_sub(point_mul(s, R), point_mul(e, SECP256K1.G))
    Q = point_mul(inv_mod_n(r), D)
    if (
        is_infinity(Q)
        or not is_infinity(point_mul(n, Q))
        or not point_on_curve(Q)
    ):
        raise InvalidSignature("recovered key fails basic criteria")
    log.debug("derived Q: x=%x y=%x", Q.x(), Q.y())
    return Q


def reverify(Q: Point, r: int, s: int, e: int) -> None:
    """Check that Q verifies (r, s) over e: x(u1*G + u2*Q) mod n == r."""
    n = SECP256K1.n
    w = inv_mod_n(s)
    u1 = (e * w) % n
    u2 = (r * w) % n
    X1 = point_add(point_mul(u1, SECP256K1.G), point_mul(u2, Q))
    if not point_on_curve(X1):
        raise InvalidSignature("reverification point invalid")
    x1 = X1.x() % n
    log.debug("reverification x1=%d r=%d", x1, r)
    if x1 != r:
        raise InvalidSignature("recovered key does not verify signature")


def recover_point_pubkey(e: int, r: int, s: int, recid: int) -> tuple[int, int]:
    """
    Recover the signer's public key as affine coordinates.

    Args:
        e: Message digest as an unsigned integer of at most 256 bits.
        r, s: Signature components, each in [1, n).
        recid: Recovery id in [0, 3]; its low bit selects the y parity of R.

    Returns:
        (x, y) of the verified public key.
    """
    validate_inputs(e, r, s, recid)
    R = recover_point(r, recid)
    Q = derive_key(R, r, s, e)
    reverify(Q, r, s, e)
    return (Q.x(), Q.y())


def recover_pubkey(e: int, r: int, s: int, recid: int) -> bytes:
    """
    Recover the signer's public key from an ECDSA signature.

    Args:
        e: Message digest (e.g. SHA-256 output read big-endian).
        r, s: Signature components.
        recid: Recovery id (0-3).

    Returns:
        64-byte public key: x || y, big-endian, 32 bytes each.
    """
    x, y = recover_point_pubkey(e, r, s, recid)
    return encode_pubkey(x, y)


__all__: tuple[str, ...] = (
    "check_recovery_id",
    "derive_key",
    "recover_point",
    "recover_point_pubkey",
    "recover_pubkey",
    "reverify",
    "validate_inputs",
)
