"""
secp256k1 parameters and point helpers. Group arithmetic comes from python-ecdsa;
this module only pins the curve constants and adapts the provider's failures.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, NamedTuple

from ecdsa.curves import SECP256k1
from ecdsa.ellipticcurve import INFINITY, CurveFp, Point
from ecdsa.numbertheory import inverse_mod

from ..errors import InternalInvariant


class CurveParams(NamedTuple):
    """Curve y^2 = x^3 + a*x + b over F_p with subgroup order n, cofactor h, generator G."""

    curve: CurveFp
    p: int
    a: int
    b: int
    n: int
    h: int
    G: Point


def _load_params() -> CurveParams:
    curve = SECP256k1.curve
    return CurveParams(
        curve=curve,
        p=curve.p(),
        a=curve.a(),
        b=curve.b(),
        n=SECP256k1.order,
        h=curve.cofactor(),
        G=SECP256k1.generator.to_affine(),
    )


# Built once at import; read-only afterwards.
SECP256K1 = _load_params()

_P = SECP256K1.p
_N = SECP256K1.n
_SQRT_EXP = (_P + 1) // 4  # p = 3 (mod 4)


@contextmanager
def _provider() -> Iterator[None]:
    """Translate python-ecdsa's internal assertions into InternalInvariant."""
    try:
        yield
    except AssertionError as exc:
        raise InternalInvariant("arithmetic provider contract violated") from exc


def on_curve(x: int, y: int) -> bool:
    """True iff (x, y) is a field-reduced point satisfying the curve equation."""
    if not (0 <= x < _P and 0 <= y < _P):
        return False
    return SECP256K1.curve.contains_point(x, y)


def make_point(x: int, y: int) -> Point:
    """Affine point (x, y); the caller must already have checked on_curve."""
    with _provider():
        return Point(SECP256K1.curve, x, y)


def is_infinity(point: Point) -> bool:
    return point == INFINITY


def point_on_curve(point: Point) -> bool:
    """On-curve predicate for a point object; the identity is not on the curve."""
    if is_infinity(point):
        return False
    return on_curve(point.x(), point.y())


def point_add(a: Point, b: Point) -> Point:
    with _provider():
        return a + b


def point_neg(point: Point) -> Point:
    if is_infinity(point):
        return INFINITY
    with _provider():
        return -point


def point_sub(a: Point, b: Point) -> Point:
    """a - b, computed as a + (-b)."""
    return point_add(a, point_neg(b))


def point_mul(k: int, point: Point) -> Point:
    """Scalar multiplication k * point."""
    if k == 0 or is_infinity(point):
        return INFINITY
    with _provider():
        return point * k


def inv_mod_n(k: int) -> int:
    """Inverse of k modulo the group order n."""
    inv = inverse_mod(k % _N, _N)
    if (inv * k) % _N != 1:
        raise InternalInvariant("scalar has no inverse mod n")
    return inv


def sqrt_mod_p(v: int) -> int:
    """A square root candidate of v mod p; only a root if v is a quadratic residue."""
    return pow(v % _P, _SQRT_EXP, _P)


__all__: tuple[str, ...] = (
    "INFINITY",
    "SECP256K1",
    "CurveParams",
    "inv_mod_n",
    "is_infinity",
    "make_point",
    "on_curve",
    "point_add",
    "point_mul",
    "point_neg",
    "point_on_curve",
    "point_sub",
    "sqrt_mod_p",
)
