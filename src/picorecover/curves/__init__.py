"""Elliptic-curve parameters: secp256k1 over the python-ecdsa arithmetic provider."""

from .secp256k1 import (INFINITY, SECP256K1, CurveParams, inv_mod_n,
                        is_infinity, make_point, on_curve, point_add,
                        point_mul, point_neg, point_on_curve, point_sub,
                        sqrt_mod_p)

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
