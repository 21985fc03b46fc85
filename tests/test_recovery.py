"""Recovery pipeline tests against signatures produced by python-ecdsa."""

from __future__ import annotations

import hashlib
from concurrent.futures import ThreadPoolExecutor

import pytest
from ecdsa import SigningKey, VerifyingKey
from ecdsa.curves import SECP256k1
from ecdsa.ecdsa import Private_key, Public_key, Signature, generator_secp256k1

from picorecover import (InvalidArgument, InvalidSignature, candidate_pubkeys,
                         recover_point_pubkey, recover_pubkey)
from picorecover.curves import SECP256K1
from picorecover.recovery import derive_key, recover_point, reverify

P = SECP256K1.p
N = SECP256K1.n

SIGNERS = [
    (1, b"message to sign", 0x1234567890ABCDEF),
    (0xC0FFEE, b"hello", 0xDEADBEEF),
    (N - 1, b"", N - 2),
    (0x2C26B46B68FFC68FF99B453C1D30413413422D706483BFA0F98A5E886266E7AE, b"foo", 7),
]


def _digest(message: bytes) -> int:
    return int.from_bytes(hashlib.sha256(message).digest(), "big")


def _sign(d: int, e: int, k: int) -> tuple[int, int, int]:
    """Sign digest e with secret d and nonce k; returns (r, s, recid)."""
    G = generator_secp256k1
    priv = Private_key(Public_key(G, G * d), d)
    sig = priv.sign(e, k)
    R = G * k
    return sig.r, sig.s, R.y() & 1


def _pubkey(d: int) -> bytes:
    return SigningKey.from_secret_exponent(d, curve=SECP256k1).get_verifying_key().to_string()


def _verifies(pubkey: bytes, e: int, r: int, s: int) -> bool:
    vk = VerifyingKey.from_string(pubkey, curve=SECP256k1)
    return vk.pubkey.verifies(e, Signature(r, s))


def _is_residue(x: int) -> bool:
    return pow((x * x * x + 7) % P, (P - 1) // 2, P) == 1


@pytest.mark.parametrize("d, message, k", SIGNERS)
def test_recover_honest_signature(d: int, message: bytes, k: int) -> None:
    e = _digest(message)
    r, s, recid = _sign(d, e, k)
    assert recover_pubkey(e, r, s, recid) == _pubkey(d)


@pytest.mark.parametrize("d, message, k", SIGNERS)
def test_sibling_recovery_id_never_returns_unverified_key(
    d: int, message: bytes, k: int
) -> None:
    e = _digest(message)
    r, s, recid = _sign(d, e, k)
    try:
        other = recover_pubkey(e, r, s, recid ^ 1)
    except InvalidSignature:
        return
    assert other != _pubkey(d)
    assert _verifies(other, e, r, s)


def test_high_bit_of_recovery_id_does_not_change_result() -> None:
    e = _digest(b"high bit")
    r, s, recid = _sign(0xABC, e, 0x777)
    assert recover_pubkey(e, r, s, recid | 2) == recover_pubkey(e, r, s, recid)


def test_recover_max_width_digest() -> None:
    """Digests may exceed n as long as they fit in 256 bits."""
    e = (1 << 256) - 1
    assert e > N
    r, s, recid = _sign(5, e, 11)
    assert recover_pubkey(e, r, s, recid) == _pubkey(5)


def test_recover_zero_digest() -> None:
    r, s, recid = _sign(9, 0, 13)
    assert recover_pubkey(0, r, s, recid) == _pubkey(9)


def test_recover_point_pubkey_coordinates() -> None:
    e = _digest(b"coords")
    r, s, recid = _sign(3, e, 99)
    x, y = recover_point_pubkey(e, r, s, recid)
    Q = generator_secp256k1 * 3
    assert (x, y) == (Q.x(), Q.y())


@pytest.mark.parametrize(
    "r, s, reason",
    [
        (0, 1, "r out of range"),
        (-1, 1, "r out of range"),
        (N, 1, "r out of range"),
        (N + 5, 1, "r out of range"),
        (1, 0, "s out of range"),
        (1, -1, "s out of range"),
        (1, N, "s out of range"),
    ],
)
def test_signature_components_out_of_range(r: int, s: int, reason: str) -> None:
    with pytest.raises(InvalidSignature) as info:
        recover_pubkey(1, r, s, 0)
    assert info.value.reason == reason


@pytest.mark.parametrize("e", [-1, 1 << 256, (1 << 300) + 1])
def test_digest_out_of_range(e: int) -> None:
    with pytest.raises(InvalidSignature, match="digest out of range"):
        recover_pubkey(e, 1, 1, 0)


@pytest.mark.parametrize("recid", [-1, 4, 255, True, None, "0"])
def test_recovery_id_out_of_range(recid: object) -> None:
    with pytest.raises(InvalidArgument, match="recovery id out of range"):
        recover_pubkey(1, 1, 1, recid)  # type: ignore[arg-type]


def test_non_integer_scalars_rejected() -> None:
    with pytest.raises(InvalidArgument, match="malformed integer"):
        recover_pubkey(1.0, 1, 1, 0)  # type: ignore[arg-type]


def test_range_checks_run_before_recovery_id_check() -> None:
    with pytest.raises(InvalidSignature, match="r out of range"):
        recover_pubkey(1, 0, 1, 9)


def test_no_recoverable_point() -> None:
    """Both x = r and x = r + n lie off the curve."""
    r = next(
        x for x in range(1, 10_000) if not _is_residue(x) and not _is_residue(x + N)
    )
    assert r + N < P
    with pytest.raises(InvalidSignature, match="no recoverable point"):
        recover_point(r, 0)


def test_cofactor_candidate_exceeds_field_modulus() -> None:
    r = next(x for x in range(N - 1, N - 10_000, -1) if not _is_residue(x))
    assert r + N >= P
    with pytest.raises(InvalidSignature, match="x exceeds field modulus"):
        recover_point(r, 1)


def test_recover_point_uses_cofactor_offset() -> None:
    r = next(
        x for x in range(1, 10_000) if not _is_residue(x) and _is_residue(x + N)
    )
    R = recover_point(r, 1)
    assert R.x() == r + N
    assert R.y() & 1 == 1


@pytest.mark.parametrize("recid", [0, 1])
def test_recover_point_parity(recid: int) -> None:
    e = _digest(b"parity")
    r, _, _ = _sign(17, e, 1234)
    R = recover_point(r, recid)
    assert R.x() == r
    assert R.y() & 1 == recid


def test_reverify_rejects_wrong_key() -> None:
    e = _digest(b"reverify")
    r, s, recid = _sign(21, e, 4321)
    R = recover_point(r, recid)
    Q = derive_key(R, r, s, e)
    reverify(Q, r, s, e)
    wrong = (generator_secp256k1 * 22).to_affine()
    with pytest.raises(InvalidSignature, match="recovered key does not verify signature"):
        reverify(wrong, r, s, e)


def test_tampered_digest_recovers_different_key() -> None:
    e = _digest(b"original")
    r, s, recid = _sign(33, e, 555)
    assert recover_pubkey(e + 1, r, s, recid) != _pubkey(33)


def test_candidate_pubkeys_contains_signer() -> None:
    e = _digest(b"candidates")
    r, s, recid = _sign(44, e, 666)
    found = candidate_pubkeys(e, r, s)
    assert found[recid] == _pubkey(44)
    assert set(found) <= {0, 1, 2, 3}


def test_candidate_pubkeys_propagates_range_errors() -> None:
    with pytest.raises(InvalidSignature, match="s out of range"):
        candidate_pubkeys(1, 1, 0)


def test_deterministic() -> None:
    e = _digest(b"determinism")
    r, s, recid = _sign(55, e, 777)
    assert len({recover_pubkey(e, r, s, recid) for _ in range(3)}) == 1
    kinds = set()
    for _ in range(3):
        with pytest.raises(InvalidSignature) as info:
            recover_pubkey(e, 0, s, recid)
        kinds.add((info.value.kind, info.value.reason))
    assert kinds == {("InvalidSignature", "r out of range")}


def test_concurrent_recovery() -> None:
    jobs = []
    for d, message, k in SIGNERS:
        e = _digest(message)
        jobs.append((e, *_sign(d, e, k)))
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda job: recover_pubkey(*job), jobs * 2))
    expected = [_pubkey(d) for d, _, _ in SIGNERS] * 2
    assert results == expected


def test_key_at_infinity_fails_basic_criteria() -> None:
    """e = s*k makes sR - eG the identity for R = kG."""
    k, s = 12345, 777
    R = generator_secp256k1 * k
    e = (s * k) % N
    with pytest.raises(InvalidSignature) as info:
        recover_pubkey(e, R.x(), s, R.y() & 1)
    assert info.value.reason == "recovered key fails basic criteria"
