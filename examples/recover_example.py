#!/usr/bin/env python3
"""Example: recover a signer's public key from (digest, r, s, recovery id)."""

import base64

from picorecover import (candidate_pubkeys, recover_pubkey_base32,
                         recover_pubkey_hex)

digest = "0xfcde2b2edba56bf408601fb721fe9b5c338d10ee429ea04fae5511b68fbf8fb9"
r = "73822833206246044331228008262087004113076292229679808334250850393445001014761"
s = "58995174607243353628346858794753620798088291196940745194581481841927132845752"

for recid, key in candidate_pubkeys(int(digest, 16), int(r), int(s)).items():
    print(f"recid {recid}: {key.hex()}")

print("Hex:", recover_pubkey_hex(digest, r, s, 0))


def b32(value: str) -> str:
    return base64.b32encode(int(value, 0).to_bytes(32, "big")).decode("ascii")


print(
    "Base32 (RFC 4648):",
    recover_pubkey_base32(b32(digest), b32(r), b32(s), 0, alphabet="rfc4648"),
)
