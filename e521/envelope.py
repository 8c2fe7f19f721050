# Copyright (c) 2026 Signer — MIT License

"""Encrypt-and-MAC envelope shared by the public-key and symmetric schemes.

From one seed, a single KMACXOF256 call yields two 64-byte subkeys:

    ke || ka = KMACXOF256(seed, "", 1024, kdf_label)
    c        = m XOR KMACXOF256(ke, "", 8*|m|, enc_label)
    t        = KMACXOF256(ka, m, 512, auth_label)

The tag covers the plaintext. unseal() recomputes it and compares in constant
time (hmac.compare_digest); on mismatch the candidate plaintext is wiped and
AuthenticationFailure is raised, so no unauthenticated bytes are returned.

Memory hardening: ke || ka and the candidate plaintext live in bytearrays
that are locked while in use and wiped in finally blocks.
"""

import hmac
from typing import NamedTuple

from . import _secmem
from .errors import AuthenticationFailure
from .sp800_185 import kmacxof256
from .utils import xor_bytes

SUBKEY_SIZE = 64  # bytes, for each of ke and ka
TAG_SIZE = 64     # bytes


class Labels(NamedTuple):
    kdf: bytes
    enc: bytes
    auth: bytes


def _subkeys(seed, labels):
    return bytearray(kmacxof256(seed, b"", 16 * SUBKEY_SIZE, labels.kdf))


def _keystream(ke, n, labels):
    return kmacxof256(bytes(ke), b"", 8 * n, labels.enc)


def _tag(ka, m, labels):
    return kmacxof256(bytes(ka), bytes(m), 8 * TAG_SIZE, labels.auth)


def seal(seed, m, labels):
    """Encrypt and authenticate m under the subkeys derived from seed.

    Returns:
        (c, t) with |c| == |m| and |t| == 64.
    """
    keys = _subkeys(seed, labels)
    _secmem.mlock(keys)
    try:
        ke = keys[:SUBKEY_SIZE]
        ka = keys[SUBKEY_SIZE:]
        try:
            c = xor_bytes(m, _keystream(ke, len(m), labels))
            t = _tag(ka, m, labels)
        finally:
            _secmem.secure_zero(ke)
            _secmem.secure_zero(ka)
        return c, t
    finally:
        _secmem.munlock(keys)
        _secmem.secure_zero(keys)


def unseal(seed, c, t, labels):
    """Decrypt c and return the plaintext only if tag t verifies.

    Raises:
        AuthenticationFailure: the recomputed tag differs from t.
    """
    keys = _subkeys(seed, labels)
    _secmem.mlock(keys)
    try:
        ke = keys[:SUBKEY_SIZE]
        ka = keys[SUBKEY_SIZE:]
        m = bytearray(xor_bytes(c, _keystream(ke, len(c), labels)))
        try:
            expected = _tag(ka, m, labels)
            if not hmac.compare_digest(expected, bytes(t)):
                raise AuthenticationFailure("authentication tag mismatch")
            return bytes(m)
        finally:
            _secmem.secure_zero(m)
            _secmem.secure_zero(ke)
            _secmem.secure_zero(ka)
    finally:
        _secmem.munlock(keys)
        _secmem.secure_zero(keys)
