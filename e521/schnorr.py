# Copyright (c) 2026 Signer — MIT License

"""Schnorr signatures over E-521 with KMACXOF256 as the hash.

Sign m with passphrase pw:
    s = 4 * uint(KMACXOF256(pw, "", 512, "K"))
    k = 4 * uint(KMACXOF256(s, m, 512, "N"))        deterministic nonce
    U = k * G
    h = KMACXOF256(U.x, m, 512, "T")
    z = (k - uint(h)*s) mod r

Verify (h, z) on m under V:
    U' = z*G + uint(h)*V,  accept iff KMACXOF256(U'.x, m, 512, "T") == h

Integers used as KMAC keys (s, U.x) are fixed 66-byte big-endian strings.

Wire format (130 bytes):
    h (64 bytes) || z (66 bytes, big-endian, z < r)

The fixed-width z removes the ambiguity of a minimal-length integer with no
delimiter after h.
"""

import hmac
import logging
from typing import NamedTuple

from . import _secmem
from .curve import FIELD_SIZE, CurvePoint, G, R, add, decode_point, scalar_multiply
from .keys import private_scalar
from .sp800_185 import kmacxof256
from .utils import bytes_to_uint, ensure_bytes, field_bytes

logger = logging.getLogger(__name__)

CHALLENGE_SIZE = 64
RESPONSE_SIZE = FIELD_SIZE
SIGNATURE_SIZE = CHALLENGE_SIZE + RESPONSE_SIZE  # 130


class Signature(NamedTuple):
    h: bytes
    z: int

    def to_bytes(self):
        return self.h + self.z.to_bytes(RESPONSE_SIZE, "big")

    @classmethod
    def from_bytes(cls, data):
        data = ensure_bytes(data, "signature")
        if len(data) != SIGNATURE_SIZE:
            raise ValueError(f"signature must be {SIGNATURE_SIZE} bytes, got {len(data)}")
        return cls(data[:CHALLENGE_SIZE], bytes_to_uint(data[CHALLENGE_SIZE:]))


def _challenge(u_x, m):
    return kmacxof256(field_bytes(u_x), m, 8 * CHALLENGE_SIZE, b"T")


def ec_sign(m, passphrase):
    """Sign m with the key pair derived from passphrase.

    Deterministic: the same (m, passphrase) always yields the same signature.

    Returns:
        Signature (h, z).
    """
    m = ensure_bytes(m, "message")
    s = private_scalar(passphrase)
    s_buf = bytearray(field_bytes(s))
    _secmem.mlock(s_buf)
    try:
        k = 4 * bytes_to_uint(kmacxof256(bytes(s_buf), m, 512, b"N"))
    finally:
        _secmem.munlock(s_buf)
        _secmem.secure_zero(s_buf)

    U = scalar_multiply(k, G)
    h = _challenge(U.x, m)
    z = (k - bytes_to_uint(h) * s) % R
    logger.debug("signed %d-byte message", len(m))
    return Signature(h, z)


def ec_verify(signature, m, V):
    """Verify a signature on m under public key V.

    Args:
        signature: Signature or its 130-byte wire form.
        m: Message bytes.
        V: Signer public key (CurvePoint or 67-byte encoding).

    Returns:
        True if valid, False otherwise (including malformed inputs).
    """
    m = ensure_bytes(m, "message")
    try:
        if not isinstance(signature, Signature):
            signature = Signature.from_bytes(signature)
        if not isinstance(V, CurvePoint):
            V = decode_point(ensure_bytes(V, "public key"))
    except ValueError:
        return False

    h, z = signature
    if len(h) != CHALLENGE_SIZE or not 0 <= z < R:
        return False

    U = add(scalar_multiply(z, G), scalar_multiply(bytes_to_uint(h), V))
    ok = hmac.compare_digest(_challenge(U.x, m), bytes(h))
    if not ok:
        logger.debug("signature rejected")
    return ok
