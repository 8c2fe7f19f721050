# Copyright (c) 2026 Signer — MIT License

"""Public-key encryption to an E-521 public key (DHIES-style).

Encrypt to V:
    k        = 4 * uint(Random(512))
    W        = k * V
    Z        = k * G
    ke || ka = KMACXOF256(W.x, "", 1024, "P")
    c        = m XOR KMACXOF256(ke, "", 8*|m|, "PKE")
    t        = KMACXOF256(ka, m, 512, "PKA")

Decrypt with passphrase pw:
    s = 4 * uint(KMACXOF256(pw, "", 512, "K")),  W = s * Z,  then mirror.

Since V = s*G, both sides reach the same W = k*s*G.

Wire format:
    encode(Z) (67 bytes) || c (|m| bytes) || t (64 bytes)

Encryption is randomized per call. Pass randomness= (64 bytes) only for
known-answer testing.
"""

import logging
import os
from typing import NamedTuple

from .curve import POINT_SIZE, CurvePoint, G, decode_point, encode_point, scalar_multiply
from .envelope import TAG_SIZE, Labels, seal, unseal
from .errors import AuthenticationFailure
from .keys import private_scalar
from .utils import bytes_to_uint, ensure_bytes, field_bytes

logger = logging.getLogger(__name__)

NONCE_SIZE = 64  # bytes of randomness behind k
EC_OVERHEAD = POINT_SIZE + TAG_SIZE  # 131

_LABELS = Labels(kdf=b"P", enc=b"PKE", auth=b"PKA")


class ECCryptogram(NamedTuple):
    Z: CurvePoint
    c: bytes
    t: bytes

    def to_bytes(self):
        return encode_point(self.Z) + self.c + self.t

    @classmethod
    def from_bytes(cls, data):
        """Split encode(Z) || c || t. Raises ValueError / InvalidPoint."""
        data = ensure_bytes(data, "cryptogram")
        if len(data) < EC_OVERHEAD:
            raise ValueError(
                f"EC cryptogram must be at least {EC_OVERHEAD} bytes, got {len(data)}"
            )
        Z = decode_point(data[:POINT_SIZE])
        return cls(Z, data[POINT_SIZE:-TAG_SIZE], data[-TAG_SIZE:])


def _as_public_key(V):
    if isinstance(V, CurvePoint):
        return V
    return decode_point(ensure_bytes(V, "public key"))


def ec_encrypt(V, m, randomness=None):
    """Encrypt m under public key V.

    Args:
        V: Recipient public key (CurvePoint or 67-byte encoding).
        m: Plaintext bytes.
        randomness: 64 bytes for k. If None, generated with os.urandom.

    Returns:
        ECCryptogram (Z, c, t).
    """
    V = _as_public_key(V)
    m = ensure_bytes(m, "message")
    if randomness is None:
        randomness = os.urandom(NONCE_SIZE)
    elif len(randomness) != NONCE_SIZE:
        raise ValueError(f"Randomness must be {NONCE_SIZE} bytes, got {len(randomness)}")

    k = 4 * bytes_to_uint(randomness)
    W = scalar_multiply(k, V)
    Z = scalar_multiply(k, G)
    c, t = seal(field_bytes(W.x), m, _LABELS)
    logger.debug("EC-encrypted %d bytes", len(m))
    return ECCryptogram(Z, c, t)


def ec_decrypt(passphrase, cryptogram):
    """Decrypt a cryptogram with the passphrase behind the recipient key.

    Args:
        passphrase: Passphrase bytes of the recipient.
        cryptogram: ECCryptogram or its wire bytes.

    Returns:
        The plaintext bytes.

    Raises:
        AuthenticationFailure: the tag does not verify; nothing is returned.
        InvalidPoint: Z in the wire bytes does not decode.
    """
    if not isinstance(cryptogram, ECCryptogram):
        cryptogram = ECCryptogram.from_bytes(cryptogram)
    s = private_scalar(passphrase)
    W = scalar_multiply(s, cryptogram.Z)
    try:
        m = unseal(field_bytes(W.x), cryptogram.c, cryptogram.t, _LABELS)
    except AuthenticationFailure:
        logger.warning("EC decryption rejected: tag mismatch")
        raise
    logger.debug("EC-decrypted %d bytes", len(m))
    return m
