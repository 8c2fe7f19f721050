# Copyright (c) 2026 Signer — MIT License

"""Passphrase-derived E-521 key pairs.

    s = 4 * uint(KMACXOF256(pw, "", 512, "K"))     private scalar
    V = s * G                                       public key

The private scalar is a multiple of the cofactor and is never stored:
every operation that needs it derives it again from the passphrase.
"""

import logging

from . import _secmem
from .curve import POINT_SIZE, G, encode_point, scalar_multiply
from .sp800_185 import kmacxof256
from .utils import bytes_to_uint, ensure_bytes

logger = logging.getLogger(__name__)

PUBLIC_KEY_SIZE = POINT_SIZE


def private_scalar(passphrase):
    """Derive s = 4 * uint(KMACXOF256(pw, "", 512, "K")) from a passphrase."""
    pw = ensure_bytes(passphrase, "passphrase")
    seed = bytearray(kmacxof256(pw, b"", 512, b"K"))
    _secmem.mlock(seed)
    try:
        return 4 * bytes_to_uint(seed)
    finally:
        _secmem.munlock(seed)
        _secmem.secure_zero(seed)


def ec_keypair(passphrase):
    """Public key V = s*G for the passphrase's private scalar s.

    Args:
        passphrase: Passphrase bytes.

    Returns:
        The public CurvePoint V. The scalar s is not returned.
    """
    logger.debug("deriving E-521 key pair")
    return scalar_multiply(private_scalar(passphrase), G)


def ec_public_key(passphrase):
    """67-byte encoding of ec_keypair(passphrase)."""
    return encode_point(ec_keypair(passphrase))
