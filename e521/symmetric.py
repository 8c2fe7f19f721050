# Copyright (c) 2026 Signer — MIT License

"""Password-based authenticated encryption.

Encrypt m under passphrase pw:
    salt     = Random(512)
    ke || ka = KMACXOF256(salt || pw, "", 1024, "S")
    c        = m XOR KMACXOF256(ke, "", 8*|m|, "SKE")
    t        = KMACXOF256(ka, m, 512, "SKA")

Wire format:
    salt (64 bytes) || c (|m| bytes) || t (64 bytes)
"""

import logging
import os
from typing import NamedTuple

from . import _secmem
from .envelope import TAG_SIZE, Labels, seal, unseal
from .errors import AuthenticationFailure
from .utils import ensure_bytes

logger = logging.getLogger(__name__)

SALT_SIZE = 64
SYMM_OVERHEAD = SALT_SIZE + TAG_SIZE  # 128

_LABELS = Labels(kdf=b"S", enc=b"SKE", auth=b"SKA")


class SymmetricCryptogram(NamedTuple):
    salt: bytes
    c: bytes
    t: bytes

    def to_bytes(self):
        return self.salt + self.c + self.t

    @classmethod
    def from_bytes(cls, data):
        data = ensure_bytes(data, "cryptogram")
        if len(data) < SYMM_OVERHEAD:
            raise ValueError(
                f"symmetric cryptogram must be at least {SYMM_OVERHEAD} bytes, got {len(data)}"
            )
        return cls(data[:SALT_SIZE], data[SALT_SIZE:-TAG_SIZE], data[-TAG_SIZE:])


def _seed(salt, passphrase):
    return bytearray(salt + ensure_bytes(passphrase, "passphrase"))


def symm_encrypt(passphrase, m, salt=None):
    """Encrypt m under passphrase.

    Args:
        passphrase: Passphrase bytes.
        m: Plaintext bytes.
        salt: 64-byte salt. If None, generated with os.urandom.

    Returns:
        SymmetricCryptogram (salt, c, t).
    """
    m = ensure_bytes(m, "message")
    if salt is None:
        salt = os.urandom(SALT_SIZE)
    elif len(salt) != SALT_SIZE:
        raise ValueError(f"Salt must be {SALT_SIZE} bytes, got {len(salt)}")
    salt = bytes(salt)

    seed = _seed(salt, passphrase)
    _secmem.mlock(seed)
    try:
        c, t = seal(bytes(seed), m, _LABELS)
    finally:
        _secmem.munlock(seed)
        _secmem.secure_zero(seed)
    logger.debug("symmetric-encrypted %d bytes", len(m))
    return SymmetricCryptogram(salt, c, t)


def symm_decrypt(passphrase, cryptogram):
    """Decrypt a symmetric cryptogram.

    Args:
        passphrase: Passphrase bytes.
        cryptogram: SymmetricCryptogram or its wire bytes.

    Returns:
        The plaintext bytes.

    Raises:
        AuthenticationFailure: the tag does not verify; nothing is returned.
    """
    if not isinstance(cryptogram, SymmetricCryptogram):
        cryptogram = SymmetricCryptogram.from_bytes(cryptogram)
    if len(cryptogram.salt) != SALT_SIZE:
        raise ValueError(f"Salt must be {SALT_SIZE} bytes, got {len(cryptogram.salt)}")

    seed = _seed(cryptogram.salt, passphrase)
    _secmem.mlock(seed)
    try:
        m = unseal(bytes(seed), cryptogram.c, cryptogram.t, _LABELS)
    except AuthenticationFailure:
        logger.warning("symmetric decryption rejected: tag mismatch")
        raise
    finally:
        _secmem.munlock(seed)
        _secmem.secure_zero(seed)
    logger.debug("symmetric-decrypted %d bytes", len(m))
    return m
