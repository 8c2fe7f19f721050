# Copyright (c) 2026 Signer — MIT License

"""Hash and MAC built from KMACXOF256.

    hash_kmacxof256(m) = KMACXOF256("", m, 512, "D")
    mac(pw, m)         = KMACXOF256(pw, m, 512, "T")
"""

from .sp800_185 import kmacxof256

DIGEST_SIZE = 64  # bytes
TAG_SIZE = 64     # bytes


def hash_kmacxof256(m):
    """512-bit unkeyed hash of m."""
    return kmacxof256(b"", m, 8 * DIGEST_SIZE, b"D")


def mac(pw, m):
    """512-bit authentication tag of m under passphrase pw."""
    return kmacxof256(pw, m, 8 * TAG_SIZE, b"T")
