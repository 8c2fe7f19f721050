# Copyright (c) 2026 Signer — MIT License

"""SHAKE256 (FIPS 202), cSHAKE256 and KMACXOF256 (NIST SP 800-185).

All three run on the 136-byte-rate sponge in sponge.py. Output lengths L
are given in bits, as in the standards, and must be multiples of 8.

Public API:
    shake256(X, L)              -> L/8 bytes
    cshake256(X, L, N, S)       -> L/8 bytes
    kmacxof256(K, X, L, S)      -> L/8 bytes
"""

from .encoding import bytepad, encode_string
from .sponge import RATE, Mode, absorb, new_sponge, squeeze

_KMAC_NAME = b"KMAC"


def _out_bytes(L):
    if L < 0 or L % 8:
        raise ValueError(f"output length must be a non-negative multiple of 8 bits, got {L}")
    return L // 8


def shake256(X, L):
    """Plain SHAKE256: suffix 0x1F, no customization block."""
    out_len = _out_bytes(L)
    return squeeze(absorb(new_sponge(Mode.SHAKE), X), out_len)


def _customized(mode, N, S):
    """Sponge primed with bytepad(encode_string(N) || encode_string(S), 136)."""
    prefix = bytepad(encode_string(N) + encode_string(S), RATE)
    return absorb(new_sponge(mode), prefix)


def cshake256(X, L, N=b"", S=b""):
    """cSHAKE256(X, L, N, S). Falls back to SHAKE256 when N and S are empty.

    Args:
        X: Main input bytes.
        L: Requested output length in bits.
        N: Function-name bytes (reserved for NIST-defined functions).
        S: Customization bytes.
    """
    if not N and not S:
        return shake256(X, L)
    out_len = _out_bytes(L)
    state = _customized(Mode.CSHAKE, N, S)
    return squeeze(absorb(state, X), out_len)


def kmacxof256(K, X, L, S=b""):
    """KMACXOF256(K, X, L, S): keyed XOF with arbitrary output length.

    Args:
        K: Key bytes (may be empty for unkeyed use).
        X: Main input bytes.
        L: Requested output length in bits.
        S: Customization bytes.

    Returns:
        L/8 output bytes.
    """
    out_len = _out_bytes(L)
    state = _customized(Mode.KMAC, _KMAC_NAME, S)
    state = absorb(state, bytepad(encode_string(K), RATE))
    state = absorb(state, X)
    return squeeze(state, out_len)
