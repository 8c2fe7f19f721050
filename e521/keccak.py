# Copyright (c) 2026 Signer — MIT License

"""Keccak-f[1600] permutation (FIPS 202 Section 3).

The 1600-bit state is a 200-byte buffer read as 25 little-endian 64-bit
lanes, lane index = x + 5*y. Each of the 24 rounds applies theta, rho+pi,
chi and iota.

Public API:
    permute(state)          -> 200-byte permuted state (pure)
    keccak_f1600(lanes)     -> permutes a list of 25 lane ints in place
"""

import struct

STATE_SIZE = 200  # bytes (1600 bits)
ROUNDS = 24

_MASK64 = (1 << 64) - 1
_LANES = struct.Struct("<25Q")

# Round constants for iota.
_RC = (
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A,
    0x8000000080008000, 0x000000000000808B, 0x0000000080000001,
    0x8000000080008081, 0x8000000000008009, 0x000000000000008A,
    0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089,
    0x8000000000008003, 0x8000000000008002, 0x8000000000000080,
    0x000000000000800A, 0x800000008000000A, 0x8000000080008081,
    0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
)

# Rho rotation offsets, in the order lanes are visited by the pi walk.
_ROTC = (
    1, 3, 6, 10, 15, 21, 28, 36, 45, 55, 2, 14,
    27, 41, 56, 8, 25, 43, 62, 18, 39, 61, 20, 44,
)

# Pi walk: destination lane of each step, starting from lane 1.
_PILN = (
    10, 7, 11, 17, 18, 3, 5, 16, 8, 21, 24, 4,
    15, 23, 19, 13, 12, 2, 20, 14, 22, 9, 6, 1,
)


def _rotl64(x, n):
    return ((x << n) | (x >> (64 - n))) & _MASK64


def keccak_f1600(st):
    """Apply the 24-round permutation to 25 lanes in place and return them."""
    for rc in _RC:
        # Theta
        bc = [st[i] ^ st[i + 5] ^ st[i + 10] ^ st[i + 15] ^ st[i + 20]
              for i in range(5)]
        for i in range(5):
            t = bc[(i + 4) % 5] ^ _rotl64(bc[(i + 1) % 5], 1)
            for j in range(0, 25, 5):
                st[j + i] ^= t

        # Rho + Pi
        t = st[1]
        for i in range(24):
            j = _PILN[i]
            nxt = st[j]
            st[j] = _rotl64(t, _ROTC[i])
            t = nxt

        # Chi
        for j in range(0, 25, 5):
            row = st[j:j + 5]
            for i in range(5):
                st[j + i] = row[i] ^ ((~row[(i + 1) % 5]) & row[(i + 2) % 5] & _MASK64)

        # Iota
        st[0] ^= rc
    return st


def permute(state):
    """Keccak-f[1600] over a 200-byte state. Pure: returns a new bytes object.

    Args:
        state: 200-byte buffer (bytes, bytearray or memoryview).

    Returns:
        The permuted 200-byte state.
    """
    if len(state) != STATE_SIZE:
        raise ValueError(f"Keccak state must be {STATE_SIZE} bytes, got {len(state)}")
    lanes = list(_LANES.unpack(bytes(state)))
    keccak_f1600(lanes)
    return _LANES.pack(*lanes)
