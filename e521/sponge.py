# Copyright (c) 2026 Signer — MIT License

"""Keccak[c=512] sponge as an immutable value.

A SpongeState is never mutated: absorb() returns a new state, squeeze()
finalizes a state and returns output bytes. Every hash call therefore owns
its own state and nothing is shared between calls or threads.

The construction mode is fixed when the sponge is created:
    Mode.SHAKE   domain suffix 0x1F
    Mode.CSHAKE  domain suffix 0x04
    Mode.KMAC    right_encode(0) absorbed first, then suffix 0x04
"""

import enum
from typing import NamedTuple

from .encoding import right_encode
from .keccak import STATE_SIZE, permute

RATE = 136        # bytes: 1600 - 2*256 bits of capacity
CAPACITY = STATE_SIZE - RATE

_RIGHT_ENCODE_0 = right_encode(0)  # b"\x00\x01"


class Mode(enum.Enum):
    SHAKE = "shake"
    CSHAKE = "cshake"
    KMAC = "kmac"

    @property
    def suffix(self):
        return _SUFFIX[self]


_SUFFIX = {Mode.SHAKE: 0x1F, Mode.CSHAKE: 0x04, Mode.KMAC: 0x04}


class SpongeState(NamedTuple):
    buffer: bytes
    cursor: int
    mode: Mode


def new_sponge(mode):
    """Fresh all-zero sponge in the given construction mode."""
    if not isinstance(mode, Mode):
        raise TypeError(f"mode must be a Mode, got {type(mode).__name__}")
    return SpongeState(bytes(STATE_SIZE), 0, mode)


def absorb(state, data):
    """XOR data into the rate at the cursor, permuting at every rate boundary."""
    data = memoryview(bytes(data))
    if not data:
        return state
    buf = bytearray(state.buffer)
    pt = state.cursor
    pos = 0
    n = len(data)
    while pos < n:
        take = min(RATE - pt, n - pos)
        chunk = data[pos:pos + take]
        for i in range(take):
            buf[pt + i] ^= chunk[i]
        pt += take
        pos += take
        if pt == RATE:
            buf[:] = permute(buf)
            pt = 0
    return SpongeState(bytes(buf), pt, state.mode)


def squeeze(state, out_len):
    """Pad, permute and emit out_len bytes.

    Args:
        state: Sponge after all input has been absorbed.
        out_len: Number of output bytes (>= 0).

    Returns:
        out_len bytes of output.
    """
    if out_len < 0:
        raise ValueError(f"output length must be >= 0, got {out_len}")
    if state.mode is Mode.KMAC:
        state = absorb(state, _RIGHT_ENCODE_0)

    buf = bytearray(state.buffer)
    buf[state.cursor] ^= state.mode.suffix
    buf[RATE - 1] ^= 0x80
    block = permute(buf)

    out = bytearray()
    while True:
        out += block[:RATE]
        if len(out) >= out_len:
            break
        block = permute(block)
    return bytes(out[:out_len])
