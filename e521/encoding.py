# Copyright (c) 2026 Signer — MIT License

"""SP 800-185 Section 2.3 string encodings.

All lengths handed to encode_string are in bytes; the encoding itself
carries the bit length, as the standard requires.
"""

from .errors import EncodingViolation

_ENCODE_LIMIT = 1 << 2040


def _int_bytes(x):
    if not 0 <= x < _ENCODE_LIMIT:
        raise EncodingViolation(f"integer encoding requires 0 <= x < 2^2040, got {x}")
    n = max(1, (x.bit_length() + 7) // 8)
    return x.to_bytes(n, "big")


def left_encode(x):
    """n || x as n big-endian bytes, n the smallest positive count with 2^(8n) > x."""
    body = _int_bytes(x)
    return bytes([len(body)]) + body


def right_encode(x):
    """x as n big-endian bytes, followed by n."""
    body = _int_bytes(x)
    return body + bytes([len(body)])


def encode_string(s):
    """left_encode(bit length of s) || s."""
    s = bytes(s)
    return left_encode(8 * len(s)) + s


def bytepad(x, w):
    """left_encode(w) || x, right-padded with zeros to a multiple of w bytes."""
    if w <= 0:
        raise ValueError(f"bytepad width must be positive, got {w}")
    z = left_encode(w) + bytes(x)
    return z + b"\x00" * (-len(z) % w)
