# Copyright (c) 2026 Signer — MIT License

"""Byte / integer helpers shared by the protocol modules."""

from .curve import FIELD_SIZE


def ensure_bytes(value, name):
    """Return value as bytes; reject str and other non-buffer types."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be bytes, got {type(value).__name__}")


def bytes_to_uint(b):
    """Unsigned big-endian decode."""
    return int.from_bytes(b, "big")


def field_bytes(n):
    """Fixed-width (66-byte) big-endian encoding of a field element or scalar."""
    return n.to_bytes(FIELD_SIZE, "big")


def xor_bytes(a, b):
    """XOR two byte strings of equal length."""
    if len(a) != len(b):
        raise ValueError(f"xor operands differ in length: {len(a)} != {len(b)}")
    n = len(a)
    return (int.from_bytes(a, "big") ^ int.from_bytes(b, "big")).to_bytes(n, "big")
