# Copyright (c) 2026 Signer — MIT License

"""Secret-memory helpers backed by libsodium (via PyNaCl).

sodium_memzero:  Compiler-resistant secure zeroing.
sodium_mlock:    Locks pages so the OS never swaps key material to disk.
sodium_munlock:  Unlocks + zeros the pages on release.

PyNaCl only exposes the libsodium symbols declared in its cffi bindings, so
each helper checks for its symbol once at import. Without it, zeroing is a
manual byte loop (CPython performs no dead-store elimination) and page
locking is a no-op.

Only mutable buffers (bytearray / memoryview) can be wiped; immutable bytes
are skipped, so callers keep secret intermediates in bytearrays.
"""

from nacl._sodium import ffi as _ffi, lib as _lib

_HAS_MEMZERO = hasattr(_lib, "sodium_memzero")
_HAS_MLOCK = hasattr(_lib, "sodium_mlock") and hasattr(_lib, "sodium_munlock")


def _is_wipeable(buf):
    return isinstance(buf, (bytearray, memoryview)) and len(buf) > 0


def secure_zero(buf):
    """Securely wipe a mutable buffer (bytearray / memoryview)."""
    if not _is_wipeable(buf):
        return
    n = len(buf)
    if _HAS_MEMZERO:
        _lib.sodium_memzero(_ffi.from_buffer(buf), n)
    else:
        for i in range(n):
            buf[i] = 0


def mlock(buf):
    """Lock memory pages to prevent swapping to disk."""
    if _HAS_MLOCK and _is_wipeable(buf):
        _lib.sodium_mlock(_ffi.from_buffer(buf), len(buf))


def munlock(buf):
    """Unlock memory pages (also zeros the region)."""
    if _HAS_MLOCK and _is_wipeable(buf):
        _lib.sodium_munlock(_ffi.from_buffer(buf), len(buf))
