# Copyright (c) 2026 Signer — MIT License

"""Exception taxonomy for the E-521 / KMACXOF256 toolkit.

    E521Error
    ├── InvalidPoint          (also a ValueError)
    ├── EncodingViolation     (also a ValueError)
    └── AuthenticationFailure

Decryption raises AuthenticationFailure instead of returning a plaintext
whenever the recomputed tag differs from the received one.
"""


class E521Error(Exception):
    """Base class for all toolkit errors."""


class InvalidPoint(E521Error, ValueError):
    """Coordinates do not describe a point on E-521, or cannot be decoded."""


class EncodingViolation(E521Error, ValueError):
    """An SP 800-185 integer encoding input lies outside [0, 2^2040)."""


class AuthenticationFailure(E521Error):
    """A recomputed authentication tag does not match the received tag."""
