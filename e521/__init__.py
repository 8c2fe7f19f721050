# Copyright (c) 2026 Signer — MIT License

"""E-521 / KMACXOF256 toolkit: sponge hashing and Edwards-curve cryptography.

Sponge (FIPS 202, SP 800-185):
    Keccak-f[1600]: 24-round permutation over a 200-byte state.
    SHAKE256, cSHAKE256, KMACXOF256: rate 136 bytes (512-bit capacity).
    hash / mac: 512-bit KMACXOF256 with customization "D" / "T".

Curve (E-521, x^2 + y^2 = 1 - 376014*x^2*y^2 over 2^521 - 1):
    Affine points validated at construction, complete addition,
    double-and-add scalar multiplication, 67-byte point encoding.

Protocols (all keys derived from a passphrase, never stored):
    ec_keypair: V = s*G, s = 4*KMACXOF256(pw, "", 512, "K").
    ec_encrypt / ec_decrypt: DHIES-style encrypt-and-MAC to a public key.
    ec_sign / ec_verify: Schnorr signatures, 130-byte wire form.
    symm_encrypt / symm_decrypt: salted password-based encrypt-and-MAC.

Secret intermediates are locked and wiped through libsodium (PyNaCl).
"""

# Sponge layer
from .keccak import permute, STATE_SIZE
from .sponge import RATE, Mode, SpongeState, new_sponge, absorb, squeeze
from .encoding import left_encode, right_encode, encode_string, bytepad
from .sp800_185 import shake256, cshake256, kmacxof256
from .digest import hash_kmacxof256, mac, DIGEST_SIZE

# Curve
from .curve import (
    CurvePoint, G, IDENTITY, P, D, R, N,
    validate, sqrt_mod_p, point_from_x, add, negate, scalar_multiply,
    encode_point, decode_point, POINT_SIZE,
)

# Protocols
from .keys import ec_keypair, ec_public_key, PUBLIC_KEY_SIZE
from .ecies import ec_encrypt, ec_decrypt, ECCryptogram
from .schnorr import ec_sign, ec_verify, Signature, SIGNATURE_SIZE
from .symmetric import symm_encrypt, symm_decrypt, SymmetricCryptogram, SALT_SIZE
from .envelope import TAG_SIZE

# Errors
from .errors import E521Error, InvalidPoint, AuthenticationFailure, EncodingViolation

__all__ = [
    # Sponge
    "permute", "STATE_SIZE",
    "RATE", "Mode", "SpongeState", "new_sponge", "absorb", "squeeze",
    "left_encode", "right_encode", "encode_string", "bytepad",
    "shake256", "cshake256", "kmacxof256",
    "hash_kmacxof256", "mac", "DIGEST_SIZE",
    # Curve
    "CurvePoint", "G", "IDENTITY", "P", "D", "R", "N",
    "validate", "sqrt_mod_p", "point_from_x", "add", "negate", "scalar_multiply",
    "encode_point", "decode_point", "POINT_SIZE",
    # Protocols
    "ec_keypair", "ec_public_key", "PUBLIC_KEY_SIZE",
    "ec_encrypt", "ec_decrypt", "ECCryptogram",
    "ec_sign", "ec_verify", "Signature", "SIGNATURE_SIZE",
    "symm_encrypt", "symm_decrypt", "SymmetricCryptogram", "SALT_SIZE",
    "TAG_SIZE",
    # Errors
    "E521Error", "InvalidPoint", "AuthenticationFailure", "EncodingViolation",
]
