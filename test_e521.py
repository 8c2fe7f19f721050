"""Tests for E-521 key pairs, Schnorr signatures, EC encryption and
password-based symmetric encryption.

Includes known-answer vectors (fixed passphrase, salt and randomness),
round-trip checks and tamper rejection.
"""

import os
import sys

PASSPHRASE = b"correct horse battery staple"
MESSAGE = b"The quick brown fox jumps over the lazy dog"
PLAINTEXT = b"attack at dawn"

# ── Known-Answer Vectors ───────────────────────────────────────

KAT_PUBLIC_KEY = bytes.fromhex(
    "00084d43392b6dc418f7f018c8cac556e5f6bf88ae0bc76410f01df1e24d3ab1"
    "be0cafa72aa55967ef952600f9621fd2af3b337de8d632826b8c84a214ca54c7"
    "41d700"
)

KAT_SIGNATURE = bytes.fromhex(
    "c544b7ce44a7802c5e63d502462ea3de6e66c56714ca27e41b92cd691986c43c"
    "a4e40e62312501e81779ddb0aa91fa0fe66c669dc54d01e9f597da3f61bf65f5"
    "00217d5654f1273ff03ceef5d0ce13df2d46a977824182825e01a3f8a546b47a"
    "a1ab74577b605cf7cefaff4e7c2c7b6e17e3fe38e8a838f47456495a16f8a03c"
    "e899"
)

KAT_SALT = bytes(range(64))
KAT_SYMMETRIC = bytes.fromhex(
    "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
    "202122232425262728292a2b2c2d2e2f303132333435363738393a3b3c3d3e3f"
    "c2f798282c4d9422961dac08e25b"
    "fa2e9956de8d7ebfc1e4eacf45676d05e7fdaaf2bd4f0f1f487451785bfa6b28"
    "b74f9864bfcdb130bf945d6b4b570fb67013588f9aa0e3962f5ce0348f1e6960"
)

KAT_RANDOMNESS = bytes(0xFF - i for i in range(64))
KAT_EC_CRYPTOGRAM = bytes.fromhex(
    "000ece37f23e2c2a0f6e0fc011a8129e1a1e0919aebf1e4b0e6c7cb85e3d48bd"
    "599c05867b698e852aea67729650a7d66cf100b386a21b8727dd7d1fe15e7462"
    "9a8b00"
    "2ca4372a2ac72c32ac46bdc6066b"
    "44c9a318fffac48018a57d5d47cee995fc64d51e5370197f2f8bccbb7097a11a"
    "fda4360cd088c8d4f71191a8c1273d531f9e8905193013e70122797f178a85ab"
)


def _flip(data, bit):
    out = bytearray(data)
    out[bit // 8] ^= 1 << (bit % 8)
    return bytes(out)


# ── Key Pairs ──────────────────────────────────────────────────

def test_keypair():
    from e521 import (
        ec_keypair, ec_public_key, encode_point, decode_point, scalar_multiply,
        R, PUBLIC_KEY_SIZE,
    )
    from e521.keys import private_scalar

    passed = 0

    V = ec_keypair(PASSPHRASE)
    assert ec_public_key(PASSPHRASE) == KAT_PUBLIC_KEY
    assert encode_point(V) == KAT_PUBLIC_KEY
    assert len(KAT_PUBLIC_KEY) == PUBLIC_KEY_SIZE == 67
    passed += 1

    # Deterministic from the passphrase
    assert ec_keypair(PASSPHRASE) == V
    assert ec_keypair(b"another passphrase") != V
    passed += 1

    # Private scalar is a multiple of the cofactor
    s = private_scalar(PASSPHRASE)
    assert s % 4 == 0
    assert s.bit_length() <= 514
    passed += 1

    # Public key lies in the order-r subgroup
    assert scalar_multiply(R, V).is_identity()
    assert decode_point(KAT_PUBLIC_KEY) == V
    passed += 1

    # Empty passphrase is allowed
    assert len(ec_public_key(b"")) == 67
    passed += 1

    # str passphrases are rejected
    try:
        ec_keypair("not bytes")
        assert False, "str passphrase should be rejected"
    except TypeError:
        pass
    passed += 1

    print(f"  Key pairs: {passed}/6 passed")


# ── Schnorr Signatures ─────────────────────────────────────────

def test_signature_vectors():
    from e521 import ec_sign, ec_verify, Signature, SIGNATURE_SIZE

    passed = 0

    sig = ec_sign(MESSAGE, PASSPHRASE)
    assert sig.to_bytes() == KAT_SIGNATURE
    assert len(KAT_SIGNATURE) == SIGNATURE_SIZE == 130
    passed += 1

    # Deterministic nonce: same inputs, same signature
    assert ec_sign(MESSAGE, PASSPHRASE) == sig
    passed += 1

    # Wire round trip
    assert Signature.from_bytes(KAT_SIGNATURE) == sig
    assert ec_verify(KAT_SIGNATURE, MESSAGE, KAT_PUBLIC_KEY)
    passed += 1

    print(f"  Signature vectors: {passed}/3 passed")


def test_signature_roundtrip():
    from e521 import ec_sign, ec_verify, ec_keypair, R

    passed = 0
    V = ec_keypair(PASSPHRASE)

    for msg in [b"", b"\x00", b"hello", os.urandom(300)]:
        sig = ec_sign(msg, PASSPHRASE)
        assert len(sig.h) == 64
        assert 0 <= sig.z < R
        assert ec_verify(sig, msg, V)
        assert ec_verify(sig.to_bytes(), msg, V)
        passed += 1

    print(f"  Signature round-trip: {passed}/4 passed")


def test_signature_rejection():
    from e521 import ec_sign, ec_verify, ec_keypair, Signature, R

    passed = 0
    V = ec_keypair(PASSPHRASE)
    sig = ec_sign(MESSAGE, PASSPHRASE)

    # Altered message
    assert not ec_verify(sig, MESSAGE + b".", V)
    assert not ec_verify(sig, MESSAGE[:-1], V)
    passed += 1

    # Altered challenge h
    for bit in [0, 7, 100, 511]:
        assert not ec_verify(Signature(_flip(sig.h, bit), sig.z), MESSAGE, V)
    passed += 1

    # Altered response z
    assert not ec_verify(Signature(sig.h, (sig.z + 1) % R), MESSAGE, V)
    assert not ec_verify(Signature(sig.h, sig.z ^ 1), MESSAGE, V)
    passed += 1

    # Wrong or altered public key
    assert not ec_verify(sig, MESSAGE, ec_keypair(b"wrong passphrase"))
    for bit in [8, 300, 66 * 8]:
        assert not ec_verify(sig, MESSAGE, _flip(KAT_PUBLIC_KEY, bit))
    passed += 1

    # Out-of-range z and malformed inputs fail closed
    assert not ec_verify(Signature(sig.h, sig.z + R), MESSAGE, V)
    assert not ec_verify(Signature(sig.h, -1), MESSAGE, V)
    assert not ec_verify(Signature(sig.h[:-1], sig.z), MESSAGE, V)
    assert not ec_verify(KAT_SIGNATURE[:-1], MESSAGE, V)
    assert not ec_verify(KAT_SIGNATURE, MESSAGE, KAT_PUBLIC_KEY[:-1])
    passed += 1

    print(f"  Signature rejection: {passed}/5 passed")


# ── EC Encryption ──────────────────────────────────────────────

def test_ec_encryption_vectors():
    from e521 import ec_encrypt, ec_decrypt, ECCryptogram

    passed = 0

    ct = ec_encrypt(KAT_PUBLIC_KEY, PLAINTEXT, randomness=KAT_RANDOMNESS)
    assert ct.to_bytes() == KAT_EC_CRYPTOGRAM
    assert len(KAT_EC_CRYPTOGRAM) == 131 + len(PLAINTEXT)
    passed += 1

    assert ec_decrypt(PASSPHRASE, KAT_EC_CRYPTOGRAM) == PLAINTEXT
    assert ec_decrypt(PASSPHRASE, ECCryptogram.from_bytes(KAT_EC_CRYPTOGRAM)) == PLAINTEXT
    passed += 1

    print(f"  EC encryption vectors: {passed}/2 passed")


def test_ec_encryption_roundtrip():
    from e521 import ec_encrypt, ec_decrypt, ec_keypair

    passed = 0
    V = ec_keypair(PASSPHRASE)

    for msg in [b"", b"x", PLAINTEXT, os.urandom(1000)]:
        ct = ec_encrypt(V, msg)
        assert len(ct.c) == len(msg)
        assert ec_decrypt(PASSPHRASE, ct) == msg
        passed += 1

    # Randomized: two encryptions of the same message differ
    a = ec_encrypt(V, PLAINTEXT).to_bytes()
    b = ec_encrypt(V, PLAINTEXT).to_bytes()
    assert a != b
    passed += 1

    print(f"  EC encryption round-trip: {passed}/5 passed")


def test_ec_encryption_rejection():
    from e521 import ec_decrypt, ECCryptogram, AuthenticationFailure, InvalidPoint

    passed = 0

    # Tampered ciphertext or tag: authentication failure
    for bit in [67 * 8, 67 * 8 + 5, (67 + len(PLAINTEXT)) * 8 - 1,
                (67 + len(PLAINTEXT)) * 8, len(KAT_EC_CRYPTOGRAM) * 8 - 1]:
        try:
            ec_decrypt(PASSPHRASE, _flip(KAT_EC_CRYPTOGRAM, bit))
            assert False, f"tamper at bit {bit} was not rejected"
        except AuthenticationFailure:
            pass
    passed += 1

    # Tampered Z: either no longer decodes or fails authentication
    for bit in [8, 200, 65 * 8 + 3]:
        try:
            ec_decrypt(PASSPHRASE, _flip(KAT_EC_CRYPTOGRAM, bit))
            assert False, f"tamper at bit {bit} was not rejected"
        except (AuthenticationFailure, InvalidPoint):
            pass
    passed += 1

    # Wrong passphrase
    try:
        ec_decrypt(b"wrong passphrase", KAT_EC_CRYPTOGRAM)
        assert False, "wrong passphrase was not rejected"
    except AuthenticationFailure:
        pass
    passed += 1

    # Too short to hold Z and t
    try:
        ECCryptogram.from_bytes(KAT_EC_CRYPTOGRAM[:130])
        assert False, "short cryptogram was not rejected"
    except ValueError:
        pass
    passed += 1

    print(f"  EC encryption rejection: {passed}/4 passed")


# ── Symmetric Encryption ───────────────────────────────────────

def test_symmetric_vectors():
    from e521 import symm_encrypt, symm_decrypt

    passed = 0

    ct = symm_encrypt(PASSPHRASE, PLAINTEXT, salt=KAT_SALT)
    assert ct.to_bytes() == KAT_SYMMETRIC
    assert len(KAT_SYMMETRIC) == 128 + len(PLAINTEXT)
    passed += 1

    assert symm_decrypt(PASSPHRASE, KAT_SYMMETRIC) == PLAINTEXT
    passed += 1

    print(f"  Symmetric vectors: {passed}/2 passed")


def test_symmetric_roundtrip():
    from e521 import symm_encrypt, symm_decrypt, SymmetricCryptogram

    passed = 0

    for msg in [b"", b"x", PLAINTEXT, os.urandom(1000)]:
        ct = symm_encrypt(PASSPHRASE, msg)
        assert len(ct.salt) == 64 and len(ct.t) == 64
        assert symm_decrypt(PASSPHRASE, ct) == msg
        assert symm_decrypt(PASSPHRASE, SymmetricCryptogram.from_bytes(ct.to_bytes())) == msg
        passed += 1

    # Fresh salt per call
    assert symm_encrypt(PASSPHRASE, PLAINTEXT) != symm_encrypt(PASSPHRASE, PLAINTEXT)
    passed += 1

    print(f"  Symmetric round-trip: {passed}/5 passed")


def test_symmetric_rejection():
    from e521 import symm_encrypt, symm_decrypt, AuthenticationFailure

    passed = 0

    # Any flipped bit (salt, ciphertext or tag) is rejected
    for bit in [0, 511, 64 * 8, (64 + len(PLAINTEXT)) * 8 - 1,
                (64 + len(PLAINTEXT)) * 8, len(KAT_SYMMETRIC) * 8 - 1]:
        try:
            symm_decrypt(PASSPHRASE, _flip(KAT_SYMMETRIC, bit))
            assert False, f"tamper at bit {bit} was not rejected"
        except AuthenticationFailure:
            pass
    passed += 1

    try:
        symm_decrypt(b"wrong passphrase", KAT_SYMMETRIC)
        assert False, "wrong passphrase was not rejected"
    except AuthenticationFailure:
        pass
    passed += 1

    # Salt must be 64 bytes
    try:
        symm_encrypt(PASSPHRASE, PLAINTEXT, salt=b"short")
        assert False, "short salt was not rejected"
    except ValueError:
        pass
    passed += 1

    try:
        symm_decrypt(PASSPHRASE, KAT_SYMMETRIC[:127])
        assert False, "short cryptogram was not rejected"
    except ValueError:
        pass
    passed += 1

    print(f"  Symmetric rejection: {passed}/4 passed")


# ── Secret Memory ──────────────────────────────────────────────

def test_secure_zero():
    from e521 import _secmem

    passed = 0

    buf = bytearray(b"\xaa" * 64)
    _secmem.mlock(buf)
    _secmem.munlock(buf)
    _secmem.secure_zero(buf)
    assert buf == bytearray(64)
    passed += 1

    # Immutable and empty buffers are left alone
    data = b"\xaa" * 8
    _secmem.secure_zero(data)
    assert data == b"\xaa" * 8
    _secmem.secure_zero(bytearray())
    passed += 1

    print(f"  Secure zero: {passed}/2 passed")


# ── Main ───────────────────────────────────────────────────────

if __name__ == "__main__":
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    groups = [
        ("Key pairs", [test_keypair]),
        ("Schnorr signatures", [test_signature_vectors, test_signature_roundtrip,
                                test_signature_rejection]),
        ("EC encryption", [test_ec_encryption_vectors, test_ec_encryption_roundtrip,
                           test_ec_encryption_rejection]),
        ("Symmetric encryption", [test_symmetric_vectors, test_symmetric_roundtrip,
                                  test_symmetric_rejection]),
        ("Secret memory", [test_secure_zero]),
    ]

    all_ok = True
    for title, tests in groups:
        print(f"\nTesting {title}...")
        for test in tests:
            try:
                test()
            except AssertionError as e:
                all_ok = False
                print(f"  {test.__name__} FAILED: {e}")

    print()
    if all_ok:
        print("ALL TESTS PASSED")
    else:
        print("SOME TESTS FAILED")
        sys.exit(1)
