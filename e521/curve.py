# Copyright (c) 2026 Signer — MIT License

"""Edwards curve E-521 in affine coordinates.

E-521:  x^2 + y^2 = 1 + d*x^2*y^2  (mod p),  p = 2^521 - 1,  d = -376014

d is not a square mod p, so the Edwards addition law is complete: the
denominators 1 +/- d*x1*x2*y1*y2 never vanish for points on the curve and
the same formula handles doubling and the identity.

Group order n = 4r with r a 519-bit prime (cofactor 4). The base point
G = (4, y0) with y0 even generates the order-r subgroup.

Encoding (67 bytes):
    x as 66 big-endian bytes || one byte holding the least significant bit of y

Every CurvePoint is checked against the curve equation when it is built, so
an arithmetic slip in add() surfaces as InvalidPoint instead of a bad point.
"""

from .errors import InvalidPoint

# ── Curve Constants ─────────────────────────────────────────────

P = (1 << 521) - 1
D = -376014
R = (1 << 519) - 337554763258501705789107630418782636071904961214051226618635150085779108655765
N = 4 * R
COFACTOR = 4

FIELD_SIZE = 66               # bytes per coordinate
POINT_SIZE = FIELD_SIZE + 1   # encoded point


# ── Field Helpers ───────────────────────────────────────────────

def _inv(a):
    """Modular inverse mod P; InvalidPoint when a has none."""
    a %= P
    if a == 0:
        raise InvalidPoint("denominator is not invertible mod p")
    return pow(a, -1, P)


def validate(x, y):
    """True iff 0 <= x, y < P and (x, y) satisfies the E-521 equation."""
    if not (0 <= x < P and 0 <= y < P):
        return False
    x2 = x * x
    y2 = y * y
    return (x2 + y2 - 1 - D * x2 * y2) % P == 0


def sqrt_mod_p(v, p, want_parity):
    """Square root of v mod p with the requested least significant bit.

    Requires p = 3 (mod 4). Returns None when v is not a quadratic residue.
    """
    if p & 3 != 3:
        raise ValueError("sqrt_mod_p requires p = 3 (mod 4)")
    v %= p
    if v == 0:
        return 0
    r = pow(v, (p + 1) >> 2, p)
    if (r & 1) != (want_parity & 1):
        r = p - r
    if (r * r - v) % p != 0:
        return None
    return r


# ── Points ──────────────────────────────────────────────────────

class CurvePoint:
    """Immutable affine point on E-521."""

    __slots__ = ("_x", "_y")

    def __init__(self, x, y):
        if not validate(x, y):
            raise InvalidPoint("coordinates do not satisfy the E-521 equation")
        object.__setattr__(self, "_x", x)
        object.__setattr__(self, "_y", y)

    def __setattr__(self, name, value):
        raise AttributeError("CurvePoint is immutable")

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __eq__(self, other):
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y))

    def __add__(self, other):
        if not isinstance(other, CurvePoint):
            return NotImplemented
        return add(self, other)

    def __neg__(self):
        return negate(self)

    def __rmul__(self, k):
        if not isinstance(k, int):
            return NotImplemented
        return scalar_multiply(k, self)

    def __repr__(self):
        return f"CurvePoint(x={self._x:#x}, y={self._y:#x})"

    def is_identity(self):
        return self._x == 0 and self._y == 1


IDENTITY = CurvePoint(0, 1)


def point_from_x(x, parity):
    """Point with the given x and least significant bit of y.

    y = sqrt((1 - x^2) / (1 + 376014*x^2)) mod P

    Raises:
        InvalidPoint: x out of range, non-invertible denominator, or no root.
    """
    if not 0 <= x < P:
        raise InvalidPoint("x coordinate out of range")
    x2 = x * x % P
    radicand = (1 - x2) * _inv(1 - D * x2) % P
    y = sqrt_mod_p(radicand, P, parity)
    if y is None:
        raise InvalidPoint("no point with this x coordinate on E-521")
    return CurvePoint(x, y)


G = point_from_x(4, 0)


# ── Point Arithmetic ───────────────────────────────────────────

def add(p1, p2):
    """Complete Edwards addition.

    x3 = (x1*y2 + y1*x2) / (1 + d*x1*x2*y1*y2)
    y3 = (y1*y2 - x1*x2) / (1 - d*x1*x2*y1*y2)
    """
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    t = D * x1 * x2 % P * y1 * y2 % P
    x3 = (x1 * y2 + y1 * x2) * _inv(1 + t) % P
    y3 = (y1 * y2 - x1 * x2) * _inv(1 - t) % P
    return CurvePoint(x3, y3)


def negate(point):
    """-(x, y) = (-x, y)."""
    return CurvePoint(-point.x % P, point.y)


def scalar_multiply(k, point):
    """k * point by left-to-right double-and-add.

    The accumulator starts at point itself, which accounts for the leading
    1 bit of k; each remaining bit, most significant first, doubles the
    accumulator and adds point when the bit is set.
    """
    if k < 0:
        return scalar_multiply(-k, negate(point))
    if k == 0:
        return IDENTITY
    acc = point
    for i in range(k.bit_length() - 2, -1, -1):
        acc = add(acc, acc)
        if (k >> i) & 1:
            acc = add(acc, point)
    return acc


# ── Encoding ────────────────────────────────────────────────────

def encode_point(point):
    """66-byte big-endian x || lsb(y)."""
    return point.x.to_bytes(FIELD_SIZE, "big") + bytes([point.y & 1])


def decode_point(data):
    """Inverse of encode_point.

    Raises:
        InvalidPoint: wrong length, parity byte not 0/1, or x not on the curve.
    """
    data = bytes(data)
    if len(data) != POINT_SIZE:
        raise InvalidPoint(f"encoded point must be {POINT_SIZE} bytes, got {len(data)}")
    parity = data[-1]
    if parity > 1:
        raise InvalidPoint(f"parity byte must be 0 or 1, got {parity}")
    x = int.from_bytes(data[:FIELD_SIZE], "big")
    return point_from_x(x, parity)
