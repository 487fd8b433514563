from gostsign.constants import POINT_INFINITY
from gostsign.dataclass import DomainParameters, ECPoint


class ArithmeticPrecondition(ArithmeticError):
    """Raised when a modular inverse is requested for a non-coprime pair."""


def inverse_mod(b: int, p: int) -> int:
    """Inverse of ``b`` modulo ``p`` via the iterative extended Euclidean algorithm."""
    x0, x1, n = 1, 0, p
    while n != 0:
        q = b // n
        b, n = n, b % n
        x0, x1 = x1, x0 - q * x1

    # b now holds gcd(b, p)
    if b != 1:
        raise ArithmeticPrecondition(f"value is not invertible modulo {p}")
    return x0 % p


def point_neg(point: ECPoint, curve: DomainParameters) -> ECPoint:
    if point.is_infinity:
        return POINT_INFINITY
    assert point.x is not None and point.y is not None
    return ECPoint(point.x, (-point.y) % curve.p)


def point_add(p1: ECPoint, p2: ECPoint, curve: DomainParameters) -> ECPoint:
    if p1.is_infinity:
        return p2
    if p2.is_infinity:
        return p1
    assert p1.x is not None and p1.y is not None
    assert p2.x is not None and p2.y is not None

    x1, y1 = p1.x % curve.p, p1.y % curve.p
    x2, y2 = p2.x % curve.p, p2.y % curve.p

    # P + (-P), including doubling a point of order two
    if x1 == x2 and (y1 + y2) % curve.p == 0:
        return POINT_INFINITY

    if x1 == x2:
        slope = (3 * x1 * x1 + curve.a) * inverse_mod(2 * y1, curve.p)
    else:
        slope = (y2 - y1) * inverse_mod(x2 - x1, curve.p)

    slope %= curve.p
    x3 = (slope * slope - x1 - x2) % curve.p
    y3 = (slope * (x1 - x3) - y1) % curve.p
    return ECPoint(x3, y3)


def scalar_mult(k: int, point: ECPoint, curve: DomainParameters) -> ECPoint:
    if k < 0:
        return scalar_mult(-k, point_neg(point, curve), curve)
    if k == 0 or point.is_infinity:
        return POINT_INFINITY

    result = point
    addend = point
    k -= 1

    while k:
        if k & 1:
            result = point_add(result, addend, curve)
            k -= 1
        k >>= 1
        addend = point_add(addend, addend, curve)

    return result
