from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ECPoint:
    x: int | None
    y: int | None

    @property
    def is_infinity(self) -> bool:
        return self.x is None and self.y is None


@dataclass(frozen=True)
class DomainParameters:
    """Curve y^2 = x^3 + a*x + b over F_p with base point (x, y) of prime order q."""

    p: int
    a: int
    b: int
    q: int
    x: int
    y: int

    @property
    def base_point(self) -> ECPoint:
        return ECPoint(self.x, self.y)

    def is_on_curve(self, point: ECPoint) -> bool:
        if point.is_infinity:
            return True
        x, y = point.x, point.y
        if x is None or y is None:
            return False
        lhs = (y * y) % self.p
        rhs = (x * x * x + self.a * x + self.b) % self.p
        return lhs == rhs
