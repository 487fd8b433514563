"""GOST R 34.10 style signing and verification.

The signer holds one shared :class:`DomainParameters` instance; keys,
signatures and message representatives are plain integers and points.
"""

from __future__ import annotations

import secrets
from typing import Callable, Optional, Tuple

from gostsign.constants import MAX_SIGN_ATTEMPTS, Signature
from gostsign.curve import inverse_mod, point_add, scalar_mult
from gostsign.dataclass import DomainParameters, ECPoint
from gostsign.encoding import format_domain_parameters, parse_domain_parameters


class SignatureError(RuntimeError):
    """Raised when no usable nonce was found within the attempt budget."""


def _default_rand(upper: int) -> int:
    return secrets.randbelow(upper - 1) + 1


class Signer:
    def __init__(
        self,
        params: DomainParameters,
        randfunc: Optional[Callable[[int], int]] = None,
        max_attempts: int = MAX_SIGN_ATTEMPTS,
    ) -> None:
        self.params = params
        self.randfunc = randfunc or _default_rand
        self.max_attempts = max_attempts

    @classmethod
    def from_string(cls, text: str) -> "Signer":
        return cls(parse_domain_parameters(text))

    def __str__(self) -> str:
        return format_domain_parameters(self.params).strip()

    def _random_scalar(self) -> int:
        return self.randfunc(self.params.q)

    def _representative(self, message: int) -> int:
        e = message % self.params.q
        return e or 1

    def public_key(self, private_key: int) -> ECPoint:
        return scalar_mult(private_key, self.params.base_point, self.params)

    def gen_keys(self) -> Tuple[int, ECPoint]:
        d = self._random_scalar()
        return d, self.public_key(d)

    def sign(self, message: int, private_key: int, k: int = 0) -> Signature:
        """Sign ``message``; ``k = 0`` draws the nonce at random.

        A caller-supplied ``k`` is used for the first attempt only: if it
        yields ``r = 0`` or ``s = 0`` every retry draws a fresh nonce.
        """
        q = self.params.q
        if not (0 < private_key < q):
            raise ValueError("private_key must satisfy 0 < d < q")
        if not (0 <= k < q):
            raise ValueError("k must satisfy 0 <= k < q")

        e = self._representative(message)
        if k == 0:
            k = self._random_scalar()

        for _ in range(self.max_attempts):
            c = scalar_mult(k, self.params.base_point, self.params)
            if not c.is_infinity:
                r = c.x % q
                s = (r * private_key + k * e) % q
                if r != 0 and s != 0:
                    return r, s
            k = self._random_scalar()

        raise SignatureError(f"no valid signature after {self.max_attempts} nonces")

    def verify(self, message: int, signature: Signature, public_key: ECPoint) -> bool:
        q = self.params.q
        r, s = signature
        if not (0 < r < q and 0 < s < q):
            return False
        if public_key.is_infinity or not self.params.is_on_curve(public_key):
            return False

        e = self._representative(message)
        v = inverse_mod(e, q)
        z1 = (s * v) % q
        z2 = (-r * v) % q
        c = point_add(
            scalar_mult(z1, self.params.base_point, self.params),
            scalar_mult(z2, public_key, self.params),
            self.params,
        )
        if c.is_infinity:
            return False
        return c.x % q == r
