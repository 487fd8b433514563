"""GOST R 34.10 style elliptic-curve signatures over short Weierstrass curves."""

from gostsign.constants import GOST_TEST_CURVE, POINT_INFINITY, Signature
from gostsign.curve import ArithmeticPrecondition, inverse_mod, point_add, point_neg, scalar_mult
from gostsign.dataclass import DomainParameters, ECPoint
from gostsign.encoding import ParseError
from gostsign.signer import SignatureError, Signer

__all__ = [
    "ArithmeticPrecondition",
    "DomainParameters",
    "ECPoint",
    "GOST_TEST_CURVE",
    "POINT_INFINITY",
    "ParseError",
    "Signature",
    "SignatureError",
    "Signer",
    "inverse_mod",
    "point_add",
    "point_neg",
    "scalar_mult",
]
