"""Flat text encoding for domain parameters, keys and signatures.

Every value is a single line of whitespace-separated decimal integers:

* domain parameters: ``p a b q x y``
* private key: ``d``
* public key: ``x y a b p`` (the bare ``x y`` form is also accepted)
* signature: ``r s``
"""

from __future__ import annotations

import re
from typing import List

from gostsign.constants import Signature
from gostsign.dataclass import DomainParameters, ECPoint

_INTEGER = re.compile(r"-?[0-9]+")


class ParseError(ValueError):
    """Malformed key, signature or domain-parameter text."""


def parse_integers(text: str, count: int, what: str) -> List[int]:
    tokens = text.split()
    if len(tokens) != count:
        raise ParseError(f"{what} must contain {count} integers, got {len(tokens)}")
    for token in tokens:
        if not _INTEGER.fullmatch(token):
            raise ParseError(f"{what} contains a non-numeric token: {token!r}")
    return [int(token, 10) for token in tokens]


def _format_line(*values: int) -> str:
    return " ".join(str(value) for value in values) + "\n"


# --- Domain parameters ---------------------------------------------------------


def format_domain_parameters(params: DomainParameters) -> str:
    return _format_line(params.p, params.a, params.b, params.q, params.x, params.y)


def parse_domain_parameters(text: str) -> DomainParameters:
    p, a, b, q, x, y = parse_integers(text, 6, "domain parameters")
    return DomainParameters(p=p, a=a, b=b, q=q, x=x, y=y)


# --- Keys ----------------------------------------------------------------------


def format_private_key(private_key: int) -> str:
    return _format_line(private_key)


def parse_private_key(text: str) -> int:
    (d,) = parse_integers(text, 1, "private key")
    return d


def format_public_key(point: ECPoint, params: DomainParameters) -> str:
    if point.is_infinity:
        raise ValueError("the point at infinity is not a valid public key")
    return _format_line(point.x, point.y, params.a, params.b, params.p)


def parse_public_key(text: str, params: DomainParameters) -> ECPoint:
    if len(text.split()) == 2:
        x, y = parse_integers(text, 2, "public key")
        return ECPoint(x, y)

    x, y, a, b, p = parse_integers(text, 5, "public key")
    if (a, b, p) != (params.a, params.b, params.p):
        raise ParseError("public key was generated for a different curve")
    return ECPoint(x, y)


# --- Signatures ----------------------------------------------------------------


def format_signature(signature: Signature) -> str:
    return _format_line(*signature)


def parse_signature(text: str) -> Signature:
    r, s = parse_integers(text, 2, "signature")
    return r, s
