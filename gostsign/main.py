"""Command-line front end: key generation, signing and verification of files.

Keys and signatures are stored as flat decimal text (see
:mod:`gostsign.encoding`); messages are reduced to an integer with the
digest from :mod:`gostsign.digest`.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Optional

from gostsign.constants import GOST_TEST_CURVE
from gostsign.digest import ALGORITHMS, DEFAULT_ALGORITHM, hash_file_to_int
from gostsign.encoding import (
    ParseError,
    format_domain_parameters,
    format_private_key,
    format_public_key,
    format_signature,
    parse_domain_parameters,
    parse_integers,
    parse_private_key,
    parse_public_key,
    parse_signature,
)
from gostsign.signer import Signer


# --- Helpers --------------------------------------------------------------------


def _read_text(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Unable to read {what} from {path}: {exc.strerror}") from exc


def _write_text(path: Path, text: str, what: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Unable to write {what} to {path}: {exc.strerror}") from exc


def _message_representative(path: Path, algorithm: str) -> int:
    try:
        return hash_file_to_int(path, algorithm)
    except OSError as exc:
        raise SystemExit(f"Unable to read message from {path}: {exc.strerror}") from exc


def _make_signer(args: argparse.Namespace) -> Signer:
    if args.params is None:
        return Signer(GOST_TEST_CURVE)
    try:
        return Signer(parse_domain_parameters(_read_text(args.params, "domain parameters")))
    except ParseError as exc:
        raise SystemExit(f"Invalid domain parameters: {exc}") from exc


def _public_key_path(path: Path) -> Path:
    return path.with_name(path.name + ".pub")


# --- Command handlers ---------------------------------------------------------


def _cmd_keygen(args: argparse.Namespace) -> None:
    signer = _make_signer(args)
    path: Path = args.path
    if path.is_dir():
        path = path / "key"

    private_key, public_key = signer.gen_keys()
    pub_path = _public_key_path(path)
    _write_text(path, format_private_key(private_key), "private key")
    _write_text(pub_path, format_public_key(public_key, signer.params), "public key")
    print(f"Private key written to {path}")
    print(f"Public key written to {pub_path}")


def _cmd_sign(args: argparse.Namespace) -> None:
    signer = _make_signer(args)
    try:
        private_key = parse_private_key(_read_text(args.private_key, "private key"))
        nonce = 0 if args.nonce is None else parse_integers(args.nonce, 1, "nonce")[0]
    except ParseError as exc:
        raise SystemExit(f"Invalid input: {exc}") from exc

    message = _message_representative(args.message, args.hash)
    try:
        signature = signer.sign(message, private_key, nonce)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    _write_text(args.sign, format_signature(signature), "signature")
    print(f"Signature written to {args.sign}")


def _cmd_verify(args: argparse.Namespace) -> None:
    signer = _make_signer(args)
    try:
        public_key = parse_public_key(_read_text(args.public_key, "public key"), signer.params)
        signature = parse_signature(_read_text(args.sign, "signature"))
    except ParseError as exc:
        raise SystemExit(f"Invalid input: {exc}") from exc

    message = _message_representative(args.message, args.hash)
    if signer.verify(message, signature, public_key):
        print("Sign is verified!")
    else:
        print("Sign isn't verified!")


def _cmd_params(args: argparse.Namespace) -> None:
    signer = _make_signer(args)
    _write_text(args.path, format_domain_parameters(signer.params), "domain parameters")
    print(f"Domain parameters written to {args.path}")


# --- CLI ----------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gostsign",
        description="GOST R 34.10 elliptic-curve signer/verifier for files.",
    )
    parser.add_argument(
        "--params",
        type=Path,
        help="File with domain parameters 'p a b q x y' (default: GOST R 34.10 test curve).",
    )
    parser.add_argument(
        "--hash",
        choices=ALGORITHMS,
        default=DEFAULT_ALGORITHM,
        help=f"Message digest (default: {DEFAULT_ALGORITHM}).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    keygen_parser = subparsers.add_parser("keygen", help="Generate keys.")
    keygen_parser.add_argument("path", type=Path, help="Private key file; the public key goes to PATH.pub.")
    keygen_parser.set_defaults(func=_cmd_keygen)

    sign_parser = subparsers.add_parser("sign", help="Sign file.")
    sign_parser.add_argument("message", type=Path, help="The message to sign.")
    sign_parser.add_argument("private_key", type=Path, help="The key to use.")
    sign_parser.add_argument("sign", type=Path, help="Where to write the sign.")
    sign_parser.add_argument(
        "--nonce",
        help="Optional fixed scalar k for testing (decimal).",
    )
    sign_parser.set_defaults(func=_cmd_sign)

    verify_parser = subparsers.add_parser("verify", help="Verify file.")
    verify_parser.add_argument("message", type=Path, help="The message to verify.")
    verify_parser.add_argument("public_key", type=Path, help="The key to use.")
    verify_parser.add_argument("sign", type=Path, help="The sign to use.")
    verify_parser.set_defaults(func=_cmd_verify)

    params_parser = subparsers.add_parser("params", help="Write the active domain parameters.")
    params_parser.add_argument("path", type=Path, help="Destination file.")
    params_parser.set_defaults(func=_cmd_params)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
