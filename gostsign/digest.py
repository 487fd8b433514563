"""Message digests reduced to the integer representative the signer consumes."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Union

DEFAULT_ALGORITHM = "sha256"
ALGORITHMS = ("sha256", "sha512", "sha3_256", "blake2b")

PathLike = Union[str, Path]


def file_digest(path: PathLike, algorithm: str = DEFAULT_ALGORITHM, chunk_size: int = 8192) -> bytes:
    if algorithm not in ALGORITHMS:
        raise ValueError(f"Unsupported digest algorithm: {algorithm}")

    hasher = hashlib.new(algorithm)
    with open(path, "rb") as src:
        while True:
            chunk = src.read(chunk_size)
            if not chunk:
                break
            hasher.update(chunk)
    return hasher.digest()


def message_representative(digest: bytes) -> int:
    # little-endian two's complement, so the top bit of the last byte is the sign
    return int.from_bytes(digest, "little", signed=True)


def hash_file_to_int(path: PathLike, algorithm: str = DEFAULT_ALGORITHM) -> int:
    return message_representative(file_digest(path, algorithm))
