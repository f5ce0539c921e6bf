from typing import Any

import xxhash

from .digest_provider import U64_MASK
from .key_encoding import key_to_bytes


class XXHashDigest:
    """
    Default digest strategy: 64-bit xxHash over the key's byte encoding.

    For a fixed seed the digest is stable across calls, processes and
    machines, so bucket assignments can be shared between services.
    """

    __slots__ = ("_seed",)

    def __init__(self, seed: int = 0) -> None:
        self._seed = seed & U64_MASK

    @property
    def seed(self) -> int:
        return self._seed

    def digest(self, key: Any) -> int:
        return xxhash.xxh64_intdigest(key_to_bytes(key), seed=self._seed)

    def __repr__(self) -> str:
        return f"XXHashDigest(seed={self._seed})"
