import secrets
from typing import Any

import xxhash

from .key_encoding import key_to_bytes


class RandomizedDigest:
    """
    xxHash64 keyed with a seed drawn from ``secrets`` when the instance is
    created.

    Digests are stable for the lifetime of an instance but differ between
    instances and between processes, which keeps an adversary from crafting
    keys that all land in one bucket.
    """

    __slots__ = ("_seed",)

    def __init__(self) -> None:
        self._seed = secrets.randbits(64)

    def digest(self, key: Any) -> int:
        return xxhash.xxh64_intdigest(key_to_bytes(key), seed=self._seed)

    def __repr__(self) -> str:
        return "RandomizedDigest()"
