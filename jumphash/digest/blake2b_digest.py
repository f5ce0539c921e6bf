import hashlib
from typing import Any

from jumphash.exceptions import InvalidConfiguration

from .key_encoding import key_to_bytes


class Blake2bDigest:
    """
    Keyed BLAKE2b digest truncated to 8 bytes, read little-endian.

    Slower than xxHash but cryptographically strong and reproducible in any
    language with a BLAKE2b implementation.
    """

    __slots__ = ("_key", "_person")

    def __init__(self, key: bytes = b"", person: bytes = b"") -> None:
        if len(key) > hashlib.blake2b.MAX_KEY_SIZE:
            raise InvalidConfiguration(
                f"BLAKE2b key must be at most {hashlib.blake2b.MAX_KEY_SIZE} bytes, got {len(key)}"
            )

        if len(person) > hashlib.blake2b.PERSON_SIZE:
            raise InvalidConfiguration(
                f"BLAKE2b personalization must be at most {hashlib.blake2b.PERSON_SIZE} bytes, got {len(person)}"
            )

        self._key = key
        self._person = person

    def digest(self, key: Any) -> int:
        hasher = hashlib.blake2b(
            key_to_bytes(key),
            digest_size=8,
            key=self._key,
            person=self._person,
        )
        return int.from_bytes(hasher.digest(), byteorder="little")

    def __repr__(self) -> str:
        return f"Blake2bDigest(person={self._person!r})"
