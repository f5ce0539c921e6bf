from typing import Any, Literal

from jumphash.exceptions import InvalidConfiguration

from .blake2b_digest import Blake2bDigest
from .callable_digest import CallableDigest
from .digest_provider import DigestProvider
from .randomized_digest import RandomizedDigest
from .xxhash_digest import XXHashDigest


DigestName = Literal["xxhash", "randomized", "blake2b"]


def create_digest_provider(
    name: DigestName,
    seed: int = 0,
    key: bytes = b"",
) -> DigestProvider:
    match name:
        case "xxhash":
            return XXHashDigest(seed=seed)

        case "randomized":
            return RandomizedDigest()

        case "blake2b":
            return Blake2bDigest(key=key)

        case _:
            raise InvalidConfiguration(f"Unknown digest provider {name!r}")


def as_digest_provider(value: Any) -> DigestProvider:
    # Classes expose digest as an unbound function and are callable, so both
    # checks below would accept them.
    if isinstance(value, type):
        raise InvalidConfiguration(
            f"Digest provider must be an instance, got the class {value.__name__}"
        )

    if isinstance(value, DigestProvider):
        return value

    if callable(value):
        return CallableDigest(value)

    raise InvalidConfiguration(
        f"Digest provider must implement digest(key) or be callable, got {type(value).__name__}"
    )
