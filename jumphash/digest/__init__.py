"""Digest providers turning arbitrary keys into 64-bit digests."""

from .blake2b_digest import Blake2bDigest as Blake2bDigest
from .callable_digest import CallableDigest as CallableDigest
from .digest_provider import (
    DigestProvider as DigestProvider,
    U64_MASK as U64_MASK,
)
from .factory import (
    DigestName as DigestName,
    as_digest_provider as as_digest_provider,
    create_digest_provider as create_digest_provider,
)
from .key_encoding import key_to_bytes as key_to_bytes
from .randomized_digest import RandomizedDigest as RandomizedDigest
from .xxhash_digest import XXHashDigest as XXHashDigest
