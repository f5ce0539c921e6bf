"""
Test: Digest Providers

This test validates the key digest strategies:
1. XXHashDigest matches xxh64 over the key bytes and honors its seed
2. RandomizedDigest is stable per instance and differs across instances
3. Blake2bDigest matches keyed BLAKE2b and validates its parameters
4. Callables are adapted and their results masked to 64 bits
5. Providers are built from configuration names

Run with: pytest tests/unit/digest/test_digest_providers.py
"""

import hashlib

import pytest
import xxhash

from jumphash import InvalidConfiguration
from jumphash.digest import (
    Blake2bDigest,
    CallableDigest,
    DigestProvider,
    RandomizedDigest,
    XXHashDigest,
    as_digest_provider,
    create_digest_provider,
)


KEYS = [f"key-{index}" for index in range(50)]


def test_xxhash_digest_matches_xxh64():
    provider = XXHashDigest()

    assert provider.digest("my-key") == xxhash.xxh64(b"my-key", seed=0).intdigest()
    assert provider.digest(b"my-key") == provider.digest("my-key")


def test_xxhash_digest_seed():
    provider = XXHashDigest(seed=1234)

    assert provider.seed == 1234
    assert provider.digest("my-key") == xxhash.xxh64(b"my-key", seed=1234).intdigest()
    assert XXHashDigest(seed=-1).seed == 2**64 - 1


@pytest.mark.parametrize(
    "provider",
    [XXHashDigest(), XXHashDigest(seed=7), RandomizedDigest(), Blake2bDigest()],
)
def test_digests_are_unsigned_64_bit(provider: DigestProvider):
    for key in KEYS:
        digest = provider.digest(key)
        assert 0 <= digest < 2**64
        assert provider.digest(key) == digest


def test_randomized_digest_differs_between_instances():
    first = RandomizedDigest()
    second = RandomizedDigest()

    assert [first.digest(key) for key in KEYS] != [second.digest(key) for key in KEYS]


def test_blake2b_digest_matches_hashlib():
    provider = Blake2bDigest(key=b"secret", person=b"jumphash")

    expected = hashlib.blake2b(
        b"my-key",
        digest_size=8,
        key=b"secret",
        person=b"jumphash",
    ).digest()

    assert provider.digest("my-key") == int.from_bytes(expected, byteorder="little")


def test_blake2b_digest_key_changes_digest():
    assert Blake2bDigest(key=b"a").digest("my-key") != Blake2bDigest(key=b"b").digest(
        "my-key"
    )


def test_blake2b_digest_rejects_oversized_parameters():
    with pytest.raises(InvalidConfiguration):
        Blake2bDigest(key=b"k" * 65)

    with pytest.raises(InvalidConfiguration):
        Blake2bDigest(person=b"p" * 17)


def test_callable_digest_masks_result():
    provider = CallableDigest(lambda key: -1)

    assert provider.digest("anything") == 2**64 - 1
    assert CallableDigest(lambda key: 2**64 + 5).digest("anything") == 5


def test_callable_digest_coerces_to_int():
    provider = CallableDigest(lambda key: 12.75)

    assert provider.digest("anything") == 12
    assert CallableDigest(lambda key: -1.0).digest("anything") == 2**64 - 1


def test_callable_digest_repr_names_function():
    def by_length(key):
        return len(key)

    assert "by_length" in repr(CallableDigest(by_length))


def test_providers_satisfy_protocol():
    for provider in (
        XXHashDigest(),
        RandomizedDigest(),
        Blake2bDigest(),
        CallableDigest(len),
    ):
        assert isinstance(provider, DigestProvider)


def test_as_digest_provider():
    provider = XXHashDigest()

    assert as_digest_provider(provider) is provider
    assert isinstance(as_digest_provider(len), CallableDigest)

    with pytest.raises(InvalidConfiguration):
        as_digest_provider(42)


def test_as_digest_provider_rejects_classes():
    for provider_class in (XXHashDigest, Blake2bDigest, CallableDigest):
        with pytest.raises(InvalidConfiguration):
            as_digest_provider(provider_class)


def test_create_digest_provider():
    xxhash_provider = create_digest_provider("xxhash", seed=5)
    assert isinstance(xxhash_provider, XXHashDigest)
    assert xxhash_provider.seed == 5

    assert isinstance(create_digest_provider("randomized"), RandomizedDigest)
    assert create_digest_provider("blake2b", key=b"k").digest("x") == Blake2bDigest(
        key=b"k"
    ).digest("x")

    with pytest.raises(InvalidConfiguration):
        create_digest_provider("md5")
