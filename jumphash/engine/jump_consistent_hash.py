from __future__ import annotations

from typing import Any, Callable, Iterable

from jumphash.config import JumpHashConfig
from jumphash.digest import (
    DigestProvider,
    XXHashDigest,
    as_digest_provider,
    create_digest_provider,
)
from jumphash.exceptions import InvalidConfiguration
from jumphash.logging import (
    ConfigurationError,
    EngineCreated,
    LoggerStream,
    PrecisionWarning,
)

from .jump_bucket import jump_bucket
from .precision import Precision


class JumpConsistentHash:
    """
    Maps keys to one of a fixed number of buckets using jump consistent
    hashing.

    The engine is immutable: the bucket count, digest provider and precision
    are fixed at construction and ``get`` is a pure function of the key, so
    a single instance can be shared across threads without locking. Every
    call recomputes the bucket; nothing is cached.

    Usage:
        buckets = JumpConsistentHash(5)
        shard = buckets.get("user:1234")

        # Per-process randomized digests
        buckets = JumpConsistentHash(5, RandomizedDigest())
    """

    __slots__ = (
        "_bucket_count",
        "_digest_provider",
        "_precision",
    )

    _logger = LoggerStream(name="jumphash")

    def __init__(
        self,
        bucket_count: int,
        digest_provider: DigestProvider | Callable[[Any], int] | None = None,
        precision: Precision = Precision.DOUBLE,
    ) -> None:
        """
        Args:
            bucket_count: Number of buckets. Must be a positive integer.
            digest_provider: Strategy turning keys into 64-bit digests, or a
                plain ``key -> int`` callable. Defaults to XXHashDigest().
            precision: Float width of the jump algorithm's division step.

        Raises:
            InvalidConfiguration: If bucket_count is not a positive integer
                or digest_provider is unusable.
        """
        if (
            isinstance(bucket_count, bool)
            or not isinstance(bucket_count, int)
            or bucket_count <= 0
        ):
            self._logger.log(
                ConfigurationError(
                    message=f"Invalid bucket count {bucket_count!r}",
                    bucket_count=repr(bucket_count),
                    digest_provider=repr(digest_provider),
                )
            )

            raise InvalidConfiguration(
                f"bucket_count must be a positive integer, got {bucket_count!r}",
                bucket_count=bucket_count,
            )

        if digest_provider is None:
            digest_provider = XXHashDigest()

        try:
            digest_provider = as_digest_provider(digest_provider)

        except InvalidConfiguration as err:
            self._logger.log(
                ConfigurationError(
                    message=err.message,
                    bucket_count=repr(bucket_count),
                    digest_provider=repr(digest_provider),
                )
            )

            err.bucket_count = bucket_count
            raise

        try:
            precision = Precision(precision)

        except ValueError:
            self._logger.log(
                ConfigurationError(
                    message=f"Invalid precision {precision!r}",
                    bucket_count=repr(bucket_count),
                    digest_provider=repr(digest_provider),
                )
            )

            raise InvalidConfiguration(
                f"precision must be one of {[item.value for item in Precision]}, got {precision!r}",
                bucket_count=bucket_count,
            )

        self._bucket_count = bucket_count
        self._digest_provider = digest_provider
        self._precision = precision

        if bucket_count > self._precision.max_exact_buckets:
            self._logger.log(
                PrecisionWarning(
                    message=(
                        f"{self._precision.value} precision is only exact up to "
                        f"{self._precision.max_exact_buckets} buckets"
                    ),
                    bucket_count=bucket_count,
                    precision=self._precision.value,
                    max_exact_buckets=self._precision.max_exact_buckets,
                )
            )

        self._logger.log(
            EngineCreated(
                message="Created jump consistent hash",
                bucket_count=bucket_count,
                digest_provider=repr(digest_provider),
                precision=self._precision.value,
            )
        )

    @classmethod
    def from_buckets(cls, bucket_count: int) -> JumpConsistentHash:
        """Create an engine with the default digest provider and precision."""
        return cls(bucket_count)

    @classmethod
    def from_config(cls, config: JumpHashConfig) -> JumpConsistentHash:
        return cls(
            config.bucket_count,
            digest_provider=create_digest_provider(
                config.digest,
                seed=config.seed,
                key=config.key,
            ),
            precision=Precision(config.precision),
        )

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    @property
    def digest_provider(self) -> DigestProvider:
        return self._digest_provider

    @property
    def precision(self) -> Precision:
        return self._precision

    def get(self, key: Any) -> int:
        """
        Get the bucket for a key.

        Args:
            key: Any key the digest provider accepts (e.g. str, bytes, int,
                tuple)

        Returns:
            Bucket index in [0, bucket_count)
        """
        return jump_bucket(
            self._digest_provider.digest(key),
            self._bucket_count,
            self._precision,
        )

    def get_many(self, keys: Iterable[Any]) -> list[int]:
        return [self.get(key) for key in keys]

    def digest(self, key: Any) -> int:
        return self._digest_provider.digest(key)

    def bucket_for_digest(self, digest: int) -> int:
        """Run the jump algorithm on an already computed 64-bit digest."""
        return jump_bucket(digest, self._bucket_count, self._precision)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"bucket_count={self._bucket_count}, "
            f"digest_provider={self._digest_provider!r}, "
            f"precision={self._precision.value!r})"
        )
