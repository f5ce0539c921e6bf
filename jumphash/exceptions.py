"""
Exceptions raised by jumphash.

The jump algorithm and the digest providers are total functions, so the
only failure the library reports is a misconfigured engine.
"""


class InvalidConfiguration(ValueError):
    """
    Raised when a JumpConsistentHash cannot be constructed.

    This happens for a bucket count that is not a positive integer or a
    digest provider that is neither a DigestProvider nor a callable. It
    signals a programming error at the call site and is never raised by
    ``get``.
    """

    def __init__(
        self,
        message: str,
        bucket_count: object | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.bucket_count = bucket_count
