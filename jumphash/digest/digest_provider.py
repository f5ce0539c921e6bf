from typing import Any, Protocol, runtime_checkable


U64_MASK = 0xFFFFFFFFFFFFFFFF


@runtime_checkable
class DigestProvider(Protocol):
    """
    Turns a key into a 64-bit unsigned digest.

    Implementations must return an int in [0, 2**64) and must return the
    same digest for the same key on every call to the same instance.
    """

    def digest(self, key: Any) -> int: ...
