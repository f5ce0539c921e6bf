from typing import Any, Callable, SupportsInt

from .digest_provider import U64_MASK


class CallableDigest:
    """
    Adapts a plain ``key -> int`` function to the DigestProvider protocol.

    The function's result is converted with ``int()`` and masked to 64
    bits, so floats and numpy integers are accepted as well.
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Any], SupportsInt]) -> None:
        self._func = func

    def digest(self, key: Any) -> int:
        return int(self._func(key)) & U64_MASK

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"CallableDigest({name})"
