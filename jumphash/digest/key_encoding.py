"""
Byte encoding of keys for the byte-oriented digest providers.

Strings and byte-like keys are hashed as-is; every other key is encoded with
msgpack using a deterministic ordering so that equal dicts and sets produce
equal bytes regardless of insertion order.
"""

from typing import Any

import msgspec


_MSGPACK_MIN_INT = -(2**63)
_MSGPACK_MAX_INT = 2**64 - 1

# Tag prefix for integers too wide for msgpack. 0xc1 is never emitted by a
# msgpack encoder, so tagged integers cannot collide with encoded keys.
_WIDE_INT_TAG = b"\xc1"

_encoder = msgspec.msgpack.Encoder(order="deterministic")


def key_to_bytes(key: Any) -> bytes:
    if isinstance(key, bytes):
        return key

    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)

    if isinstance(key, str):
        return key.encode("utf-8")

    if (
        isinstance(key, int)
        and not isinstance(key, bool)
        and not _MSGPACK_MIN_INT <= key <= _MSGPACK_MAX_INT
    ):
        width = (key.bit_length() + 8) // 8
        return _WIDE_INT_TAG + key.to_bytes(width, byteorder="little", signed=True)

    return _encoder.encode(key)
