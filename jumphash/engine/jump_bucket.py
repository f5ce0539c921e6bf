"""
The jump consistent hash algorithm of Lamping and Veach
(https://arxiv.org/abs/1406.2294).

Each iteration advances a 64-bit linear congruential generator seeded with
the key digest and uses its top 31 bits to pick the next bucket the key
would jump to as buckets are added. The last jump that lands inside the
bucket range is the answer. Because the sequence of jumps does not depend
on the bucket count, growing the count from N to N+1 can only move a key
into bucket N.
"""

import struct

from jumphash.digest import U64_MASK

from .precision import Precision


LCG_MULTIPLIER = 2862933555777941757
JUMP_SCALE = 2147483648.0

_float32 = struct.Struct("<f")


def _to_float32(value: float) -> float:
    return _float32.unpack(_float32.pack(value))[0]


def jump_bucket(
    digest: int,
    bucket_count: int,
    precision: Precision = Precision.DOUBLE,
) -> int:
    """
    Return the bucket in [0, bucket_count) for a 64-bit key digest.

    ``bucket_count`` must be positive. With ``Precision.SINGLE`` every
    intermediate value is rounded to binary32 the way the reference crate
    computes it, which stays exact up to 2**24 buckets.
    """
    if precision == Precision.SINGLE:
        return _jump_bucket_single(digest, bucket_count)

    key = digest & U64_MASK
    bucket = -1
    candidate = 0

    while candidate < bucket_count:
        bucket = candidate
        key = (key * LCG_MULTIPLIER + 1) & U64_MASK
        candidate = int((bucket + 1) * (JUMP_SCALE / ((key >> 33) + 1)))

    return bucket


def _jump_bucket_single(digest: int, bucket_count: int) -> int:
    key = digest & U64_MASK
    bucket = -1
    candidate = 0

    while candidate < bucket_count:
        bucket = candidate
        key = (key * LCG_MULTIPLIER + 1) & U64_MASK

        # binary64 carries more than twice the precision of binary32, so
        # rounding a binary64 product or quotient of binary32 operands gives
        # the correctly rounded binary32 result.
        ratio = _to_float32(JUMP_SCALE / _to_float32(float((key >> 33) + 1)))
        candidate = int(_to_float32(_to_float32(float(bucket + 1)) * ratio))

    return bucket
