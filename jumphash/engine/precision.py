from enum import Enum


MAX_DOUBLE_EXACT_BUCKETS = 2**31 - 1
MAX_SINGLE_EXACT_BUCKETS = 2**24


class Precision(Enum):
    """Floating point width used by the jump algorithm's division step."""

    DOUBLE = "double"
    SINGLE = "single"

    @property
    def max_exact_buckets(self) -> int:
        if self == Precision.SINGLE:
            return MAX_SINGLE_EXACT_BUCKETS

        return MAX_DOUBLE_EXACT_BUCKETS
