from .jump_bucket import (
    LCG_MULTIPLIER as LCG_MULTIPLIER,
    jump_bucket as jump_bucket,
)
from .jump_consistent_hash import JumpConsistentHash as JumpConsistentHash
from .precision import (
    MAX_DOUBLE_EXACT_BUCKETS as MAX_DOUBLE_EXACT_BUCKETS,
    MAX_SINGLE_EXACT_BUCKETS as MAX_SINGLE_EXACT_BUCKETS,
    Precision as Precision,
)
