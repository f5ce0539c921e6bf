"""
Jump consistent hashing: stable key to bucket assignment that moves only
the minimal share of keys when the bucket count grows.
"""

from .exceptions import InvalidConfiguration as InvalidConfiguration
from .config import JumpHashConfig as JumpHashConfig
from .digest import (
    Blake2bDigest as Blake2bDigest,
    CallableDigest as CallableDigest,
    DigestProvider as DigestProvider,
    RandomizedDigest as RandomizedDigest,
    XXHashDigest as XXHashDigest,
)
from .engine import (
    JumpConsistentHash as JumpConsistentHash,
    Precision as Precision,
    jump_bucket as jump_bucket,
)
