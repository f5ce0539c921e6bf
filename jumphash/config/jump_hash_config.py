from typing import Literal

from pydantic import BaseModel, StrictBytes, StrictInt


class JumpHashConfig(BaseModel):
    bucket_count: StrictInt
    digest: Literal["xxhash", "randomized", "blake2b"] = "xxhash"
    seed: StrictInt = 0
    key: StrictBytes = b""
    precision: Literal["double", "single"] = "double"
