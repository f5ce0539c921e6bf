from .jump_hash_config import JumpHashConfig as JumpHashConfig
