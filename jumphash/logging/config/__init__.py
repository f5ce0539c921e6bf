from .logging_config import (
    LOG_LEVEL_ORDER as LOG_LEVEL_ORDER,
    LoggingConfig as LoggingConfig,
    LogOutput as LogOutput,
    StreamType as StreamType,
)
