from .models import (
    ConfigurationError as ConfigurationError,
    EngineCreated as EngineCreated,
    Entry as Entry,
    Log as Log,
    LogLevel as LogLevel,
    LogLevelName as LogLevelName,
    PrecisionWarning as PrecisionWarning,
)
from .config import (
    LoggingConfig as LoggingConfig,
    StreamType as StreamType,
)
from .streams import LoggerStream as LoggerStream
