from .entry import Entry as Entry
from .jumphash_entries import (
    ConfigurationError as ConfigurationError,
    EngineCreated as EngineCreated,
    PrecisionWarning as PrecisionWarning,
)
from .log import Log as Log
from .log_level import (
    LogLevel as LogLevel,
    LogLevelName as LogLevelName,
)
