from .entry import Entry
from .log_level import LogLevel


class EngineCreated(Entry, kw_only=True):
    bucket_count: int
    digest_provider: str
    precision: str
    level: LogLevel = LogLevel.DEBUG


class PrecisionWarning(Entry, kw_only=True):
    bucket_count: int
    precision: str
    max_exact_buckets: int
    level: LogLevel = LogLevel.WARN


class ConfigurationError(Entry, kw_only=True):
    bucket_count: str
    digest_provider: str
    level: LogLevel = LogLevel.ERROR
