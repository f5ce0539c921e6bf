import contextvars
from enum import Enum
from typing import Literal, Tuple

from jumphash.logging.models import LogLevel, LogLevelName


LogOutput = Literal['stdout', 'stderr']

LOG_LEVEL_ORDER: dict[LogLevel, int] = {
    level: order for order, level in enumerate(LogLevel)
}


class StreamType(Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


_global_log_level = contextvars.ContextVar("_global_log_level", default=LogLevel.INFO)
_global_disabled_loggers = contextvars.ContextVar("_global_disabled_loggers", default=())
_global_log_output_type = contextvars.ContextVar("_global_log_output_type", default=StreamType.STDOUT)


class LoggingConfig:
    def __init__(self) -> None:
        self._log_level: contextvars.ContextVar[LogLevel] = _global_log_level
        self._log_output_type: contextvars.ContextVar[StreamType] = _global_log_output_type
        self._disabled_loggers: contextvars.ContextVar[Tuple[str, ...]] = (
            _global_disabled_loggers
        )

    def update(
        self,
        log_level: LogLevelName | None = None,
        log_output: LogOutput | None = None,
    ):
        if log_level:
            self._log_level.set(
                LogLevel.to_level(log_level)
            )

        if log_output:
            self._log_output_type.set(StreamType(log_output))

    def disable(self, logger_name: str):
        disabled_loggers = self._disabled_loggers.get()
        if logger_name not in disabled_loggers:
            self._disabled_loggers.set(disabled_loggers + (logger_name,))

    def enable(self, logger_name: str):
        self._disabled_loggers.set(
            tuple(
                name for name in self._disabled_loggers.get() if name != logger_name
            )
        )

    def enabled(self, logger_name: str, log_level: LogLevel) -> bool:
        if logger_name in self._disabled_loggers.get():
            return False

        return LOG_LEVEL_ORDER[log_level] >= LOG_LEVEL_ORDER[self._log_level.get()]

    @property
    def level(self):
        return self._log_level.get()

    @property
    def output(self):
        return self._log_output_type.get()

    @property
    def disabled(self):
        return self._disabled_loggers.get()
