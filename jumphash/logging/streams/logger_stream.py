from __future__ import annotations

import datetime
import sys
import threading
from typing import Callable, TypeVar, TextIO

import msgspec

from jumphash.logging.config import LoggingConfig, StreamType
from jumphash.logging.models import Entry, Log


T = TypeVar('T', bound=Entry)

DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"


class LoggerStream:
    """
    Synchronous log stream writing formatted entries to stdout or stderr.

    The target stream is looked up on ``sys`` for every write so that
    redirected or captured streams are honored.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
    ) -> None:
        if name is None:
            name = 'default'

        self._name = name
        self._template = template or DEFAULT_TEMPLATE
        self._config = LoggingConfig()

    @property
    def name(self):
        return self._name

    def _stream(self) -> TextIO:
        if self._config.output == StreamType.STDERR:
            return sys.stderr

        return sys.stdout

    def log(
        self,
        entry: T,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        if template is None:
            template = self._template

        log_file, line_number, function_name = self._find_caller()

        stream = self._stream()
        stream.write(
            entry.to_template(
                template,
                context={
                    "filename": log_file,
                    "function_name": function_name,
                    "line_number": line_number,
                    "thread_id": threading.get_native_id(),
                    "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                },
            )
            + "\n"
        )
        stream.flush()

    def log_json(
        self,
        entry: T,
    ):
        if self._config.enabled(self._name, entry.level) is False:
            return

        log_file, line_number, function_name = self._find_caller()

        log = Log(
            entry=entry,
            logger_name=self._name,
            filename=log_file,
            function_name=function_name,
            line_number=line_number,
        )

        stream = self._stream()
        stream.write(msgspec.json.encode(log).decode() + "\n")
        stream.flush()

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(2)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
