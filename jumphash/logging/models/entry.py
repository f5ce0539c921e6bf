from typing import Any

import msgspec
from msgspec import structs

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    """
    Base log entry. Subclasses add the fields their message template
    refers to and pin a default level.
    """

    message: str | None = None
    tags: set[str] = msgspec.field(default_factory=set)
    level: LogLevel

    def to_template(
        self,
        template: str,
        context: dict[str, Any] | None = None,
    ) -> str:
        fields = structs.asdict(self)
        fields["level"] = self.level.value

        if context:
            fields.update(context)

        return template.format(**fields)
