"""LogSink implementations.

``LoguruLogSink`` is what the CLI uses; the buffered and null sinks exist for
callers that want to inspect or ignore engine output.
"""

from typing import Any

from attrs import define, field

from mixtape.config import get_logger

logger = get_logger(__name__)


def _format(message: str, args: tuple[Any, ...]) -> str:
    return message.format(*args) if args else message


@define(slots=True)
class LoguruLogSink:
    """Forward each line to loguru at INFO level with the prefix prepended."""

    prefix: str = ""
    level: str = "INFO"

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def printf(self, message: str, *args: Any) -> None:
        # opt(depth=1) reports the engine call site, not this wrapper
        logger.opt(depth=1).log(self.level, "{}{}", self.prefix, _format(message, args))


@define(slots=True)
class BufferedLogSink:
    """Keep every line in memory, prefix included."""

    prefix: str = ""
    lines: list[str] = field(factory=list)

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def printf(self, message: str, *args: Any) -> None:
        self.lines.append(f"{self.prefix}{_format(message, args)}")

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class NullLogSink:
    """Discard every line."""

    def set_prefix(self, prefix: str) -> None:
        pass

    def printf(self, message: str, *args: Any) -> None:
        pass
