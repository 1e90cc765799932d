"""Protocols consumed by the domain and application layers.

These protocols define contracts for output capabilities without depending
on concrete logging implementations.
"""

from typing import Any, Protocol


class LogSink(Protocol):
    """Line-oriented sink receiving per-operation outcome messages."""

    def set_prefix(self, prefix: str) -> None:
        """Set the tag emitted before every subsequent line."""
        ...

    def printf(self, message: str, *args: Any) -> None:
        """Write one line, formatting ``message`` with ``args`` if given."""
        ...
