"""Mixtape domain layer - pure business logic with zero I/O."""

from . import entities
from .entities import (
    Catalog,
    ChangeKind,
    ChangeList,
    ChangeRequest,
    Playlist,
    Song,
    User,
)
from .index import IndexCoherenceError, LookupIndex
from .protocols import LogSink

__all__ = [
    # Modules
    "entities",
    # Key domain types
    "Catalog",
    "ChangeKind",
    "ChangeList",
    "ChangeRequest",
    "IndexCoherenceError",
    "LogSink",
    "LookupIndex",
    "Playlist",
    "Song",
    "User",
]
