"""Core domain entities representing the catalog and its changes."""

from .catalog import Catalog, Playlist, Song, User
from .changes import ChangeKind, ChangeList, ChangeRequest

__all__ = [
    # Catalog entities
    "Catalog",
    "Playlist",
    "Song",
    "User",
    # Change entities
    "ChangeKind",
    "ChangeList",
    "ChangeRequest",
]
