"""Change request entities applied against a catalog."""

from enum import StrEnum

from attrs import define, field

from .catalog import Playlist


class ChangeKind(StrEnum):
    """Change kinds recognized by the change engine."""

    ADD = "add"
    REMOVE = "remove"
    ADD_SONGS = "add_songs"


@define(frozen=True, slots=True)
class ChangeRequest:
    """One tagged mutation.

    ``kind`` is kept as the raw string from the input so that unrecognized
    kinds survive decoding and can be reported by the engine.
    """

    kind: str
    playlist: Playlist = field(factory=Playlist)


@define(frozen=True, slots=True)
class ChangeList:
    """Ordered sequence of change requests."""

    playlist_changes: list[ChangeRequest] = field(factory=list)

    def __len__(self) -> int:
        return len(self.playlist_changes)

    def __iter__(self):
        return iter(self.playlist_changes)
