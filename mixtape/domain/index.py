"""Lookup index over a catalog.

Hash-based secondary indices giving constant time existence checks for users,
songs and playlists, the position of each playlist in ``Catalog.playlists``,
and song membership within each playlist.

Building costs O(u + s + p + p*ps) time and space, where ps is the largest
playlist. Every query is O(1).
"""

from attrs import define, field

from .entities import Catalog, Playlist


class IndexCoherenceError(RuntimeError):
    """Raised when a maintained index no longer matches its catalog."""


@define(slots=True)
class LookupIndex:
    """Shadow of a catalog answering existence and position queries."""

    user_ids: set[str] = field(factory=set)
    song_ids: set[str] = field(factory=set)
    # playlist id -> index in Catalog.playlists
    playlist_positions: dict[str, int] = field(factory=dict)
    # playlist id -> song ids belonging to that playlist
    playlist_members: dict[str, set[str]] = field(factory=dict)

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "LookupIndex":
        """Build all indices with one linear scan of each sequence."""
        index = cls(
            user_ids={user.id for user in catalog.users},
            song_ids={song.id for song in catalog.songs},
        )
        for position, playlist in enumerate(catalog.playlists):
            index.playlist_positions[playlist.id] = position
            index.playlist_members[playlist.id] = set(playlist.song_ids)
        return index

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_user(self, user_id: str) -> bool:
        return user_id in self.user_ids

    def has_song(self, song_id: str) -> bool:
        return song_id in self.song_ids

    def has_playlist(self, playlist_id: str) -> bool:
        return playlist_id in self.playlist_positions

    def position_of(self, playlist_id: str) -> int | None:
        """Position of the playlist in the catalog, or None if absent."""
        return self.playlist_positions.get(playlist_id)

    def playlist_contains(self, playlist_id: str, song_id: str) -> bool:
        members = self.playlist_members.get(playlist_id)
        return members is not None and song_id in members

    # -------------------------------------------------------------------------
    # Maintenance
    # -------------------------------------------------------------------------

    def track_playlist(self, playlist: Playlist, position: int) -> None:
        """Register a playlist stored at ``position``."""
        self.playlist_positions[playlist.id] = position
        self.playlist_members[playlist.id] = set(playlist.song_ids)

    def move_playlist(self, playlist_id: str, position: int) -> None:
        self.playlist_positions[playlist_id] = position

    def forget_playlist(self, playlist_id: str) -> None:
        del self.playlist_positions[playlist_id]
        self.playlist_members.pop(playlist_id, None)

    def add_member(self, playlist_id: str, song_id: str) -> None:
        self.playlist_members.setdefault(playlist_id, set()).add(song_id)
