"""ApplyChanges use case: the change application engine.

Applies an ordered list of playlist change requests to a catalog in place,
keeping a ``LookupIndex`` alongside so every validation is a constant time
lookup.

Failure policy is skip-and-log: a request that is malformed or cannot be
applied produces one log line per rejected item and is discarded, and the
batch keeps going. Input change lists are expected to contain stale ids and
typos, so rejecting the whole batch on the first bad item is not an option.
A strict mode would only need a skip site to raise instead.
"""

from collections.abc import Callable
import time

import attrs
from attrs import define, field

from mixtape.config import get_logger, settings
from mixtape.domain.entities import (
    Catalog,
    ChangeKind,
    ChangeList,
    ChangeRequest,
    Playlist,
)
from mixtape.domain.index import IndexCoherenceError, LookupIndex
from mixtape.domain.protocols import LogSink

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class ApplyChangesResult:
    """Outcome of one ``apply`` call.

    ``success`` is always True: individual requests are skipped, never failed.
    """

    requested: int = 0
    applied: int = 0
    skipped: int = 0
    execution_time: float = 0.0
    playlist_count: int = 0

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, int | float | bool]:
        return {
            "success": self.success,
            "requested": self.requested,
            "applied": self.applied,
            "skipped": self.skipped,
            "execution_time": self.execution_time,
            "playlist_count": self.playlist_count,
        }


@define(slots=True)
class ChangeEngine:
    """Owns a catalog and its lookup index and mutates both together.

    The catalog is mutated in place; callers should not touch it while
    ``apply`` runs. Requests execute strictly in list order, so the effect of
    one request is visible to the next.
    """

    catalog: Catalog
    sink: LogSink
    index: LookupIndex = field(init=False)

    def __attrs_post_init__(self) -> None:
        self.index = LookupIndex.from_catalog(self.catalog)

    def apply(
        self, changes: ChangeList, verify_index: bool = False
    ) -> ApplyChangesResult:
        """Apply every change request in order.

        Args:
            changes: Change requests to apply
            verify_index: Re-derive the index afterwards and compare

        Returns:
            Counts of applied and skipped requests
        """
        start = time.perf_counter()
        handlers: dict[str, Callable[[Playlist], bool]] = {
            ChangeKind.ADD: self.add_playlist,
            ChangeKind.REMOVE: self.remove_playlist,
            ChangeKind.ADD_SONGS: self.add_songs_to_playlist,
        }

        applied = 0
        for change in changes:
            handler = handlers.get(change.kind)
            if handler is None:
                self._skip_unknown(change)
                continue
            if handler(change.playlist):
                applied += 1

        if verify_index:
            self.verify_index()

        result = ApplyChangesResult(
            requested=len(changes),
            applied=applied,
            skipped=len(changes) - applied,
            execution_time=time.perf_counter() - start,
            playlist_count=len(self.catalog.playlists),
        )
        logger.debug(
            f"Applied {result.applied}/{result.requested} changes, "
            f"{result.playlist_count} playlists in catalog"
        )
        return result

    def verify_index(self) -> None:
        """Raise IndexCoherenceError if the index has drifted from the catalog."""
        expected = LookupIndex.from_catalog(self.catalog)
        if expected != self.index:
            raise IndexCoherenceError(
                "lookup index does not match catalog "
                f"({len(self.index.playlist_positions)} indexed playlists, "
                f"{len(self.catalog.playlists)} stored)"
            )

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def add_playlist(self, playlist: Playlist) -> bool:
        """Append a new playlist to the catalog.

        The owner must exist and at least one of the songs must exist in the
        catalog. Unknown songs are dropped; order of the rest is kept.

        runtime: O(s), s is the number of songs in the added playlist
        """
        self.sink.set_prefix("[AddPlaylist] ")

        playlist_id = playlist.id
        if not playlist_id:
            self.sink.printf("playlist_id missing, skipping")
            return False
        if self.index.has_playlist(playlist_id):
            self.sink.printf("playlist_id {} already exists, skipping", playlist_id)
            return False
        if not playlist.user_id:
            self.sink.printf(
                "user_id missing, from playlist_id {}, skipping", playlist_id
            )
            return False
        if not self.index.has_user(playlist.user_id):
            self.sink.printf(
                "user_id {} not in mixtape, from playlist_id {}, skipping",
                playlist.user_id,
                playlist_id,
            )
            return False
        if not playlist.song_ids:
            self.sink.printf(
                "playlist_id {} does not contain any songs, skipping", playlist_id
            )
            return False

        valid_song_ids = []
        for song_id in playlist.song_ids:
            if self.index.has_song(song_id):
                valid_song_ids.append(song_id)
            else:
                self.sink.printf(
                    "song_id {} not in mixtape, from playlist_id {}, skipping",
                    song_id,
                    playlist_id,
                )

        if not valid_song_ids:
            self.sink.printf(
                "playlist_id {} does not contain any songs from mixtape, skipping",
                playlist_id,
            )
            return False

        stored = attrs.evolve(playlist, song_ids=valid_song_ids)
        self.catalog.playlists.append(stored)
        self.index.track_playlist(stored, len(self.catalog.playlists) - 1)

        self.sink.printf("added playlist_id {}", playlist_id)
        return True

    def remove_playlist(self, playlist: Playlist) -> bool:
        """Remove an existing playlist; only ``playlist.id`` is consulted.

        The removed slot is filled by the last playlist and the list is
        truncated. This is O(1) but does not preserve playlist order.
        """
        self.sink.set_prefix("[RemovePlaylist] ")

        playlist_id = playlist.id
        if not playlist_id:
            self.sink.printf("playlist_id missing, skipping")
            return False

        position = self.index.position_of(playlist_id)
        if position is None:
            self.sink.printf("playlist_id {} not found, skipping", playlist_id)
            return False

        playlists = self.catalog.playlists
        last = len(playlists) - 1
        if position != last:
            playlists[position], playlists[last] = playlists[last], playlists[position]
            self.index.move_playlist(playlists[position].id, position)

        playlists.pop()
        self.index.forget_playlist(playlist_id)

        self.sink.printf("removed playlist_id {}", playlist_id)
        return True

    def add_songs_to_playlist(self, playlist: Playlist) -> bool:
        """Append songs to an existing playlist.

        Songs missing from the catalog or already in the playlist are skipped.
        ``playlist.user_id`` is ignored.

        runtime: O(s), s is the number of songs being added
        """
        self.sink.set_prefix("[AddSongToPlaylist] ")

        playlist_id = playlist.id
        if not playlist_id:
            self.sink.printf("playlist_id missing, skipping")
            return False

        position = self.index.position_of(playlist_id)
        if position is None:
            self.sink.printf("playlist_id {} not found, skipping", playlist_id)
            return False

        stored = self.catalog.playlists[position]
        added = 0
        for song_id in playlist.song_ids:
            if not self.index.has_song(song_id):
                self.sink.printf(
                    "song_id {} not in mixtape, not added to playlist_id {}, skipping",
                    song_id,
                    playlist_id,
                )
                continue
            if self.index.playlist_contains(playlist_id, song_id):
                self.sink.printf(
                    "song_id {} already in playlist_id {}, skipping",
                    song_id,
                    playlist_id,
                )
                continue

            stored.song_ids.append(song_id)
            self.index.add_member(playlist_id, song_id)
            self.sink.printf("added song_id {} to playlist_id {}", song_id, playlist_id)
            added += 1

        return added > 0

    def _skip_unknown(self, change: ChangeRequest) -> None:
        self.sink.set_prefix("[ApplyChanges] ")
        self.sink.printf("change id {} not recognized, skipping", change.kind)


def run_apply_changes(
    catalog: Catalog,
    changes: ChangeList,
    sink: LogSink | None = None,
    verify_index: bool | None = None,
) -> ApplyChangesResult:
    """Apply a change list to a catalog in place.

    Args:
        catalog: Catalog to mutate
        changes: Requests to apply in order
        sink: Destination for per-request outcome lines; loguru when omitted
        verify_index: Override for the ``engine.verify_index`` setting

    Returns:
        ApplyChangesResult with request counts
    """
    if sink is None:
        from mixtape.infrastructure.log_sinks import LoguruLogSink

        sink = LoguruLogSink()
    if verify_index is None:
        verify_index = settings.engine.verify_index

    logger.info(
        f"Applying {len(changes)} changes to catalog with "
        f"{len(catalog.playlists)} playlists"
    )
    engine = ChangeEngine(catalog=catalog, sink=sink)
    return engine.apply(changes, verify_index=verify_index)
