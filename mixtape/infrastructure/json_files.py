"""JSON codec for catalog and change-list documents.

Catalog document::

    {"users": [{"id", "name"}],
     "playlists": [{"id", "user_id", "song_ids": [...]}],
     "songs": [{"id", "artist", "title"}]}

Change-list document::

    {"playlist_changes": [{"id": "add" | "remove" | "add_songs",
                           "playlist": {...}}]}

Decoding is lenient about missing keys (they become empty values) and strict
about types.
"""

import json
from pathlib import Path
from typing import Any

from mixtape.config import get_logger
from mixtape.domain.entities import (
    Catalog,
    ChangeList,
    ChangeRequest,
    Playlist,
    Song,
    User,
)

logger = get_logger(__name__)


class CatalogFormatError(ValueError):
    """A JSON document could not be decoded into catalog or change entities."""


# =============================================================================
# DECODING
# =============================================================================


def _object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise CatalogFormatError(f"{where}: expected object, got {type(value).__name__}")
    return value


def _list(data: dict[str, Any], key: str, where: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogFormatError(
            f"{where}.{key}: expected array, got {type(value).__name__}"
        )
    return value


def _string(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise CatalogFormatError(
            f"{where}.{key}: expected string, got {type(value).__name__}"
        )
    return value


def playlist_from_json(data: Any, where: str = "playlist") -> Playlist:
    data = _object(data, where)
    song_ids = _list(data, "song_ids", where)
    for i, song_id in enumerate(song_ids):
        if not isinstance(song_id, str):
            raise CatalogFormatError(
                f"{where}.song_ids[{i}]: expected string, got {type(song_id).__name__}"
            )
    return Playlist(
        id=_string(data, "id", where),
        user_id=_string(data, "user_id", where),
        song_ids=list(song_ids),
    )


def user_from_json(data: Any, where: str = "user") -> User:
    data = _object(data, where)
    return User(id=_string(data, "id", where), name=_string(data, "name", where))


def song_from_json(data: Any, where: str = "song") -> Song:
    data = _object(data, where)
    return Song(
        id=_string(data, "id", where),
        artist=_string(data, "artist", where),
        title=_string(data, "title", where),
    )


def catalog_from_json(data: Any) -> Catalog:
    """Build a Catalog from a decoded catalog document."""
    data = _object(data, "mixtape")
    users = [
        user_from_json(raw, f"users[{i}]")
        for i, raw in enumerate(_list(data, "users", "mixtape"))
    ]
    songs = [
        song_from_json(raw, f"songs[{i}]")
        for i, raw in enumerate(_list(data, "songs", "mixtape"))
    ]
    playlists = [
        playlist_from_json(raw, f"playlists[{i}]")
        for i, raw in enumerate(_list(data, "playlists", "mixtape"))
    ]
    return Catalog(users=users, songs=songs, playlists=playlists)


def change_list_from_json(data: Any) -> ChangeList:
    """Build a ChangeList from a decoded change-list document."""
    data = _object(data, "changes")
    requests = []
    for i, raw in enumerate(_list(data, "playlist_changes", "changes")):
        where = f"playlist_changes[{i}]"
        item = _object(raw, where)
        requests.append(
            ChangeRequest(
                kind=_string(item, "id", where),
                playlist=playlist_from_json(
                    item.get("playlist") or {}, f"{where}.playlist"
                ),
            )
        )
    return ChangeList(playlist_changes=requests)


# =============================================================================
# ENCODING
# =============================================================================


_GO_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def catalog_to_json(catalog: Catalog) -> dict[str, Any]:
    return {
        "users": [{"id": user.id, "name": user.name} for user in catalog.users],
        "playlists": [
            {
                "id": playlist.id,
                "user_id": playlist.user_id,
                "song_ids": list(playlist.song_ids),
            }
            for playlist in catalog.playlists
        ],
        "songs": [
            {"id": song.id, "artist": song.artist, "title": song.title}
            for song in catalog.songs
        ],
    }


def dumps_catalog(catalog: Catalog) -> str:
    """Compact JSON encoding of a catalog.

    Keys are written users, playlists, songs. Non-ASCII text is kept as UTF-8,
    except that ``<``, ``>``, ``&``, U+2028 and U+2029 are written as
    ``\\u`` escapes. Those characters only occur inside string values, so
    translating the encoded text is safe.
    """
    text = json.dumps(
        catalog_to_json(catalog), separators=(",", ":"), ensure_ascii=False
    )
    return text.translate(_GO_ESCAPES)


# =============================================================================
# FILES
# =============================================================================


def _read_json(file_path: Path) -> Any:
    text = file_path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogFormatError(
            f"error unmarshaling {file_path} to JSON: {e}"
        ) from e


def _decode(file_path: Path, decoder) -> Any:
    data = _read_json(file_path)
    try:
        return decoder(data)
    except CatalogFormatError as e:
        raise CatalogFormatError(f"error unmarshaling {file_path} to JSON: {e}") from e


def read_catalog(file_path: Path) -> Catalog:
    """Read and decode a catalog file."""
    logger.info(f"Reading catalog file: {file_path}")
    catalog = _decode(file_path, catalog_from_json)
    logger.debug(
        f"Loaded {len(catalog.users)} users, {len(catalog.songs)} songs, "
        f"{len(catalog.playlists)} playlists"
    )
    return catalog


def read_change_list(file_path: Path) -> ChangeList:
    """Read and decode a change-list file."""
    logger.info(f"Reading changes file: {file_path}")
    changes = _decode(file_path, change_list_from_json)
    logger.debug(f"Loaded {len(changes)} change requests")
    return changes


def write_catalog(catalog: Catalog, file_path: Path) -> None:
    """Write a catalog as compact JSON."""
    file_path.write_text(dumps_catalog(catalog), encoding="utf-8")
    logger.info(f"Wrote {len(catalog.playlists)} playlists to {file_path}")
