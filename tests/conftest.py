"""Shared test fixtures - the reference catalog and engine wiring.

The reference catalog has users user_1..user_3, songs song_1..song_3 and two
playlists: playlist_1 (user_1: song_1, song_2) and playlist_2 (user_3: song_3).
"""

from pathlib import Path

from loguru import logger
import pytest

from mixtape.application.use_cases import ChangeEngine
from mixtape.domain.entities import (
    Catalog,
    ChangeList,
    ChangeRequest,
    Playlist,
    Song,
    User,
)
from mixtape.infrastructure.log_sinks import BufferedLogSink

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop handlers installed by a test so they never outlive it."""
    yield
    logger.remove()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def users():
    return [
        User(id="user_1", name="test_user_1"),
        User(id="user_2", name="test_user_2"),
        User(id="user_3", name="test_user_3"),
    ]


@pytest.fixture
def songs():
    return [
        Song(id="song_1", artist="some_artist", title="test_song_1"),
        Song(id="song_2", artist="some_other_artist", title="test_song_2"),
        Song(id="song_3", artist="another_artist", title="test_song_3"),
    ]


@pytest.fixture
def catalog(users, songs):
    """Fresh reference catalog for each test."""
    return Catalog(
        users=list(users),
        songs=list(songs),
        playlists=[
            Playlist(id="playlist_1", user_id="user_1", song_ids=["song_1", "song_2"]),
            Playlist(id="playlist_2", user_id="user_3", song_ids=["song_3"]),
        ],
    )


@pytest.fixture
def sink():
    return BufferedLogSink()


@pytest.fixture
def engine(catalog, sink):
    return ChangeEngine(catalog=catalog, sink=sink)


@pytest.fixture
def make_changes():
    """Build a ChangeList from (kind, playlist_id, user_id, song_ids) tuples."""

    def _make(*rows: tuple) -> ChangeList:
        requests = []
        for kind, playlist_id, *rest in rows:
            user_id = rest[0] if rest else ""
            song_ids = list(rest[1]) if len(rest) > 1 else []
            requests.append(
                ChangeRequest(
                    kind=kind,
                    playlist=Playlist(id=playlist_id, user_id=user_id, song_ids=song_ids),
                )
            )
        return ChangeList(playlist_changes=requests)

    return _make
