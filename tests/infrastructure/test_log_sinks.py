"""LogSink implementations."""

from loguru import logger
import pytest

from mixtape.infrastructure.log_sinks import BufferedLogSink, LoguruLogSink, NullLogSink


@pytest.fixture
def messages():
    captured = []
    logger.remove()
    logger.add(captured.append, format="{level} {message}", level="DEBUG")
    return captured


class TestBufferedLogSink:
    def test_prefix_applies_to_following_lines(self):
        sink = BufferedLogSink()

        sink.printf("no prefix yet")
        sink.set_prefix("[AddPlaylist] ")
        sink.printf("added playlist_id {}", "playlist_x")

        assert sink.lines == ["no prefix yet", "[AddPlaylist] added playlist_id playlist_x"]
        assert sink.text == "no prefix yet\n[AddPlaylist] added playlist_id playlist_x"

    def test_message_without_args_is_not_formatted(self):
        sink = BufferedLogSink()

        sink.printf("literal {braces}")

        assert sink.lines == ["literal {braces}"]


class TestLoguruLogSink:
    def test_lines_go_to_loguru_at_info(self, messages):
        sink = LoguruLogSink()

        sink.set_prefix("[RemovePlaylist] ")
        sink.printf("removed playlist_id {}", "playlist_1")

        assert len(messages) == 1
        assert messages[0].strip() == "INFO [RemovePlaylist] removed playlist_id playlist_1"

    def test_braces_in_arguments_are_kept(self, messages):
        sink = LoguruLogSink(prefix="[AddPlaylist] ")

        sink.printf("playlist_id {} not found, skipping", "{odd}")

        assert messages[0].strip() == "INFO [AddPlaylist] playlist_id {odd} not found, skipping"

    def test_configurable_level(self, messages):
        LoguruLogSink(level="DEBUG").printf("quiet")

        assert messages[0].strip() == "DEBUG quiet"


def test_null_sink_accepts_everything():
    sink = NullLogSink()

    sink.set_prefix("[AddPlaylist] ")
    sink.printf("added playlist_id {}", "playlist_x")
