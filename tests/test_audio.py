import pytest

from vertexos.audio import (
    AudioPlayer,
    PlaybackError,
    PlayerStatus,
    PygameBackend,
    now_playing_text,
)


class FakeBackend:
    def __init__(self, fail_play=False, fail_pause=False, done=False):
        self.calls = []
        self.fail_play = fail_play
        self.fail_pause = fail_pause
        self.done = done

    def play(self):
        self.calls.append("play")
        if self.fail_play:
            raise PlaybackError("cannot play")

    def pause(self):
        self.calls.append("pause")
        if self.fail_pause:
            raise PlaybackError("cannot pause")

    def stop(self):
        self.calls.append("stop")

    def finished(self):
        return self.done


def test_initial_status_is_playing():
    player = AudioPlayer(FakeBackend())
    assert player.status_text() == "Status: Playing"


def test_play_sets_playing_and_calls_backend():
    backend = FakeBackend()
    player = AudioPlayer(backend)
    player.pause()
    assert player.play() is PlayerStatus.PLAYING
    assert backend.calls == ["pause", "play"]


def test_pause_sets_paused():
    player = AudioPlayer(FakeBackend())
    assert player.pause() is PlayerStatus.PAUSED
    assert player.status_text() == "Status: Paused"


def test_play_failure_reports_error(capsys):
    player = AudioPlayer(FakeBackend(fail_play=True))
    assert player.play() is PlayerStatus.ERROR_PLAYING
    assert player.status_text() == "Status: Error Playing"
    assert "Failed to play" in capsys.readouterr().err


def test_pause_failure_reports_error(capsys):
    player = AudioPlayer(FakeBackend(fail_pause=True))
    assert player.pause() is PlayerStatus.ERROR_PAUSING
    assert "Failed to pause" in capsys.readouterr().err


def test_handle_error_stops_backend(capsys):
    backend = FakeBackend()
    player = AudioPlayer(backend)
    assert player.handle_error("decoder broke") is PlayerStatus.PLAYBACK_ERROR
    assert backend.calls == ["stop"]
    assert "Error: decoder broke" in capsys.readouterr().err


def test_end_of_stream_stops_backend():
    backend = FakeBackend()
    player = AudioPlayer(backend)
    assert player.handle_end_of_stream() is PlayerStatus.END_OF_PLAYBACK
    assert player.status_text() == "Status: End of Playback"
    assert backend.calls == ["stop"]


def test_play_after_end_restarts():
    backend = FakeBackend()
    player = AudioPlayer(backend)
    player.handle_end_of_stream()
    assert player.play() is PlayerStatus.PLAYING
    assert backend.calls == ["stop", "play"]


def test_close_makes_controls_inert():
    backend = FakeBackend()
    player = AudioPlayer(backend)
    player.close()
    assert player.closed
    assert player.play() is PlayerStatus.PLAYING
    assert player.pause() is PlayerStatus.PLAYING
    assert backend.calls == ["stop"]


def test_poll_detects_finished_stream():
    backend = FakeBackend(done=True)
    player = AudioPlayer(backend)
    assert player.poll() is True
    assert player.status is PlayerStatus.END_OF_PLAYBACK
    assert player.poll() is False


def test_poll_ignores_paused_player():
    backend = FakeBackend(done=True)
    player = AudioPlayer(backend)
    player.pause()
    assert player.poll() is False
    assert player.status is PlayerStatus.PAUSED


def test_now_playing_uses_base_name(tmp_path):
    path = tmp_path / "song.mp3"
    assert now_playing_text(path) == "Now Playing: song.mp3"


def test_pygame_backend_rejects_missing_file(tmp_path):
    with pytest.raises(PlaybackError):
        PygameBackend(tmp_path / "missing.mp3")