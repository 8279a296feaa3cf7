"""A minimal MP3 player with play and pause controls."""

from __future__ import annotations

import enum
import os
import sys
from typing import Protocol

from vertexos.registry import SimulatedApp

APP_NAME = "audio_player"
RAM_USAGE_MB = 50
DISK_USAGE_MB = 7
POLL_MS = 200
_BUTTON_IMAGES = ("play.png", "pause.png")


class PlayerStatus(enum.Enum):
    """What the status line of the player says."""

    PLAYING = "Status: Playing"
    PAUSED = "Status: Paused"
    ERROR_PLAYING = "Status: Error Playing"
    ERROR_PAUSING = "Status: Error Pausing"
    PLAYBACK_ERROR = "Status: Playback Error"
    END_OF_PLAYBACK = "Status: End of Playback"


class PlaybackError(Exception):
    """Raised by a backend when the audio cannot be loaded or controlled."""


class _Backend(Protocol):
    def play(self) -> None: ...

    def pause(self) -> None: ...

    def stop(self) -> None: ...

    def finished(self) -> bool: ...


class AudioPlayer:
    """Drives a playback backend and keeps the status line up to date."""

    def __init__(self, backend: _Backend) -> None:
        self._backend: _Backend | None = backend
        self.status = PlayerStatus.PLAYING

    @property
    def closed(self) -> bool:
        return self._backend is None

    def play(self) -> PlayerStatus:
        """Start or resume playback and return the new status."""
        if self._backend is None:
            return self.status
        try:
            self._backend.play()
        except PlaybackError:
            print("Failed to play", file=sys.stderr)
            self.status = PlayerStatus.ERROR_PLAYING
        else:
            self.status = PlayerStatus.PLAYING
        return self.status

    def pause(self) -> PlayerStatus:
        """Pause playback and return the new status."""
        if self._backend is None:
            return self.status
        try:
            self._backend.pause()
        except PlaybackError:
            print("Failed to pause", file=sys.stderr)
            self.status = PlayerStatus.ERROR_PAUSING
        else:
            self.status = PlayerStatus.PAUSED
        return self.status

    def handle_error(self, message: str) -> PlayerStatus:
        """React to a playback failure reported while playing."""
        print(f"Error: {message}", file=sys.stderr)
        self.status = PlayerStatus.PLAYBACK_ERROR
        self._stop_quietly()
        return self.status

    def handle_end_of_stream(self) -> PlayerStatus:
        """React to the audio having played to its end."""
        self.status = PlayerStatus.END_OF_PLAYBACK
        self._stop_quietly()
        return self.status

    def close(self) -> None:
        """Stop playback and release the backend; later calls do nothing."""
        self._stop_quietly()
        self._backend = None

    def poll(self) -> bool:
        """Check the backend for the end of the stream; return True if it ended."""
        if self._backend is None or self.status is not PlayerStatus.PLAYING:
            return False
        if self._backend.finished():
            self.handle_end_of_stream()
            return True
        return False

    def status_text(self) -> str:
        """Return the status line."""
        return self.status.value

    def _stop_quietly(self) -> None:
        if self._backend is None:
            return
        try:
            self._backend.stop()
        except PlaybackError:
            pass


class PygameBackend:
    """Plays one audio file through the pygame mixer."""

    def __init__(self, path: str | os.PathLike) -> None:
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        self._pygame = pygame
        self.path = os.fspath(path)
        self._started = False
        self._paused = False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(self.path)
        except (pygame.error, OSError) as exc:
            raise PlaybackError(str(exc) or "unknown") from exc

    def play(self) -> None:
        music = self._pygame.mixer.music
        try:
            if self._started and self._paused:
                music.unpause()
            else:
                music.play()
        except self._pygame.error as exc:
            raise PlaybackError(str(exc)) from exc
        self._started = True
        self._paused = False

    def pause(self) -> None:
        try:
            self._pygame.mixer.music.pause()
        except self._pygame.error as exc:
            raise PlaybackError(str(exc)) from exc
        self._paused = True

    def stop(self) -> None:
        try:
            self._pygame.mixer.music.stop()
        except self._pygame.error as exc:
            raise PlaybackError(str(exc)) from exc
        self._started = False
        self._paused = False

    def finished(self) -> bool:
        if not self._started or self._paused:
            return False
        return not self._pygame.mixer.music.get_busy()


def now_playing_text(path: str | os.PathLike) -> str:
    """Return the title line naming the file being played."""
    return f"Now Playing: {os.path.basename(os.fspath(path))}"


def _image_button(master, filename: str, fallback: str, command):
    import tkinter as tk

    try:
        from PIL import Image, ImageTk

        with Image.open(filename) as picture:
            photo = ImageTk.PhotoImage(picture.copy(), master=master)
    except OSError:
        return tk.Button(master, text=fallback, command=command)
    button = tk.Button(master, image=photo, command=command)
    button.image = photo
    return button


def launch_audio(parent=None, registry=None):
    """Ask for an MP3 file and open a player for it; return the window or None."""
    import tkinter as tk
    from tkinter import filedialog

    root = None
    if parent is None:
        root = tk.Tk()
        root.withdraw()
    path = filedialog.askopenfilename(
        parent=parent if parent is not None else root,
        title="Select Audio File",
        filetypes=[("MP3 Audio", "*.mp3")],
    )
    if not path:
        if root is not None:
            root.destroy()
        return None

    try:
        backend = PygameBackend(path)
    except PlaybackError as exc:
        print(f"Pipeline error: {exc}", file=sys.stderr)
        if root is not None:
            root.destroy()
        return None

    player = AudioPlayer(backend)
    if registry is not None:
        registry.add(SimulatedApp(APP_NAME, RAM_USAGE_MB, DISK_USAGE_MB))

    if root is not None:
        window = root
        window.deiconify()
    else:
        window = tk.Toplevel(parent)
    window.title("Simple MP3 Player")
    window.geometry("300x150")

    body = tk.Frame(window, padx=10, pady=10)
    body.pack(fill="both", expand=True)
    tk.Label(body, text=now_playing_text(path)).pack(pady=5)
    status = tk.Label(body, text=player.status_text())
    status.pack(pady=5)

    controls = tk.Frame(body)
    controls.pack(fill="x", pady=5)

    def on_play() -> None:
        player.play()
        status.configure(text=player.status_text())

    def on_pause() -> None:
        player.pause()
        status.configure(text=player.status_text())

    play_image, pause_image = _BUTTON_IMAGES
    _image_button(controls, play_image, "Play", on_play).pack(
        side="left", expand=True, padx=5
    )
    _image_button(controls, pause_image, "Pause", on_pause).pack(
        side="left", expand=True, padx=5
    )

    pending: dict[str, str] = {}

    def watch() -> None:
        if player.poll():
            status.configure(text=player.status_text())
        pending["poll"] = window.after(POLL_MS, watch)

    def on_destroy(event) -> None:
        if event.widget is not window:
            return
        job = pending.pop("poll", None)
        if job is not None:
            try:
                window.after_cancel(job)
            except tk.TclError:
                pass
        player.close()
        if registry is not None:
            registry.close(APP_NAME)

    window.bind("<Destroy>", on_destroy, add="+")

    on_play()
    pending["poll"] = window.after(POLL_MS, watch)
    if root is not None:
        window.mainloop()
    return window