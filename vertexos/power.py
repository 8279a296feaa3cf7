"""The shutdown screen and the timed steps that close the desktop."""

from __future__ import annotations

import os
from typing import Callable

SHUTDOWN_SOUND = "shutdown.mp3"
SHUTDOWN_GIF = "shutdown.gif"
SOUND_DELAY_MS = 500
SHUTDOWN_DELAY_MS = 4000


class ShutdownSequence:
    """Plays the shutdown sound after a short delay, then closes everything."""

    def __init__(
        self,
        schedule: Callable[[int, Callable[[], object]], object],
        play_sound: Callable[[], object],
        close_all: Callable[[], object],
    ) -> None:
        self._schedule = schedule
        self._play_sound = play_sound
        self._close_all = close_all
        self.finished = False

    def start(self) -> None:
        """Schedule the sound and the final shutdown."""
        self._schedule(SOUND_DELAY_MS, self._play_sound)
        self._schedule(SHUTDOWN_DELAY_MS, self.finish)

    def finish(self) -> None:
        """Close every window, once."""
        if self.finished:
            return
        self.finished = True
        self._close_all()


def play_shutdown_sound(path: str | os.PathLike = SHUTDOWN_SOUND) -> bool:
    """Start playing the shutdown sound; return whether playback began."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(os.fspath(path))
        pygame.mixer.music.play()
    except pygame.error:
        return False
    return True


def show_shutdown_screen(root) -> ShutdownSequence:
    """Cover the screen in black with the shutdown animation and start the sequence."""
    import tkinter as tk

    window = tk.Toplevel(root)
    window.title("Shutting Down")
    window.configure(background="black")
    window.resizable(False, False)
    window.attributes("-fullscreen", True)

    try:
        picture = tk.PhotoImage(file=SHUTDOWN_GIF, master=window)
    except tk.TclError:
        picture = None
    if picture is not None:
        label = tk.Label(window, image=picture, background="black", borderwidth=0)
        label.image = picture
        label.place(relx=0.5, rely=0.5, anchor="center")

    def close_all() -> None:
        for widget in (window, root):
            try:
                widget.destroy()
            except tk.TclError:
                pass

    sequence = ShutdownSequence(root.after, play_shutdown_sound, close_all)
    sequence.start()
    return sequence