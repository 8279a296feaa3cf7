"""The desktop: wallpaper, clock and the icons that start each application."""

from __future__ import annotations

import argparse
import datetime
import os
import re
import sys
from dataclasses import dataclass
from typing import Callable

from vertexos.audio import launch_audio
from vertexos.calculator import launch_calculator
from vertexos.calendar_app import launch_calendar
from vertexos.dice import launch_random
from vertexos.filenest import launch_filenest
from vertexos.notepad import launch_notepad
from vertexos.power import show_shutdown_screen
from vertexos.registry import (
    AppAlreadyRunningError,
    AppRegistry,
    SimulatedApp,
    show_app_already_running_box,
)
from vertexos.taskmanager import launch_task
from vertexos.tictactoe import launch_minigame

CONFIG_FILE = "wallpaper_config.txt"
HOME_IMAGES = ("home.png", "home1.png", "home2.jpg", "home4.jpg")
DEFAULT_SIZE = (800, 600)
ICON_SIZE = (64, 64)
EDGE_MARGIN = 30
HOME_TOGGLE_IMAGE = "image.png"
POWER_IMAGE = "power.png"
POWER_POSITION = (30, 890)

_MONTHS = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class AppSpec:
    """An application icon on the desktop and how to start it.

    When ram_usage_mb is None the application records itself in the
    registry once it has actually opened.
    """

    name: str
    image: str
    x: int
    y: int
    launcher: Callable[..., object]
    ram_usage_mb: int | None = None
    disk_usage_mb: int = 0


DEFAULT_APPS = (
    AppSpec("calculator", "calc.png", 30, 30, launch_calculator, 45, 8),
    AppSpec("calendar", "calendar.png", 30, 140, launch_calendar, 30, 5),
    AppSpec("minigame", "Minigame.png", 30, 250, launch_minigame, 60, 12),
    AppSpec("random_generator", "random.png", 30, 340, launch_random, 25, 4),
    AppSpec("notepad", "notepad.png", 30, 430, launch_notepad, 35, 6),
    AppSpec("filenest", "file.png", 30, 530, launch_filenest, 55, 10),
    AppSpec("audio_player", "audio.png", 30, 630, launch_audio),
    AppSpec("task", "task.png", 140, 30, launch_task, 55, 10),
)


def load_wallpaper_index(path: str | os.PathLike = CONFIG_FILE) -> int:
    """Read the saved wallpaper index; 0 when there is none to read."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return 0
    match = _LEADING_INT.match(text)
    index = int(match.group(1)) if match else 0
    return index % len(HOME_IMAGES)


def save_wallpaper_index(path: str | os.PathLike, index: int) -> None:
    """Store the wallpaper index, reporting on stderr when that fails."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(str(index))
    except OSError:
        print("Failed to save wallpaper index", file=sys.stderr)


def next_wallpaper_index(index: int) -> int:
    """Return the wallpaper that follows the given one."""
    return (index + 1) % len(HOME_IMAGES)


def format_clock(moment: datetime.datetime) -> str:
    """Format a moment as "D MON YYYY h:MM:SS AM/PM"."""
    hour = moment.hour
    period = "AM"
    if hour >= 12:
        period = "PM"
        if hour > 12:
            hour -= 12
    if hour == 0:
        hour = 12
    return (
        f"{moment.day} {_MONTHS[moment.month - 1]} {moment.year} "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {period}"
    )


def _load_icon(filename: str):
    from PIL import Image

    try:
        with Image.open(filename) as picture:
            return picture.resize(ICON_SIZE, Image.BILINEAR)
    except OSError as exc:
        print(f"Failed to load image: {exc}", file=sys.stderr)
        return None


class Desktop:
    """The home screen drawn on a canvas that fills the root window.

    The root may be None, in which case only the bookkeeping (wallpaper
    choice, launching, registry) is done and nothing is drawn.
    """

    def __init__(
        self,
        root=None,
        registry: AppRegistry | None = None,
        config_path: str | os.PathLike = CONFIG_FILE,
    ) -> None:
        self.root = root
        self.registry = registry if registry is not None else AppRegistry()
        self.config_path = config_path
        self.apps: dict[str, AppSpec] = {spec.name: spec for spec in DEFAULT_APPS}
        self.current_index = 0
        self.background = None
        self._canvas = None
        self._bg_item = None
        self._clock_item = None
        self._right_items: list[tuple[int, int]] = []
        self._photos: dict[object, object] = {}

    def _require_root(self):
        if self.root is None:
            raise RuntimeError("the desktop has no window")
        return self.root

    def build(self) -> None:
        """Create the canvas and place the wallpaper, clock and icons."""
        import tkinter as tk

        root = self._require_root()
        if self._canvas is None:
            self._canvas = tk.Canvas(root, highlightthickness=0, background="black")
            self._canvas.pack(fill="both", expand=True)
            self._canvas.bind("<Configure>", self._relayout)
        self.set_background()
        self._add_clock()
        for spec in self.apps.values():
            self._add_icon(
                spec.image, spec.x, spec.y, lambda n=spec.name: self._on_app(n)
            )
        self._add_icon(
            HOME_TOGGLE_IMAGE, EDGE_MARGIN, EDGE_MARGIN, self.cycle_wallpaper,
            from_right=True,
        )
        self._add_icon(POWER_IMAGE, *POWER_POSITION, self.shutdown)

    def _size(self) -> tuple[int, int]:
        if self.root is None:
            return DEFAULT_SIZE
        width, height = self.root.winfo_width(), self.root.winfo_height()
        if width <= 1 or height <= 1:
            return DEFAULT_SIZE
        return width, height

    def _add_clock(self) -> None:
        width, height = self._size()
        self._clock_item = self._canvas.create_text(
            width - EDGE_MARGIN,
            height - EDGE_MARGIN,
            anchor="se",
            text=format_clock(datetime.datetime.now()),
            fill="white",
            font=("TkDefaultFont", -20, "bold"),
        )

    def _add_icon(self, filename, x, y, action, from_right=False):
        from PIL import ImageTk

        picture = _load_icon(filename)
        if picture is None:
            return None
        photo = ImageTk.PhotoImage(picture, master=self.root)
        if from_right:
            width, _ = self._size()
            item = self._canvas.create_image(width - x, y, anchor="ne", image=photo)
            self._right_items.append((item, x))
        else:
            item = self._canvas.create_image(x, y, anchor="nw", image=photo)
        self._photos[item] = photo
        self._canvas.tag_bind(item, "<Button-1>", lambda event: action())
        return item

    def _relayout(self, event) -> None:
        for item, margin in self._right_items:
            coords = self._canvas.coords(item)
            if coords:
                self._canvas.coords(item, event.width - margin, coords[1])
        if self._clock_item is not None:
            self._canvas.coords(
                self._clock_item,
                event.width - EDGE_MARGIN,
                event.height - EDGE_MARGIN,
            )

    def _on_app(self, name: str) -> None:
        try:
            self.launch(name)
        except AppAlreadyRunningError:
            show_app_already_running_box(self.root, name)

    def launch(self, name: str):
        """Start the named application unless it is already running."""
        try:
            spec = self.apps[name]
        except KeyError:
            raise KeyError(f"no application named {name!r}") from None
        self.registry.ensure_not_running(name)
        if spec.ram_usage_mb is not None:
            self.registry.add(
                SimulatedApp(spec.name, spec.ram_usage_mb, spec.disk_usage_mb)
            )
        return spec.launcher(self.root, self.registry)

    def cycle_wallpaper(self) -> int:
        """Switch to the next wallpaper, remember it, and return its index."""
        index = next_wallpaper_index(self.current_index)
        save_wallpaper_index(self.config_path, index)
        self.set_background()
        return self.current_index

    def set_background(self):
        """Load the saved wallpaper scaled to the window; None if it is missing."""
        from PIL import Image

        self.current_index = load_wallpaper_index(self.config_path)
        try:
            with Image.open(HOME_IMAGES[self.current_index]) as picture:
                scaled = picture.resize(self._size(), Image.BILINEAR)
        except OSError as exc:
            print(f"Failed to load image: {exc}", file=sys.stderr)
            return None
        self.background = scaled
        if self._canvas is not None:
            from PIL import ImageTk

            photo = ImageTk.PhotoImage(scaled, master=self.root)
            if self._bg_item is not None:
                self._canvas.delete(self._bg_item)
                self._photos.pop(self._bg_item, None)
            self._bg_item = self._canvas.create_image(0, 0, anchor="nw", image=photo)
            self._photos[self._bg_item] = photo
            self._canvas.tag_lower(self._bg_item)
        return scaled

    def clear(self) -> None:
        """Remove everything drawn on the desktop."""
        if self._canvas is not None:
            self._canvas.delete("all")
        self._photos.clear()
        self._right_items.clear()
        self._bg_item = None
        self._clock_item = None

    def shutdown(self):
        """Show the shutdown screen and empty the desktop."""
        root = self._require_root()
        sequence = show_shutdown_screen(root)
        self.clear()
        return sequence


def main(argv=None) -> int:
    """Open the desktop in a window covering the screen."""
    import tkinter as tk

    parser = argparse.ArgumentParser(prog="vertexos", description="VERTEX desktop")
    parser.add_argument(
        "--config", default=CONFIG_FILE, help="file holding the wallpaper choice"
    )
    args = parser.parse_args(argv)

    root = tk.Tk()
    root.title("VERTEX OS")
    root.geometry(f"{root.winfo_screenwidth()}x{root.winfo_screenheight()}+0+0")
    desktop = Desktop(root, AppRegistry(), args.config)
    desktop.build()
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())