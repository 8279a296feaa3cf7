"""Bookkeeping of the simulated applications that are currently open."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class SimulatedApp:
    """An open application together with its simulated resource usage."""

    name: str
    ram_usage_mb: int
    disk_usage_mb: int


def already_running_message(name: str) -> str:
    """Return the text shown when an application is opened twice."""
    return f'The app "{name}" is already running.'


class AppAlreadyRunningError(Exception):
    """Raised when an application that is already open is started again."""

    def __init__(self, name: str) -> None:
        super().__init__(already_running_message(name))
        self.name = name


class AppRegistry:
    """The list of running applications, in the order they were started."""

    def __init__(self) -> None:
        self._apps: list[SimulatedApp] = []

    def add(self, app: SimulatedApp) -> None:
        """Record a newly started application."""
        self._apps.append(app)

    def close(self, name: str) -> None:
        """Forget every running application with the given name."""
        self._apps = [app for app in self._apps if app.name != name]

    def is_running(self, name: str) -> bool:
        """Tell whether an application with this name is running."""
        return any(app.name == name for app in self._apps)

    def ensure_not_running(self, name: str) -> None:
        """Raise AppAlreadyRunningError if the application is already open."""
        if self.is_running(name):
            raise AppAlreadyRunningError(name)

    def __iter__(self) -> Iterator[SimulatedApp]:
        return iter(list(self._apps))

    def __len__(self) -> int:
        return len(self._apps)


def show_app_already_running_box(parent, name: str) -> None:
    """Show a modal notice that the named application is already open."""
    from tkinter import messagebox

    messagebox.showinfo(
        "App Already Running", already_running_message(name), parent=parent
    )