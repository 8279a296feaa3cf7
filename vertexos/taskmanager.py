"""A task manager showing running apps and simulated usage graphs."""

from __future__ import annotations

import math
from collections import deque
from typing import Iterable, Iterator

from vertexos.registry import SimulatedApp

MAX_HISTORY = 100
REFRESH_MS = 1000
GRID_SPACING = 20
GRAPH_SIZE = (400, 300)


class UsageHistory:
    """A fixed-length window of usage fractions, oldest first, zero-filled."""

    def __init__(self, size: int = MAX_HISTORY) -> None:
        if size < 1:
            raise ValueError("history size must be positive")
        self._values: deque[float] = deque([0.0] * size, maxlen=size)

    def push(self, value: float) -> None:
        """Append a value, dropping the oldest one."""
        self._values.append(value)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)


class UsageSimulator:
    """Produces smoothly changing RAM and disk usage fractions."""

    def __init__(self) -> None:
        self._ram_phase = 0.0
        self._disk_phase = 0.0

    def step(self) -> tuple[float, float]:
        """Advance one tick and return (ram, disk) as fractions in [0, 1]."""
        total_ram = int(math.sin(self._ram_phase) * 3000 + 4000)
        total_disk = int(math.cos(self._disk_phase) * 100000 + 150000)
        self._ram_phase += 0.1
        self._disk_phase += 0.05
        return min(1.0, total_ram / 8000.0), min(1.0, total_disk / 256000.0)


def transform_value(value: float, height: float) -> float:
    """Map a usage fraction to a y coordinate, top of the graph being 0."""
    scaled = min(1.0, max(0.0, value * 1.2 - 0.1))
    return height - (scaled * height * 0.9 + height * 0.05)


def graph_points(
    history: Iterable[float], width: float, height: float
) -> list[tuple[float, float]]:
    """Return the line points spreading the history across the width."""
    values = list(history)
    if len(values) < 2:
        return []
    step = width / (len(values) - 1)
    return [(i * step, transform_value(v, height)) for i, v in enumerate(values)]


def app_lines(apps: Iterable[SimulatedApp]) -> list[str]:
    """Return one description line per running app."""
    return [
        f"App: {app.name} | RAM: {app.ram_usage_mb} MB | Disk: {app.disk_usage_mb} MB"
        for app in apps
    ]


def _draw_graph(canvas, history: UsageHistory) -> None:
    canvas.delete("all")
    width = canvas.winfo_width()
    height = canvas.winfo_height()
    if width <= 1 or height <= 1:
        width, height = GRAPH_SIZE
    canvas.create_rectangle(0, 0, width, height, fill="black", outline="")
    for x in range(0, width, GRID_SPACING):
        canvas.create_line(x, 0, x, height, fill="#004000")
    for y in range(0, height, GRID_SPACING):
        canvas.create_line(0, y, width, y, fill="#004000")
    points = graph_points(history, width, height)
    if not points:
        return
    canvas.create_line(*[c for point in points for c in point], fill="#00e600", width=2)
    canvas.create_line(width / 2, 0, width / 2, height, fill="#800000")


def launch_task(parent=None, registry=None):
    """Open the task manager window; run its own loop when there is no parent."""
    import tkinter as tk
    from tkinter import ttk

    window = tk.Tk() if parent is None else tk.Toplevel(parent)
    window.title("Task Manager")
    window.geometry("1000x600")

    notebook = ttk.Notebook(window)
    notebook.pack(fill="both", expand=True)

    apps_tab = tk.Frame(notebook)
    notebook.add(apps_tab, text="Running Apps")
    graphs_tab = tk.Frame(notebook)
    notebook.add(graphs_tab, text="Usage Graphs")

    ram_history = UsageHistory()
    disk_history = UsageHistory()
    simulator = UsageSimulator()
    canvases = {}
    for title, history in (("Disk Usage", disk_history), ("RAM Usage", ram_history)):
        column = tk.Frame(graphs_tab)
        column.pack(side="left", fill="both", expand=True, padx=5)
        tk.Label(column, text=title).pack()
        canvas = tk.Canvas(
            column, width=GRAPH_SIZE[0], height=GRAPH_SIZE[1],
            background="black", highlightthickness=0,
        )
        canvas.pack(fill="both", expand=True)
        canvas.bind("<Configure>", lambda e, c=canvas, h=history: _draw_graph(c, h))
        canvases[canvas] = history

    pending: dict[str, str] = {}

    def refresh_apps() -> None:
        for child in apps_tab.winfo_children():
            child.destroy()
        for line in app_lines(registry if registry is not None else ()):
            tk.Label(apps_tab, text=line, anchor="w").pack(fill="x", pady=2)
        pending["apps"] = window.after(REFRESH_MS, refresh_apps)

    def update_graphs(reschedule: bool = True) -> None:
        ram, disk = simulator.step()
        ram_history.push(ram)
        disk_history.push(disk)
        for canvas, history in canvases.items():
            _draw_graph(canvas, history)
        if reschedule:
            pending["graphs"] = window.after(REFRESH_MS, update_graphs)

    refresh_apps()
    pending["graphs"] = window.after(REFRESH_MS, update_graphs)
    update_graphs(reschedule=False)

    def on_destroy(event) -> None:
        if event.widget is not window:
            return
        for job in pending.values():
            try:
                window.after_cancel(job)
            except tk.TclError:
                pass
        if registry is not None:
            registry.close("task")

    window.bind("<Destroy>", on_destroy, add="+")
    if parent is None:
        window.mainloop()
    return window