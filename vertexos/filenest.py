"""A small file manager that works on one selected file at a time."""

from __future__ import annotations

import os

MAX_FILE_CONTENT = 4096

_ICON_SIZE = (64, 64)


class FileNestError(Exception):
    """Raised when an operation on the selected file fails."""


class NoFileSelectedError(FileNestError):
    """Raised when an operation needs a file but none has been selected."""

    def __init__(self) -> None:
        super().__init__("Please select a file first.")


class FileNest:
    """Holds the selected file and performs operations on it."""

    def __init__(self) -> None:
        self.selected = ""

    def select(self, path: str | os.PathLike) -> str:
        """Remember a file for later operations and return its path."""
        self.selected = os.fspath(path)
        return self.selected

    def _require(self) -> str:
        if not self.selected:
            raise NoFileSelectedError()
        return self.selected

    def delete(self) -> None:
        """Delete the selected file."""
        path = self._require()
        try:
            os.remove(path)
        except OSError as exc:
            raise FileNestError("Failed to delete file.") from exc

    def info(self) -> str:
        """Return the path, size and modification time of the selected file."""
        path = self._require()
        try:
            stat = os.stat(path)
        except OSError as exc:
            raise FileNestError("Failed to get file info.") from exc
        return (
            f"Path: {path}\n"
            f"Size: {stat.st_size} bytes\n"
            f"Modified: {int(stat.st_mtime)}\n"
        )

    def content(self) -> str:
        """Return at most the first MAX_FILE_CONTENT bytes of the file as text."""
        path = self._require()
        try:
            with open(path, "rb") as handle:
                data = handle.read(MAX_FILE_CONTENT)
        except OSError as exc:
            raise FileNestError("Failed to open file for reading.") from exc
        text = data.decode("utf-8", errors="replace")
        return text.split("\x00", 1)[0]


def _icon_button(master, filename: str, fallback: str, command):
    import tkinter as tk

    try:
        from PIL import Image, ImageTk

        with Image.open(filename) as picture:
            scaled = picture.resize(_ICON_SIZE, Image.BILINEAR)
            photo = ImageTk.PhotoImage(scaled, master=master)
    except OSError:
        return tk.Button(master, text=fallback, command=command)
    button = tk.Button(master, image=photo, command=command)
    button.image = photo
    return button


def launch_filenest(parent=None, registry=None):
    """Open the file manager window; run its own loop when there is no parent."""
    import tkinter as tk
    from tkinter import filedialog, messagebox

    window = tk.Tk() if parent is None else tk.Toplevel(parent)
    window.title("VERTEX FileNest")
    window.geometry("400x300")
    window.configure(padx=10, pady=10)

    nest = FileNest()

    def report(message: str) -> None:
        messagebox.showinfo("FileNest", message, parent=window)

    def browse() -> None:
        path = filedialog.askopenfilename(parent=window, title="Select a file")
        if path:
            report(nest.select(path))

    def delete() -> None:
        try:
            nest.delete()
        except FileNestError as exc:
            report(str(exc))
        else:
            report("File deleted successfully.")

    def info() -> None:
        try:
            report(nest.info())
        except FileNestError as exc:
            report(str(exc))

    def show_content() -> None:
        try:
            report(f"File Content:\n\n{nest.content()}")
        except FileNestError as exc:
            report(str(exc))

    tk.Button(window, text="Browse File", command=browse).pack(fill="x", pady=5)
    _icon_button(window, "Del.png", "Delete", delete).pack(pady=5)
    _icon_button(window, "File_info.png", "File Info", info).pack(pady=5)
    _icon_button(window, "printer.png", "Print", show_content).pack(pady=5)

    def on_destroy(event) -> None:
        if event.widget is window and registry is not None:
            registry.close("filenest")

    window.bind("<Destroy>", on_destroy, add="+")
    if parent is None:
        window.mainloop()
    return window