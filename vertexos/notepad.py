"""A plain text editor with bold and italic marking."""

from __future__ import annotations

import enum
import os


class TextStyle(enum.Enum):
    BOLD = "bold"
    ITALIC = "italic"


class NotepadDocument:
    """Text together with the styled ranges applied to it."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self._spans: list[tuple[TextStyle, int, int]] = []

    def apply_style(self, style: TextStyle, start: int, end: int) -> None:
        """Mark the characters from start up to, not including, end."""
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(
                f"range {start}..{end} does not fit a text of length {len(self.text)}"
            )
        if start < end:
            self._spans.append((TextStyle(style), start, end))

    def styles_at(self, index: int) -> frozenset[TextStyle]:
        """Return the styles that apply to the character at index."""
        if not 0 <= index < len(self.text):
            raise IndexError(f"index {index} is outside the text")
        return frozenset(
            style for style, start, end in self._spans if start <= index < end
        )

    def save(self, path: str | os.PathLike) -> None:
        """Write the text, without styling, to a file."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.text)


def launch_notepad(parent=None, registry=None):
    """Open the editor window; run its own loop when there is no parent."""
    import tkinter as tk
    from tkinter import filedialog, font, messagebox

    window = tk.Tk() if parent is None else tk.Toplevel(parent)
    window.title("VERTEX Notepad")
    window.geometry("500x400")

    toolbar = tk.Frame(window)
    toolbar.pack(fill="x", pady=5)

    body = tk.Frame(window)
    body.pack(fill="both", expand=True)
    text = tk.Text(body, wrap="none", undo=True)
    vscroll = tk.Scrollbar(body, orient="vertical", command=text.yview)
    hscroll = tk.Scrollbar(body, orient="horizontal", command=text.xview)
    text.configure(yscrollcommand=vscroll.set, xscrollcommand=hscroll.set)
    vscroll.pack(side="right", fill="y")
    hscroll.pack(side="bottom", fill="x")
    text.pack(side="left", fill="both", expand=True)

    base = font.nametofont("TkFixedFont")
    bold_font = base.copy()
    bold_font.configure(weight="bold")
    italic_font = base.copy()
    italic_font.configure(slant="italic")
    text.tag_configure(TextStyle.BOLD.value, font=bold_font)
    text.tag_configure(TextStyle.ITALIC.value, font=italic_font)
    window._notepad_fonts = (bold_font, italic_font)

    def apply(style: TextStyle) -> None:
        selection = text.tag_ranges("sel")
        if selection:
            text.tag_add(style.value, selection[0], selection[1])

    def save_as() -> None:
        path = filedialog.asksaveasfilename(parent=window, title="Save File")
        if not path:
            return
        try:
            NotepadDocument(text.get("1.0", "end-1c")).save(path)
        except OSError as exc:
            messagebox.showerror("Save File", str(exc), parent=window)

    tk.Button(toolbar, text="Bold", command=lambda: apply(TextStyle.BOLD)).pack(
        side="left", padx=2
    )
    tk.Button(toolbar, text="Italic", command=lambda: apply(TextStyle.ITALIC)).pack(
        side="left", padx=2
    )
    tk.Button(toolbar, text="Save As", command=save_as).pack(side="left", padx=2)

    def on_destroy(event) -> None:
        if event.widget is window and registry is not None:
            registry.close("notepad")

    window.bind("<Destroy>", on_destroy, add="+")
    if parent is None:
        window.mainloop()
    return window