"""A six-sided dice roller."""

from __future__ import annotations

import random

FACES = range(1, 7)


def image_for(face: int) -> str:
    """Return the image file that shows a dice face."""
    if face not in FACES:
        raise ValueError(f"a dice has no face {face}")
    return f"dice{face}.png"


class DiceRoller:
    """Rolls a fair dice from the given random generator."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def roll(self) -> int:
        """Return a face from 1 to 6."""
        return self._rng.randrange(6) + 1


def launch_random(parent=None, registry=None):
    """Open the dice window; run its own loop when there is no parent."""
    import tkinter as tk

    window = tk.Tk() if parent is None else tk.Toplevel(parent)
    window.title("VERTEX Dice Roller")
    window.geometry("250x300")
    window.configure(padx=10, pady=10)

    roller = DiceRoller()
    face_label = tk.Label(window)
    face_label.pack(fill="both", expand=True, pady=10)

    def show(face: int) -> None:
        try:
            from PIL import Image, ImageTk

            with Image.open(image_for(face)) as picture:
                photo = ImageTk.PhotoImage(picture.copy(), master=window)
        except OSError:
            face_label.configure(image="", text=str(face), font=("TkDefaultFont", 48))
            return
        face_label.configure(image=photo, text="")
        face_label.image = photo

    show(1)
    tk.Button(window, text="Roll Dice ", command=lambda: show(roller.roll())).pack(pady=5)

    def on_destroy(event) -> None:
        if event.widget is window and registry is not None:
            registry.close("random_generator")

    window.bind("<Destroy>", on_destroy, add="+")
    if parent is None:
        window.mainloop()
    return window