"""A four-function calculator operating on a typed expression."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_BUTTONS = (
    ("7", "8", "9", "/"),
    ("4", "5", "6", "*"),
    ("1", "2", "3", "-"),
    ("0", "C", "=", "+"),
)


def _read_number(text: str, pos: int) -> tuple[float, int] | None:
    match = _NUMBER.match(text, pos)
    if match is None:
        return None
    return float(match.group(1)), match.end()


def evaluate(expression: str) -> str:
    """Evaluate "<number> <op> <number>" and return the text to display.

    Anything after the second number is ignored. Division by zero or an
    unknown operator gives "Error"; text that does not parse gives
    "Invalid Input".
    """
    first = _read_number(expression, 0)
    if first is None:
        return "Invalid Input"
    a, pos = first
    rest = expression[pos:].lstrip()
    if not rest:
        return "Invalid Input"
    op = rest[0]
    pos = len(expression) - len(rest) + 1
    second = _read_number(expression, pos)
    if second is None:
        return "Invalid Input"
    b, _ = second

    if op == "+":
        result = a + b
    elif op == "-":
        result = a - b
    elif op == "*":
        result = a * b
    elif op == "/" and b != 0:
        result = a / b
    else:
        return "Error"
    return f"{result:f}"


class Calculator:
    """The calculator's input line, driven by button labels."""

    def __init__(self) -> None:
        self._input = ""

    def press(self, label: str) -> str:
        """Handle one button press and return the new display text."""
        if label == "=":
            self._input = evaluate(self._input)
        elif label == "C":
            self._input = ""
        else:
            self._input += label
        return self._input

    def display(self) -> str:
        """Return the text currently shown."""
        return self._input


def _open_window(parent, title: str, geometry: str):
    import tkinter as tk

    window = tk.Tk() if parent is None else tk.Toplevel(parent)
    window.title(title)
    window.geometry(geometry)
    return window


def _close_on_destroy(window, registry, name: str) -> None:
    def handler(event) -> None:
        if event.widget is window and registry is not None:
            registry.close(name)

    window.bind("<Destroy>", handler, add="+")


def launch_calculator(parent=None, registry=None):
    """Open the calculator window; run its own loop when there is no parent."""
    import tkinter as tk

    window = _open_window(parent, "VERTEX Calculator", "300x400")
    calc = Calculator()
    shown = tk.StringVar(window, value="")

    entry = tk.Entry(window, textvariable=shown, state="readonly", justify="right")
    entry.pack(fill="x", padx=5, pady=5)

    pad = tk.Frame(window)
    pad.pack(fill="both", expand=True, padx=5, pady=5)

    def on_press(label: str) -> None:
        shown.set(calc.press(label))

    for r, row in enumerate(_BUTTONS):
        pad.rowconfigure(r, weight=1)
        for c, label in enumerate(row):
            pad.columnconfigure(c, weight=1)
            button = tk.Button(pad, text=label, command=lambda l=label: on_press(l))
            button.grid(row=r, column=c, sticky="nsew", padx=5, pady=5)

    _close_on_destroy(window, registry, "calculator")
    if parent is None:
        window.mainloop()
    return window