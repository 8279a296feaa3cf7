"""A small simulated tkinter desktop with a set of mini applications."""

__version__ = "0.1.0"