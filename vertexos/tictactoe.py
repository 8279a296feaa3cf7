"""Two-player noughts and crosses."""

from __future__ import annotations

import enum


class Player(enum.Enum):
    X = "X"
    O = "O"

    @property
    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X


_LINES = (
    *(((r, 0), (r, 1), (r, 2)) for r in range(3)),
    *(((0, c), (1, c), (2, c)) for c in range(3)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class TicTacToe:
    """A 3x3 board, the player to move and the status line."""

    def __init__(self) -> None:
        self._board: list[list[Player | None]] = []
        self.current = Player.X
        self.status = ""
        self.reset()

    def reset(self) -> None:
        """Clear the board and give the first move to X."""
        self._board = [[None] * 3 for _ in range(3)]
        self.current = Player.X
        self.status = "Player X's turn"

    def cell(self, row: int, col: int) -> Player | None:
        """Return the mark in a cell, or None when it is empty."""
        self._check(row, col)
        return self._board[row][col]

    def play(self, row: int, col: int) -> str:
        """Mark a cell for the current player and return the status line.

        Clicking an occupied cell changes nothing.
        """
        self._check(row, col)
        if self._board[row][col] is not None:
            return self.status
        self._board[row][col] = self.current

        if self.has_winner():
            self.status = f"Player {self.current.value} wins!"
        elif self.is_full():
            self.status = "Draw! Click reset to play again."
        else:
            self.current = self.current.other
            self.status = f"Player {self.current.value}'s turn"
        return self.status

    def has_winner(self) -> bool:
        """Tell whether any row, column or diagonal holds one mark."""
        for line in _LINES:
            marks = {self._board[r][c] for r, c in line}
            if len(marks) == 1 and None not in marks:
                return True
        return False

    def is_full(self) -> bool:
        """Tell whether every cell is marked."""
        return all(mark is not None for row in self._board for mark in row)

    @staticmethod
    def _check(row: int, col: int) -> None:
        if not (0 <= row < 3 and 0 <= col < 3):
            raise IndexError(f"cell ({row}, {col}) is off the board")


def launch_minigame(parent=None, registry=None):
    """Open the game window; run its own loop when there is no parent."""
    import tkinter as tk

    window = tk.Tk() if parent is None else tk.Toplevel(parent)
    window.title("VERTEX MiniGame - TicTacToe")
    window.geometry("300x350")
    window.configure(padx=10, pady=10)

    game = TicTacToe()
    status = tk.Label(window, text=game.status)
    status.pack(pady=5)

    board = tk.Frame(window)
    board.pack(fill="both", expand=True, pady=5)
    buttons: dict[tuple[int, int], tk.Button] = {}

    def refresh() -> None:
        status.configure(text=game.status)
        for (r, c), button in buttons.items():
            mark = game.cell(r, c)
            button.configure(text=mark.value if mark else "")

    def on_cell(r: int, c: int) -> None:
        game.play(r, c)
        refresh()

    def on_reset() -> None:
        game.reset()
        refresh()

    for r in range(3):
        board.rowconfigure(r, weight=1)
        for c in range(3):
            board.columnconfigure(c, weight=1)
            button = tk.Button(board, text="", command=lambda r=r, c=c: on_cell(r, c))
            button.grid(row=r, column=c, sticky="nsew", padx=2, pady=2)
            buttons[(r, c)] = button

    tk.Button(window, text="Reset", command=on_reset).pack(pady=5)

    def on_destroy(event) -> None:
        if event.widget is window and registry is not None:
            registry.close("minigame")

    window.bind("<Destroy>", on_destroy, add="+")
    if parent is None:
        window.mainloop()
    return window