"""Board state with a history chain of earlier states."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from os import PathLike
from pathlib import Path
from typing import Union

from upwords.stack import EMPTY, TileStack

PathType = Union[str, "PathLike[str]"]


@dataclass(eq=False)
class GameState:
    """A grid of tile stacks, linked to the state it was made from."""

    rows: int
    cols: int
    board: list[list[TileStack]] = field(repr=False)
    previous: GameState | None = field(default=None, repr=False)

    @classmethod
    def from_text(cls, text: str) -> GameState:
        """Build a state from rows of letters where '.' marks an empty square.

        The width is taken from the last row.
        """
        lines = text.splitlines()
        if not lines:
            raise ValueError("board text holds no rows")
        cols = len(lines[-1])
        board = []
        for line in lines:
            row = [TileStack() for _ in range(cols)]
            for stack, char in zip(row, line):
                if char != EMPTY:
                    stack.push(char)
            board.append(row)
        return cls(len(lines), cols, board)

    def top_letter(self, row: int, col: int) -> str:
        """The visible letter at a square, '.' when it is empty."""
        return self.board[row][col].top()

    def resized(self, rows: int, cols: int) -> GameState:
        """A copy of this state with the given size, pointing back at this one.

        Squares outside the old board start empty; squares outside the new
        size are dropped.
        """
        board = [
            [
                self.board[r][c].copy()
                if r < self.rows and c < self.cols
                else TileStack()
                for c in range(cols)
            ]
            for r in range(rows)
        ]
        return GameState(rows, cols, board, previous=self)

    def undo(self) -> GameState:
        """The state before this one, or this one if it has no predecessor."""
        return self.previous if self.previous is not None else self

    def to_text(self) -> str:
        """Top letters row by row, then stack heights row by row."""
        tops = ("".join(stack.top() for stack in row) for row in self.board)
        heights = ("".join(str(len(stack)) for stack in row) for row in self.board)
        return "".join(line + "\n" for line in chain(tops, heights))

    def save(self, path: PathType) -> None:
        """Write the text form of the state to a file."""
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(self.to_text())


def load_game_state(path: PathType) -> GameState:
    """Read a board file into a fresh state with no history."""
    return GameState.from_text(Path(path).read_text(encoding="utf-8"))