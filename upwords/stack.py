"""A bounded stack of letter tiles occupying one square of the board."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_HEIGHT = 5
EMPTY = "."


class EmptyStackError(IndexError):
    """Raised when a tile is taken from a square that holds none."""


@dataclass
class TileStack:
    """Letters piled on one square, bottom first, at most MAX_HEIGHT high."""

    letters: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.letters) > MAX_HEIGHT:
            raise ValueError(f"a stack holds at most {MAX_HEIGHT} tiles")

    def __len__(self) -> int:
        return len(self.letters)

    def is_empty(self) -> bool:
        """True when no tile lies on the square."""
        return not self.letters

    def is_full(self) -> bool:
        """True when the stack has reached its maximum height."""
        return len(self.letters) == MAX_HEIGHT

    def push(self, letter: str) -> None:
        """Lay a tile on top; a full stack refuses it with IndexError."""
        if self.is_full():
            raise IndexError("tile stack is full")
        self.letters.append(letter)

    def pop(self) -> str:
        """Remove and return the top tile."""
        if not self.letters:
            raise EmptyStackError("tile stack is empty")
        return self.letters.pop()

    def top(self) -> str:
        """The visible letter, or '.' for an empty square."""
        return self.letters[-1] if self.letters else EMPTY

    def copy(self) -> TileStack:
        """An independent stack holding the same tiles."""
        return TileStack(list(self.letters))