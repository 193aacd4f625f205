"""The list of words that a placement is allowed to form."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import Union

MIN_WORD_LENGTH = 2

PathType = Union[str, "PathLike[str]"]


class WordList:
    """A set of legal words, held in upper case."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words = frozenset(word.upper() for word in words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def is_legal(self, word: str) -> bool:
        """True when the word is long enough and listed exactly as given.

        The list is stored in upper case and the word is compared as it
        stands, so only upper-case words can match.
        """
        return len(word) >= MIN_WORD_LENGTH and word in self._words


def load_words(path: PathType) -> WordList:
    """Read a word list with one word per line."""
    return WordList(Path(path).read_text(encoding="utf-8").splitlines())