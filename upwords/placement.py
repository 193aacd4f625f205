"""Checking a run of tiles against the board and laying it down."""

from __future__ import annotations

from collections.abc import Sequence

from upwords.dictionary import WordList
from upwords.stack import EMPTY
from upwords.state import GameState

REJECT = 0
FITS = 1
EXTENDS = 2

SKIP = " "


def _check_line(
    line: Sequence[str], pos: int, tiles: str, simple_check: bool, words: WordList
) -> int:
    """Judge tiles laid along one line of top letters starting at pos."""
    size = len(line)

    def at(index: int) -> str:
        return line[index] if 0 <= index < size else EMPTY

    length = 0 if simple_check else len(tiles)
    start = pos
    end = pos + length - 1 if length else pos
    extending = end > size - 1

    while start > 0 and at(start - 1) != EMPTY:
        start -= 1
    if extending:
        end = pos + length - 1
    else:
        while end + 1 < size and line[end + 1] != EMPTY:
            end += 1

    if simple_check:
        if start == pos == end:
            return FITS
        first = tiles[0] if tiles else SKIP
        word = "".join(
            first if index == pos and first != SKIP else at(index)
            for index in range(start, end + 1)
        )
        return FITS if words.is_legal(word) else REJECT

    before = "".join(at(index) for index in range(start, pos))
    placed = "".join(
        at(pos + offset) if tile == SKIP else tile for offset, tile in enumerate(tiles)
    )
    after = "".join(at(index) for index in range(pos + length, end + 1))
    word = before + placed + after
    old_word = "".join(at(index) for index in range(start, end + 1))

    if all(letter == EMPTY for letter in old_word):
        return REJECT
    if old_word == word:
        return REJECT
    if not words.is_legal(word):
        return REJECT
    return EXTENDS if extending else FITS


def check_horizontal(
    game: GameState, row: int, col: int, tiles: str, simple_check: bool, words: WordList
) -> int:
    """Judge tiles laid rightwards from (row, col).

    With simple_check only the first tile is considered, as the cross word
    through that square. Returns REJECT, FITS, or EXTENDS when the word
    runs past the right edge.
    """
    line = [game.top_letter(row, c) for c in range(game.cols)]
    return _check_line(line, col, tiles, simple_check, words)


def check_vertical(
    game: GameState, row: int, col: int, tiles: str, simple_check: bool, words: WordList
) -> int:
    """Judge tiles laid downwards from (row, col); see check_horizontal."""
    line = [game.top_letter(r, col) for r in range(game.rows)]
    return _check_line(line, row, tiles, simple_check, words)


def place_tiles(
    game: GameState, row: int, col: int, direction: str, tiles: str, words: WordList
) -> tuple[GameState, int]:
    """Lay tiles from (row, col) going 'H' (right) or 'V' (down).

    A space in tiles keeps the letter already on that square. Returns the
    new state and the number of tiles laid; an illegal move returns the
    given state unchanged and 0.
    """
    if not (0 <= row < game.rows and 0 <= col < game.cols):
        return game, 0

    if direction == "H":
        main_check, cross_check = check_horizontal, check_vertical
        cells = [(row, col + offset) for offset in range(len(tiles))]
    elif direction == "V":
        main_check, cross_check = check_vertical, check_horizontal
        cells = [(row + offset, col) for offset in range(len(tiles))]
    else:
        return game, 0

    verdict = main_check(game, row, col, tiles, False, words)
    if verdict == REJECT:
        return game, 0

    def on_board(r: int, c: int) -> bool:
        return r < game.rows and c < game.cols

    for offset, (r, c) in enumerate(cells):
        if on_board(r, c) and cross_check(game, r, c, tiles[offset:], True, words) != FITS:
            return game, 0

    targets = [(r, c, tile) for (r, c), tile in zip(cells, tiles) if tile != SKIP]
    if any(on_board(r, c) and game.board[r][c].is_full() for r, c, _ in targets):
        return game, 0

    rows, cols = game.rows, game.cols
    if verdict == EXTENDS:
        if direction == "H":
            cols = col + len(tiles)
        else:
            rows = row + len(tiles)

    new_game = game.resized(rows, cols)
    for r, c, tile in targets:
        new_game.board[r][c].push(tile)
    return new_game, len(targets)