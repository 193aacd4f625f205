# upwords

A small engine for a stacked-tile word game. Letters are laid on a
rectangular board along a row or a column. A tile can go on top of another
one, up to five high. Every word a move forms must be in the word list, and
the board grows to the right or downwards when a word runs off its edge.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Boards

A board file holds one line per row. Each character is a square: a letter
is a tile, a `.` is an empty square. The width of the board is taken from
the last line.

A saved board (`GameState.save` or `GameState.to_text`) holds the same
letter grid, showing the top tile of each stack and `.` for an empty
square, followed by a second grid of the same size giving the height of
every stack as a digit.

## Word list

The word list is a text file with one word per line. Words are read in any
case and stored in upper case. A word is checked exactly as it stands, so
only upper-case tiles can form legal words. Words shorter than two letters
are never legal.

## Using the library

```python
from upwords.state import load_game_state
from upwords.dictionary import load_words
from upwords.placement import place_tiles

game = load_game_state("board.txt")
words = load_words("words.txt")

# Lay "CAT" rightwards from row 0, column 0.
game, placed = place_tiles(game, 0, 0, "H", "CAT", words)

# A space in the tiles keeps the letter already on that square.
game, placed = place_tiles(game, 0, 0, "V", " AR", words)

game = game.undo()       # the state before the last move
game.save("output.txt")
```

`place_tiles` returns the new state and the number of tiles laid. A move
that breaks a rule returns the given state unchanged and `0`. The rules
checked are:

- the starting row and column must be on the board, and the direction `H`
  (rightwards) or `V` (downwards);
- the word formed along the direction, together with the letters that
  already adjoin it in that line, must be legal;
- the stretch of the line that this word covers must already hold at least
  one tile, and the move must not leave that word as it was;
- every crossing word through a square of the move that lies on the board
  must be legal;
- no stack may grow beyond five tiles.

Each successful move makes a new `GameState` linked to the one before it,
so `undo()` can step back through the moves; on a state with no earlier
one it returns the state itself.

Other pieces:

- `GameState.from_text`, `to_text`, `top_letter(row, col)` and
  `resized(rows, cols)` in `upwords.state`;
- `check_horizontal` and `check_vertical` in `upwords.placement`, which
  judge a run of tiles and return `REJECT`, `FITS`, or `EXTENDS` when the
  word runs past the edge of the board;
- `WordList` in `upwords.dictionary`, with `is_legal(word)`;
- `TileStack` in `upwords.stack`, the five-high stack behind every square,
  with `push`, `pop`, `top`, `is_empty`, `is_full` and `copy`; `pop` on an
  empty stack raises `EmptyStackError`.

## Command line

The `upwords` command loads a board, plays the given moves in order and
writes the final state to a file:

```
upwords board.txt output.txt --words words.txt \
    --place 0 0 H CAT --place 0 0 V " AR" --undo
```

- `--words` names the word list (default `tests/words.txt`);
- `--place ROW COL DIR TILES` lays a move and prints the number of tiles
  laid; it may be given many times;
- `--undo` takes back the last move.

It exits with status 1 when a file cannot be read or written.

## What it does not do

The package checks and records moves on a board. It keeps no score, knows
no players, turns or tile bag, and offers no interactive game.