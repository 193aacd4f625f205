"""Command line entry: load a board, play moves, save the result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from upwords.dictionary import load_words
from upwords.placement import place_tiles
from upwords.state import load_game_state

DEFAULT_WORDS = "tests/words.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upwords",
        description="Play moves on an Upwords board and save the resulting state.",
    )
    parser.add_argument("board", help="board file, one row per line, '.' for empty")
    parser.add_argument("output", help="file to write the final state to")
    parser.add_argument(
        "--words", default=DEFAULT_WORDS, help="word list, one word per line"
    )
    parser.add_argument(
        "--place",
        nargs=4,
        action="append",
        dest="actions",
        metavar=("ROW", "COL", "DIR", "TILES"),
        help="lay TILES from ROW, COL going H or V; a space keeps a letter",
    )
    parser.add_argument(
        "--undo",
        action="append_const",
        const=None,
        dest="actions",
        help="take back the last move",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the moves given on the command line in order."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        words = load_words(args.words)
        game = load_game_state(args.board)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for action in args.actions or []:
        if action is None:
            game = game.undo()
            continue
        row_text, col_text, direction, tiles = action
        try:
            row, col = int(row_text), int(col_text)
        except ValueError:
            parser.error(f"invalid position: {row_text} {col_text}")
        game, placed = place_tiles(game, row, col, direction, tiles, words)
        print(placed)

    try:
        game.save(args.output)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())