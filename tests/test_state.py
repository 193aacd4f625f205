import pytest

from upwords.state import GameState, load_game_state

BOARD = "..C\nAB.\n"


def test_from_text_dimensions_and_letters():
    game = GameState.from_text(BOARD)
    assert (game.rows, game.cols) == (2, 3)
    assert game.top_letter(0, 2) == "C"
    assert game.top_letter(1, 0) == "A"
    assert game.top_letter(0, 0) == "."
    assert game.previous is None


def test_to_text_lists_tops_then_heights():
    game = GameState.from_text(BOARD)
    assert game.to_text() == "..C\nAB.\n001\n110\n"


def test_width_comes_from_last_row():
    game = GameState.from_text("ABCD\nXY\n")
    assert game.cols == 2
    assert game.to_text() == "AB\nXY\n11\n11\n"


def test_from_text_rejects_empty_text():
    with pytest.raises(ValueError):
        GameState.from_text("")


def test_save_and_load_round_trip(tmp_path):
    board_file = tmp_path / "board.txt"
    board_file.write_text(BOARD)
    game = load_game_state(board_file)
    out = tmp_path / "out.txt"
    game.save(out)
    assert out.read_text() == "..C\nAB.\n001\n110\n"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game_state(tmp_path / "missing.txt")


def test_resized_grows_with_empty_squares_and_links_back():
    game = GameState.from_text(BOARD)
    bigger = game.resized(3, 4)
    assert (bigger.rows, bigger.cols) == (3, 4)
    assert bigger.previous is game
    assert bigger.to_text() == "..C.\nAB..\n....\n0010\n1100\n0000\n"


def test_resized_shrinks_by_dropping_squares():
    game = GameState.from_text(BOARD)
    smaller = game.resized(1, 2)
    assert smaller.to_text() == "..\n00\n"


def test_resized_copies_are_independent():
    game = GameState.from_text(BOARD)
    copy = game.resized(game.rows, game.cols)
    copy.board[1][0].push("Z")
    assert copy.top_letter(1, 0) == "Z"
    assert game.top_letter(1, 0) == "A"
    assert len(game.board[1][0]) == 1


def test_undo_returns_previous_state():
    game = GameState.from_text(BOARD)
    later = game.resized(game.rows, game.cols)
    later.board[0][0].push("X")
    assert later.undo() is game
    assert later.undo().to_text() == "..C\nAB.\n001\n110\n"


def test_undo_on_initial_state_keeps_it():
    game = GameState.from_text(BOARD)
    assert game.undo() is game


def test_stacked_tiles_show_top_and_height():
    game = GameState.from_text("CAT\n")
    game.board[0][0].push("B")
    game.board[0][0].push("R")
    assert game.top_letter(0, 0) == "R"
    assert game.to_text() == "RAT\n311\n"