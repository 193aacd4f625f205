import pytest

from upwords.dictionary import WordList, load_words


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ndog\n\na\n")
    return path


def test_loaded_words_are_upper_case(words_file):
    words = load_words(words_file)
    assert words.is_legal("CAT")
    assert words.is_legal("DOG")


def test_comparison_is_case_sensitive(words_file):
    words = load_words(words_file)
    assert not words.is_legal("cat")


def test_single_letters_are_never_legal(words_file):
    words = load_words(words_file)
    assert "A" in words
    assert not words.is_legal("A")


def test_unknown_word_is_not_legal(words_file):
    assert not load_words(words_file).is_legal("BIRD")


def test_blank_lines_do_not_form_words(words_file):
    words = load_words(words_file)
    assert not words.is_legal("")
    assert list(words) == ["", "A", "CAT", "DOG"]


def test_word_list_from_iterable():
    words = WordList(["at", "To"])
    assert words.is_legal("AT")
    assert words.is_legal("TO")
    assert len(words) == 2


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "absent.txt")