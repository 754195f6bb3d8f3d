import pytest

from trucogame.config import USER_MAX
from trucogame.username import NameEntry


def typed(text):
    entry = NameEntry()
    for char in text:
        entry.type_char(char)
    return entry


def test_letters_are_appended():
    entry = typed("Joao")
    assert entry.name == "Joao"


@pytest.mark.parametrize("char", ["1", "!", "-", "\r", "\x1b", "é"])
def test_non_letters_are_rejected(char):
    entry = typed("Ana")
    assert entry.type_char(char) is False
    assert entry.name == "Ana"


def test_leading_space_is_rejected():
    entry = NameEntry()
    assert entry.type_char(" ") is False
    assert entry.name == ""
    assert entry.type_char("B") is True
    assert entry.type_char(" ") is True
    assert entry.name == "B "


@pytest.mark.parametrize("char", ["", "ab"])
def test_only_single_characters_are_taken(char):
    entry = NameEntry()
    assert entry.type_char(char) is False
    assert entry.name == ""


def test_length_is_capped():
    entry = typed("a" * (USER_MAX + 5))
    assert len(entry.name) == USER_MAX
    assert entry.type_char("b") is False


def test_backspace_removes_last_character():
    entry = typed("Rui")
    assert entry.backspace() is True
    assert entry.name == "Ru"


def test_backspace_on_empty_name():
    entry = NameEntry()
    assert entry.backspace() is False
    assert entry.name == ""


def test_submit_collapses_spaces():
    entry = typed("Ana  Maria  ")
    assert entry.submit() is True
    assert entry.name == "Ana Maria"


def test_submit_short_name_is_refused_untouched():
    entry = typed("Al")
    assert entry.submit() is False
    assert entry.name == "Al"


def test_submit_trailing_spaces_leave_too_short_name():
    entry = typed("Al  ")
    assert entry.submit() is False
    assert entry.name == "Al"


def test_submit_three_letters_is_accepted():
    entry = typed("Bia")
    assert entry.submit() is True
    assert entry.name == "Bia"