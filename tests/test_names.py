import pytest

from trucogame.names import verify_name


@pytest.mark.parametrize("name", ["", "a", "ab", "a "])
def test_short_names_are_rejected_unchanged(name):
    assert verify_name(name) == (name, False)


def test_collapses_and_strips_spaces():
    assert verify_name("Ana  Maria ") == ("Ana Maria", True)


def test_trailing_space_can_make_name_too_short():
    assert verify_name("ab ") == ("ab", False)
    assert verify_name("ab   ") == ("ab", False)


def test_only_spaces():
    assert verify_name("    ") == ("", False)


def test_plain_name_is_kept():
    assert verify_name("Matheus") == ("Matheus", True)


@pytest.mark.parametrize("name", ["Jo  ao", "a   b   c", "Gabriel   "])
def test_result_has_no_double_or_trailing_spaces(name):
    cleaned, _ = verify_name(name)
    assert "  " not in cleaned
    assert not cleaned.endswith(" ")