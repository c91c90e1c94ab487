import pytest

from bfcore.errors import ParseError, UnmatchedCloseError, UnmatchedOpenError
from bfcore.jump_table import build_jump_table


def test_nested_and_sequential_pairs():
    table = build_jump_table("[[]][]")
    assert table == {0: 3, 3: 0, 1: 2, 2: 1, 4: 5, 5: 4}


def test_table_is_symmetric():
    table = build_jump_table("+[>[-]<[->+<]]comment[.]")
    for open_pos, close_pos in table.items():
        assert table[close_pos] == open_pos


def test_comments_keep_their_positions():
    assert build_jump_table("a[b]c") == {1: 3, 3: 1}


def test_no_brackets():
    assert build_jump_table("+-<>.,? hello") == {}


@pytest.mark.parametrize("code, position", [("]", 0), ("+]", 1), ("[]]", 2)])
def test_unmatched_close(code, position):
    with pytest.raises(UnmatchedCloseError) as excinfo:
        build_jump_table(code)
    assert excinfo.value.position == position


@pytest.mark.parametrize("code, position", [("[", 0), ("[[]", 0), ("+[", 1)])
def test_unmatched_open(code, position):
    with pytest.raises(UnmatchedOpenError) as excinfo:
        build_jump_table(code)
    assert excinfo.value.position == position


def test_parse_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        build_jump_table("]")
    assert issubclass(UnmatchedOpenError, ParseError)
    assert "Closing bracket without opening bracket" in str(UnmatchedCloseError(3))
