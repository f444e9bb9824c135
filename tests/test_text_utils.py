import pytest
from stanza_tree_sitter.text_utils import (
    has_newline,
    is_next_line_empty,
    line_indent_width,
    skip_block_comment,
    skip_spaces,
    skip_trailing_comment,
)


def test_skip_spaces_forward_and_backward():
    text = b"a   b"
    assert skip_spaces(text, 1) == 4
    assert skip_spaces(text, 3, backwards=True) == 0


def test_skip_spaces_runs_off_the_end():
    assert skip_spaces(b"a  ", 1) == 3
    assert skip_spaces(b"a", None) is None


def test_skip_block_comment():
    text = b"/* x */y"
    assert skip_block_comment(text, 0) == 7
    assert skip_block_comment(b"/* open", 0) == 0


def test_skip_trailing_comment():
    text = b"// note\nnext"
    assert skip_trailing_comment(text, 0) == 7


def test_has_newline():
    text = b"a;  \nb"
    assert has_newline(text, 2)
    assert not has_newline(b"a; b", 2)
    assert has_newline(b"a\n  b", 3, backwards=True)


@pytest.mark.parametrize(
    "text, expected",
    [
        (b"a();\n\nb();", True),
        (b"a();\nb();", False),
        (b"a();  \n   \nb();", True),
        (b"a(); // note\n\nb();", True),
        (b"a(); /* x */\n\nb();", True),
        (b"a();;\n\nb();", True),
        (b"a();\r\n\r\nb();", True),
        (b"a();", False),
        (b"a(); b();\n\nc();", False),
    ],
)
def test_is_next_line_empty(text, expected):
    assert is_next_line_empty(text, 4) is expected


def test_line_indent_width():
    text = b"x\n    y = 1;"
    assert line_indent_width(text, text.index(b"=")) == 4
    assert line_indent_width(text, 0) == 0
