"""Character-level queries over the original source text.

All offsets are byte offsets into the UTF-8 source, matching tree-sitter's
``start_byte`` / ``end_byte``. Skippers return ``None`` once they run past
a position that cannot be resolved, so calls can be chained.
"""

from typing import Optional

from tree_sitter import Node

_SPACES = frozenset(b" \t")
_LINE_END = frozenset(b",; \t")
_NEWLINES = frozenset(b"\n\r")


def _skip(text: bytes, index: Optional[int], chars: frozenset, backwards: bool = False) -> Optional[int]:
    if index is None:
        return None
    length = len(text)
    cursor = index
    while 0 <= cursor < length:
        if text[cursor] not in chars:
            return cursor
        cursor = cursor - 1 if backwards else cursor + 1
    if cursor == -1 or cursor == length:
        return cursor
    return None


def skip_spaces(text: bytes, index: Optional[int], backwards: bool = False) -> Optional[int]:
    return _skip(text, index, _SPACES, backwards)


def skip_to_line_end(text: bytes, index: Optional[int]) -> Optional[int]:
    return _skip(text, index, _LINE_END)


def skip_block_comment(text: bytes, index: Optional[int]) -> Optional[int]:
    if index is None:
        return None
    if text[index : index + 2] == b"/*":
        end = text.find(b"*/", index + 2)
        if end != -1:
            return end + 2
    return index


def skip_trailing_comment(text: bytes, index: Optional[int]) -> Optional[int]:
    if index is None:
        return None
    if text[index : index + 2] == b"//":
        while index < len(text) and text[index] not in _NEWLINES:
            index += 1
    return index


def skip_newline(text: bytes, index: Optional[int], backwards: bool = False) -> Optional[int]:
    if index is None or not 0 <= index < len(text):
        return index
    char = text[index : index + 1]
    if backwards:
        if char == b"\n" and index > 0 and text[index - 1 : index] == b"\r":
            return index - 2
        if char in (b"\n", b"\r"):
            return index - 1
    else:
        if char == b"\r" and text[index + 1 : index + 2] == b"\n":
            return index + 2
        if char in (b"\n", b"\r"):
            return index + 1
    return index


def has_newline(text: bytes, index: int, backwards: bool = False) -> bool:
    """True when only spaces/tabs separate ``index`` from a line break.

    With ``backwards`` the scan starts at ``index - 1`` and moves left.
    """
    start = skip_spaces(text, index - 1 if backwards else index, backwards)
    return skip_newline(text, start, backwards) != start


def is_next_line_empty(text: bytes, index: int) -> bool:
    """True when the line following the one containing ``index`` is blank.

    Separators (``;`` and ``,``), block comments and a trailing line comment
    on the rest of the current line are skipped first.
    """
    previous = None
    cursor: Optional[int] = index
    while cursor != previous:
        previous = cursor
        cursor = skip_to_line_end(text, cursor)
        cursor = skip_block_comment(text, cursor)
        cursor = skip_spaces(text, cursor)
    cursor = skip_trailing_comment(text, cursor)
    cursor = skip_newline(text, cursor)
    return cursor is not None and has_newline(text, cursor)


def has_blank_line_after(node: Node, source: bytes) -> bool:
    return is_next_line_empty(source, node.end_byte)


def is_block_comment(node: Node, source: bytes) -> bool:
    return node.type == "comment" and source[node.start_byte : node.start_byte + 2] == b"/*"


def is_line_comment(node: Node, source: bytes) -> bool:
    return node.type == "comment" and not is_block_comment(node, source)


def line_indent_width(source: bytes, index: int) -> int:
    """Number of leading space/tab bytes on the line containing ``index``"""
    line_start = source.rfind(b"\n", 0, index) + 1
    width = 0
    while line_start + width < len(source) and source[line_start + width] in _SPACES:
        width += 1
    return width
