"""Document primitives and the line-fitting printer.

Printers build a tree of these primitives; ``print_doc`` turns it into text.
A document is a string, a list (concatenation) or one of the classes below.
"""

from dataclasses import dataclass
from typing import Any, List, Tuple, Union

MODE_BREAK = "break"
MODE_FLAT = "flat"


@dataclass(frozen=True)
class Line:
    soft: bool = False
    hard: bool = False
    literal: bool = False


class BreakParent:
    """Forces every enclosing group to break."""

    def __repr__(self) -> str:
        return "BREAK_PARENT"


@dataclass
class Group:
    contents: Any
    should_break: bool = False


@dataclass
class Indent:
    contents: Any


@dataclass
class Align:
    width: int
    contents: Any


Doc = Union[str, list, Line, BreakParent, Group, Indent, Align]

BREAK_PARENT = BreakParent()
line = Line()
softline = Line(soft=True)
hardline = [Line(hard=True), BREAK_PARENT]
literalline = [Line(hard=True, literal=True), BREAK_PARENT]


def group(contents: Doc, should_break: bool = False) -> Group:
    return Group(contents, should_break)


def indent(contents: Doc) -> Indent:
    return Indent(contents)


def align(width: int, contents: Doc) -> Doc:
    if width <= 0:
        return contents
    return Align(width, contents)


def propagate_breaks(doc: Doc) -> bool:
    """Mark groups containing a hard break as broken; returns whether ``doc`` has one."""
    if isinstance(doc, BreakParent):
        return True
    if isinstance(doc, list):
        found = False
        for part in doc:
            found = propagate_breaks(part) or found
        return found
    if isinstance(doc, Group):
        if propagate_breaks(doc.contents):
            doc.should_break = True
        return doc.should_break
    if isinstance(doc, (Indent, Align)):
        return propagate_breaks(doc.contents)
    return False


Command = Tuple[str, str, Doc]


def _fits(next_cmd: Command, rest: List[Command], width: int) -> bool:
    rest_index = len(rest)
    cmds = [next_cmd]
    while width >= 0:
        if not cmds:
            if rest_index == 0:
                return True
            rest_index -= 1
            cmds.append(rest[rest_index])
            continue
        ind, mode, doc = cmds.pop()
        if isinstance(doc, str):
            width -= len(doc)
        elif isinstance(doc, list):
            for part in reversed(doc):
                cmds.append((ind, mode, part))
        elif isinstance(doc, (Indent, Align)):
            cmds.append((ind, mode, doc.contents))
        elif isinstance(doc, Group):
            cmds.append((ind, MODE_BREAK if doc.should_break else mode, doc.contents))
        elif isinstance(doc, Line):
            if mode == MODE_BREAK or doc.hard:
                return True
            if not doc.soft:
                width -= 1
    return False


def _trim(out: List[str]) -> None:
    while out:
        trimmed = out[-1].rstrip(" \t")
        if trimmed:
            out[-1] = trimmed
            return
        out.pop()


def print_doc(doc: Doc, width: int = 80, indent_unit: str = "  ") -> str:
    propagate_breaks(doc)
    out: List[str] = []
    pos = 0
    cmds: List[Command] = [("", MODE_BREAK, doc)]
    while cmds:
        ind, mode, current = cmds.pop()
        if isinstance(current, str):
            out.append(current)
            pos += len(current)
        elif isinstance(current, list):
            for part in reversed(current):
                cmds.append((ind, mode, part))
        elif isinstance(current, Indent):
            cmds.append((ind + indent_unit, mode, current.contents))
        elif isinstance(current, Align):
            cmds.append((ind + " " * current.width, mode, current.contents))
        elif isinstance(current, Group):
            flat = (ind, MODE_FLAT, current.contents)
            if mode == MODE_FLAT and not current.should_break:
                cmds.append(flat)
            elif not current.should_break and _fits(flat, cmds, width - pos):
                cmds.append(flat)
            else:
                cmds.append((ind, MODE_BREAK, current.contents))
        elif isinstance(current, Line):
            if mode == MODE_FLAT and not current.hard:
                if not current.soft:
                    out.append(" ")
                    pos += 1
            elif current.literal:
                out.append("\n")
                pos = 0
            else:
                _trim(out)
                out.append("\n" + ind)
                pos = len(ind)
    return "".join(out)
