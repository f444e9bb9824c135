from dataclasses import dataclass, field
from typing import List, Sequence

from tree_sitter import Node


@dataclass
class AttachedStatement:
    """A statement together with the comments printed around it"""
    node: Node
    leading: List[Node] = field(default_factory=list)
    trailing: List[Node] = field(default_factory=list)


@dataclass
class CommentedSequence:
    entries: List[AttachedStatement]
    dangling: List[Node] = field(default_factory=list)


def attach_comments(children: Sequence[Node]) -> CommentedSequence:
    """Split a container's raw children into statements and their comments.

    A comment starting on the row where the previous child ended trails the
    nearest preceding non-empty statement; any other comment leads the next
    non-empty statement. Comments left over at the end are dangling.
    """
    entries: List[AttachedStatement] = []
    pending: List[Node] = []
    last_child = None
    last_statement = None

    for child in children:
        if child.type == "comment":
            same_row = last_child is not None and child.start_point[0] == last_child.end_point[0]
            if same_row and last_statement is not None and not pending:
                last_statement.trailing.append(child)
            else:
                pending.append(child)
        elif child.type == "empty_statement":
            entries.append(AttachedStatement(child))
        else:
            entry = AttachedStatement(child, leading=pending)
            pending = []
            entries.append(entry)
            last_statement = entry
        last_child = child

    return CommentedSequence(entries=entries, dangling=pending)
