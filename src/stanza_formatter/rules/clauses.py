"""Stroustrup clause placement.

``else``, ``catch``, ``finally`` and the ``while`` of a do-while always
start a new line instead of following the closing brace. Source blank
lines are never consulted here.
"""

from typing import List, Optional, Tuple

from tree_sitter import Node
from stanza_tree_sitter import ASTWalker
from stanza_tree_sitter.text_utils import has_newline, is_block_comment, is_line_comment
from ..doc import BREAK_PARENT, Doc, group, hardline, indent, line, softline


def _child_of_type(node: Node, type_name: str, after: int = 0) -> Optional[Node]:
    for child in node.children:
        if child.type == type_name and child.start_byte >= after:
            return child
    return None


def _interstitial(printer, owner: Node, start: int, end: int, row: int) -> Tuple[List[Doc], bool]:
    """Comments of ``owner`` lying between two of its parts.

    Returns the printed comments and whether the next part has to start a
    new line because the last comment cannot be followed on its line.
    """
    parts: List[Doc] = []
    needs_newline = False
    for comment in ASTWalker.comments_between(owner, start, end):
        parts.append(" " if comment.start_point[0] == row else hardline)
        parts.append(printer.print_comment(comment))
        needs_newline = is_line_comment(comment, printer.source)
        row = comment.end_point[0]
    return parts, needs_newline


def _attach_body(printer, owner: Node, body: Node, start: int, row: int) -> List[Doc]:
    """A clause body after its keyword or condition, with any comments in between."""
    parts, needs_newline = _interstitial(printer, owner, start, body.start_byte, row)
    if body.type == "empty_statement":
        if needs_newline:
            parts.append(hardline)
        parts.append(";")
    elif body.type in ("statement_block", "if_statement"):
        parts.append(hardline if needs_newline else " ")
        parts.append(printer.print_statement(body))
    elif needs_newline:
        parts.append(indent([hardline, printer.print_statement(body)]))
    else:
        parts.append(group(indent([line, printer.print_statement(body)])))
    return parts


def print_if_statement(printer, node: Node) -> Doc:
    condition = node.child_by_field_name("condition")
    consequence = node.child_by_field_name("consequence")
    alternative = node.child_by_field_name("alternative")
    keyword = node.children[0]

    parts: List[Doc] = ["if"]
    between, needs_newline = _interstitial(printer, node, keyword.end_byte, condition.start_byte, keyword.end_point[0])
    parts.extend(between)
    parts.append(hardline if needs_newline else " ")
    parts.append(printer.splice(condition))
    parts.extend(_attach_body(printer, node, consequence, condition.end_byte, condition.end_point[0]))

    if alternative is not None:
        between, _ = _interstitial(printer, node, consequence.end_byte, alternative.start_byte, consequence.end_point[0])
        parts.extend(between)
        parts.append(hardline)
        parts.append(print_else_clause(printer, alternative))
    return parts


def print_else_clause(printer, node: Node) -> Doc:
    keyword = node.children[0]
    body = ASTWalker.named_children_without_comments(node)[0]
    return ["else", *_attach_body(printer, node, body, keyword.end_byte, keyword.end_point[0])]


def print_try_statement(printer, node: Node) -> Doc:
    keyword = node.children[0]
    body = node.child_by_field_name("body")
    handler = node.child_by_field_name("handler")
    finalizer = node.child_by_field_name("finalizer")

    parts: List[Doc] = ["try", *_attach_body(printer, node, body, keyword.end_byte, keyword.end_point[0])]
    previous = body
    for clause in (handler, finalizer):
        if clause is None:
            continue
        between, _ = _interstitial(printer, node, previous.end_byte, clause.start_byte, previous.end_point[0])
        parts.extend(between)
        parts.append(hardline)
        if clause.type == "catch_clause":
            parts.append(print_catch_clause(printer, clause))
        else:
            parts.append(print_finally_clause(printer, clause))
        previous = clause
    return parts


def print_finally_clause(printer, node: Node) -> Doc:
    keyword = node.children[0]
    body = node.child_by_field_name("body")
    return ["finally", *_attach_body(printer, node, body, keyword.end_byte, keyword.end_point[0])]


def _parameter_needs_breaks(printer, leading: List[Node], trailing: List[Node]) -> bool:
    source = printer.source
    for comment in leading:
        if not is_block_comment(comment, source) or has_newline(source, comment.end_byte):
            return True
    for comment in trailing:
        if not is_block_comment(comment, source) or has_newline(source, comment.start_byte, backwards=True):
            return True
    return False


def _print_parameter(printer, node: Node, start: int, end: int, leading: List[Node], trailing: List[Node]) -> Doc:
    source = printer.source
    parts: List[Doc] = []
    for comment in leading:
        parts.append(printer.print_comment(comment))
        if is_line_comment(comment, source) or has_newline(source, comment.end_byte):
            parts.append(hardline)
        else:
            parts.append(" ")
    parts.append(printer.splice_range(node, start, end))
    for comment in trailing:
        if has_newline(source, comment.start_byte, backwards=True):
            parts.append(hardline)
        else:
            parts.append(" ")
        parts.append(printer.print_comment(comment))
        if is_line_comment(comment, source):
            parts.append(BREAK_PARENT)
    return parts


def print_catch_clause(printer, node: Node) -> Doc:
    keyword = node.children[0]
    body = node.child_by_field_name("body")
    parameter = node.child_by_field_name("parameter")
    open_paren = _child_of_type(node, "(")
    if parameter is None or open_paren is None:
        return ["catch", *_attach_body(printer, node, body, keyword.end_byte, keyword.end_point[0])]

    close_paren = _child_of_type(node, ")", after=parameter.end_byte)
    bound = [
        child
        for child in node.children
        if child.type != "comment" and child.start_byte >= parameter.start_byte and child.end_byte <= close_paren.start_byte
    ]
    start, end = bound[0].start_byte, bound[-1].end_byte
    leading = ASTWalker.comments_between(node, open_paren.end_byte, start)
    trailing = ASTWalker.comments_between(node, end, close_paren.start_byte)

    param = _print_parameter(printer, node, start, end, leading, trailing)
    parts: List[Doc] = ["catch"]
    between, _ = _interstitial(printer, node, keyword.end_byte, open_paren.start_byte, keyword.end_point[0])
    parts.extend(between)
    parts.append(" ")
    if _parameter_needs_breaks(printer, leading, trailing):
        parts.append(group(["(", indent([softline, param]), softline, ")"]))
    else:
        parts.extend(["(", param, ")"])
    parts.extend(_attach_body(printer, node, body, close_paren.end_byte, close_paren.end_point[0]))
    return parts


def print_do_statement(printer, node: Node) -> Doc:
    keyword = node.children[0]
    body = node.child_by_field_name("body")
    condition = node.child_by_field_name("condition")
    while_keyword = _child_of_type(node, "while", after=body.end_byte)

    parts: List[Doc] = ["do", *_attach_body(printer, node, body, keyword.end_byte, keyword.end_point[0])]
    between, _ = _interstitial(printer, node, body.end_byte, while_keyword.start_byte, body.end_point[0])
    parts.extend(between)
    parts.append(hardline)
    parts.append("while")
    between, needs_newline = _interstitial(
        printer, node, while_keyword.end_byte, condition.start_byte, while_keyword.end_point[0]
    )
    parts.extend(between)
    parts.append(hardline if needs_newline else " ")
    parts.append(printer.splice(condition))
    if _child_of_type(node, ";", after=condition.end_byte) is not None:
        parts.append(";")
    between, _ = _interstitial(printer, node, condition.end_byte, node.end_byte, condition.end_point[0])
    parts.extend(between)
    return parts
