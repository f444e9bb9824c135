from typing import List, Tuple

from tree_sitter import Node
from stanza_tree_sitter import ASTWalker, JSPatterns
from stanza_tree_sitter.js_patterns import DIRECTIVE_OWNERS
from stanza_tree_sitter.text_utils import has_blank_line_after, is_line_comment, is_next_line_empty, line_indent_width
from .comments import AttachedStatement, attach_comments
from .doc import BREAK_PARENT, Doc, align, hardline, indent, literalline
from .models import FormatterConfig
from .rules import classify, print_do_statement, print_if_statement, print_try_statement
from .sequence import SequenceEmitter, is_empty_statement

CLAUSE_PRINTERS = {
    "if_statement": print_if_statement,
    "try_statement": print_try_statement,
    "do_statement": print_do_statement,
}

# Statements whose `body` child sits in statement position
BODY_STATEMENTS = ("for_statement", "for_in_statement", "while_statement", "with_statement", "labeled_statement")

# Newlines inside these are content
LITERAL_TYPES = ("template_string", "string")


class StatementPrinter:
    """Renders statements to documents.

    Statement text is reproduced verbatim except for nested statement
    containers, which are printed again through the sequence emitter, and
    the clause keywords handled by the Stroustrup rules.
    """

    def __init__(self, source: bytes, config: FormatterConfig):
        self.source = source
        self.config = config
        self.emitter = SequenceEmitter(
            print_statement=self.print_entry,
            has_blank_line_after=lambda entry: has_blank_line_after(entry.node, self.source),
            classify=lambda entry: classify(entry.node, self.source),
            is_empty=lambda entry: is_empty_statement(entry.node),
            enforce_blank_lines=config.enforce_blank_lines,
        )

    def print_program(self, root: Node) -> Doc:
        parts: List[Doc] = []
        hash_bang = ASTWalker.get_child_of_type(root, "hash_bang_line")
        if hash_bang is not None:
            parts.append(ASTWalker.get_text(hash_bang, self.source).rstrip())
            parts.append(hardline)
            if is_next_line_empty(self.source, hash_bang.end_byte):
                parts.append(hardline)
        body = self.print_body(root, JSPatterns.statement_children(root))
        if not body:
            return parts
        parts.extend(body)
        parts.append(hardline)
        return parts

    def print_body(self, owner: Node, children: List[Node]) -> List[Doc]:
        """Program or function body: the directive prologue, then the statements.

        The two are separated only by the blank line the source had.
        """
        if owner is None or owner.type not in DIRECTIVE_OWNERS:
            return self.print_sequence(children)
        directives, rest = JSPatterns.split_directives(children)
        if not directives:
            return self.print_sequence(rest)
        parts = self.print_sequence(directives)
        body = self.print_sequence(rest)
        if body:
            last = [child for child in directives if child.type != "comment"][-1]
            parts.append(hardline)
            if has_blank_line_after(last, self.source):
                parts.append(hardline)
            parts.extend(body)
        return parts

    def print_sequence(self, children: List[Node]) -> List[Doc]:
        attached = attach_comments(children)
        parts = self.emitter.emit(attached.entries)
        if attached.dangling:
            statements = [entry.node for entry in attached.entries if not is_empty_statement(entry.node)]
            if statements:
                parts.append(hardline)
                if has_blank_line_after(statements[-1], self.source):
                    parts.append(hardline)
            parts.append(self.print_comment_run(attached.dangling))
        return parts

    def print_entry(self, entry: AttachedStatement, print_node=None) -> Doc:
        print_node = print_node or self.print_statement
        parts: List[Doc] = []
        for i, comment in enumerate(entry.leading):
            following = entry.leading[i + 1] if i + 1 < len(entry.leading) else entry.node
            parts.append(self.print_comment(comment))
            if is_line_comment(comment, self.source) or following.start_point[0] > comment.end_point[0]:
                parts.append(hardline)
                if is_next_line_empty(self.source, comment.end_byte):
                    parts.append(hardline)
            else:
                parts.append(" ")
        parts.append(print_node(entry.node))
        for comment in entry.trailing:
            parts.append(" ")
            parts.append(self.print_comment(comment))
            if is_line_comment(comment, self.source):
                parts.append(BREAK_PARENT)
        return parts

    def print_comment(self, comment: Node) -> Doc:
        return self.splice(comment)

    def print_comment_run(self, comments: List[Node]) -> Doc:
        parts: List[Doc] = []
        previous = None
        for comment in comments:
            if previous is not None:
                if is_line_comment(previous, self.source) or comment.start_point[0] > previous.end_point[0]:
                    parts.append(hardline)
                    if is_next_line_empty(self.source, previous.end_byte):
                        parts.append(hardline)
                else:
                    parts.append(" ")
            parts.append(self.print_comment(comment))
            previous = comment
        if previous is not None and is_line_comment(previous, self.source):
            parts.append(BREAK_PARENT)
        return parts

    def print_statement(self, node: Node) -> Doc:
        if node.type == "statement_block":
            return self.print_block(node)
        if node.type == "switch_statement":
            return self.print_switch(node)
        clause_printer = CLAUSE_PRINTERS.get(node.type)
        if clause_printer is not None:
            return clause_printer(self, node)
        return self.splice(node)

    def print_block(self, node: Node) -> Doc:
        body = self.print_body(node.parent, JSPatterns.statement_children(node))
        if not body:
            return "{}"
        return ["{", indent([hardline, body]), hardline, "}"]

    def print_switch(self, node: Node) -> Doc:
        body = node.child_by_field_name("body")
        head = self.splice_range(node, node.start_byte, self._rstrip(node.start_byte, body.start_byte))
        attached = attach_comments([child for child in body.named_children])
        cases: List[Doc] = []
        previous = None
        for entry in attached.entries:
            if previous is not None:
                cases.append(hardline)
                if has_blank_line_after(previous, self.source):
                    cases.append(hardline)
            cases.append(self.print_entry(entry, self.print_switch_case))
            previous = entry.node
        if attached.dangling:
            if cases:
                cases.append(hardline)
            cases.append(self.print_comment_run(attached.dangling))
        if not cases:
            return [head, " {}"]
        return [head, " {", indent([hardline, cases]), hardline, "}"]

    def print_switch_case(self, node: Node) -> Doc:
        colon = ASTWalker.get_child_of_type(node, ":")
        if colon is None:
            return self.splice(node)
        header: List[Doc] = [self.splice_range(node, node.start_byte, colon.end_byte)]
        children = JSPatterns.statement_children(node)
        # Comments on the label's own line stay there
        while children and children[0].type == "comment" and children[0].start_point[0] == colon.end_point[0]:
            header.append(" ")
            header.append(self.print_comment(children[0]))
            if is_line_comment(children[0], self.source):
                header.append(BREAK_PARENT)
            children = children[1:]
        if len(children) == 1 and children[0].type == "statement_block":
            return [header, " ", self.print_block(children[0])]
        body = self.print_sequence(children)
        if not body:
            return header
        return [header, indent([hardline, body])]

    def splice(self, node: Node) -> Doc:
        return self.splice_range(node, node.start_byte, node.end_byte)

    def splice_range(self, owner: Node, start: int, end: int) -> Doc:
        """Source text of ``owner`` between two offsets, nested statement containers re-printed."""
        points = [p for p in self._splice_points(owner) if p.start_byte >= start and p.end_byte <= end]
        literals = self._literal_ranges(owner)
        base = line_indent_width(self.source, owner.start_byte)
        parts: List[Doc] = []
        cursor = start
        line_indent = 0
        for point in points:
            line_indent = self._emit_text(parts, cursor, point.start_byte, base, literals, line_indent)
            parts.append(align(line_indent, self.print_statement(point)))
            cursor = point.end_byte
        self._emit_text(parts, cursor, end, base, literals, line_indent)
        return parts

    def _splice_points(self, owner: Node) -> List[Node]:
        points: List[Node] = []

        def visit(node: Node):
            body = node.child_by_field_name("body") if node.type in BODY_STATEMENTS else None
            for child in node.children:
                if body is not None and child.start_byte == body.start_byte and child.end_byte == body.end_byte:
                    points.append(child)
                elif child.type == "statement_block":
                    points.append(child)
                elif child.type not in LITERAL_TYPES and child.type != "comment":
                    visit(child)

        visit(owner)
        return points

    def _literal_ranges(self, owner: Node) -> List[Tuple[int, int]]:
        ranges: List[Tuple[int, int]] = []

        def visit(node: Node):
            if node.type in LITERAL_TYPES:
                ranges.append((node.start_byte, node.end_byte))
                return
            for child in node.children:
                visit(child)

        visit(owner)
        return ranges

    def _emit_text(self, parts: List[Doc], start: int, end: int, base: int, literals, line_indent: int) -> int:
        """Append source text, re-indenting continuation lines; returns the last line's indent."""
        position = start
        for i, segment in enumerate(self.source[start:end].split(b"\n")):
            if i:
                newline = position - 1
                if any(lo <= newline < hi for lo, hi in literals):
                    parts.append(literalline)
                    line_indent = 0
                else:
                    strip = 0
                    while strip < len(segment) and strip < base and segment[strip] in b" \t":
                        strip += 1
                    parts.append(hardline)
                    segment = segment[strip:]
                    line_indent = len(segment) - len(segment.lstrip(b" \t"))
                    position += strip
            if segment:
                parts.append(segment.decode("utf-8"))
            position += len(segment) + 1
        return line_indent

    def _rstrip(self, start: int, end: int) -> int:
        while end > start and self.source[end - 1] in b" \t\n":
            end -= 1
        return end
