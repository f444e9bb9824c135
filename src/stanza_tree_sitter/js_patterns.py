"""JavaScript/TypeScript-specific AST pattern recognition."""

from typing import List, Optional, Sequence, Tuple

from tree_sitter import Node

from .ast_walker import ASTWalker

DESTRUCTURING_PATTERNS = ("object_pattern", "array_pattern")

FUNCTION_VALUES = ("function_expression", "function", "arrow_function", "generator_function")

# Nodes whose body may open with a directive prologue ("use strict";)
DIRECTIVE_OWNERS = (
    "program",
    "function_declaration",
    "generator_function_declaration",
    "function_expression",
    "function",
    "generator_function",
    "arrow_function",
    "method_definition",
)


class JSPatterns:
    """Recognize JavaScript-family patterns in the AST."""

    @staticmethod
    def declaration_keyword(node: Node, source: bytes | str) -> Optional[str]:
        """Binding keyword of a variable declaration: var, let, const, using or await using."""
        if node.type == "variable_declaration":
            return "var"
        if node.type == "lexical_declaration":
            kind = node.child_by_field_name("kind")
            if kind is not None:
                return ASTWalker.get_text(kind, source)
            first = node.children[0] if node.children else None
            return ASTWalker.get_text(first, source) if first is not None else None
        if node.type == "using_declaration":
            keywords = []
            for child in node.children:
                if child.is_named:
                    break
                keywords.append(ASTWalker.get_text(child, source))
            return " ".join(keywords) or "using"
        return None

    @staticmethod
    def declarators(node: Node) -> List[Node]:
        """Declarator children of a variable declaration, in source order."""
        return [child for child in node.named_children if child.type == "variable_declarator"]

    @staticmethod
    def is_destructuring_declarator(declarator: Node) -> bool:
        name = declarator.child_by_field_name("name")
        return name is not None and name.type in DESTRUCTURING_PATTERNS

    @staticmethod
    def is_function_valued_declarator(declarator: Node) -> bool:
        value = declarator.child_by_field_name("value")
        return value is not None and value.type in FUNCTION_VALUES

    @staticmethod
    def unwrap_ambient(node: Node) -> Optional[Node]:
        """The declaration wrapped by ``declare ...``; None for ``declare global {}``."""
        if node.type != "ambient_declaration":
            return node
        inner = ASTWalker.named_children_without_comments(node)
        if not inner or inner[0].type == "statement_block":
            return None
        return inner[0]

    @staticmethod
    def is_namespace_statement(node: Node) -> bool:
        """tree-sitter wraps ``namespace X {}`` in an expression statement."""
        if node.type != "expression_statement":
            return False
        inner = ASTWalker.named_children_without_comments(node)
        return len(inner) == 1 and inner[0].type == "internal_module"

    @staticmethod
    def statement_children(node: Node) -> List[Node]:
        """Children of a statement container that sit in statement position.

        Covers program, statement_block and switch case/default bodies;
        comments are included, punctuation is not.
        """
        if node.type in ("switch_case", "switch_default"):
            colon_seen = False
            children = []
            for child in node.children:
                if colon_seen and child.is_named:
                    children.append(child)
                elif child.type == ":":
                    colon_seen = True
            return children
        return [child for child in node.named_children if child.type != "hash_bang_line"]

    @staticmethod
    def is_directive(node: Node) -> bool:
        """An expression statement made of a bare string literal."""
        if node.type != "expression_statement":
            return False
        inner = ASTWalker.named_children_without_comments(node)
        return len(inner) == 1 and inner[0].type == "string"

    @staticmethod
    def split_directives(children: Sequence[Node]) -> Tuple[List[Node], List[Node]]:
        """Split statement children into the directive prologue and the rest.

        Comments before or between directives belong to the prologue, as do
        comments on the last directive's row.
        """
        end = 0
        last = None
        for i, child in enumerate(children):
            if child.type == "comment":
                continue
            if not JSPatterns.is_directive(child):
                break
            end = i + 1
            last = child
        if last is None:
            return [], list(children)
        while end < len(children) and children[end].type == "comment" and children[end].start_point[0] == last.end_point[0]:
            end += 1
        return list(children[:end]), list(children[end:])
