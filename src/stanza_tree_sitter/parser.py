from pathlib import Path
from typing import Dict, List

import tree_sitter_javascript as tsjs
import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from .node_types import ParseResult

DIALECTS = ("javascript", "typescript", "tsx")

_SUFFIX_DIALECTS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


def dialect_for_path(path: str | Path) -> str:
    """Pick the grammar for a file from its suffix; unknown suffixes are JavaScript"""
    return _SUFFIX_DIALECTS.get(Path(path).suffix.lower(), "javascript")


class JSParser:
    """Thin wrapper over tree-sitter for the JavaScript family of grammars"""

    _languages: Dict[str, Language] = {}

    def __init__(self, dialect: str = "javascript"):
        if dialect not in DIALECTS:
            raise ValueError(f"Unknown dialect '{dialect}', expected one of {', '.join(DIALECTS)}")
        self.dialect = dialect
        self.language = self._load_language(dialect)
        self.parser = Parser(self.language)

    @classmethod
    def _load_language(cls, dialect: str) -> Language:
        if dialect not in cls._languages:
            if dialect == "typescript":
                capsule = tsts.language_typescript()
            elif dialect == "tsx":
                capsule = tsts.language_tsx()
            else:
                capsule = tsjs.language()
            cls._languages[dialect] = Language(capsule)
        return cls._languages[dialect]

    def parse_string(self, source: str | bytes) -> ParseResult:
        if isinstance(source, str):
            source = source.encode("utf-8")
        tree = self.parser.parse(source)
        errors = self._collect_errors(tree.root_node, source)
        return ParseResult(tree=tree, source=source, errors=errors)

    def parse_file(self, file_path: Path) -> ParseResult:
        return self.parse_string(Path(file_path).read_bytes())

    def _collect_errors(self, root: Node, source: bytes) -> List[str]:
        errors: List[str] = []
        if not root.has_error:
            return errors

        def visit(node: Node):
            if node.type == "ERROR" or node.is_missing:
                row, col = node.start_point
                snippet = source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
                snippet = snippet.strip().splitlines()[0][:30] if snippet.strip() else node.type
                errors.append(f"{row + 1}:{col + 1}: syntax error near '{snippet}'")
                return
            if node.has_error:
                for child in node.children:
                    visit(child)

        visit(root)
        return errors
