from dataclasses import dataclass
from typing import List
from tree_sitter import Tree

@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""
    tree: Tree
    source: bytes
    errors: List[str]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
