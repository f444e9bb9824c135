from tree_sitter import Node
from typing import Optional, List


class ASTWalker:
    """Utilities for traversing and searching the JavaScript AST"""

    @staticmethod
    def get_text(node: Node, source: bytes | str) -> str:
        """Get the source text of a node"""
        if isinstance(source, str):
            source = source.encode("utf-8")
        return source[node.start_byte : node.end_byte].decode("utf-8")

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def named_children_without_comments(node: Node) -> List[Node]:
        """Named children of a node, skipping comment extras"""
        return [child for child in node.named_children if child.type != "comment"]

    @staticmethod
    def comments_between(node: Node, start_byte: int, end_byte: int) -> List[Node]:
        """Direct comment children of a node lying inside a byte range"""
        return [
            child
            for child in node.children
            if child.type == "comment" and child.start_byte >= start_byte and child.end_byte <= end_byte
        ]
