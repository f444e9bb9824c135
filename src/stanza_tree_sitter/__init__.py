from .ast_walker import ASTWalker
from .js_patterns import JSPatterns
from .node_types import ParseResult
from .parser import DIALECTS, JSParser, dialect_for_path

__all__ = ["ASTWalker", "JSPatterns", "JSParser", "ParseResult", "DIALECTS", "dialect_for_path"]
