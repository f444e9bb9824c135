from .classification import classify
from .blank_lines import requires_blank, same_declaration_block
from .clauses import (
    print_catch_clause,
    print_do_statement,
    print_else_clause,
    print_finally_clause,
    print_if_statement,
    print_try_statement,
)

__all__ = [
    "classify",
    "requires_blank",
    "same_declaration_block",
    "print_catch_clause",
    "print_do_statement",
    "print_else_clause",
    "print_finally_clause",
    "print_if_statement",
    "print_try_statement",
]
