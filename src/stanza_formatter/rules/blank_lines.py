from ..models import StatementTags


def same_declaration_block(current: StatementTags, following: StatementTags) -> bool:
    """Adjacent simple declarations with one keyword read as a single paragraph."""
    if not current.is_variable_declaration or not following.is_variable_declaration:
        return False
    if current.is_destructuring or following.is_destructuring:
        return False
    if current.declaration_keyword != following.declaration_keyword:
        return False
    return not (current.is_function_valued or following.is_function_valued)


def requires_blank(current: StatementTags, following: StatementTags) -> bool:
    """Whether a blank line must separate two adjacent statements.

    Rules are checked in order and the first one that applies decides.
    """
    # Imports/exports end with a blank line, but never get one inside the group
    if current.is_import_export:
        return not following.is_import_export

    if same_declaration_block(current, following):
        return False

    # A declaration block is closed by a blank line, unless a return finishes the thought
    if current.is_variable_declaration and not following.is_return_like:
        return True

    if following.is_variable_declaration and not current.is_variable_declaration:
        return True

    return current.is_paragraph or following.is_paragraph
