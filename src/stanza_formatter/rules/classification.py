from tree_sitter import Node
from stanza_tree_sitter import JSPatterns
from ..models import DeclaratorShape, StatementKind, StatementTags

IMPORT_TYPES = frozenset({"import_statement", "import_alias"})

EXPORT_TYPES = frozenset({"export_statement"})

TOP_LEVEL_DECLARATION_TYPES = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "class_declaration",
    "abstract_class_declaration",
    "interface_declaration",
    "type_alias_declaration",
    "enum_declaration",
    "module",
    "internal_module",
    "function_signature",
})

VARIABLE_DECLARATION_TYPES = frozenset({"lexical_declaration", "variable_declaration", "using_declaration"})

BLOCK_FORM_TYPES = frozenset({
    "if_statement",
    "for_statement",
    "for_in_statement",
    "while_statement",
    "do_statement",
    "try_statement",
    "switch_statement",
    "with_statement",
    "statement_block",
    "labeled_statement",
})

_KIND_BY_TYPE = {}
for _types, _kind in (
    (IMPORT_TYPES, StatementKind.IMPORT),
    (EXPORT_TYPES, StatementKind.EXPORT),
    (TOP_LEVEL_DECLARATION_TYPES, StatementKind.TOP_LEVEL_DECLARATION),
    (VARIABLE_DECLARATION_TYPES, StatementKind.VARIABLE_DECLARATION),
    (BLOCK_FORM_TYPES, StatementKind.BLOCK_FORM),
):
    for _type in _types:
        _KIND_BY_TYPE[_type] = _kind
_KIND_BY_TYPE["return_statement"] = StatementKind.RETURN_LIKE
_KIND_BY_TYPE["empty_statement"] = StatementKind.EMPTY


def classify(node: Node, source: bytes) -> StatementTags:
    """Map a statement node to its tags. Unknown node types are OTHER."""
    target = node
    if node.type == "ambient_declaration":
        target = JSPatterns.unwrap_ambient(node)
        # declare global { ... }
        if target is None:
            return StatementTags(StatementKind.TOP_LEVEL_DECLARATION, node_type=node.type)
    elif JSPatterns.is_namespace_statement(node):
        return StatementTags(StatementKind.TOP_LEVEL_DECLARATION, node_type=node.type)

    kind = _KIND_BY_TYPE.get(target.type, StatementKind.OTHER)
    if kind is not StatementKind.VARIABLE_DECLARATION:
        return StatementTags(kind, node_type=node.type)

    shapes = tuple(
        DeclaratorShape(
            destructuring=JSPatterns.is_destructuring_declarator(declarator),
            function_valued=JSPatterns.is_function_valued_declarator(declarator),
        )
        for declarator in JSPatterns.declarators(target)
    )
    return StatementTags(
        kind,
        declaration_keyword=JSPatterns.declaration_keyword(target, source),
        declarators=shapes,
        node_type=node.type,
    )
