import pytest
from stanza_formatter.models import DeclaratorShape, StatementKind, StatementTags
from stanza_formatter.rules.blank_lines import requires_blank, same_declaration_block

SIMPLE = DeclaratorShape()
FUNCTION = DeclaratorShape(function_valued=True)
PATTERN = DeclaratorShape(destructuring=True)


def var(keyword="const", *declarators):
    return StatementTags(StatementKind.VARIABLE_DECLARATION, keyword, declarators or (SIMPLE,))


IMPORT = StatementTags(StatementKind.IMPORT)
EXPORT = StatementTags(StatementKind.EXPORT)
FUNC = StatementTags(StatementKind.TOP_LEVEL_DECLARATION)
BLOCK = StatementTags(StatementKind.BLOCK_FORM)
RETURN = StatementTags(StatementKind.RETURN_LIKE)
OTHER = StatementTags(StatementKind.OTHER)


@pytest.mark.parametrize("keyword", ["var", "let", "const"])
def test_same_keyword_simple_declarations_share_a_paragraph(keyword):
    assert same_declaration_block(var(keyword), var(keyword))
    assert requires_blank(var(keyword), var(keyword)) is False


def test_multiple_declarators_still_simple():
    assert requires_blank(var("let", SIMPLE, SIMPLE), var("let")) is False


def test_keyword_change_ends_declaration_block():
    assert requires_blank(var("const"), var("let")) is True


def test_destructuring_never_merges():
    assert requires_blank(var("const"), var("const", PATTERN)) is True
    assert requires_blank(var("const", SIMPLE, PATTERN), var("const")) is True


def test_function_valued_never_merges():
    assert same_declaration_block(var("const", FUNCTION), var("const")) is False
    assert requires_blank(var("const"), var("const", FUNCTION)) is True


def test_import_followed_by_code_gets_blank():
    for following in (var(), FUNC, BLOCK, RETURN, OTHER):
        assert requires_blank(IMPORT, following) is True
        assert requires_blank(EXPORT, following) is True


def test_imports_and_exports_stay_together():
    assert requires_blank(IMPORT, IMPORT) is False
    assert requires_blank(IMPORT, EXPORT) is False
    assert requires_blank(EXPORT, EXPORT) is False


def test_declaration_block_closed_by_blank():
    assert requires_blank(var(), OTHER) is True
    assert requires_blank(var(), BLOCK) is True


def test_declaration_followed_by_return_stays_attached():
    assert requires_blank(var(), RETURN) is False


def test_function_valued_declaration_before_return_is_a_paragraph():
    assert requires_blank(var("const", FUNCTION), RETURN) is True


def test_declaration_preceded_by_other_code():
    assert requires_blank(OTHER, var()) is True
    assert requires_blank(RETURN, var()) is True


def test_declaration_directly_after_import():
    # rule 1 already separates them
    assert requires_blank(IMPORT, var()) is True


def test_paragraph_statements_isolated():
    assert requires_blank(OTHER, BLOCK) is True
    assert requires_blank(BLOCK, OTHER) is True
    assert requires_blank(FUNC, FUNC) is True
    assert requires_blank(BLOCK, RETURN) is True
    assert requires_blank(OTHER, FUNC) is True


def test_plain_statements_no_blank():
    assert requires_blank(OTHER, OTHER) is False
    assert requires_blank(OTHER, RETURN) is False


def test_paragraph_predicate():
    assert FUNC.is_paragraph
    assert BLOCK.is_paragraph
    assert var("let", FUNCTION).is_paragraph
    assert not var("let").is_paragraph
    assert not RETURN.is_paragraph
