import pytest
from stanza_formatter.engine import FormatterEngine
from stanza_formatter.models import FormatterConfig


def format_source(source, **config_values):
    config = FormatterConfig(**config_values)
    engine = FormatterEngine(config)
    result = engine.format_string(source)
    assert not result.errors, result.errors
    return result.source


def test_declarations_grouped_by_keyword():
    source = "const a = 1; const b = 2; let c = 3;"
    expected = "const a = 1;\nconst b = 2;\n\nlet c = 3;\n"
    assert format_source(source) == expected


def test_imports_separated_from_code():
    source = 'import a from "a";\nimport b from "b";\nconst x = a + b;\n'
    expected = 'import a from "a";\nimport b from "b";\n\nconst x = a + b;\n'
    assert format_source(source) == expected


def test_function_body_paragraphs():
    source = "function f(x) {\n  if (x) { g(); } return y;\n}"
    expected = "function f(x) {\n  if (x) {\n    g();\n  }\n\n  return y;\n}\n"
    assert format_source(source) == expected


def test_declaration_before_return_stays_attached():
    source = "function f() {\n  const a = 1;\n  return a;\n}\n"
    assert format_source(source) == source


def test_function_declarations_separated():
    source = "function a() {}\nfunction b() {}\n"
    expected = "function a() {}\n\nfunction b() {}\n"
    assert format_source(source) == expected


def test_function_valued_declaration_is_own_paragraph():
    source = "const a = 1;\nconst f = () => a;\nconst b = 2;\n"
    expected = "const a = 1;\n\nconst f = () => a;\n\nconst b = 2;\n"
    assert format_source(source) == expected


def test_destructuring_is_own_block():
    source = "const a = 1;\nconst { b } = o;\nfoo();\n"
    expected = "const a = 1;\n\nconst { b } = o;\n\nfoo();\n"
    assert format_source(source) == expected


def test_existing_blank_lines_preserved_and_collapsed():
    source = "a();\n\n\n\nb();\nc();\n"
    expected = "a();\n\nb();\nc();\n"
    assert format_source(source) == expected


def test_empty_statements_removed():
    assert format_source("a();;\nb();") == "a();\nb();\n"
    assert format_source("a();\n;\n;\nb();") == "a();\nb();\n"


def test_blank_line_after_empty_statements_kept():
    assert format_source("a();\n;\n;\n\nb();") == "a();\n\nb();\n"


def test_comments_attached_to_statements():
    source = '// header\nimport a from "a";\nconst x = 1; // trailing\n/* lead */ foo();\n// dangling\n'
    expected = '// header\nimport a from "a";\n\nconst x = 1; // trailing\n\n/* lead */ foo();\n// dangling\n'
    assert format_source(source) == expected


def test_switch_case_bodies_are_sequences():
    source = "switch (x) {\n  case 1:\n    const y = 2;\n    f(y);\n    break;\n  default:\n    g();\n}\n"
    expected = "switch (x) {\n  case 1:\n    const y = 2;\n\n    f(y);\n    break;\n  default:\n    g();\n}\n"
    assert format_source(source) == expected


def test_nested_method_block_aligned():
    source = "const o = {\n  m() {\n    a();\n  },\n};\n"
    assert format_source(source) == source


def test_continuation_lines_reindented():
    source = "if (a) {\n      foo(1,\n        2);\n}\n"
    expected = "if (a) {\n  foo(1,\n    2);\n}\n"
    assert format_source(source) == expected


def test_template_literal_content_untouched():
    source = "function f() {\n    const s = `x\n    y`;\n}\n"
    expected = "function f() {\n  const s = `x\n    y`;\n}\n"
    assert format_source(source) == expected


def test_indent_size_option():
    source = "if (a) {\n  b();\n}\n"
    assert format_source(source, indent_size=4) == "if (a) {\n    b();\n}\n"
    assert format_source(source, use_tabs=True) == "if (a) {\n\tb();\n}\n"


def test_enforcement_disabled_keeps_source_gaps_only():
    source = "const a = 1;\nlet b = 2;\nfoo();\n"
    assert format_source(source, enforce_blank_lines=False) == source


def test_hash_bang_kept():
    source = "#!/usr/bin/env node\nconst a = 1;\nfoo();\n"
    expected = "#!/usr/bin/env node\nconst a = 1;\n\nfoo();\n"
    assert format_source(source) == expected


def test_empty_source():
    assert format_source("") == ""


def test_empty_block():
    assert format_source("if (a) {\n}\n") == "if (a) {}\n"


def test_idempotent():
    source = 'import a from "a";\nconst b = 1; let c = 2;\nif (b) { c(); } else { d(); }\ne();'
    once = format_source(source)
    assert format_source(once) == once


def test_crlf_normalized():
    engine = FormatterEngine(FormatterConfig())
    result = engine.format_string("a();\r\nb();\r\n")
    assert result.source == "a();\nb();\n"
    assert result.modified


def test_unchanged_source_not_modified():
    engine = FormatterEngine(FormatterConfig())
    result = engine.format_string("a();\nb();\n")
    assert not result.modified


def test_syntax_error_leaves_source_untouched():
    engine = FormatterEngine(FormatterConfig())
    source = "const = ;\nfoo(\n"
    result = engine.format_string(source)
    assert result.errors
    assert result.source == source
    assert not result.modified
    assert "syntax error" in result.errors[0]


def test_typescript_dialect_from_path():
    engine = FormatterEngine(FormatterConfig())
    result = engine.format_string("interface A {}\ntype B = A;\n", file_path="types.ts")
    assert result.source == "interface A {}\n\ntype B = A;\n"


def test_tsx_dialect_from_path():
    engine = FormatterEngine(FormatterConfig())
    result = engine.format_string("const a = <div />;\nrender(a);\n", file_path="view.tsx")
    assert not result.errors
    assert result.source == "const a = <div />;\n\nrender(a);\n"


def test_format_files_writes_changes(tmp_path):
    changed = tmp_path / "changed.js"
    changed.write_text("const a = 1;\nfoo();\n")
    same = tmp_path / "same.js"
    same.write_text("foo();\n")

    engine = FormatterEngine(FormatterConfig())
    results = engine.format_files([changed, same])

    assert results.total_files == 2
    assert results.modified_files == 1
    assert results.error_files == 0
    assert changed.read_text() == "const a = 1;\n\nfoo();\n"


def test_format_files_dry_run(tmp_path):
    path = tmp_path / "a.js"
    path.write_text("const a = 1;\nfoo();\n")

    results = FormatterEngine(FormatterConfig()).format_files([path], write=False)

    assert results.modified_files == 1
    assert path.read_text() == "const a = 1;\nfoo();\n"


def test_format_files_counts_errors(tmp_path):
    broken = tmp_path / "broken.js"
    broken.write_text("function (\n")
    missing = tmp_path / "missing.js"

    results = FormatterEngine(FormatterConfig()).format_files([broken, missing])

    assert results.error_files == 2
    assert broken.read_text() == "function (\n"


@pytest.mark.parametrize("keyword", ["var", "let", "const"])
def test_keyword_runs(keyword):
    source = f"{keyword} a = 1;\n{keyword} b = 2;\n"
    assert format_source(source) == source


def test_single_empty_statement_before_blank_line():
    assert format_source("a();\n;\n\nb();") == "a();\n\nb();\n"


def test_directive_prologue_keeps_source_spacing():
    assert format_source('"use strict";\nconst a = 1;\n') == '"use strict";\nconst a = 1;\n'
    assert format_source('"use strict";\n\nfoo();\n') == '"use strict";\n\nfoo();\n'


def test_multiple_directives():
    source = '"use strict";\n"use asm";\nconst a = 1;\n'
    assert format_source(source) == source


def test_function_directive_prologue():
    source = 'function f() {\n  "use strict";\n  let x = 1;\n  return x;\n}\n'
    assert format_source(source) == source


def test_arrow_function_directive_prologue():
    source = 'const f = () => {\n  "use strict";\n  const a = 1;\n  return a;\n};\n'
    assert format_source(source) == source


def test_directive_with_comments():
    source = '// header\n"use strict"; // strict\nconst a = 1;\n'
    assert format_source(source) == source


def test_string_statement_after_code_is_not_a_directive():
    source = 'foo();\n"bar";\nconst a = 1;\n'
    expected = 'foo();\n"bar";\n\nconst a = 1;\n'
    assert format_source(source) == expected
