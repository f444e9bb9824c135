import difflib
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from stanza_formatter.engine import FormatterEngine
from stanza_formatter.rules import classify as classify_statement
from stanza_formatter.sequence import SequenceEmitter
from stanza_tree_sitter import JSParser, JSPatterns, dialect_for_path
from stanza_tree_sitter.text_utils import has_blank_line_after

from .config import FormatConfig
from .converters import format_results_to_report

app = typer.Typer(help="stanza - paragraph-aware statement layout for JavaScript and TypeScript")

SOURCE_SUFFIXES = (".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx", ".mts", ".cts")


def _collect_files(paths: list[Path]) -> tuple[list[Path], list[Path]]:
    """Expand directories to the source files below them; returns (files, missing)."""
    files: list[Path] = []
    missing: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob("*") if p.suffix in SOURCE_SUFFIXES and p.is_file()))
        elif path.exists():
            files.append(path)
        else:
            missing.append(path)
    return files, missing


def _unified_diff(path: Path, formatted: str) -> str:
    original = path.read_text(encoding="utf-8")
    return "".join(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            formatted.splitlines(keepends=True),
            fromfile=f"{path} (original)",
            tofile=f"{path} (formatted)",
        )
    )


def _echo_separator(separator, following: list, source: bytes):
    if separator.last:
        # The prologue keeps only the source gap before the body
        decision = ("gap" if has_blank_line_after(separator.node, source) else "-") if following else ""
    elif separator.enforced:
        decision = "blank"
    else:
        decision = "gap" if separator.gap else "-"
    row = separator.node.start_point[0] + 1
    typer.echo(f"{row:>5}  {separator.node.type:<32} {separator.tags.describe():<40} {decision}".rstrip())


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """Configure logging for all commands"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("format")
def format_files(
    files: list[Path] = typer.Argument(..., help="Files or directories to format"),
    check: bool = typer.Option(False, help="Only report files that would be reformatted"),
    diff: bool = typer.Option(False, help="Print a unified diff instead of writing files"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    config_file: Path = typer.Option(Path(".stanza.toml"), help="Path to config file"),
    indent_size: Optional[int] = typer.Option(None, help="Spaces per indentation level"),
    line_length: Optional[int] = typer.Option(None, help="Preferred maximum line width"),
    enforce: Optional[bool] = typer.Option(None, "--enforce/--no-enforce", help="Add blank lines between paragraphs"),
):
    """Re-print statement layout of JavaScript/TypeScript files"""
    config = FormatConfig(config_file)
    try:
        config.override(indent_size=indent_size, line_length=line_length, enforce_blank_lines=enforce)
    except ValidationError as e:
        typer.echo(f"Error: invalid option: {e}")
        raise typer.Exit(code=2)

    paths, missing = _collect_files(files)
    for path in missing:
        typer.echo(f"Error: {path} does not exist")
    if missing:
        raise typer.Exit(code=2)

    engine = FormatterEngine(config.to_formatter_config())
    results = engine.format_files(paths, write=not (check or diff))

    diffs: dict[str, str] = {}
    if diff:
        for result in results.results:
            if result.modified and not result.errors:
                diffs[result.file_path] = _unified_diff(Path(result.file_path), result.source)

    if json_output:
        report = format_results_to_report(results, check=check or diff, diffs=diffs)
        typer.echo(report.model_dump_json(indent=2))
    else:
        for result in results.results:
            if result.errors:
                typer.echo(f"error: {result.file_path}: {result.errors[0].splitlines()[0]}")
            elif result.modified and diff:
                typer.echo(diffs[result.file_path], nl=False)
            elif result.modified:
                typer.echo(f"{'would reformat' if check else 'reformatted'} {result.file_path}")
        unchanged = results.total_files - results.modified_files - results.error_files
        verb = "would be reformatted" if check or diff else "reformatted"
        typer.echo(
            f"\n{results.modified_files} file(s) {verb}, {unchanged} unchanged, {results.error_files} error(s)"
        )

    if results.error_files or (check and results.modified_files):
        raise typer.Exit(code=1)


@app.command()
def classify(file: Path = typer.Argument(..., help="File to inspect")):
    """Show how top-level statements are classified and separated"""
    if not file.exists():
        typer.echo(f"Error: {file} does not exist")
        raise typer.Exit(code=2)

    result = JSParser(dialect_for_path(file)).parse_file(file)
    for error in result.errors:
        typer.echo(f"warning: {file}:{error}")

    source = result.source
    statements = [node for node in JSPatterns.statement_children(result.tree.root_node) if node.type != "comment"]
    emitter = SequenceEmitter(
        print_statement=lambda node: "",
        has_blank_line_after=lambda node: has_blank_line_after(node, source),
        classify=lambda node: classify_statement(node, source),
    )
    directives, rest = JSPatterns.split_directives(statements)
    for group, following in ((directives, rest), (rest, [])):
        for separator in emitter.plan(group):
            _echo_separator(separator, following, source)


if __name__ == "__main__":
    app()
