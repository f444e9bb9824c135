import logging
import traceback
from pathlib import Path
from typing import List, Union

from stanza_tree_sitter import JSParser, dialect_for_path
from .doc import print_doc
from .models import FormatResult, FormatResults, FormatterConfig
from .printer import StatementPrinter

logger = logging.getLogger(__name__)


class FormatterEngine:
    """Core engine for re-printing JavaScript/TypeScript statement layout."""

    def __init__(self, config: FormatterConfig):
        self.config = config
        self._parsers = {}

    def parser_for(self, file_path: str = "") -> JSParser:
        dialect = dialect_for_path(file_path) if file_path else "javascript"
        if dialect not in self._parsers:
            self._parsers[dialect] = JSParser(dialect)
        return self._parsers[dialect]

    def format_string(self, source: str, file_path: str = "") -> FormatResult:
        """Formats a source string; syntax errors leave it untouched."""
        original = source
        source = source.replace("\r\n", "\n")

        try:
            parse_result = self.parser_for(file_path).parse_string(source)
            if parse_result.has_errors:
                logger.warning("Skipping %s: %d syntax error(s)", file_path or "<string>", len(parse_result.errors))
                return FormatResult(source=original, modified=False, errors=parse_result.errors, file_path=file_path)

            printer = StatementPrinter(parse_result.source, self.config)
            doc = printer.print_program(parse_result.tree.root_node)
            formatted = print_doc(doc, self.config.line_length, self.config.indent_unit)
        except Exception as e:
            logger.debug("Formatting %s failed", file_path or "<string>", exc_info=True)
            return FormatResult(
                source=original,
                modified=False,
                errors=[f"{str(e)}\n{traceback.format_exc()}"],
                file_path=file_path,
            )

        modified = formatted != original
        logger.debug("Formatted %s (modified=%s)", file_path or "<string>", modified)
        return FormatResult(source=formatted, modified=modified, file_path=file_path)

    def format_files(self, files: List[Union[str, Path]], write: bool = True) -> FormatResults:
        """Batch format multiple files on disk."""
        results = []; modified_count = 0; error_count = 0
        for file_path in files:
            file_path = Path(file_path)
            try:
                source = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Cannot read %s: %s", file_path, e)
                results.append(FormatResult(source="", modified=False, errors=[str(e)], file_path=str(file_path)))
                error_count += 1
                continue

            result = self.format_string(source, str(file_path))
            results.append(result)
            if result.errors:
                error_count += 1
            elif result.modified:
                modified_count += 1
                if write:
                    file_path.write_text(result.source, encoding="utf-8")
        return FormatResults(results=results, total_files=len(files), modified_files=modified_count, error_files=error_count)
