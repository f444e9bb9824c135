from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

@dataclass
class FormatterConfig:
    indent_size: int = 2
    line_length: int = 80
    use_tabs: bool = False
    enforce_blank_lines: bool = True

    @property
    def indent_unit(self) -> str:
        return "\t" if self.use_tabs else " " * self.indent_size

@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: List[str] = field(default_factory=list)
    file_path: str = ""

@dataclass
class FormatResults:
    results: List[FormatResult]
    total_files: int
    modified_files: int
    error_files: int

class StatementKind(Enum):
    IMPORT = "import"
    EXPORT = "export"
    TOP_LEVEL_DECLARATION = "declaration"
    VARIABLE_DECLARATION = "variable"
    BLOCK_FORM = "block"
    RETURN_LIKE = "return"
    EMPTY = "empty"
    OTHER = "other"

@dataclass(frozen=True)
class DeclaratorShape:
    destructuring: bool = False
    function_valued: bool = False

@dataclass(frozen=True)
class StatementTags:
    """Classification of one statement; everything the blank-line rules look at."""
    kind: StatementKind
    declaration_keyword: Optional[str] = None
    declarators: Tuple[DeclaratorShape, ...] = ()
    node_type: str = ""

    @property
    def is_import_export(self) -> bool:
        return self.kind in (StatementKind.IMPORT, StatementKind.EXPORT)

    @property
    def is_top_level_declaration(self) -> bool:
        return self.kind is StatementKind.TOP_LEVEL_DECLARATION

    @property
    def is_variable_declaration(self) -> bool:
        return self.kind is StatementKind.VARIABLE_DECLARATION

    @property
    def is_destructuring(self) -> bool:
        return self.is_variable_declaration and any(d.destructuring for d in self.declarators)

    @property
    def is_function_valued(self) -> bool:
        return self.is_variable_declaration and any(d.function_valued for d in self.declarators)

    @property
    def is_block_form(self) -> bool:
        return self.kind is StatementKind.BLOCK_FORM

    @property
    def is_return_like(self) -> bool:
        return self.kind is StatementKind.RETURN_LIKE

    @property
    def is_empty(self) -> bool:
        return self.kind is StatementKind.EMPTY

    @property
    def is_paragraph(self) -> bool:
        return self.is_top_level_declaration or self.is_block_form or self.is_function_valued

    def describe(self) -> str:
        """Short human-readable tag list, used by the classify command."""
        tags = [self.kind.value]
        if self.declaration_keyword:
            tags.append(self.declaration_keyword)
        if self.is_destructuring:
            tags.append("destructuring")
        if self.is_function_valued:
            tags.append("function-valued")
        if self.is_paragraph:
            tags.append("paragraph")
        return ",".join(tags)
