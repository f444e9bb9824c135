from .engine import FormatterEngine
from .models import FormatResult, FormatResults, FormatterConfig, StatementKind, StatementTags
from .sequence import SequenceEmitter, print_statement_sequence

__all__ = [
    "FormatterEngine",
    "FormatterConfig",
    "FormatResult",
    "FormatResults",
    "SequenceEmitter",
    "StatementKind",
    "StatementTags",
    "print_statement_sequence",
]
