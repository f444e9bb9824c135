"""Statement sequence printing.

Used for every statement container: program, block bodies, class static
blocks, namespace bodies and each switch case.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Sequence

from .doc import Doc, hardline
from .models import StatementTags
from .rules.blank_lines import requires_blank


def is_empty_statement(node: Any) -> bool:
    return node.type == "empty_statement"


@dataclass
class Separator:
    """What follows a printed statement: always a line break, sometimes a blank line."""
    node: Any
    tags: StatementTags
    gap: bool = False
    enforced: bool = False
    last: bool = False

    @property
    def blank(self) -> bool:
        return not self.last and (self.gap or self.enforced)


class SequenceEmitter:
    """Prints a statement list, deciding the blank lines between statements."""

    def __init__(
        self,
        print_statement: Callable[[Any], Doc],
        has_blank_line_after: Callable[[Any], bool],
        classify: Callable[[Any], StatementTags],
        is_empty: Callable[[Any], bool] = is_empty_statement,
        enforce_blank_lines: bool = True,
    ):
        self.print_statement = print_statement
        self.has_blank_line_after = has_blank_line_after
        self.classify = classify
        self.is_empty = is_empty
        self.enforce_blank_lines = enforce_blank_lines

    def plan(self, statements: Sequence[Any]) -> List[Separator]:
        """Separator decisions for the non-empty statements, in order."""
        kept = [i for i, node in enumerate(statements) if not self.is_empty(node)]
        tags = [self.classify(statements[i]) for i in kept]
        separators = []
        for position, index in enumerate(kept):
            separator = Separator(node=statements[index], tags=tags[position])
            if position == len(kept) - 1:
                separator.last = True
            else:
                following = kept[position + 1]
                # Empty statements between the pair still report source blank lines
                separator.gap = any(self.has_blank_line_after(statements[i]) for i in range(index, following))
                if self.enforce_blank_lines:
                    separator.enforced = requires_blank(tags[position], tags[position + 1])
            separators.append(separator)
        return separators

    def emit(self, statements: Sequence[Any]) -> List[Doc]:
        parts: List[Doc] = []
        for separator in self.plan(statements):
            parts.append(self.print_statement(separator.node))
            if separator.last:
                break
            parts.append(hardline)
            if separator.blank:
                parts.append(hardline)
        return parts


def print_statement_sequence(
    statements: Sequence[Any],
    print_statement: Callable[[Any], Doc],
    has_blank_line_after: Callable[[Any], bool],
    classify: Callable[[Any], StatementTags],
    enforce: bool = True,
) -> List[Doc]:
    """One-shot form of ``SequenceEmitter(...).emit(statements)``."""
    emitter = SequenceEmitter(print_statement, has_blank_line_after, classify, enforce_blank_lines=enforce)
    return emitter.emit(statements)
