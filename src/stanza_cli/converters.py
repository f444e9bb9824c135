from stanza_formatter.models import FormatResult, FormatResults

from .models import FileReport, FormatReport


def format_result_to_file_report(result: FormatResult, check: bool = False, diff: str | None = None) -> FileReport:
    """Convert an internal dataclass result to an external Pydantic report"""
    if result.errors:
        status = "error"
    elif result.modified:
        status = "would-reformat" if check else "reformatted"
    else:
        status = "unchanged"
    return FileReport(file_path=result.file_path, status=status, errors=list(result.errors), diff=diff)


def format_results_to_report(results: FormatResults, check: bool = False, diffs: dict[str, str] | None = None) -> FormatReport:
    diffs = diffs or {}
    files = [format_result_to_file_report(r, check, diffs.get(r.file_path)) for r in results.results]
    return FormatReport(
        files=files,
        total_files=results.total_files,
        changed_files=results.modified_files,
        error_files=results.error_files,
        check=check,
    )
