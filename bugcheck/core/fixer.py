"""
Apply issue suggestions back into source text.

Suggestions are whole-line replacements keyed by 1-based line number. They
are applied from the highest line to the lowest, and a line that no longer
exists is skipped because the text may have changed since the analysis.
"""

from collections.abc import Iterable

from .base_analyzer import Issue
from .error_handler import ErrorHandler

error_handler = ErrorHandler("bugcheck.fixer")


def _fixable(issues: Iterable[Issue]) -> list[Issue]:
    return [issue for issue in issues if issue.suggestion]


def _replace_line(lines: list[str], issue: Issue) -> bool:
    if not 1 <= issue.line <= len(lines):
        error_handler.logger.debug(
            "Skipping fix for line %s: text has %s lines", issue.line, len(lines)
        )
        return False
    lines[issue.line - 1] = issue.suggestion
    return True


def apply_fixes(source_text: str, issues: Iterable[Issue]) -> str:
    """Replace every referenced line with its issue's suggestion."""
    fixable = sorted(_fixable(issues), key=lambda issue: issue.line, reverse=True)
    if not fixable:
        return source_text

    lines = source_text.split("\n")
    applied = sum(1 for issue in fixable if _replace_line(lines, issue))
    error_handler.logger.debug("Applied %s of %s fixes", applied, len(fixable))
    return "\n".join(lines)


def apply_single_fix(source_text: str, issue: Issue) -> str:
    """Apply one issue's suggestion; text without a fix comes back unchanged."""
    if not issue.suggestion:
        return source_text

    lines = source_text.split("\n")
    if not _replace_line(lines, issue):
        return source_text
    return "\n".join(lines)


def count_applicable_fixes(source_text: str, issues: Iterable[Issue]) -> int:
    """Number of suggestions that ``apply_fixes`` would actually write."""
    line_count = source_text.count("\n") + 1
    return sum(1 for issue in _fixable(issues) if 1 <= issue.line <= line_count)
