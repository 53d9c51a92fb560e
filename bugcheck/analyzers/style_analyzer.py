#!/usr/bin/env python3
"""
Best practice and style detector.

JavaScript gets strict-equality and var-declaration rules; every language
gets line length and trailing whitespace checks.
"""

import re

from ..core.base_analyzer import BaseDetector, Issue, Language, Severity, SourceContext

LOOSE_EQUALITY = re.compile(r"(?<![=!<>])==(?!=)")
LOOSE_INEQUALITY = re.compile(r"!=(?!=)")
VAR_DECLARATION = re.compile(r"\bvar\s+")
VAR_KEYWORD = re.compile(r"\bvar\b")
TRAILING_WHITESPACE = re.compile(r"\s+$")
MAX_LINE_LENGTH = 120


class StyleAnalyzer(BaseDetector):
    """Best-practice rewrites and formatting checks."""

    name = "style"

    def detect(self, context: SourceContext) -> list[Issue]:
        issues: list[Issue] = []
        if context.language is Language.JAVASCRIPT:
            issues.extend(self._check_equality(context))
            issues.extend(self._check_var(context))
        issues.extend(self._check_line_length(context))
        issues.extend(self._check_trailing_whitespace(context))
        return issues

    def _check_equality(self, context: SourceContext) -> list[Issue]:
        issues = []
        for index, line in enumerate(context.lines):
            loose_eq = LOOSE_EQUALITY.search(line)
            loose_ne = LOOSE_INEQUALITY.search(line)
            if not (loose_eq or loose_ne):
                continue

            strict, loose = ("===", "==") if loose_eq else ("!==", "!=")
            fixed = LOOSE_INEQUALITY.sub("!==", LOOSE_EQUALITY.sub("===", line))
            issues.append(
                self.create_issue(
                    line=index + 1,
                    message=f"Use {strict} instead of {loose} for comparison",
                    severity=Severity.INFO,
                    issue_type="Best Practice",
                    suggestion=fixed,
                    rule_id="js-strict-equality",
                )
            )
        return issues

    def _check_var(self, context: SourceContext) -> list[Issue]:
        return [
            self.create_issue(
                line=index + 1,
                message="Consider using const or let instead of var",
                severity=Severity.INFO,
                issue_type="Best Practice",
                suggestion=VAR_KEYWORD.sub("const", line, count=1),
                rule_id="js-no-var",
            )
            for index, line in enumerate(context.lines)
            if VAR_DECLARATION.search(line)
        ]

    def _check_line_length(self, context: SourceContext) -> list[Issue]:
        return [
            self.create_issue(
                line=index + 1,
                message=f"Line is too long ({len(line)} characters) - consider breaking it up",
                severity=Severity.INFO,
                issue_type="Code Style",
                rule_id="line-too-long",
            )
            for index, line in enumerate(context.lines)
            if len(line) > MAX_LINE_LENGTH
        ]

    def _check_trailing_whitespace(self, context: SourceContext) -> list[Issue]:
        return [
            self.create_issue(
                line=index + 1,
                message="Trailing whitespace detected",
                severity=Severity.INFO,
                issue_type="Formatting",
                suggestion=line.rstrip(),
                rule_id="trailing-whitespace",
            )
            for index, line in enumerate(context.lines)
            if TRAILING_WHITESPACE.search(line)
        ]

    @staticmethod
    def get_rule_documentation() -> dict[str, str]:
        return {
            "js-strict-equality": "Loose equality operator; prefer === and !==",
            "js-no-var": "var declaration; prefer const or let",
            "line-too-long": f"Line longer than {MAX_LINE_LENGTH} characters",
            "trailing-whitespace": "Whitespace at the end of a line",
        }
