#!/usr/bin/env python3
"""
Syntax and indentation detector.

Brace languages get a missing-semicolon heuristic; Python gets tab and
indentation-width checks. Both are line based and never parse the source.
"""

import re

from ..core.base_analyzer import (
    BRACE_LANGUAGES,
    BaseDetector,
    Issue,
    Language,
    Severity,
    SourceContext,
)

COMMENT_PREFIXES = ("//", "/*", "*", "#")
BLOCK_KEYWORD = re.compile(
    r"^(if|for|while|switch|else|do|try|catch|finally|class|function"
    r"|public|private|protected)\b"
)
STATEMENT_KEYWORD = re.compile(r"^(var|let|const|return|throw|break|continue)\b")
ASSIGNMENT = re.compile(r"^\w+\s*=")
CALL = re.compile(r"^\w+\(")
LEADING_WHITESPACE = re.compile(r"^\s*")


class SyntaxAnalyzer(BaseDetector):
    """Flags likely missing semicolons and bad Python indentation."""

    name = "syntax"
    languages = BRACE_LANGUAGES | {Language.PYTHON}

    def detect(self, context: SourceContext) -> list[Issue]:
        if context.language is Language.PYTHON:
            return self._check_indentation(context)
        return self._check_semicolons(context)

    def _check_semicolons(self, context: SourceContext) -> list[Issue]:
        issues = []
        for index, line in enumerate(context.lines):
            trimmed = line.strip()
            if not trimmed or trimmed.startswith(COMMENT_PREFIXES):
                continue
            if BLOCK_KEYWORD.match(trimmed):
                continue
            if trimmed.endswith(("{", "}", ";")):
                continue

            if self._looks_like_statement(trimmed):
                issues.append(
                    self.create_issue(
                        line=index + 1,
                        message="Missing semicolon at end of statement",
                        severity=Severity.WARNING,
                        issue_type="Syntax",
                        suggestion=line + ";",
                        rule_id="syntax-missing-semicolon",
                    )
                )
        return issues

    @staticmethod
    def _looks_like_statement(trimmed: str) -> bool:
        return bool(
            STATEMENT_KEYWORD.match(trimmed)
            or ASSIGNMENT.match(trimmed)
            or CALL.match(trimmed)
        )

    def _check_indentation(self, context: SourceContext) -> list[Issue]:
        issues = []
        tab_size = context.options.tab_size

        for index, line in enumerate(context.lines):
            leading = LEADING_WHITESPACE.match(line).group(0)
            if "\t" in leading:
                fixed = leading.replace("\t", " " * tab_size) + line[len(leading):]
                issues.append(
                    self.create_issue(
                        line=index + 1,
                        message="Use spaces instead of tabs for indentation",
                        severity=Severity.ERROR,
                        issue_type="Indentation",
                        suggestion=fixed,
                        rule_id="indent-tabs",
                    )
                )
            elif len(leading) % tab_size != 0 and line.strip():
                issues.append(
                    self.create_issue(
                        line=index + 1,
                        message=f"Indentation should be a multiple of {tab_size} spaces",
                        severity=Severity.WARNING,
                        issue_type="Indentation",
                        rule_id="indent-width",
                    )
                )
        return issues

    @staticmethod
    def get_rule_documentation() -> dict[str, str]:
        return {
            "syntax-missing-semicolon": "Statement line does not end with a semicolon",
            "indent-tabs": "Python indentation uses tab characters",
            "indent-width": "Python indentation is not a multiple of the tab size",
        }
