#!/usr/bin/env python3
"""
Unused variable detector for JavaScript.

A declared name that appears exactly once in the whole text (its own
declaration) is reported. There is no scope tracking: a name reused anywhere
else counts as used.
"""

import re
from dataclasses import dataclass

from ..core.base_analyzer import BaseDetector, Issue, Language, Severity, SourceContext

DECLARATION = re.compile(r"\b(var|let|const)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")


@dataclass
class Declaration:
    """A var/let/const binding and where it was found."""

    name: str
    position: int
    line: int


def _word_pattern(name: str) -> re.Pattern:
    # `$` is an identifier character in JavaScript, so \b alone is not enough
    return re.compile(r"(?<![\w$])" + re.escape(name) + r"(?![\w$])")


class UnusedVariableAnalyzer(BaseDetector):
    """Reports JavaScript declarations that are never referenced."""

    name = "unused_variables"
    languages = frozenset({Language.JAVASCRIPT})

    def detect(self, context: SourceContext) -> list[Issue]:
        issues = []
        for declaration in self._collect_declarations(context):
            occurrences = len(_word_pattern(declaration.name).findall(context.text))
            if occurrences == 1:
                issues.append(
                    self.create_issue(
                        line=declaration.line,
                        message=f"Variable '{declaration.name}' is declared but never used",
                        severity=Severity.WARNING,
                        issue_type="Unused Variable",
                        rule_id="unused-variable",
                    )
                )
        return issues

    @staticmethod
    def _collect_declarations(context: SourceContext) -> list[Declaration]:
        return [
            Declaration(
                name=match.group(2),
                position=match.start(),
                line=context.line_of(match.start()),
            )
            for match in DECLARATION.finditer(context.text)
        ]

    @staticmethod
    def get_rule_documentation() -> dict[str, str]:
        return {"unused-variable": "Variable is declared but its name never appears again"}
