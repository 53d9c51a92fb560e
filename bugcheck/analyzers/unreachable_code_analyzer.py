#!/usr/bin/env python3
"""
Unreachable code detector.

After a line containing return/throw/break/continue, the next substantive
line is reported once. Blank lines, line comments and lone closing brackets
are skipped.
"""

import re

from ..core.base_analyzer import BaseDetector, Issue, Severity, SourceContext

TERMINATOR = re.compile(r"\b(return|throw|break|continue)\b")
SKIPPABLE_LINES = frozenset({"}", ")"})
COMMENT_PREFIXES = ("//", "#")


class UnreachableCodeAnalyzer(BaseDetector):
    """Flags the first statement after a control-flow terminator."""

    name = "unreachable_code"

    def detect(self, context: SourceContext) -> list[Issue]:
        issues = []
        lines = context.lines

        for index, line in enumerate(lines):
            if not TERMINATOR.search(line.strip()):
                continue

            following = self._next_substantive_line(lines, index + 1)
            if following is None:
                continue
            issues.append(
                self.create_issue(
                    line=following + 1,
                    message="Code after return/throw/break statement is unreachable",
                    severity=Severity.WARNING,
                    issue_type="Unreachable Code",
                    rule_id="unreachable-code",
                )
            )
        return issues

    @staticmethod
    def _next_substantive_line(lines: tuple[str, ...], start: int) -> int | None:
        for index in range(start, len(lines)):
            candidate = lines[index].strip()
            if (
                not candidate
                or candidate.startswith(COMMENT_PREFIXES)
                or candidate in SKIPPABLE_LINES
            ):
                continue
            return index
        return None

    @staticmethod
    def get_rule_documentation() -> dict[str, str]:
        return {"unreachable-code": "Statement follows return, throw, break or continue"}
