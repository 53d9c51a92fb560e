#!/usr/bin/env python3
"""
Bracket matching detector.

Walks the scrubbed view of the source with a stack of open brackets so that
brackets inside strings and comments never count. Reports closers that do not
match the innermost opener and openers that are never closed.
"""

from dataclasses import dataclass

from ..core.base_analyzer import BaseDetector, Issue, Severity, SourceContext
from ..core.scrubber import comment_starts

PAIRS = {"(": ")", "[": "]", "{": "}"}
CLOSERS = {close: open_ for open_, close in PAIRS.items()}


@dataclass
class OpenBracket:
    """An opening bracket waiting for its partner."""

    char: str
    position: int


class BracketAnalyzer(BaseDetector):
    """Detects mismatched and unclosed brackets."""

    name = "brackets"

    def detect(self, context: SourceContext) -> list[Issue]:
        issues: list[Issue] = []
        stack: list[OpenBracket] = []

        for position, char in enumerate(context.scrubbed):
            if char in PAIRS:
                stack.append(OpenBracket(char, position))
            elif char in CLOSERS:
                if not stack or stack[-1].char != CLOSERS[char]:
                    issues.append(
                        self.create_issue(
                            line=context.line_of(position),
                            message=f"Unexpected closing bracket '{char}'",
                            severity=Severity.ERROR,
                            issue_type="Bracket Mismatch",
                            rule_id="bracket-unexpected-close",
                        )
                    )
                else:
                    stack.pop()

        for bracket in stack:
            line = context.line_of(bracket.position)
            closer = PAIRS[bracket.char]
            issues.append(
                self.create_issue(
                    line=line,
                    message=f"Unclosed bracket '{bracket.char}'",
                    severity=Severity.ERROR,
                    issue_type="Bracket Mismatch",
                    suggestion=self._close_line(context, line, closer),
                    rule_id="bracket-unclosed",
                )
            )

        return issues

    @staticmethod
    def _close_line(context: SourceContext, line: int, closer: str) -> str:
        """Put the closer after the last code character, ahead of a trailing comment."""
        raw = context.lines[line - 1]
        line_start = sum(len(text) + 1 for text in context.lines[: line - 1])
        scrubbed = context.scrubbed[line_start : line_start + len(raw)]
        for start in comment_starts(context.text):
            column = start - line_start
            if 0 <= column < len(raw) and not scrubbed[column:].strip():
                code = raw[:column].rstrip()
                return code + closer + raw[len(code):]
        return raw + closer

    @staticmethod
    def get_rule_documentation() -> dict[str, str]:
        return {
            "bracket-unexpected-close": "Closing bracket does not match the innermost open bracket",
            "bracket-unclosed": "Opening bracket is never closed; the fix inserts the closer after the last code character",
        }
