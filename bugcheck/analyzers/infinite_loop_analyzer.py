#!/usr/bin/env python3
"""
Infinite loop risk detector.

Looks for unconditional loop headers and checks the rest of the header line
plus a fixed window of following lines for an exit keyword. The window
ignores nesting entirely.
"""

import re

from ..core.base_analyzer import BaseDetector, Issue, Language, Severity, SourceContext

LOOKAHEAD_LINES = 9

_WHILE_TRUE = re.compile(r"\bwhile\s*\(\s*true\s*\)", re.IGNORECASE)
_WHILE_ONE = re.compile(r"\bwhile\s*\(\s*1\s*\)", re.IGNORECASE)
_FOR_EVER = re.compile(r"\bfor\s*\(\s*;\s*;\s*\)")

LOOP_PATTERNS: dict[Language, tuple[re.Pattern, ...]] = {
    Language.JAVASCRIPT: (_WHILE_TRUE, _FOR_EVER),
    Language.PYTHON: (re.compile(r"\bwhile\s+True\s*:"),),
    Language.JAVA: (_WHILE_TRUE, _FOR_EVER),
    Language.CPP: (_WHILE_ONE, _FOR_EVER),
    Language.C: (_WHILE_ONE, _FOR_EVER),
}
DEFAULT_PATTERNS = LOOP_PATTERNS[Language.JAVASCRIPT]

LOOP_EXIT = re.compile(r"\bbreak\b|\breturn\b")


class InfiniteLoopAnalyzer(BaseDetector):
    """Flags unconditional loops with no nearby break or return."""

    name = "infinite_loops"

    def detect(self, context: SourceContext) -> list[Issue]:
        issues = []
        patterns = LOOP_PATTERNS.get(context.language, DEFAULT_PATTERNS)
        lines = context.lines

        for index, line in enumerate(lines):
            for pattern in patterns:
                match = pattern.search(line)
                if not match:
                    continue
                # the loop body may start on the header line itself
                window = [line[match.end():]]
                window.extend(lines[index + 1 : index + 1 + LOOKAHEAD_LINES])
                if any(LOOP_EXIT.search(following) for following in window):
                    continue
                issues.append(
                    self.create_issue(
                        line=index + 1,
                        message=(
                            "Potential infinite loop detected - "
                            "no break or return statement found"
                        ),
                        severity=Severity.CRITICAL,
                        issue_type="Infinite Loop",
                        rule_id="infinite-loop",
                    )
                )
        return issues

    @staticmethod
    def get_rule_documentation() -> dict[str, str]:
        return {
            "infinite-loop": f"Unconditional loop without break/return in the next {LOOKAHEAD_LINES} lines"
        }
