#!/usr/bin/env python3
"""
Nesting depth detector.

Keeps a running counter rather than a real scope tree: control keywords push,
lines starting with a closing brace pop. Unusual formatting (several
statements on one line, Python blocks without braces) makes the counter
drift, and that drift is part of the observable behaviour.
"""

import re

from ..core.base_analyzer import BaseDetector, Issue, Severity, SourceContext

CONTROL_KEYWORD = re.compile(r"\b(for|while|if|switch)\b.*\{?$")
MAX_NESTING = 3


class NestingAnalyzer(BaseDetector):
    """Warns when control structures nest deeper than three levels."""

    name = "nesting"

    def detect(self, context: SourceContext) -> list[Issue]:
        issues = []
        level = 0
        deepest = 0

        for index, line in enumerate(context.lines):
            trimmed = line.strip()

            if CONTROL_KEYWORD.search(trimmed):
                level += 1
                deepest = max(deepest, level)
                if level > MAX_NESTING:
                    issues.append(
                        self.create_issue(
                            line=index + 1,
                            message=f"Deep nesting level ({level}) - consider refactoring",
                            severity=Severity.WARNING,
                            issue_type="High Complexity",
                            rule_id="deep-nesting",
                        )
                    )

            if trimmed.startswith("}"):
                level = max(0, level - 1)

        self.error_handler.logger.debug("Maximum nesting level: %s", deepest)
        return issues

    @staticmethod
    def get_rule_documentation() -> dict[str, str]:
        return {"deep-nesting": f"Control structures nested more than {MAX_NESTING} levels"}
