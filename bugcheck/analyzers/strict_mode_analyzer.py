#!/usr/bin/env python3
"""
Strict mode extras: leftovers that should not ship to production.
"""

import re

from ..core.base_analyzer import BaseDetector, Issue, Language, Severity, SourceContext

CONSOLE_CALL = re.compile(r"console\.(log|warn|error|info)")
WORK_MARKER = re.compile(r"TODO|FIXME|HACK|XXX")


class StrictModeAnalyzer(BaseDetector):
    """Flags debug console calls and TODO-style markers."""

    name = "strict_mode"

    def applies_to(self, context: SourceContext) -> bool:
        return context.options.strict_mode

    def detect(self, context: SourceContext) -> list[Issue]:
        issues = []

        if context.language is Language.JAVASCRIPT:
            for index, line in enumerate(context.lines):
                if CONSOLE_CALL.search(line):
                    issues.append(
                        self.create_issue(
                            line=index + 1,
                            message="console statement found - remove before production",
                            severity=Severity.INFO,
                            issue_type="Strict Mode",
                            rule_id="strict-console",
                        )
                    )

        for index, line in enumerate(context.lines):
            if WORK_MARKER.search(line):
                issues.append(
                    self.create_issue(
                        line=index + 1,
                        message="TODO/FIXME comment found - resolve before production",
                        severity=Severity.INFO,
                        issue_type="Strict Mode",
                        rule_id="strict-todo",
                    )
                )

        return issues

    @staticmethod
    def get_rule_documentation() -> dict[str, str]:
        return {
            "strict-console": "Debug console call left in JavaScript source",
            "strict-todo": "TODO, FIXME, HACK or XXX marker",
        }
