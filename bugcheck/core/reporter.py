"""
Output formatting and reporting for bugcheck analysis results.

This module provides the plain-text report plus console, JSON and SARIF
output for integration with different tools and workflows.
"""

import json
from abc import ABC, abstractmethod
from typing import Any

from .base_analyzer import AnalysisResult, Issue, Severity
from .error_handler import ErrorHandler

SEVERITY_ORDER = (Severity.CRITICAL, Severity.ERROR, Severity.WARNING, Severity.INFO)

BANNER = "═" * 51
SEPARATOR = "─" * 51
GROUP_RULE = "─" * 50


class Reporter(ABC):
    """Abstract base class for result reporters."""

    def __init__(self, config: dict[str, Any] | None = None):
        """Initialize reporter with configuration."""
        self.config = config or {}
        self.error_handler = ErrorHandler("bugcheck.reporter")

    @abstractmethod
    def format_results(self, result: AnalysisResult) -> str:
        """Format analysis results as string."""

    def save_results(self, result: AnalysisResult, output_path: str) -> None:
        """Save results to file."""
        self.error_handler.write_text(output_path, self.format_results(result))

    def print_results(self, result: AnalysisResult) -> None:
        """Print results to console."""
        print(self.format_results(result))


class TextReporter(Reporter):
    """Plain-text report grouped by severity, suitable for download."""

    def format_results(self, result: AnalysisResult) -> str:
        language = self.config.get("language") or result.language
        return format_report(result, language)


def format_report(result: AnalysisResult, language: str | None = None) -> str:
    """Render a deterministic text report for ``result``.

    The report date is taken from the result timestamp, so identical results
    always render identically.
    """
    language = language or result.language
    lines = [
        BANNER,
        "           BUG CHECKER ANALYSIS REPORT",
        BANNER,
        "",
        f"Date: {result.timestamp}",
        f"Language: {language}",
        f"Total Issues: {len(result.issues)}",
        f"Readability Score: {result.readability}/100",
        f"Complexity: {result.complexity.value}",
        f"Quality Grade: {result.quality_grade}",
        "",
        SEPARATOR,
        "",
    ]

    if not result.issues:
        lines.append("✓ No issues found! Your code is clean.")
    else:
        for severity in SEVERITY_ORDER:
            group = result.get_issues_by_severity(severity)
            if not group:
                continue
            lines.append("")
            lines.append(f"{severity.value.upper()} ({len(group)}):")
            lines.append(GROUP_RULE)
            for issue in group:
                lines.append("")
                lines.append(f"Line {issue.line} - {issue.issue_type}")
                lines.append(f"  {issue.message}")
                if issue.suggestion:
                    lines.append(f"  Suggestion: {issue.suggestion}")
            lines.append("")

    lines.extend(["", BANNER, "           END OF REPORT", BANNER, ""])
    return "\n".join(lines)


class ConsoleReporter(Reporter):
    """Console output reporter with color support."""

    COLORS = {
        Severity.CRITICAL: "\033[91m",  # Red
        Severity.ERROR: "\033[91m",  # Red
        Severity.WARNING: "\033[93m",  # Yellow
        Severity.INFO: "\033[96m",  # Cyan
    }
    RESET = "\033[0m"

    def __init__(self, config: dict[str, Any] | None = None):
        super().__init__(config)
        self.use_colors = self.config.get("use_colors", True)
        self.show_suggestions = self.config.get("show_suggestions", True)
        self.summary_only = self.config.get("summary_only", False)

    def _colorize(self, text: str, severity: Severity) -> str:
        """Apply color codes based on severity."""
        if not self.use_colors:
            return text
        return f"{self.COLORS.get(severity, '')}{text}{self.RESET}"

    def format_results(self, result: AnalysisResult) -> str:
        lines = []
        lines.extend(self._format_summary(result))
        if not self.summary_only:
            lines.extend(self._format_issues(result.issues))
        return "\n".join(lines)

    def _format_summary(self, result: AnalysisResult) -> list[str]:
        stats = result.get_summary_stats()
        lines = [
            f"bugcheck: {stats['total_issues']} issue(s) in {result.language} source",
            f"   Readability: {result.readability}/100"
            f"  Complexity: {result.complexity.value}"
            f"  Grade: {result.quality_grade}",
            f"   Fixable: {stats['fixable_issues']}",
        ]
        for severity in SEVERITY_ORDER:
            count = stats["severity_breakdown"].get(severity.value, 0)
            if count:
                lines.append(self._colorize(f"   {severity.value}: {count}", severity))
        lines.append("")
        return lines

    def _format_issues(self, issues: tuple[Issue, ...]) -> list[str]:
        lines = []
        for issue in issues:
            label = f"[{issue.severity.value}]"
            lines.append(
                self._colorize(
                    f"  Line {issue.line}: {label} {issue.issue_type}: {issue.message}",
                    issue.severity,
                )
            )
            if self.show_suggestions and issue.suggestion:
                lines.append(f"    Suggestion: {issue.suggestion}")
        return lines


class JSONReporter(Reporter):
    """JSON reporter."""

    def format_results(self, result: AnalysisResult) -> str:
        indent = self.config.get("indent", 2)
        return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


class SARIFReporter(Reporter):
    """SARIF (Static Analysis Results Interchange Format) reporter."""

    def format_results(self, result: AnalysisResult) -> str:
        """Format results in SARIF format."""
        from .. import __version__

        artifact = self.config.get("artifact_uri", "stdin")
        sarif_report = {
            "$schema": (
                "https://schemastore.azurewebsites.net/schemas/json/sarif-2.1.0.json"
            ),
            "version": "2.1.0",
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": "bugcheck",
                            "version": __version__,
                            "rules": self._generate_rules(result.issues),
                        }
                    },
                    "results": self._generate_results(result.issues, artifact),
                    "invocations": [
                        {
                            "executionSuccessful": True,
                            "startTimeUtc": result.timestamp,
                            "endTimeUtc": result.timestamp,
                        }
                    ],
                    "properties": {
                        "language": result.language,
                        "readability": result.readability,
                        "complexity": result.complexity.value,
                    },
                }
            ],
        }

        return json.dumps(sarif_report, indent=2, sort_keys=True, ensure_ascii=False)

    def _generate_rules(self, issues: tuple[Issue, ...]) -> list[dict[str, Any]]:
        """Generate SARIF rules from issues."""
        rules: dict[str, dict[str, Any]] = {}

        for issue in issues:
            if issue.rule_id not in rules:
                rules[issue.rule_id] = {
                    "id": issue.rule_id,
                    "name": issue.issue_type,
                    "shortDescription": {"text": issue.message},
                    "defaultConfiguration": {
                        "level": self._severity_to_sarif_level(issue.severity)
                    },
                }

        return list(rules.values())

    def _generate_results(
        self, issues: tuple[Issue, ...], artifact: str
    ) -> list[dict[str, Any]]:
        """Generate SARIF results from issues."""
        results = []

        for issue in issues:
            result_item: dict[str, Any] = {
                "ruleId": issue.rule_id,
                "level": self._severity_to_sarif_level(issue.severity),
                "message": {"text": issue.message},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": artifact},
                            "region": {"startLine": issue.line},
                        }
                    }
                ],
            }

            if issue.suggestion:
                result_item["fixes"] = [
                    {
                        "description": {"text": f"Replace line {issue.line}"},
                        "artifactChanges": [
                            {
                                "artifactLocation": {"uri": artifact},
                                "replacements": [
                                    {
                                        "deletedRegion": {"startLine": issue.line},
                                        "insertedContent": {"text": issue.suggestion},
                                    }
                                ],
                            }
                        ],
                    }
                ]

            results.append(result_item)

        return results

    @staticmethod
    def _severity_to_sarif_level(severity: Severity) -> str:
        """Convert bugcheck severity to SARIF level."""
        mapping = {
            Severity.CRITICAL: "error",
            Severity.ERROR: "error",
            Severity.WARNING: "warning",
            Severity.INFO: "note",
        }
        return mapping.get(severity, "note")


REPORTERS = {
    "text": TextReporter,
    "console": ConsoleReporter,
    "json": JSONReporter,
    "sarif": SARIFReporter,
}


def create_reporter(
    output_format: str, config: dict[str, Any] | None = None
) -> Reporter:
    """Factory function to create appropriate reporter."""
    reporter_class = REPORTERS.get(output_format.lower())
    if not reporter_class:
        raise ValueError(f"Unsupported output format: {output_format}")

    return reporter_class(config)
