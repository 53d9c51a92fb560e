"""
Base analyzer module providing foundational classes for code analysis.

This module defines the core interfaces and data structures used throughout
the bugcheck detector framework: severities, languages, issues, analysis
results and the abstract detector every rule set derives from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .error_handler import ErrorHandler


class Severity(Enum):
    """Issue severity levels, most severe first."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Ordinal used for sorting; lower is more severe."""
        return _SEVERITY_RANKS[self]

    @classmethod
    def parse(cls, value: "str | Severity") -> "Severity":
        """Parse a severity name, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown severity: {value!r}") from None


_SEVERITY_RANKS = {
    Severity.CRITICAL: 0,
    Severity.ERROR: 1,
    Severity.WARNING: 2,
    Severity.INFO: 3,
}


class Language(Enum):
    """Languages with dedicated rule sets."""

    JAVASCRIPT = "javascript"
    PYTHON = "python"
    JAVA = "java"
    CPP = "cpp"
    C = "c"
    PHP = "php"

    @classmethod
    def resolve(cls, tag: "str | Language | None") -> "Language | None":
        """Map a language tag to a member, or None when it is unrecognized."""
        if isinstance(tag, cls):
            return tag
        if not tag:
            return None
        key = str(tag).strip().lower()
        key = _LANGUAGE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


_LANGUAGE_ALIASES = {
    "js": "javascript",
    "py": "python",
    "c++": "cpp",
}

# Languages whose statements are terminated with semicolons.
BRACE_LANGUAGES = frozenset(
    {Language.JAVASCRIPT, Language.JAVA, Language.CPP, Language.C, Language.PHP}
)


class Complexity(Enum):
    """Coarse complexity buckets."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class AnalysisOptions:
    """Caller-supplied analysis settings."""

    strict_mode: bool = False
    tab_size: int = 4

    def __post_init__(self) -> None:
        if self.tab_size < 1:
            ErrorHandler("bugcheck.options").logger.warning(
                "tab_size %s is below 1, clamping to 1", self.tab_size
            )
            object.__setattr__(self, "tab_size", 1)


@dataclass(frozen=True)
class Issue:
    """Represents a single detected problem."""

    line: int
    severity: Severity
    issue_type: str
    message: str
    suggestion: str | None = None
    rule_id: str = ""

    @property
    def fixable(self) -> bool:
        """True when the issue carries a replacement line."""
        return bool(self.suggestion)

    def to_dict(self) -> dict[str, Any]:
        """Convert issue to dictionary format."""
        return {
            "line": self.line,
            "severity": self.severity.value,
            "type": self.issue_type,
            "message": self.message,
            "suggestion": self.suggestion,
            "rule_id": self.rule_id,
            "fixable": self.fixable,
        }


def issue_sort_key(issue: Issue) -> tuple[int, int]:
    """Sort key placing severe issues first, then by line."""
    return (issue.severity.rank, issue.line)


@dataclass(frozen=True)
class AnalysisResult:
    """Contains the complete results of an analysis run."""

    issues: tuple[Issue, ...]
    readability: int
    complexity: Complexity
    timestamp: str
    language: str = Language.JAVASCRIPT.value
    detectors_run: tuple[str, ...] = field(default_factory=tuple)

    @property
    def quality_grade(self) -> str:
        """Letter grade derived from readability and issue count."""
        from .metrics import calculate_quality_grade

        return calculate_quality_grade(self.readability, len(self.issues))

    def get_issues_by_severity(self, severity: Severity) -> list[Issue]:
        """Get all issues of a specific severity."""
        return [i for i in self.issues if i.severity == severity]

    def get_issues_by_type(self, issue_type: str) -> list[Issue]:
        """Get all issues with a given category label."""
        return [i for i in self.issues if i.issue_type == issue_type]

    def fixable_issues(self) -> list[Issue]:
        """Get the issues that carry a suggestion."""
        return [i for i in self.issues if i.fixable]

    def get_summary_stats(self) -> dict[str, Any]:
        """Get summary statistics."""
        severity_counts: dict[str, int] = {}
        type_counts: dict[str, int] = {}

        for issue in self.issues:
            severity_counts[issue.severity.value] = (
                severity_counts.get(issue.severity.value, 0) + 1
            )
            type_counts[issue.issue_type] = type_counts.get(issue.issue_type, 0) + 1

        return {
            "total_issues": len(self.issues),
            "severity_breakdown": severity_counts,
            "type_breakdown": type_counts,
            "fixable_issues": len(self.fixable_issues()),
            "readability": self.readability,
            "complexity": self.complexity.value,
            "quality_grade": self.quality_grade,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary format."""
        return {
            "language": self.language,
            "timestamp": self.timestamp,
            "issues": [i.to_dict() for i in self.issues],
            "readability": self.readability,
            "complexity": self.complexity.value,
            "quality_grade": self.quality_grade,
            "detectors_run": list(self.detectors_run),
            "summary": self.get_summary_stats(),
        }


@dataclass(frozen=True)
class SourceContext:
    """Everything a detector may look at for one analysis run."""

    text: str
    lines: tuple[str, ...]
    scrubbed: str
    language: Language | None
    options: AnalysisOptions

    def line_of(self, position: int) -> int:
        """1-based line number for a character offset in the raw text."""
        return self.text.count("\n", 0, position) + 1


class BaseDetector(ABC):
    """Abstract base class for all bugcheck detectors."""

    #: Registry key, also used to enable or disable the detector.
    name: str = "base"

    #: Languages this detector runs for; None means every language.
    languages: frozenset[Language] | None = None

    def __init__(self) -> None:
        self.error_handler = ErrorHandler(f"bugcheck.{self.name}")

    def applies_to(self, context: SourceContext) -> bool:
        """Check whether this detector has rules for the context's language."""
        if self.languages is None:
            return True
        return context.language in self.languages

    def run(self, context: SourceContext) -> list[Issue]:
        """Run the detector if it applies, with start/complete logging."""
        if not self.applies_to(context):
            self.error_handler.log_detector_skipped(
                self.name, "no rules for this language"
            )
            return []

        self.error_handler.log_detector_start(self.name)
        issues = self.detect(context)
        self.error_handler.log_detector_complete(self.name, len(issues))
        return issues

    @abstractmethod
    def detect(self, context: SourceContext) -> list[Issue]:
        """Return the issues found in the given source."""

    def create_issue(
        self,
        line: int,
        message: str,
        severity: Severity = Severity.WARNING,
        issue_type: str = "",
        suggestion: str | None = None,
        rule_id: str = "",
    ) -> Issue:
        """Create an issue with proper defaults."""
        if not rule_id:
            rule_id = f"{self.name}-rule"

        return Issue(
            line=line,
            severity=severity,
            issue_type=issue_type or self.name,
            message=message,
            suggestion=suggestion,
            rule_id=rule_id,
        )

    @staticmethod
    def get_rule_documentation() -> dict[str, str]:
        """Return documentation for all rules implemented by this detector."""
        return {}
