"""
bugcheck Core - rule-based static analysis framework.

This module provides the data model, scrubbing, metrics, orchestration, fix
application and reporting used by the bugcheck detectors.
"""

from .base_analyzer import (
    AnalysisOptions,
    AnalysisResult,
    BaseDetector,
    Complexity,
    Issue,
    Language,
    Severity,
    SourceContext,
)
from .config_manager import ConfigManager
from .engine import analyze
from .error_handler import (
    BugCheckError,
    ConfigurationError,
    ErrorHandler,
    InvalidInputError,
    SourceReadError,
)
from .fixer import apply_fixes, apply_single_fix
from .metrics import calculate_complexity, calculate_quality_grade, calculate_readability
from .reporter import ConsoleReporter, JSONReporter, Reporter, TextReporter, format_report
from .scrubber import scrub

__all__ = [
    "AnalysisOptions",
    "AnalysisResult",
    "BaseDetector",
    "Complexity",
    "Issue",
    "Language",
    "Severity",
    "SourceContext",
    "ConfigManager",
    "analyze",
    "BugCheckError",
    "ConfigurationError",
    "ErrorHandler",
    "InvalidInputError",
    "SourceReadError",
    "apply_fixes",
    "apply_single_fix",
    "calculate_complexity",
    "calculate_quality_grade",
    "calculate_readability",
    "ConsoleReporter",
    "JSONReporter",
    "Reporter",
    "TextReporter",
    "format_report",
    "scrub",
]
