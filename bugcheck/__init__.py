"""
bugcheck - Lightweight rule-based bug checker.

bugcheck scans source text in JavaScript, Python, Java, C, C++ or PHP and
reports ranked diagnostics with readability and complexity metrics, plus
line-level suggested fixes that can be applied back to the text.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .core.base_analyzer import (
    AnalysisOptions,
    AnalysisResult,
    Complexity,
    Issue,
    Language,
    Severity,
)
from .core.config_manager import ConfigManager
from .core.engine import analyze
from .core.fixer import apply_fixes, apply_single_fix
from .core.reporter import create_reporter, format_report

__all__ = [
    # Entry points
    "analyze",
    "apply_fixes",
    "apply_single_fix",
    "format_report",
    "create_reporter",
    # Core classes
    "AnalysisOptions",
    "AnalysisResult",
    "Complexity",
    "Issue",
    "Language",
    "Severity",
    "ConfigManager",
    # Metadata
    "__version__",
    "__license__",
]
