"""
bugcheck Analyzers Package.

This package contains the independent detectors that make up a bugcheck run.
``DETECTORS`` lists them in emission order; the orchestrator relies on that
order for stable sorting of equal-severity issues on the same line.
"""

from .bracket_analyzer import BracketAnalyzer
from .infinite_loop_analyzer import InfiniteLoopAnalyzer
from .nesting_analyzer import NestingAnalyzer
from .strict_mode_analyzer import StrictModeAnalyzer
from .style_analyzer import StyleAnalyzer
from .syntax_analyzer import SyntaxAnalyzer
from .unreachable_code_analyzer import UnreachableCodeAnalyzer
from .unused_variable_analyzer import UnusedVariableAnalyzer

DETECTORS = (
    SyntaxAnalyzer,
    BracketAnalyzer,
    UnusedVariableAnalyzer,
    InfiniteLoopAnalyzer,
    UnreachableCodeAnalyzer,
    NestingAnalyzer,
    StyleAnalyzer,
    StrictModeAnalyzer,
)

DETECTOR_NAMES = tuple(detector.name for detector in DETECTORS)

__all__ = [
    "BracketAnalyzer",
    "InfiniteLoopAnalyzer",
    "NestingAnalyzer",
    "StrictModeAnalyzer",
    "StyleAnalyzer",
    "SyntaxAnalyzer",
    "UnreachableCodeAnalyzer",
    "UnusedVariableAnalyzer",
    "DETECTORS",
    "DETECTOR_NAMES",
]
