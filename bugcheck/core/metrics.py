"""
Summary metrics computed independently of the detector set.
"""

import math
import re
from collections.abc import Sequence
from typing import Any

from .base_analyzer import Complexity

COMMENT_LINE = re.compile(r"^\s*(//|#|/\*)")
LEADING_WHITESPACE = re.compile(r"^\s*")
NUMBER_LITERAL = re.compile(r"\b\d+\b")
DECISION_KEYWORD = re.compile(r"\b(if|else|switch|case|for|while)\b")
LOGICAL_OPERATOR = re.compile(r"&&|\|\|")

LONG_LINE_AVERAGE = 80
MAX_LENGTH_PENALTY = 20
MAX_COMMENT_BONUS = 10
INCONSISTENT_INDENT_PENALTY = 10
MAX_MAGIC_NUMBER_PENALTY = 10

LOW_COMPLEXITY_LIMIT = 10
MEDIUM_COMPLEXITY_LIMIT = 20

GRADE_THRESHOLDS = (
    (90, "A+"),
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)
ISSUE_PENALTY = 5


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_readability(text: str, lines: Sequence[str], tab_size: int = 4) -> int:
    """Score readability from 0 to 100.

    Long average lines and magic numbers cost points, comments earn a small
    bonus and more than two distinct indentation residues modulo ``tab_size``
    count as inconsistent indentation.
    """
    tab_size = max(1, tab_size)
    score = 100.0

    non_empty = [line for line in lines if line.strip()]
    denominator = max(len(non_empty), 1)

    average_length = sum(len(line) for line in non_empty) / denominator
    if average_length > LONG_LINE_AVERAGE:
        score -= min(MAX_LENGTH_PENALTY, (average_length - LONG_LINE_AVERAGE) / 4)

    comment_lines = sum(1 for line in lines if COMMENT_LINE.match(line))
    score += min(MAX_COMMENT_BONUS, comment_lines / denominator * 30)

    indents = [len(LEADING_WHITESPACE.match(line).group(0)) for line in non_empty]
    residues = {indent % tab_size for indent in indents if indent > 0}
    if len(residues) > 2:
        score -= INCONSISTENT_INDENT_PENALTY

    magic_numbers = len(NUMBER_LITERAL.findall(text))
    score -= min(MAX_MAGIC_NUMBER_PENALTY, magic_numbers / 3)

    return max(0, min(100, _round_half_up(score)))


def complexity_score(lines: Sequence[str]) -> int:
    """Count decision points: one per keyword line, one per logical-operator line."""
    total = 0
    for line in lines:
        if DECISION_KEYWORD.search(line):
            total += 1
        if LOGICAL_OPERATOR.search(line):
            total += 1
    return total


def calculate_complexity(lines: Sequence[str]) -> Complexity:
    """Bucket the decision-point count into Low, Medium or High."""
    total = complexity_score(lines)
    if total <= LOW_COMPLEXITY_LIMIT:
        return Complexity.LOW
    if total <= MEDIUM_COMPLEXITY_LIMIT:
        return Complexity.MEDIUM
    return Complexity.HIGH


def calculate_quality_grade(readability: int, issue_count: int) -> str:
    """Letter grade from readability minus five points per issue."""
    score = readability - issue_count * ISSUE_PENALTY
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "F"


def source_stats(text: str) -> dict[str, Any]:
    """Line and character counts for a buffer."""
    return {
        "lines": text.count("\n") + 1,
        "characters": len(text),
    }
