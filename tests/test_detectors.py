# -*- coding: utf-8 -*-
"""Tests for the loop, unreachable, unused, nesting, style and strict detectors."""
from __future__ import annotations

from bugcheck.analyzers.infinite_loop_analyzer import InfiniteLoopAnalyzer
from bugcheck.analyzers.nesting_analyzer import NestingAnalyzer
from bugcheck.analyzers.strict_mode_analyzer import StrictModeAnalyzer
from bugcheck.analyzers.style_analyzer import StyleAnalyzer
from bugcheck.analyzers.unreachable_code_analyzer import UnreachableCodeAnalyzer
from bugcheck.analyzers.unused_variable_analyzer import UnusedVariableAnalyzer
from bugcheck.core.base_analyzer import Language, Severity


# -- unused variables ---------------------------------------------------------


def test_unused_variable_reported(make_context):
    ctx = make_context("const unused = 1; console.log('x');")
    issues = UnusedVariableAnalyzer().detect(ctx)

    assert len(issues) == 1
    assert issues[0].issue_type == "Unused Variable"
    assert "'unused'" in issues[0].message


def test_used_variable_not_reported(make_context):
    ctx = make_context("const used = 1; console.log(used);")
    assert UnusedVariableAnalyzer().detect(ctx) == []


def test_dollar_is_part_of_identifier(make_context):
    ctx = make_context("let $el = 1;\nlet el = 2;\nuse(el);")
    issues = UnusedVariableAnalyzer().detect(ctx)

    assert [(i.line, i.message) for i in issues] == [
        (1, "Variable '$el' is declared but never used")
    ]


def test_unused_variables_only_for_javascript(make_context):
    ctx = make_context("const unused = 1;", Language.JAVA)
    assert UnusedVariableAnalyzer().run(ctx) == []


# -- infinite loops -----------------------------------------------------------


def test_infinite_loop_without_exit(make_context):
    issues = InfiniteLoopAnalyzer().detect(make_context("while (true) { doWork(); }"))

    assert len(issues) == 1
    assert issues[0].severity is Severity.CRITICAL


def test_infinite_loop_with_break_on_header_line(make_context):
    assert InfiniteLoopAnalyzer().detect(make_context("while (true) { break; }")) == []


def test_infinite_loop_with_break_in_body(make_context):
    text = "while (true) {\n  work();\n  if (done) break;\n}"
    assert InfiniteLoopAnalyzer().detect(make_context(text)) == []


def test_break_outside_lookahead_window(make_context):
    text = "for (;;) {\n" + "  step();\n" * 9 + "  break;\n}"
    issues = InfiniteLoopAnalyzer().detect(make_context(text))

    assert [i.line for i in issues] == [1]


def test_loop_patterns_per_language(make_context):
    detector = InfiniteLoopAnalyzer()

    assert len(detector.detect(make_context("while True:\n    pass", Language.PYTHON))) == 1
    assert len(detector.detect(make_context("while (1) {\n}", Language.C))) == 1
    assert detector.detect(make_context("while (1) {\n}", Language.JAVASCRIPT)) == []
    assert len(detector.detect(make_context("WHILE (TRUE) {}", Language.JAVA))) == 1


def test_unknown_language_uses_javascript_loop_patterns(make_context):
    detector = InfiniteLoopAnalyzer()

    assert len(detector.detect(make_context("while (true) {}", Language.PHP))) == 1
    assert len(detector.detect(make_context("while (true) {}", "kotlin"))) == 1


# -- unreachable code ---------------------------------------------------------


def test_statement_after_return_is_unreachable(make_context):
    text = "function f() {\n  return 1;\n  foo();\n}"
    issues = UnreachableCodeAnalyzer().detect(make_context(text))

    assert [i.line for i in issues] == [3]
    assert issues[0].severity is Severity.WARNING


def test_unreachable_skips_blank_comment_and_closer_lines(make_context):
    text = "return 1;\n\n// note\n}\n)\nx();"
    issues = UnreachableCodeAnalyzer().detect(make_context(text))

    assert [i.line for i in issues] == [6]


def test_return_at_end_of_block_is_fine(make_context):
    assert UnreachableCodeAnalyzer().detect(make_context("return 1;\n}")) == []


def test_one_issue_per_terminator(make_context):
    text = "throw err;\na();\nb();"
    issues = UnreachableCodeAnalyzer().detect(make_context(text))

    assert [i.line for i in issues] == [2]


# -- nesting ------------------------------------------------------------------


def test_deep_nesting_warning(make_context):
    text = "\n".join(
        [
            "if (a) {",
            "  for (x of y) {",
            "    while (b) {",
            "      if (c) {",
            "        run();",
            "      }",
            "    }",
            "  }",
            "}",
        ]
    )
    issues = NestingAnalyzer().detect(make_context(text))

    assert len(issues) == 1
    assert issues[0].line == 4
    assert issues[0].message == "Deep nesting level (4) - consider refactoring"


def test_nesting_counter_drifts_without_braces(make_context):
    text = "if (a) return;\nif (b) return;\nif (c) return;\nif (d) return;"
    issues = NestingAnalyzer().detect(make_context(text))

    assert [i.line for i in issues] == [4]


def test_closing_braces_reset_nesting(make_context):
    text = "if (a) {\n}\nif (b) {\n}\nif (c) {\n}\nif (d) {\n}"
    assert NestingAnalyzer().detect(make_context(text)) == []


# -- style --------------------------------------------------------------------


def test_loose_equality_rewritten(make_context):
    issues = StyleAnalyzer().detect(make_context("if (a == b) {"))

    assert len(issues) == 1
    assert issues[0].severity is Severity.INFO
    assert issues[0].suggestion == "if (a === b) {"


def test_loose_inequality_rewritten(make_context):
    issues = StyleAnalyzer().detect(make_context("if (a != b) {"))

    assert issues[0].message == "Use !== instead of != for comparison"
    assert issues[0].suggestion == "if (a !== b) {"


def test_strict_equality_is_fine(make_context):
    assert StyleAnalyzer().detect(make_context("if (a === b && c !== d) {")) == []


def test_var_rewritten_to_const(make_context):
    issues = StyleAnalyzer().detect(make_context("var x = 1;"))

    assert [i.suggestion for i in issues] == ["const x = 1;"]


def test_long_line_and_trailing_whitespace_for_any_language(make_context):
    text = "x" * 121 + "\ny = 1   "
    issues = StyleAnalyzer().detect(make_context(text, Language.PYTHON))

    assert [(i.line, i.issue_type) for i in issues] == [
        (1, "Code Style"),
        (2, "Formatting"),
    ]
    assert issues[0].message == "Line is too long (121 characters) - consider breaking it up"
    assert issues[0].suggestion is None
    assert issues[1].suggestion == "y = 1"


def test_python_skips_javascript_rules(make_context):
    assert StyleAnalyzer().detect(make_context("if a == b:", Language.PYTHON)) == []


# -- strict mode --------------------------------------------------------------


def test_strict_mode_disabled_by_default(make_context):
    ctx = make_context("console.log(1); // TODO")
    assert StrictModeAnalyzer().run(ctx) == []


def test_strict_mode_javascript(make_context):
    ctx = make_context("console.log(1); // TODO", strict_mode=True)
    issues = StrictModeAnalyzer().run(ctx)

    assert [i.rule_id for i in issues] == ["strict-console", "strict-todo"]
    assert all(i.issue_type == "Strict Mode" for i in issues)


def test_strict_mode_markers_for_other_languages(make_context):
    ctx = make_context("print(1)  # FIXME\nprint(2)", Language.PYTHON, strict_mode=True)
    issues = StrictModeAnalyzer().run(ctx)

    assert [i.line for i in issues] == [1]
