# -*- coding: utf-8 -*-
"""Tests for the command-line interface."""
from __future__ import annotations

import io
import json

from bugcheck.cli import EXIT_CLEAN, EXIT_CRITICAL, EXIT_INVALID, main


def test_critical_issue_sets_exit_code(tmp_path, capsys):
    source = tmp_path / "app.js"
    source.write_text("while (true) {}\n", encoding="utf-8")

    code = main([str(source), "--no-colors"])

    assert code == EXIT_CRITICAL
    assert "Infinite Loop" in capsys.readouterr().out


def test_json_output_detects_language_from_extension(tmp_path, capsys):
    source = tmp_path / "script.py"
    source.write_text("def f():\n\treturn 1\n", encoding="utf-8")

    main([str(source), "--format", "json"])
    data = json.loads(capsys.readouterr().out)

    assert data["language"] == "python"
    assert data["issues"][0]["type"] == "Indentation"


def test_min_severity_filters_report(tmp_path, capsys):
    source = tmp_path / "app.js"
    source.write_text("while (true) {}\nvar x = 1  \nuse(x);\n", encoding="utf-8")

    main([str(source), "--format", "json", "--min-severity", "critical"])
    data = json.loads(capsys.readouterr().out)

    assert {issue["severity"] for issue in data["issues"]} == {"critical"}


def test_fix_rewrites_file(tmp_path, capsys):
    source = tmp_path / "app.js"
    source.write_text("let x = 1;  \nfoo(x);\n", encoding="utf-8")

    code = main([str(source), "--fix", "--format", "json"])

    assert code == EXIT_CLEAN
    assert source.read_text(encoding="utf-8") == "let x = 1;\nfoo(x);\n"
    assert "Applied 1 fix" in capsys.readouterr().err


def test_fix_output_leaves_input_alone(tmp_path, capsys):
    source = tmp_path / "app.js"
    fixed = tmp_path / "fixed.js"
    source.write_text("let x = 1;  \nfoo(x);\n", encoding="utf-8")

    main([str(source), "--fix-output", str(fixed), "--format", "json"])

    assert source.read_text(encoding="utf-8") == "let x = 1;  \nfoo(x);\n"
    assert fixed.read_text(encoding="utf-8") == "let x = 1;\nfoo(x);\n"


def test_report_written_to_file(tmp_path):
    source = tmp_path / "app.js"
    report = tmp_path / "report.txt"
    source.write_text("let y = 2;\nuse(y);\n", encoding="utf-8")

    main([str(source), "--format", "text", "--output", str(report)])

    assert "BUG CHECKER ANALYSIS REPORT" in report.read_text(encoding="utf-8")


def test_stdin_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x = 1\n"))

    code = main(["-", "--language", "python", "--format", "json"])

    assert code == EXIT_CLEAN
    assert json.loads(capsys.readouterr().out)["issues"] == []


def test_empty_input_rejected(tmp_path, capsys):
    source = tmp_path / "empty.js"
    source.write_text("   \n", encoding="utf-8")

    assert main([str(source)]) == EXIT_INVALID
    assert "provide some code" in capsys.readouterr().err


def test_missing_file_rejected(tmp_path):
    assert main([str(tmp_path / "missing.js")]) == EXIT_INVALID


def test_sample(capsys):
    assert main(["--sample", "python"]) == EXIT_CLEAN
    assert "def calculate_average" in capsys.readouterr().out


def test_list_rules(capsys):
    assert main(["--list-rules"]) == EXIT_CLEAN
    out = capsys.readouterr().out

    assert "brackets:" in out
    assert "  infinite-loop:" in out
    assert "  strict-todo:" in out


def test_verbose_reports_source_size(tmp_path, capsys):
    source = tmp_path / "main.c"
    source.write_text("int x = 1;\n", encoding="utf-8")

    main([str(source), "--verbose", "--format", "json"])

    assert "as c (2 lines, 11 characters)" in capsys.readouterr().err


def test_fix_on_stdin_requires_fix_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("let x = 1  \n"))

    code = main(["-", "--language", "javascript", "--fix"])

    captured = capsys.readouterr()
    assert code == EXIT_INVALID
    assert captured.out == ""
    assert "--fix-output" in captured.err


def test_fix_on_stdin_with_fix_output(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("let x = 1;  \nfoo(x);"))
    fixed = tmp_path / "fixed.js"

    main(["-", "--language", "javascript", "--fix-output", str(fixed), "--no-colors"])

    assert fixed.read_text(encoding="utf-8") == "let x = 1;\nfoo(x);"
    assert "let x = 1;\nfoo(x);" not in capsys.readouterr().out
