# -*- coding: utf-8 -*-

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from bugcheck.core.base_analyzer import AnalysisOptions, Language  # noqa: E402
from bugcheck.core.engine import build_context  # noqa: E402


@pytest.fixture
def make_context():
    """Build a SourceContext the way the orchestrator does."""

    def _make(text, language=Language.JAVASCRIPT, strict_mode=False, tab_size=4):
        options = AnalysisOptions(strict_mode=strict_mode, tab_size=tab_size)
        return build_context(text, language, options)

    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "BUGCHECK_STRICT_MODE",
        "BUGCHECK_TAB_SIZE",
        "BUGCHECK_LANGUAGE",
        "BUGCHECK_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
