"""
Analysis orchestrator.

Scrubs the source once, runs every applicable detector, merges and sorts the
issues and attaches the summary metrics. Each call builds fresh detector
instances and a fresh result, so concurrent calls share nothing.
"""

import time
from collections.abc import Iterable
from datetime import datetime, timezone

from .base_analyzer import (
    AnalysisOptions,
    AnalysisResult,
    Issue,
    Language,
    SourceContext,
    issue_sort_key,
)
from .error_handler import ErrorHandler
from .metrics import calculate_complexity, calculate_readability
from .scrubber import scrub

DEFAULT_LANGUAGE = Language.JAVASCRIPT.value

error_handler = ErrorHandler("bugcheck.engine")


def build_context(
    source_text: str,
    language: "str | Language | None",
    options: AnalysisOptions | None = None,
) -> SourceContext:
    """Prepare the shared, read-only view every detector consumes."""
    resolved = Language.resolve(language)
    if resolved is None:
        error_handler.logger.debug(
            "Unrecognized language %r, using default rule sets", language
        )
    return SourceContext(
        text=source_text,
        lines=tuple(source_text.split("\n")),
        scrubbed=scrub(source_text),
        language=resolved,
        options=options or AnalysisOptions(),
    )


def _language_tag(language: "str | Language | None") -> str:
    if isinstance(language, Language):
        return language.value
    return str(language) if language else DEFAULT_LANGUAGE


def analyze(
    source_text: str,
    language: "str | Language | None" = DEFAULT_LANGUAGE,
    options: AnalysisOptions | None = None,
    disabled_detectors: Iterable[str] = (),
) -> AnalysisResult:
    """Run all applicable detectors over ``source_text``.

    Issues are ordered by severity rank and then line; ties keep detector
    emission order. Empty or whitespace-only text yields no issues.
    """
    # Imported here to keep bugcheck.core importable from the detectors.
    from ..analyzers import DETECTORS

    options = options or AnalysisOptions()
    context = build_context(source_text, language, options)
    disabled = set(disabled_detectors)

    issues: list[Issue] = []
    detectors_run: list[str] = []
    start_time = time.perf_counter()

    if source_text.strip():
        for detector_class in DETECTORS:
            if detector_class.name in disabled:
                continue
            detector = detector_class()
            if not detector.applies_to(context):
                continue
            issues.extend(detector.run(context))
            detectors_run.append(detector.name)
    else:
        error_handler.logger.debug("Empty source text, skipping detectors")

    issues.sort(key=issue_sort_key)

    result = AnalysisResult(
        issues=tuple(issues),
        readability=calculate_readability(
            source_text, context.lines, options.tab_size
        ),
        complexity=calculate_complexity(context.lines),
        timestamp=datetime.now(timezone.utc).isoformat(),
        language=_language_tag(language),
        detectors_run=tuple(detectors_run),
    )
    error_handler.logger.debug(
        "Analysis finished in %.4f seconds with %s issues",
        time.perf_counter() - start_time,
        len(result.issues),
    )
    return result
