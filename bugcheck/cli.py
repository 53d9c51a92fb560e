#!/usr/bin/env python3
"""
bugcheck CLI - command-line interface for the analysis engine.

Reads source from a file or stdin, runs the detectors, prints a report and
optionally writes the suggested fixes back.
"""

import argparse
import sys
import traceback
from typing import Any

from . import __version__
from .core.base_analyzer import AnalysisResult, Issue, Language, Severity
from .core.config_manager import ConfigManager
from .core.engine import DEFAULT_LANGUAGE, analyze
from .core.error_handler import (
    BugCheckError,
    ConfigurationError,
    ErrorHandler,
    InvalidInputError,
)
from .core.file_types import detect_language
from .analyzers import DETECTORS
from .core.fixer import apply_fixes, count_applicable_fixes
from .core.metrics import source_stats
from .core.reporter import REPORTERS, create_reporter
from .core.samples import get_sample

EXIT_CLEAN = 0
EXIT_ERRORS = 1
EXIT_CRITICAL = 2
EXIT_INVALID = 3
EXIT_INTERRUPTED = 130


class BugCheckCLI:
    """Unified CLI for bugcheck."""

    def __init__(self):
        self.error_handler = ErrorHandler("bugcheck.cli")

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog="bugcheck",
            description="bugcheck - lightweight rule-based bug checker",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Analyze a file, language detected from the extension
  bugcheck app.js

  # Analyze stdin as Python with strict mode
  cat script.py | bugcheck - --language python --strict

  # Apply every suggested fix in place
  bugcheck app.js --fix

  # CI/CD integration
  bugcheck app.js --format sarif --output results.sarif
            """,
        )

        parser.add_argument(
            "path",
            nargs="?",
            default="-",
            help="Source file to analyze, or '-' for stdin (default: stdin)",
        )

        analysis_group = parser.add_argument_group("Analysis")
        analysis_group.add_argument(
            "--language",
            "-l",
            help="Source language (javascript, python, java, cpp, c, php)",
        )
        analysis_group.add_argument(
            "--strict",
            action="store_true",
            default=None,
            help="Enable strict mode checks (console calls, TODO markers)",
        )
        analysis_group.add_argument(
            "--tab-size",
            type=int,
            help="Expected indentation width (default: 4)",
        )
        analysis_group.add_argument(
            "--disable",
            help="Comma-separated list of detectors to skip",
        )

        output_group = parser.add_argument_group("Output Options")
        output_group.add_argument(
            "--format",
            "-f",
            choices=sorted(REPORTERS),
            help="Output format (default: console)",
        )
        output_group.add_argument(
            "--output", "-o", help="Output file path (default: stdout)"
        )
        output_group.add_argument(
            "--min-severity",
            choices=[s.value for s in Severity],
            help="Only report issues at least this severe",
        )
        output_group.add_argument(
            "--summary-only",
            action="store_true",
            help="Show only summary statistics (console format)",
        )
        output_group.add_argument(
            "--no-colors", action="store_true", help="Disable colored output"
        )

        fix_group = parser.add_argument_group("Fixes")
        fix_group.add_argument(
            "--fix",
            action="store_true",
            help="Apply all suggested fixes to the source file",
        )
        fix_group.add_argument(
            "--fix-output",
            help="Write fixed source here instead of overwriting the input",
        )

        parser.add_argument("--config", "-c", help="Path to configuration file")
        parser.add_argument(
            "--sample",
            metavar="LANGUAGE",
            help="Print a sample program with known bugs and exit",
        )
        parser.add_argument(
            "--list-rules",
            action="store_true",
            help="List every detector and its rules, then exit",
        )
        parser.add_argument("--verbose", action="store_true", help="Verbose output")
        parser.add_argument(
            "--version", action="version", version=f"bugcheck {__version__}"
        )

        return parser

    @staticmethod
    def apply_arguments(config: ConfigManager, args: argparse.Namespace) -> None:
        """Layer command-line overrides on top of loaded configuration."""
        overrides = {
            "analysis.language": args.language,
            "analysis.strict_mode": args.strict,
            "analysis.tab_size": args.tab_size,
            "output.format": args.format,
            "output.min_severity": args.min_severity,
        }
        for path, value in overrides.items():
            if value is not None:
                config.set(path, value)

        if args.no_colors or args.output:
            config.set("output.use_colors", False)
        if args.disable:
            for name in args.disable.split(","):
                config.set(f"detectors.{name.strip()}.enabled", False)

    def read_source(self, path: str) -> str:
        """Read source text from a path or stdin."""
        if path == "-":
            return sys.stdin.read()
        return self.error_handler.read_source(path)

    @staticmethod
    def resolve_language(config: ConfigManager, path: str) -> str:
        """Pick the language: explicit setting, then file extension, then default."""
        language = config.get("analysis.language")
        if language:
            return language
        if path != "-":
            detected = detect_language(path)
            if detected is not None:
                return detected.value
        return DEFAULT_LANGUAGE

    @staticmethod
    def filter_by_severity(issues: tuple[Issue, ...], min_severity: str | None) -> list[Issue]:
        """Keep issues at least as severe as ``min_severity``."""
        if not min_severity:
            return list(issues)
        threshold = Severity.parse(min_severity).rank
        return [issue for issue in issues if issue.severity.rank <= threshold]

    def run_analysis(self, args: argparse.Namespace) -> int:
        """Run the analysis and return exit code."""
        try:
            if args.sample:
                sys.stdout.write(get_sample(args.sample) + "\n")
                return EXIT_CLEAN
            if args.list_rules:
                sys.stdout.write(self.format_rules())
                return EXIT_CLEAN

            if (args.fix or args.fix_output) and (args.fix_output or args.path) == "-":
                raise InvalidInputError(
                    "Fixed source cannot go to stdout; pass --fix-output FILE"
                )

            config = ConfigManager(args.config)
            self.apply_arguments(config, args)
            for problem in config.validate_config():
                self.error_handler.logger.warning("Configuration: %s", problem)

            source = self.read_source(args.path)
            if not source.strip():
                raise InvalidInputError("Please provide some code to analyze")

            language = self.resolve_language(config, args.path)
            if Language.resolve(language) is None:
                self.error_handler.logger.warning(
                    "Unknown language '%s', using default rule sets", language
                )
            if args.verbose:
                stats = source_stats(source)
                sys.stderr.write(
                    f"Analyzing {args.path} as {language} "
                    f"({stats['lines']} lines, {stats['characters']} characters)\n"
                )

            result = analyze(
                source,
                language,
                config.to_options(),
                disabled_detectors=config.disabled_detectors(),
            )
            self.write_report(result, config, args)

            if args.fix or args.fix_output:
                self.write_fixes(source, result, args)

            return self.exit_code(result)

        except KeyboardInterrupt:
            sys.stderr.write("\nAnalysis interrupted by user\n")
            return EXIT_INTERRUPTED
        except BugCheckError as e:
            sys.stderr.write(f"Error: {e}\n")
            if args.verbose:
                traceback.print_exc()
            return EXIT_INVALID

    def write_report(
        self, result: AnalysisResult, config: ConfigManager, args: argparse.Namespace
    ) -> None:
        """Render the result with the configured reporter."""
        output = config.get_output_config()
        min_severity = output.get("min_severity")
        if min_severity:
            result = AnalysisResult(
                issues=tuple(self.filter_by_severity(result.issues, min_severity)),
                readability=result.readability,
                complexity=result.complexity,
                timestamp=result.timestamp,
                language=result.language,
                detectors_run=result.detectors_run,
            )

        reporter_config: dict[str, Any] = {
            "use_colors": output.get("use_colors", True),
            "show_suggestions": output.get("show_suggestions", True),
            "summary_only": args.summary_only,
            "artifact_uri": "stdin" if args.path == "-" else args.path,
        }
        output_format = output.get("format") or "console"
        if output_format not in REPORTERS:
            raise ConfigurationError(f"Unsupported output format: {output_format}")
        reporter = create_reporter(output_format, reporter_config)

        destination = args.output or output.get("file")
        if destination:
            reporter.save_results(result, destination)
            if args.verbose:
                sys.stderr.write(f"Results saved to {destination}\n")
        else:
            reporter.print_results(result)

    def write_fixes(
        self, source: str, result: AnalysisResult, args: argparse.Namespace
    ) -> None:
        """Apply suggestions and write the fixed source."""
        applicable = count_applicable_fixes(source, result.issues)
        if not applicable:
            sys.stderr.write("No automatic fixes available\n")
            return

        destination = args.fix_output or args.path
        fixed = apply_fixes(source, result.issues)
        self.error_handler.write_text(destination, fixed)
        plural = "es" if applicable != 1 else ""
        sys.stderr.write(f"Applied {applicable} fix{plural}\n")

    @staticmethod
    def format_rules() -> str:
        """One block per detector listing its rule ids."""
        lines = []
        for detector_class in DETECTORS:
            lines.append(f"{detector_class.name}:")
            for rule_id, description in detector_class.get_rule_documentation().items():
                lines.append(f"  {rule_id}: {description}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def exit_code(result: AnalysisResult) -> int:
        """Map the most severe issue to a process exit code."""
        stats = result.get_summary_stats()["severity_breakdown"]
        if stats.get(Severity.CRITICAL.value):
            return EXIT_CRITICAL
        if stats.get(Severity.ERROR.value):
            return EXIT_ERRORS
        return EXIT_CLEAN


def main(argv: list[str] | None = None) -> int:
    """Main entry point for bugcheck CLI."""
    cli = BugCheckCLI()
    parser = cli.create_parser()
    args = parser.parse_args(argv)
    return cli.run_analysis(args)


if __name__ == "__main__":
    sys.exit(main())
