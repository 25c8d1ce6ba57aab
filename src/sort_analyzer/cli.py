"""Command-line interface for running the sorting algorithm analysis."""

from __future__ import annotations

import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from typing import Sequence, TextIO

import structlog

from sort_analyzer.algorithms import all_strategies
from sort_analyzer.benchmarks import BenchmarkRunner
from sort_analyzer.core.tasks import ProgressReporter, ReportSink
from sort_analyzer.reporting import (
    ConsoleProgressBar,
    NullProgressReporter,
    PerformanceReport,
    StreamReportSink,
    build_report,
    render_text,
)
from sort_analyzer.shared import BenchmarkConfig, ConfigurationError, configure_logging

_RULE = "=" * 80


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _build_parser() -> ArgumentParser:
    defaults = BenchmarkConfig.default()
    parser = ArgumentParser(
        prog="sort-analyzer",
        description="Benchmark bubble, selection and insertion sort on random integer datasets.",
    )
    parser.add_argument(
        "--size",
        type=_non_negative_int,
        default=defaults.dataset_size,
        help=f"Number of elements per dataset (default: {defaults.dataset_size})",
    )
    parser.add_argument(
        "--iterations",
        type=_positive_int,
        default=defaults.iterations,
        help=f"Number of timed runs per algorithm (default: {defaults.iterations})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible datasets (default: fresh entropy per dataset)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json", "md"],
        default="text",
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Does not draw progress bars",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Shows detailed logs",
    )
    return parser


def _render(report: PerformanceReport, fmt: str) -> str:
    if fmt == "json":
        return report.to_json()
    if fmt == "md":
        return report.to_markdown()
    return render_text(report)


def _print_banner(config: BenchmarkConfig, console: TextIO) -> None:
    print("PROFESSIONAL ALGORITHM SORTING ANALYZER", file=console)
    print(_RULE, file=console)
    print("Initializing comprehensive sorting algorithm performance analysis...", file=console)
    print(f"Dataset Configuration: {config.dataset_size} elements per test", file=console)
    print(f"Iteration Configuration: {config.iterations} runs per algorithm", file=console)


def _print_closing(console: TextIO) -> None:
    print("", file=console)
    print(_RULE, file=console)
    print("PROGRAM EXECUTION COMPLETED SUCCESSFULLY", file=console)
    print("All algorithms executed and analyzed without errors.", file=console)
    print(_RULE, file=console)


def _run_analysis(
    config: BenchmarkConfig,
    *,
    fmt: str = "text",
    show_progress: bool = True,
    sink: ReportSink | None = None,
    console: TextIO | None = None,
) -> int:
    logger = structlog.get_logger(__name__)
    # Machine-readable reports own stdout; everything else goes to stderr.
    if console is None:
        console = sys.stdout if fmt == "text" else sys.stderr
    sink = sink or StreamReportSink(sys.stdout)

    progress: ProgressReporter
    if show_progress:
        progress = ConsoleProgressBar(console, width=config.progress_bar_width)
    else:
        progress = NullProgressReporter()

    _print_banner(config, console)
    runner = BenchmarkRunner.from_config(config, progress_reporter=progress)

    results = []
    for strategy in all_strategies():
        print(f"\nAnalyzing {strategy.name} Algorithm Performance:", file=console)
        print(
            f"Executing {config.iterations} iterations with {config.dataset_size} elements...",
            file=console,
        )
        results.append(runner.measure(strategy))
        print("✓ Analysis Complete", file=console)

    report = build_report(results)
    logger.info(
        "report-ready",
        optimal=report.optimal.algorithm_identifier,
        algorithms=len(report.entries),
        format=fmt,
    )
    sink.emit(_render(report, fmt))
    _print_closing(console)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args: Namespace = parser.parse_args(argv)
    configure_logging(level=10 if args.verbose else 20)

    try:
        config = BenchmarkConfig(
            dataset_size=args.size,
            iterations=args.iterations,
            seed=args.seed,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    return _run_analysis(config, fmt=args.format, show_progress=not args.no_progress)


if __name__ == "__main__":
    sys.exit(main())
