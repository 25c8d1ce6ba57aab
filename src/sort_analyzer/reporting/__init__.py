"""Report generation from benchmark results."""

from .console import ConsoleProgressBar, NullProgressReporter, StreamReportSink
from .report import PerformanceReport, build_report, render_text, select_optimal

__all__ = [
	"PerformanceReport",
	"build_report",
	"render_text",
	"select_optimal",
	"ConsoleProgressBar",
	"NullProgressReporter",
	"StreamReportSink",
]
