"""Comparative performance report across benchmarked strategies."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from sort_analyzer.core.models import PerformanceMetrics

_RULE_WIDTH = 80
_SECTION_WIDTH = 40


@dataclass(frozen=True, slots=True)
class PerformanceReport:
    created_at: str
    entries: tuple[PerformanceMetrics, ...]
    optimal: PerformanceMetrics

    def ratio_for(self, entry: PerformanceMetrics) -> float:
        """Average time of `entry` relative to the optimal algorithm's average."""

        baseline = self.optimal.average_execution_time
        if baseline == 0.0:
            return 1.0 if entry.average_execution_time == 0.0 else math.inf
        return entry.average_execution_time / baseline

    def ratios(self) -> list[float]:
        return [self.ratio_for(entry) for entry in self.entries]

    def to_dict(self) -> dict:
        return {
            "created_at": self.created_at,
            "optimal": self.optimal.algorithm_identifier,
            "algorithms": [
                {**entry.to_dict(), "relative_to_optimal": self.ratio_for(entry)}
                for entry in self.entries
            ],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    def to_markdown(self) -> str:
        lines: list[str] = []
        lines.append("# Algorithm Performance Report")
        lines.append("")
        lines.append(f"Generated: {self.created_at}")
        lines.append("")

        for entry in self.entries:
            lines.append(f"## {entry.algorithm_identifier}")
            lines.append("")
            lines.append(f"- Average execution time: {entry.average_execution_time:.3f} ms")
            lines.append(f"- Minimum execution time: {entry.minimum_execution_time:.3f} ms")
            lines.append(f"- Maximum execution time: {entry.maximum_execution_time:.3f} ms")
            lines.append(f"- Correctness validation: {_verdict(entry)}")
            lines.append("")

        lines.append("## Summary")
        lines.append("")
        lines.append(f"Optimal algorithm: **{self.optimal.algorithm_identifier}**")
        lines.append("")
        lines.append("| Algorithm | Average (ms) | Relative to optimal |")
        lines.append("|---|---|---|")
        for entry in self.entries:
            lines.append(
                f"| {entry.algorithm_identifier} | {entry.average_execution_time:.3f} "
                f"| {self.ratio_for(entry):.2f}x |"
            )

        return "\n".join(lines).rstrip() + "\n"


def _verdict(entry: PerformanceMetrics) -> str:
    return "PASSED" if entry.correctness_validation else "FAILED"


def select_optimal(metrics: Iterable[PerformanceMetrics]) -> PerformanceMetrics:
    """Returns the record with the lowest average; the earliest one wins a tie."""

    optimal: PerformanceMetrics | None = None
    for entry in metrics:
        if optimal is None or entry.average_execution_time < optimal.average_execution_time:
            optimal = entry
    if optimal is None:
        raise ValueError("cannot select an optimal algorithm from no metrics")
    return optimal


def build_report(metrics: Iterable[PerformanceMetrics]) -> PerformanceReport:
    entries = tuple(metrics)
    if not entries:
        raise ValueError("a performance report needs at least one metrics record")
    return PerformanceReport(
        created_at=datetime.now(timezone.utc).isoformat(),
        entries=entries,
        optimal=select_optimal(entries),
    )


def render_text(report: PerformanceReport) -> str:
    """Renders the report in the analyzer's console layout."""

    rule = "=" * _RULE_WIDTH
    lines: list[str] = []
    lines.append("")
    lines.append(rule)
    lines.append("COMPREHENSIVE ALGORITHM PERFORMANCE ANALYSIS REPORT")
    lines.append(rule)

    for entry in report.entries:
        lines.append("")
        lines.append(f"Algorithm: {entry.algorithm_identifier}")
        lines.append("-" * _SECTION_WIDTH)
        lines.append(f"Average Execution Time: {entry.average_execution_time:.3f} ms")
        lines.append(f"Minimum Execution Time: {entry.minimum_execution_time:.3f} ms")
        lines.append(f"Maximum Execution Time: {entry.maximum_execution_time:.3f} ms")
        lines.append(f"Correctness Validation: {_verdict(entry)}")

    lines.append("")
    lines.append(rule)
    lines.append("PERFORMANCE ANALYSIS SUMMARY")
    lines.append(rule)
    lines.append(f"Optimal Performance Algorithm: {report.optimal.algorithm_identifier}")
    lines.append(
        f"Performance Advantage: {report.optimal.average_execution_time:.2f} ms average execution"
    )
    lines.append("")
    lines.append("Relative Performance Analysis:")
    for entry in report.entries:
        lines.append(
            f"- {entry.algorithm_identifier}: {report.ratio_for(entry):.2f}x slower than optimal"
        )

    return "\n".join(lines) + "\n"
