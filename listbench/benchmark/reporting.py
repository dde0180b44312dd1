import json
from pathlib import Path
from typing import List

from .models import BenchmarkSummary, Comparison, Measurement, SizeReport

BANNER = "=== list vs deque performance comparison ==="

HEADER_FORMAT = "%-15s | %-12s | %10s | %12s | %-8s"
ROW_FORMAT = "%-15s | %-12s | %10d | %12.3f | %-8s"
COMPARISON_FORMAT = "%-12s: list: %6.3f ms, deque: %6.3f ms | Faster: %-10s (%.2fx)"


class ReportGenerator:
    """Generates console tables and report files from benchmark results."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    # ------------------------------------------------------------------
    # Console
    # ------------------------------------------------------------------

    @staticmethod
    def render_size_header(size: int) -> str:
        return f"Testing with {size} operations:\n" + "=" * 80

    @staticmethod
    def render_table(measurements: List[Measurement]) -> str:
        lines = [
            HEADER_FORMAT % ("Method", "List Type", "Operations", "Time (ms)", "Type"),
            "-" * 75,
        ]
        for m in measurements:
            lines.append(ROW_FORMAT % (
                m.method_name,
                m.list_type,
                m.operations_count,
                m.time_in_millis,
                m.operation_type,
            ))
        return "\n".join(lines)

    @staticmethod
    def render_comparisons(comparisons: List[Comparison]) -> str:
        lines = ["", "Performance comparison:", "-" * 50]
        for c in comparisons:
            lines.append(COMPARISON_FORMAT % (
                c.operation, c.list_ms, c.deque_ms, c.faster, c.ratio,
            ))
        return "\n".join(lines)

    @classmethod
    def render_size_report(cls, report: SizeReport) -> str:
        """Full console block for one problem size."""
        return "\n".join([
            cls.render_size_header(report.size),
            cls.render_table(report.measurements),
            cls.render_comparisons(report.comparisons),
        ])

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def save_json(self, summary: BenchmarkSummary) -> Path:
        """Save detailed results to JSON."""
        output_path = self.output_dir / "benchmark_results.json"

        with open(output_path, "w") as f:
            json.dump(summary.to_dict(), f, indent=2)

        return output_path

    def generate_markdown(self, summary: BenchmarkSummary) -> Path:
        """Generate a Markdown summary report."""
        output_path = self.output_dir / "benchmark_report.md"

        lines = [
            "# list vs deque Benchmark Report",
            f"\n**Timestamp:** {summary.timestamp}",
            f"**Duration:** {summary.duration:.1f}s",
            f"**Sizes:** {', '.join(str(s) for s in summary.sizes)}",
            f"**Measurements:** {summary.total_measurements}",
        ]

        for report in summary.reports:
            lines.extend([
                "",
                f"## {report.size} operations",
                "",
                "| Method | List Type | Operations | Time (ms) | Type |",
                "|--------|-----------|------------|-----------|------|",
            ])
            for m in report.measurements:
                lines.append(
                    f"| {m.method_name} | {m.list_type} | {m.operations_count} | "
                    f"{m.time_in_millis:.3f} | {m.operation_type} |"
                )

            lines.extend([
                "",
                "| Method | list (ms) | deque (ms) | Faster | Speedup |",
                "|--------|-----------|------------|--------|---------|",
            ])
            for c in report.comparisons:
                lines.append(
                    f"| {c.operation} | {c.list_ms:.3f} | {c.deque_ms:.3f} | "
                    f"{c.faster} | {c.ratio:.2f}x |"
                )

            if report.skipped:
                lines.extend([
                    "",
                    f"Not compared (too fast to measure): {', '.join(report.skipped)}",
                ])

        with open(output_path, "w") as f:
            f.write("\n".join(lines))

        return output_path
