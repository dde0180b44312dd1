"""
Benchmark Charts

Grouped bar charts (list vs deque per operation) for each problem size,
written as PNG files next to the JSON/Markdown reports.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from listbench.benchmark.models import SizeReport
from listbench.benchmark.variants import CollectionVariant

# Consistent Color Scheme
COLORS = {
    CollectionVariant.LIST.value: "#3498db",   # Blue
    CollectionVariant.DEQUE.value: "#16a085",  # Teal
}


@dataclass
class ChartOutput:
    title: str
    png: bytes
    description: str = ""


class ChartGenerator:
    def __init__(self):
        self.logger = logging.getLogger(__name__)
        plt.style.use('ggplot')
        plt.rc('font', size=10)
        plt.rc('axes', titlesize=12)
        plt.rc('axes', labelsize=10)

    def _fig_to_png(self, fig) -> bytes:
        buf = io.BytesIO()
        fig.savefig(buf, format='png', bbox_inches='tight', dpi=100)
        plt.close(fig)
        return buf.getvalue()

    def _times_by_variant(self, report: SizeReport) -> Tuple[List[str], Dict[str, List[float]]]:
        operations: List[str] = []
        times: Dict[str, List[float]] = {v.value: [] for v in CollectionVariant}
        for m in report.measurements:
            if m.method_name not in operations:
                operations.append(m.method_name)
            times[m.list_type].append(m.time_in_millis)
        return operations, times

    def plot_size_report(self, report: SizeReport) -> Optional[ChartOutput]:
        """Grouped bar chart of one size's measurements, time in ms."""
        if not report.measurements:
            return None

        operations, times = self._times_by_variant(report)
        x = np.arange(len(operations))
        width = 0.38

        fig, ax = plt.subplots(figsize=(8, 4))
        for offset, variant in zip((-width / 2, width / 2), CollectionVariant):
            ax.bar(x + offset, times[variant.value], width,
                   label=variant.value, color=COLORS[variant.value])

        title = f"list vs deque, {report.size} operations"
        ax.set_title(title)
        ax.set_ylabel("Time (ms)")
        ax.set_xticks(x)
        ax.set_xticklabels(operations)
        ax.grid(axis='y', linestyle='--', alpha=0.5)
        ax.legend()

        return ChartOutput(
            title,
            self._fig_to_png(fig),
            "Elapsed time per operation for both collection variants.",
        )

    def save_size_report(self, report: SizeReport, output_dir: Path) -> Optional[Path]:
        """Write the chart for one size to ``benchmark_<size>.png``."""
        chart = self.plot_size_report(report)
        if chart is None:
            self.logger.warning(f"No measurements to chart for size {report.size}")
            return None

        output_path = output_dir / f"benchmark_{report.size}.png"
        output_path.write_bytes(chart.png)
        return output_path
