"""
list vs deque Benchmark

Times append, head insertion, indexed read and head/tail removal on
``list`` and ``collections.deque`` for each problem size, then prints a
table and a speed comparison per operation.

Usage:
    listbench                                   Default sizes 1000,2000,5000
    listbench --sizes 100,10000
    listbench --config benchmarks/suite.yaml
    listbench --output results/benchmark --charts
"""

import sys
import argparse
import logging
import time
from pathlib import Path
from typing import List, Optional

from listbench.benchmark import BenchmarkRunner, ReportGenerator
from listbench.benchmark.reporting import BANNER
from listbench.config import Settings, parse_sizes


# =============================================================================
# Terminal output helpers
# =============================================================================

class Colors:
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls):
        for attr in ["CYAN", "GREEN", "YELLOW", "RED", "BOLD", "RESET"]:
            setattr(cls, attr, "")


def _c(text: str, color: str) -> str:
    return f"{color}{text}{Colors.RESET}"


def print_success(msg: str) -> None:
    print(f"  {_c('✓', Colors.GREEN)} {msg}")


def print_error(msg: str) -> None:
    print(f"  {_c('✗', Colors.RED)} {msg}", file=sys.stderr)


# =============================================================================
# CLI
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="listbench",
        description="list vs deque performance comparison",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s                                  Default sizes (1000,2000,5000)
  %(prog)s --sizes 100,10000                Custom problem sizes
  %(prog)s --config benchmarks/suite.yaml   From YAML config
  %(prog)s -o results/benchmark --charts    Also write JSON, Markdown and PNG
""",
    )

    parser.add_argument(
        "--sizes",
        help="Comma-separated problem sizes (default: 1000,2000,5000)",
    )
    parser.add_argument(
        "--config", type=Path, metavar="FILE",
        help="YAML configuration file (sizes, output, charts)",
    )

    out = parser.add_argument_group("Output")
    out.add_argument(
        "--output", "-o", metavar="DIR",
        help="Also write benchmark_results.json and benchmark_report.md to DIR",
    )
    out.add_argument(
        "--charts", action="store_true",
        help="With --output, write one PNG chart per size",
    )
    out.add_argument(
        "--no-color", action="store_true",
        help="Disable colored banners",
    )

    runtime = parser.add_argument_group("Runtime")
    runtime.add_argument("--verbose", "-v", action="store_true",
                         help="Verbose output with debug logging")

    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Environment, then YAML file, then CLI flags."""
    settings = Settings.from_env()

    if args.config:
        settings = Settings.from_yaml(args.config, base=settings)

    if args.sizes:
        settings.sizes = parse_sizes(args.sizes)
    if args.output:
        settings.output_dir = Path(args.output)
    if args.charts:
        settings.charts = True
    if args.no_color:
        settings.use_color = False

    return settings


def write_reports(runner: BenchmarkRunner, settings: Settings, duration: float) -> None:
    output_dir = settings.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    summary = runner.aggregate_results(duration)
    reporter = ReportGenerator(output_dir)
    paths: List[Path] = [
        reporter.save_json(summary),
        reporter.generate_markdown(summary),
    ]

    if settings.charts:
        from listbench.visualization import ChartGenerator

        charts = ChartGenerator()
        for report in summary.reports:
            path = charts.save_size_report(report, output_dir)
            if path is not None:
                paths.append(path)

    print("Reports saved to:")
    for path in paths:
        print_success(str(path))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # --- Logging ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        settings = resolve_settings(args)
    except ValueError as e:
        print_error(str(e))
        return 1

    if not settings.use_color:
        Colors.disable()

    if settings.charts and settings.output_dir is None:
        logging.getLogger("Benchmark").warning("--charts has no effect without --output")

    # --- Run ---
    print(_c(BANNER, Colors.CYAN + Colors.BOLD))
    print()

    runner = BenchmarkRunner(sizes=settings.sizes)
    t0 = time.time()
    for size in settings.sizes:
        report = runner.run_size(size)
        print(ReportGenerator.render_size_report(report))
        print()
    duration = time.time() - t0

    # --- Reports ---
    if settings.output_dir is not None:
        write_reports(runner, settings, duration)

    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(f"\n{_c('Benchmark interrupted by user.', Colors.YELLOW)}")
        sys.exit(130)


if __name__ == "__main__":
    run()
