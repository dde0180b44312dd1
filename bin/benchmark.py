#!/usr/bin/env python3
"""
list vs deque Benchmark

Runs the benchmark from a source checkout without installing it.

Usage:
    python bin/benchmark.py
    python bin/benchmark.py --sizes 1000,2000 --output results/benchmark --charts
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from listbench.cli import run


if __name__ == "__main__":
    run()
