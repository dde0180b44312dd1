"""
listbench

Microbenchmark harness comparing Python's two built-in sequence
collections, ``list`` and ``collections.deque``, over append, head
insertion, indexed read and head/tail removal.

Usage:
    from listbench.benchmark import BenchmarkRunner, ReportGenerator

    summary = BenchmarkRunner(sizes=[1000, 2000]).run()
    for report in summary.reports:
        print(ReportGenerator.render_size_report(report))
"""

__version__ = "1.0.0"
