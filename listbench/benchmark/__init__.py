"""
Benchmark Package

Times list and deque over the fixed operation set and reports
the per-size comparison.
"""

from .models import (
    BenchmarkSummary,
    Comparison,
    Measurement,
    OperationName,
    OperationType,
    SizeReport,
)
from .variants import CollectionVariant, resolve_variant
from .runner import (
    DEFAULT_SIZES,
    BenchmarkRunner,
    compare_measurements,
    test_add,
    test_add_first,
    test_delete_first,
    test_delete_last,
    test_get,
)
from .reporting import ReportGenerator

__all__ = [
    "BenchmarkRunner",
    "BenchmarkSummary",
    "CollectionVariant",
    "Comparison",
    "DEFAULT_SIZES",
    "Measurement",
    "OperationName",
    "OperationType",
    "ReportGenerator",
    "SizeReport",
    "compare_measurements",
    "resolve_variant",
    "test_add",
    "test_add_first",
    "test_delete_first",
    "test_delete_last",
    "test_get",
]
