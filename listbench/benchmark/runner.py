import time
import logging
from datetime import datetime
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, MutableSequence, Optional, Sequence, Tuple

from .models import (
    BenchmarkSummary,
    Comparison,
    Measurement,
    OperationName,
    SizeReport,
)
from .variants import CollectionVariant, VariantOps, resolve_variant

logger = logging.getLogger("Benchmark")

DEFAULT_SIZES = (1000, 2000, 5000)

# Invocation order within one size: each operation on list, then on deque
OPERATION_ORDER = (
    OperationName.ADD,
    OperationName.ADD_FIRST,
    OperationName.GET,
    OperationName.DELETE_FIRST,
    OperationName.DELETE_LAST,
)
VARIANT_ORDER = (CollectionVariant.LIST, CollectionVariant.DEQUE)


# =============================================================================
# Timed loops
# =============================================================================
#
# Each loop works on a collection it is handed, so its effect on the
# collection can be inspected. Returns elapsed nanoseconds.

def _time_add(coll: MutableSequence, ops: VariantOps, count: int) -> int:
    start = time.perf_counter_ns()
    for i in range(count):
        coll.append(i)
    return time.perf_counter_ns() - start


def _time_add_first(coll: MutableSequence, ops: VariantOps, count: int) -> int:
    insert_head = ops.insert_head
    start = time.perf_counter_ns()
    for i in range(count):
        insert_head(coll, i)
    return time.perf_counter_ns() - start


def _time_get(coll: MutableSequence, ops: VariantOps, count: int) -> int:
    start = time.perf_counter_ns()
    for i in range(count):
        _ = coll[i % len(coll)]
    return time.perf_counter_ns() - start


def _time_delete_first(coll: MutableSequence, ops: VariantOps, count: int) -> int:
    remove_head = ops.remove_head
    start = time.perf_counter_ns()
    for _ in range(count):
        if coll:
            remove_head(coll)
    return time.perf_counter_ns() - start


def _time_delete_last(coll: MutableSequence, ops: VariantOps, count: int) -> int:
    remove_tail = ops.remove_tail
    start = time.perf_counter_ns()
    for _ in range(count):
        if coll:
            remove_tail(coll)
    return time.perf_counter_ns() - start


def _prefill(coll: MutableSequence, count: int) -> MutableSequence:
    coll.extend(range(count))
    return coll


def _measure(
    operation: OperationName,
    exemplar: Any,
    operations_count: int,
    timed_loop: Callable[[MutableSequence, VariantOps, int], int],
    prefill: int = 0,
) -> Measurement:
    if operations_count < 1:
        raise ValueError(f"operations_count must be positive, got {operations_count}")

    variant = resolve_variant(exemplar)
    coll = _prefill(variant.create(), prefill)

    elapsed = timed_loop(coll, variant.ops, operations_count)

    measurement = Measurement(
        method_name=operation.value,
        list_type=variant.value,
        operations_count=operations_count,
        execution_time_ns=elapsed,
        operation_type=operation.operation_type.value,
    )
    logger.debug(f"{measurement}")
    return measurement


# =============================================================================
# Public timing functions
# =============================================================================

def test_add(exemplar: Any, operations_count: int) -> Measurement:
    """Time appending ``operations_count`` values at the tail of an empty collection."""
    return _measure(OperationName.ADD, exemplar, operations_count, _time_add)


def test_add_first(exemplar: Any, operations_count: int) -> Measurement:
    """Time inserting ``operations_count`` values at position 0 of an empty collection."""
    return _measure(OperationName.ADD_FIRST, exemplar, operations_count, _time_add_first)


def test_get(exemplar: Any, operations_count: int) -> Measurement:
    """
    Time ``operations_count`` indexed reads.

    The collection is pre-filled with ``operations_count`` values and read
    at ``i % len(collection)``, so reads stay in bounds.
    """
    return _measure(
        OperationName.GET, exemplar, operations_count, _time_get,
        prefill=operations_count,
    )


def test_delete_first(exemplar: Any, operations_count: int) -> Measurement:
    """Time ``operations_count`` head removals from a collection of twice that size."""
    return _measure(
        OperationName.DELETE_FIRST, exemplar, operations_count, _time_delete_first,
        prefill=operations_count * 2,
    )


def test_delete_last(exemplar: Any, operations_count: int) -> Measurement:
    """Time ``operations_count`` tail removals from a collection of twice that size."""
    return _measure(
        OperationName.DELETE_LAST, exemplar, operations_count, _time_delete_last,
        prefill=operations_count * 2,
    )


# pytest would otherwise collect the timing functions above as tests
for _fn in (test_add, test_add_first, test_get, test_delete_first, test_delete_last):
    _fn.__test__ = False
del _fn

TIMING_FUNCTIONS: Dict[OperationName, Callable[[Any, int], Measurement]] = {
    OperationName.ADD: test_add,
    OperationName.ADD_FIRST: test_add_first,
    OperationName.GET: test_get,
    OperationName.DELETE_FIRST: test_delete_first,
    OperationName.DELETE_LAST: test_delete_last,
}


# =============================================================================
# Driver
# =============================================================================

def compare_measurements(
    measurements: Iterable[Measurement],
) -> Tuple[List[Comparison], List[str]]:
    """
    Pair list and deque measurements by operation name.

    Returns the comparisons, in first-seen operation order, and the names
    of operations skipped because either time was not strictly positive.

    Raises:
        ValueError: if an operation lacks its list or deque counterpart
    """
    grouped: Dict[str, Dict[str, Measurement]] = defaultdict(dict)
    for m in measurements:
        grouped[m.method_name][m.list_type] = m

    comparisons: List[Comparison] = []
    skipped: List[str] = []

    for operation, by_variant in grouped.items():
        missing = [v.value for v in VARIANT_ORDER if v.value not in by_variant]
        if missing:
            raise ValueError(
                f"No {', '.join(missing)} measurement to compare for '{operation}'"
            )

        list_ms = by_variant[CollectionVariant.LIST.value].time_in_millis
        deque_ms = by_variant[CollectionVariant.DEQUE.value].time_in_millis

        if list_ms > 0 and deque_ms > 0:
            comparisons.append(Comparison(operation, list_ms, deque_ms))
        else:
            logger.info(f"Comparison for '{operation}' skipped: too fast to measure")
            skipped.append(operation)

    return comparisons, skipped


class BenchmarkRunner:
    """
    Runs every timed operation against both collection variants
    for each configured problem size.
    """

    def __init__(self, sizes: Optional[Sequence[int]] = None):
        self.sizes: List[int] = list(DEFAULT_SIZES if sizes is None else sizes)
        for size in self.sizes:
            if size < 1:
                raise ValueError(f"Problem sizes must be positive, got {size}")
        self.reports: List[SizeReport] = []

    def run_size(self, size: int) -> SizeReport:
        """Run the ten measurements for one size."""
        logger.info(f"Running {len(OPERATION_ORDER) * len(VARIANT_ORDER)} measurements for size {size}")

        measurements = [
            TIMING_FUNCTIONS[operation](variant, size)
            for operation in OPERATION_ORDER
            for variant in VARIANT_ORDER
        ]
        comparisons, skipped = compare_measurements(measurements)

        report = SizeReport(
            size=size,
            measurements=measurements,
            comparisons=comparisons,
            skipped=skipped,
        )
        self.reports.append(report)
        return report

    def run(self) -> BenchmarkSummary:
        """Run all configured sizes and return the summary."""
        self.reports = []
        start = time.time()
        for size in self.sizes:
            self.run_size(size)
        return self.aggregate_results(time.time() - start)

    def aggregate_results(self, duration: float) -> BenchmarkSummary:
        """Collect the reports gathered so far into a summary."""
        return BenchmarkSummary(
            timestamp=datetime.now().isoformat(),
            duration=duration,
            sizes=[r.size for r in self.reports],
            reports=list(self.reports),
        )
