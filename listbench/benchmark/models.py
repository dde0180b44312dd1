from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, Any


class OperationType(Enum):
    """Coarse grouping of timed operations for reporting."""
    ADD = "add"
    GET = "get"
    DELETE = "delete"


class OperationName(Enum):
    """The five timed operations, in report order."""
    ADD = "add"                      # append at tail
    ADD_FIRST = "add_first"          # insert at head
    GET = "get"                      # indexed read
    DELETE_FIRST = "delete_first"    # remove head
    DELETE_LAST = "delete_last"      # remove tail

    @property
    def operation_type(self) -> OperationType:
        return _OPERATION_TYPES[self]


_OPERATION_TYPES = {
    OperationName.ADD: OperationType.ADD,
    OperationName.ADD_FIRST: OperationType.ADD,
    OperationName.GET: OperationType.GET,
    OperationName.DELETE_FIRST: OperationType.DELETE,
    OperationName.DELETE_LAST: OperationType.DELETE,
}


@dataclass(frozen=True)
class Measurement:
    """Single timed run of one operation against one collection variant."""
    method_name: str
    list_type: str
    operations_count: int
    execution_time_ns: int
    operation_type: str

    def __post_init__(self):
        if self.operations_count < 1:
            raise ValueError(
                f"operations_count must be positive, got {self.operations_count}"
            )
        if self.execution_time_ns < 0:
            raise ValueError(
                f"execution_time_ns must be non-negative, got {self.execution_time_ns}"
            )

    @property
    def time_in_millis(self) -> float:
        return self.execution_time_ns / 1_000_000

    def __str__(self) -> str:
        return "%-15s | %-12s | %10d | %12.3f ms | %-8s" % (
            self.method_name,
            self.list_type,
            self.operations_count,
            self.time_in_millis,
            self.operation_type,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["time_ms"] = self.time_in_millis
        return data


@dataclass(frozen=True)
class Comparison:
    """Same-size speed comparison of the two variants for one operation."""
    operation: str
    list_ms: float
    deque_ms: float

    @property
    def faster(self) -> str:
        # Ties go to deque
        return "list" if self.list_ms < self.deque_ms else "deque"

    @property
    def ratio(self) -> float:
        return max(self.list_ms, self.deque_ms) / min(self.list_ms, self.deque_ms)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "list_ms": self.list_ms,
            "deque_ms": self.deque_ms,
            "faster": self.faster,
            "ratio": self.ratio,
        }


@dataclass
class SizeReport:
    """All measurements and comparisons for one problem size."""
    size: int
    measurements: List[Measurement] = field(default_factory=list)
    comparisons: List[Comparison] = field(default_factory=list)

    # Operations whose comparison was omitted (a time of zero)
    skipped: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "measurements": [m.to_dict() for m in self.measurements],
            "comparisons": [c.to_dict() for c in self.comparisons],
            "skipped": list(self.skipped),
        }


@dataclass
class BenchmarkSummary:
    """Complete benchmark summary."""
    timestamp: str
    duration: float
    sizes: List[int] = field(default_factory=list)
    reports: List[SizeReport] = field(default_factory=list)

    @property
    def total_measurements(self) -> int:
        return sum(len(r.measurements) for r in self.reports)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp,
            "duration": self.duration,
            "sizes": self.sizes,
            "total_measurements": self.total_measurements,
            "reports": [r.to_dict() for r in self.reports],
        }
