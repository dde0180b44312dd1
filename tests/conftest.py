"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the listbench test suite.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "runner"        # Run only runner tests
    pytest tests/ --quick            # Skip slow tests
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from listbench.benchmark.models import Measurement, SizeReport


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Environment
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's LISTBENCH_* settings out of the tests."""
    for name in ("LISTBENCH_SIZES", "LISTBENCH_OUTPUT", "LISTBENCH_CHARTS", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Measurement Fixtures
# =============================================================================

@pytest.fixture
def make_measurement():
    """Factory for measurements with sensible defaults."""

    def _make(
        method: str = "add",
        list_type: str = "list",
        count: int = 100,
        time_ns: int = 1_000_000,
        category: str = "add",
    ) -> Measurement:
        return Measurement(method, list_type, count, time_ns, category)

    return _make


@pytest.fixture
def sample_report(make_measurement) -> SizeReport:
    """Report for size 100 with one compared and one skipped operation."""
    from listbench.benchmark.runner import compare_measurements

    measurements = [
        make_measurement("add", "list", time_ns=2_000_000),
        make_measurement("add", "deque", time_ns=4_000_000),
        make_measurement("get", "list", time_ns=0, category="get"),
        make_measurement("get", "deque", time_ns=3_000_000, category="get"),
    ]
    comparisons, skipped = compare_measurements(measurements)
    return SizeReport(
        size=100,
        measurements=measurements,
        comparisons=comparisons,
        skipped=skipped,
    )
