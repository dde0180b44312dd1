"""
Visualization Package

Static PNG charts for benchmark results.
"""

from .charts import ChartGenerator, ChartOutput

__all__ = [
    "ChartGenerator",
    "ChartOutput",
]
