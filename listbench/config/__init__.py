"""
Configuration Package

Benchmark settings from defaults, environment and YAML.
"""

from .settings import DEFAULT_SIZES, Settings, parse_sizes

__all__ = [
    "DEFAULT_SIZES",
    "Settings",
    "parse_sizes",
]
