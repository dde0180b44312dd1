"""
Benchmark Settings

Problem sizes and output options, resolved from defaults, environment
variables and an optional YAML file.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from listbench.benchmark.runner import DEFAULT_SIZES as _RUNNER_SIZES

DEFAULT_SIZES: List[int] = list(_RUNNER_SIZES)

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def parse_sizes(value: Union[int, str, Sequence[Any]]) -> List[int]:
    """
    Parse problem sizes from a comma-separated string, a sequence,
    or a single integer.

    Raises:
        ValueError: on empty or missing input, non-integers or sizes below 1
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid problem size '{value}'")
    if isinstance(value, int):
        items: List[Any] = [value]
    elif isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise ValueError(f"Problem sizes must be a list or comma-separated string, got {value!r}")

    sizes: List[int] = []
    for item in items:
        text = str(item).strip()
        if not text:
            continue
        try:
            size = int(text)
        except ValueError:
            raise ValueError(f"Invalid problem size '{text}'") from None
        if size < 1:
            raise ValueError(f"Problem sizes must be positive, got {size}")
        sizes.append(size)

    if not sizes:
        raise ValueError("At least one problem size is required")
    return sizes


@dataclass
class Settings:
    """Benchmark settings."""

    sizes: List[int] = field(default_factory=lambda: list(DEFAULT_SIZES))

    # Report files are only written when an output directory is set
    output_dir: Optional[Path] = None
    charts: bool = False
    use_color: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        sizes = os.getenv("LISTBENCH_SIZES")
        output = os.getenv("LISTBENCH_OUTPUT")
        return cls(
            sizes=parse_sizes(sizes) if sizes else list(DEFAULT_SIZES),
            output_dir=Path(output) if output else None,
            charts=_as_bool(os.getenv("LISTBENCH_CHARTS", "")),
            use_color="NO_COLOR" not in os.environ,
        )

    @classmethod
    def from_yaml(cls, path: Path, base: Optional["Settings"] = None) -> "Settings":
        """
        Load settings from a YAML file, on top of ``base`` (defaults if None).

        Recognized keys: ``sizes``, ``output``, ``charts``. A relative
        ``output`` is resolved against the YAML file's directory.
        """
        if not path.exists():
            raise ValueError(f"Config file not found: {path}")

        with open(path, "r") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        settings = base if base is not None else cls()
        changes: Dict[str, Any] = {}

        if "sizes" in data:
            changes["sizes"] = parse_sizes(data["sizes"])
        if data.get("output"):
            output = Path(data["output"])
            if not output.is_absolute():
                output = path.parent / output
            changes["output_dir"] = output
        if "charts" in data:
            changes["charts"] = _as_bool(data["charts"])

        return replace(settings, **changes)
