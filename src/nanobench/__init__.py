"""
nanobench - named timing marks and comparative statistics.

Provides a process-wide registry of marks and a text report of how
long each mark ran relative to the longest one:
  - mark(id)             : get (or create) a named mark
  - Mark                 : start / pause / stop / reset / diff timer
  - Bench                : registry access, filters and statistics
  - @watch               : accumulate a function's running time into a mark
  - watch_block()        : accumulate a code block's running time into a mark
  - statistics()         : snapshot of every mark's time and percent
  - report()             : fixed-width textual bar chart
  - summary()            : print a colored report to stdout
  - reset()              : remove every mark from the global registry

Marks use time.perf_counter, a monotonic clock.
"""

from typing import Optional

from .core.errors import (
    BenchError,
    AlreadyStartedError,
    NotStartedError,
    AlreadyPausedError,
    InvalidWidthError,
)
from .core.mark import GLOBAL_NAME, Mark, MarkState
from .core.registry import MarkRegistry, default_registry
from .core.statistics import MarkStatistic, Statistics
from .core.bench import Bench, default_bench

from .interfaces.decorators import watch, watch_block

from .output.formatter import print_report, render_statistics


def mark(mark_id: str) -> Mark:
    """Return the named mark from the global registry, creating it if needed."""
    return default_bench.get(mark_id)


def statistics(apply_filters: bool = True) -> dict[str, MarkStatistic]:
    """Return a snapshot of the global registry."""
    return default_bench.snapshot(apply_filters)


def report(width: int = 80) -> str:
    """Return the global registry statistics as a textual bar chart."""
    return default_bench.render(width)


def summary(width: Optional[int] = None) -> None:
    """Print a colored statistics report for the global registry."""
    print_report(default_bench, width)


def reset() -> None:
    """Remove all marks from the global registry."""
    default_bench.remove_all()


bench = default_bench

__all__ = [
    "mark",
    "statistics",
    "report",
    "summary",
    "reset",
    "bench",
    "watch",
    "watch_block",
    "print_report",
    "render_statistics",
    "Bench",
    "Mark",
    "MarkState",
    "MarkRegistry",
    "MarkStatistic",
    "Statistics",
    "GLOBAL_NAME",
    "default_registry",
    "BenchError",
    "AlreadyStartedError",
    "NotStartedError",
    "AlreadyPausedError",
    "InvalidWidthError",
]
