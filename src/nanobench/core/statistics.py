"""
Comparative statistics over the marks of a registry.

A snapshot pauses every running mark, reads each diff() relative to the
longest mark, then resumes exactly the marks it paused.
"""

import logging
from typing import Callable, Iterable, NamedTuple, Optional

from .mark import Mark, MarkState
from .registry import MarkRegistry, default_registry

logger = logging.getLogger(__name__)

Filter = Callable[[str, float, float], bool]


class MarkStatistic(NamedTuple):
    """Elapsed seconds of a mark and its share of the longest mark."""

    result: float
    percent: float


class Statistics:
    """
    Statistics view over a registry, holding its own filter list.

    Filters receive (id, result, percent) and must all return exactly True,
    not merely a truthy value, for a mark to appear in a snapshot. They are
    evaluated in insertion order and stop at the first rejection.
    """

    def __init__(self, registry: Optional[MarkRegistry] = None):
        """
        Args:
            registry: Registry to read; defaults to the process-wide default_registry
        """
        self._registry = default_registry if registry is None else registry
        self._filters: list[Filter] = []

    @property
    def registry(self) -> MarkRegistry:
        return self._registry

    def add_filter(self, predicate: Filter) -> "Statistics":
        """Register a filter predicate and return self for chaining."""
        if not callable(predicate):
            raise TypeError(f"filter must be callable, got {predicate!r}")
        self._filters.append(predicate)
        return self

    @property
    def filters(self) -> list[Filter]:
        """Return registered filters in insertion order."""
        return list(self._filters)

    def pause_all(self) -> list[Mark]:
        """Pause every running mark and return those marks, in order."""
        running = [mark for mark in self._registry if mark.state is MarkState.RUNNING]
        for mark in running:
            mark.pause()
        return running

    @staticmethod
    def resume_all(marks: Iterable[Mark]) -> None:
        """Restart marks previously returned by pause_all()."""
        for mark in marks:
            mark.start()

    def longest(self) -> Optional[Mark]:
        """Return the mark with the largest diff(), first one on ties."""
        longest: Optional[Mark] = None
        longest_diff = 0.0
        for mark in self._registry:
            value = mark.diff()
            if longest is None or value > longest_diff:
                longest = mark
                longest_diff = value
        return longest

    def snapshot(self, apply_filters: bool = True) -> dict[str, MarkStatistic]:
        """
        Compute elapsed time and percent of the longest mark for every mark.

        Args:
            apply_filters: Apply the registered filters to each mark

        Returns:
            Dict mapping mark id to MarkStatistic, in registry order
        """
        with self._registry.lock:
            if not self._registry.count():
                return {}

            paused = self.pause_all()
            try:
                maximum = self.longest().diff()
                out: dict[str, MarkStatistic] = {}
                for mark_id, mark in self._registry.items():
                    result = mark.diff()
                    percent = result * 100 / maximum if maximum else 0.0

                    if apply_filters and not all(
                        predicate(mark_id, result, percent) is True
                        for predicate in self._filters
                    ):
                        continue

                    out[mark_id] = MarkStatistic(result, percent)
            finally:
                self.resume_all(paused)

        logger.debug("snapshot of %d/%d marks", len(out), self._registry.count())
        return out
