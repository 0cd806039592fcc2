"""
Bench: one object to reach marks, filter them and draw statistics.

Usage:
    bench = Bench()
    bench.get("parse").start()
    ...
    bench.parse.stop()              # attribute access works too
    bench.add_filter(lambda mark_id, result, percent: percent > 5)
    print(bench.render(width=100))
"""

from typing import Iterator, Optional

from .mark import Mark
from .registry import MarkRegistry
from .statistics import Statistics
from ..output.formatter import render_statistics


class Bench(Statistics):
    """
    Statistics view with direct access to the registry's marks.

    Every Bench built without a registry shares the process-wide
    default_registry, so marks are global while filters stay per instance.

    Attribute access (bench.parse) only reaches marks whose id is not
    already a Bench member: ids such as "render", "count", "filters" or
    "registry" need bench.get("render") or bench["render"].
    """

    def __init__(self, registry: Optional[MarkRegistry] = None):
        """
        Args:
            registry: Registry to use; defaults to the process-wide default_registry
        """
        super().__init__(registry)

    def get(self, mark_id: str) -> Mark:
        """Return the mark for mark_id, creating it if needed."""
        return self.registry.get(mark_id)

    def exists(self, mark_id: str) -> bool:
        return self.registry.exists(mark_id)

    def remove(self, mark_id: str) -> None:
        self.registry.remove(mark_id)

    def remove_all(self) -> None:
        self.registry.remove_all()

    def count(self) -> int:
        return self.registry.count()

    def render(self, width: int = 80) -> str:
        """Return the filtered statistics as a textual bar chart."""
        return render_statistics(self, width)

    def __getattr__(self, name: str) -> Mark:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __getitem__(self, mark_id: str) -> Mark:
        return self.get(mark_id)

    def __contains__(self, mark_id: object) -> bool:
        return mark_id in self.registry

    def __delitem__(self, mark_id: str) -> None:
        self.remove(mark_id)

    def __iter__(self) -> Iterator[Mark]:
        return iter(self.registry)

    def __len__(self) -> int:
        return self.count()

    def __str__(self) -> str:
        return self.render()


# Module-level default bench used by all convenience interfaces.
default_bench = Bench()
