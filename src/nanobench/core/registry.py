"""
Keyed store of all marks created during a session.

Marks are created lazily on first reference by name.
Designed to be injected as a singleton or scoped instance.
"""

import logging
import threading
from typing import Iterator, Optional

from .mark import GLOBAL_NAME, Clock, Mark

logger = logging.getLogger(__name__)


class MarkRegistry:
    """
    Mapping of mark id to Mark, in insertion order.

    The first reference through an empty registry also creates and starts
    the reserved global mark, so its diff() approximates the registry
    lifetime. All marks share the registry lock.
    """

    def __init__(self, clock: Optional[Clock] = None, auto_global: bool = True):
        """
        Initialize with an empty mark mapping.

        Args:
            clock: Clock handed to every mark created here; defaults to perf_counter
            auto_global: Create and start the global mark on first reference
        """
        self._marks: dict[str, Mark] = {}
        self._clock = clock
        self._auto_global = auto_global
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Return the lock guarding this registry and its marks."""
        return self._lock

    def _create(self, mark_id: str) -> Mark:
        mark = Mark(mark_id, clock=self._clock, lock=self._lock)
        self._marks[mark_id] = mark
        logger.debug("created mark %r", mark_id)
        return mark

    def get(self, mark_id: str) -> Mark:
        """Return the mark for mark_id, creating an idle one if needed."""
        with self._lock:
            if not self._marks and self._auto_global:
                self._create(GLOBAL_NAME).start()

            mark = self._marks.get(mark_id)
            if mark is None:
                mark = self._create(mark_id)
            return mark

    def exists(self, mark_id: str) -> bool:
        """Return True if a mark is registered under mark_id."""
        return mark_id in self._marks

    def remove(self, mark_id: str) -> None:
        """Remove one mark; unknown ids are ignored."""
        with self._lock:
            self._marks.pop(mark_id, None)

    def remove_all(self) -> None:
        """Remove every mark, including the global one."""
        with self._lock:
            self._marks.clear()
        logger.debug("registry cleared")

    def count(self) -> int:
        """Return the number of registered marks."""
        return len(self._marks)

    def items(self) -> Iterator[tuple[str, Mark]]:
        """Yield (id, mark) pairs in insertion order."""
        yield from list(self._marks.items())

    def __iter__(self) -> Iterator[Mark]:
        yield from list(self._marks.values())

    def __getitem__(self, mark_id: str) -> Mark:
        return self.get(mark_id)

    def __contains__(self, mark_id: object) -> bool:
        return mark_id in self._marks

    def __delitem__(self, mark_id: str) -> None:
        self.remove(mark_id)

    def __len__(self) -> int:
        return self.count()


# Module-level registry shared by every Bench created without its own.
default_registry = MarkRegistry()
