"""
Named timer with start/pause/stop/reset semantics.

Provides the lowest-level timing primitive used by the registry
and the statistics layer. Paused time is excluded from diff().
"""

import enum
import threading
import time
from typing import Callable, Optional

from .errors import AlreadyPausedError, AlreadyStartedError, NotStartedError

Clock = Callable[[], float]

GLOBAL_NAME = "__global__"


class MarkState(enum.Enum):
    """The three states a mark can be in."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class Mark:
    """
    A single named timer tracking active (non-paused) elapsed time.

    Idle -> start() -> Running -> pause() -> Paused -> start() -> Running
    Running/Paused -> stop() -> Idle (timing fields kept for diff())

    Uses time.perf_counter by default, which is monotonic within a
    process run. Lifecycle methods return self for chaining.
    """

    def __init__(
        self,
        mark_id: Optional[str] = None,
        clock: Optional[Clock] = None,
        lock: Optional[threading.RLock] = None,
    ):
        """
        Initialize an idle mark.

        Args:
            mark_id: Identifier of this mark, None for an unnamed mark
            clock: Callable returning seconds as a float; defaults to perf_counter
            lock: Lock shared with the owning registry; a private one otherwise
        """
        self._id = mark_id
        self._clock = clock or time.perf_counter
        self._lock = lock or threading.RLock()
        self.start_time = 0.0
        self.stop_time = 0.0
        self.pause_accumulated = 0.0
        self._started = False
        self._paused = False

    @property
    def id(self) -> Optional[str]:
        """Return the mark identifier."""
        return self._id

    @property
    def started(self) -> bool:
        """True between a start() and its matching stop()."""
        return self._started

    @property
    def paused(self) -> bool:
        """True while suspended by pause()."""
        return self._paused

    @property
    def state(self) -> MarkState:
        if self._paused:
            return MarkState.PAUSED
        if self._started:
            return MarkState.RUNNING
        return MarkState.IDLE

    def is_running(self) -> bool:
        """Alias of the started property."""
        return self._started

    def start(self) -> "Mark":
        """
        Start the mark, or resume it when paused.

        Resuming credits the pause duration to pause_accumulated and keeps
        start_time. Any other start begins a fresh run-cycle.

        Raises:
            AlreadyStartedError: if the mark is running
        """
        with self._lock:
            if self._started and not self._paused:
                raise AlreadyStartedError(self._id)

            if self._paused:
                self.pause_accumulated += self._clock() - self.stop_time
            else:
                self.reset()
                self.start_time = self._clock()

            self._started = True
            self._paused = False
        return self

    def stop(self, silent: bool = False) -> "Mark":
        """
        Stop a running or paused mark.

        Args:
            silent: Return quietly instead of raising when the mark is idle

        Raises:
            NotStartedError: if the mark is idle and silent is False
        """
        with self._lock:
            if not self._started:
                if not silent:
                    raise NotStartedError(self._id, "stop")
                return self

            self.stop_time = self._clock()
            self._started = False
            self._paused = False
        return self

    def try_stop(self) -> "Mark":
        """Stop the mark if it is started, otherwise do nothing."""
        return self.stop(silent=True)

    def pause(self, silent: bool = False) -> "Mark":
        """
        Suspend a running mark until the next start().

        stop_time records the suspension point.

        Args:
            silent: Return quietly instead of raising on an idle or paused mark

        Raises:
            NotStartedError: if the mark is idle and silent is False
            AlreadyPausedError: if the mark is paused and silent is False
        """
        with self._lock:
            if not self._started:
                if not silent:
                    raise NotStartedError(self._id, "pause")
                return self

            if self._paused:
                if not silent:
                    raise AlreadyPausedError(self._id)
                return self

            self.stop_time = self._clock()
            self._paused = True
        return self

    def try_pause(self) -> "Mark":
        """Pause the mark if it is running, otherwise do nothing."""
        return self.pause(silent=True)

    def reset(self) -> "Mark":
        """Clear all timing fields and return to idle."""
        with self._lock:
            self.start_time = 0.0
            self.stop_time = 0.0
            self.pause_accumulated = 0.0
            self._started = False
            self._paused = False
        return self

    def diff(self) -> float:
        """
        Return elapsed seconds, excluding paused time.

        A running mark reads the clock, so the value keeps growing.
        """
        if not self._started or self._paused:
            return self.stop_time - self.start_time - self.pause_accumulated
        return self._clock() - self.start_time - self.pause_accumulated

    def compare_to(self, other: "Mark") -> int:
        """Return -1, 0 or 1 comparing diff() of self and other."""
        a = self.diff()
        b = other.diff()
        if a < b:
            return -1
        if a == b:
            return 0
        return 1

    def __enter__(self) -> "Mark":
        """Start timing on context entry."""
        return self.start()

    def __exit__(self, *_) -> None:
        """Stop timing on context exit."""
        self.stop(silent=True)

    def __str__(self) -> str:
        return str(self.diff())

    def __repr__(self) -> str:
        return f"<Mark {self._id!r} {self.state.value} {self.diff():.6f}s>"
