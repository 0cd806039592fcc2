"""
Exceptions raised by marks and the statistics renderer.

Every error is a usage error raised at the offending call.
None of them are retried or recovered internally.
"""

from typing import Optional

UNNAMED_MARK = "<unnamed>"


class BenchError(Exception):
    """Base class for all nanobench errors."""

    def __init__(self, message: str, mark_id: Optional[str] = None):
        super().__init__(message)
        self.mark_id = mark_id


def _label(mark_id: Optional[str]) -> str:
    return UNNAMED_MARK if mark_id is None else repr(mark_id)


class AlreadyStartedError(BenchError, RuntimeError):
    """Raised when start() is called on a running mark."""

    def __init__(self, mark_id: Optional[str]):
        super().__init__(
            f"Cannot start the {_label(mark_id)} mark, because it is started.",
            mark_id,
        )


class NotStartedError(BenchError, RuntimeError):
    """Raised when stop() or pause() is called on an idle mark."""

    def __init__(self, mark_id: Optional[str], action: str = "stop"):
        super().__init__(
            f"Cannot {action} the {_label(mark_id)} mark, because it is not started.",
            mark_id,
        )
        self.action = action


class AlreadyPausedError(BenchError, RuntimeError):
    """Raised when pause() is called on a mark that is already paused."""

    def __init__(self, mark_id: Optional[str]):
        super().__init__(
            f"The {_label(mark_id)} mark is still in pause. Cannot pause it again.",
            mark_id,
        )


class InvalidWidthError(BenchError, ValueError):
    """Raised when a report is requested with a width below 1."""

    def __init__(self, width: int):
        super().__init__(f"The graphic width must be positive, given {width}.")
        self.width = width
