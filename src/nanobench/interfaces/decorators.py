"""
Function and block timing interfaces: decorator and context manager.

Each watched call resumes its mark and pauses it again afterwards, so
a mark accumulates the active time of every call made through it.

Usage:
    @watch                          # mark id is the function qualname
    def my_function(): ...

    @watch("parse")                 # custom mark id
    def my_function(): ...

    with watch_block("db query"):   # inline block timing
        result = db.query(...)
"""

import functools
import inspect
import threading
import weakref
from contextlib import contextmanager
from typing import Callable, Optional

from ..core.bench import Bench, default_bench
from ..core.mark import Mark, MarkState


# Active watched calls per mark, and whether the watcher started the mark.
_active_calls: "weakref.WeakKeyDictionary[Mark, tuple[int, bool]]" = (
    weakref.WeakKeyDictionary()
)


@contextmanager
def _active(mark: Mark, lock: threading.RLock):
    """
    Keep mark running while at least one watched call is inside it.

    The first entering call starts the mark and the last leaving call
    pauses it. A mark the caller started by hand is never paused here.
    """
    with lock:
        calls, owned = _active_calls.get(mark, (0, False))
        if not calls:
            owned = mark.state is not MarkState.RUNNING
            if owned:
                mark.start()
        _active_calls[mark] = (calls + 1, owned)

    try:
        yield mark
    finally:
        with lock:
            calls, owned = _active_calls.pop(mark)
            if calls > 1:
                _active_calls[mark] = (calls - 1, owned)
            elif owned:
                mark.pause(silent=True)


def _make_wrapper(fn: Callable, mark_id: str, bench: Bench) -> Callable:
    """Wrap a callable so each invocation accumulates into the mark."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        with _active(bench.get(mark_id), bench.registry.lock):
            return fn(*args, **kwargs)

    return wrapper


def _make_async_wrapper(fn: Callable, mark_id: str, bench: Bench) -> Callable:
    """Wrap an async callable so each invocation accumulates into the mark."""

    @functools.wraps(fn)
    async def wrapper(*args, **kwargs):
        with _active(bench.get(mark_id), bench.registry.lock):
            return await fn(*args, **kwargs)

    return wrapper


def _build_decorator(label: Optional[str], bench: Bench) -> Callable:
    """Return a decorator that times the given function under the resolved id."""

    def decorator(fn: Callable) -> Callable:
        mark_id = label or fn.__qualname__
        if inspect.iscoroutinefunction(fn):
            return _make_async_wrapper(fn, mark_id, bench)
        return _make_wrapper(fn, mark_id, bench)

    return decorator


def watch(arg=None, *, mark_id: Optional[str] = None, bench: Optional[Bench] = None):
    """
    Decorator that accumulates a function's running time into a mark.

    Supported usage patterns:
        @watch
        @watch("mark id")
        @watch(mark_id="mark id")
        @watch(bench=my_bench)
        @watch("mark id", bench=my_bench)

    Overlapping calls (recursion, concurrent coroutines) keep the mark
    running until the last one returns.

    Calling stop() on a watched mark ends its run-cycle: the next watched
    call starts it from idle, which resets it and discards the time
    accumulated so far. Use pause() to suspend it instead.

    Args:
        arg: Either the decorated function (bare @watch) or a string mark id
        mark_id: Keyword-only mark id
        bench: Bench owning the mark; defaults to the global default_bench
    """
    active_bench = default_bench if bench is None else bench

    if callable(arg):
        return _build_decorator(mark_id, active_bench)(arg)

    if isinstance(arg, str):
        return _build_decorator(arg, active_bench)

    return _build_decorator(mark_id, active_bench)


@contextmanager
def watch_block(mark_id: str, bench: Optional[Bench] = None):
    """
    Context manager accumulating an inline block's running time into a mark.

    Args:
        mark_id: Id of the mark to accumulate into
        bench: Custom bench; defaults to the global default_bench

    Example:
        with watch_block("parse json"):
            data = json.loads(raw)
    """
    active_bench = default_bench if bench is None else bench
    with _active(active_bench.get(mark_id), active_bench.registry.lock) as mark:
        yield mark
