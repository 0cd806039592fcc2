"""
Minimalist output renderer for mark statistics.

render_statistics() builds the plain fixed-width bar chart.
print_report() prints the same chart to the console with a header.
Color output uses ANSI codes via colorama for Windows compatibility.
Console width is detected dynamically from the terminal.
"""

import math
import shutil
from datetime import datetime
from typing import Optional

import colorama

from ..core.errors import InvalidWidthError
from ..core.statistics import MarkStatistic, Statistics

colorama.init(autoreset=True)

# Columns taken by the two spaces, the separator and the ms/percent figures.
NUMERIC_BUDGET = 18
DEFAULT_WIDTH = 80
BAR_CHAR = "|"


class _Color:
    """ANSI color constants."""

    RESET   = colorama.Style.RESET_ALL
    DIM     = colorama.Style.DIM
    BOLD    = colorama.Style.BRIGHT
    CYAN    = colorama.Fore.CYAN
    GREEN   = colorama.Fore.GREEN
    YELLOW  = colorama.Fore.YELLOW
    RED     = colorama.Fore.RED
    WHITE   = colorama.Fore.WHITE
    MAGENTA = colorama.Fore.MAGENTA


def _console_width() -> int:
    """Return current terminal width, with a sensible fallback."""
    return shutil.get_terminal_size(fallback=(DEFAULT_WIDTH, 24)).columns


def _separator(char: str = "-", width: Optional[int] = None) -> str:
    """Return a separator line sized to the given or terminal width."""
    return char * (width or _console_width())


_THRESHOLD_LOW_PERCENT    = 25.0        # under 25 %   -> green
_THRESHOLD_MEDIUM_PERCENT = 75.0        # under 75 %   -> yellow
                                        # 75 % and above -> red


def _color_for_percent(percent: float) -> str:
    """Return the color code for a mark's share of the longest mark."""
    if percent < _THRESHOLD_LOW_PERCENT:
        return _Color.GREEN
    if percent < _THRESHOLD_MEDIUM_PERCENT:
        return _Color.YELLOW
    return _Color.RED


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _layout(stats: dict[str, MarkStatistic], width: int) -> tuple[int, int]:
    """Return (margin, bar_width) for the given snapshot and total width."""
    margin = max((len(mark_id) for mark_id in stats), default=0)
    return margin, width - margin - NUMERIC_BUDGET


def _format_line(mark_id: str, stat: MarkStatistic, margin: int,
                 bar_width: int, bar_char: str = BAR_CHAR) -> str:
    """Render one mark as `id  bar  elapsed ms, percent %` without newline."""
    bar = bar_char * max(_round_half_away(stat.percent * bar_width / 100), 0)
    elapsed_ms = _round_half_away(1000 * stat.result)
    percent = round(stat.percent, 3)
    return (f"{mark_id:<{margin}}  {bar:<{max(bar_width, 0)}} "
            f"{elapsed_ms:5d}ms, {percent:5.1f}%")


def render_statistics(statistics: Statistics, width: int = DEFAULT_WIDTH,
                      bar_char: str = BAR_CHAR) -> str:
    """
    Render a filtered snapshot as a fixed-width textual bar chart.

    Args:
        statistics: Statistics view to snapshot
        width: Total line width in characters
        bar_char: Character the bars are drawn with

    Returns:
        One newline-terminated line per reported mark, or "" if none

    Raises:
        InvalidWidthError: if width is below 1
    """
    if width < 1:
        raise InvalidWidthError(width)

    stats = statistics.snapshot(apply_filters=True)
    margin, bar_width = _layout(stats, width)
    return "".join(
        _format_line(mark_id, stat, margin, bar_width, bar_char) + "\n"
        for mark_id, stat in stats.items()
    )


def print_report(statistics: Statistics, width: Optional[int] = None) -> None:
    """
    Print a colored statistics report to stdout.

    Args:
        statistics: Statistics view to snapshot
        width: Total line width; defaults to the terminal width
    """
    width = _console_width() if width is None else width
    if width < 1:
        raise InvalidWidthError(width)

    stats = statistics.snapshot(apply_filters=True)
    thick = _separator("=", width)

    if not stats:
        print(f"  {_Color.DIM}[nanobench] No marks recorded.{_Color.RESET}")
        return

    print(f"{_Color.MAGENTA}{thick}{_Color.RESET}")
    print(f"  {_Color.BOLD}{_Color.WHITE}nanobench{_Color.RESET} | Mark Statistics")
    print(f"  {_Color.DIM}{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}{_Color.RESET}")
    print(f"{_Color.MAGENTA}{thick}{_Color.RESET}")

    margin, bar_width = _layout(stats, width)
    for mark_id, stat in stats.items():
        line = _format_line(mark_id, stat, margin, bar_width)
        print(f"{_color_for_percent(stat.percent)}{line}{_Color.RESET}")

    print(f"{_Color.DIM}{_separator('-', width)}{_Color.RESET}")
    print(f"  Reported marks : {_Color.WHITE}{len(stats)}{_Color.RESET}")
    print(f"{_Color.MAGENTA}{thick}{_Color.RESET}")
