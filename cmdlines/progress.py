"""A terminal progress bar with percentage, count, timing and a message."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import Callable, Iterator, TextIO

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_LINE = "\r\x1b[2K"
_RESET_COLOR = "\x1b[0m"
_FALLBACK_WIDTH = 50
_RESERVED_COLUMNS = 20


@dataclass(frozen=True)
class BarStyle:
    """Characters and colours used to draw the bar."""

    complete_char: str = "█"
    incomplete_char: str = "░"
    start_char: str = "["
    end_char: str = "]"
    complete_color: str = "\x1b[38;5;10m"
    incomplete_color: str = "\x1b[38;5;8m"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as ``mm:ss`` (minutes may exceed 59)."""
    if seconds < 0:
        raise ValueError(f"duration cannot be negative: {seconds}")
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02}:{secs:02}"


class ProgressBar:
    """Tracks progress towards ``total`` and redraws itself on one line."""

    def __init__(
        self,
        total: int,
        *,
        stream: TextIO | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if total < 0:
            raise ValueError(f"total cannot be negative: {total}")
        self.total = total
        self.current = 0
        self._clock = clock
        self.start_time = clock()
        self.width: int | None = None
        self.message = ""
        self.style = BarStyle()
        self.show_percentage = True
        self.show_count = True
        self.show_time = True
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Where the bar is drawn; standard output unless one was given."""
        return self._stream if self._stream is not None else sys.stdout

    def with_message(self, message: str) -> ProgressBar:
        """Set a message shown after the bar."""
        self.message = message
        return self

    def with_width(self, width: int) -> ProgressBar:
        """Set the bar's width, brackets included."""
        if width < 2:
            raise ValueError(f"width must be at least 2: {width}")
        self.width = width
        return self

    def with_style(self, style: BarStyle) -> ProgressBar:
        """Set the characters and colours of the bar."""
        self.style = style
        return self

    def update(self, current: int) -> None:
        """Set progress to ``current`` (capped at total) and redraw."""
        if current < 0:
            raise ValueError(f"progress cannot be negative: {current}")
        self.current = min(current, self.total)
        self._render()

    def inc(self, delta: int) -> None:
        """Advance progress by ``delta`` and redraw."""
        if delta < 0:
            raise ValueError(f"increment cannot be negative: {delta}")
        self.update(self.current + delta)

    def finish(self) -> None:
        """Mark the work complete, redraw and end the line."""
        self.current = self.total
        self._render()
        self.stream.write("\n")
        self.stream.flush()

    @property
    def fraction(self) -> float:
        """Completed share of the work, from 0.0 to 1.0."""
        return self.current / self.total if self.total > 0 else 0.0

    def render_line(self) -> str:
        """Return the bar and its details as plain text, without colours."""
        return "".join(text for text, _ in self._segments())

    def _resolve_width(self) -> int:
        if self.width is not None:
            return self.width
        try:
            columns = os.get_terminal_size(self.stream.fileno()).columns
        except (OSError, ValueError, AttributeError):
            return _FALLBACK_WIDTH
        return max(columns - _RESERVED_COLUMNS, 2)

    def _segments(self) -> Iterator[tuple[str, str | None]]:
        style = self.style
        bar_width = self._resolve_width() - 2
        percent = self.fraction
        completed = int(percent * bar_width)

        yield style.start_char, None
        yield style.complete_char * completed, style.complete_color
        yield style.incomplete_char * (bar_width - completed), style.incomplete_color
        yield f"{style.end_char} ", None

        if self.show_percentage:
            yield f"{percent * 100:.1f}% ", None
        if self.show_count:
            yield f"({self.current}/{self.total}) ", None
        if self.show_time:
            elapsed = max(0.0, self._clock() - self.start_time)
            remaining = elapsed / percent * (1.0 - percent) if percent > 0 else 0.0
            yield (
                f"已用: {format_duration(elapsed)} "
                f"剩余: {format_duration(remaining)}"
            ), None
        if self.message:
            yield f" | {self.message}", None

    def _render(self) -> None:
        out = self.stream
        out.write(_HIDE_CURSOR)
        out.write(_CLEAR_LINE)
        for text, color in self._segments():
            if color and text:
                out.write(f"{color}{text}{_RESET_COLOR}")
            else:
                out.write(text)
        out.write(_SHOW_CURSOR)
        out.flush()