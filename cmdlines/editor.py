"""A multi-line text editor that runs inline in a terminal."""

from __future__ import annotations

import argparse
import codecs
import enum
import os
import re
import shutil
import sys
from typing import Iterator

_ENABLE_LINE_WRAP = "\x1b[?7h"
_CLEAR_DOWN = "\x1b[J"

_KEY_PATTERN = re.compile(r"\x1b(?:\[[0-9;]*[~A-Za-z]|O[A-Za-z])?|.", re.DOTALL)
_ESCAPE_KEYS = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
}


class Direction(enum.Enum):
    """A cursor movement."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UNKNOWN = "unknown"

    @classmethod
    def from_key(cls, key: str) -> Direction:
        """Map a key name to a direction; anything else is UNKNOWN."""
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


def _decode_keys(data: str) -> Iterator[tuple[str, bool]]:
    """Split raw terminal input into (key name, ctrl held) pairs."""
    for match in _KEY_PATTERN.finditer(data):
        token = match.group()
        if token in _ESCAPE_KEYS:
            yield _ESCAPE_KEYS[token], False
        elif token in ("\r", "\n"):
            yield "enter", False
        elif token in ("\x7f", "\x08"):
            yield "backspace", False
        elif token == "\t":
            yield "tab", False
        elif token.startswith("\x1b"):
            continue
        elif "\x01" <= token <= "\x1a":
            yield chr(ord(token) + 0x60), True
        elif token >= " ":
            yield token, False


class Editor:
    """A buffer of lines with a cursor, edited by key presses."""

    def __init__(self, text: str = "", width: int | None = None) -> None:
        self._lines: list[list[str]] = [list(line) for line in text.split("\n")]
        self.cursor_row = len(self._lines) - 1
        self.cursor_col = len(self._lines[-1])
        if width is None:
            width = shutil.get_terminal_size().columns
        if width < 1:
            raise ValueError(f"terminal width must be positive: {width}")
        self.width = width
        self._screen_row = 0

    @property
    def lines(self) -> list[str]:
        """The buffer's lines as strings."""
        return ["".join(line) for line in self._lines]

    @property
    def cursor(self) -> tuple[int, int]:
        """The cursor as (row, column) within the buffer."""
        return self.cursor_row, self.cursor_col

    def insert_char(self, c: str) -> None:
        """Insert one character before the cursor."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        self._lines[self.cursor_row].insert(self.cursor_col, c)
        self.cursor_col += 1

    def insert_newline(self) -> None:
        """Split the current line at the cursor."""
        line = self._lines[self.cursor_row]
        rest = line[self.cursor_col:]
        del line[self.cursor_col:]
        self._lines.insert(self.cursor_row + 1, rest)
        self.cursor_row += 1
        self.cursor_col = 0

    def delete_char(self) -> None:
        """Delete the character before the cursor, joining lines at a line start."""
        if self.cursor_col > 0:
            del self._lines[self.cursor_row][self.cursor_col - 1]
            self.cursor_col -= 1
        elif self.cursor_row > 0:
            current = self._lines.pop(self.cursor_row)
            previous = self._lines[self.cursor_row - 1]
            self.cursor_col = len(previous)
            previous.extend(current)
            self.cursor_row -= 1

    def move_cursor(self, direction: Direction) -> None:
        """Move the cursor one step, wrapping across line ends."""
        line_length = len(self._lines[self.cursor_row])
        if direction is Direction.LEFT:
            if self.cursor_col > 0:
                self.cursor_col -= 1
            elif self.cursor_row > 0:
                self.cursor_row -= 1
                self.cursor_col = len(self._lines[self.cursor_row])
        elif direction is Direction.RIGHT:
            if self.cursor_col < line_length:
                self.cursor_col += 1
            elif self.cursor_row < len(self._lines) - 1:
                self.cursor_row += 1
                self.cursor_col = 0
        elif direction is Direction.UP:
            if self.cursor_row > 0:
                self.cursor_row -= 1
                self.cursor_col = min(self.cursor_col, len(self._lines[self.cursor_row]))
        elif direction is Direction.DOWN:
            if self.cursor_row < len(self._lines) - 1:
                self.cursor_row += 1
                self.cursor_col = min(self.cursor_col, len(self._lines[self.cursor_row]))

    def process_key(self, key: str, ctrl: bool = False) -> bool:
        """Apply a key press; return True when the key asks to quit (Ctrl+C)."""
        if ctrl and key == "c":
            return True
        if key == "backspace":
            self.delete_char()
        elif key == "enter":
            self.insert_newline()
        elif Direction.from_key(key) is not Direction.UNKNOWN:
            self.move_cursor(Direction.from_key(key))
        elif len(key) == 1:
            self.insert_char(key)
        return False

    def text(self) -> str:
        """The whole buffer, lines joined by newlines."""
        return "\n".join(self.lines)

    def render(self) -> str:
        """Return the terminal output that redraws the buffer and places the cursor."""
        width = self.width
        parts: list[str] = []
        if self._screen_row:
            parts.append(f"\x1b[{self._screen_row}A")
        parts.append("\r" + _CLEAR_DOWN)

        rows_drawn = 0
        target_row = 0
        for index, line in enumerate(self._lines):
            if index:
                parts.append("\r\n")
            parts.append("".join(line))
            if line and len(line) % width == 0:
                parts.append("\r\n")
            if index == self.cursor_row:
                target_row = rows_drawn + self.cursor_col // width
            rows_drawn += len(line) // width + 1

        rows_up = rows_drawn - 1 - target_row
        if rows_up > 0:
            parts.append(f"\x1b[{rows_up}A")
        parts.append(f"\x1b[{self.cursor_col % width + 1}G")
        self._screen_row = target_row
        return "".join(parts)

    def run(self) -> str:
        """Edit interactively on the controlling terminal until Ctrl+C; return the text."""
        import termios
        import tty

        fd = sys.stdin.fileno()
        if not os.isatty(fd):
            raise RuntimeError("the editor needs an interactive terminal")
        out = sys.stdout
        saved = termios.tcgetattr(fd)
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        tty.setraw(fd)
        try:
            out.write(self.render())
            out.flush()
            finished = False
            while not finished:
                data = os.read(fd, 64)
                if not data:
                    break
                for key, ctrl in _decode_keys(decoder.decode(data)):
                    if self.process_key(key, ctrl):
                        finished = True
                        break
                out.write(self.render())
                out.flush()
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            out.write(_ENABLE_LINE_WRAP + "\r\n")
            out.flush()
        return self.text()


def main(argv: list[str] | None = None) -> int:
    """Start the editor on the current terminal."""
    parser = argparse.ArgumentParser(description="Edit text inline in the terminal.")
    parser.add_argument("--text", default="", help="initial buffer contents")
    args = parser.parse_args(argv)
    try:
        Editor(args.text).run()
    except RuntimeError as error:
        print(error, file=sys.stderr)
        return 1
    return 0