"""A small raw-mode line editor with cursor movement and command history."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from enum import Enum, auto
from typing import IO, Iterable, Iterator, Sequence

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

PROMPT = ">>> " if os.name == "nt" else "──> "
_CLEAR_WIDTH = 110


class Key(Enum):
    """A decoded key press."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    BACKSPACE = auto()
    ENTER = auto()
    CHAR = auto()
    OTHER = auto()


class LineEditor:
    """Edit one line of input, recalling earlier lines from a history."""

    def __init__(self, history: Sequence[str] = ()) -> None:
        self.history = list(history)
        self.line = ""
        self.cursor = 0
        self._position = len(self.history)

    def _recall(self) -> None:
        if self._position < len(self.history):
            self.line = self.history[self._position]
        else:
            self.line = ""
        self.cursor = len(self.line)

    def press(self, key: Key, char: str | None = None) -> bool:
        """Apply a key press; returns True once the line is finished."""
        if key is Key.UP:
            if self._position > 0:
                self._position -= 1
                self._recall()
        elif key is Key.DOWN:
            if self._position < len(self.history):
                self._position += 1
                self._recall()
        elif key is Key.RIGHT:
            if self.cursor < len(self.line):
                self.cursor += 1
        elif key is Key.LEFT:
            if self.cursor > 0:
                self.cursor -= 1
        elif key is Key.BACKSPACE:
            if self.cursor > 0:
                self.cursor -= 1
                self.line = self.line[: self.cursor] + self.line[self.cursor + 1 :]
        elif key is Key.ENTER:
            self.cursor = len(self.line)
            return True
        elif key is Key.CHAR and char is not None and " " <= char <= "~":
            self.line = self.line[: self.cursor] + char + self.line[self.cursor :]
            self.cursor += 1
        return False

    def render(self) -> str:
        """Text that redraws the line with '|' marking the cursor."""
        return (
            "\r"
            + " " * _CLEAR_WIDTH
            + "\r"
            + PROMPT
            + self.line[: self.cursor]
            + "|"
            + self.line[self.cursor :]
        )


_POSIX_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}
_WINDOWS_ARROWS = {"H": Key.UP, "P": Key.DOWN, "M": Key.RIGHT, "K": Key.LEFT}

KeyPress = tuple[Key, "str | None"]


def _decode_posix(chars: Iterable[str]) -> Iterator[KeyPress]:
    chars = iter(chars)
    for ch in chars:
        if ch == "\x1b":
            if next(chars, "") != "[":
                yield Key.OTHER, None
                continue
            yield _POSIX_ARROWS.get(next(chars, ""), Key.OTHER), None
        elif ch == "\x7f":
            yield Key.BACKSPACE, None
        elif ch in ("\r", "\n"):
            yield Key.ENTER, None
        else:
            yield Key.CHAR, ch


def _decode_windows(chars: Iterable[str]) -> Iterator[KeyPress]:
    chars = iter(chars)
    for ch in chars:
        if ch == "\xe0":
            yield _WINDOWS_ARROWS.get(next(chars, ""), Key.OTHER), None
        elif ch == "\x08":
            yield Key.BACKSPACE, None
        elif ch == "\r":
            yield Key.ENTER, None
        else:
            yield Key.CHAR, ch


def _stream_chars(stream: IO[str]) -> Iterator[str]:
    return iter(lambda: stream.read(1), "")


@contextmanager
def _terminal_keys() -> Iterator[Iterator[KeyPress]]:
    if msvcrt is not None:
        yield _decode_windows(iter(msvcrt.getwch, None))
        return
    if termios is None or not sys.stdin.isatty():
        yield _decode_posix(_stream_chars(sys.stdin))
        return
    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        yield _decode_posix(iter(lambda: os.read(fd, 1).decode("latin-1"), ""))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _drive(editor: LineEditor, keys: Iterable[KeyPress]) -> str:
    out = sys.stdout
    for key, char in keys:
        if editor.press(key, char):
            out.write(editor.render() + "\b \b\n")
            out.flush()
            return editor.line
        out.write(editor.render())
        out.flush()
    if not editor.line:
        raise EOFError("end of input")
    return editor.line


def read_line(history: Sequence[str], stream: IO[str] | None = None) -> str:
    """Read one edited line, from the terminal or from a text stream."""
    editor = LineEditor(history)
    if stream is None:
        with _terminal_keys() as keys:
            return _drive(editor, keys)
    return _drive(editor, _decode_posix(_stream_chars(stream)))