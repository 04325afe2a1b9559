"""Keyboard-driven console: key reading, screen listings, menus and profiles."""

from __future__ import annotations

import itertools
import os
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, auto
from typing import TextIO

from .models import Movie, Show

MOVIE_RULE = "-" * 117
SHOW_RULE = "-" * 48
PAUSE_TEXT = "Press any key to continue . . . "


class Key(Enum):
    """The keys the menus react to."""

    UP = auto()
    DOWN = auto()
    ENTER = auto()
    ESCAPE = auto()
    OTHER = auto()


_LINE_KEYS = {
    "up": Key.UP,
    "w": Key.UP,
    "k": Key.UP,
    "down": Key.DOWN,
    "s": Key.DOWN,
    "j": Key.DOWN,
    "": Key.ENTER,
    "enter": Key.ENTER,
    "esc": Key.ESCAPE,
    "escape": Key.ESCAPE,
    "q": Key.ESCAPE,
}


class Terminal:
    """Reads keys and lines and writes screens.

    On a real terminal single key presses are read; otherwise each input
    line names one key (``up``, ``down``, an empty line for Enter, ``esc``).
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _interactive(self) -> bool:
        try:
            return self.stdin.isatty() and self.stdout.isatty()
        except (AttributeError, ValueError):
            return False

    def read_key(self) -> Key:
        """Wait for one key and return it; raises EOFError when input ends."""
        if self._interactive():
            self.stdout.flush()
            if sys.platform == "win32":
                return self._read_windows_key()
            return self._read_posix_key()
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return _LINE_KEYS.get(line.strip().lower(), Key.OTHER)

    @staticmethod
    def _read_windows_key() -> Key:
        import msvcrt

        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            code = msvcrt.getwch()
            return {"H": Key.UP, "P": Key.DOWN}.get(code, Key.OTHER)
        if char == "\x03":
            raise KeyboardInterrupt
        return {"\r": Key.ENTER, "\n": Key.ENTER, "\x1b": Key.ESCAPE}.get(char, Key.OTHER)

    def _read_posix_key(self) -> Key:
        import select
        import termios
        import tty

        fd = self.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            char = os.read(fd, 1)
            if char == b"\x1b":
                ready, _, _ = select.select([fd], [], [], 0.05)
                if not ready:
                    return Key.ESCAPE
                sequence = os.read(fd, 2)
                return {b"[A": Key.UP, b"[B": Key.DOWN}.get(sequence, Key.OTHER)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        if not char:
            raise EOFError("no more input")
        if char == b"\x03":
            raise KeyboardInterrupt
        if char in (b"\r", b"\n"):
            return Key.ENTER
        return Key.OTHER

    def clear(self) -> None:
        """Clear the screen when attached to a terminal."""
        if self._interactive():
            self.write("\033[2J\033[H")

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def prompt(self, text: str) -> str:
        """Show a prompt and return the line typed, without its line end."""
        self.write(text)
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def pause(self) -> Key:
        """Wait for any key."""
        self.write(PAUSE_TEXT)
        return self.read_key()


def _marked_rows(rows: Iterable[str], position: int) -> str:
    """Join rows into lines, putting an arrow in front of the one at the position."""
    return "".join(
        ("-> " if index == position else "   ") + row + "\n"
        for index, row in enumerate(rows)
    )


def render_menu(options: Sequence[str], position: int, title: str | None = None) -> str:
    """Return a menu with an arrow in front of the option at the position."""
    header = ""
    if title is not None:
        header = f"   -----------------\n       {title}\n   -----------------\n"
    return header + _marked_rows(options, position)


def render_movie_list(movies: Sequence[Movie], position: int) -> str:
    """Return the movie table with the movie at the position marked."""
    heading = (
        f"   {'ID':<3} | {'Title':<30} | {'Duration':<8} | "
        f"{'Director':<20} | {'Genre':<25} | {'Language':<15}\n"
    )
    rows = _marked_rows((movie.row_text() for movie in movies), position)
    return (
        "Choose movie\n"
        f"{MOVIE_RULE}\n{heading}{MOVIE_RULE}\n{rows}{MOVIE_RULE}\n\n"
    )


def render_show_list(shows: Sequence[Show], position: int) -> str:
    """Return the show table with the show at the position marked."""
    heading = f"   {'ID':<5} | {'Hall':<10} | {'Day':<10} | TimeStart\n"
    rows = _marked_rows((show.row_text() for show in shows), position)
    return f"Choose show\n{SHOW_RULE}\n{heading}{SHOW_RULE}\n{rows}{SHOW_RULE}\n\n"


def choose(terminal: Terminal, count: int, render: Callable[[int], str]) -> int | None:
    """Let the user move through ``count`` entries; return the chosen index or None on Escape."""
    position = 0
    while True:
        terminal.clear()
        terminal.write(render(position))
        key = terminal.read_key()
        if key is Key.UP and position > 0:
            position -= 1
        elif key is Key.DOWN and position < count - 1:
            position += 1
        elif key is Key.ENTER:
            return position if count > 0 else None
        elif key is Key.ESCAPE:
            return None


_user_ids = itertools.count(15036)


@dataclass
class Profile:
    """Personal details of the signed-in person."""

    name: str = "Guest"
    birth: date = date(2000, 1, 1)
    gender: str = "Male"
    phone: str = ""
    uid: int = field(default_factory=lambda: next(_user_ids))

    def render(self) -> str:
        """Return the details as printable text."""
        birth = f"{self.birth.day:02d}/{self.birth.month:02d}/{self.birth.year}"
        return (
            f"{'ID: ':<15}{self.uid}\n"
            f"{'Name: ':<15}{self.name}\n"
            f"{'Birth: ':<15}{birth}\n"
            f"{'Gender: ':<15}{self.gender}\n"
            f"{'PhoneNumber: ':<15}{self.phone}\n"
        )