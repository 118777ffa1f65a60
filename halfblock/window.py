"""A terminal drawn as a grid of half-block pixels."""

from __future__ import annotations

import os
import shutil
import signal
import sys
import threading
from typing import TextIO

from .color import Color
from .grid import Array2D

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX
    termios = None  # type: ignore[assignment]

_CLEAR = "\x1b[2J"
_HOME = "\x1b[0;0H"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_MOUSE_ON = "\x1b[?1003;1006h"
_MOUSE_OFF = "\x1b[?1003;1006l"
_FOCUS_ON = "\x1b[?1004h"
_FOCUS_OFF = "\x1b[?1004l"
_ALT_SCREEN_ON = "\x1b[?1049h"
_ALT_SCREEN_OFF = "\x1b[?1049l"
_HALF_BLOCK = "▀"


def render_frame(buffer: Array2D[Color]) -> str:
    """Render a pixel buffer to escape sequences, two pixel rows per line."""
    size = buffer.size()
    parts = [_CLEAR, _HOME]
    for y in range(1, size.y, 2):
        for x in range(size.x):
            fg = buffer.at(x, y - 1) or Color()
            bg = buffer.at(x, y) or Color()
            parts.append(
                f"\x1b[38;2;{fg.r};{fg.g};{fg.b}m"
                f"\x1b[48;2;{bg.r};{bg.g};{bg.b}m"
                f"{_HALF_BLOCK}"
            )
    return "".join(parts)


def parse_parent_pid(stat_text: str) -> int:
    """Return the parent pid field (the fourth) of a /proc/<pid>/stat line."""
    fields = stat_text.split()
    if len(fields) < 4:
        raise ValueError("stat text has too few fields")
    return int(fields[3])


def read_parent_pid(pid: int) -> int:
    """Read the parent pid of a process from /proc."""
    path = f"/proc/{pid}/stat"
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as err:
        raise RuntimeError(
            f"proc stat file not found for pid or not readable {pid}"
        ) from err
    return parse_parent_pid(text)


class Window:
    """Owns the terminal: alternate screen, raw input and a pixel buffer."""

    def __init__(
        self,
        stream: TextIO | None = None,
        columns: int | None = None,
        rows: int | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        if columns is None or rows is None:
            detected = shutil.get_terminal_size()
            columns = detected.columns if columns is None else columns
            rows = detected.lines if rows is None else rows
        self.columns = columns
        self.rows = rows
        self.buffer: Array2D[Color] = Array2D(columns, rows * 2, fill=Color())
        self.focused = False
        self._is_open = False
        self._orig_termios = None
        self._old_winch = None

    def _stream_fd(self) -> int | None:
        try:
            return self.stream.fileno() if self.stream.isatty() else None
        except (AttributeError, OSError, ValueError):
            return None

    def _enter_raw_input(self) -> None:
        if termios is None:
            return
        try:
            fd = sys.stdin.fileno()
            if not os.isatty(fd):
                return
            self._orig_termios = termios.tcgetattr(fd)
        except (OSError, ValueError, termios.error):
            return
        raw = list(self._orig_termios)
        raw[3] &= ~(termios.ECHO | termios.ICANON)
        termios.tcsetattr(fd, termios.TCSANOW, raw)

    def _restore_input(self) -> None:
        if termios is None or self._orig_termios is None:
            return
        try:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSANOW, self._orig_termios)
        except (OSError, ValueError, termios.error):
            pass
        self._orig_termios = None

    def _on_winch(self, signum, frame) -> None:
        fd = self._stream_fd()
        if fd is None:
            return
        try:
            size = os.get_terminal_size(fd)
        except OSError as err:
            raise RuntimeError("Couldn't fetch terminal resize") from err
        self.handle_resize(size.columns, size.lines)

    def open(self) -> None:
        """Switch the terminal into drawing mode."""
        if self._is_open:
            return
        self._enter_raw_input()
        if (
            hasattr(signal, "SIGWINCH")
            and self._stream_fd() is not None
            and threading.current_thread() is threading.main_thread()
        ):
            self._old_winch = signal.signal(signal.SIGWINCH, self._on_winch)
        self.stream.write(
            _ALT_SCREEN_ON + _CLEAR + _HOME + _HIDE_CURSOR + _MOUSE_ON + _FOCUS_ON
        )
        self.focused = True
        self.stream.flush()
        self._is_open = True

    def close(self) -> None:
        """Restore the terminal to its previous state."""
        if not self._is_open:
            return
        if self._old_winch is not None:
            signal.signal(signal.SIGWINCH, signal.SIG_DFL)
            self._old_winch = None
        self._restore_input()
        self.stream.write(_SHOW_CURSOR + _MOUSE_OFF + _FOCUS_OFF + _ALT_SCREEN_OFF)
        self.stream.flush()
        self.focused = False
        self._is_open = False

    def handle_resize(self, columns: int, rows: int) -> None:
        """Record a new terminal size and fit the buffer to it."""
        self.columns = columns
        self.rows = rows
        self.buffer.resize(columns, rows * 2)

    def refresh(self) -> None:
        """Draw the whole buffer to the terminal."""
        self.stream.write(render_frame(self.buffer))
        self.stream.flush()

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        """Set one pixel in the buffer."""
        self.buffer.set(x, y, color)

    def __enter__(self) -> Window:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


_instance: Window | None = None
_instance_lock = threading.Lock()


def get_window() -> Window:
    """Return the process-wide window on standard output."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = Window()
        return _instance