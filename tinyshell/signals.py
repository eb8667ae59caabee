"""Interrupt and quit handling, and hiding of the terminal's quit echo."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
import termios
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TextIO

NO_SIGNAL = 0
INTERRUPTED = 1
QUIT = 2

_QUIT_CHAR = b"\x1c"


@dataclass
class SignalState:
    """Records the last signal the shell received.

    ``received`` is NO_SIGNAL, INTERRUPTED or QUIT. While ``reading`` is set,
    an interrupt also aborts the pending read by raising KeyboardInterrupt.
    """

    output: TextIO | None = None
    received: int = NO_SIGNAL
    reading: bool = False

    def _write(self, text: str) -> None:
        stream = self.output if self.output is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def on_interrupt(self, signum: int, frame: Any) -> None:
        """Move to a new line and mark the line as interrupted."""
        self._write("\n")
        self.received = INTERRUPTED
        if self.reading:
            raise KeyboardInterrupt

    def on_quit(self, signum: int, frame: Any) -> None:
        """Report a quit the way an interactive shell does."""
        self._write("Quit (core dumped)\n")
        self.received = QUIT

    def reset(self) -> None:
        """Forget any signal received so far."""
        self.received = NO_SIGNAL

    @contextlib.contextmanager
    def reading_input(self) -> Iterator[None]:
        """Let interrupts abort a read for the duration of the block."""
        previous = self.reading
        self.reading = True
        try:
            yield
        finally:
            self.reading = previous


def install_handlers(state: SignalState) -> dict[int, Any]:
    """Route SIGINT and SIGQUIT to ``state``; return the previous handlers."""
    previous: dict[int, Any] = {}
    previous[signal.SIGINT] = signal.signal(signal.SIGINT, state.on_interrupt)
    sigquit = getattr(signal, "SIGQUIT", None)
    if sigquit is not None:
        previous[sigquit] = signal.signal(sigquit, state.on_quit)
    return previous


def _disabled_char(fd: int) -> bytes:
    try:
        value = os.fpathconf(fd, "PC_VDISABLE")
    except (OSError, ValueError):
        value = 0
    if value < 0:
        value = 0
    return bytes([value & 0xFF])


def _set_quit_char(fd: int, char: bytes) -> bool:
    try:
        attrs = termios.tcgetattr(fd)
        attrs[6][termios.VQUIT] = char
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    except (termios.error, OSError):
        return False
    return True


def hide_quit_echo(fd: int) -> bool:
    """Disable the quit character on terminal ``fd``; False if not a terminal."""
    return _set_quit_char(fd, _disabled_char(fd))


def show_quit_echo(fd: int) -> bool:
    """Restore Ctrl-\\ as the quit character on terminal ``fd``."""
    return _set_quit_char(fd, _QUIT_CHAR)