"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that manages raw mode, the alternate screen, the kitty keyboard
protocol and cursor visibility via ANSI escape sequences.
"""

from __future__ import annotations

import codecs
import os
import select
import sys
import termios
import tty
from typing import Protocol

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_ALT_SCREEN_ENABLE = "\x1b[?1049h"
_ALT_SCREEN_DISABLE = "\x1b[?1049l"

# Flags 1 (disambiguate) + 2 (report event types) so releases are tagged
_KITTY_PUSH = "\x1b[>3u"
_KITTY_POP = "\x1b[<u"

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_MOVE_TO_FMT = "\x1b[{};{}H"


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def read(self, timeout: float | None = None) -> str | None: ...

    def write(self, data: str) -> None: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def move_to(self, row: int, column: int) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``.

    Manages raw mode via :mod:`tty` and :mod:`termios`. Reads are blocking
    with a timeout so the caller can redraw between keys.
    """

    def __init__(self, kitty_keyboard: bool = True) -> None:
        self._kitty_keyboard = kitty_keyboard
        self._original_termios: list | None = None
        # Keeps a multi-byte character split across two reads intact
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    # -- start / stop -------------------------------------------------------

    def start(self) -> None:
        """Enable raw mode and switch to the alternate screen."""
        fd = sys.stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)

        self._raw_write(_ALT_SCREEN_ENABLE)
        if self._kitty_keyboard:
            self._raw_write(_KITTY_PUSH)
        self._raw_write(_CLEAR_SCREEN)

    def stop(self) -> None:
        """Restore the screen and terminal attributes."""
        if self._kitty_keyboard:
            self._raw_write(_KITTY_POP)
        self._raw_write(_ALT_SCREEN_DISABLE)

        if self._original_termios is not None:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._original_termios)
            self._original_termios = None

    # -- input --------------------------------------------------------------

    def read(self, timeout: float | None = None) -> str | None:
        """Wait up to *timeout* seconds for input; ``None`` when nothing came."""
        fd = sys.stdin.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        raw = os.read(fd, 4096)
        if not raw:
            raise EOFError("stdin closed")
        return self._decoder.decode(raw) or None

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        self._raw_write(data)

    def move_to(self, row: int, column: int) -> None:
        """Place the cursor at zero-based *row*, *column*."""
        self._raw_write(_MOVE_TO_FMT.format(row + 1, column + 1))

    def hide_cursor(self) -> None:
        self._raw_write(_HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._raw_write(_SHOW_CURSOR)

    def _raw_write(self, data: str) -> None:
        sys.stdout.write(data)
        sys.stdout.flush()
