"""Keyboard input parsing for terminal applications.

Turns one chunk of raw terminal input into a :class:`KeyEvent`. Handles the
legacy xterm/VT sequences, xterm modifier parameters (``ESC[1;5D`` is
ctrl+left) and the kitty keyboard protocol, which additionally reports
whether a key was pressed, repeated or released.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

KeyId = str

KeyEventType = Literal["press", "repeat", "release"]


# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

LOCK_MASK = 64 + 128

CODEPOINTS: dict[int, str] = {
    27: "escape",
    9: "tab",
    13: "enter",
    32: "space",
    127: "backspace",
    57414: "enter",  # keypad enter
}

_EVENT_TYPES: dict[int, KeyEventType] = {
    1: "press",
    2: "repeat",
    3: "release",
}

# Unmodified legacy escape sequences -> key names
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
}

_CSI_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    7: "home",
    8: "end",
}

# Kitty functional codepoints (private use area)
_KITTY_FUNCTIONAL_KEYS: dict[int, str] = {
    57348: "insert",
    57349: "delete",
    57350: "left",
    57351: "right",
    57352: "up",
    57353: "down",
    57354: "pageUp",
    57355: "pageDown",
    57356: "home",
    57357: "end",
}

# ---------------------------------------------------------------------------
# Regex patterns
# ---------------------------------------------------------------------------

# CSI u: \x1b[<codepoint>(:<shifted>(:<base>))?(;<modifier>(:<event>))?u
_KITTY_CSI_U_RE = re.compile(
    r"^\x1b\[(\d+)(?::(\d*)(?::(\d+))?)?(?:;(\d+)(?::(\d+))?)?u$"
)

# Arrows / home / end with modifier: \x1b[1;<modifier>(:<event>)?[ABCDHF]
_CSI_LETTER_RE = re.compile(r"^\x1b\[1;(\d+)(?::(\d+))?([ABCDHF])$")

# Functional keys: \x1b[<number>(;<modifier>(:<event>)?)?~
_CSI_TILDE_RE = re.compile(r"^\x1b\[(\d+)(?:;(\d+)(?::(\d+))?)?~$")


# ---------------------------------------------------------------------------
# KeyEvent
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyEvent:
    """A single decoded key event.

    ``code`` is either a named key (``"left"``, ``"backspace"`` ...) or a
    single printable character.
    """

    code: str
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    kind: KeyEventType = "press"

    @property
    def id(self) -> KeyId:
        """Key identifier such as ``"ctrl+left"`` or ``"q"``."""
        prefix = ""
        if self.ctrl:
            prefix += "ctrl+"
        if self.shift:
            prefix += "shift+"
        if self.alt:
            prefix += "alt+"
        return prefix + self.code

    @property
    def is_press(self) -> bool:
        return self.kind == "press"

    @property
    def char(self) -> str | None:
        """The character this event would type, or ``None``."""
        if self.ctrl or self.alt:
            return None
        if self.code == "space":
            return " "
        if len(self.code) == 1 and self.code.isprintable():
            return self.code
        return None


def _decode_modifier(raw: int) -> tuple[bool, bool, bool]:
    mod = (raw - 1) & ~LOCK_MASK
    return (
        bool(mod & MODIFIERS["ctrl"]),
        bool(mod & MODIFIERS["alt"]),
        bool(mod & MODIFIERS["shift"]),
    )


def _event(code: str, modifier: str | None, event_type: str | None) -> KeyEvent:
    ctrl, alt, shift = _decode_modifier(int(modifier) if modifier else 1)
    kind = _EVENT_TYPES.get(int(event_type) if event_type else 1, "press")
    return KeyEvent(code=code, ctrl=ctrl, alt=alt, shift=shift, kind=kind)


# ---------------------------------------------------------------------------
# Input splitting
# ---------------------------------------------------------------------------


def _sequence_length(data: str, start: int) -> int:
    """Length of the key sequence beginning at *start* (always >= 1)."""
    if data[start] != "\x1b" or start + 1 >= len(data):
        return 1

    nxt = data[start + 1]
    if nxt == "[":
        # CSI: parameter bytes then one final byte in 0x40-0x7E
        i = start + 2
        while i < len(data):
            if 0x40 <= ord(data[i]) <= 0x7E:
                return i - start + 1
            i += 1
        return len(data) - start
    if nxt == "O":
        return min(3, len(data) - start)
    # Alt + key
    return 2


def split_input(data: str) -> list[str]:
    """Split a chunk read from the terminal into individual key sequences.

    A single read can carry several keys when the user types quickly; each
    escape sequence stays whole and every other character stands alone.
    """
    sequences: list[str] = []
    i = 0
    while i < len(data):
        n = _sequence_length(data, i)
        sequences.append(data[i : i + n])
        i += n
    return sequences


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------


def _parse_kitty_csi_u(m: re.Match[str]) -> KeyEvent | None:
    codepoint = int(m.group(1))
    shifted = int(m.group(2)) if m.group(2) else None
    event = _event("", m.group(4), m.group(5))

    name = CODEPOINTS.get(codepoint) or _KITTY_FUNCTIONAL_KEYS.get(codepoint)
    if name is None:
        if codepoint < 32:
            return None
        ch = chr(shifted) if event.shift and shifted else chr(codepoint)
        if not ch.isprintable():
            return None
        name = ch.lower() if event.ctrl or event.alt else ch
        # The shift is already folded into the character itself
        if shifted and not (event.ctrl or event.alt):
            return KeyEvent(code=name, kind=event.kind)
    return KeyEvent(
        code=name, ctrl=event.ctrl, alt=event.alt, shift=event.shift, kind=event.kind
    )


def parse_key(data: str) -> KeyEvent | None:  # noqa: C901
    """Parse raw terminal input and return the key event, or ``None``.

    ``None`` means the input is not a single recognised key (for example a
    terminal response or a pasted string).
    """
    if not data:
        return None

    # --- Kitty protocol / xterm modifier parameters ---
    m = _KITTY_CSI_U_RE.match(data)
    if m:
        return _parse_kitty_csi_u(m)

    m = _CSI_LETTER_RE.match(data)
    if m:
        return _event(_CSI_LETTER_KEYS[m.group(3)], m.group(1), m.group(2))

    m = _CSI_TILDE_RE.match(data)
    if m:
        name = _TILDE_KEYS.get(int(m.group(1)))
        if name is None:
            return None
        return _event(name, m.group(2), m.group(3))

    # --- Legacy escape sequences ---
    legacy = LEGACY_KEY_SEQUENCES.get(data)
    if legacy is not None:
        return KeyEvent(code=legacy)
    if data == "\x1b[Z":
        return KeyEvent(code="tab", shift=True)

    # --- Simple single-byte keys ---
    if data == "\x1b":
        return KeyEvent(code="escape")
    if data in ("\r", "\n"):
        return KeyEvent(code="enter")
    if data == "\t":
        return KeyEvent(code="tab")
    if data == " ":
        return KeyEvent(code="space")
    if data in ("\x7f", "\x08"):
        return KeyEvent(code="backspace")
    if data == "\x00":
        return KeyEvent(code="space", ctrl=True)

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return KeyEvent(code=chr(ord(data) + ord("a") - 1), ctrl=True)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        inner = parse_key(data[1])
        if inner is None or inner.alt:
            return None
        return KeyEvent(code=inner.code, ctrl=inner.ctrl, shift=inner.shift, alt=True)

    # --- Plain printable character ---
    if len(data) == 1 and data.isprintable():
        return KeyEvent(code=data)

    return None
