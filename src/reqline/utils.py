"""Terminal text utilities: ANSI stripping, width measurement, truncation.

Widths are measured per grapheme cluster so that wide (CJK, emoji) and
zero-width (combining marks) characters line up with what the terminal draws.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# ANSI sequences
# ---------------------------------------------------------------------------

# CSI sequences: ESC[ <params> <final byte>
_STRIP_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")

RESET = "\x1b[0m"
BOLD = "\x1b[1m"

# Foreground colours by style name
COLORS: dict[str, str] = {
    "default": "\x1b[39m",
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
}


def colorize(text: str, style: str) -> str:
    """Wrap *text* in the foreground colour named *style*.

    Unknown style names and ``"default"`` leave the text untouched.
    """
    code = COLORS.get(style)
    if not code or style == "default" or not text:
        return text
    return f"{code}{text}{RESET}"


def strip_ansi(text: str) -> str:
    return _STRIP_RE.sub("", text)


# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster."""
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        # VS16, ZWJ, skin tone modifiers and regional indicators mean emoji
        if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    first = g[0]
    if ord(first) >= 0x1F000:
        return 2
    if unicodedata.category(first).startswith("M"):
        return 0
    return max(_wcwidth.wcwidth(first), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    ANSI escape sequences are ignored. Pure printable ASCII takes a fast path;
    anything else is measured per grapheme cluster and cached.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def truncate_to_width(text: str, max_width: int, pad: bool = False) -> str:
    """Cut plain *text* to at most *max_width* columns at a grapheme boundary.

    With *pad* the result is right-padded with spaces to exactly *max_width*.
    """
    if max_width <= 0:
        return ""

    result: list[str] = []
    cols = 0
    for g in grapheme.graphemes(text):
        w = _grapheme_width(g)
        if cols + w > max_width:
            break
        result.append(g)
        cols += w

    out = "".join(result)
    if pad and cols < max_width:
        out += " " * (max_width - cols)
    return out


def tail_to_width(text: str, max_width: int) -> str:
    """Return the longest suffix of *text* that fits in *max_width* columns."""
    if max_width <= 0:
        return ""

    clusters = list(grapheme.graphemes(text))
    cols = 0
    start = len(clusters)
    while start > 0:
        w = _grapheme_width(clusters[start - 1])
        if cols + w > max_width:
            break
        cols += w
        start -= 1
    return "".join(clusters[start:])
