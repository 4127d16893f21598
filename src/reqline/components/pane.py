"""Pane rendering - bordered, titled boxes and side-by-side composition."""

from __future__ import annotations

from reqline.utils import BOLD, RESET, colorize, truncate_to_width, visible_width

_TOP_LEFT = "┌"
_TOP_RIGHT = "┐"
_BOTTOM_LEFT = "└"
_BOTTOM_RIGHT = "┘"
_HORIZONTAL = "─"
_VERTICAL = "│"


def render_box(
    title: str,
    body: list[str],
    width: int,
    height: int,
    border_style: str = "default",
) -> list[str]:
    """Draw *body* inside a border of exactly *width* x *height* cells.

    Body lines may carry ANSI styling; they are padded with spaces to the
    inner width and cut off when there are more lines than fit. Boxes too
    small for a border come back as blank lines of the right size.
    """
    if height <= 0:
        return []
    if width < 2 or height < 2:
        return [" " * max(width, 0)] * height

    inner = width - 2
    label = truncate_to_width(title, inner)
    top = _TOP_LEFT + label + _HORIZONTAL * (inner - visible_width(label)) + _TOP_RIGHT
    bottom = _BOTTOM_LEFT + _HORIZONTAL * inner + _BOTTOM_RIGHT
    side = colorize(_VERTICAL, border_style)

    lines = [colorize(top, border_style)]
    for row in range(height - 2):
        content = body[row] if row < len(body) else ""
        pad = max(inner - visible_width(content), 0)
        lines.append(side + content + " " * pad + side)
    lines.append(colorize(bottom, border_style))
    return lines


def hstack(*columns: list[str]) -> list[str]:
    """Join equally tall blocks of lines left to right."""
    if not columns:
        return []
    height = max(len(c) for c in columns)
    return ["".join(c[row] if row < len(c) else "" for c in columns) for row in range(height)]


def render_footer(text: str, width: int, mode: str) -> str:
    """Single status line: the mode label followed by the hint text."""
    label = f" {mode.upper()} "
    rest = truncate_to_width(" " + text, max(width - len(label), 0), pad=True)
    if width <= len(label):
        return truncate_to_width(label, width)
    return f"{BOLD}{label}{RESET}{rest}"
