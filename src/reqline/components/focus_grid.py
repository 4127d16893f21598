"""FocusGrid - directional navigation between the screen's panes."""

from __future__ import annotations

from typing import Literal

Region = Literal["history", "url", "request", "response"]

NavDirection = Literal["up", "down", "left", "right"]

MAX_X = 2
MAX_Y = 1

# Column 0 is the full-height history sidebar. Row 1 of columns 1-2 is the
# URL bar spanning both columns; row 0 splits into request and response.
REGIONS: dict[tuple[int, int], Region] = {
    (0, 0): "history",
    (0, 1): "history",
    (1, 0): "request",
    (2, 0): "response",
    (1, 1): "url",
    (2, 1): "url",
}

_STEPS: dict[NavDirection, tuple[int, int]] = {
    "left": (-1, 0),
    "right": (1, 0),
    # Up increases y: the URL row (y=1) is drawn above request/response
    "up": (0, 1),
    "down": (0, -1),
}


def region_at(x: int, y: int) -> Region:
    return REGIONS[(x, y)]


class FocusGrid:
    """Tracks which pane is selected on a 3x2 grid of cells."""

    hint = "←↑↓→ move  e edit  q quit"

    def __init__(self) -> None:
        self._x = 0
        self._y = 0

    @property
    def selection(self) -> tuple[int, int]:
        return (self._x, self._y)

    def move(self, direction: NavDirection) -> None:
        dx, dy = _STEPS[direction]
        self._x = min(max(self._x + dx, 0), MAX_X)
        self._y = min(max(self._y + dy, 0), MAX_Y)

    def selected_region(self) -> Region:
        return region_at(self._x, self._y)
