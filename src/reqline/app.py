"""Application loop: draw the screen, read a key, dispatch it, repeat.

Two input modes exist. In *navigate* mode the arrow keys move the
:class:`FocusGrid` selection between panes. In *edit* mode keys go to the
:class:`CursorEditor` of the selected pane.
"""

from __future__ import annotations

import logging
from typing import Literal

from reqline.components import (
    CursorEditor,
    FocusGrid,
    NavDirection,
    Region,
    hstack,
    render_box,
    render_footer,
)
from reqline.config import Config
from reqline.keybindings import AppAction, KeybindingsManager
from reqline.keys import KeyEvent, parse_key, split_input
from reqline.models import Request, Response
from reqline.terminal import Terminal
from reqline.utils import truncate_to_width

logger = logging.getLogger(__name__)

InputMode = Literal["navigate", "edit"]

URL_BAR_HEIGHT = 3
BODY_EDITOR_HEIGHT = 3
MIN_SIDEBAR_WIDTH = 12

_NAV_ACTIONS: dict[AppAction, NavDirection] = {
    "navUp": "up",
    "navDown": "down",
    "navLeft": "left",
    "navRight": "right",
}


class App:
    """The reqline screen and its event dispatch."""

    def __init__(self, terminal: Terminal, config: Config | None = None) -> None:
        self.terminal = terminal
        self.config = config or Config()
        self.keybindings = KeybindingsManager(self.config.keybindings)

        self.running = False
        self.mode: InputMode = "navigate"

        self.grid = FocusGrid()
        self.editors: dict[Region, CursorEditor] = {
            "url": CursorEditor("URL"),
            "request": CursorEditor("Body"),
        }

        self.request = Request()
        self.response = Response()
        self.history: list[Request] = []

    # -- state --------------------------------------------------------------

    def is_running(self) -> bool:
        return self.running

    def quit(self) -> None:
        logger.info("Quit requested")
        self.running = False

    @property
    def active_editor(self) -> CursorEditor | None:
        return self.editors.get(self.grid.selected_region())

    def set_mode(self, mode: InputMode) -> None:
        """Switch input mode; cursor visibility changes only on a real transition."""
        if mode == self.mode:
            return
        editor = self.active_editor
        if mode == "edit" and editor is None:
            logger.debug("Region %s has no editor", self.grid.selected_region())
            return

        self.mode = mode
        for other in self.editors.values():
            other.unfocus()
        if mode == "edit":
            editor.focus()  # type: ignore[union-attr]
            self.terminal.show_cursor()
        else:
            self.terminal.hide_cursor()
        logger.debug("Mode changed to %s", mode)

    def toggle_mode(self) -> None:
        self.set_mode("navigate" if self.mode == "edit" else "edit")

    def submit(self) -> None:
        """Copy the focused editor's text into the request model."""
        region = self.grid.selected_region()
        editor = self.editors.get(region)
        if editor is None:
            return
        if region == "url":
            self.request.uri = editor.text
            if editor.text:
                self.history.append(
                    Request(
                        uri=self.request.uri,
                        query=dict(self.request.query),
                        headers=dict(self.request.headers),
                        body=self.request.body,
                    )
                )
        elif region == "request":
            self.request.body = editor.text
        logger.info("Submitted %s: %r", region, editor.text)

    # -- input --------------------------------------------------------------

    def handle_input(self, data: str) -> None:
        """Feed one chunk of raw terminal input through the dispatcher."""
        for sequence in split_input(data):
            event = parse_key(sequence)
            if event is None:
                logger.debug("Unrecognised input %r", sequence)
                continue
            self.handle_key(event)

    def handle_key(self, event: KeyEvent) -> None:
        if not event.is_press:
            return

        kb = self.keybindings
        if self.mode == "navigate":
            if kb.matches(event, "quit"):
                self.quit()
            elif kb.matches(event, "toggleMode"):
                self.set_mode("edit")
            else:
                for action, direction in _NAV_ACTIONS.items():
                    if kb.matches(event, action):
                        self.grid.move(direction)
                        logger.debug("Selected region %s", self.grid.selected_region())
                        break
            return

        if kb.matches(event, "exitEdit"):
            self.set_mode("navigate")
        elif kb.matches(event, "submit"):
            self.submit()
        else:
            editor = self.active_editor
            if editor is not None:
                editor.handle_key(event, kb)

    # -- rendering ----------------------------------------------------------

    def _sidebar_width(self, width: int) -> int:
        return min(max(width // 4, MIN_SIDEBAR_WIDTH), width // 2)

    def render(self, width: int, height: int) -> list[str]:
        """Build the full frame as *height* lines of *width* columns."""
        if height <= 0 or width <= 0:
            return []

        selected = self.grid.selected_region()
        body_height = height - 1
        side_width = self._sidebar_width(width)
        main_width = width - side_width
        pane_height = max(body_height - URL_BAR_HEIGHT, 0)
        request_width = main_width // 2

        def fit(lines: list[str], w: int) -> list[str]:
            return [truncate_to_width(line, max(w - 2, 0)) for line in lines]

        def border(region: Region) -> str:
            return "yellow" if region == selected else "default"

        history_lines = [entry.uri for entry in reversed(self.history)] or ["(empty)"]
        sidebar = render_box(
            "History", fit(history_lines, side_width), side_width, body_height, border("history")
        )

        url_bar = self.editors["url"].render(main_width, highlight=selected == "url")
        # The body editor sits on top of the request summary
        request_column = self.editors["request"].render(
            request_width, highlight=selected == "request"
        ) + render_box(
            "Request",
            fit(self.request.summary_lines(), request_width),
            request_width,
            pane_height - BODY_EDITOR_HEIGHT,
            border("request"),
        )
        panes = hstack(
            request_column[:pane_height],
            render_box(
                "Response",
                fit(self.response.summary_lines(), main_width - request_width),
                main_width - request_width,
                pane_height,
                border("response"),
            ),
        )
        main = (url_bar + panes)[:body_height]

        lines = hstack(sidebar, main)[:body_height]
        lines.append(render_footer(self.grid.hint, width, self.mode))
        return lines

    def cursor_position(self, width: int) -> tuple[int, int] | None:
        """Screen (row, column) of the editing caret, or ``None`` when not editing."""
        editor = self.active_editor
        if self.mode != "edit" or editor is None:
            return None
        side_width = self._sidebar_width(width)
        main_width = width - side_width
        if self.grid.selected_region() == "request":
            return (
                URL_BAR_HEIGHT + 1,
                side_width + editor.cursor_column(main_width // 2),
            )
        return (1, side_width + editor.cursor_column(main_width))

    def draw(self) -> None:
        width, height = self.terminal.columns, self.terminal.rows
        frame = self.render(width, height)
        self.terminal.write("\x1b[H" + "\r\n".join(frame))
        position = self.cursor_position(width)
        if position is not None:
            self.terminal.move_to(*position)

    # -- loop ---------------------------------------------------------------

    def run(self) -> None:
        """Draw-then-poll until quit. Terminal errors propagate to the caller."""
        self.running = True
        self.terminal.start()
        self.terminal.hide_cursor()
        logger.info("reqline started")
        try:
            while self.is_running():
                self.draw()
                data = self.terminal.read(self.config.poll_interval)
                if data:
                    self.handle_input(data)
        finally:
            self.terminal.show_cursor()
            self.terminal.stop()
            logger.info("reqline stopped")
