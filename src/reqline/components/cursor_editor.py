"""CursorEditor component - single-line text field with word-skip movement."""

from __future__ import annotations

from typing import Literal

from reqline.components.pane import render_box
from reqline.keybindings import KeybindingsManager, get_keybindings
from reqline.keys import KeyEvent
from reqline.utils import colorize, tail_to_width, truncate_to_width, visible_width

CursorDirection = Literal["left", "right"]


class CursorEditor:
    """Single-line text field with a character-indexed cursor.

    The text is held as a ``str`` and the cursor is an index into it, so every
    position refers to a whole code point. Invalid moves are clamped instead
    of raising: ``0 <= cursor <= len(text)`` holds after every operation.
    """

    def __init__(self, title: str, style: str = "default") -> None:
        self.title = title
        self.style = style

        # Focusable interface
        self.focused: bool = False

        self._text: str = ""
        self._cursor: int = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, value: int) -> None:
        self._cursor = self._clamp(value)

    def focus(self) -> None:
        self.focused = True

    def unfocus(self) -> None:
        self.focused = False

    # -- editing ------------------------------------------------------------

    def insert(self, char: str) -> None:
        """Insert *char* at the cursor and step past it."""
        self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
        self.move_cursor("right", skip=False)

    def delete_back(self) -> None:
        """Remove the character before the cursor (backspace)."""
        if self._cursor == 0:
            return
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self.move_cursor("left", skip=False)

    def reset(self) -> None:
        self._text = ""
        self._cursor = 0

    def move_cursor(self, direction: CursorDirection, skip: bool) -> None:
        """Move one character, or to the next word boundary when *skip* is set."""
        if skip:
            new = self._word_boundary(direction)
        elif direction == "right":
            new = self._cursor + 1
        else:
            new = self._cursor - 1
        self._cursor = self._clamp(new)

    def _word_boundary(self, direction: CursorDirection) -> int:
        # Alphanumeric vs. everything else is the only word classifier.
        # The character adjacent to the cursor is skipped in both directions
        # so that repeated skips make progress across separators.
        text = self._text
        if direction == "left":
            for i in range(self._cursor - 2, -1, -1):
                if not text[i].isalnum():
                    return i + 1
            return 0
        for i in range(self._cursor + 1, len(text)):
            if not text[i].isalnum():
                return i
        return len(text)

    def _clamp(self, value: int) -> int:
        return min(max(value, 0), len(self._text))

    def byte_offset(self, encoding: str = "utf-8") -> int:
        """Byte offset of the cursor in the encoded text."""
        return len(self._text[: self._cursor].encode(encoding))

    # -- input --------------------------------------------------------------

    def handle_key(
        self, event: KeyEvent, keybindings: KeybindingsManager | None = None
    ) -> bool:
        """Apply an edit key to the field. Returns ``True`` if it was consumed."""
        kb = keybindings or get_keybindings()

        if kb.matches(event, "cursorWordLeft"):
            self.move_cursor("left", skip=True)
        elif kb.matches(event, "cursorWordRight"):
            self.move_cursor("right", skip=True)
        elif kb.matches(event, "cursorLeft"):
            self.move_cursor("left", skip=False)
        elif kb.matches(event, "cursorRight"):
            self.move_cursor("right", skip=False)
        elif kb.matches(event, "deleteCharBackward"):
            self.delete_back()
        elif kb.matches(event, "clearField"):
            self.reset()
        elif event.char is not None:
            self.insert(event.char)
        else:
            return False
        return True

    # -- rendering ----------------------------------------------------------

    def _viewport(self, inner_width: int) -> tuple[str, int]:
        """Visible slice of the text and the cursor column inside it."""
        before = self._text[: self._cursor]
        before_width = visible_width(before)
        if before_width < inner_width:
            return truncate_to_width(self._text, inner_width), before_width
        # Scroll so the cursor sits in the last column
        head = tail_to_width(before, inner_width - 1)
        return head, visible_width(head)

    def cursor_column(self, width: int) -> int:
        """Display column of the cursor, relative to the box's left border."""
        _, column = self._viewport(max(width - 2, 0))
        return column + 1

    def render(self, width: int, highlight: bool = False) -> list[str]:
        visible, _ = self._viewport(max(width - 2, 0))
        if self.focused:
            visible = colorize(visible, "yellow")
        return render_box(
            self.title,
            [visible],
            width,
            3,
            border_style="yellow" if highlight else self.style,
        )
