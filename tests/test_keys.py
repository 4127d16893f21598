"""Tests for reqline.keys: keyboard input parsing."""

from __future__ import annotations

import pytest

from reqline.keys import (
    LEGACY_KEY_SEQUENCES,
    Key,
    KeyEvent,
    parse_key,
    split_input,
)


# ---------------------------------------------------------------------------
# Key helper class
# ---------------------------------------------------------------------------


class TestKeyConstants:
    """Key class exposes named constants for common keys."""

    def test_arrow_keys(self) -> None:
        assert Key.up == "up"
        assert Key.down == "down"
        assert Key.left == "left"
        assert Key.right == "right"

    def test_modifiers(self) -> None:
        assert Key.ctrl("left") == "ctrl+left"
        assert Key.alt("b") == "alt+b"
        assert Key.shift("tab") == "shift+tab"


# ---------------------------------------------------------------------------
# KeyEvent
# ---------------------------------------------------------------------------


class TestKeyEvent:
    """KeyEvent ids and typed characters."""

    def test_id_orders_modifiers(self) -> None:
        event = KeyEvent("left", ctrl=True, alt=True, shift=True)
        assert event.id == "ctrl+shift+alt+left"

    def test_char_for_printable(self) -> None:
        assert KeyEvent("x").char == "x"

    def test_char_for_space(self) -> None:
        assert KeyEvent("space").char == " "

    def test_no_char_with_ctrl(self) -> None:
        assert KeyEvent("x", ctrl=True).char is None

    def test_no_char_for_named_key(self) -> None:
        assert KeyEvent("backspace").char is None

    def test_default_kind_is_press(self) -> None:
        assert KeyEvent("a").is_press


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------


class TestParseKeyLegacy:
    """Legacy VT sequences and single bytes."""

    @pytest.mark.parametrize(("seq", "name"), list(LEGACY_KEY_SEQUENCES.items()))
    def test_legacy_sequences(self, seq: str, name: str) -> None:
        assert parse_key(seq) == KeyEvent(name)

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("\x1b", "escape"),
            ("\r", "enter"),
            ("\n", "enter"),
            ("\t", "tab"),
            (" ", "space"),
            ("\x7f", "backspace"),
            ("\x08", "backspace"),
            ("\x1b[3~", "delete"),
            ("\x1b[Z", "shift+tab"),
            ("\x01", "ctrl+a"),
            ("\x1bb", "alt+b"),
            ("\x1b\x7f", "alt+backspace"),
            ("a", "a"),
            ("Q", "Q"),
            ("é", "é"),
        ],
    )
    def test_key_ids(self, data: str, expected: str) -> None:
        event = parse_key(data)
        assert event is not None
        assert event.id == expected

    def test_empty_returns_none(self) -> None:
        assert parse_key("") is None

    def test_multi_char_text_returns_none(self) -> None:
        assert parse_key("hello") is None

    def test_unknown_tilde_sequence_returns_none(self) -> None:
        assert parse_key("\x1b[200~") is None


class TestParseKeyModifiers:
    """xterm modifier parameters on arrows and functional keys."""

    def test_ctrl_left(self) -> None:
        assert parse_key("\x1b[1;5D") == KeyEvent("left", ctrl=True)

    def test_ctrl_right(self) -> None:
        assert parse_key("\x1b[1;5C") == KeyEvent("right", ctrl=True)

    def test_alt_left(self) -> None:
        assert parse_key("\x1b[1;3D") == KeyEvent("left", alt=True)

    def test_shift_up(self) -> None:
        assert parse_key("\x1b[1;2A") == KeyEvent("up", shift=True)

    def test_ctrl_delete(self) -> None:
        assert parse_key("\x1b[3;5~") == KeyEvent("delete", ctrl=True)


class TestParseKeyKitty:
    """Kitty keyboard protocol sequences including event types."""

    def test_csi_u_plain_char(self) -> None:
        assert parse_key("\x1b[97u") == KeyEvent("a")

    def test_csi_u_ctrl_char(self) -> None:
        assert parse_key("\x1b[97;5u") == KeyEvent("a", ctrl=True)

    def test_csi_u_escape(self) -> None:
        assert parse_key("\x1b[27u") == KeyEvent("escape")

    def test_csi_u_backspace(self) -> None:
        assert parse_key("\x1b[127u") == KeyEvent("backspace")

    def test_csi_u_shifted_char(self) -> None:
        assert parse_key("\x1b[97:65;2u") == KeyEvent("A")

    def test_csi_u_release(self) -> None:
        event = parse_key("\x1b[97;1:3u")
        assert event == KeyEvent("a", kind="release")
        assert not event.is_press

    def test_csi_u_repeat(self) -> None:
        event = parse_key("\x1b[97;1:2u")
        assert event is not None
        assert event.kind == "repeat"

    def test_arrow_release(self) -> None:
        assert parse_key("\x1b[1;1:3D") == KeyEvent("left", kind="release")

    def test_ctrl_arrow_press_with_event_type(self) -> None:
        assert parse_key("\x1b[1;5:1C") == KeyEvent("right", ctrl=True)

    def test_lock_bits_are_ignored(self) -> None:
        # caps lock (64) adds to the modifier value
        assert parse_key("\x1b[97;65u") == KeyEvent("a")


class TestSplitInput:
    """split_input separates keys that arrived in one read."""

    def test_plain_text(self) -> None:
        assert split_input("abc") == ["a", "b", "c"]

    def test_mixed_sequences(self) -> None:
        assert split_input("a\x1b[D\x1b[1;5Cb") == ["a", "\x1b[D", "\x1b[1;5C", "b"]

    def test_ss3_and_kitty(self) -> None:
        assert split_input("\x1bOA\x1b[97;1:3u") == ["\x1bOA", "\x1b[97;1:3u"]

    def test_lone_escape(self) -> None:
        assert split_input("\x1b") == ["\x1b"]

    def test_alt_key(self) -> None:
        assert split_input("\x1bbx") == ["\x1bb", "x"]

    def test_empty(self) -> None:
        assert split_input("") == []
