"""Tests for ProcessTerminal input decoding, with stdin replaced by fakes."""

from __future__ import annotations

from collections import deque
from types import SimpleNamespace

import pytest

from reqline import terminal as terminal_module
from reqline.terminal import ProcessTerminal


def _ready(r, w, x, timeout):
    return r, [], []


def _idle(r, w, x, timeout):
    return [], [], []


@pytest.fixture
def chunks(monkeypatch: pytest.MonkeyPatch) -> deque[bytes]:
    """Byte chunks that successive ``os.read`` calls return."""
    pending: deque[bytes] = deque()
    stdin = SimpleNamespace(fileno=lambda: 0)
    monkeypatch.setattr(terminal_module, "sys", SimpleNamespace(stdin=stdin))
    monkeypatch.setattr(terminal_module, "select", SimpleNamespace(select=_ready))
    monkeypatch.setattr(
        terminal_module, "os", SimpleNamespace(read=lambda fd, n: pending.popleft())
    )
    return pending


class TestProcessTerminalRead:
    """read() decodes UTF-8 across chunk boundaries."""

    def test_ascii(self, chunks: deque[bytes]) -> None:
        chunks.append(b"abc")
        assert ProcessTerminal().read(0) == "abc"

    def test_character_split_across_reads(self, chunks: deque[bytes]) -> None:
        encoded = "é".encode()
        chunks.extend([b"x" + encoded[:1], encoded[1:] + b"y"])
        term = ProcessTerminal()
        assert term.read(0) == "x"
        assert term.read(0) == "éy"

    def test_incomplete_character_alone_reads_as_nothing(
        self, chunks: deque[bytes]
    ) -> None:
        encoded = "€".encode()
        chunks.extend([encoded[:2], encoded[2:]])
        term = ProcessTerminal()
        assert term.read(0) is None
        assert term.read(0) == "€"

    def test_invalid_bytes_are_replaced(self, chunks: deque[bytes]) -> None:
        chunks.append(b"\xffa")
        assert ProcessTerminal().read(0) == "\ufffda"

    def test_closed_stdin_raises(self, chunks: deque[bytes]) -> None:
        chunks.append(b"")
        with pytest.raises(EOFError):
            ProcessTerminal().read(0)

    def test_timeout_returns_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        stdin = SimpleNamespace(fileno=lambda: 0)
        monkeypatch.setattr(terminal_module, "sys", SimpleNamespace(stdin=stdin))
        monkeypatch.setattr(terminal_module, "select", SimpleNamespace(select=_idle))
        assert ProcessTerminal().read(0) is None
