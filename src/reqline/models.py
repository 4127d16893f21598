"""Request and response data model shown in the request/response panes."""

from __future__ import annotations

from dataclasses import dataclass, field

from reqline import __version__


def _default_headers() -> dict[str, str]:
    return {
        "User-Agent": f"reqline/{__version__}",
        "Accept": "application/json",
        "Host": "localhost",
    }


@dataclass
class Request:
    """An HTTP request being composed."""

    uri: str = ""
    query: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=_default_headers)
    body: str = ""

    def summary_lines(self) -> list[str]:
        lines = [f"GET {self.uri or '<no url>'}"]
        lines.extend(f"?{k}={v}" for k, v in self.query.items())
        lines.extend(f"{k}: {v}" for k, v in self.headers.items())
        if self.body:
            lines.append("")
            lines.append(self.body)
        return lines


@dataclass
class Response:
    """The response to the last request; all zero until one arrives."""

    time: int = 0  # milliseconds
    status: int = 0
    size: int = 0
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    def summary_lines(self) -> list[str]:
        if not self.status:
            return ["No response yet"]
        lines = [f"Status: {self.status}  Time: {self.time} ms  Size: {self.size} B"]
        lines.extend(f"{k}: {v}" for k, v in self.headers.items())
        if self.body:
            lines.append("")
            lines.extend(self.body.splitlines())
        return lines
