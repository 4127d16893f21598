"""reqline: terminal request builder with pane navigation and line editing."""

__version__ = "0.1.0"

# Components
from reqline.components import (
    CursorDirection,
    CursorEditor,
    FocusGrid,
    NavDirection,
    Region,
)

# Keybindings
from reqline.keybindings import (
    DEFAULT_KEYBINDINGS,
    AppAction,
    KeybindingsManager,
    get_keybindings,
    set_keybindings,
)

# Keyboard input handling
from reqline.keys import Key, KeyEvent, KeyEventType, KeyId, parse_key, split_input

# Request / response model
from reqline.models import Request, Response

# Terminal interface and implementations
from reqline.terminal import ProcessTerminal, Terminal

# Utilities
from reqline.utils import truncate_to_width, visible_width

__all__ = [
    "__version__",
    # Components
    "CursorDirection",
    "CursorEditor",
    "FocusGrid",
    "NavDirection",
    "Region",
    # Keybindings
    "DEFAULT_KEYBINDINGS",
    "AppAction",
    "KeybindingsManager",
    "get_keybindings",
    "set_keybindings",
    # Keys
    "Key",
    "KeyEvent",
    "KeyEventType",
    "KeyId",
    "parse_key",
    "split_input",
    # Models
    "Request",
    "Response",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Utilities
    "truncate_to_width",
    "visible_width",
]
