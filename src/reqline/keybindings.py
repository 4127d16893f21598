"""Application keybindings manager."""

from __future__ import annotations

import logging
from typing import Literal, Mapping, get_args

from reqline.keys import KeyEvent, KeyId

logger = logging.getLogger(__name__)

AppAction = Literal[
    # Application
    "quit",
    "toggleMode",
    "exitEdit",
    "submit",
    # Pane navigation
    "navUp",
    "navDown",
    "navLeft",
    "navRight",
    # Cursor movement
    "cursorLeft",
    "cursorRight",
    "cursorWordLeft",
    "cursorWordRight",
    # Deletion
    "deleteCharBackward",
    "clearField",
]

KeybindingsConfig = Mapping[str, KeyId | list[KeyId]]

DEFAULT_KEYBINDINGS: dict[AppAction, KeyId | list[KeyId]] = {
    # Application
    "quit": ["q", "escape"],
    "toggleMode": "e",
    "exitEdit": "escape",
    "submit": "enter",
    # Pane navigation
    "navUp": "up",
    "navDown": "down",
    "navLeft": "left",
    "navRight": "right",
    # Cursor movement
    "cursorLeft": "left",
    "cursorRight": "right",
    "cursorWordLeft": ["ctrl+left", "alt+left"],
    "cursorWordRight": ["ctrl+right", "alt+right"],
    # Deletion
    "deleteCharBackward": "backspace",
    "clearField": "delete",
}

_KNOWN_ACTIONS: frozenset[str] = frozenset(get_args(AppAction))


class KeybindingsManager:
    """Maps key events to application actions."""

    def __init__(self, config: KeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[AppAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: KeybindingsConfig) -> None:
        self._action_to_keys.clear()

        # Start with defaults
        for action, keys in DEFAULT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Override with user config
        for action, keys in config.items():
            if action not in _KNOWN_ACTIONS:
                logger.warning("Ignoring keybinding for unknown action %r", action)
                continue
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)  # type: ignore[index]

    def matches(self, event: KeyEvent, action: AppAction) -> bool:
        """Check if a key event triggers a specific action."""
        return event.id in self._action_to_keys.get(action, [])

    def get_keys(self, action: AppAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: KeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


_global_keybindings: KeybindingsManager | None = None


def get_keybindings() -> KeybindingsManager:
    global _global_keybindings
    if _global_keybindings is None:
        _global_keybindings = KeybindingsManager()
    return _global_keybindings


def set_keybindings(manager: KeybindingsManager) -> None:
    global _global_keybindings
    _global_keybindings = manager
