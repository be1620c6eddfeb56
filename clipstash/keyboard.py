"""Key bindings of the clipboard window."""

from __future__ import annotations

from enum import Enum


class KeyAction(Enum):
    """What a key press asks the window to do."""

    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    TOGGLE_DETAIL = "toggle_detail"
    OPEN_EXTERNAL = "open_external"
    COPY_AND_CLOSE = "copy_and_close"
    CLOSE = "close"


_BINDINGS = {
    "j": KeyAction.MOVE_DOWN,
    "k": KeyAction.MOVE_UP,
    "i": KeyAction.TOGGLE_DETAIL,
    "e": KeyAction.OPEN_EXTERNAL,
    "o": KeyAction.OPEN_EXTERNAL,
    "Return": KeyAction.COPY_AND_CLOSE,
    "y": KeyAction.COPY_AND_CLOSE,
    "Escape": KeyAction.CLOSE,
    "q": KeyAction.CLOSE,
}


def resolve_key(keyname: str, control: bool) -> KeyAction | None:
    """Action bound to a key, or None when the key is not handled."""
    if control and keyname == "c":
        return KeyAction.CLOSE
    return _BINDINGS.get(keyname)