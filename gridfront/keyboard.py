"""Translation of key presses into editor keybinding strings."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Callable

from gridfront.config import KeyboardSettings


class Key(enum.Enum):
    """Logical keys that never produce text, plus a catch-all for the rest."""

    BACKSPACE = "backspace"
    ESCAPE = "escape"
    DELETE = "delete"
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"
    INSERT = "insert"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    CHARACTER = "character"
    OTHER = "other"


class KeyState(enum.Enum):
    PRESSED = "pressed"
    RELEASED = "released"


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release with the text it produces."""

    logical_key: Key = Key.CHARACTER
    state: KeyState = KeyState.PRESSED
    text: str | None = None
    text_with_all_modifiers: str | None = None


@dataclass(frozen=True)
class Modifiers:
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    logo: bool = False


_CONTROL_KEYS = {
    Key.BACKSPACE: "BS",
    Key.ESCAPE: "Esc",
    Key.DELETE: "Del",
    Key.ARROW_UP: "Up",
    Key.ARROW_DOWN: "Down",
    Key.ARROW_LEFT: "Left",
    Key.ARROW_RIGHT: "Right",
    Key.F1: "F1",
    Key.F2: "F2",
    Key.F3: "F3",
    Key.F4: "F4",
    Key.F5: "F5",
    Key.F6: "F6",
    Key.F7: "F7",
    Key.F8: "F8",
    Key.F9: "F9",
    Key.F10: "F10",
    Key.F11: "F11",
    Key.F12: "F12",
    Key.INSERT: "Insert",
    Key.HOME: "Home",
    Key.END: "End",
    Key.PAGE_UP: "PageUp",
    Key.PAGE_DOWN: "PageDown",
    Key.TAB: "Tab",
}

_SPECIAL_TEXT = {
    " ": "Space",
    "<": "lt",
    "\\": "Bslash",
    "|": "Bar",
    "\t": "Tab",
    "\n": "CR",
}


def control_key_name(key: Key) -> str | None:
    """Keybinding name of a key that never presents text, or None."""
    return _CONTROL_KEYS.get(key)


def special_text_name(text: str) -> str | None:
    """Escaped keybinding name of text that must not appear literally, or None."""
    return _SPECIAL_TEXT.get(text)


def _or_empty(condition: bool, text: str) -> str:
    return text if condition else ""


class KeyboardManager:
    """Collects key events for a frame and sends their keybindings when the frame ends.

    ``command_sender`` is called with each keybinding string. ``keyboard_settings``
    returns the current keyboard settings; by default they are read from the
    global settings store.
    """

    def __init__(
        self,
        command_sender: Callable[[str], None],
        keyboard_settings: Callable[[], KeyboardSettings] | None = None,
        is_macos: bool | None = None,
    ) -> None:
        self._send = command_sender
        if keyboard_settings is None:
            from gridfront.settings import SETTINGS

            keyboard_settings = lambda: SETTINGS.get(KeyboardSettings)  # noqa: E731
        self._keyboard_settings = keyboard_settings
        self._is_macos = sys.platform == "darwin" if is_macos is None else is_macos
        self.shift = False
        self.ctrl = False
        self.alt = False
        self.logo = False
        self._ignore_input_this_frame = False
        self._queued_key_events: list[KeyEvent] = []

    def _use_alt(self) -> bool:
        # Alt/option selects alternative characters on macOS.
        return False if self._is_macos else self.alt

    def handle_focus_changed(self, focused: bool) -> None:
        """Ignore the key events of a frame in which focus was gained or lost."""
        self._ignore_input_this_frame = True

    def handle_key_event(self, event: KeyEvent) -> None:
        self._queued_key_events.append(event)

    def handle_modifiers_changed(self, modifiers: Modifiers) -> None:
        self.shift = modifiers.shift
        self.ctrl = modifiers.ctrl
        self.alt = modifiers.alt
        self.logo = modifiers.logo

    def _should_ignore_input(self, settings: KeyboardSettings) -> bool:
        return self._ignore_input_this_frame or (self.logo and not settings.use_logo)

    def handle_events_cleared(self) -> list[str]:
        """Send the keybindings of the frame's pressed keys and return them."""
        sent: list[str] = []
        if not self._should_ignore_input(self._keyboard_settings()):
            for key_event in self._queued_key_events:
                if key_event.state is not KeyState.PRESSED:
                    continue
                keybinding = self.maybe_get_keybinding(key_event)
                if keybinding is not None:
                    self._send(keybinding)
                    sent.append(keybinding)

        self._ignore_input_this_frame = False
        self._queued_key_events.clear()
        return sent

    def maybe_get_keybinding(self, key_event: KeyEvent) -> str | None:
        control_name = control_key_name(key_event.logical_key)
        if control_name is not None:
            return self.format_keybinding_string(True, True, control_name)

        is_dead_key = (
            key_event.text_with_all_modifiers is not None and key_event.text is None
        )
        if (self.alt or is_dead_key) and self._is_macos:
            key_text = key_event.text_with_all_modifiers
        else:
            key_text = key_event.text

        if key_text is None:
            return None

        escaped = special_text_name(key_text)
        if escaped is not None:
            return self.format_keybinding_string(True, False, escaped)
        return self.format_keybinding_string(False, False, key_text)

    def format_keybinding_string(self, special: bool, use_shift: bool, text: str) -> str:
        special = special or self.ctrl or self._use_alt() or self.logo
        open_bracket = _or_empty(special, "<")
        close_bracket = _or_empty(special, ">")
        return open_bracket + self.format_modifier_string(use_shift) + text + close_bracket

    def format_modifier_string(self, use_shift: bool) -> str:
        return (
            _or_empty(self.shift and use_shift, "S-")
            + _or_empty(self.ctrl, "C-")
            + _or_empty(self._use_alt(), "M-")
            + _or_empty(self.logo, "D-")
        )