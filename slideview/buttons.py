"""Mouse button bindings and the configuration file that changes them."""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

log = logging.getLogger(__name__)

SYSTEM_CONFIG = "/etc/slideview/buttons"
ACTION_MAX = 31
BUTTON_MAX = 7


class Modifier(enum.IntFlag):
    """Keyboard modifier masks as reported with pointer events."""

    NONE = 0
    SHIFT = 1
    CONTROL = 4
    MOD1 = 8
    MOD3 = 32
    MOD4 = 64


RELEVANT_MODIFIERS = Modifier.CONTROL | Modifier.SHIFT | Modifier.MOD1 | Modifier.MOD4

_MODIFIER_CHARS = {
    "C": Modifier.CONTROL,
    "S": Modifier.SHIFT,
    "1": Modifier.MOD1,
    "4": Modifier.MOD4,
}


class ButtonAction(enum.Enum):
    """Actions that can be started with a mouse button."""

    PAN = "pan"
    ZOOM = "zoom"
    TOGGLE_MENU = "toggle_menu"
    PREV_IMG = "prev_img"
    NEXT_IMG = "next_img"
    BLUR = "blur"
    ROTATE = "rotate"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    RELOAD_IMAGE = "reload_image"


_ALIASES = {
    "reload": ButtonAction.RELOAD_IMAGE,
    "menu": ButtonAction.TOGGLE_MENU,
    "prev": ButtonAction.PREV_IMG,
    "next": ButtonAction.NEXT_IMG,
}

# Order in which a button press is checked against the bindings.
_PRESS_ORDER = (
    ButtonAction.TOGGLE_MENU,
    ButtonAction.ROTATE,
    ButtonAction.BLUR,
    ButtonAction.PAN,
    ButtonAction.ZOOM,
    ButtonAction.ZOOM_IN,
    ButtonAction.ZOOM_OUT,
    ButtonAction.RELOAD_IMAGE,
    ButtonAction.PREV_IMG,
    ButtonAction.NEXT_IMG,
)


@dataclass(frozen=True)
class Binding:
    """A button number together with the modifiers that must be held.

    Button 0 without MOD3 is an unset binding; with MOD3 it stands for
    pointer movement.
    """

    button: int = 0
    state: Modifier = Modifier.NONE


def _atoi(text: str) -> int:
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not "0" <= char <= "9":
            break
        digits += char
    return sign * int(digits) if digits else 0


def parse_binding(text: str) -> Binding | None:
    """Parse a binding such as "C-S-3".

    Returns None for an empty string, which clears the button but keeps
    any modifiers already bound.
    """
    if not text:
        return None
    state = Modifier.NONE
    rest = text
    while len(rest) >= 2 and rest[1] == "-":
        modifier = _MODIFIER_CHARS.get(rest[0])
        if modifier is None:
            log.warning('buttons: invalid modifier %s in "%s"', rest[0], text)
        else:
            state |= modifier
        rest = rest[2:]
    button = _atoi(rest)
    if button == 0:
        state |= Modifier.MOD3
    return Binding(button, state)


def config_paths(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return the configuration files to try, in order.

    Without XDG_CONFIG_HOME or HOME no file is tried at all.
    """
    env = os.environ if environ is None else environ
    confhome = env.get("XDG_CONFIG_HOME")
    home = env.get("HOME")
    if confhome:
        user = f"{confhome}/slideview/buttons"
    elif home:
        user = f"{home}/.config/slideview/buttons"
    else:
        return []
    return [user, SYSTEM_CONFIG]


def _lookup(name: str) -> ButtonAction | None:
    try:
        return ButtonAction(name)
    except ValueError:
        return _ALIASES.get(name)


class ButtonBindings:
    """The current button binding for every action."""

    def __init__(self) -> None:
        self.bindings: dict[ButtonAction, Binding] = {action: Binding() for action in ButtonAction}
        self.bindings.update(
            {
                ButtonAction.PAN: Binding(1),
                ButtonAction.ZOOM: Binding(2),
                ButtonAction.TOGGLE_MENU: Binding(3),
                ButtonAction.PREV_IMG: Binding(4),
                ButtonAction.NEXT_IMG: Binding(5),
                ButtonAction.BLUR: Binding(1, Modifier.CONTROL),
                ButtonAction.ROTATE: Binding(2, Modifier.CONTROL),
            }
        )

    def __getitem__(self, action: ButtonAction) -> Binding:
        return self.bindings[action]

    def matches(self, action: ButtonAction, button: int, state: int) -> bool:
        """Tell whether *button* with exactly the modifiers *state* is bound to *action*."""
        binding = self.bindings[action]
        return binding.button == button and binding.state == state

    def action_for(self, button: int, state: int) -> ButtonAction | None:
        """Return the action a button press starts, ignoring irrelevant modifiers."""
        relevant = Modifier(state & RELEVANT_MODIFIERS)
        for action in _PRESS_ORDER:
            if self.matches(action, button, relevant):
                return action
        return None

    def load_lines(self, lines: Iterable[str]) -> None:
        """Apply "action binding" lines; lines starting with "#" are comments."""
        for line in lines:
            if line.startswith("#"):
                continue
            words = line.split()
            if not words:
                continue
            name = words[0][:ACTION_MAX]
            text = words[1][:BUTTON_MAX] if len(words) > 1 else ""
            action = _lookup(name)
            if action is None:
                log.warning("buttons: Invalid action: %s", name)
                continue
            binding = parse_binding(text)
            if binding is None:
                binding = replace(self.bindings[action], button=0)
            self.bindings[action] = binding

    def load(self, environ: Mapping[str, str] | None = None) -> str | None:
        """Read the first configuration file that can be opened.

        Returns its path, or None if none could be read.
        """
        for path in config_paths(environ):
            try:
                with open(path, encoding="utf-8", errors="replace") as stream:
                    self.load_lines(stream)
            except OSError:
                continue
            return path
        return None