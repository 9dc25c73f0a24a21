"""Keyboard and mouse state fed by window events and read once per frame."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

KEY_LAST = 348
MOUSE_BUTTON_LAST = 7

Vec2 = tuple[float, float]


class Action(enum.IntEnum):
    """What happened to a key or button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class MouseState:
    """Mouse position and its movement since the last frame."""

    pos: Vec2
    absolute_move: Vec2
    move: Vec2
    raw_move: Vec2


def _sign(value: float) -> float:
    if value < 0.0:
        return -1.0
    if value > 0.0:
        return 1.0
    return 0.0


def _check(code: int, limit: int, kind: str) -> None:
    if not 0 <= code < limit:
        raise ValueError(f"{kind} code {code} is outside [0, {limit})")


@dataclass
class InputState:
    """Held and just-pressed keys and buttons, plus cursor positions."""

    keys: set[int] = field(default_factory=set)
    keys_pressed: set[int] = field(default_factory=set)
    buttons: set[int] = field(default_factory=set)
    buttons_pressed: set[int] = field(default_factory=set)
    mouse_pos: Vec2 = (0.0, 0.0)
    last_mouse_pos: Vec2 = (0.0, 0.0)

    @staticmethod
    def _apply(held: set[int], pressed: set[int], code: int, action: Action) -> None:
        action = Action(action)
        if action in (Action.PRESS, Action.REPEAT):
            held.add(code)
        else:
            held.discard(code)
        if action is Action.PRESS:
            pressed.add(code)
        else:
            pressed.discard(code)

    def key_event(self, key: int, action: Action) -> None:
        """Record a key press, repeat or release."""
        _check(key, KEY_LAST, "key")
        self._apply(self.keys, self.keys_pressed, key, action)

    def button_event(self, button: int, action: Action) -> None:
        """Record a mouse button press, repeat or release."""
        _check(button, MOUSE_BUTTON_LAST, "mouse button")
        self._apply(self.buttons, self.buttons_pressed, button, action)

    def cursor_event(self, x: float, y: float) -> None:
        """Record the cursor's new position in the window."""
        self.mouse_pos = (float(x), float(y))

    def end_frame(self) -> None:
        """Forget this frame's presses and remember the cursor position."""
        self.keys_pressed.clear()
        self.buttons_pressed.clear()
        self.last_mouse_pos = self.mouse_pos

    def is_key_down(self, key: int) -> bool:
        """Whether ``key`` is held."""
        return key in self.keys

    def is_key_pressed(self, key: int) -> bool:
        """Whether ``key`` went down this frame."""
        return key in self.keys_pressed

    def is_button_down(self, button: int) -> bool:
        """Whether mouse ``button`` is held."""
        return button in self.buttons

    def is_button_pressed(self, button: int) -> bool:
        """Whether mouse ``button`` went down this frame."""
        return button in self.buttons_pressed

    def mouse_absolute_move(self) -> Vec2:
        """Cursor movement in pixels since the last frame."""
        return (
            self.mouse_pos[0] - self.last_mouse_pos[0],
            self.mouse_pos[1] - self.last_mouse_pos[1],
        )

    def mouse_move(self, width: float, height: float) -> Vec2:
        """Cursor movement as a fraction of the window size."""
        dx, dy = self.mouse_absolute_move()
        return (dx / width, dy / height)

    def mouse_raw_move(self) -> Vec2:
        """Direction of cursor movement on each axis: -1, 0 or 1."""
        dx, dy = self.mouse_absolute_move()
        return (_sign(dx), _sign(dy))

    def mouse_state(self, width: float, height: float) -> MouseState:
        """All mouse readings for a window of the given size."""
        return MouseState(
            pos=self.mouse_pos,
            absolute_move=self.mouse_absolute_move(),
            move=self.mouse_move(width, height),
            raw_move=self.mouse_raw_move(),
        )