"""Keyboard and mouse state gathered from one frame of window events."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import pygame


class InputState(enum.Enum):
    """How a key or button is asked about."""

    PRESSED = "pressed"
    HELD = "held"
    RELEASED = "released"


class MouseButton(enum.IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class KeyCode(enum.IntEnum):
    NULL = pygame.K_UNKNOWN
    APOSTROPHE = pygame.K_QUOTE
    COMMA = pygame.K_COMMA
    MINUS = pygame.K_MINUS
    PERIOD = pygame.K_PERIOD
    SLASH = pygame.K_SLASH
    N0 = pygame.K_0
    N1 = pygame.K_1
    N2 = pygame.K_2
    N3 = pygame.K_3
    N4 = pygame.K_4
    N5 = pygame.K_5
    N6 = pygame.K_6
    N7 = pygame.K_7
    N8 = pygame.K_8
    N9 = pygame.K_9
    SEMICOLON = pygame.K_SEMICOLON
    EQUAL = pygame.K_EQUALS
    A = pygame.K_a
    B = pygame.K_b
    C = pygame.K_c
    D = pygame.K_d
    E = pygame.K_e
    F = pygame.K_f
    G = pygame.K_g
    H = pygame.K_h
    I = pygame.K_i  # noqa: E741
    J = pygame.K_j
    K = pygame.K_k
    L = pygame.K_l
    M = pygame.K_m
    N = pygame.K_n
    O = pygame.K_o  # noqa: E741
    P = pygame.K_p
    Q = pygame.K_q
    R = pygame.K_r
    S = pygame.K_s
    T = pygame.K_t
    U = pygame.K_u
    V = pygame.K_v
    W = pygame.K_w
    X = pygame.K_x
    Y = pygame.K_y
    Z = pygame.K_z
    LEFT_BRACKET = pygame.K_LEFTBRACKET
    RIGHT_BRACKET = pygame.K_RIGHTBRACKET
    BACKSLASH = pygame.K_BACKSLASH
    TILDE = pygame.K_BACKQUOTE
    SPACE = pygame.K_SPACE
    ESCAPE = pygame.K_ESCAPE
    ENTER = pygame.K_RETURN
    TAB = pygame.K_TAB
    BACKSPACE = pygame.K_BACKSPACE
    INSERT = pygame.K_INSERT
    DELETE = pygame.K_DELETE
    RIGHT = pygame.K_RIGHT
    LEFT = pygame.K_LEFT
    DOWN = pygame.K_DOWN
    UP = pygame.K_UP
    PAGE_UP = pygame.K_PAGEUP
    PAGE_DOWN = pygame.K_PAGEDOWN
    HOME = pygame.K_HOME
    END = pygame.K_END
    CAPS_LOCK = pygame.K_CAPSLOCK
    NUM_LOCK = pygame.K_NUMLOCK
    PRINT_SCREEN = pygame.K_PRINT
    PAUSE = pygame.K_PAUSE
    F1 = pygame.K_F1
    F2 = pygame.K_F2
    F3 = pygame.K_F3
    F4 = pygame.K_F4
    F5 = pygame.K_F5
    F6 = pygame.K_F6
    F7 = pygame.K_F7
    F8 = pygame.K_F8
    F9 = pygame.K_F9
    F10 = pygame.K_F10
    F11 = pygame.K_F11
    F12 = pygame.K_F12
    LEFT_SHIFT = pygame.K_LSHIFT
    RIGHT_SHIFT = pygame.K_RSHIFT
    LEFT_CONTROL = pygame.K_LCTRL
    RIGHT_CONTROL = pygame.K_RCTRL
    LEFT_ALT = pygame.K_LALT
    RIGHT_ALT = pygame.K_RALT
    LEFT_SUPER = pygame.K_LSUPER
    RIGHT_SUPER = pygame.K_RSUPER
    NUM0 = pygame.K_KP0
    NUM1 = pygame.K_KP1
    NUM2 = pygame.K_KP2
    NUM3 = pygame.K_KP3
    NUM4 = pygame.K_KP4
    NUM5 = pygame.K_KP5
    NUM6 = pygame.K_KP6
    NUM7 = pygame.K_KP7
    NUM8 = pygame.K_KP8
    NUM9 = pygame.K_KP9
    NUM_DECIMAL = pygame.K_KP_PERIOD
    NUM_DIVIDE = pygame.K_KP_DIVIDE
    NUM_MULTIPLY = pygame.K_KP_MULTIPLY
    NUM_SUBTRACT = pygame.K_KP_MINUS
    NUM_ADD = pygame.K_KP_PLUS
    NUM_EQUAL = pygame.K_KP_EQUALS


class _Tracker:
    """Pressed, held and released sets for one kind of control."""

    def __init__(self) -> None:
        self.pressed: set[int] = set()
        self.held: set[int] = set()
        self.released: set[int] = set()

    def new_frame(self) -> None:
        self.pressed.clear()
        self.released.clear()

    def down(self, code: int) -> None:
        self.pressed.add(code)
        self.held.add(code)

    def up(self, code: int) -> None:
        self.released.add(code)
        self.held.discard(code)

    def query(self, code: int, state: InputState) -> bool:
        if state is InputState.PRESSED:
            return code in self.pressed
        if state is InputState.HELD:
            return code in self.held
        if state is InputState.RELEASED:
            return code in self.released
        raise ValueError(f"unknown input state {state!r}")


class Input:
    """Keeps the state of keys, mouse buttons and the cursor between frames."""

    def __init__(self) -> None:
        self.screen_size: tuple[float, float] | None = None
        self.mouse: tuple[float, float] = (0.0, 0.0)
        self._keys = _Tracker()
        self._buttons = _Tracker()

    def handle(
        self,
        screen_size: tuple[float, float],
        events: Iterable[pygame.event.Event] = (),
    ) -> None:
        """Start a new frame and take in the events that arrived for it."""
        self.screen_size = (float(screen_size[0]), float(screen_size[1]))
        self._keys.new_frame()
        self._buttons.new_frame()
        for event in events:
            if event.type == pygame.KEYDOWN:
                self._keys.down(event.key)
            elif event.type == pygame.KEYUP:
                self._keys.up(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._buttons.down(event.button)
            elif event.type == pygame.MOUSEBUTTONUP:
                self._buttons.up(event.button)
            pos = getattr(event, "pos", None)
            if pos is not None:
                self.mouse = (float(pos[0]), float(pos[1]))

    def get_key(self, key: KeyCode, state: InputState) -> bool:
        return self._keys.query(int(key), state)

    def get_mouse_button(self, button: MouseButton, state: InputState) -> bool:
        return self._buttons.query(int(button), state)

    def cursor_position(self) -> tuple[float, float]:
        """Cursor position as a fraction of the screen size."""
        if self.screen_size is None:
            raise RuntimeError("screen size is not known before the first frame")
        width, height = self.screen_size
        return self.mouse[0] / width, self.mouse[1] / height

    def cursor_world_position(
        self, camera_offset: tuple[float, float]
    ) -> tuple[float, float]:
        """Cursor position in world space for an unrotated, unzoomed camera."""
        return self.mouse[0] - camera_offset[0], self.mouse[1] - camera_offset[1]