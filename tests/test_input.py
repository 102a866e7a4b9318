import pygame
import pytest

from roadnet.input import Input, InputState, KeyCode, MouseButton

SIZE = (1280, 720)


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=int(key))


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=int(key))


def button_down(button, pos=(0, 0)):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=int(button), pos=pos)


def button_up(button, pos=(0, 0)):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=int(button), pos=pos)


def test_key_pressed_and_held_in_same_frame():
    inp = Input()
    inp.handle(SIZE, [key_down(KeyCode.N1)])
    assert inp.get_key(KeyCode.N1, InputState.PRESSED) is True
    assert inp.get_key(KeyCode.N1, InputState.HELD) is True
    assert inp.get_key(KeyCode.N1, InputState.RELEASED) is False
    assert inp.get_key(KeyCode.N2, InputState.PRESSED) is False


def test_pressed_lasts_one_frame_held_persists():
    inp = Input()
    inp.handle(SIZE, [key_down(KeyCode.A)])
    inp.handle(SIZE, [])
    assert inp.get_key(KeyCode.A, InputState.PRESSED) is False
    assert inp.get_key(KeyCode.A, InputState.HELD) is True


def test_key_release():
    inp = Input()
    inp.handle(SIZE, [key_down(KeyCode.SPACE)])
    inp.handle(SIZE, [key_up(KeyCode.SPACE)])
    assert inp.get_key(KeyCode.SPACE, InputState.RELEASED) is True
    assert inp.get_key(KeyCode.SPACE, InputState.HELD) is False
    inp.handle(SIZE, [])
    assert inp.get_key(KeyCode.SPACE, InputState.RELEASED) is False


def test_mouse_buttons_tracked_separately():
    inp = Input()
    inp.handle(SIZE, [button_down(MouseButton.RIGHT)])
    assert inp.get_mouse_button(MouseButton.RIGHT, InputState.PRESSED) is True
    assert inp.get_mouse_button(MouseButton.LEFT, InputState.PRESSED) is False
    inp.handle(SIZE, [button_up(MouseButton.RIGHT)])
    assert inp.get_mouse_button(MouseButton.RIGHT, InputState.RELEASED) is True
    assert inp.get_mouse_button(MouseButton.RIGHT, InputState.HELD) is False


def test_cursor_position_is_fraction_of_screen():
    inp = Input()
    inp.handle(SIZE, [pygame.event.Event(pygame.MOUSEMOTION, pos=(640, 360))])
    assert inp.cursor_position() == pytest.approx((0.5, 0.5))


def test_cursor_position_follows_button_event_pos():
    inp = Input()
    inp.handle(SIZE, [button_down(MouseButton.LEFT, pos=(1280, 0))])
    assert inp.cursor_position() == pytest.approx((1.0, 0.0))


def test_cursor_world_position_subtracts_offset():
    inp = Input()
    inp.handle(SIZE, [pygame.event.Event(pygame.MOUSEMOTION, pos=(640, 360))])
    assert inp.cursor_world_position((640, 360)) == pytest.approx((0.0, 0.0))


def test_cursor_position_needs_a_frame():
    with pytest.raises(RuntimeError):
        Input().cursor_position()


def test_unknown_state_rejected():
    inp = Input()
    inp.handle(SIZE, [])
    with pytest.raises(ValueError):
        inp.get_key(KeyCode.A, "pressed")


def test_key_codes_match_pygame_events():
    inp = Input()
    inp.handle(
        SIZE,
        [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN),
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)),
        ],
    )
    assert inp.get_key(KeyCode.ENTER, InputState.PRESSED) is True
    assert inp.get_mouse_button(MouseButton.RIGHT, InputState.PRESSED) is True
    assert inp.get_mouse_button(MouseButton.MIDDLE, InputState.PRESSED) is False