import pytest

from cumulus.input import KEY_LAST, MOUSE_BUTTON_LAST, Action, InputState, MouseState

KEY_W = 87
BUTTON_LEFT = 0


def test_key_press_is_down_and_pressed():
    state = InputState()
    state.key_event(KEY_W, Action.PRESS)
    assert state.is_key_down(KEY_W)
    assert state.is_key_pressed(KEY_W)


def test_end_frame_clears_pressed_but_keeps_down():
    state = InputState()
    state.key_event(KEY_W, Action.PRESS)
    state.end_frame()
    assert state.is_key_down(KEY_W)
    assert not state.is_key_pressed(KEY_W)


def test_repeat_keeps_down_without_press():
    state = InputState()
    state.key_event(KEY_W, Action.PRESS)
    state.key_event(KEY_W, Action.REPEAT)
    assert state.is_key_down(KEY_W)
    assert not state.is_key_pressed(KEY_W)


def test_release_clears_key():
    state = InputState()
    state.key_event(KEY_W, Action.PRESS)
    state.key_event(KEY_W, Action.RELEASE)
    assert not state.is_key_down(KEY_W)
    assert not state.is_key_pressed(KEY_W)


def test_button_events():
    state = InputState()
    state.button_event(BUTTON_LEFT, Action.PRESS)
    assert state.is_button_down(BUTTON_LEFT)
    assert state.is_button_pressed(BUTTON_LEFT)
    state.end_frame()
    assert state.is_button_down(BUTTON_LEFT)
    assert not state.is_button_pressed(BUTTON_LEFT)
    state.button_event(BUTTON_LEFT, Action.RELEASE)
    assert not state.is_button_down(BUTTON_LEFT)


@pytest.mark.parametrize("key", [-1, KEY_LAST])
def test_out_of_range_key_rejected(key):
    with pytest.raises(ValueError):
        InputState().key_event(key, Action.PRESS)


def test_out_of_range_button_rejected():
    with pytest.raises(ValueError):
        InputState().button_event(MOUSE_BUTTON_LAST, Action.PRESS)


def test_absolute_move_is_difference_since_last_frame():
    state = InputState()
    state.cursor_event(10.0, 20.0)
    state.end_frame()
    state.cursor_event(25.0, 5.0)
    assert state.mouse_absolute_move() == (25.0 - 10.0, 5.0 - 20.0)


def test_no_move_after_end_frame():
    state = InputState()
    state.cursor_event(40.0, 30.0)
    state.end_frame()
    assert state.mouse_absolute_move() == (0.0, 0.0)
    assert state.mouse_raw_move() == (0.0, 0.0)


def test_mouse_move_normalised_by_window():
    state = InputState()
    state.cursor_event(100.0, 45.0)
    assert state.mouse_move(200.0, 90.0) == (100.0 / 200.0, 45.0 / 90.0)


def test_raw_move_signs():
    state = InputState()
    state.cursor_event(50.0, 50.0)
    state.end_frame()
    state.cursor_event(20.0, 80.0)
    assert state.mouse_raw_move() == (-1.0, 1.0)


def test_mouse_state_combines_readings():
    state = InputState()
    state.cursor_event(8.0, 6.0)
    result = state.mouse_state(16.0, 12.0)
    assert result == MouseState(
        pos=(8.0, 6.0),
        absolute_move=(8.0, 6.0),
        move=(8.0 / 16.0, 6.0 / 12.0),
        raw_move=(1.0, 1.0),
    )