import math

import numpy as np
import pytest

from cumulus.camera import (
    KEY_A,
    KEY_D,
    KEY_ESCAPE,
    KEY_LEFT_SHIFT,
    KEY_SPACE,
    KEY_W,
    Camera,
    DirectionalLight,
    Transform,
    Window,
)
from cumulus.input import Action, InputState


def _captured_window():
    return Window(width=1000, height=500, cursor_hidden=True)


def test_aspect_ratio_times_height_is_width():
    window = Window(width=1600, height=900)
    assert window.aspect_ratio() * window.height == pytest.approx(window.width)


def test_aspect_ratio_zero_height_raises():
    with pytest.raises(ValueError):
        Window(width=10, height=0).aspect_ratio()


def test_camera_defaults_match_startup_values():
    camera = Camera()
    assert camera.fov == 70.0
    assert camera.far_plane == 2048.0
    assert camera.speed == 200.0
    assert camera.sens == 7500.0


def test_light_default_color_is_normalised():
    light = DirectionalLight()
    assert np.allclose(light.color * 255.0, [239.0, 227.0, 200.0])
    assert light.intensity == 0.9


def test_no_movement_while_cursor_visible():
    camera = Camera()
    window = Window(width=100, height=100)
    state = InputState()
    state.key_event(KEY_D, Action.PRESS)
    camera.update(state, window, 1.0)
    assert np.allclose(camera.position, 0.0)


def test_escape_toggles_cursor_capture():
    camera = Camera()
    window = Window(width=100, height=100)
    state = InputState()
    state.key_event(KEY_ESCAPE, Action.PRESS)
    camera.update(state, window, 0.1)
    assert window.cursor_hidden is True
    camera.update(state, window, 0.1)
    assert window.cursor_hidden is False


def test_right_moves_along_positive_x():
    camera = Camera(speed=10.0)
    state = InputState()
    state.key_event(KEY_D, Action.PRESS)
    camera.update(state, _captured_window(), 0.5)
    assert camera.position[0] == pytest.approx(5.0)
    assert camera.position[1] == pytest.approx(0.0)
    assert camera.position[2] == pytest.approx(0.0)


def test_forward_moves_along_negative_z():
    camera = Camera()
    state = InputState()
    state.key_event(KEY_W, Action.PRESS)
    camera.update(state, _captured_window(), 0.1)
    assert camera.position[2] < 0.0
    assert camera.position[0] == pytest.approx(0.0, abs=1e-9)


def test_up_and_down_cancel():
    camera = Camera()
    state = InputState()
    state.key_event(KEY_SPACE, Action.PRESS)
    state.key_event(KEY_LEFT_SHIFT, Action.PRESS)
    camera.update(state, _captured_window(), 0.1)
    assert np.allclose(camera.position, 0.0)


def test_left_then_right_returns_to_start():
    camera = Camera(position=[3.0, 4.0, 5.0])
    window = _captured_window()
    left = InputState()
    left.key_event(KEY_A, Action.PRESS)
    camera.update(left, window, 0.2)
    moved = camera.position.copy()
    right = InputState()
    right.key_event(KEY_D, Action.PRESS)
    camera.update(right, window, 0.2)
    assert not np.allclose(moved, [3.0, 4.0, 5.0])
    assert np.allclose(camera.position, [3.0, 4.0, 5.0])


def test_time_scale_divides_step():
    state = InputState()
    state.key_event(KEY_SPACE, Action.PRESS)
    a = Camera()
    a.update(state, _captured_window(), 0.1, 1.0)
    b = Camera()
    b.update(state, _captured_window(), 0.2, 2.0)
    assert np.allclose(a.position, b.position)
    assert a.position[1] > 0.0


def test_mouse_turns_camera():
    camera = Camera()
    state = InputState()
    state.cursor_event(100.0, 0.0)
    camera.update(state, _captured_window(), 0.01)
    assert camera.rotation[1] > 0.0
    assert camera.rotation[0] == pytest.approx(0.0)


def test_zero_time_scale_raises():
    camera = Camera()
    with pytest.raises(ValueError):
        camera.update(InputState(), _captured_window(), 0.1, 0.0)


def test_default_view_is_identity():
    assert np.allclose(Camera().view(), np.identity(4))


def test_view_maps_camera_position_to_origin():
    camera = Camera(position=[10.0, -2.0, 7.0], rotation=[15.0, 40.0, 5.0])
    point = camera.view() @ np.append(camera.position, 1.0)
    assert np.allclose(point[:3], 0.0)
    assert point[3] == pytest.approx(1.0)


def test_view_preserves_distances():
    camera = Camera(position=[1.0, 2.0, 3.0], rotation=[30.0, 60.0, 0.0])
    p = camera.view() @ np.array([4.0, 6.0, 3.0, 1.0])
    assert math.dist(p[:3], (0.0, 0.0, 0.0)) == pytest.approx(math.dist((4, 6, 3), (1, 2, 3)))


def test_projection_view_is_product():
    camera = Camera(position=[1.0, 2.0, 3.0], rotation=[10.0, 20.0, 0.0])
    expected = camera.projection(1.5) @ camera.view()
    assert np.allclose(camera.projection_view(1.5), expected)


def test_transform_default_is_identity():
    assert np.allclose(Transform().matrix(), np.identity(4))


def test_transform_moves_origin_to_position():
    t = Transform(position=[1.0, 2.0, 3.0], rotation=[45.0, 10.0, 20.0], scale=[2.0, 2.0, 2.0])
    origin = t.matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(origin[:3], [1.0, 2.0, 3.0])


def test_transform_rejects_bad_vector():
    with pytest.raises(ValueError):
        Transform(position=[1.0, 2.0])