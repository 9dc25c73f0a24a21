"""Fly camera, window description, entity transforms and the directional light."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from cumulus.input import InputState
from cumulus.vecmath import (
    get_transformation_matrix,
    perspective,
    rgb,
    rotate_x,
    rotate_y,
    rotate_z,
    translate,
    yaw_pitch_to_direction,
    yaw_to_right,
)

KEY_SPACE = 32
KEY_A = 65
KEY_D = 68
KEY_S = 83
KEY_W = 87
KEY_ESCAPE = 256
KEY_LEFT_SHIFT = 340


def _vec3(values) -> np.ndarray:
    v = np.array(values, dtype=float)
    if v.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {v.shape}")
    return v


@dataclass
class Window:
    """Size, title and cursor mode of the render window."""

    width: int
    height: int
    title: str = ""
    cursor_hidden: bool = False

    def aspect_ratio(self) -> float:
        """Width divided by height."""
        if self.height == 0:
            raise ValueError("window height must be non-zero")
        return self.width / self.height


@dataclass
class Transform:
    """Position, rotation in degrees and per-axis scale of an entity."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)
        self.scale = _vec3(self.scale)

    def matrix(self) -> np.ndarray:
        """Model matrix for this transform."""
        return get_transformation_matrix(self.position, self.rotation, self.scale)


@dataclass
class DirectionalLight:
    """A light shining from infinitely far away along ``direction``."""

    color: np.ndarray = field(default_factory=lambda: rgb(239.0, 227.0, 200.0))
    direction: np.ndarray = field(default_factory=lambda: np.array([-0.1, -0.3, 0.04]))
    intensity: float = 0.9

    def __post_init__(self) -> None:
        self.color = _vec3(self.color)
        self.direction = _vec3(self.direction)


@dataclass
class Camera:
    """A free-flying camera; ``rotation`` holds pitch, yaw and roll in degrees."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    fov: float = 70.0
    near_plane: float = 0.001
    far_plane: float = 2048.0
    speed: float = 200.0
    sens: float = 7500.0

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)

    def update(
        self,
        input_state: InputState,
        window: Window,
        delta_time: float,
        time_scale: float = 1.0,
    ) -> None:
        """Toggle mouse capture on Escape and, while captured, move and turn."""
        if input_state.is_key_pressed(KEY_ESCAPE):
            window.cursor_hidden = not window.cursor_hidden
        if not window.cursor_hidden:
            return
        if time_scale == 0:
            raise ValueError("time scale must be non-zero")

        def axis(positive: int, negative: int) -> float:
            return float(input_state.is_key_down(positive)) - float(
                input_state.is_key_down(negative)
            )

        step = self.speed * delta_time / time_scale
        move_x = axis(KEY_D, KEY_A) * step
        move_y = axis(KEY_SPACE, KEY_LEFT_SHIFT) * step
        # the view looks down -z, so forward input is negative
        move_z = axis(KEY_S, KEY_W) * step

        yaw = math.radians(self.rotation[1])
        pitch = math.radians(self.rotation[0])
        forward = yaw_pitch_to_direction(yaw, pitch)
        right = yaw_to_right(yaw)

        self.position = self.position + right * move_x + forward * move_z
        self.position[1] += move_y

        dx, dy = input_state.mouse_move(window.width, window.height)
        turn = self.sens * delta_time / time_scale
        self.rotation = self.rotation + np.array([dy * turn, dx * turn, 0.0])

    def projection(self, aspect_ratio: float) -> np.ndarray:
        """Perspective projection using ``fov`` as given."""
        return perspective(self.fov, aspect_ratio, self.near_plane, self.far_plane)

    def view(self) -> np.ndarray:
        """World-to-camera matrix: rotate about X, Y, Z, then move by -position."""
        m = np.identity(4)
        m = rotate_x(m, math.radians(self.rotation[0]))
        m = rotate_y(m, math.radians(self.rotation[1]))
        m = rotate_z(m, math.radians(self.rotation[2]))
        return translate(m, -self.position)

    def projection_view(self, aspect_ratio: float) -> np.ndarray:
        """Projection matrix multiplied by the view matrix."""
        return self.projection(aspect_ratio) @ self.view()