"""Scalar helpers and small 3D vector/matrix math built on numpy.

Matrices are 4x4 numpy arrays in mathematical (row, column) order and act on
column vectors, so a point ``p`` is transformed as ``m @ p``. The matrix
builders post-multiply, so ``rotate_x(m, a)`` returns ``m @ Rx(a)``.
"""

from __future__ import annotations

import math
import random
from typing import Sequence

import numpy as np

MAX_I8 = 0x7F
MAX_I16 = 0x7FFF
MAX_I32 = 0x7FFFFF
MAX_I64 = 0x7FFFFFFFFFFFFFFF
MAX_U8 = 0xFF
MAX_U16 = 0xFFFF
MAX_U32 = 0xFFFFFF
MAX_U64 = 0xFFFFFFFFFFFFFFFF

PI = 3.14159265358
PI_2 = 1.570796327
PI_4 = 0.7853981634


def clamp(x, lo, hi):
    """Clamp ``x`` into the closed range [lo, hi]."""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def rand_in_range(lo, hi, rng: random.Random | None = None) -> float:
    """Return a uniformly distributed float between ``lo`` and ``hi``."""
    generator = rng if rng is not None else random
    return lo + generator.random() * (hi - lo)


def kilobytes(x: int) -> int:
    """Number of bytes in ``x`` kilobytes."""
    return 1024 * x


def megabytes(x: int) -> int:
    """Number of bytes in ``x`` megabytes."""
    return 1024 * kilobytes(x)


def gigabytes(x: int) -> int:
    """Number of bytes in ``x`` gigabytes."""
    return 1024 * megabytes(x)


def rgb(r: float, g: float, b: float) -> np.ndarray:
    """Convert 0-255 colour channels to a normalised RGB vector."""
    return np.array([r, g, b], dtype=float) / 255.0


def _as_matrix(matrix) -> np.ndarray:
    m = np.asarray(matrix, dtype=float)
    if m.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {m.shape}")
    return m


def _as_vec3(values: Sequence[float]) -> np.ndarray:
    v = np.asarray(values, dtype=float)
    if v.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {v.shape}")
    return v


def rotate_x(matrix, angle: float) -> np.ndarray:
    """Post-multiply ``matrix`` by a rotation of ``angle`` radians about X."""
    c, s = math.cos(angle), math.sin(angle)
    r = np.array(
        [[1.0, 0.0, 0.0, 0.0], [0.0, c, -s, 0.0], [0.0, s, c, 0.0], [0.0, 0.0, 0.0, 1.0]]
    )
    return _as_matrix(matrix) @ r


def rotate_y(matrix, angle: float) -> np.ndarray:
    """Post-multiply ``matrix`` by a rotation of ``angle`` radians about Y."""
    c, s = math.cos(angle), math.sin(angle)
    r = np.array(
        [[c, 0.0, s, 0.0], [0.0, 1.0, 0.0, 0.0], [-s, 0.0, c, 0.0], [0.0, 0.0, 0.0, 1.0]]
    )
    return _as_matrix(matrix) @ r


def rotate_z(matrix, angle: float) -> np.ndarray:
    """Post-multiply ``matrix`` by a rotation of ``angle`` radians about Z."""
    c, s = math.cos(angle), math.sin(angle)
    r = np.array(
        [[c, -s, 0.0, 0.0], [s, c, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0], [0.0, 0.0, 0.0, 1.0]]
    )
    return _as_matrix(matrix) @ r


def translate(matrix, offset: Sequence[float]) -> np.ndarray:
    """Post-multiply ``matrix`` by a translation by ``offset``."""
    t = np.identity(4)
    t[:3, 3] = _as_vec3(offset)
    return _as_matrix(matrix) @ t


def scale(matrix, factors: Sequence[float]) -> np.ndarray:
    """Post-multiply ``matrix`` by a per-axis scale."""
    s = np.identity(4)
    s[0, 0], s[1, 1], s[2, 2] = _as_vec3(factors)
    return _as_matrix(matrix) @ s


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed OpenGL perspective projection; ``fov`` is the vertical angle in radians."""
    if aspect == 0 or near == far:
        raise ValueError("aspect must be non-zero and near must differ from far")
    f = 1.0 / math.tan(fov * 0.5)
    fn = 1.0 / (near - far)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (near + far) * fn
    m[3, 2] = -1.0
    m[2, 3] = 2.0 * near * far * fn
    return m


def get_transformation_matrix(position, rotation, scale_factors) -> np.ndarray:
    """Model matrix: translate, then rotate X/Y/Z by degrees, then scale."""
    m = translate(np.identity(4), position)
    rx, ry, rz = _as_vec3(rotation)
    m = rotate_x(m, math.radians(rx))
    m = rotate_y(m, math.radians(ry))
    m = rotate_z(m, math.radians(rz))
    return scale(m, scale_factors)


def yaw_pitch_to_direction(yaw: float, pitch: float) -> np.ndarray:
    """Forward direction for a yaw and pitch given in radians."""
    return np.array(
        [
            -math.cos(pitch) * math.sin(yaw),
            math.sin(pitch),
            math.cos(yaw) * math.cos(pitch),
        ]
    )


def yaw_to_right(yaw: float) -> np.ndarray:
    """Horizontal right direction for a yaw given in radians."""
    return np.array([math.cos(yaw), 0.0, math.sin(yaw)])


def yaw_pitch_to_up(yaw: float, pitch: float) -> np.ndarray:
    """Up direction: the cross product of forward and right."""
    return np.cross(yaw_pitch_to_direction(yaw, pitch), yaw_to_right(yaw))