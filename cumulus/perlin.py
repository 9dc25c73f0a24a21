"""Improved 3D Perlin noise, plain and wrapping, mapped into [0, 1]."""

from __future__ import annotations

import math

_BASE_PERMUTATION = (
    151, 160, 137, 91, 90, 15,
    131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23,
    190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33,
    88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166,
    77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244,
    102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196,
    135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123,
    5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42,
    223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228,
    251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

_P = _BASE_PERMUTATION * 2


def _fade(t: float) -> float:
    # 6t^5 - 15t^4 + 10t^3
    return t * t * t * (t * (6.0 * t - 15.0) + 10.0)


def _lerp(a: float, b: float, w: float) -> float:
    return a + (b - a) * w


def _grad(hash_value: int, x: float, y: float, z: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def _blend(
    corners: tuple[int, int, int, int, int, int, int, int],
    rx: float,
    ry: float,
    rz: float,
) -> float:
    aaa, aba, aab, abb, baa, bba, bab, bbb = corners
    fx, fy, fz = _fade(rx), _fade(ry), _fade(rz)

    x1 = _lerp(_grad(aaa, rx, ry, rz), _grad(baa, rx - 1.0, ry, rz), fx)
    x2 = _lerp(_grad(aba, rx, ry - 1.0, rz), _grad(bba, rx - 1.0, ry - 1.0, rz), fx)
    y1 = _lerp(x1, x2, fy)

    x3 = _lerp(_grad(aab, rx, ry, rz - 1.0), _grad(bab, rx - 1.0, ry, rz - 1.0), fx)
    x4 = _lerp(_grad(abb, rx, ry - 1.0, rz - 1.0), _grad(bbb, rx - 1.0, ry - 1.0, rz - 1.0), fx)
    y2 = _lerp(x3, x4, fy)

    return (_lerp(y1, y2, fz) + 1.0) / 2.0


def _corners(cx: int, cy: int, cz: int, nx: int, ny: int, nz: int):
    p = _P
    return (
        p[p[p[cx] + cy] + cz],
        p[p[p[cx] + ny] + cz],
        p[p[p[cx] + cy] + nz],
        p[p[p[cx] + ny] + nz],
        p[p[p[nx] + cy] + cz],
        p[p[p[nx] + ny] + cz],
        p[p[p[nx] + cy] + nz],
        p[p[p[nx] + ny] + nz],
    )


def perlin_noise_3d(x: float, y: float, z: float) -> float:
    """Perlin noise at (x, y, z), repeating every 256 units on each axis."""
    fx, fy, fz = math.floor(x), math.floor(y), math.floor(z)
    cx, cy, cz = fx & 255, fy & 255, fz & 255
    corners = _corners(cx, cy, cz, cx + 1, cy + 1, cz + 1)
    return _blend(corners, x - fx, y - fy, z - fz)


def perlin_noise_3d_wrap(x: float, y: float, z: float, wrap: int) -> float:
    """Perlin noise whose lattice wraps every ``wrap`` units; coordinates must be non-negative."""
    if wrap <= 0:
        raise ValueError("wrap must be a positive integer")
    if x < 0 or y < 0 or z < 0:
        raise ValueError("coordinates must not be negative")

    x, y, z = math.fmod(x, wrap), math.fmod(y, wrap), math.fmod(z, wrap)
    fx, fy, fz = math.floor(x), math.floor(y), math.floor(z)
    cx, cy, cz = fx % 255, fy % 255, fz % 255
    corners = _corners(cx, cy, cz, (cx + 1) % wrap, (cy + 1) % wrap, (cz + 1) % wrap)
    return _blend(corners, x - fx, y - fy, z - fz)