"""CPU-side mesh data: attribute arrays, index lists and primitive generators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

import numpy as np

ATTRIBUTE_VERTICES = 0
ATTRIBUTE_UVS = 1
ATTRIBUTE_NORMALS = 2
ATTRIBUTE_COLORS = 3


class MeshData(enum.IntFlag):
    """Which per-vertex attributes a mesh carries."""

    NONE = 0x00
    VERTICES = 0x01
    UVS = 0x02
    NORMALS = 0x04
    COLORS = 0x08


_ATTRIBUTE_LOCATIONS = (
    (MeshData.VERTICES, ATTRIBUTE_VERTICES),
    (MeshData.UVS, ATTRIBUTE_UVS),
    (MeshData.NORMALS, ATTRIBUTE_NORMALS),
    (MeshData.COLORS, ATTRIBUTE_COLORS),
)


def _component(values, width: int, count: int | None, label: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float32)
    if arr.size % width:
        raise ValueError(f"{label} data must hold a multiple of {width} values, got {arr.size}")
    arr = arr.reshape(-1, width)
    if count is not None and len(arr) != count:
        raise ValueError(f"{label} data has {len(arr)} entries but the mesh has {count} vertices")
    return arr


@dataclass(eq=False)
class Mesh:
    """Vertex attributes (one row per vertex) and an optional index list."""

    vertices: np.ndarray
    uvs: np.ndarray | None = None
    normals: np.ndarray | None = None
    colors: np.ndarray | None = None
    indices: np.ndarray | None = None
    name: str | None = None
    full_path: str | None = None

    def __post_init__(self) -> None:
        if self.vertices is None or np.asarray(self.vertices).size == 0:
            raise ValueError("tried to load mesh without vertex data")
        self.vertices = _component(self.vertices, 3, None, "vertex")
        count = len(self.vertices)
        if self.uvs is not None:
            self.uvs = _component(self.uvs, 2, count, "uv")
        if self.normals is not None:
            self.normals = _component(self.normals, 3, count, "normal")
        if self.colors is not None:
            self.colors = _component(self.colors, 3, count, "color")
        if self.indices is not None:
            self.indices = np.asarray(self.indices, dtype=np.uint32).ravel()

    @property
    def data(self) -> MeshData:
        """Flags for the attributes present."""
        flags = MeshData.VERTICES
        if self.uvs is not None:
            flags |= MeshData.UVS
        if self.normals is not None:
            flags |= MeshData.NORMALS
        if self.colors is not None:
            flags |= MeshData.COLORS
        return flags

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return 0 if self.indices is None else len(self.indices)

    @property
    def attribute_locations(self) -> tuple[int, ...]:
        """Shader attribute locations used by the attributes present."""
        flags = self.data
        return tuple(location for flag, location in _ATTRIBUTE_LOCATIONS if flag in flags)


def create_mesh(vertices, uvs, normals, colors, indices) -> Mesh:
    """Build an indexed mesh; ``uvs``, ``normals`` and ``colors`` may be None."""
    if indices is None:
        raise ValueError("an indexed mesh needs an index list")
    return Mesh(vertices=vertices, uvs=uvs, normals=normals, colors=colors, indices=indices)


def create_mesh_arrays(vertices, uvs, normals, colors) -> Mesh:
    """Build a non-indexed mesh drawn straight from its vertex arrays."""
    return Mesh(vertices=vertices, uvs=uvs, normals=normals, colors=colors)


def primitive_plane_mesh(
    bottom_left: Sequence[float],
    num_vertices: Sequence[int],
    world_size: Sequence[float],
) -> Mesh:
    """A flat grid of ``num_vertices`` (x, z) points facing +Y, spanning ``world_size``."""
    bx, by, bz = (float(c) for c in bottom_left)
    nx, ny = (int(c) for c in num_vertices)
    wx, wz = (float(c) for c in world_size)
    if nx < 2 or ny < 2:
        raise ValueError("a plane needs at least 2 vertices along each axis")
    if wx == 0 or wz == 0:
        raise ValueError("plane world size must be non-zero")

    xs = bx + (wx / (nx - 1)) * np.arange(nx)
    zs = bz + (wz / (ny - 1)) * np.arange(ny)
    grid_x, grid_z = np.meshgrid(xs, zs)
    flat_x, flat_z = grid_x.ravel(), grid_z.ravel()
    total = nx * ny

    vertices = np.column_stack([flat_x, np.full(total, by), flat_z])
    uvs = np.column_stack([flat_x / wx, flat_z / wz])
    normals = np.tile([0.0, 1.0, 0.0], (total, 1))

    rows, cols = np.meshgrid(np.arange(ny - 1), np.arange(nx - 1), indexing="ij")
    corner = (rows * nx + cols).ravel()
    indices = np.stack(
        [corner, corner + nx, corner + nx + 1, corner, corner + nx + 1, corner + 1],
        axis=1,
    ).ravel()

    return create_mesh(vertices, uvs, normals, None, indices)


_CUBE_VERTICES = (
    (0.0, -1.0, 0.0),
    (0.0, -1.0, 1.0),
    (0.0, 1.0, 0.0),
    (0.0, 1.0, 1.0),
    (1.0, -1.0, 0.0),
    (1.0, -1.0, 1.0),
    (1.0, 1.0, 1.0),
    (1.0, 1.0, 0.0),
)

_CUBE_INDICES = (
    0, 2, 3,
    3, 1, 0,
    0, 1, 4,
    4, 1, 5,
    4, 5, 7,
    7, 5, 6,
    7, 6, 3,
    3, 2, 7,
    1, 3, 5,
    6, 5, 3,
    2, 0, 4,
    4, 7, 2,
)


def primitive_cube_mesh() -> Mesh:
    """An indexed box with only vertex positions."""
    return create_mesh(_CUBE_VERTICES, None, None, None, _CUBE_INDICES)