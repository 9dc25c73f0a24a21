"""Cloud volume settings and generation of the noise data that fills it."""

from __future__ import annotations

import itertools
import random
from dataclasses import dataclass, field

import numpy as np

from cumulus.perlin import perlin_noise_3d_wrap
from cumulus.vecmath import rand_in_range

PERLIN_WRAP = 16


@dataclass
class CloudVolume:
    """A box of cloud with its noise settings.

    ``worley_cpa`` gives the cells per axis for the low, medium and high
    detail Worley layers.
    """

    resolution: int
    worley_cpa: tuple[int, int, int]
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    size: np.ndarray = field(default_factory=lambda: np.ones(3))
    perlin_frequency: float = 4.0
    perlin_amplitude: float = 1.0
    perlin_lacunarity: float = 0.0
    perlin_persistence: float = 0.0
    perlin_octaves: int = 1
    noise_persistence: float = 0.625

    def __post_init__(self) -> None:
        if self.resolution < 1:
            raise ValueError("volume resolution must be positive")
        cpa = tuple(int(c) for c in self.worley_cpa)
        if len(cpa) != 3:
            raise ValueError("worley_cpa needs three components")
        self.worley_cpa = cpa
        self.position = np.array(self.position, dtype=float)
        self.size = np.array(self.size, dtype=float)

    @property
    def total_voxels(self) -> int:
        return self.resolution ** 3

    @property
    def total_points(self) -> int:
        return sum(c ** 3 for c in self.worley_cpa)


def create_cloud_volume(resolution: int, worley_cpa) -> CloudVolume:
    """A unit volume at the origin with default noise settings."""
    return CloudVolume(resolution=resolution, worley_cpa=tuple(worley_cpa))


def generate_perlin_volume(volume: CloudVolume) -> np.ndarray:
    """Fractal Perlin noise for every voxel, indexed [z, y, x]."""
    if volume.perlin_octaves < 1:
        raise ValueError("at least one perlin octave is needed")

    amplitudes = []
    amp = volume.perlin_amplitude
    for _ in range(volume.perlin_octaves):
        amplitudes.append(amp)
        amp *= volume.perlin_persistence
    max_val = sum(amplitudes)
    if max_val == 0:
        raise ValueError("the octave amplitudes sum to zero")

    res = volume.resolution
    step = volume.perlin_frequency / res
    lacunarity = volume.perlin_lacunarity
    out = np.empty((res, res, res), dtype=np.float32)

    for z, y, x in itertools.product(range(res), repeat=3):
        px, py, pz = x * step, y * step, z * step
        total = 0.0
        for amplitude in amplitudes:
            total += amplitude * perlin_noise_3d_wrap(px, py, pz, PERLIN_WRAP)
            px, py, pz = px * lacunarity, py * lacunarity, pz * lacunarity
        out[z, y, x] = total / max_val
    return out


def generate_worley_points(cpa: int, rng: random.Random | None = None) -> np.ndarray:
    """One random point per cell of a ``cpa``-cubed grid.

    Each row is an offset from the cell's corner plus a zero pad for 16-byte
    alignment.
    """
    if cpa < 1:
        raise ValueError("cells per axis must be positive")
    cell_size = 1.0 / cpa
    points = np.zeros((cpa ** 3, 4), dtype=np.float32)
    for row in points:
        row[:3] = [rand_in_range(0.0, cell_size, rng) for _ in range(3)]
    return points


def generate_noise_data(
    volume: CloudVolume, rng: random.Random | None = None
) -> tuple[np.ndarray, np.ndarray]:
    """Worley points for all three detail levels, and the Perlin volume."""
    points = np.concatenate([generate_worley_points(c, rng) for c in volume.worley_cpa])
    return points, generate_perlin_volume(volume)