"""Noise volumes, camera and matrix math, meshes, input and memory bookkeeping for volumetric clouds."""

__version__ = "0.1.0"