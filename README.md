# cumulus

Building blocks for volumetric cloud rendering. The package produces the
noise data a cloud renderer uploads to the GPU. It also does the camera and
transform math around that data and keeps track of meshes, input and memory
budgets.

## Modules

- `cumulus.perlin`: improved 3D Perlin noise mapped into [0, 1].
  - `perlin_noise_3d(x, y, z)` repeats every 256 units.
  - `perlin_noise_3d_wrap(x, y, z, wrap)` tiles its lattice every `wrap`
    units. It takes non-negative coordinates only and raises `ValueError`
    otherwise.
- `cumulus.clouds`: cloud volumes and their noise.
  - `CloudVolume` holds a volume's position, size, resolution, the Worley
    cells per axis for three detail levels (`worley_cpa`) and the fractal
    Perlin settings.
  - `create_cloud_volume(resolution, worley_cpa)` builds a unit volume at the
    origin with the default settings.
  - `generate_perlin_volume(volume)` returns a `[z, y, x]` float32 array of
    fractal Perlin noise. The noise wraps every 16 units.
  - `generate_worley_points(cpa, rng)` returns one jittered point per cell.
    Each row holds the offset from the cell corner and a zero pad, so rows
    are 16-byte aligned.
  - `generate_noise_data(volume, rng)` returns the points for all three
    levels together with the Perlin volume.
- `cumulus.camera`:
  - `Camera` is a fly camera. `update(input_state, window, delta_time,
    time_scale)` toggles mouse capture on Escape. While the mouse is
    captured, WASD, Space and Left Shift move the camera and the mouse turns
    it.
  - The camera also provides `projection(aspect_ratio)`, `view()` and
    `projection_view(aspect_ratio)`. `projection` passes `fov` to
    `perspective` unchanged, and `perspective` reads it as radians.
  - The module also defines `Window` (with `aspect_ratio()`), `Transform`
    (with `matrix()`) and `DirectionalLight`.
- `cumulus.vecmath`: 4x4 matrix builders.
  - `rotate_x`, `rotate_y`, `rotate_z`, `translate`, `scale` and
    `perspective`. The builders post-multiply, so `rotate_x(m, a)` is
    `m @ Rx(a)`.
  - `get_transformation_matrix(position, rotation, scale_factors)` takes the
    rotation in degrees.
  - `yaw_pitch_to_direction`, `yaw_to_right` and `yaw_pitch_to_up` give
    direction vectors.
  - Small helpers: `clamp`, `rand_in_range`, `kilobytes`, `megabytes`,
    `gigabytes` and `rgb`.
- `cumulus.mesh`: CPU-side `Mesh` records.
  - `create_mesh` builds an indexed mesh and `create_mesh_arrays` builds a
    non-indexed one.
  - `primitive_plane_mesh(bottom_left, num_vertices, world_size)` and
    `primitive_cube_mesh()` generate primitives.
  - `MeshData` flags record which attributes a mesh carries.
- `cumulus.input`: `InputState` is fed by `key_event`, `button_event` and
  `cursor_event`, and is reset once per frame by `end_frame`.
  - It answers `is_key_down`, `is_key_pressed`, `is_button_down` and
    `is_button_pressed`.
  - It reports mouse movement in pixels, as a fraction of the window, or as
    a direction of -1, 0 or 1 on each axis. `mouse_state` bundles these
    readings into a `MouseState`.
- `cumulus.arena`: `Arena` tracks bump-allocator bookkeeping.
  - `push` returns an offset.
  - A fixed arena raises `ArenaOverflowError` when it is full. An expandable
    arena grows instead.
- `cumulus.vector`: `Vector` is a growable sequence with explicit capacity
  bookkeeping. Out-of-range indices raise `IndexError`.
- `cumulus.platform`: file helpers.
  - `load_text_from_file`, `load_lines_from_file`, `load_file` and
    `write_to_file` read and write files.
  - `get_file_extension` and `get_res_path` handle paths.
- `cumulus.params`: reading and writing `name [value]` parameter files with
  `load_parameters_from_file`, `write_parameters_to_file`,
  `parse_param_line` and `format_param`.
- `cumulus.stats`:
  - `FrameStats` keeps frame timing. Its fps figure is refreshed about six
    times per scaled second.
  - `partition_permanent_memory(total, state_size)` splits a memory budget
    into the fixed arenas and a frame arena.
- `cumulus.endian`: `get_endianness()` returns an `Endianness`.

## Install

```
pip install .
```

## Example

```python
import random

from cumulus.camera import Camera
from cumulus.clouds import create_cloud_volume, generate_noise_data

volume = create_cloud_volume(16, (8, 16, 32))
points, perlin = generate_noise_data(volume, random.Random(0))
print(points.shape, perlin.shape)  # (37376, 4) (16, 16, 16)

camera = Camera()
matrix = camera.projection_view(1600 / 900)
```

## What it does not do

The package does not provide any of the following:

- It does not open a window.
- It does not create a graphics context.
- It does not compile shaders or upload textures and buffers.
- It does not draw anything.
- It does not load meshes or images from model or image files.
- It does not provide a command-line program.

It only produces the arrays and matrices that a renderer would consume.

## Tests

```
pip install .[test]
pytest
```