"""Per-frame timing statistics and the layout of the permanent memory block."""

from __future__ import annotations

from dataclasses import dataclass

from cumulus.arena import Arena
from cumulus.vecmath import kilobytes

FPS_UPDATE_INTERVAL = 1.0 / 6.0

SHADER_ARENA_SIZE = kilobytes(1)
FBO_ARENA_SIZE = kilobytes(1)
PARAMS_ARENA_SIZE = kilobytes(4)
TEXTURE_ARENA_SIZE = kilobytes(4)
MESH_ARENA_SIZE = kilobytes(8)


@dataclass
class FrameStats:
    """Elapsed time, frame delta, frame count and a smoothed frames-per-second value.

    The fps value is refreshed about six times a (scaled) second so that it
    flickers less than a per-frame figure would.
    """

    time_scale: float = 1.0
    old_time: float = 0.0
    curr_time: float = 0.0
    delta_time: float = 0.0
    frame_count: int = 0
    fps_timer: float = 0.0
    fps_counter: int = 0
    fps: int = 0

    def update(self, current_time: float) -> None:
        """Advance one frame given the raw clock reading ``current_time``."""
        self.old_time = self.curr_time
        self.curr_time = current_time * self.time_scale
        self.delta_time = self.curr_time - self.old_time
        self.frame_count += 1
        self.fps_counter += 1
        self.fps_timer += self.delta_time

        if self.fps_timer >= FPS_UPDATE_INTERVAL * self.time_scale:
            self.fps = int(self.fps_counter / self.fps_timer) if self.fps_timer > 0 else 0
            self.fps_counter = 0
            self.fps_timer = 0.0


@dataclass
class PermanentMemory:
    """The permanent block split into the state and a fixed set of arenas."""

    total: int
    state_size: int
    shader_arena: Arena
    fbo_arena: Arena
    params_arena: Arena
    texture_arena: Arena
    mesh_arena: Arena
    frame_arena: Arena

    @property
    def arenas(self) -> dict[str, Arena]:
        """Every arena by name, in the order they sit in the block."""
        return {
            "shaders": self.shader_arena,
            "framebuffers": self.fbo_arena,
            "parameters": self.params_arena,
            "textures": self.texture_arena,
            "meshes": self.mesh_arena,
            "frame": self.frame_arena,
        }

    @property
    def in_use(self) -> int:
        """Bytes held by the state and the long-lived arenas (the frame arena excluded)."""
        return self.state_size + sum(
            arena.size
            for arena in (
                self.shader_arena,
                self.mesh_arena,
                self.fbo_arena,
                self.params_arena,
                self.texture_arena,
            )
        )


def partition_permanent_memory(total: int, state_size: int) -> PermanentMemory:
    """Lay out ``total`` bytes: the state first, then fixed arenas, then the frame arena.

    The frame arena takes whatever is left after the fixed-size arenas.
    """
    if state_size < 0:
        raise ValueError("state size must not be negative")
    if not state_size < total:
        raise MemoryError(f"state of {state_size} bytes does not fit in {total} bytes")

    remaining = total - state_size

    def take(size: int) -> Arena:
        nonlocal remaining
        if size > remaining:
            raise MemoryError(f"cannot partition {size} bytes with only {remaining} left")
        remaining -= size
        return Arena(size)

    shader = take(SHADER_ARENA_SIZE)
    fbo = take(FBO_ARENA_SIZE)
    params = take(PARAMS_ARENA_SIZE)
    texture = take(TEXTURE_ARENA_SIZE)
    mesh = take(MESH_ARENA_SIZE)
    frame = take(remaining)

    return PermanentMemory(
        total=total,
        state_size=state_size,
        shader_arena=shader,
        fbo_arena=fbo,
        params_arena=params,
        texture_arena=texture,
        mesh_arena=mesh,
        frame_arena=frame,
    )