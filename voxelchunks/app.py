"""Command-line viewer that builds a block of voxel chunks and flies a camera over it."""

from __future__ import annotations

import argparse
import enum
import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, Sequence

from voxelchunks.geometry import Matrix4, Vertex3D
from voxelchunks.mesh import (
    VOXELS_PER_CHUNK,
    bulk_chunk_vertices,
    chunk_indices,
    parse_int,
)

logger = logging.getLogger(__name__)

DISTANCE_MAX = 100
DEFAULT_RESOLUTION = 480
ASPECT_WIDTH = 16
ASPECT_HEIGHT = 9
FIELD_OF_VIEW_DEGREES = 45.0
NEAR_PLANE = 0.1
FAR_PLANE = 1000.0
CAMERA_SPEED = 10.0
CURSOR_SCALE = 1000.0

VERTEX_SHADER = """#version 330 core
layout (location = 0) in vec3 aPos;
uniform mat4 transform;
uniform mat4 perspective;
uniform mat4 view;
void main()
{
    gl_Position = perspective * view * transform * vec4(aPos, 1.0);
}
"""

FRAGMENT_SHADER = """#version 330 core
out vec4 FragColor;
void main()
{
    FragColor = vec4(1.0, 1.0, 1.0, 1.0);
}
"""


@dataclass(frozen=True)
class Settings:
    """How many chunks to generate along each axis and the window height in pixels."""

    xdist: int = 1
    ydist: int = 1
    zdist: int = 1
    resolution: int = DEFAULT_RESOLUTION

    def __post_init__(self) -> None:
        for name in ("xdist", "ydist", "zdist"):
            object.__setattr__(self, name, abs(int(getattr(self, name))))
        if self.resolution <= 0:
            raise ValueError(f"resolution must be positive, got {self.resolution}")

    @property
    def chunk_count(self) -> int:
        return self.xdist * self.ydist * self.zdist

    @property
    def window_size(self) -> tuple[int, int]:
        """Width and height of a 16:9 window whose height is the resolution."""
        return (self.resolution * ASPECT_WIDTH) // ASPECT_HEIGHT, self.resolution


class Direction(enum.Enum):
    """Directions the camera can be moved in."""

    FORWARD = enum.auto()
    BACKWARD = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()


_STEPS = {
    Direction.FORWARD: (0, 0, 1),
    Direction.BACKWARD: (0, 0, -1),
    Direction.RIGHT: (-1, 0, 0),
    Direction.LEFT: (1, 0, 0),
    Direction.UP: (0, 1, 0),
    Direction.DOWN: (0, -1, 0),
}


@dataclass
class Camera:
    """A free-flying camera that always faces along +z, tilted by the cursor."""

    x: float = 0.0
    y: float = 0.0
    z: float = -10.0
    speed: float = CAMERA_SPEED

    @property
    def position(self) -> Vertex3D:
        return Vertex3D(self.x, self.y, self.z)

    def move(self, pressed: Iterable[Direction], delta_time: float) -> None:
        """Move for ``delta_time`` seconds in every direction held down."""
        distance = self.speed * delta_time
        for direction in set(pressed):
            dx, dy, dz = _STEPS[direction]
            self.x += dx * distance
            self.y += dy * distance
            self.z += dz * distance

    def view_matrix(self, cursor_x: float, cursor_y: float) -> Matrix4:
        """View matrix looking one unit ahead, offset by the scaled cursor position."""
        cx = cursor_x / CURSOR_SCALE
        cy = cursor_y / CURSOR_SCALE
        target = Vertex3D(self.x - cx, self.y - cy, self.z + 1)
        return Matrix4.look_at(self.position, target, Vertex3D(0.0, 1.0, 0.0))


@dataclass
class Mesh:
    """Flat vertex positions and triangle indices for a block of chunks."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    chunk_count: int = 0

    @staticmethod
    def build(xdist: int, ydist: int, zdist: int) -> "Mesh":
        """Generate the mesh for xdist by ydist by zdist chunks."""
        xdist, ydist, zdist = abs(xdist), abs(ydist), abs(zdist)
        chunks = xdist * ydist * zdist
        return Mesh(
            vertices=bulk_chunk_vertices(xdist, ydist, zdist),
            indices=chunk_indices(chunks),
            chunk_count=chunks,
        )

    @property
    def voxel_count(self) -> int:
        return VOXELS_PER_CHUNK * self.chunk_count

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3


def _distance(text: str) -> int:
    try:
        value = abs(parse_int(text))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid chunk distance: {text!r}") from None
    if value > DISTANCE_MAX:
        raise argparse.ArgumentTypeError(
            f"chunk distance must be at most {DISTANCE_MAX}, got {value}"
        )
    return value


def _resolution(text: str) -> int:
    try:
        value = parse_int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid resolution: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"invalid resolution: {text!r}")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> Settings:
    """Read the settings from the command line; exits with usage on bad input."""
    parser = argparse.ArgumentParser(
        prog="voxelchunks",
        description="Generate a block of voxel chunks and view it as a wireframe.",
    )
    parser.add_argument("--x", dest="xdist", type=_distance, default=1,
                        help="chunk distance in the x direction (0-100)")
    parser.add_argument("--y", dest="ydist", type=_distance, default=1,
                        help="chunk distance in the y direction (0-100)")
    parser.add_argument("--z", dest="zdist", type=_distance, default=1,
                        help="chunk distance in the z direction (0-100)")
    parser.add_argument("--resolution", type=_resolution, default=DEFAULT_RESOLUTION,
                        help="window height in pixels; width follows 16:9")
    args = parser.parse_args(argv)
    return Settings(args.xdist, args.ydist, args.zdist, args.resolution)


def run_viewer(settings: Settings) -> None:
    """Open a window and draw the generated chunks until it is closed."""
    import pyglet
    from pyglet import gl
    from pyglet.graphics.shader import Shader, ShaderProgram
    from pyglet.window import key

    mesh = Mesh.build(settings.xdist, settings.ydist, settings.zdist)
    print(f"total {mesh.voxel_count} voxels")
    print(f"size of vertices: {mesh.vertex_count}")
    print(f"size of indices: {len(mesh.indices)}")

    width, height = settings.window_size
    config = gl.Config(
        major_version=3,
        minor_version=3,
        forward_compatible=True,
        double_buffer=True,
        depth_size=24,
    )
    window = pyglet.window.Window(width, height, caption="Main", config=config, vsync=True)
    window.set_exclusive_mouse(True)

    program = ShaderProgram(Shader(VERTEX_SHADER, "vertex"), Shader(FRAGMENT_SHADER, "fragment"))
    vertex_list = None
    if mesh.indices:
        vertex_list = program.vertex_list_indexed(
            mesh.vertex_count, gl.GL_TRIANGLES, mesh.indices, aPos=("f", mesh.vertices)
        )

    transform = Matrix4.translation((0.0, 0.0, 0.0)).column_major()
    perspective = Matrix4.perspective(
        math.radians(FIELD_OF_VIEW_DEGREES),
        ASPECT_WIDTH / ASPECT_HEIGHT,
        NEAR_PLANE,
        FAR_PLANE,
    ).column_major()

    camera = Camera()
    cursor = [0.0, 0.0]
    keys = key.KeyStateHandler()
    window.push_handlers(keys)
    bindings = {
        key.W: Direction.FORWARD,
        key.S: Direction.BACKWARD,
        key.D: Direction.RIGHT,
        key.A: Direction.LEFT,
        key.SPACE: Direction.UP,
        key.C: Direction.DOWN,
    }

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        cursor[0] += dx
        cursor[1] -= dy

    @window.event
    def on_draw():
        window.clear()
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glPolygonMode(gl.GL_FRONT_AND_BACK, gl.GL_LINE)
        program.use()
        program["transform"] = transform
        program["perspective"] = perspective
        program["view"] = camera.view_matrix(*cursor).column_major()
        if vertex_list is not None:
            vertex_list.draw(gl.GL_TRIANGLES)

    def update(delta_time: float) -> None:
        camera.move((d for k, d in bindings.items() if keys[k]), delta_time)
        logger.debug("position %s , %s , %s", camera.x, camera.y, camera.z)

    pyglet.clock.schedule(update)
    try:
        pyglet.app.run()
    finally:
        pyglet.clock.unschedule(update)
        program.delete()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: parse the command line and run the viewer."""
    settings = parse_args(argv)
    run_viewer(settings)
    return 0