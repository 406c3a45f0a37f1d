"""Small vector and matrix types used to place and view voxel geometry."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Vertex3D:
    """A point or direction in 3D space."""

    x: float
    y: float
    z: float

    @classmethod
    def of(cls, value: Union["Vertex3D", Iterable[float]]) -> "Vertex3D":
        """Build a vertex from another vertex or any three numbers."""
        if isinstance(value, Vertex3D):
            return value
        coords = tuple(float(c) for c in value)
        if len(coords) != 3:
            raise ValueError(f"expected 3 coordinates, got {len(coords)}")
        return cls(*coords)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vertex3D") -> "Vertex3D":
        return Vertex3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vertex3D") -> "Vertex3D":
        return Vertex3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vertex3D":
        return Vertex3D(-self.x, -self.y, -self.z)

    def dot(self, other: "Vertex3D") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vertex3D") -> "Vertex3D":
        return Vertex3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    @property
    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vertex3D":
        """Return the unit vector in this direction."""
        length = self.length
        if length == 0:
            raise ValueError("cannot normalise a zero-length vector")
        return Vertex3D(self.x / length, self.y / length, self.z / length)


@dataclass(frozen=True)
class Triangle:
    """Three vertices forming a triangle."""

    a: Vertex3D
    b: Vertex3D
    c: Vertex3D

    def __iter__(self) -> Iterator[Vertex3D]:
        yield self.a
        yield self.b
        yield self.c


SAMPLE_TRIANGLE = Triangle(
    Vertex3D(1.0, 1.0, 1.0),
    Vertex3D(-1.0, 0.0, -1.0),
    Vertex3D(1.0, -1.0, 1.0),
)


class Matrix4:
    """An immutable 4x4 matrix, given and indexed in row-major order."""

    __slots__ = ("_rows",)

    def __init__(self, *values: float) -> None:
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        flat = [float(v) for v in values]
        self._rows = tuple(tuple(flat[r * 4:r * 4 + 4]) for r in range(4))

    @classmethod
    def _from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix4":
        return cls(*(v for row in rows for v in row))

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        return self._rows

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self._rows[row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix4({self._rows!r})"

    @classmethod
    def identity(cls) -> "Matrix4":
        return cls._from_rows(
            (1.0 if r == c else 0.0 for c in range(4)) for r in range(4)
        )

    @classmethod
    def translation(cls, offset: Union[Vertex3D, Iterable[float]]) -> "Matrix4":
        """Matrix that moves points by ``offset``."""
        x, y, z = Vertex3D.of(offset)
        return cls(
            1, 0, 0, x,
            0, 1, 0, y,
            0, 0, 1, z,
            0, 0, 0, 1,
        )

    @classmethod
    def perspective(cls, fovy: float, aspect: float, near: float, far: float) -> "Matrix4":
        """Right-handed perspective projection to clip depth -1..1; ``fovy`` in radians."""
        if aspect == 0:
            raise ValueError("aspect ratio must be non-zero")
        if near == far:
            raise ValueError("near and far planes must differ")
        tan_half = math.tan(fovy / 2)
        if tan_half == 0:
            raise ValueError("field of view must be non-zero")
        depth = far - near
        return cls(
            1 / (aspect * tan_half), 0, 0, 0,
            0, 1 / tan_half, 0, 0,
            0, 0, -(far + near) / depth, -(2 * far * near) / depth,
            0, 0, -1, 0,
        )

    @classmethod
    def look_at(
        cls,
        eye: Union[Vertex3D, Iterable[float]],
        target: Union[Vertex3D, Iterable[float]],
        up: Union[Vertex3D, Iterable[float]],
    ) -> "Matrix4":
        """Right-handed view matrix looking from ``eye`` towards ``target``."""
        eye = Vertex3D.of(eye)
        forward = (Vertex3D.of(target) - eye).normalized()
        side = forward.cross(Vertex3D.of(up)).normalized()
        upward = side.cross(forward)
        return cls(
            side.x, side.y, side.z, -side.dot(eye),
            upward.x, upward.y, upward.z, -upward.dot(eye),
            -forward.x, -forward.y, -forward.z, forward.dot(eye),
            0, 0, 0, 1,
        )

    def __matmul__(self, other: Union["Matrix4", Sequence[float]]):
        if isinstance(other, Matrix4):
            columns = list(zip(*other._rows))
            return Matrix4._from_rows(
                (sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self._rows
            )
        try:
            vector = tuple(float(v) for v in other)
        except TypeError:
            return NotImplemented
        if len(vector) != 4:
            raise ValueError(f"expected a 4-component vector, got {len(vector)}")
        return tuple(sum(a * b for a, b in zip(row, vector)) for row in self._rows)

    def column_major(self) -> tuple[float, ...]:
        """The 16 values column by column, as graphics APIs expect."""
        return tuple(v for col in zip(*self._rows) for v in col)


def voxel_corner_points(x: float, y: float, z: float) -> tuple[Vertex3D, Vertex3D, Vertex3D]:
    """A voxel's origin corner and its neighbours one step along z and along y."""
    return (
        Vertex3D(x, y, z),
        Vertex3D(x, y, z + 1),
        Vertex3D(x, y + 1, z),
    )