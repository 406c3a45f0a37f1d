"""Vertex and index generation for cubic chunks of voxels."""

from __future__ import annotations

import logging
import re
from itertools import product

logger = logging.getLogger(__name__)

CHUNK_LENGTH = 8
VERTICES_PER_VOXEL = 8
FLOATS_PER_VOXEL = VERTICES_PER_VOXEL * 3
VOXELS_PER_CHUNK = CHUNK_LENGTH ** 3

# Two triangles per face: front, bottom, back, top, left, right.
VOXEL_INDEX_TEMPLATE = (
    0, 1, 2, 2, 1, 3,
    1, 5, 3, 3, 7, 5,
    7, 5, 4, 4, 6, 7,
    4, 6, 2, 2, 0, 4,
    4, 5, 1, 1, 0, 4,
    2, 3, 7, 7, 6, 2,
)

_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1
_INT_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def voxel_vertices(x: float, y: float, z: float) -> tuple[float, ...]:
    """The eight corners of the unit voxel at (x, y, z), flattened to 24 floats."""
    return (
        x, y, z,
        x, y - 1, z,
        x + 1, y, z,
        x + 1, y - 1, z,
        x, y, z - 1,
        x, y - 1, z - 1,
        x + 1, y, z - 1,
        x + 1, y - 1, z - 1,
    )


def chunk_vertices(x: int, y: int, z: int) -> list[float]:
    """Vertices of every voxel in the chunk at chunk coordinates (x, y, z)."""
    x0, y0, z0 = (c * CHUNK_LENGTH for c in (x, y, z))
    vertices: list[float] = []
    for i, o, p in product(
        range(x0, x0 + CHUNK_LENGTH),
        range(y0, y0 + CHUNK_LENGTH),
        range(z0, z0 + CHUNK_LENGTH),
    ):
        vertices.extend(float(v) for v in voxel_vertices(i, -o, p))
    return vertices


def chunk_indices(total: int) -> list[int]:
    """Triangle indices for ``total`` chunks' worth of voxels."""
    if total < 0:
        raise ValueError("number of chunks cannot be negative")
    return [
        voxel * VERTICES_PER_VOXEL + corner
        for voxel in range(VOXELS_PER_CHUNK * total)
        for corner in VOXEL_INDEX_TEMPLATE
    ]


def bulk_chunk_vertices(xdist: int, ydist: int, zdist: int) -> list[float]:
    """Vertices for a block of xdist by ydist by zdist chunks, z varying fastest."""
    vertices: list[float] = []
    for x, y, z in product(range(xdist), range(ydist), range(zdist)):
        vertices.extend(chunk_vertices(x, y, z))
        logger.debug("generated chunk (%d,%d,%d)", x, y, z)
    return vertices


def parse_int(text: str) -> int:
    """Parse a whole string as a 32-bit signed decimal integer.

    Leading whitespace is allowed; anything after the digits is not.
    Raises ValueError if the text is not such a number.
    """
    match = _INT_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value