# voxelchunks

voxelchunks builds meshes from cubic voxel chunks and shows them in a wireframe
OpenGL window. You can fly a camera through the result.

Each chunk holds 8 × 8 × 8 voxels. Every voxel adds 8 corner vertices (24 floats)
and 36 triangle indices, which make up its 6 faces.

## Installation

```
pip install .
```

The viewer uses `pyglet` and needs a display that supports an OpenGL 3.3 core
profile.

## Running the viewer

```
voxelchunks --x 2 --y 1 --z 3 --resolution 720
```

| Option         | Meaning                                              | Default |
|----------------|------------------------------------------------------|---------|
| `--x`          | number of chunks along x (0–100, a sign is dropped)  | 1       |
| `--y`          | number of chunks along y (0–100, a sign is dropped)  | 1       |
| `--z`          | number of chunks along z (0–100, a sign is dropped)  | 1       |
| `--resolution` | window height in pixels; the width follows 16:9      | 480     |

Each value must be a whole decimal number. Leading whitespace is allowed, but
trailing text is not. If a value is invalid, the command prints its usage and
exits. Before the window opens, the viewer prints the voxel count, the vertex
count and the index count.

Keys in the viewer:

| Key   | Action          |
|-------|-----------------|
| W / S | forward / back  |
| A / D | left / right    |
| Space | up              |
| C     | down            |

The camera moves at 10 units per second and always faces along +z. Moving the
mouse shifts the point the camera looks at.

## Using the library

```python
import math

from voxelchunks.mesh import chunk_vertices, chunk_indices, bulk_chunk_vertices, parse_int
from voxelchunks.geometry import Matrix4

vertices = bulk_chunk_vertices(2, 1, 1)   # flat list of x, y, z floats
indices = chunk_indices(2)                # triangle indices for 2 chunks

projection = Matrix4.perspective(math.radians(45.0), 16 / 9, 0.1, 1000.0)
view = Matrix4.look_at((0, 0, -10), (0, 0, -9), (0, 1, 0))
mvp = projection @ view @ Matrix4.identity()
floats = mvp.column_major()               # ready for a uniform upload

height = parse_int("480")                 # raises ValueError on bad input
```

- `voxelchunks.mesh` generates the vertices with `voxel_vertices`, `chunk_vertices`
  and `bulk_chunk_vertices`, and the indices with `chunk_indices`.
- `voxelchunks.geometry` provides `Vertex3D`, `Triangle` and `Matrix4`. `Matrix4`
  offers `identity`, `translation`, `perspective` (the field of view is in
  radians), `look_at`, `@` and `column_major`.
- `voxelchunks.app` provides `Settings`, `Camera`, `Mesh.build`, `parse_args`,
  `run_viewer` and `main`.
- `voxelchunks.glloader` does the following:
  - `parse_version` parses OpenGL version strings such as `"4.6.0 NVIDIA"` or
    `"OpenGL ES 3.2"`.
  - `supported_versions` lists the core versions that a given version includes.
  - `Extensions` checks extension names.
  - `GLLoader.load(get_proc, get_string)` looks up every core entry point up to
    OpenGL 3.3 through callables that you supply. It raises `GLLoadError` on
    failure.
- `voxelchunks.glprocs_legacy` and `voxelchunks.glprocs_modern` list the entry-point
  names that each core version introduces.

## What it does not do

There is no in-window settings menu. The chunk counts and the resolution are
given only as command-line options. The viewer draws plain white wireframes,
with no lighting, textures or face culling.

## Running the tests

```
pip install .[test]
pytest
```