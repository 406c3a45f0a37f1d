[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelchunks"
version = "0.1.0"
description = "Generate voxel chunk meshes and fly a camera through them in a wireframe OpenGL viewer"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["voxel", "chunk", "mesh", "opengl", "wireframe", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
voxelchunks = "voxelchunks.app:main"

[tool.hatch.build.targets.wheel]
packages = ["voxelchunks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
