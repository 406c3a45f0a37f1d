import pytest

from voxelchunks.app import (
    DEFAULT_RESOLUTION,
    Camera,
    Direction,
    Mesh,
    Settings,
    parse_args,
)
from voxelchunks.mesh import bulk_chunk_vertices, chunk_indices


def test_settings_defaults_match_initial_values():
    settings = Settings()
    assert (settings.xdist, settings.ydist, settings.zdist) == (1, 1, 1)
    assert settings.resolution == 480


def test_settings_make_negative_distances_positive():
    settings = Settings(-2, 3, -4)
    assert (settings.xdist, settings.ydist, settings.zdist) == (2, 3, 4)
    assert settings.chunk_count == 24


def test_settings_window_size_is_sixteen_by_nine():
    assert Settings(resolution=1080).window_size == (1920, 1080)


def test_settings_reject_non_positive_resolution():
    with pytest.raises(ValueError):
        Settings(resolution=0)


def test_parse_args_defaults():
    assert parse_args([]) == Settings(1, 1, 1, DEFAULT_RESOLUTION)


def test_parse_args_reads_values():
    settings = parse_args(["--x", "3", "--y", "0", "--z", "-2", "--resolution", "720"])
    assert settings == Settings(3, 0, 2, 720)


@pytest.mark.parametrize("value", ["48o", "", "4.5", "99999999999"])
def test_parse_args_rejects_invalid_resolution(value):
    with pytest.raises(SystemExit):
        parse_args(["--resolution", value])


def test_parse_args_rejects_distance_beyond_slider():
    with pytest.raises(SystemExit):
        parse_args(["--x", "101"])


def test_camera_starts_behind_origin():
    camera = Camera()
    assert (camera.x, camera.y, camera.z) == (0.0, 0.0, -10.0)


def test_camera_forward_moves_along_positive_z_only():
    camera = Camera()
    camera.move([Direction.FORWARD], 0.5)
    assert camera.z > -10.0
    assert (camera.x, camera.y) == (0.0, 0.0)


def test_camera_right_and_left_move_along_x():
    right = Camera()
    right.move([Direction.RIGHT], 0.1)
    left = Camera()
    left.move([Direction.LEFT], 0.1)
    assert right.x < 0 < left.x
    assert right.x == -left.x


def test_camera_up_and_down_move_along_y():
    camera = Camera()
    camera.move([Direction.UP], 0.2)
    assert camera.y > 0
    camera.move([Direction.DOWN], 0.2)
    assert camera.y == pytest.approx(0.0)


def test_camera_opposite_directions_cancel():
    camera = Camera()
    camera.move([Direction.FORWARD, Direction.BACKWARD], 1.0)
    assert (camera.x, camera.y, camera.z) == (0.0, 0.0, -10.0)


def test_camera_without_keys_stays_put():
    camera = Camera(1.0, 2.0, 3.0)
    camera.move([], 5.0)
    assert (camera.x, camera.y, camera.z) == (1.0, 2.0, 3.0)


def test_view_matrix_maps_eye_to_origin():
    camera = Camera(2.0, -1.0, 4.0)
    view = camera.view_matrix(150.0, -75.0)
    result = tuple(view @ (2.0, -1.0, 4.0, 1.0))
    assert result == pytest.approx((0.0, 0.0, 0.0, 1.0), abs=1e-9)


def test_view_matrix_without_cursor_looks_along_z():
    camera = Camera(0.0, 0.0, 0.0)
    view = camera.view_matrix(0.0, 0.0)
    result = tuple(view @ (0.0, 0.0, 1.0, 1.0))
    assert result == pytest.approx((0.0, 0.0, -1.0, 1.0), abs=1e-9)


def test_mesh_build_single_chunk_sizes():
    mesh = Mesh.build(1, 1, 1)
    assert mesh.voxel_count == 512
    assert mesh.vertex_count == 512 * 8
    assert len(mesh.indices) == 512 * 36


def test_mesh_build_matches_generators():
    mesh = Mesh.build(2, 1, 1)
    assert mesh.chunk_count == 2
    assert mesh.vertices == bulk_chunk_vertices(2, 1, 1)
    assert mesh.indices == chunk_indices(2)


def test_mesh_indices_stay_within_vertices():
    mesh = Mesh.build(1, 2, 1)
    assert max(mesh.indices) == mesh.vertex_count - 1
    assert min(mesh.indices) == 0


def test_mesh_with_zero_distance_is_empty():
    mesh = Mesh.build(0, 3, 3)
    assert mesh.vertices == []
    assert mesh.indices == []
    assert mesh.voxel_count == 0