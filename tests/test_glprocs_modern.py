import pytest

from voxelchunks.glprocs_legacy import legacy_procedure_names, legacy_versions
from voxelchunks.glprocs_modern import modern_procedure_names, modern_versions


def test_versions_are_three_zero_to_three_three_in_order():
    assert modern_versions() == ((3, 0), (3, 1), (3, 2), (3, 3))


def test_versions_follow_legacy_versions():
    assert max(legacy_versions()) < min(modern_versions())


def test_every_version_has_names_starting_with_gl():
    for version in modern_versions():
        names = modern_procedure_names(version)
        assert names
        assert all(name.startswith("gl") for name in names)


def test_load_order_first_entries():
    assert modern_procedure_names((3, 0))[0] == "glColorMaski"
    assert modern_procedure_names((3, 2))[0] == "glDrawElementsBaseVertex"
    assert modern_procedure_names((3, 3))[0] == "glBindFragDataLocationIndexed"


def test_string_and_tuple_versions_agree():
    for version in modern_versions():
        text = f"{version[0]}.{version[1]}"
        assert modern_procedure_names(text) == modern_procedure_names(version)


def test_vertex_array_functions_arrive_in_three_zero():
    names = modern_procedure_names((3, 0))
    assert "glGenVertexArrays" in names
    assert "glBindVertexArray" in names
    assert "glDeleteVertexArrays" in names


def test_three_one_reloads_buffer_binding_entries_from_three_zero():
    shared = set(modern_procedure_names((3, 0))) & set(modern_procedure_names((3, 1)))
    assert shared == {"glBindBufferRange", "glBindBufferBase", "glGetIntegeri_v"}


def test_samplers_only_in_three_three():
    assert "glGenSamplers" in modern_procedure_names((3, 3))
    for version in ((3, 0), (3, 1), (3, 2)):
        assert "glGenSamplers" not in modern_procedure_names(version)


def test_no_overlap_with_legacy_names():
    legacy = {name for v in legacy_versions() for name in legacy_procedure_names(v)}
    modern = {name for v in modern_versions() for name in modern_procedure_names(v)}
    assert legacy.isdisjoint(modern)


def test_names_unique_within_each_version():
    for version in modern_versions():
        names = modern_procedure_names(version)
        assert len(names) == len(set(names))


@pytest.mark.parametrize("version", [(2, 1), (3, 4), (4, 0), "1.0", "3.4"])
def test_unknown_version_rejected(version):
    with pytest.raises(ValueError):
        modern_procedure_names(version)


@pytest.mark.parametrize("version", ["three", "3", "3.x", (3,), None])
def test_malformed_version_rejected(version):
    with pytest.raises(ValueError):
        modern_procedure_names(version)