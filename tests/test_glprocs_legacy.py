import pytest

from voxelchunks.glprocs_legacy import legacy_procedure_names, legacy_versions


def test_versions_are_sorted_and_span_legacy_range():
    versions = legacy_versions()
    assert list(versions) == sorted(versions)
    assert versions[0] == (1, 0)
    assert versions[-1] == (2, 1)


def test_every_version_has_names():
    for version in legacy_versions():
        assert len(legacy_procedure_names(version)) > 0


def test_names_are_gl_prefixed():
    for version in legacy_versions():
        assert all(name.startswith("gl") for name in legacy_procedure_names(version))


def test_no_name_repeats_across_legacy_versions():
    names = [n for v in legacy_versions() for n in legacy_procedure_names(v)]
    assert len(names) == len(set(names))


def test_gl_1_0_load_order():
    names = legacy_procedure_names((1, 0))
    assert names[0] == "glCullFace"
    assert names[-1] == "glViewport"
    assert names.index("glClear") < names.index("glClearColor")


@pytest.mark.parametrize(
    "version, name",
    [
        ((1, 0), "glPolygonMode"),
        ((1, 1), "glDrawElements"),
        ((1, 2), "glTexImage3D"),
        ((1, 3), "glActiveTexture"),
        ((1, 4), "glBlendEquation"),
        ((1, 5), "glBufferData"),
        ((2, 0), "glUniformMatrix4fv"),
        ((2, 1), "glUniformMatrix4x3fv"),
    ],
)
def test_name_belongs_to_version(version, name):
    assert name in legacy_procedure_names(version)


def test_shader_functions_introduced_in_2_0():
    names = legacy_procedure_names((2, 0))
    for name in ("glCreateShader", "glShaderSource", "glCompileShader",
                 "glCreateProgram", "glAttachShader", "glLinkProgram",
                 "glUseProgram", "glGetUniformLocation"):
        assert name in names
    assert "glCreateShader" not in legacy_procedure_names((1, 5))


def test_string_version_matches_tuple():
    assert legacy_procedure_names("1.5") == legacy_procedure_names((1, 5))
    assert legacy_procedure_names("2.1") == legacy_procedure_names((2, 1))


@pytest.mark.parametrize("version", [(3, 0), (0, 9), (1, 6), "3.3"])
def test_unknown_version_raises(version):
    with pytest.raises(ValueError):
        legacy_procedure_names(version)


@pytest.mark.parametrize("version", ["2", "x.y", (1,), 5])
def test_malformed_version_raises(version):
    with pytest.raises(ValueError):
        legacy_procedure_names(version)