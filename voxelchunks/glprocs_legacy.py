"""Names of the OpenGL entry points added by each core version from 1.0 to 2.1."""

from __future__ import annotations

from types import MappingProxyType
from typing import Union

Version = tuple[int, int]

_GL_1_0 = (
    "glCullFace", "glFrontFace", "glHint", "glLineWidth", "glPointSize",
    "glPolygonMode", "glScissor", "glTexParameterf", "glTexParameterfv",
    "glTexParameteri", "glTexParameteriv", "glTexImage1D", "glTexImage2D",
    "glDrawBuffer", "glClear", "glClearColor", "glClearStencil", "glClearDepth",
    "glStencilMask", "glColorMask", "glDepthMask", "glDisable", "glEnable",
    "glFinish", "glFlush", "glBlendFunc", "glLogicOp", "glStencilFunc",
    "glStencilOp", "glDepthFunc", "glPixelStoref", "glPixelStorei",
    "glReadBuffer", "glReadPixels", "glGetBooleanv", "glGetDoublev",
    "glGetError", "glGetFloatv", "glGetIntegerv", "glGetString",
    "glGetTexImage", "glGetTexParameterfv", "glGetTexParameteriv",
    "glGetTexLevelParameterfv", "glGetTexLevelParameteriv", "glIsEnabled",
    "glDepthRange", "glViewport",
)

_GL_1_1 = (
    "glDrawArrays", "glDrawElements", "glPolygonOffset", "glCopyTexImage1D",
    "glCopyTexImage2D", "glCopyTexSubImage1D", "glCopyTexSubImage2D",
    "glTexSubImage1D", "glTexSubImage2D", "glBindTexture", "glDeleteTextures",
    "glGenTextures", "glIsTexture",
)

_GL_1_2 = (
    "glDrawRangeElements", "glTexImage3D", "glTexSubImage3D",
    "glCopyTexSubImage3D",
)

_GL_1_3 = (
    "glActiveTexture", "glSampleCoverage", "glCompressedTexImage3D",
    "glCompressedTexImage2D", "glCompressedTexImage1D",
    "glCompressedTexSubImage3D", "glCompressedTexSubImage2D",
    "glCompressedTexSubImage1D", "glGetCompressedTexImage",
)

_GL_1_4 = (
    "glBlendFuncSeparate", "glMultiDrawArrays", "glMultiDrawElements",
    "glPointParameterf", "glPointParameterfv", "glPointParameteri",
    "glPointParameteriv", "glBlendColor", "glBlendEquation",
)

_GL_1_5 = (
    "glGenQueries", "glDeleteQueries", "glIsQuery", "glBeginQuery",
    "glEndQuery", "glGetQueryiv", "glGetQueryObjectiv", "glGetQueryObjectuiv",
    "glBindBuffer", "glDeleteBuffers", "glGenBuffers", "glIsBuffer",
    "glBufferData", "glBufferSubData", "glGetBufferSubData", "glMapBuffer",
    "glUnmapBuffer", "glGetBufferParameteriv", "glGetBufferPointerv",
)

_GL_2_0 = (
    "glBlendEquationSeparate", "glDrawBuffers", "glStencilOpSeparate",
    "glStencilFuncSeparate", "glStencilMaskSeparate", "glAttachShader",
    "glBindAttribLocation", "glCompileShader", "glCreateProgram",
    "glCreateShader", "glDeleteProgram", "glDeleteShader", "glDetachShader",
    "glDisableVertexAttribArray", "glEnableVertexAttribArray",
    "glGetActiveAttrib", "glGetActiveUniform", "glGetAttachedShaders",
    "glGetAttribLocation", "glGetProgramiv", "glGetProgramInfoLog",
    "glGetShaderiv", "glGetShaderInfoLog", "glGetShaderSource",
    "glGetUniformLocation", "glGetUniformfv", "glGetUniformiv",
    "glGetVertexAttribdv", "glGetVertexAttribfv", "glGetVertexAttribiv",
    "glGetVertexAttribPointerv", "glIsProgram", "glIsShader", "glLinkProgram",
    "glShaderSource", "glUseProgram",
    "glUniform1f", "glUniform2f", "glUniform3f", "glUniform4f",
    "glUniform1i", "glUniform2i", "glUniform3i", "glUniform4i",
    "glUniform1fv", "glUniform2fv", "glUniform3fv", "glUniform4fv",
    "glUniform1iv", "glUniform2iv", "glUniform3iv", "glUniform4iv",
    "glUniformMatrix2fv", "glUniformMatrix3fv", "glUniformMatrix4fv",
    "glValidateProgram",
    "glVertexAttrib1d", "glVertexAttrib1dv", "glVertexAttrib1f",
    "glVertexAttrib1fv", "glVertexAttrib1s", "glVertexAttrib1sv",
    "glVertexAttrib2d", "glVertexAttrib2dv", "glVertexAttrib2f",
    "glVertexAttrib2fv", "glVertexAttrib2s", "glVertexAttrib2sv",
    "glVertexAttrib3d", "glVertexAttrib3dv", "glVertexAttrib3f",
    "glVertexAttrib3fv", "glVertexAttrib3s", "glVertexAttrib3sv",
    "glVertexAttrib4Nbv", "glVertexAttrib4Niv", "glVertexAttrib4Nsv",
    "glVertexAttrib4Nub", "glVertexAttrib4Nubv", "glVertexAttrib4Nuiv",
    "glVertexAttrib4Nusv", "glVertexAttrib4bv", "glVertexAttrib4d",
    "glVertexAttrib4dv", "glVertexAttrib4f", "glVertexAttrib4fv",
    "glVertexAttrib4iv", "glVertexAttrib4s", "glVertexAttrib4sv",
    "glVertexAttrib4ubv", "glVertexAttrib4uiv", "glVertexAttrib4usv",
    "glVertexAttribPointer",
)

_GL_2_1 = (
    "glUniformMatrix2x3fv", "glUniformMatrix3x2fv", "glUniformMatrix2x4fv",
    "glUniformMatrix4x2fv", "glUniformMatrix3x4fv", "glUniformMatrix4x3fv",
)

_PROCEDURES = MappingProxyType({
    (1, 0): _GL_1_0,
    (1, 1): _GL_1_1,
    (1, 2): _GL_1_2,
    (1, 3): _GL_1_3,
    (1, 4): _GL_1_4,
    (1, 5): _GL_1_5,
    (2, 0): _GL_2_0,
    (2, 1): _GL_2_1,
})


def _as_version(version: Union[Version, str]) -> Version:
    if isinstance(version, str):
        major, sep, minor = version.partition(".")
        if not sep:
            raise ValueError(f"malformed version: {version!r}")
        try:
            return int(major), int(minor)
        except ValueError:
            raise ValueError(f"malformed version: {version!r}") from None
    try:
        major, minor = version
    except (TypeError, ValueError):
        raise ValueError(f"malformed version: {version!r}") from None
    return int(major), int(minor)


def legacy_versions() -> tuple[Version, ...]:
    """The legacy core versions, oldest first."""
    return tuple(_PROCEDURES)


def legacy_procedure_names(version: Union[Version, str]) -> tuple[str, ...]:
    """Entry points introduced by ``version``, in load order.

    ``version`` is a ``(major, minor)`` pair or a ``"major.minor"`` string.
    Raises ValueError for a version outside 1.0 to 2.1.
    """
    key = _as_version(version)
    try:
        return _PROCEDURES[key]
    except KeyError:
        raise ValueError(f"not a legacy OpenGL version: {key[0]}.{key[1]}") from None