"""Names of the OpenGL entry points added by each core version from 3.0 to 3.3."""

from __future__ import annotations

from types import MappingProxyType
from typing import Union

from voxelchunks.glprocs_legacy import Version, _as_version

_GL_3_0 = (
    "glColorMaski", "glGetBooleani_v", "glGetIntegeri_v", "glEnablei",
    "glDisablei", "glIsEnabledi", "glBeginTransformFeedback",
    "glEndTransformFeedback", "glBindBufferRange", "glBindBufferBase",
    "glTransformFeedbackVaryings", "glGetTransformFeedbackVarying",
    "glClampColor", "glBeginConditionalRender", "glEndConditionalRender",
    "glVertexAttribIPointer", "glGetVertexAttribIiv", "glGetVertexAttribIuiv",
    "glVertexAttribI1i", "glVertexAttribI2i", "glVertexAttribI3i",
    "glVertexAttribI4i", "glVertexAttribI1ui", "glVertexAttribI2ui",
    "glVertexAttribI3ui", "glVertexAttribI4ui", "glVertexAttribI1iv",
    "glVertexAttribI2iv", "glVertexAttribI3iv", "glVertexAttribI4iv",
    "glVertexAttribI1uiv", "glVertexAttribI2uiv", "glVertexAttribI3uiv",
    "glVertexAttribI4uiv", "glVertexAttribI4bv", "glVertexAttribI4sv",
    "glVertexAttribI4ubv", "glVertexAttribI4usv", "glGetUniformuiv",
    "glBindFragDataLocation", "glGetFragDataLocation",
    "glUniform1ui", "glUniform2ui", "glUniform3ui", "glUniform4ui",
    "glUniform1uiv", "glUniform2uiv", "glUniform3uiv", "glUniform4uiv",
    "glTexParameterIiv", "glTexParameterIuiv", "glGetTexParameterIiv",
    "glGetTexParameterIuiv", "glClearBufferiv", "glClearBufferuiv",
    "glClearBufferfv", "glClearBufferfi", "glGetStringi", "glIsRenderbuffer",
    "glBindRenderbuffer", "glDeleteRenderbuffers", "glGenRenderbuffers",
    "glRenderbufferStorage", "glGetRenderbufferParameteriv",
    "glIsFramebuffer", "glBindFramebuffer", "glDeleteFramebuffers",
    "glGenFramebuffers", "glCheckFramebufferStatus",
    "glFramebufferTexture1D", "glFramebufferTexture2D",
    "glFramebufferTexture3D", "glFramebufferRenderbuffer",
    "glGetFramebufferAttachmentParameteriv", "glGenerateMipmap",
    "glBlitFramebuffer", "glRenderbufferStorageMultisample",
    "glFramebufferTextureLayer", "glMapBufferRange",
    "glFlushMappedBufferRange", "glBindVertexArray", "glDeleteVertexArrays",
    "glGenVertexArrays", "glIsVertexArray",
)

# 3.1 loads a few 3.0 entry points again; they are kept so load order matches.
_GL_3_1 = (
    "glDrawArraysInstanced", "glDrawElementsInstanced", "glTexBuffer",
    "glPrimitiveRestartIndex", "glCopyBufferSubData", "glGetUniformIndices",
    "glGetActiveUniformsiv", "glGetActiveUniformName",
    "glGetUniformBlockIndex", "glGetActiveUniformBlockiv",
    "glGetActiveUniformBlockName", "glUniformBlockBinding",
    "glBindBufferRange", "glBindBufferBase", "glGetIntegeri_v",
)

_GL_3_2 = (
    "glDrawElementsBaseVertex", "glDrawRangeElementsBaseVertex",
    "glDrawElementsInstancedBaseVertex", "glMultiDrawElementsBaseVertex",
    "glProvokingVertex", "glFenceSync", "glIsSync", "glDeleteSync",
    "glClientWaitSync", "glWaitSync", "glGetInteger64v", "glGetSynciv",
    "glGetInteger64i_v", "glGetBufferParameteri64v", "glFramebufferTexture",
    "glTexImage2DMultisample", "glTexImage3DMultisample",
    "glGetMultisamplefv", "glSampleMaski",
)

_GL_3_3 = (
    "glBindFragDataLocationIndexed", "glGetFragDataIndex", "glGenSamplers",
    "glDeleteSamplers", "glIsSampler", "glBindSampler", "glSamplerParameteri",
    "glSamplerParameteriv", "glSamplerParameterf", "glSamplerParameterfv",
    "glSamplerParameterIiv", "glSamplerParameterIuiv",
    "glGetSamplerParameteriv", "glGetSamplerParameterIiv",
    "glGetSamplerParameterfv", "glGetSamplerParameterIuiv",
    "glQueryCounter", "glGetQueryObjecti64v", "glGetQueryObjectui64v",
    "glVertexAttribDivisor",
    "glVertexAttribP1ui", "glVertexAttribP1uiv", "glVertexAttribP2ui",
    "glVertexAttribP2uiv", "glVertexAttribP3ui", "glVertexAttribP3uiv",
    "glVertexAttribP4ui", "glVertexAttribP4uiv",
    "glVertexP2ui", "glVertexP2uiv", "glVertexP3ui", "glVertexP3uiv",
    "glVertexP4ui", "glVertexP4uiv",
    "glTexCoordP1ui", "glTexCoordP1uiv", "glTexCoordP2ui", "glTexCoordP2uiv",
    "glTexCoordP3ui", "glTexCoordP3uiv", "glTexCoordP4ui", "glTexCoordP4uiv",
    "glMultiTexCoordP1ui", "glMultiTexCoordP1uiv", "glMultiTexCoordP2ui",
    "glMultiTexCoordP2uiv", "glMultiTexCoordP3ui", "glMultiTexCoordP3uiv",
    "glMultiTexCoordP4ui", "glMultiTexCoordP4uiv",
    "glNormalP3ui", "glNormalP3uiv", "glColorP3ui", "glColorP3uiv",
    "glColorP4ui", "glColorP4uiv", "glSecondaryColorP3ui",
    "glSecondaryColorP3uiv",
)

_PROCEDURES = MappingProxyType({
    (3, 0): _GL_3_0,
    (3, 1): _GL_3_1,
    (3, 2): _GL_3_2,
    (3, 3): _GL_3_3,
})


def modern_versions() -> tuple[Version, ...]:
    """The modern core versions, oldest first."""
    return tuple(_PROCEDURES)


def modern_procedure_names(version: Union[Version, str]) -> tuple[str, ...]:
    """Entry points introduced by ``version``, in load order.

    ``version`` is a ``(major, minor)`` pair or a ``"major.minor"`` string.
    Raises ValueError for a version outside 3.0 to 3.3.
    """
    key = _as_version(version)
    try:
        return _PROCEDURES[key]
    except KeyError:
        raise ValueError(f"not a modern OpenGL version: {key[0]}.{key[1]}") from None