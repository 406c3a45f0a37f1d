"""Resolve OpenGL entry points for the context's core version and list its extensions."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional, Union

from voxelchunks.glprocs_legacy import Version, legacy_procedure_names, legacy_versions
from voxelchunks.glprocs_modern import modern_procedure_names, modern_versions

VERSION_QUERY = "GL_VERSION"
EXTENSIONS_QUERY = "GL_EXTENSIONS"

_ES_PREFIXES = ("OpenGL ES-CM ", "OpenGL ES-CL ", "OpenGL ES ")
_VERSION_PATTERN = re.compile(r"\s*([+-]?\d+)\.\s*([+-]?\d+)")
_HIGHEST_LOADABLE = (3, 3)

ProcLookup = Callable[[str], Any]
StringQuery = Callable[[str], Union[str, Iterable[str], None]]


class GLLoadError(RuntimeError):
    """The OpenGL context could not be loaded."""


@dataclass(frozen=True, order=True)
class GLVersion:
    """A core OpenGL version number."""

    major: int
    minor: int

    def supports(self, major: int, minor: int) -> bool:
        """Whether this version includes the core version ``major.minor``."""
        return (self.major == major and self.minor >= minor) or self.major > major

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


def parse_version(text: str) -> GLVersion:
    """Read the version from a GL_VERSION string, ignoring any ES prefix and vendor text."""
    for prefix in _ES_PREFIXES:
        if text.startswith(prefix):
            text = text[len(prefix):]
            break
    match = _VERSION_PATTERN.match(text)
    if match is None:
        raise ValueError(f"malformed OpenGL version string: {text!r}")
    return GLVersion(int(match.group(1)), int(match.group(2)))


def supported_versions(version: Union[GLVersion, Version]) -> tuple[Version, ...]:
    """The known core versions, oldest first, that ``version`` includes."""
    if not isinstance(version, GLVersion):
        version = GLVersion(*version)
    return tuple(
        known
        for known in (*legacy_versions(), *modern_versions())
        if version.supports(*known)
    )


def _procedure_names(version: Version) -> tuple[str, ...]:
    if version in legacy_versions():
        return legacy_procedure_names(version)
    return modern_procedure_names(version)


@dataclass(frozen=True)
class Extensions:
    """The set of extension names a context reports."""

    names: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_string(cls, text: Optional[str]) -> "Extensions":
        """From a single space-separated list, as older contexts report it."""
        if not text:
            return cls()
        return cls(frozenset(name for name in text.split(" ") if name))

    @classmethod
    def from_list(cls, names: Iterable[str]) -> "Extensions":
        """From names reported one by one, as 3.0 and newer contexts do."""
        return cls(frozenset(names))

    def has(self, name: Optional[str]) -> bool:
        """Whether ``name`` is exactly one of the reported extensions."""
        return name is not None and name in self.names

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self.names)


class GLLoader:
    """Looks up the entry points of every core version a context supports."""

    def __init__(self) -> None:
        self.version = GLVersion(0, 0)
        self.extensions = Extensions()
        self._procedures: dict[str, Any] = {}

    @property
    def procedures(self) -> Mapping[str, Any]:
        """Every looked-up name and what the lookup returned, possibly None."""
        return MappingProxyType(self._procedures)

    def load(self, get_proc: ProcLookup, get_string: StringQuery) -> GLVersion:
        """Load entry points through ``get_proc`` and return the context's version.

        ``get_string`` answers the ``GL_VERSION`` and ``GL_EXTENSIONS`` queries.
        For extensions a pre-3.0 context gives one space-separated string,
        a newer one an iterable of names. Raises GLLoadError on failure.
        """
        self.version = GLVersion(0, 0)
        self.extensions = Extensions()
        self._procedures = {}

        if get_proc("glGetString") is None:
            raise GLLoadError("glGetString is not available")
        version_text = get_string(VERSION_QUERY)
        if version_text is None:
            raise GLLoadError("the context reports no version")
        if not isinstance(version_text, str):
            raise GLLoadError(f"unexpected version value: {version_text!r}")
        try:
            version = parse_version(version_text)
        except ValueError as exc:
            raise GLLoadError(str(exc)) from exc
        self.version = version

        for core in supported_versions(version):
            for name in _procedure_names(core):
                self._procedures[name] = get_proc(name)

        self.extensions = self._read_extensions(version, get_string)

        if version.major == 0 and version.minor == 0:
            raise GLLoadError("the context reports version 0.0")
        return version

    @staticmethod
    def _read_extensions(version: GLVersion, get_string: StringQuery) -> Extensions:
        loaded_major = min((version.major, version.minor), _HIGHEST_LOADABLE)[0]
        reported = get_string(EXTENSIONS_QUERY)
        if loaded_major < 3:
            if reported is not None and not isinstance(reported, str):
                reported = " ".join(reported)
            return Extensions.from_string(reported)
        if isinstance(reported, str):
            reported = [name for name in reported.split(" ") if name]
        names = list(reported or ())
        if not names:
            raise GLLoadError("the context reports no extensions")
        return Extensions.from_list(names)

    def procedure(self, name: str) -> Any:
        """The loaded entry point called ``name``; KeyError if it is unavailable."""
        proc = self._procedures.get(name)
        if proc is None:
            raise KeyError(f"OpenGL procedure not loaded: {name}")
        return proc