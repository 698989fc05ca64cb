"""Shared dataclasses and errors for prebuilt artifact resolution."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


class MNNPrebuiltError(RuntimeError):
    """Base class for errors raised by mnn_prebuilt."""


class UnsupportedPlatformError(MNNPrebuiltError):
    """Raised when the OS/architecture pair has no prebuilt artifacts."""

    def __init__(self, message: str, system: str, machine: str) -> None:
        super().__init__(message)
        self.system = system
        self.machine = machine


class MissingArtifactError(MNNPrebuiltError):
    """Raised when an expected artifact directory or file is absent."""

    def __init__(self, message: str, platform_key: str | None = None) -> None:
        super().__init__(message)
        self.platform_key = platform_key


@dataclass(frozen=True)
class ArtifactPaths:
    platform_key: str
    include_dir: str
    lib_dir: str


@dataclass(frozen=True)
class ClassifiedLibraries:
    static: list[str] = field(default_factory=list)
    dynamic: list[str] = field(default_factory=list)
    universal: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.static) + len(self.dynamic) + len(self.universal)


@dataclass
class LinkConfig:
    """Compiler and linker inputs for a downstream native build."""

    include_dirs: list[str] = field(default_factory=list)
    library_dirs: list[str] = field(default_factory=list)
    libraries: list[str] = field(default_factory=list)  # "-l<name>" or a full path

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_extension_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``setuptools.Extension``.

        Link tokens go to ``extra_link_args`` since some of them are full
        paths rather than bare library names.
        """
        return {
            "include_dirs": list(self.include_dirs),
            "library_dirs": list(self.library_dirs),
            "extra_link_args": list(self.libraries),
        }
