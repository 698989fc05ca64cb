"""Locate prebuilt include/lib directories and the native binding."""

from __future__ import annotations

import logging
import os

from ._platform import normalize_machine, normalize_system, resolve_platform_key
from ._types import ArtifactPaths, MissingArtifactError, MNNPrebuiltError

logger = logging.getLogger(__name__)

BINDING_FILENAME = "binding.node"


def default_base_dir() -> str:
    """Directory the artifacts are installed under (this package)."""
    return os.path.dirname(os.path.abspath(__file__))


def get_artifact_paths(
    platform_key: str | None = None,
    base_dir: str | None = None,
    *,
    system: str | None = None,
    machine: str | None = None,
) -> ArtifactPaths:
    """Resolve ``<base>/lib/<key>/include`` and ``<base>/lib/<key>/lib``.

    Raises:
        UnsupportedPlatformError: no key given and the host is unsupported.
        MissingArtifactError: either directory does not exist.
    """
    key = platform_key or resolve_platform_key(system, machine)
    root = os.path.join(base_dir or default_base_dir(), "lib", key)
    include_dir = os.path.join(root, "include")
    lib_dir = os.path.join(root, "lib")

    for label, path in (("include", include_dir), ("lib", lib_dir)):
        if not os.path.isdir(path):
            raise MissingArtifactError(
                f"MNN prebuilt {label} directory not found for platform "
                f"{key}: {path}",
                platform_key=key,
            )
    return ArtifactPaths(platform_key=key, include_dir=include_dir, lib_dir=lib_dir)


def get_include_path(
    platform_key: str | None = None,
    base_dir: str | None = None,
    *,
    system: str | None = None,
    machine: str | None = None,
) -> str:
    return get_artifact_paths(
        platform_key, base_dir, system=system, machine=machine
    ).include_dir


def get_lib_path(
    platform_key: str | None = None,
    base_dir: str | None = None,
    *,
    system: str | None = None,
    machine: str | None = None,
) -> str:
    return get_artifact_paths(
        platform_key, base_dir, system=system, machine=machine
    ).lib_dir


def get_binding_path(
    base_dir: str | None = None,
    *,
    system: str | None = None,
    machine: str | None = None,
) -> str:
    """Find the prebuilt binding file.

    Looks in the platform install directory first, then in
    ``<base>/platforms/<os>-<arch>``.

    Raises:
        MissingArtifactError: the binding cannot be located.
    """
    base = base_dir or default_base_dir()
    os_name = normalize_system(system)
    arch = normalize_machine(machine)
    try:
        key = resolve_platform_key(os_name, arch)
        primary = os.path.join(base, "lib", key, BINDING_FILENAME)
        if os.path.isfile(primary):
            return primary

        fallback = os.path.join(base, "platforms", f"{os_name}-{arch}", BINDING_FILENAME)
        if os.path.isfile(fallback):
            logger.debug("Using fallback binding location %s", fallback)
            return fallback

        raise MissingArtifactError(
            f"MNN binding not found for platform {os_name}-{arch}",
            platform_key=key,
        )
    except MNNPrebuiltError as exc:
        raise MissingArtifactError(
            f"Failed to locate MNN binding: {exc}",
            platform_key=getattr(exc, "platform_key", None),
        ) from exc
