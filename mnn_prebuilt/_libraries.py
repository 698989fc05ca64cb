"""Classify prebuilt library files and derive linker names from them."""

from __future__ import annotations

import logging
import os
import shutil

from ._artifacts import get_lib_path
from ._platform import normalize_system
from ._types import ClassifiedLibraries

logger = logging.getLogger(__name__)

STATIC_EXTENSIONS = frozenset({".lib", ".a"})
DYNAMIC_EXTENSIONS = frozenset({".dll", ".dylib", ".so"})

# Only macOS ships extension-less universal (fat) binaries.
UNIVERSAL_BINARY_SYSTEM = "darwin"

_UNIX_LIB_PREFIX = "lib"


def classify_libraries(
    lib_dir: str, system: str | None = None
) -> ClassifiedLibraries:
    """Bucket the files of *lib_dir* into static, dynamic and universal.

    Entries keep ``os.listdir`` order. Subdirectories, hidden files such as
    ``.DS_Store`` and files with an unrecognised extension are dropped.
    """
    os_name = normalize_system(system)
    static: list[str] = []
    dynamic: list[str] = []
    universal: list[str] = []

    for entry in os.listdir(lib_dir):
        full_path = os.path.join(lib_dir, entry)
        if os.path.isdir(full_path):
            logger.debug("Skipping directory %s", full_path)
            continue
        if entry.startswith("."):
            logger.debug("Skipping hidden file %s", full_path)
            continue

        ext = os.path.splitext(entry)[1]
        if ext in STATIC_EXTENSIONS:
            static.append(full_path)
        elif ext in DYNAMIC_EXTENSIONS:
            dynamic.append(full_path)
        elif ext == "" and os_name == UNIVERSAL_BINARY_SYSTEM:
            universal.append(full_path)
        else:
            logger.debug("Ignoring unrecognised library file %s", full_path)

    return ClassifiedLibraries(static=static, dynamic=dynamic, universal=universal)


def get_libraries(
    platform_key: str | None = None,
    base_dir: str | None = None,
    *,
    system: str | None = None,
    machine: str | None = None,
) -> ClassifiedLibraries:
    lib_dir = get_lib_path(platform_key, base_dir, system=system, machine=machine)
    return classify_libraries(lib_dir, system=system)


def derive_library_names(libraries: ClassifiedLibraries) -> list[str]:
    """Turn static and universal libraries into bare link names.

    ``libfoo.a`` and ``foo.lib`` both give ``foo``. Universal binaries are
    already named after their link target and are used as-is. Dynamic
    libraries are never linked by name.
    """
    names: list[str] = []
    for lib in libraries.static:
        name = os.path.splitext(os.path.basename(lib))[0]
        if name.startswith(_UNIX_LIB_PREFIX):
            name = name[len(_UNIX_LIB_PREFIX):]
        names.append(name)
    for lib in libraries.universal:
        names.append(os.path.basename(lib))
    return names


def get_library_names(
    platform_key: str | None = None,
    base_dir: str | None = None,
    *,
    system: str | None = None,
    machine: str | None = None,
) -> list[str]:
    return derive_library_names(
        get_libraries(platform_key, base_dir, system=system, machine=machine)
    )


def copy_dynamic_libraries(
    dest_dir: str,
    platform_key: str | None = None,
    base_dir: str | None = None,
    *,
    system: str | None = None,
    machine: str | None = None,
) -> list[str]:
    """Copy every dynamic library into *dest_dir*.

    A file that fails to copy is logged and skipped; already-copied files
    are left in place. Returns the destination paths written.
    """
    libraries = get_libraries(platform_key, base_dir, system=system, machine=machine)
    os.makedirs(dest_dir, exist_ok=True)

    copied: list[str] = []
    for src in libraries.dynamic:
        dest = os.path.join(dest_dir, os.path.basename(src))
        try:
            shutil.copy2(src, dest)
        except OSError as exc:
            logger.warning("Failed to copy %s to %s: %s", src, dest_dir, exc)
            continue
        copied.append(dest)
    return copied
