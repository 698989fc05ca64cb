"""Build the include/library/link configuration for native builds."""

from __future__ import annotations

import os
from typing import Sequence

from ._artifacts import get_artifact_paths
from ._libraries import UNIVERSAL_BINARY_SYSTEM, classify_libraries, derive_library_names
from ._platform import normalize_system
from ._types import LinkConfig

# The MNN universal binary has no "lib" prefix and must be linked by path.
UNIVERSAL_LINK_NAME = "MNN"


def build_link_config(
    include_dir: str,
    lib_dir: str,
    names: Sequence[str],
    system: str | None = None,
) -> LinkConfig:
    """Emit link tokens for *names*, in order."""
    os_name = normalize_system(system)
    config = LinkConfig(include_dirs=[include_dir], library_dirs=[lib_dir])
    for name in names:
        if os_name == UNIVERSAL_BINARY_SYSTEM and name == UNIVERSAL_LINK_NAME:
            config.libraries.append(os.path.join(lib_dir, name))
        else:
            config.libraries.append(f"-l{name}")
    return config


def get_link_config(
    platform_key: str | None = None,
    base_dir: str | None = None,
    *,
    system: str | None = None,
    machine: str | None = None,
) -> LinkConfig:
    """Link configuration for the host (or the given platform key).

    Recomputed from the filesystem on every call.
    """
    paths = get_artifact_paths(platform_key, base_dir, system=system, machine=machine)
    libraries = classify_libraries(paths.lib_dir, system=system)
    return build_link_config(
        paths.include_dir,
        paths.lib_dir,
        derive_library_names(libraries),
        system=system,
    )
