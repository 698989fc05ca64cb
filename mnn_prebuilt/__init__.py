"""
Prebuilt MNN native artifacts.

Resolves the headers and libraries shipped for the host platform and turns
them into include/library/link settings for a native build::

    from mnn_prebuilt import get_link_config

    config = get_link_config()
    Extension("_mnn", ["_mnn.c"], **config.to_extension_kwargs())
"""

from __future__ import annotations

__version__ = "1.0.0"

from ._artifacts import (
    BINDING_FILENAME,
    get_artifact_paths,
    get_binding_path,
    get_include_path,
    get_lib_path,
)
from ._config import UNIVERSAL_LINK_NAME, build_link_config, get_link_config
from ._inspect import BinaryInspector, MachOInspector, NullInspector, get_inspector
from ._libraries import (
    classify_libraries,
    copy_dynamic_libraries,
    derive_library_names,
    get_libraries,
    get_library_names,
)
from ._platform import (
    SUPPORTED_PLATFORMS,
    get_platform_package,
    normalize_machine,
    normalize_system,
    resolve_platform_key,
)
from ._types import (
    ArtifactPaths,
    ClassifiedLibraries,
    LinkConfig,
    MissingArtifactError,
    MNNPrebuiltError,
    UnsupportedPlatformError,
)
from ._validate import validate_installation

__all__ = [
    "ArtifactPaths",
    "BINDING_FILENAME",
    "BinaryInspector",
    "ClassifiedLibraries",
    "LinkConfig",
    "MachOInspector",
    "MissingArtifactError",
    "MNNPrebuiltError",
    "NullInspector",
    "SUPPORTED_PLATFORMS",
    "UNIVERSAL_LINK_NAME",
    "UnsupportedPlatformError",
    "build_link_config",
    "classify_libraries",
    "copy_dynamic_libraries",
    "derive_library_names",
    "get_artifact_paths",
    "get_binding_path",
    "get_include_path",
    "get_inspector",
    "get_lib_path",
    "get_libraries",
    "get_library_names",
    "get_link_config",
    "get_platform_package",
    "normalize_machine",
    "normalize_system",
    "resolve_platform_key",
    "validate_installation",
]
