"""Map the host OS and CPU architecture to a prebuilt platform key."""

from __future__ import annotations

import platform
import sys

from ._types import UnsupportedPlatformError

PACKAGE_PREFIX = "mnn-"

SUPPORTED_PLATFORMS = ("darwin-universal", "linux-x64", "win32-x64")

# Display names used in error messages.
_OS_LABELS = {"darwin": "macOS", "linux": "Linux", "win32": "Windows"}

_MACHINE_ALIASES: dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "arm64": "arm64",
    "aarch64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
}


def normalize_system(system: str | None = None) -> str:
    """Return the OS name as reported by ``sys.platform``, folded.

    ``linux2`` and friends become ``linux``; unknown values pass through.
    """
    raw = sys.platform if system is None else system
    name = raw.strip().lower()
    if name.startswith("linux"):
        return "linux"
    return name


def normalize_machine(machine: str | None = None) -> str:
    """Return a canonical architecture name (``x64``, ``arm64``, ``ia32``)."""
    raw = platform.machine() if machine is None else machine
    name = raw.strip().lower()
    return _MACHINE_ALIASES.get(name, name)


def resolve_platform_key(
    system: str | None = None, machine: str | None = None
) -> str:
    """Resolve the platform key for an OS/architecture pair.

    macOS artifacts ship as universal binaries, so the architecture is
    ignored there. Linux and Windows only have x64 builds.

    Raises:
        UnsupportedPlatformError: the pair has no prebuilt artifacts.
    """
    os_name = normalize_system(system)
    arch = normalize_machine(machine)

    if os_name == "darwin":
        return "darwin-universal"
    if os_name in ("linux", "win32"):
        if arch == "x64":
            return f"{os_name}-{arch}"
        raise UnsupportedPlatformError(
            f"Unsupported {_OS_LABELS[os_name]} architecture: {arch} "
            f"(platform: {os_name})",
            system=os_name,
            machine=arch,
        )
    raise UnsupportedPlatformError(
        f"Unsupported platform: {os_name} (architecture: {arch})",
        system=os_name,
        machine=arch,
    )


def get_platform_package(
    system: str | None = None, machine: str | None = None
) -> str:
    """Name of the platform distribution that carries the artifacts."""
    return PACKAGE_PREFIX + resolve_platform_key(system, machine)
