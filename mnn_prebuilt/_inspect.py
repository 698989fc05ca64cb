"""Best-effort inspection of universal (multi-architecture) binaries."""

from __future__ import annotations

import abc
import logging
import re
import subprocess

from ._platform import normalize_system

logger = logging.getLogger(__name__)

_FAT_ARCHS_RE = re.compile(r"Architectures in the fat file: .* are: (.+)$")


class BinaryInspector(abc.ABC):
    """Reports on the architectures contained in a binary.

    Implementations never raise; failures read as "not universal" and
    "no architectures". ``architectures`` does not repeat the universal
    check, so each binary costs at most one process per method.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @abc.abstractmethod
    def is_universal(self, path: str) -> bool: ...

    @abc.abstractmethod
    def architectures(self, path: str) -> list[str]: ...


class NullInspector(BinaryInspector):
    """Used where universal binaries do not exist."""

    @property
    def name(self) -> str:
        return "null"

    def is_universal(self, path: str) -> bool:
        return False

    def architectures(self, path: str) -> list[str]:
        return []


class MachOInspector(BinaryInspector):
    """macOS inspector backed by ``file`` and ``lipo``."""

    timeout: float = 5.0

    @property
    def name(self) -> str:
        return "macho"

    def is_universal(self, path: str) -> bool:
        output = self._run(["file", path])
        if output is None:
            return False
        return "Mach-O universal binary" in output

    def architectures(self, path: str) -> list[str]:
        """Architectures in a fat file; call after ``is_universal``."""
        output = self._run(["lipo", "-info", path])
        if output is None:
            return []
        for line in output.splitlines():
            match = _FAT_ARCHS_RE.search(line.strip())
            if match:
                return match.group(1).split()
        logger.warning("Could not parse lipo output for %s: %r", path, output[:200])
        return []

    def _run(self, cmd: list[str]) -> str | None:
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.warning("%s failed: %s", cmd[0], exc)
            return None
        if result.returncode != 0:
            logger.warning(
                "%s exited %d: %s", cmd[0], result.returncode, result.stderr.strip()[:200]
            )
            return None
        return result.stdout


def get_inspector(system: str | None = None) -> BinaryInspector:
    if normalize_system(system) == "darwin":
        return MachOInspector()
    return NullInspector()
