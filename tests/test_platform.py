"""Tests for mnn_prebuilt._platform (OS/architecture to platform key)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from mnn_prebuilt._platform import (
    SUPPORTED_PLATFORMS,
    get_platform_package,
    normalize_machine,
    normalize_system,
    resolve_platform_key,
)
from mnn_prebuilt._types import UnsupportedPlatformError


# ---------------------------------------------------------------------------
# normalize_system / normalize_machine
# ---------------------------------------------------------------------------


class TestNormalize:
    @pytest.mark.parametrize(
        "raw,expected",
        [("x86_64", "x64"), ("AMD64", "x64"), ("amd64", "x64"), ("x64", "x64"),
         ("arm64", "arm64"), ("aarch64", "arm64"), ("i686", "ia32")],
    )
    def test_machine_aliases(self, raw: str, expected: str) -> None:
        assert normalize_machine(raw) == expected

    def test_unknown_machine_passes_through(self) -> None:
        assert normalize_machine("riscv64") == "riscv64"

    def test_linux2_folds_to_linux(self) -> None:
        assert normalize_system("linux2") == "linux"

    def test_reads_host_when_not_given(self) -> None:
        with (
            patch("mnn_prebuilt._platform.sys") as mock_sys,
            patch("mnn_prebuilt._platform.platform") as mock_platform,
        ):
            mock_sys.platform = "win32"
            mock_platform.machine.return_value = "AMD64"
            assert normalize_system() == "win32"
            assert normalize_machine() == "x64"


# ---------------------------------------------------------------------------
# resolve_platform_key
# ---------------------------------------------------------------------------


class TestResolvePlatformKey:
    @pytest.mark.parametrize("machine", ["x86_64", "arm64", "ppc64"])
    def test_darwin_is_always_universal(self, machine: str) -> None:
        assert resolve_platform_key("darwin", machine) == "darwin-universal"

    def test_linux_x64(self) -> None:
        assert resolve_platform_key("linux", "x86_64") == "linux-x64"

    def test_windows_x64(self) -> None:
        assert resolve_platform_key("win32", "AMD64") == "win32-x64"

    def test_all_keys_are_supported_platforms(self) -> None:
        keys = {
            resolve_platform_key("darwin", "arm64"),
            resolve_platform_key("linux", "x64"),
            resolve_platform_key("win32", "x64"),
        }
        assert keys == set(SUPPORTED_PLATFORMS)

    def test_linux_arm64_unsupported(self) -> None:
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            resolve_platform_key("linux", "aarch64")
        message = str(exc_info.value)
        assert "Linux" in message
        assert "arm64" in message
        assert "linux" in message
        assert exc_info.value.system == "linux"
        assert exc_info.value.machine == "arm64"

    def test_windows_ia32_unsupported(self) -> None:
        with pytest.raises(UnsupportedPlatformError, match="Windows architecture: ia32"):
            resolve_platform_key("win32", "x86")

    def test_unknown_os_names_both_values(self) -> None:
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            resolve_platform_key("freebsd13", "x86_64")
        assert "freebsd13" in str(exc_info.value)
        assert "x64" in str(exc_info.value)

    def test_uses_host_detection(self) -> None:
        with (
            patch("mnn_prebuilt._platform.sys") as mock_sys,
            patch("mnn_prebuilt._platform.platform") as mock_platform,
        ):
            mock_sys.platform = "linux"
            mock_platform.machine.return_value = "x86_64"
            assert resolve_platform_key() == "linux-x64"


class TestGetPlatformPackage:
    def test_package_name(self) -> None:
        assert get_platform_package("darwin", "arm64") == "mnn-darwin-universal"
        assert get_platform_package("linux", "x86_64") == "mnn-linux-x64"

    def test_propagates_unsupported(self) -> None:
        with pytest.raises(UnsupportedPlatformError):
            get_platform_package("sunos5", "sparc")
