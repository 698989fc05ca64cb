"""Tests for mnn_prebuilt.cli (Click command-line interface)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from mnn_prebuilt import __version__
from mnn_prebuilt.cli import main


@pytest.fixture()
def host(tmp_path: Path):
    """Simulated linux/x64 host whose artifacts live under tmp_path."""
    with (
        patch("mnn_prebuilt._platform.sys") as mock_sys,
        patch("mnn_prebuilt._platform.platform") as mock_platform,
        patch("mnn_prebuilt._artifacts.default_base_dir", return_value=str(tmp_path)),
    ):
        mock_sys.platform = "linux"
        mock_platform.machine.return_value = "x86_64"
        yield tmp_path


def _install(base: Path, *files: str) -> Path:
    root = base / "lib" / "linux-x64"
    (root / "include").mkdir(parents=True)
    (root / "lib").mkdir()
    for name in files:
        (root / "lib" / name).write_bytes(b"\0")
    return root


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestMainGroup:
    def test_help(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        for cmd in ("validate", "platform", "config", "libs", "copy-libs"):
            assert cmd in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_success_prints_config(self, host):
        _install(host, "libmnn.a")
        result = CliRunner().invoke(main, ["validate"])
        assert result.exit_code == 0
        assert "installation OK" in result.output
        assert "-lmnn" in result.output

    def test_failure_exits_nonzero(self, host):
        result = CliRunner().invoke(main, ["validate"])
        assert result.exit_code == 1
        assert "Supported platforms" in result.output


# ---------------------------------------------------------------------------
# platform / config / libs / copy-libs
# ---------------------------------------------------------------------------


class TestPlatformCommand:
    def test_prints_key_and_package(self, host):
        result = CliRunner().invoke(main, ["platform"])
        assert result.exit_code == 0
        assert "linux-x64" in result.output
        assert "mnn-linux-x64" in result.output

    def test_unsupported_host(self):
        with patch("mnn_prebuilt._platform.sys") as mock_sys:
            mock_sys.platform = "sunos5"
            result = CliRunner().invoke(main, ["platform"])
        assert result.exit_code == 1
        assert "Unsupported platform: sunos5" in result.output


class TestConfigCommand:
    def test_json_output(self, host):
        root = _install(host, "libmnn.a")
        result = CliRunner().invoke(main, ["config", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "include_dirs": [str(root / "include")],
            "library_dirs": [str(root / "lib")],
            "libraries": ["-lmnn"],
        }

    def test_text_output(self, host):
        _install(host, "libmnn.a")
        result = CliRunner().invoke(main, ["config"])
        assert result.exit_code == 0
        assert "Libraries:" in result.output

    def test_missing_artifacts(self, host):
        result = CliRunner().invoke(main, ["config"])
        assert result.exit_code == 1
        assert "linux-x64" in result.output


class TestLibsCommand:
    def test_lists_by_kind(self, host):
        _install(host, "libmnn.a", "libmnn.so", "notes.txt")
        result = CliRunner().invoke(main, ["libs"])
        assert result.exit_code == 0
        assert "static (1)" in result.output
        assert "dynamic (1)" in result.output
        assert "universal (0)" in result.output
        assert "notes.txt" not in result.output


class TestCopyLibsCommand:
    def test_copies(self, host):
        _install(host, "libmnn.so")
        dest = host / "build"
        result = CliRunner().invoke(main, ["copy-libs", str(dest)])
        assert result.exit_code == 0
        assert (dest / "libmnn.so").is_file()
        assert "1 file(s) copied" in result.output
