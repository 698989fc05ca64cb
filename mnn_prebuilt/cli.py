"""
mnn-prebuilt command-line interface.

Usage::

    mnn-prebuilt validate
    mnn-prebuilt platform
    mnn-prebuilt config --json
    mnn-prebuilt libs
    mnn-prebuilt copy-libs build/lib
"""

from __future__ import annotations

import json
import sys

import click

from mnn_prebuilt import __version__
from mnn_prebuilt._config import get_link_config
from mnn_prebuilt._libraries import copy_dynamic_libraries, get_libraries
from mnn_prebuilt._platform import get_platform_package, resolve_platform_key
from mnn_prebuilt._types import LinkConfig, MNNPrebuiltError
from mnn_prebuilt._validate import validate_installation

SUPPORTED_PLATFORMS_MESSAGE = "Supported platforms: macOS (Universal), Windows x64, Linux x64"


def _echo_config(config: LinkConfig) -> None:
    click.echo(f"  Include dirs: {config.include_dirs}")
    click.echo(f"  Library dirs: {config.library_dirs}")
    click.echo(f"  Libraries:    {config.libraries}")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="mnn-prebuilt")
def main() -> None:
    """Locate and validate prebuilt MNN native artifacts."""


@main.command()
def validate() -> None:
    """Verify the prebuilt artifacts for this host are installed."""
    click.echo("Validating MNN prebuilt installation...\n")
    if not validate_installation():
        click.secho("\nInstallation validation failed", fg="red", err=True)
        click.echo(SUPPORTED_PLATFORMS_MESSAGE, err=True)
        sys.exit(1)

    click.secho("\nMNN prebuilt installation OK", fg="green")
    try:
        config = get_link_config()
    except MNNPrebuiltError as exc:
        raise click.ClickException(str(exc)) from exc
    click.secho("\n  Build configuration", bold=True)
    _echo_config(config)


@main.command()
def platform() -> None:
    """Show the platform key and package for this host."""
    try:
        key = resolve_platform_key()
    except MNNPrebuiltError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Platform: {key}")
    click.echo(f"Package:  {get_platform_package()}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def config(as_json: bool) -> None:
    """Print include dirs, library dirs and link flags."""
    try:
        link_config = get_link_config()
    except MNNPrebuiltError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(link_config.to_dict(), indent=2))
        return
    _echo_config(link_config)


@main.command()
def libs() -> None:
    """List prebuilt libraries grouped by kind."""
    try:
        libraries = get_libraries()
    except MNNPrebuiltError as exc:
        raise click.ClickException(str(exc)) from exc

    for kind in ("static", "dynamic", "universal"):
        paths = getattr(libraries, kind)
        click.secho(f"  {kind} ({len(paths)})", bold=True)
        for path in paths:
            click.echo(f"    {path}")


@main.command("copy-libs")
@click.argument("dest", type=click.Path(file_okay=False))
def copy_libs(dest: str) -> None:
    """Copy dynamic libraries into DEST."""
    try:
        copied = copy_dynamic_libraries(dest)
    except MNNPrebuiltError as exc:
        raise click.ClickException(str(exc)) from exc
    for path in copied:
        click.echo(f"  copied {path}")
    click.echo(f"{len(copied)} file(s) copied to {dest}")


if __name__ == "__main__":
    main()
