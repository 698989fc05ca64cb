"""Check that the prebuilt artifacts for the host are installed."""

from __future__ import annotations

import logging
import os

import click

from ._artifacts import get_artifact_paths
from ._inspect import BinaryInspector, get_inspector
from ._libraries import classify_libraries
from ._platform import resolve_platform_key
from ._types import MNNPrebuiltError

logger = logging.getLogger(__name__)


def validate_installation(
    system: str | None = None,
    machine: str | None = None,
    base_dir: str | None = None,
    inspector: BinaryInspector | None = None,
) -> bool:
    """Print installation diagnostics and report whether they passed.

    Fails on an unsupported host, a missing include/lib directory, or an
    empty lib directory. Universal-binary inspection is informational.
    """
    try:
        key = resolve_platform_key(system, machine)
        click.echo(f"  Platform: {key}")
        paths = get_artifact_paths(key, base_dir)
    except MNNPrebuiltError as exc:
        click.secho(f"  Error: {exc}", fg="red", err=True)
        return False

    click.echo(f"  Include: {paths.include_dir}")
    click.echo(f"  Lib:     {paths.lib_dir}")

    libraries = classify_libraries(paths.lib_dir, system=system)
    click.echo(
        f"  Libraries: {len(libraries.static)} static, "
        f"{len(libraries.dynamic)} dynamic, {len(libraries.universal)} universal"
    )

    if libraries.universal:
        inspector = inspector or get_inspector(system)
        click.echo(f"  Inspector: {inspector.name}")
        for lib in libraries.universal:
            name = os.path.basename(lib)
            if inspector.is_universal(lib):
                archs = inspector.architectures(lib)
                click.echo(f"    {name}: universal ({', '.join(archs) or 'unknown'})")
            else:
                click.echo(f"    {name}: single architecture")

    if libraries.total == 0:
        click.secho(
            f"  Error: no libraries found in {paths.lib_dir}", fg="red", err=True
        )
        return False

    logger.debug("Validated MNN prebuilt artifacts for %s", key)
    return True
