#!/usr/bin/env python3
"""Command-line interface for sort-imports-by-length using Click."""

from importlib import metadata
import logging
from pathlib import Path
import sys
from typing import List, Sequence

import click
from sort_imports_by_length import config
from sort_imports_by_length import core


try:
    VERSION = f"sort-imports-by-length {metadata.version('sort-imports-by-length')}"
except metadata.PackageNotFoundError:
    VERSION = "sort-imports-by-length"


def _collect_targets(path: Path, exclude: Sequence[str]) -> List[Path]:
    """Return the JS/TS files to analyze for ``path``.

    A file argument is taken as given. A directory is walked using the
    extensions and exclude list from its pyproject.toml, plus ``exclude``.
    """
    if path.is_file():
        return [path]
    settings = config.read_config(str(path))
    ignore = list(settings.exclude) + list(exclude)
    return list(core.iter_source_files(str(path), settings.extensions, ignore))


def _run(path: Path, exclude: Sequence[str], apply_changes: bool) -> int:
    """Analyze each target's leading import block, reordering it if asked.

    Exit status: 0 when every block is already ordered, 1 when at least one
    block is (or would be) reordered, 2 when a file could not be read or
    written.
    """
    status = 0
    reported = 0

    for target in _collect_targets(path, exclude):
        try:
            reordered, warnings = core.process_file(str(target), apply=apply_changes)
        except Exception as exc:
            logging.error("[%s] ERROR: %s", target, exc)
            status = max(status, 2)
            continue

        for lineno, msg in warnings:
            logging.warning("[%s] line %s: %s", target, lineno, msg)
            reported += 1
            if lineno == 0:
                status = max(status, 2)

        if reordered:
            action = "imports reordered." if apply_changes else "imports are out of order."
            logging.info("[%s] %s", target, action)
            status = max(status, 1)

    if reported:
        logging.info("%d problem(s) reported", reported)

    return status


def _target_options(func):
    func = click.option(
        "--exclude", multiple=True, metavar="PREFIX",
        help="Skip files under this path prefix (repeatable).",
    )(func)
    return click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True))(func)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log each file's import count.")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors.")
@click.version_option(version=VERSION, prog_name="sibl")
def cli(verbose: bool, quiet: bool) -> None:
    """Group JS/TS imports (packages, scoped, ./, ../, type-only) and sort each group by line length."""
    if not logging.getLogger().handlers:
        if quiet:
            logging.basicConfig(level=logging.ERROR, format="%(message)s")
        else:
            logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")


@cli.command(help="List files whose import block is out of order; change nothing.")
@_target_options
def check(path: str, exclude: Sequence[str]) -> None:
    sys.exit(_run(Path(path), exclude, apply_changes=False))


@cli.command(help="Rewrite out-of-order import blocks in place.")
@_target_options
def fix(path: str, exclude: Sequence[str]) -> None:
    sys.exit(_run(Path(path), exclude, apply_changes=True))


def main():
    cli()


if __name__ == "__main__":
    cli()
