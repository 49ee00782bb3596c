"""Click CLI commands for dupe-finder."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from dupe_finder.config import get_settings
from dupe_finder.errors import DupeFinderError
from dupe_finder.hasher import SUPPORTED_ALGORITHMS

console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def _fail(exc: DupeFinderError) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """dupe-finder — Find files with identical content."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# find
# ---------------------------------------------------------------------------


@cli.command("find")
@click.argument("directories", nargs=-1, type=click.Path(path_type=Path))
@click.option("--sequential", is_flag=True, help="Hash one file at a time.")
@click.option("--jobs", "-j", type=click.IntRange(min=1), default=None,
              help="Max files hashed concurrently (overrides config).")
@click.option("--algorithm", type=click.Choice(SUPPORTED_ALGORITHMS), default=None,
              help="Digest algorithm (overrides config).")
@click.option("--all", "show_all", is_flag=True, help="Also list files without duplicates.")
@click.option("--json", "as_json", is_flag=True, help="Print groups as JSON.")
def find_cmd(
    directories: tuple[Path, ...],
    sequential: bool,
    jobs: int | None,
    algorithm: str | None,
    show_all: bool,
    as_json: bool,
) -> None:
    """Report files with identical content under DIRECTORIES."""
    from dupe_finder.pipeline import scan_directories
    from dupe_finder.report import duplicate_groups, grouping_to_json, print_groups
    from dupe_finder.validator import validate_directories

    try:
        validate_directories(directories)
    except DupeFinderError as exc:
        _fail(exc)

    settings = get_settings()
    if jobs is not None:
        settings.max_concurrent = jobs
    if algorithm:
        settings.hash_algorithm = algorithm  # type: ignore[assignment]

    try:
        result = asyncio.run(
            scan_directories(settings, directories, sequential=sequential)
        )
    except DupeFinderError as exc:
        _fail(exc)

    min_size = 1 if show_all else settings.min_group_size
    groups = duplicate_groups(result.grouping, min_size=min_size)

    if as_json:
        click.echo(grouping_to_json(groups))
        return

    root = directories[0] if len(directories) == 1 else None
    print_groups(console, groups, root=root)

    dupes = [g for g in groups if len(g.paths) > 1]
    wasted = sum(g.wasted_bytes for g in dupes)
    console.print(
        f"\n[green]Done.[/green] Files: {len(result.files)}, "
        f"Duplicate groups: {len(dupes)}, "
        f"Reclaimable: {wasted} bytes "
        f"({result.duration_ms} ms)"
    )


# ---------------------------------------------------------------------------
# hash
# ---------------------------------------------------------------------------


@cli.command("hash")
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--algorithm", type=click.Choice(SUPPORTED_ALGORITHMS), default=None,
              help="Digest algorithm (overrides config).")
def hash_cmd(files: tuple[Path, ...], algorithm: str | None) -> None:
    """Print the content digest of each FILE."""
    from dupe_finder.hasher import hash_file

    settings = get_settings()
    algorithm = algorithm or settings.hash_algorithm

    for path in files:
        try:
            digest = hash_file(path, algorithm=algorithm, chunk_size=settings.chunk_size)
        except DupeFinderError as exc:
            _fail(exc)
        click.echo(f"{digest}  {path}")
