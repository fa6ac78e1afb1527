"""
checkcites-build — CLI entrypoint.

Usage:
    python -m checkcites_build.main --help
    python -m checkcites_build.main check kpsewhich --version
    python -m checkcites_build.main script build/checkcites
    python -m checkcites_build.main package
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from checkcites_build import __version__
from checkcites_build.core.errors import PackagingError
from checkcites_build.core.observability.logging_config import (
    LOG_FILE_ENV,
    LOG_FILE_LEVEL_ENV,
    LOG_LEVEL_ENV,
    setup_logging,
)

# Pass everything after the command name straight through, flags included
_PASSTHROUGH = {"ignore_unknown_options": True, "allow_interspersed_args": False}


def _fail(error: PackagingError) -> None:
    """Report a packaging error and halt."""
    click.secho(f"❌ {error.message}", fg="red", err=True)
    if error.detail:
        click.echo(f"   ({error.detail})", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="checkcites-build")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to packaging.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """checkcites-build — packaging helpers for checkcites."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get(LOG_FILE_ENV),
        log_file_level=os.environ.get(LOG_FILE_LEVEL_ENV),
    )


@cli.command(context_settings=_PASSTHROUGH)
@click.argument("call", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def check(ctx: click.Context, call: tuple[str, ...]) -> None:
    """Check that a command runs, e.g. ``check kpsewhich --version``."""
    from checkcites_build.adapters.shell.command import assert_availability

    try:
        assert_availability(list(call))
    except PackagingError as e:
        _fail(e)

    if not ctx.obj.get("quiet"):
        click.secho(f"✅ {call[0]} is available", fg="green")


@cli.command("exec", context_settings=_PASSTHROUGH)
@click.option(
    "--cwd",
    "directory",
    type=click.Path(file_okay=False),
    default=".",
    help="Working directory for the call.",
)
@click.option("--timeout", type=float, default=None, help="Seconds before giving up.")
@click.argument("call", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def exec_(
    ctx: click.Context,
    directory: str,
    timeout: float | None,
    call: tuple[str, ...],
) -> None:
    """Run a command and fail unless it exits with status 0."""
    from checkcites_build.adapters.shell.command import execute

    try:
        output = execute(Path(directory), list(call), timeout=timeout)
    except PackagingError as e:
        _fail(e)

    if output.stdout and not ctx.obj.get("quiet"):
        click.echo(output.stdout)


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.pass_context
def script(ctx: click.Context, path: str) -> None:
    """Write the checkcites launcher script to PATH."""
    from checkcites_build.core.services.generators.launcher import create_script

    try:
        target = create_script(Path(path))
    except PackagingError as e:
        _fail(e)

    if not ctx.obj.get("quiet"):
        click.secho(f"📄 {target}", fg="green")


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option(
    "--version-string",
    "version",
    default=__version__,
    show_default=True,
    help="Version of checkcites the page documents.",
)
@click.pass_context
def manpage(ctx: click.Context, path: str, version: str) -> None:
    """Write the checkcites man page to PATH."""
    from checkcites_build.core.services.generators.manpage import create_man_page

    try:
        target = create_man_page(Path(path), version)
    except PackagingError as e:
        _fail(e)

    if not ctx.obj.get("quiet"):
        click.secho(f"📄 {target}", fg="green")


@cli.command()
@click.option(
    "--output",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory (default: from packaging.yml).",
)
@click.option("--skip-checks", is_flag=True, help="Don't probe required commands.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def package(
    ctx: click.Context,
    output_dir: str | None,
    skip_checks: bool,
    as_json: bool,
) -> None:
    """Check required tools and write all distribution files."""
    from checkcites_build.core.use_cases.package import run_package

    result = run_package(
        config_path=ctx.obj.get("config_path"),
        output_dir=Path(output_dir) if output_dir else None,
        skip_checks=skip_checks,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    if ctx.obj.get("quiet"):
        return

    summary = result.to_dict()
    click.secho(
        f"\n📦 {summary['name']} {summary['version']}",
        fg="cyan",
        bold=True,
    )
    for name in result.checked:
        click.secho(f"   ✓ {name}", fg="green")
    for path in result.files:
        click.echo(f"   📄 {path}")
    click.echo()


if __name__ == "__main__":
    cli()
