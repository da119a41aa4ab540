"""Command-line interface for Salix.

This module defines the CLI using the Click framework. Running ``salix`` with
no arguments builds the site in the current working directory; ``salix build``
does the same explicitly.

Commands:
- build: Build the site into the output directory.
"""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="salix")
@click.pass_context
def cli(ctx: click.Context):
    """Salix static site generator."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(build)


@cli.command()
def build():
    """Build the site into the output directory."""
    project_root = Path.cwd()
    from .build import BuildError, build_site

    try:
        result = build_site(project_root)
    except BuildError as exc:
        click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
        click.echo(
            click.style(f"  File: {_display_path(exc.source_path, project_root)}", fg="yellow"),
            err=True,
        )
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
        raise SystemExit(1) from None
    click.echo(
        f"Build complete! {len(result.pages)} pages and {len(result.posts)} posts "
        f"written to {result.output_dir}"
    )


def _display_path(path: Path, project_root: Path) -> Path:
    """Return the path relative to the project root when it lies inside it."""
    try:
        return path.relative_to(project_root)
    except ValueError:
        return path


def main():
    """Entry point for the CLI application."""
    cli()
