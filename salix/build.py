"""Site building functionality for Salix.

This module runs the whole build, strictly in sequence: prepare the output
directories, copy the static assets, render the site pages, render the blog
posts, and write the blog index.

Key functions:
- build_site: Main function to build the entire site.
- load_config: Loads site configuration from salix.yaml (re-exported).
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click

from .blog import BLOG_DIRNAME, BlogPost, build_blog, sort_posts, write_blog_index
from .config import load_config
from .content import Page, build_pages
from .errors import BuildError, format_error_message
from .renderers import MarkdownRenderer
from .templates import TemplateEngine

__all__ = ["BuildError", "BuildResult", "build_site", "load_config"]

CONTENT_DIRNAME = "content"
PAGES_DIRNAME = "pages"
CSS_DIRNAME = "css"
STYLESHEET = Path(CSS_DIRNAME) / "style.css"
LANDING_PAGE = Path("index.html")


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        pages: Site pages written, in enumeration order.
        posts: Blog posts written, newest first as listed in the index.
        output_dir: Directory where the site was built.
    """

    pages: list[Page]
    posts: list[BlogPost]
    output_dir: Path


def build_site(
    project_root: Path, config: dict[str, Any] | None = None
) -> BuildResult:
    """Build the entire static site.

    Args:
        project_root: Root directory of the project.
        config: Optional configuration; read from salix.yaml when omitted.

    Returns:
        BuildResult containing the pages, posts, and output directory.

    Raises:
        BuildError: On the first missing input or failed read/write.
    """
    click.echo("Starting build process...")
    if config is None:
        config = load_config(project_root)
    output_dir = project_root / config.get("output_dir", "dist")
    _prepare_output(output_dir)
    _copy_assets(project_root, output_dir)

    engine = TemplateEngine(config)
    renderer = MarkdownRenderer(highlight=config.get("highlight") is True)
    content_dir = project_root / CONTENT_DIRNAME

    click.echo("Building pages...")
    pages = build_pages(content_dir / PAGES_DIRNAME, output_dir, engine, renderer)

    click.echo("Building blog...")
    posts = build_blog(
        content_dir / BLOG_DIRNAME,
        output_dir,
        engine,
        renderer,
        summary_length=int(config.get("summary_length", 200)),
    )
    write_blog_index(posts, output_dir, engine)
    return BuildResult(pages=pages, posts=sort_posts(posts), output_dir=output_dir)


def _prepare_output(output_dir: Path) -> None:
    """Create the output directory and its blog and css folders.

    Existing output is left in place; files are overwritten as they are
    rebuilt.
    """
    for target in (output_dir, output_dir / BLOG_DIRNAME, output_dir / CSS_DIRNAME):
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise BuildError(target, format_error_message(exc), exc) from exc


def _copy_assets(project_root: Path, output_dir: Path) -> None:
    """Copy the stylesheet and landing page verbatim into the output.

    Args:
        project_root: Root directory of the project.
        output_dir: Output directory.
    """
    for rel_path in (STYLESHEET, LANDING_PAGE):
        source = project_root / rel_path
        try:
            shutil.copyfile(source, output_dir / rel_path)
        except OSError as exc:
            raise BuildError(source, format_error_message(exc), exc) from exc
