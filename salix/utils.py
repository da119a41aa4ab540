"""Utility functions for Salix.

This module contains small helpers shared by the page and blog builders:
source discovery, output naming, and file writing.

Key functions:
    is_markdown: Check if a path is a Markdown file.
    iter_markdown_files: List Markdown files directly inside a directory.
    html_name: Map a Markdown filename to its HTML output filename.
    write_html: Write a rendered document to disk.
"""

from __future__ import annotations

from pathlib import Path


def is_markdown(path: Path) -> bool:
    """Check if a path is a Markdown file.

    Args:
        path: Path to check.

    Returns:
        True if the file has a lowercase .md extension.
    """
    return path.suffix == ".md"


def iter_markdown_files(directory: Path) -> list[Path]:
    """List the Markdown files directly inside a directory.

    Subdirectories and files with other extensions are skipped. The result
    is sorted by filename so every build sees the same order.

    Args:
        directory: Directory to scan (not recursive).

    Returns:
        Sorted list of Markdown file paths.

    Raises:
        FileNotFoundError: If the directory does not exist.
    """
    if not directory.is_dir():
        raise FileNotFoundError(f"Expected content directory at {directory}")
    return sorted(
        path for path in directory.iterdir() if path.is_file() and is_markdown(path)
    )


def html_name(path: Path) -> str:
    """Return the output filename for a Markdown source.

    Examples:
        >>> html_name(Path("content/pages/about.md"))
        'about.html'
    """
    return f"{path.stem}.html"


def write_html(target: Path, html: str) -> None:
    """Write a rendered HTML document, replacing any existing file."""
    with open(target, "w", encoding="utf-8") as f:
        f.write(html)
