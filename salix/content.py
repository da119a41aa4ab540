"""Site page building for Salix.

Every Markdown file directly inside the pages directory becomes one HTML
document in the output directory, named after the source with an ``.html``
extension and titled with the bare filename.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import BuildError, format_error_message
from .renderers import MarkdownRenderer, default_renderer
from .templates import TemplateEngine
from .utils import html_name, iter_markdown_files, write_html


@dataclass
class Page:
    """A site page produced from one Markdown source.

    Attributes:
        title: Filename without its extension.
        content: Rendered HTML fragment.
        path: Path to the source file.
        output_path: Path of the written HTML document.
    """

    title: str
    content: str
    path: Path
    output_path: Path


def page_title(path: Path) -> str:
    """Return the title of a site page: the filename without extension."""
    return path.stem


def build_pages(
    pages_dir: Path,
    output_dir: Path,
    engine: TemplateEngine,
    renderer: MarkdownRenderer | None = None,
) -> list[Page]:
    """Render every Markdown page in a directory into the output directory.

    Args:
        pages_dir: Directory holding the page sources (not recursive).
        output_dir: Directory the HTML documents are written to.
        engine: Template engine providing the page shell.
        renderer: Optional Markdown renderer; defaults to the shared one.

    Returns:
        The pages written, in enumeration order.

    Raises:
        BuildError: If the directory is missing or a file cannot be read
            or written. The build stops at the first failure.
    """
    renderer = renderer or default_renderer
    try:
        sources = iter_markdown_files(pages_dir)
    except OSError as exc:
        raise BuildError(pages_dir, format_error_message(exc), exc) from exc

    pages: list[Page] = []
    for path in sources:
        title = page_title(path)
        target = output_dir / html_name(path)
        try:
            content = renderer.convert_file(path)
            write_html(target, engine.render_page(content, title))
        except OSError as exc:
            raise BuildError(path, format_error_message(exc), exc) from exc
        pages.append(Page(title=title, content=content, path=path, output_path=target))
    return pages
