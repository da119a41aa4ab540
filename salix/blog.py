"""Blog building for Salix.

Each Markdown file directly inside the blog directory is rendered to its own
document under ``blog/`` and summarised in a ``BlogPost`` record. The records
are returned to the caller, which passes them to ``write_blog_index`` to
produce the newest-first listing.

Key pieces:
- BlogPost: Metadata for one post (title, date, url, summary).
- build_blog: Render all posts and return their records.
- sort_posts: Newest-first ordering, stable on equal dates.
- write_blog_index: Render and write ``blog/index.html``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path

from .config import DEFAULT_CONFIG
from .errors import BuildError, format_error_message
from .renderers import MarkdownRenderer, default_renderer
from .templates import TemplateEngine
from .utils import html_name, iter_markdown_files, write_html

BLOG_ROUTE = "/blog"
BLOG_DIRNAME = "blog"
INDEX_FILENAME = "index.html"
ELLIPSIS = "..."


@dataclass
class BlogPost:
    """Metadata for one blog post, used to build the blog index.

    Attributes:
        title: Filename stem with hyphens turned into spaces.
        date: Calendar date the source file was created.
        url: Site path of the rendered post.
        summary: Leading slice of the rendered HTML plus an ellipsis.
        path: Path to the source file.
    """

    title: str
    date: date
    url: str
    summary: str
    path: Path

    @property
    def date_label(self) -> str:
        """Return the date as YYYY-MM-DD."""
        return self.date.isoformat()


def post_title(path: Path) -> str:
    """Derive a post title from its filename.

    Only hyphens are replaced; underscores and other characters are kept.

    Examples:
        >>> post_title(Path("my-first-post.md"))
        'my first post'
    """
    return path.stem.replace("-", " ")


def post_url(path: Path) -> str:
    """Return the site path of a post, e.g. ``/blog/my-first-post.html``."""
    return f"{BLOG_ROUTE}/{html_name(path)}"


def creation_date(path: Path) -> date:
    """Return the UTC calendar date a file was created.

    Uses the birth time where the platform records one and the modification
    time otherwise.
    """
    stat = path.stat()
    timestamp = getattr(stat, "st_birthtime", None)
    if timestamp is None:
        timestamp = stat.st_mtime
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date()


def summarize(html: str, length: int = 200) -> str:
    """Cut a rendered fragment down to a summary.

    The cut is by raw character count, so it can land inside a tag; the
    ellipsis is always appended.

    Examples:
        >>> len(summarize("A" * 250))
        203
    """
    return html[:length] + ELLIPSIS


def build_blog(
    blog_dir: Path,
    output_dir: Path,
    engine: TemplateEngine,
    renderer: MarkdownRenderer | None = None,
    summary_length: int = DEFAULT_CONFIG["summary_length"],
) -> list[BlogPost]:
    """Render every post in the blog directory and collect its metadata.

    Args:
        blog_dir: Directory holding the post sources (not recursive).
        output_dir: Site output directory; posts go to its ``blog/`` folder.
        engine: Template engine providing the page shell.
        renderer: Optional Markdown renderer; defaults to the shared one.
        summary_length: Number of characters kept in each summary.

    Returns:
        One record per post, in enumeration order.

    Raises:
        BuildError: If the directory is missing or a post cannot be read
            or written. The build stops at the first failure.
    """
    renderer = renderer or default_renderer
    try:
        sources = iter_markdown_files(blog_dir)
    except OSError as exc:
        raise BuildError(blog_dir, format_error_message(exc), exc) from exc

    target_dir = output_dir / BLOG_DIRNAME
    posts: list[BlogPost] = []
    for path in sources:
        try:
            content = renderer.convert_file(path)
            title = post_title(path)
            post = BlogPost(
                title=title,
                date=creation_date(path),
                url=post_url(path),
                summary=summarize(content, summary_length),
                path=path,
            )
            posts.append(post)
            write_html(target_dir / html_name(path), engine.render_page(content, title))
        except OSError as exc:
            raise BuildError(path, format_error_message(exc), exc) from exc
    return posts


def sort_posts(posts: Iterable[BlogPost]) -> list[BlogPost]:
    """Order posts newest first.

    Posts sharing a date keep their incoming (filename) order.
    """
    return sorted(posts, key=lambda p: p.date, reverse=True)


def write_blog_index(
    posts: Iterable[BlogPost], output_dir: Path, engine: TemplateEngine
) -> Path:
    """Render the blog listing and write it to ``blog/index.html``.

    Args:
        posts: Post records, in any order.
        output_dir: Site output directory.
        engine: Template engine providing the shell and listing.

    Returns:
        Path of the written index.
    """
    target = output_dir / BLOG_DIRNAME / INDEX_FILENAME
    html = engine.render_blog_index(sort_posts(posts))
    try:
        write_html(target, html)
    except OSError as exc:
        raise BuildError(target, format_error_message(exc), exc) from exc
    return target
