"""Markdown conversion for Salix.

This module turns Markdown source into HTML fragments using mistune with
GitHub-flavored extensions (tables, fenced code, strikethrough, autolinks),
single-newline line breaks, and automatic heading anchors.

Key classes:
- MarkdownRenderer: Converts Markdown text to an HTML fragment.

Raw HTML embedded in the source is passed through untouched; content is
trusted.
"""

from __future__ import annotations

import re
from pathlib import Path

import mistune
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

_TAG_RE = re.compile(r"<[^>]+>")

PLUGINS = ["strikethrough", "table", "url"]


def _generate_heading_id(text: str) -> str:
    """Generate a URL-friendly ID from heading text.

    Inline markup is dropped before the text is lowercased, stripped of
    punctuation, and joined with hyphens.

    Args:
        text: The rendered heading text.

    Returns:
        Slug suitable for anchor links.
    """
    slug = _TAG_RE.sub("", text).lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[-\s]+", "-", slug)
    return slug.strip("-")


class _AnchorRenderer(mistune.HTMLRenderer):
    """HTML renderer that adds ids to headings and optionally highlights code.

    Attributes:
        highlight: Whether fenced code with a language gets Pygments markup.
    """

    def __init__(self, highlight: bool = False):
        super().__init__(escape=False)
        self.highlight = highlight
        self._heading_id_counts: dict[str, int] = {}

    def heading(self, text: str, level: int, **attrs) -> str:
        """Render a heading with an auto-generated, document-unique id."""
        base_id = _generate_heading_id(text)

        if base_id in self._heading_id_counts:
            self._heading_id_counts[base_id] += 1
            heading_id = f"{base_id}-{self._heading_id_counts[base_id]}"
        else:
            self._heading_id_counts[base_id] = 0
            heading_id = base_id

        return f'<h{level} id="{heading_id}">{text}</h{level}>\n'

    def block_code(self, code: str, info: str | None = None) -> str:
        """Render a code block, through Pygments when highlighting is on.

        Args:
            code: The code content.
            info: Language identifier from the fence (e.g. 'python').

        Returns:
            HTML string for the block.
        """
        lang = info.split(None, 1)[0] if info and info.strip() else None
        if self.highlight and lang:
            try:
                lexer = get_lexer_by_name(lang, stripall=True)
            except ClassNotFound:
                lexer = None
            if lexer is not None:
                formatter = HtmlFormatter(nowrap=False, cssclass="highlight")
                return highlight(code, lexer, formatter)
        return super().block_code(code, info)


class MarkdownRenderer:
    """Renders Markdown content to HTML fragments.

    A fresh mistune parser is built per call so heading ids never leak
    between documents.
    """

    def __init__(self, highlight: bool = False):
        self.highlight = highlight

    def convert(self, content: str) -> str:
        """Render Markdown content to an HTML fragment.

        Args:
            content: Markdown source content.

        Returns:
            Rendered HTML.
        """
        renderer = _AnchorRenderer(highlight=self.highlight)
        markdown = mistune.create_markdown(
            renderer=renderer, hard_wrap=True, plugins=PLUGINS
        )
        return markdown(content)

    def convert_file(self, path: Path) -> str:
        """Read a UTF-8 Markdown file and render it.

        Undecodable bytes become U+FFFD rather than failing the build.

        Raises:
            OSError: If the file cannot be read.
        """
        return self.convert(path.read_text(encoding="utf-8", errors="replace"))


default_renderer = MarkdownRenderer()


def convert_markdown(content: str) -> str:
    """Convert Markdown text to an HTML fragment with default settings."""
    return default_renderer.convert(content)


def convert_markdown_file(path: Path) -> str:
    """Convert a Markdown file to an HTML fragment with default settings."""
    return default_renderer.convert_file(path)
