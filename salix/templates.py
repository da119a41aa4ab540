"""Page shell rendering for Salix.

This module uses Jinja2 to wrap HTML fragments in the site's fixed page
shell and to render the blog index listing.

Key class:
- TemplateEngine: Renders the shell and the blog index from bundled templates.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .config import DEFAULT_CONFIG

if TYPE_CHECKING:
    from .blog import BlogPost

# Path to the bundled templates
_TEMPLATES_DIR = Path(__file__).parent / "templates"

SHELL_TEMPLATE = "shell.html.jinja"
BLOG_INDEX_TEMPLATE = "blog_index.html.jinja"
BLOG_INDEX_TITLE = "Blog"


class TemplateEngine:
    """Template rendering engine using Jinja2.

    Rendering is a pure function of its inputs and the configuration the
    engine was created with: no I/O beyond loading the bundled templates.

    Attributes:
        config: Site configuration values used by the shell.
        env: Jinja2 environment.
    """

    def __init__(self, config: dict[str, Any] | None = None):
        """Initialize the template engine.

        Args:
            config: Optional site configuration; defaults are used for
                missing keys.
        """
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        self.env = Environment(
            loader=FileSystemLoader(_TEMPLATES_DIR),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            enable_async=False,
        )
        self._install_globals()

    def _install_globals(self) -> None:
        """Install shell-wide values in the Jinja environment."""
        self.env.globals["site_name"] = self.config["site_name"]
        self.env.globals["stylesheet"] = self.config["stylesheet"]
        self.env.globals["font_url"] = self.config["font_url"]

    def render_page(self, content: str, title: str) -> str:
        """Wrap an HTML fragment in the page shell.

        Args:
            content: HTML fragment, inserted verbatim.
            title: Page title, shown before the site name.

        Returns:
            Complete HTML document.
        """
        template = self.env.get_template(SHELL_TEMPLATE)
        return template.render(page_content=Markup(content), title=title)

    def render_blog_index(self, posts: Iterable[BlogPost]) -> str:
        """Render the blog listing as a complete HTML document.

        Posts are listed in the order given; callers sort them first.

        Args:
            posts: Blog post records to list.

        Returns:
            Complete HTML document titled "Blog".
        """
        template = self.env.get_template(BLOG_INDEX_TEMPLATE)
        listing = template.render(posts=list(posts))
        return self.render_page(listing, BLOG_INDEX_TITLE)


default_engine = TemplateEngine()


def render_page(content: str, title: str) -> str:
    """Wrap a fragment in the page shell using the default configuration."""
    return default_engine.render_page(content, title)
