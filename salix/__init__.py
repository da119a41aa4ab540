"""Salix static site generator.

This package turns a directory of Markdown pages and blog posts into standalone
HTML documents wrapped in a shared page shell, plus a chronological blog index.

The main entry point is the CLI module, whose default command builds the site
found in the current working directory into ``dist/``.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
