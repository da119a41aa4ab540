from pathlib import Path

import pytest

from salix.content import Page, build_pages, page_title
from salix.errors import BuildError
from salix.templates import TemplateEngine


def create_pages(tmp_path: Path) -> Path:
    pages = tmp_path / "content" / "pages"
    pages.mkdir(parents=True)
    (pages / "about.md").write_text("# About Us\n\nWho we are.", encoding="utf-8")
    (pages / "contact-us.md").write_text("Write to us.", encoding="utf-8")
    (pages / "notes.txt").write_text("ignore", encoding="utf-8")
    (pages / "nested").mkdir()
    (pages / "nested" / "deep.md").write_text("# Deep", encoding="utf-8")
    return pages


def test_build_pages_writes_one_document_per_source(tmp_path):
    pages_dir = create_pages(tmp_path)
    output = tmp_path / "dist"
    output.mkdir()

    pages = build_pages(pages_dir, output, TemplateEngine())

    assert [p.title for p in pages] == ["about", "contact-us"]
    assert all(isinstance(p, Page) for p in pages)
    assert sorted(p.name for p in output.iterdir()) == ["about.html", "contact-us.html"]

    about = (output / "about.html").read_text(encoding="utf-8")
    assert "<title>about - Salix Ventures</title>" in about
    assert '<h1 id="about-us">About Us</h1>' in about
    assert pages[0].output_path == output / "about.html"
    assert pages[0].path == pages_dir / "about.md"

    contact = (output / "contact-us.html").read_text(encoding="utf-8")
    assert "<title>contact-us - Salix Ventures</title>" in contact


def test_build_pages_overwrites_existing_output(tmp_path):
    pages_dir = create_pages(tmp_path)
    output = tmp_path / "dist"
    output.mkdir()
    (output / "about.html").write_text("stale", encoding="utf-8")

    build_pages(pages_dir, output, TemplateEngine())
    assert "stale" not in (output / "about.html").read_text(encoding="utf-8")


def test_page_title_keeps_separators():
    assert page_title(Path("about.md")) == "about"
    assert page_title(Path("team_and-board.md")) == "team_and-board"


def test_build_pages_missing_directory(tmp_path):
    missing = tmp_path / "content" / "pages"
    with pytest.raises(BuildError) as exc_info:
        build_pages(missing, tmp_path, TemplateEngine())
    assert exc_info.value.source_path == missing
    assert isinstance(exc_info.value.original_error, FileNotFoundError)


def test_build_pages_unwritable_output_aborts(tmp_path):
    pages_dir = create_pages(tmp_path)
    missing_output = tmp_path / "nowhere"

    with pytest.raises(BuildError) as exc_info:
        build_pages(pages_dir, missing_output, TemplateEngine())
    # the first source in enumeration order is the one reported
    assert exc_info.value.source_path == pages_dir / "about.md"
