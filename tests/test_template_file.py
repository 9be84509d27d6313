"""Tests renderer de fichiers — lecture, placeholders, erreurs."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from debug_hints import Block, HintRenderer, TemplateFileRenderer, resolve_placeholders


@pytest.fixture
def templates(tmp_path):
    (tmp_path / "page.html").write_text("<h1>{title}</h1><p>{block_name}</p>", encoding="utf-8")
    (tmp_path / "partials").mkdir()
    (tmp_path / "partials" / "raw.html").write_text("<i>{unknown}</i>", encoding="utf-8")
    return tmp_path


# ── resolve_placeholders ─────────────────────────────────────────────────────

def test_placeholder_simple():
    assert resolve_placeholders("Bonjour {name}", {"name": "Alice"}) == "Bonjour Alice"


def test_placeholder_missing_left_intact():
    assert resolve_placeholders("Prix : {price}", {"city": "Rennes"}) == "Prix : {price}"


def test_placeholder_no_context():
    assert resolve_placeholders("{x}", None) == "{x}"


# ── TemplateFileRenderer ─────────────────────────────────────────────────────

def test_render_file_with_variables(templates):
    html = TemplateFileRenderer(templates).render(Block(name="content"), "page.html", {"title": "Accueil"})
    assert html == "<h1>Accueil</h1><p>content</p>"


def test_render_subdirectory_unknown_placeholder(templates):
    html = TemplateFileRenderer(templates).render(Block(name="b"), "partials/raw.html")
    assert html == "<i>{unknown}</i>"


def test_dictionary_overrides_block_name(templates):
    html = TemplateFileRenderer(templates).render(Block(name="b"), "page.html", {"block_name": "x", "title": ""})
    assert html.endswith("<p>x</p>")


def test_missing_template_raises(templates):
    with pytest.raises(FileNotFoundError):
        TemplateFileRenderer(templates).render(Block(name="b"), "absent.html")


def test_path_escape_rejected(templates):
    with pytest.raises(ValueError):
        TemplateFileRenderer(templates / "partials").render(Block(name="b"), "../page.html")


def test_missing_template_propagates_through_hints(templates):
    renderer = HintRenderer(TemplateFileRenderer(templates), True)
    with pytest.raises(FileNotFoundError):
        renderer.render(Block(name="b"), "absent.html", {})
