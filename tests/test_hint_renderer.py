"""Tests HintRenderer — délégation, hints conditionnels, transparence aux erreurs."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import MagicMock, patch
import pytest

from debug_hints import Block, HintRenderer, Layout, TemplateRenderer


def make_delegate(html="<p>hi</p>"):
    d = MagicMock()
    d.render.return_value = html
    return d


# ── Délégation ───────────────────────────────────────────────────────────────

def test_is_a_template_renderer():
    assert isinstance(HintRenderer(make_delegate(), True), TemplateRenderer)


def test_delegate_called_once_with_same_arguments():
    delegate = make_delegate()
    block = Block(name="content")
    variables = {"title": "Accueil"}
    HintRenderer(delegate, True).render(block, "page.phtml", variables)
    delegate.render.assert_called_once_with(block, "page.phtml", variables)
    assert variables == {"title": "Accueil"}


def test_original_markup_kept_verbatim():
    html = HintRenderer(make_delegate("<ul><li>x</li></ul>"), False).render(Block(name="b"), "t.html")
    assert "<ul><li>x</li></ul>" in html


def test_delegate_error_propagates():
    delegate = MagicMock()
    delegate.render.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError, match="boom"):
        HintRenderer(delegate, True).render(Block(name="b"), "t.html", {})


# ── Hints ────────────────────────────────────────────────────────────────────

def test_end_to_end_root_block():
    html = HintRenderer(make_delegate("<p>hi</p>"), True).render(Block(name="content"), "page.phtml", {})
    assert "page.phtml" in html
    assert "layout-name-path : content</div>" in html
    assert "<p>hi</p>" in html


def test_block_hints_disabled_skips_block_hint():
    renderer = HintRenderer(make_delegate(), False)
    with patch("debug_hints.renderer.hints.build_block_hint") as block_hint, \
         patch("debug_hints.renderer.hints.build_template_hint", return_value="TPL") as template_hint:
        html = renderer.render(Block(name="content"), "page.phtml", {})
    block_hint.assert_not_called()
    template_hint.assert_called_once_with("page.phtml")
    assert "TPL" in html
    assert "debugging-hint-block-class" not in html


def test_block_hint_shows_type_and_nested_path():
    parent = Block(name="main")
    html = HintRenderer(make_delegate(), True).render(Block(name="content", parent=parent), "t.html")
    assert "class : debug_hints.blocks.Block" in html
    assert "layout-name-path : main / content" in html


def test_explicit_layout_marks_containers():
    layout = Layout()
    layout.add_container("root")
    layout.add_block(Block(name="content"), parent="root")
    detached = Block(name="content")
    html = HintRenderer(make_delegate(), True, layout=layout).render(detached, "t.html")
    assert "layout-name-path : [root] / content" in html


def test_show_block_hints_is_read_only():
    renderer = HintRenderer(make_delegate(), 1)
    assert renderer.show_block_hints is True
    with pytest.raises(AttributeError):
        renderer.show_block_hints = False
