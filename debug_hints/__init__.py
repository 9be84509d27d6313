"""
Debug Hints — décorateur de rendu qui annote chaque fragment HTML avec son template et son bloc.

Usage (décorateur direct):
    >>> from debug_hints import HintRenderer, TemplateFileRenderer, Block
    >>> renderer = HintRenderer(TemplateFileRenderer("templates"), show_block_hints=True)
    >>> html = renderer.render(Block(name="content"), "content.html", {"title": "Accueil"})

Usage (manifest + configuration):
    >>> from debug_hints import HintSettings, LayoutManifest, parse_layout, install_hints, render_layout
    >>> layout = parse_layout(LayoutManifest(**data))
    >>> settings = HintSettings.from_env()
    >>> renderer = install_hints(TemplateFileRenderer(settings.template_dir), settings, layout=layout)
    >>> html = render_layout(layout, renderer)
"""
from .blocks import Block, runtime_type_name
from .layout import Layout
from .path_resolver import LayoutRegistry, SEPARATOR, direct_path, registry_path, resolve_path
from .markup import build_template_hint, build_block_hint, wrap
from .renderer import TemplateRenderer, HintRenderer, TemplateFileRenderer, resolve_placeholders
from .config import HintSettings
from .builder import install_hints, render_layout
from .manifest import LayoutManifest, ManifestContainer, ManifestBlock, parse_layout

__version__ = "0.1.0"

__all__ = [
    "Block", "runtime_type_name",
    "Layout",
    "LayoutRegistry", "SEPARATOR", "direct_path", "registry_path", "resolve_path",
    "build_template_hint", "build_block_hint", "wrap",
    "TemplateRenderer", "HintRenderer", "TemplateFileRenderer", "resolve_placeholders",
    "HintSettings",
    "install_hints", "render_layout",
    "LayoutManifest", "ManifestContainer", "ManifestBlock", "parse_layout",
]
