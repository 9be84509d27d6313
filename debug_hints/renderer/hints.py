"""
Décorateur HintRenderer — insère les hints de debug autour du HTML rendu d'un bloc.

    >>> renderer = HintRenderer(TemplateFileRenderer("templates"), show_block_hints=True)
    >>> html = renderer.render(block, "page.html", {"title": "Accueil"})

Transparent aux erreurs : toute exception du renderer délégué remonte telle quelle.
"""
from typing import Any, Mapping, Optional

from ..blocks import runtime_type_name
from ..markup import build_block_hint, build_template_hint, wrap
from ..path_resolver import LayoutRegistry, resolve_path
from .base import TemplateRenderer


class HintRenderer:
    """TemplateRenderer qui enveloppe un autre TemplateRenderer (composition)."""

    def __init__(
        self,
        subject: TemplateRenderer,
        show_block_hints: bool,
        layout: Optional[LayoutRegistry] = None,
    ):
        """
        Args:
            subject: Renderer délégué
            show_block_hints: Inclure la classe + le chemin du bloc dans les hints
            layout: Registre de layout (sinon block.layout, sinon block.parent)
        """
        self._subject = subject
        self._show_block_hints = bool(show_block_hints)
        self._layout = layout

    @property
    def show_block_hints(self) -> bool:
        return self._show_block_hints

    def render(
        self,
        block: Any,
        template_file: str,
        dictionary: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Rend via le délégué puis enveloppe le HTML avec les hints."""
        original = self._subject.render(block, template_file, dictionary)
        block_hint = self.render_block_hint(block) if self._show_block_hints else ""
        template_hint = self.render_template_hint(template_file)
        return wrap(template_hint, block_hint, original)

    def render_template_hint(self, template_file: str) -> str:
        return build_template_hint(template_file)

    def render_block_hint(self, block: Any) -> str:
        return build_block_hint(runtime_type_name(block), resolve_path(block, self._layout))
