"""
API publique des hints de debug : branchement du décorateur + rendu d'un layout.
"""
import logging
from typing import Any, Mapping, Optional

from .config import HintSettings
from .layout import Layout
from .path_resolver import LayoutRegistry
from .renderer.base import TemplateRenderer
from .renderer.hints import HintRenderer

log = logging.getLogger(__name__)


def install_hints(
    renderer: TemplateRenderer,
    settings: HintSettings,
    layout: Optional[LayoutRegistry] = None,
) -> TemplateRenderer:
    """
    Enveloppe `renderer` dans un HintRenderer si les hints sont activés.

    Returns:
        HintRenderer si settings.enabled, sinon le renderer d'origine
    """
    if not settings.enabled:
        log.debug("Hints de debug désactivés — renderer %s inchangé", type(renderer).__name__)
        return renderer
    log.info(
        "Hints de debug activés sur %s (blocs : %s)",
        type(renderer).__name__, "oui" if settings.show_block_hints else "non",
    )
    return HintRenderer(renderer, settings.show_block_hints, layout=layout)


def render_layout(
    layout: Layout,
    renderer: TemplateRenderer,
    dictionary: Optional[Mapping[str, Any]] = None,
) -> str:
    """Rend chaque bloc matérialisé ayant un template, dans l'ordre de déclaration."""
    parts = [
        renderer.render(block, block.template, dictionary)
        for block in layout.blocks()
        if block.template
    ]
    return "\n".join(parts)
