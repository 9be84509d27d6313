"""
Manifest parser — LayoutManifest → Layout (registre) avec parents directs liés.
"""
import logging

from ..blocks import Block
from ..layout import Layout
from .schema import LayoutManifest

log = logging.getLogger(__name__)


def parse_layout(manifest: LayoutManifest) -> Layout:
    """
    Convertit un LayoutManifest en Layout prêt à rendre.

    1. Déclare les conteneurs puis les blocs (noms uniques)
    2. Vérifie que chaque parent référencé est déclaré (ordre libre)
    3. Lie block.parent quand le parent est un bloc matérialisé
    """
    layout = Layout(handle=manifest.handle)

    for container in manifest.containers:
        layout.add_container(container.name, parent=container.parent)

    for cfg in manifest.blocks:
        block = Block(name=cfg.name, block_type=cfg.block_type, template=cfg.template)
        layout.add_block(block, parent=cfg.parent)

    for name in layout.names():
        parent = layout.parent_name_of(name)
        if parent is not None and parent not in layout:
            raise ValueError(f"Parent inconnu pour {name!r} : {parent!r}")

    for block in layout.blocks():
        parent_block = layout.block_by_name(layout.parent_name_of(block.name) or "")
        if parent_block is not None:
            block.parent = parent_block

    log.debug("Layout %s : %d noms, %d blocs", layout.handle, len(layout), len(list(layout.blocks())))
    return layout
