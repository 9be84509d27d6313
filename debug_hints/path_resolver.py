"""
Chemin d'ancêtres d'un bloc — "grand-parent / parent / bloc".

Deux stratégies selon ce qu'expose l'hôte :
  - références directes : on remonte block.parent jusqu'à la racine
  - registre de layout  : on remonte par nom via parent_name_of() / block_by_name()

Un conteneur déclaré sans instance vivante (registre uniquement) est rendu "[nom]".
Les deux stratégies donnent la même sortie sur une chaîne entièrement matérialisée.
"""
from typing import Any, Optional, Protocol, runtime_checkable

SEPARATOR = " / "


@runtime_checkable
class LayoutRegistry(Protocol):
    def parent_name_of(self, name: str) -> Optional[str]: ...
    def block_by_name(self, name: str) -> Optional[Any]: ...


def _is_absent(parent: Any) -> bool:
    # False est la sentinelle "pas de parent" de certains hôtes
    return parent is None or parent is False


# ── Stratégie A : références directes ────────────────────────────────────────

def direct_path(block: Any) -> str:
    """Remonte block.parent ; s'arrête au premier parent absent (ou déjà vu)."""
    segments = []
    seen = set()
    current = block
    while not _is_absent(current) and id(current) not in seen:
        seen.add(id(current))
        segments.append(current.name)
        current = getattr(current, "parent", None)
    return SEPARATOR.join(reversed(segments))


# ── Stratégie B : registre de layout ─────────────────────────────────────────

def registry_path(layout: LayoutRegistry, name: str) -> str:
    """Remonte les noms parents dans le registre, en partant de `name`."""
    segments = [name]
    seen = {name}
    parent = layout.parent_name_of(name)
    while parent and parent not in seen:
        seen.add(parent)
        if layout.block_by_name(parent) is not None:
            segments.append(parent)
        else:
            segments.append(f"[{parent}]")
        parent = layout.parent_name_of(parent)
    return SEPARATOR.join(reversed(segments))


# ── Dispatch ─────────────────────────────────────────────────────────────────

def resolve_path(block: Any, layout: Optional[LayoutRegistry] = None) -> str:
    """
    Chemin d'ancêtres du bloc.
    Registre prioritaire (explicite, sinon block.layout), références directes sinon.
    """
    registry = layout if layout is not None else getattr(block, "layout", None)
    if registry is not None:
        return registry_path(registry, block.name)
    return direct_path(block)
