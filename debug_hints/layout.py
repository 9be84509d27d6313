"""
Registre de layout — nom → instance de bloc, nom → nom du parent.

Un nom peut être déclaré sans instance (conteneur) : il apparaît dans la hiérarchie
mais block_by_name() renvoie None.
"""
from typing import Dict, Iterator, List, Optional

from .blocks import Block


class Layout:
    """
    Registre des blocs et conteneurs d'une page.

    Usage:
        >>> layout = Layout()
        >>> layout.add_container("root")
        >>> layout.add_block(Block(name="content"), parent="root")
        >>> layout.parent_name_of("content")
        'root'
    """

    def __init__(self, handle: str = "default"):
        self.handle = handle
        self._blocks: Dict[str, Block] = {}
        self._parents: Dict[str, Optional[str]] = {}
        self._order: List[str] = []

    def _declare(self, name: str, parent: Optional[str]) -> None:
        if name in self._parents:
            raise ValueError(f"Nom déjà déclaré dans le layout {self.handle!r} : {name!r}")
        self._parents[name] = parent
        self._order.append(name)

    def add_container(self, name: str, parent: Optional[str] = None) -> None:
        """Déclare un conteneur (nom sans instance de bloc)."""
        self._declare(name, parent)

    def add_block(self, block: Block, parent: Optional[str] = None) -> Block:
        """Enregistre un bloc et le lie à ce layout."""
        self._declare(block.name, parent)
        self._blocks[block.name] = block
        block.layout = self
        return block

    def parent_name_of(self, name: str) -> Optional[str]:
        return self._parents.get(name)

    def block_by_name(self, name: str) -> Optional[Block]:
        return self._blocks.get(name)

    def children_of(self, name: str) -> List[str]:
        return [n for n in self._order if self._parents[n] == name]

    def names(self) -> List[str]:
        return list(self._order)

    def blocks(self) -> Iterator[Block]:
        """Blocs matérialisés, dans l'ordre de déclaration."""
        for name in self._order:
            if name in self._blocks:
                yield self._blocks[name]

    def __contains__(self, name: str) -> bool:
        return name in self._parents

    def __len__(self) -> int:
        return len(self._order)
