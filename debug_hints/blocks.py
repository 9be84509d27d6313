"""
Bloc de layout — nœud nommé de l'arbre de composition d'une vue.
Un bloc connaît son parent direct (référence) et/ou le layout qui l'a enregistré.
"""
from typing import Any, Optional
from pydantic import BaseModel, Field


class Block(BaseModel):
    """Bloc nommé (nom unique dans son layout)."""
    name: str
    block_type: str = "block"
    template: Optional[str] = None
    parent: Optional["Block"] = Field(default=None, repr=False)
    # Registre propriétaire : lié par Layout.add_block(), jamais sérialisé
    layout: Optional[Any] = Field(default=None, exclude=True, repr=False)


Block.model_rebuild()


def runtime_type_name(block: Any) -> str:
    """Nom qualifié de la classe du bloc ("module.Classe"), pour affichage."""
    cls = type(block)
    return f"{cls.__module__}.{cls.__qualname__}"
