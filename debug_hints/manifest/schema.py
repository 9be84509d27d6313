"""
Schéma du manifest de layout JSON — format standardisé pour décrire l'arbre d'une page.
LayoutManifest → parse_layout() → Layout → render_layout() → HTML

Exemple minimal :
{
  "handle": "cms_page_view",
  "containers": [{"name": "root"}, {"name": "main", "parent": "root"}],
  "blocks": [
    {"name": "content", "parent": "main", "template": "content.html"}
  ]
}
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class ManifestContainer(BaseModel):
    """Conteneur déclaré (aucune instance de bloc)."""
    name: str = Field(..., min_length=1)
    parent: Optional[str] = None


class ManifestBlock(BaseModel):
    """Bloc matérialisé du layout."""
    name: str = Field(..., min_length=1)
    parent: Optional[str] = None
    block_type: str = "block"
    template: Optional[str] = None


class LayoutManifest(BaseModel):
    handle: str = "default"
    containers: List[ManifestContainer] = Field(default_factory=list)
    blocks: List[ManifestBlock] = Field(default_factory=list)
