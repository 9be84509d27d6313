"""
Router FastAPI — prévisualisation des hints de debug.

POST /debug-hints/render    → layout + dictionnaire → HTMLResponse (layout entier ou un bloc)
POST /debug-hints/validate  → LayoutManifest → {"valid": bool, "error"?}
POST /debug-hints/path      → layout + nom de bloc → {"block", "path"}
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field, ValidationError

from .builder import install_hints, render_layout
from .config import HintSettings
from .layout import Layout
from .manifest import LayoutManifest, parse_layout
from .path_resolver import resolve_path
from .renderer.template_file import TemplateFileRenderer

log = logging.getLogger(__name__)

router = APIRouter(prefix="/debug-hints", tags=["debug_hints"])


class RenderRequest(BaseModel):
    layout: LayoutManifest
    dictionary: Dict[str, Any] = Field(default_factory=dict)
    block: Optional[str] = None


class PathRequest(BaseModel):
    layout: LayoutManifest
    block: str


def get_settings() -> HintSettings:
    return HintSettings.from_env()


def _parse_or_422(manifest: LayoutManifest) -> Layout:
    try:
        return parse_layout(manifest)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/render", response_class=HTMLResponse, summary="Rend un layout avec hints")
def render(req: RenderRequest, settings: HintSettings = Depends(get_settings)) -> HTMLResponse:
    layout = _parse_or_422(req.layout)
    renderer = install_hints(TemplateFileRenderer(settings.template_dir), settings, layout=layout)

    try:
        if req.block is None:
            html = render_layout(layout, renderer, req.dictionary)
        else:
            block = layout.block_by_name(req.block)
            if block is None or not block.template:
                raise HTTPException(status_code=404, detail=f"Bloc sans template : {req.block!r}")
            html = renderer.render(block, block.template, req.dictionary)
    except FileNotFoundError as e:
        log.warning("Template introuvable : %s", e)
        raise HTTPException(status_code=404, detail="Template introuvable")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return HTMLResponse(content=html)


@router.post("/validate", summary="Valide un manifest de layout")
def validate(manifest: LayoutManifest) -> dict:
    """Valide la structure d'un manifest (noms uniques, parents déclarés)."""
    try:
        parse_layout(manifest)
        return {"valid": True}
    except (ValidationError, ValueError) as e:
        return {"valid": False, "error": str(e)}


@router.post("/path", summary="Chemin d'ancêtres d'un bloc")
def path(req: PathRequest) -> dict:
    layout = _parse_or_422(req.layout)
    block = layout.block_by_name(req.block)
    if block is None:
        raise HTTPException(status_code=404, detail=f"Bloc inconnu : {req.block!r}")
    return {"block": block.name, "path": resolve_path(block)}
