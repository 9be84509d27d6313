"""Renderers — protocol, décorateur de hints, renderer de fichiers."""
from .base import TemplateRenderer
from .hints import HintRenderer
from .template_file import TemplateFileRenderer, resolve_placeholders

__all__ = [
    "TemplateRenderer",
    "HintRenderer",
    "TemplateFileRenderer",
    "resolve_placeholders",
]
