"""Manifest — schema + parser."""
from .schema import LayoutManifest, ManifestContainer, ManifestBlock
from .parser import parse_layout

__all__ = [
    "LayoutManifest",
    "ManifestContainer",
    "ManifestBlock",
    "parse_layout",
]
