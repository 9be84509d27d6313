"""
Renderer de fichiers template — lit {template_dir}/{template_file} et résout les placeholders.

Placeholders {title}, {city}, etc. → résolus via le dictionnaire de variables
Placeholders sans correspondance → laissés intacts
{block_name} → nom du bloc rendu (surchargeable par le dictionnaire)
"""
import re
from pathlib import Path
from typing import Any, Mapping, Optional

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def resolve_placeholders(text: str, context: Optional[Mapping[str, Any]] = None) -> str:
    """Remplace les placeholders par les valeurs du contexte."""
    if not context or not text:
        return text

    def replacer(match):
        placeholder = match.group(1)
        return str(context.get(placeholder, match.group(0)))

    return _PLACEHOLDER.sub(replacer, text)


class TemplateFileRenderer:
    """Renderer délégué minimal, à base de fichiers UTF-8."""

    def __init__(self, template_dir: str | Path):
        self.template_dir = Path(template_dir)

    def template_path(self, template_file: str) -> Path:
        """Chemin absolu du template ; refuse toute sortie de template_dir."""
        root = self.template_dir.resolve()
        path = (root / template_file).resolve()
        if not path.is_relative_to(root):
            raise ValueError(f"Template hors du répertoire {root} : {template_file!r}")
        return path

    def render(
        self,
        block: Any,
        template_file: str,
        dictionary: Optional[Mapping[str, Any]] = None,
    ) -> str:
        # FileNotFoundError si le template est absent, remonte à l'appelant
        text = self.template_path(template_file).read_text(encoding="utf-8")
        context = {"block_name": getattr(block, "name", "")}
        context.update(dictionary or {})
        return resolve_placeholders(text, context)
