"""
Fragments HTML des hints de debug.
Interpolation telle quelle (aucun échappement) — les valeurs sont des chaînes d'affichage de confiance.
Toggle JS inline minimal — pas de dépendance externe.
"""

_BADGE_STYLE = (
    "position: absolute; top: 0; padding: 2px 5px; "
    "font: normal 11px Arial; background: red; color: white; white-space: nowrap;"
)


def build_template_hint(template_file: str) -> str:
    """Badge en haut à gauche : chemin du fichier template (title + texte)."""
    return f"""<div class="debugging-hint-template-file"
     style="{_BADGE_STYLE} left: 0;"
     onmouseover="this.style.zIndex = 999;"
     onmouseout="this.style.zIndex = 'auto';"
     title="{template_file}">
{template_file}
</div>"""


def build_block_hint(runtime_type_name: str, ancestry_path: str) -> str:
    """Badge en haut à droite : classe du bloc + chemin d'ancêtres dans le layout."""
    return f"""<div class="debugging-hint-block-class"
     style="{_BADGE_STYLE} right: 0;"
     onmouseover="this.style.zIndex = 999;"
     onmouseout="this.style.zIndex = 'auto';"
     title="{runtime_type_name}"
     layout-name-path="{ancestry_path}">
    <div>class : {runtime_type_name}</div>
    <div>layout-name-path : {ancestry_path}</div>
</div>"""


def wrap(template_hint: str, block_hint: str, original: str) -> str:
    """Conteneur pointillé : panneau de hints révélé au survol, HTML d'origine dessous."""
    return f"""<div class="debugging-hints"
     style="position: relative; border: 1px dotted red; margin: 6px 2px; padding: 18px 2px 2px 2px;"
     onmouseover="this.querySelector(':scope > .container').style.display = 'block';"
     onmouseout="this.querySelector(':scope > .container').style.display = 'none';">
<div class="container" style="display:none">
    {block_hint}
    {template_hint}
</div>
    {original}
</div>"""
