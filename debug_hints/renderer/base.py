"""
Protocol TemplateRenderer — interface pluggable des moteurs de rendu de templates.
"""
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class TemplateRenderer(Protocol):
    def render(
        self,
        block: Any,
        template_file: str,
        dictionary: Optional[Mapping[str, Any]] = None,
    ) -> str: ...
