"""
Paramètres des hints de debug — lus depuis l'environnement.

  DEBUG_HINTS_ENABLED       active le décorateur (défaut : désactivé)
  DEBUG_HINTS_SHOW_BLOCKS   inclut classe + chemin du bloc (défaut : oui)
  DEBUG_HINTS_TEMPLATE_DIR  répertoire des templates du renderer de fichiers
"""
import os
from pydantic import BaseModel, ConfigDict

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


class HintSettings(BaseModel):
    """Configuration immuable du décorateur."""
    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    show_block_hints: bool = True
    template_dir: str = "templates"

    @classmethod
    def from_env(cls) -> "HintSettings":
        return cls(
            enabled=_env_flag("DEBUG_HINTS_ENABLED", False),
            show_block_hints=_env_flag("DEBUG_HINTS_SHOW_BLOCKS", True),
            template_dir=os.getenv("DEBUG_HINTS_TEMPLATE_DIR", "templates"),
        )
