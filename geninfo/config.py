"""
Configuración de gen-info

gen-info no acepta flags (cualquier argumento es una ruta), así que la
configuración se lee de variables de entorno:
- GENINFO_LOG_LEVEL: nivel de logging (DEBUG, INFO, WARNING, ERROR). Por defecto ERROR.
- GENINFO_STRICT: "1" para fallar si una fuente tiene menos de 0x200 bytes
  en lugar de rellenar con ceros.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_LOG_LEVEL = logging.ERROR


@dataclass(frozen=True)
class Settings:
    log_level: int = DEFAULT_LOG_LEVEL
    strict: bool = False


def _parse_level(name: str | None) -> int:
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    # getLevelName devuelve "Level X" (str) para nombres desconocidos
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Lee la configuración del entorno (os.environ si no se indica otro)."""
    env = os.environ if environ is None else environ
    return Settings(
        log_level=_parse_level(env.get("GENINFO_LOG_LEVEL")),
        strict=env.get("GENINFO_STRICT") == "1",
    )
