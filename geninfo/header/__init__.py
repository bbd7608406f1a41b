"""
Módulo Header - Decodificación de la cabecera de ROMs de Mega Drive

Contiene la tabla de layout (offsets y anchos), las tablas de códigos
(periféricos, regiones, SRAM) y el HeaderDecoder.
"""

from .decoder import HeaderDecoder, HeaderField, ModemInfo, RomHeader, SramInfo
from .layout import HEADER_LAYOUT, HEADER_SIZE, FieldSpec, Rule

__all__ = [
    "HEADER_LAYOUT",
    "HEADER_SIZE",
    "FieldSpec",
    "HeaderDecoder",
    "HeaderField",
    "ModemInfo",
    "RomHeader",
    "Rule",
    "SramInfo",
]
