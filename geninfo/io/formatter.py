"""
Formato de salida

Cada campo se imprime como "<etiqueta con ancho 20>: <valor>\n" y cada
fuente termina con una línea en blanco. Los valores se escriben como bytes
crudos: el header puede contener caracteres no imprimibles y se muestran tal cual.
"""

from __future__ import annotations

from typing import BinaryIO, Iterable

from ..header import HeaderField
from ..header.layout import LABEL_WIDTH


def format_field(label: str, value: bytes) -> bytes:
    """Etiquetas más largas que LABEL_WIDTH no se recortan."""
    return f"{label:<{LABEL_WIDTH}}: ".encode("utf-8") + value + b"\n"


def write_report(stream: BinaryIO, fields: Iterable[HeaderField]) -> None:
    for field in fields:
        stream.write(format_field(field.label, field.value))
    stream.write(b"\n")
