"""
Módulo de Entrada/Salida (I/O)

- source: lectura del header desde archivo o stdin, un SourceReport por fuente
- formatter: salida "etiqueta: valor" con la columna de etiquetas a 20 caracteres
"""

from .formatter import format_field, write_report
from .source import HeaderBuffer, SourceReport, iter_reports, read_header, read_header_file

__all__ = [
    "HeaderBuffer",
    "SourceReport",
    "format_field",
    "iter_reports",
    "read_header",
    "read_header_file",
    "write_report",
]
