"""
Errores de gen-info

Todos los errores son locales a una fuente de entrada: el bucle principal
los captura en el SourceReport correspondiente y continúa con la siguiente.
Ningún campo del header puede fallar al decodificarse.
"""

from __future__ import annotations


class GenInfoError(Exception):
    """Error base de gen-info."""


class SourceUnavailableError(GenInfoError):
    """
    La ruta indicada no se pudo abrir para lectura.

    Args:
        path: Ruta tal y como la pasó el usuario
        reason: Texto del error del sistema operativo (strerror)
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"couldn't open {path} for reading: {reason}")


class TruncatedInputError(GenInfoError):
    """La fuente terminó (EOF) antes de entregar un header completo."""

    def __init__(self, bytes_read: int, expected: int = 0x200) -> None:
        self.bytes_read = bytes_read
        self.expected = expected
        super().__init__(
            f"header incompleto: {bytes_read} bytes leídos "
            f"(mínimo esperado: {expected} bytes)"
        )
