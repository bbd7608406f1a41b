"""
Lectura del Header desde archivo o stdin

Cada fuente (una ruta o la entrada estándar) produce un SourceReport con los
campos decodificados o con el error que impidió leerla. Los errores nunca
salen del bucle: quien llama decide cómo mostrarlos y qué código de salida usar.

Si la fuente tiene menos de 0x200 bytes:
- Modo por defecto: se rellena con ceros hasta 0x200 y se registra un warning
- Modo estricto: TruncatedInputError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Iterator

from ..errors import GenInfoError, SourceUnavailableError, TruncatedInputError
from ..header import HEADER_SIZE, HeaderDecoder, HeaderField

logger = logging.getLogger(__name__)

STDIN_NAME = "<stdin>"


@dataclass(frozen=True)
class HeaderBuffer:
    """Buffer de 0x200 bytes y cuántos de ellos vinieron realmente de la fuente."""

    data: bytes
    bytes_read: int

    @property
    def complete(self) -> bool:
        return self.bytes_read >= HEADER_SIZE


@dataclass(frozen=True)
class SourceReport:
    """Resultado de procesar una fuente: campos decodificados o error."""

    source: str
    fields: list[HeaderField] | None = None
    error: GenInfoError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def read_header(stream: BinaryIO, strict: bool = False) -> HeaderBuffer:
    """
    Lee hasta 0x200 bytes de un stream binario, tolerando EOF.

    Un pipe puede devolver menos bytes de los pedidos sin estar en EOF, así
    que se repite read() hasta completar el header o recibir b"".

    Args:
        stream: Stream binario abierto (archivo o sys.stdin.buffer)
        strict: Si es True, una lectura corta lanza TruncatedInputError

    Returns:
        HeaderBuffer con exactamente 0x200 bytes en data
    """
    chunks = bytearray()
    while len(chunks) < HEADER_SIZE:
        chunk = stream.read(HEADER_SIZE - len(chunks))
        if not chunk:
            break
        chunks += chunk

    bytes_read = len(chunks)
    if bytes_read < HEADER_SIZE:
        if strict:
            raise TruncatedInputError(bytes_read, HEADER_SIZE)
        logger.warning(
            f"Header incompleto: {bytes_read} de {HEADER_SIZE} bytes, "
            f"se rellena con ceros"
        )
        chunks += bytes(HEADER_SIZE - bytes_read)

    return HeaderBuffer(bytes(chunks), bytes_read)


def read_header_file(path: str | Path, strict: bool = False) -> HeaderBuffer:
    """
    Abre una ROM en modo binario y lee su header.

    Raises:
        SourceUnavailableError: Si el archivo no se puede abrir
        TruncatedInputError: En modo estricto, si el archivo es demasiado pequeño
    """
    try:
        with open(path, "rb") as f:
            return read_header(f, strict=strict)
    except OSError as e:
        raise SourceUnavailableError(str(path), e.strerror or str(e)) from e


def _report(
    source: str, read: Callable[[], HeaderBuffer], decoder: HeaderDecoder
) -> SourceReport:
    try:
        header = read()
    except GenInfoError as e:
        logger.warning(f"{source}: {e}")
        return SourceReport(source, error=e)
    logger.debug(f"{source}: {header.bytes_read} bytes leídos")
    return SourceReport(source, fields=decoder.decode(header.data))


def iter_reports(
    paths: Iterable[str],
    stdin: BinaryIO,
    strict: bool = False,
    decoder: HeaderDecoder | None = None,
) -> Iterator[SourceReport]:
    """
    Procesa las fuentes en orden, una a una.

    Sin rutas se lee exactamente un header de stdin. Cada SourceReport se
    entrega antes de abrir la siguiente fuente.
    """
    decoder = decoder or HeaderDecoder()
    paths = list(paths)
    if not paths:
        yield _report(STDIN_NAME, lambda: read_header(stdin, strict=strict), decoder)
        return

    for path in paths:
        yield _report(path, lambda: read_header_file(path, strict=strict), decoder)
