"""
HeaderDecoder - Decodificación del Header de Mega Drive

Recibe un buffer con los primeros 0x200 bytes de una ROM y produce la lista
ordenada de campos (etiqueta, valor) que gen-info imprime. El decodificador
es puro: no hace I/O, no modifica el buffer y decodificar dos veces el mismo
buffer produce exactamente la misma salida.

Todos los campos tienen una rama por defecto, así que un header corrupto o
que no es de Mega Drive produce texto sin sentido pero bien formado, nunca
un error.

Los valores se devuelven como bytes: los campos de texto del header se
emiten byte a byte, sin recortar espacios ni validar ninguna codificación.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple

from ..errors import TruncatedInputError
from .flags import (
    NO_MODEM_NOTE,
    MODEM_SIGNATURE,
    CartridgeType,
    SramLayout,
    controller_tags,
    country_tags,
    decode_controller_flags,
    decode_countries,
    decode_sram_flags,
    decode_type,
    sram_layout,
)
from .layout import (
    FIELDS,
    HEADER_LAYOUT,
    HEADER_SIZE,
    MODEM_FIRM,
    MODEM_VERSION,
    FieldSpec,
    Rule,
    read_be32,
)

logger = logging.getLogger(__name__)


class HeaderField(NamedTuple):
    """Un campo decodificado: nombre interno, etiqueta de salida y valor crudo."""

    name: str
    label: str
    value: bytes


@dataclass(frozen=True)
class SramInfo:
    layout: SramLayout
    start: int
    end: int


@dataclass(frozen=True)
class ModemInfo:
    firm: bytes
    version: bytes


@dataclass(frozen=True)
class RomHeader:
    """
    Vista tipada de la cabecera.

    Se construye a partir de un buffer y no se modifica después. Los campos
    de texto conservan el relleno original (espacios, ceros).
    """

    system_name: bytes
    copyright: bytes
    domestic_name: bytes
    overseas_name: bytes
    type_code: bytes
    product_code: bytes
    checksum: int
    controller_flags: tuple[str, ...]
    rom_range: tuple[int, int]
    ram_range: tuple[int, int]
    sram_info: SramInfo | None
    sram_range: tuple[int, int]
    modem_info: ModemInfo | None
    memo: bytes
    countries: tuple[str, ...]

    @property
    def cartridge_type(self) -> CartridgeType:
        return CartridgeType.from_code(self.type_code)


def _format_address(value: int) -> bytes:
    return f"0x{value:x}".encode("ascii")


class HeaderDecoder:
    """
    Decodificador dirigido por la tabla HEADER_LAYOUT.

    Cada entrada de la tabla indica una regla (Rule); el decodificador
    despacha a un método por regla y cada método devuelve uno o varios
    HeaderField. Los bloques opcionales (SRAM, módem) devuelven una nota
    cuando no están presentes.
    """

    def __init__(self) -> None:
        self._rules: dict[Rule, Callable[[FieldSpec, bytes], list[HeaderField]]] = {
            Rule.TEXT: self._decode_text,
            Rule.TYPE: self._decode_type,
            Rule.CHECKSUM: self._decode_checksum,
            Rule.CONTROLLERS: self._decode_controllers,
            Rule.ADDRESS: self._decode_address,
            Rule.SRAM: self._decode_sram,
            Rule.MODEM: self._decode_modem,
            Rule.COUNTRIES: self._decode_countries,
        }

    def decode(self, buffer: bytes) -> list[HeaderField]:
        """
        Decodifica el header completo.

        Args:
            buffer: Al menos 0x200 bytes (primeros bytes de la ROM)

        Returns:
            Lista de HeaderField en el orden fijo de salida

        Raises:
            TruncatedInputError: Si el buffer tiene menos de 0x200 bytes
        """
        data = _check_buffer(buffer)
        fields: list[HeaderField] = []
        for spec in HEADER_LAYOUT:
            fields.extend(self._rules[spec.rule](spec, data))
        logger.debug(f"Header decodificado: {len(fields)} campos")
        return fields

    def parse(self, buffer: bytes) -> RomHeader:
        """Construye la vista tipada RomHeader del mismo buffer."""
        data = _check_buffer(buffer)
        layout = sram_layout(FIELDS["sram_flags"].slice(data))
        sram_range = _range(data, "sram_start", "sram_end")
        modem_info = None
        if FIELDS["modem"].slice(data)[0:2] == MODEM_SIGNATURE:
            modem_info = ModemInfo(MODEM_FIRM.slice(data), MODEM_VERSION.slice(data))

        return RomHeader(
            system_name=FIELDS["system"].slice(data),
            copyright=FIELDS["copyright"].slice(data),
            domestic_name=FIELDS["domestic_name"].slice(data),
            overseas_name=FIELDS["overseas_name"].slice(data),
            type_code=FIELDS["type"].slice(data),
            product_code=FIELDS["product_code"].slice(data),
            checksum=_checksum(data),
            controller_flags=tuple(controller_tags(FIELDS["controller_flags"].slice(data))),
            rom_range=_range(data, "rom_start", "rom_end"),
            ram_range=_range(data, "ram_start", "ram_end"),
            sram_info=SramInfo(layout, *sram_range) if layout is not None else None,
            sram_range=sram_range,
            modem_info=modem_info,
            memo=FIELDS["memo"].slice(data),
            countries=tuple(country_tags(FIELDS["countries"].slice(data))),
        )

    # --- Reglas ---

    @staticmethod
    def _field(spec: FieldSpec, value: bytes) -> list[HeaderField]:
        return [HeaderField(spec.name, spec.label, value)]

    def _decode_text(self, spec: FieldSpec, data: bytes) -> list[HeaderField]:
        return self._field(spec, spec.slice(data))

    def _decode_type(self, spec: FieldSpec, data: bytes) -> list[HeaderField]:
        return self._field(spec, decode_type(spec.slice(data)))

    def _decode_checksum(self, spec: FieldSpec, data: bytes) -> list[HeaderField]:
        checksum = _checksum(data, spec.offset)
        return self._field(spec, f"0x{checksum:x} ({checksum})".encode("ascii"))

    def _decode_controllers(self, spec: FieldSpec, data: bytes) -> list[HeaderField]:
        return self._field(spec, decode_controller_flags(spec.slice(data)))

    def _decode_address(self, spec: FieldSpec, data: bytes) -> list[HeaderField]:
        return self._field(spec, _format_address(read_be32(data, spec.offset)))

    def _decode_sram(self, spec: FieldSpec, data: bytes) -> list[HeaderField]:
        # El rango de SRAM (0x1B4 / 0x1B8) se emite siempre como campos ADDRESS propios
        return self._field(spec, decode_sram_flags(spec.slice(data)))

    def _decode_modem(self, spec: FieldSpec, data: bytes) -> list[HeaderField]:
        if spec.slice(data)[0:2] != MODEM_SIGNATURE:
            return self._field(spec, NO_MODEM_NOTE)
        return [
            HeaderField(MODEM_FIRM.name, MODEM_FIRM.label, MODEM_FIRM.slice(data)),
            HeaderField(MODEM_VERSION.name, MODEM_VERSION.label, MODEM_VERSION.slice(data)),
        ]

    def _decode_countries(self, spec: FieldSpec, data: bytes) -> list[HeaderField]:
        return self._field(spec, decode_countries(spec.slice(data)))


def _check_buffer(buffer: bytes) -> bytes:
    if len(buffer) < HEADER_SIZE:
        raise TruncatedInputError(len(buffer), HEADER_SIZE)
    return bytes(buffer[:HEADER_SIZE])


def _checksum(data: bytes, offset: int = FIELDS["checksum"].offset) -> int:
    # Palabra alta del BE32 en 0x18E
    return (read_be32(data, offset) >> 16) & 0xFFFF


def _range(data: bytes, start: str, end: str) -> tuple[int, int]:
    return read_be32(data, FIELDS[start].offset), read_be32(data, FIELDS[end].offset)
