"""
Layout del Header de Sega Genesis / Mega Drive

Los cartuchos de Mega Drive guardan su cabecera en las direcciones
0x0100 - 0x01FF de la ROM. gen-info lee los primeros 0x200 bytes de la
imagen y trabaja siempre con offsets absolutos dentro de ese buffer.

Mapa de la cabecera:
- 0x0100 - 0x010F: Nombre del sistema ("SEGA MEGA DRIVE ", "SEGA GENESIS    ")
- 0x0110 - 0x011F: Copyright y fecha ("(C)SEGA 1991.APR")
- 0x0120 - 0x014F: Nombre doméstico (Japón)
- 0x0150 - 0x017F: Nombre internacional
- 0x0180 - 0x0181: Tipo ("GM" = juego, "Al" = educativo)
- 0x0183 - 0x018D: Código de producto y versión
- 0x018E - 0x018F: Checksum
- 0x0190 - 0x019F: Periféricos soportados (un carácter por periférico)
- 0x01A0 - 0x01AF: Rango de ROM y rango de RAM (32 bits big-endian)
- 0x01B0 - 0x01BB: Información de SRAM ("RA", flags, 0x20, inicio, fin)
- 0x01BC - 0x01C7: Información de módem ("MO", firma, versión)
- 0x01C8 - 0x01EF: Memo (texto libre)
- 0x01F0 - 0x01FF: Códigos de región

Los campos no se solapan y todos los enteros son big-endian.

Fuente: Sega Genesis Software Manual - ROM Header
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Tamaño del buffer que se lee de cada ROM (0x000 - 0x1FF)
HEADER_SIZE = 0x200

# Ancho de columna de las etiquetas en la salida ("%-20s")
LABEL_WIDTH = 20


class Rule(Enum):
    """Regla de decodificación de un campo del header."""

    TEXT = "text"
    TYPE = "type"
    CHECKSUM = "checksum"
    CONTROLLERS = "controllers"
    ADDRESS = "address"
    SRAM = "sram"
    MODEM = "modem"
    COUNTRIES = "countries"


@dataclass(frozen=True)
class FieldSpec:
    """
    Entrada de la tabla de layout.

    Attributes:
        name: Nombre interno del campo (clave estable para tests y código)
        label: Etiqueta que se imprime en la salida
        offset: Offset absoluto dentro del buffer de 0x200 bytes
        width: Número de bytes que ocupa el campo
        rule: Regla que convierte esos bytes en texto
    """

    name: str
    label: str
    offset: int
    width: int
    rule: Rule

    @property
    def end(self) -> int:
        return self.offset + self.width

    def slice(self, buffer: bytes) -> bytes:
        """Devuelve los bytes crudos del campo."""
        return bytes(buffer[self.offset : self.end])


# Tabla de campos en el orden exacto de salida.
# SRAM y MODEM son bloques: su decodificador puede emitir una nota o varios campos.
HEADER_LAYOUT: tuple[FieldSpec, ...] = (
    FieldSpec("system", "system", 0x100, 0x10, Rule.TEXT),
    FieldSpec("copyright", "copyright", 0x110, 0x10, Rule.TEXT),
    FieldSpec("domestic_name", "name (domestic)", 0x120, 0x30, Rule.TEXT),
    FieldSpec("overseas_name", "name (overseas)", 0x150, 0x30, Rule.TEXT),
    FieldSpec("type", "type", 0x180, 0x02, Rule.TYPE),
    FieldSpec("product_code", "product code", 0x183, 0x0B, Rule.TEXT),
    # El checksum real es la palabra de 16 bits en 0x18E; se lee como BE32 >> 16
    FieldSpec("checksum", "checksum", 0x18E, 0x02, Rule.CHECKSUM),
    FieldSpec("controller_flags", "controller flags", 0x190, 0x10, Rule.CONTROLLERS),
    FieldSpec("rom_start", "rom start address", 0x1A0, 0x04, Rule.ADDRESS),
    FieldSpec("rom_end", "rom end address", 0x1A4, 0x04, Rule.ADDRESS),
    FieldSpec("ram_start", "ram start address", 0x1A8, 0x04, Rule.ADDRESS),
    FieldSpec("ram_end", "ram end address", 0x1AC, 0x04, Rule.ADDRESS),
    FieldSpec("sram_flags", "sram flags", 0x1B0, 0x04, Rule.SRAM),
    FieldSpec("sram_start", "sram start address", 0x1B4, 0x04, Rule.ADDRESS),
    FieldSpec("sram_end", "sram end address", 0x1B8, 0x04, Rule.ADDRESS),
    FieldSpec("modem", "modem", 0x1BC, 0x0C, Rule.MODEM),
    FieldSpec("memo", "memo(?)", 0x1C8, 0x28, Rule.TEXT),
    FieldSpec("countries", "countries", 0x1F0, 0x10, Rule.COUNTRIES),
)

# Acceso por nombre
FIELDS: dict[str, FieldSpec] = {spec.name: spec for spec in HEADER_LAYOUT}

# Sub-campos del bloque de módem (solo se emiten si la firma "MO" está presente)
MODEM_FIRM = FieldSpec("modem_firm", "modem firm", 0x1BE, 0x04, Rule.TEXT)
MODEM_VERSION = FieldSpec("modem_version", "modem version", 0x1C2, 0x04, Rule.TEXT)


def read_be32(buffer: bytes, offset: int) -> int:
    """
    Lee un entero de 32 bits big-endian (el byte más significativo primero).

    Args:
        buffer: Buffer del header
        offset: Offset del primer byte

    Returns:
        Valor sin signo (0x00000000 a 0xFFFFFFFF)
    """
    return int.from_bytes(buffer[offset : offset + 4], "big")
