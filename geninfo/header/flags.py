"""
Tablas de códigos del Header de Mega Drive

Algunos campos del header son listas de caracteres donde cada carácter
identifica una característica del cartucho:
- 0x0190 - 0x019F: Periféricos soportados ("J" = joypad, "6" = pad de 6 botones, ...)
- 0x01F0 - 0x01FF: Regiones de venta ("J" = Japón, "U" = USA, "E" = Europa, ...)

Cada etiqueta reconocida se emite seguida de un espacio, en el orden en que
aparece en el header y sin eliminar duplicados.

Fuente: Sega Genesis Software Manual - ROM Header, I/O Support
"""

from __future__ import annotations

from enum import Enum

# Periféricos (0x0190 - 0x019F)
CONTROLLER_FLAGS: dict[int, str] = {
    ord("0"): "sms_joypad",
    ord("4"): "team_play",
    ord("6"): "6_button_joypad",
    ord("J"): "joypad",
    ord("K"): "keyboard",
    ord("R"): "serial(rs232c)",
    ord("P"): "printer",
    ord("T"): "tablet",
    ord("B"): "control_ball",
    ord("V"): "paddle",
    ord("F"): "fdd",
    ord("C"): "cd-rom",
    ord("M"): "mega_mouse",
    ord("L"): "activator",
}

# Relleno del bloque de periféricos: no aporta nada a la salida
CONTROLLER_PADDING = frozenset((ord(" "), 0x00))

# Regiones (0x01F0 - 0x01FF). "B" y "4" son dos códigos para Brasil.
COUNTRY_CODES: dict[int, str] = {
    ord("E"): "europe",
    ord("J"): "japan",
    ord("U"): "usa",
    ord("A"): "asia",
    ord("B"): "brazil",
    ord("4"): "brazil",
    ord("F"): "france",
    ord("8"): "hong-kong",
}

# Notas que sustituyen a los bloques opcionales cuando no están presentes
NO_SRAM_NOTE = b"no sram either incorrect info"
NO_MODEM_NOTE = b"no modem either incorrect info"

# Firmas de los bloques opcionales
SRAM_SIGNATURE = b"RA"
MODEM_SIGNATURE = b"MO"

# Byte 0x01B2: bits 7 y 5 deben tener algún bit activo, bits 3-4 indican el layout
SRAM_PRESENT_MASK = 0xA0
SRAM_LAYOUT_MASK = 0x18
SRAM_LAYOUT_SHIFT = 3
# Byte 0x01B3: siempre 0x20 en una cabecera de SRAM válida
SRAM_MARKER = 0x20


class CartridgeType(Enum):
    """Tipo de software (0x0180 - 0x0181)."""

    GAME = "game"
    EDUCATION = "education"
    UNKNOWN = "unknown"

    @classmethod
    def from_code(cls, code: bytes) -> CartridgeType:
        if code == b"GM":
            return cls.GAME
        if code == b"Al":
            return cls.EDUCATION
        return cls.UNKNOWN


class SramLayout(Enum):
    """
    Organización de la SRAM en el bus de 16 bits.

    El valor 1 (0b01) no tiene significado documentado; se muestra como
    "reserved" en lugar de dejar la salida indefinida.
    """

    EVEN_AND_ODD = 0
    RESERVED = 1
    EVEN_ONLY = 2
    ODD_ONLY = 3

    @property
    def label(self) -> str:
        return _SRAM_LAYOUT_LABELS[self]


_SRAM_LAYOUT_LABELS = {
    SramLayout.EVEN_AND_ODD: "even_and_odd_adr",
    SramLayout.RESERVED: "reserved",
    SramLayout.EVEN_ONLY: "even_adr_only",
    SramLayout.ODD_ONLY: "odd_adr_only",
}


def decode_type(code: bytes) -> bytes:
    """
    Convierte los 2 bytes de tipo en texto.

    Un código desconocido se muestra entre paréntesis tal cual, byte a byte,
    aunque no sea imprimible: b"\\x00\\x00" -> b"unknown (\\x00\\x00)".
    """
    kind = CartridgeType.from_code(code)
    if kind is CartridgeType.UNKNOWN:
        return b"unknown (" + code[:2] + b")"
    return kind.value.encode("ascii")


def controller_tags(block: bytes) -> list[str]:
    """
    Devuelve las etiquetas de periféricos en orden de aparición.

    Los caracteres desconocidos se devuelven como "<c>(?)" para que el
    usuario vea que el header contiene algo que no sabemos interpretar.
    """
    tags: list[str] = []
    for byte in block:
        if byte in CONTROLLER_PADDING:
            continue
        tag = CONTROLLER_FLAGS.get(byte)
        tags.append(tag if tag is not None else f"{chr(byte)}(?)")
    return tags


def decode_controller_flags(block: bytes) -> bytes:
    """
    Renderiza el bloque de periféricos.

    Cada periférico conocido aporta "<tag> "; uno desconocido aporta " <c>(?)"
    (con el espacio delante). Ejemplo: b"JZ" -> b"joypad  Z(?)".
    """
    out = bytearray()
    for byte in block:
        if byte in CONTROLLER_PADDING:
            continue
        tag = CONTROLLER_FLAGS.get(byte)
        if tag is not None:
            out += tag.encode("ascii") + b" "
        else:
            out += b" " + bytes((byte,)) + b"(?)"
    return bytes(out)


def country_tags(block: bytes) -> list[str]:
    """Devuelve las regiones reconocidas; el resto de bytes se ignora."""
    return [COUNTRY_CODES[byte] for byte in block if byte in COUNTRY_CODES]


def decode_countries(block: bytes) -> bytes:
    return b"".join(tag.encode("ascii") + b" " for tag in country_tags(block))


def sram_layout(block: bytes) -> SramLayout | None:
    """
    Interpreta los 4 bytes de 0x01B0 ("RA", flags, 0x20).

    Returns:
        El layout de la SRAM, o None si la firma o los bits de presencia no son válidos
    """
    if (
        block[0:2] != SRAM_SIGNATURE
        or (block[2] & SRAM_PRESENT_MASK) == 0
        or block[3] != SRAM_MARKER
    ):
        return None
    return SramLayout((block[2] & SRAM_LAYOUT_MASK) >> SRAM_LAYOUT_SHIFT)


def decode_sram_flags(block: bytes) -> bytes:
    layout = sram_layout(block)
    if layout is None:
        return NO_SRAM_NOTE
    return layout.label.encode("ascii")
