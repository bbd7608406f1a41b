"""
Tests para el HeaderDecoder

Validan:
- Orden y número fijo de campos
- Campos de texto crudos (sin recortar)
- Tipo, checksum y direcciones
- Bloques opcionales de SRAM y módem
- Buffer todo a cero y buffers demasiado cortos
"""

import pytest

from geninfo.errors import TruncatedInputError
from geninfo.header import HeaderDecoder
from geninfo.header.flags import CartridgeType, SramLayout
from tests.helpers_header import blank_header, put, put_be32, sonic_header


def _values(buffer) -> dict:
    return {field.name: field.value for field in HeaderDecoder().decode(buffer)}


BASE_ORDER = [
    "system",
    "copyright",
    "domestic_name",
    "overseas_name",
    "type",
    "product_code",
    "checksum",
    "controller_flags",
    "rom_start",
    "rom_end",
    "ram_start",
    "ram_end",
    "sram_flags",
    "sram_start",
    "sram_end",
]


class TestHeaderDecoder:
    """Tests de decode()"""

    def test_field_order_without_modem(self) -> None:
        """Test: sin módem hay 18 campos en el orden fijo"""
        fields = HeaderDecoder().decode(sonic_header())
        names = [field.name for field in fields]
        assert names == BASE_ORDER + ["modem", "memo", "countries"]

    def test_field_order_with_modem(self) -> None:
        """Test: con firma "MO" el campo modem se sustituye por firm + version"""
        buf = put(sonic_header(), 0x1BC, b"MOSEGA1.00")
        names = [field.name for field in HeaderDecoder().decode(buf)]
        assert names == BASE_ORDER + ["modem_firm", "modem_version", "memo", "countries"]

    def test_labels(self) -> None:
        """Test: etiquetas de salida compatibles con gen-info"""
        labels = [field.label for field in HeaderDecoder().decode(sonic_header())]
        assert labels[:8] == [
            "system",
            "copyright",
            "name (domestic)",
            "name (overseas)",
            "type",
            "product code",
            "checksum",
            "controller flags",
        ]
        assert "memo(?)" in labels
        assert labels[-1] == "countries"

    def test_text_fields_are_raw(self) -> None:
        """Test: los campos de texto se devuelven byte a byte, sin recortar"""
        values = _values(sonic_header())
        assert values["system"] == b"SEGA MEGA DRIVE "
        assert values["copyright"] == b"(C)SEGA 1991.APR"
        assert values["domestic_name"] == b"SONIC THE               HEDGEHOG                "
        assert len(values["overseas_name"]) == 0x30
        assert values["product_code"] == b"00001009-00"
        assert values["memo"] == b" " * 40

    @pytest.mark.parametrize(
        "code, expected",
        [
            (b"GM", b"game"),
            (b"Al", b"education"),
            (b"XY", b"unknown (XY)"),
            (b"gm", b"unknown (gm)"),
        ],
    )
    def test_type(self, code: bytes, expected: bytes) -> None:
        """Test: "GM" -> game, "Al" -> education, resto -> unknown (XY)"""
        buf = put(sonic_header(), 0x180, code)
        assert _values(buf)["type"] == expected

    def test_checksum_high_word(self) -> None:
        """Test: 00 01 23 45 en 0x18E -> BE32 0x00012345 >> 16 = 0x1"""
        buf = put(blank_header(), 0x18E, b"\x00\x01\x23\x45")
        assert _values(buf)["checksum"] == b"0x1 (1)"

    def test_checksum_format(self) -> None:
        """Test: checksum en hex minúscula y decimal"""
        assert _values(sonic_header())["checksum"] == b"0x264a (9802)"

    def test_addresses(self) -> None:
        """Test: direcciones BE32 en hex minúscula sin ceros a la izquierda"""
        values = _values(sonic_header())
        assert values["rom_start"] == b"0x0"
        assert values["rom_end"] == b"0x7ffff"
        assert values["ram_start"] == b"0xff0000"
        assert values["ram_end"] == b"0xffffff"

    def test_controller_and_countries(self) -> None:
        values = _values(sonic_header())
        assert values["controller_flags"] == b"joypad "
        assert values["countries"] == b"japan usa europe "

    def test_sram_present(self) -> None:
        """Test: "RA", 0xA0, 0x20 -> even_and_odd_adr"""
        buf = put(sonic_header(), 0x1B0, b"RA\xa0\x20")
        put_be32(buf, 0x1B4, 0x200001)
        put_be32(buf, 0x1B8, 0x203FFF)
        values = _values(buf)
        assert values["sram_flags"] == b"even_and_odd_adr"
        assert values["sram_start"] == b"0x200001"
        assert values["sram_end"] == b"0x203fff"

    @pytest.mark.parametrize(
        "flags, expected",
        [
            (0xA0, b"even_and_odd_adr"),
            (0xA8, b"reserved"),
            (0xB0, b"even_adr_only"),
            (0xB8, b"odd_adr_only"),
            (0xF8, b"odd_adr_only"),
            (0x20, b"even_and_odd_adr"),
        ],
    )
    def test_sram_layouts(self, flags: int, expected: bytes) -> None:
        """Test: bits 3-4 del byte 0x1B2 seleccionan el layout"""
        buf = put(blank_header(), 0x1B0, b"RA" + bytes((flags, 0x20)))
        assert _values(buf)["sram_flags"] == expected

    @pytest.mark.parametrize(
        "block",
        [
            b"XX\xa0\x20",  # firma incorrecta
            b"RA\x18\x20",  # sin bits de presencia (0xA0)
            b"RA\xa0\x00",  # tercer byte distinto de 0x20
        ],
    )
    def test_sram_absent(self, block: bytes) -> None:
        """Test: cabecera de SRAM incorrecta -> nota, pero el rango se emite igual"""
        buf = put(blank_header(), 0x1B0, block)
        put_be32(buf, 0x1B4, 0x200000)
        values = _values(buf)
        assert values["sram_flags"] == b"no sram either incorrect info"
        assert values["sram_start"] == b"0x200000"
        assert values["sram_end"] == b"0x0"

    def test_modem_present(self) -> None:
        buf = put(blank_header(), 0x1BC, b"MOSEGA1.00")
        values = _values(buf)
        assert "modem" not in values
        assert values["modem_firm"] == b"SEGA"
        assert values["modem_version"] == b"1.00"

    def test_modem_absent(self) -> None:
        values = _values(sonic_header())
        assert values["modem"] == b"no modem either incorrect info"
        assert "modem_firm" not in values

    def test_all_zero_buffer(self) -> None:
        """Test: un buffer a cero se decodifica sin errores"""
        values = _values(blank_header())
        assert values["type"] == b"unknown (\x00\x00)"
        assert values["controller_flags"] == b""
        assert values["countries"] == b""
        assert values["sram_flags"] == b"no sram either incorrect info"
        assert values["modem"] == b"no modem either incorrect info"
        assert values["checksum"] == b"0x0 (0)"
        assert values["system"] == b"\x00" * 16

    def test_every_fill_byte_decodes(self) -> None:
        """Test: cualquier byte de relleno produce la lista completa de campos"""
        decoder = HeaderDecoder()
        for fill in range(256):
            fields = decoder.decode(blank_header(fill))
            assert len(fields) == 18
            assert all(isinstance(field.value, bytes) for field in fields)

    def test_idempotent(self) -> None:
        """Test: decodificar dos veces da exactamente la misma salida"""
        decoder = HeaderDecoder()
        buf = put(sonic_header(), 0x190, b"J6Z ")
        assert decoder.decode(buf) == decoder.decode(buf)

    def test_input_not_modified(self) -> None:
        buf = sonic_header()
        before = bytes(buf)
        HeaderDecoder().decode(buf)
        assert bytes(buf) == before

    def test_longer_buffer_uses_first_512_bytes(self) -> None:
        """Test: una ROM completa se decodifica igual que sus primeros 0x200 bytes"""
        rom = sonic_header() + bytearray(b"\xff" * 0x1000)
        assert HeaderDecoder().decode(rom) == HeaderDecoder().decode(sonic_header())

    def test_short_buffer_raises(self) -> None:
        with pytest.raises(TruncatedInputError) as excinfo:
            HeaderDecoder().decode(bytes(0x1FF))
        assert excinfo.value.bytes_read == 0x1FF


class TestRomHeader:
    """Tests de parse() (vista tipada)"""

    def test_parse_sonic(self) -> None:
        header = HeaderDecoder().parse(sonic_header())
        assert header.system_name == b"SEGA MEGA DRIVE "
        assert header.cartridge_type is CartridgeType.GAME
        assert header.checksum == 0x264A
        assert header.controller_flags == ("joypad",)
        assert header.rom_range == (0x0, 0x7FFFF)
        assert header.ram_range == (0xFF0000, 0xFFFFFF)
        assert header.sram_info is None
        assert header.modem_info is None
        assert header.countries == ("japan", "usa", "europe")

    def test_parse_sram_and_modem(self) -> None:
        buf = put(sonic_header(), 0x1B0, b"RA\xf8\x20")
        put_be32(buf, 0x1B4, 0x200001)
        put_be32(buf, 0x1B8, 0x20FFFF)
        put(buf, 0x1BC, b"MOSEGA1.00")
        header = HeaderDecoder().parse(buf)
        assert header.sram_info is not None
        assert header.sram_info.layout is SramLayout.ODD_ONLY
        assert (header.sram_info.start, header.sram_info.end) == (0x200001, 0x20FFFF)
        assert header.modem_info.firm == b"SEGA"
        assert header.modem_info.version == b"1.00"

    def test_sram_range_read_even_when_absent(self) -> None:
        buf = put_be32(blank_header(), 0x1B4, 0x12345678)
        header = HeaderDecoder().parse(buf)
        assert header.sram_info is None
        assert header.sram_range == (0x12345678, 0)

    def test_parse_unknown_type(self) -> None:
        header = HeaderDecoder().parse(blank_header())
        assert header.type_code == b"\x00\x00"
        assert header.cartridge_type is CartridgeType.UNKNOWN
