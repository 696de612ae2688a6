import io
import re

import pytest

from uscriptkit.hexdump import (
    HexdumpOptions,
    format_hexdump,
    hexdump,
    hexdump_flags,
    options_from_flags,
)

ANSI = re.compile(r"\033\[[0-9;]*m")


def test_single_partial_line_layout():
    text = format_hexdump(b"AB", 4)
    assert text == "00000000 | " + "41 42 " + " " * 6 + " | AB\n"


def test_empty_data_gives_no_output():
    assert format_hexdump(b"") == ""


def test_line_count_and_equal_hex_width():
    data = bytes(range(40))
    lines = format_hexdump(data, 16, HexdumpOptions(show_ascii=False)).splitlines()
    assert len(lines) == 3
    assert len({len(line) for line in lines}) == 1


def test_hex_section_round_trips():
    data = bytes(range(256))
    opts = HexdumpOptions(show_ascii=False, show_offset=False)
    text = format_hexdump(data, 16, opts)
    assert bytes.fromhex(text.replace("\n", "")) == data


def test_offsets_hex_and_decimal():
    data = bytes(48)
    hex_lines = format_hexdump(data, 16).splitlines()
    dec_lines = format_hexdump(data, 16, HexdumpOptions(decimal_offset=True)).splitlines()
    assert [int(line.split(" | ")[0], 16) for line in hex_lines] == [0, 16, 32]
    assert [int(line.split(" | ")[0], 10) for line in dec_lines] == [0, 16, 32]
    assert hex_lines[1].startswith("00000010")


def test_non_printable_bytes_shown_as_dots():
    data = b"\x00a\x7f\x1b"
    line = format_hexdump(data, 4).rstrip("\n")
    assert line.endswith(" | .a..")


def test_no_spaces_option():
    opts = HexdumpOptions(show_spaces=False, show_ascii=False, show_offset=False)
    assert format_hexdump(b"\x01\xab", 2, opts) == "01AB\n"


def test_colors_strip_to_plain():
    data = b"hello world, hexdump"
    colored = format_hexdump(data, 8, colors=True)
    assert "\033[91m" in colored
    assert ANSI.sub("", colored) == format_hexdump(data, 8)


def test_invalid_bytes_per_line():
    with pytest.raises(ValueError):
        format_hexdump(b"abc", 0)


def test_options_from_flags_overrides_only_given():
    assert options_from_flags("sAod") == HexdumpOptions(
        show_spaces=False, show_ascii=True, show_offset=False, decimal_offset=False
    )
    assert options_from_flags("D") == HexdumpOptions(decimal_offset=True)
    assert options_from_flags("") == HexdumpOptions()


def test_options_from_invalid_flags():
    with pytest.raises(ValueError, match="Invalid flag string"):
        options_from_flags("sS")


def test_hexdump_writes_to_file():
    out = io.StringIO()
    returned = hexdump(b"xyz", 8, colors=False, file=out)
    assert out.getvalue() == returned == format_hexdump(b"xyz", 8)


def test_hexdump_flags_writes_to_file():
    out = io.StringIO()
    hexdump_flags(b"\x10\x20", 2, "ao", colors=False, file=out)
    assert out.getvalue() == "10 20 \n"


def test_hexdump_flags_invalid_raises_and_writes_nothing():
    out = io.StringIO()
    with pytest.raises(ValueError):
        hexdump_flags(b"data", 4, "aA", colors=False, file=out)
    assert out.getvalue() == ""