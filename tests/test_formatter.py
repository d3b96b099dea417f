import io

import pytest

from dxfdraw.formatter import AsciiFormatter, DxfFormattable, Formatter


class _Marker(DxfFormattable):
    def __init__(self, name):
        self.name = name

    def format(self, formatter):
        formatter.write_string(0, self.name)
        formatter.write_int(70, 3)


def test_string_pair_wire_form():
    f = AsciiFormatter()
    assert f.format_string(0, "SECTION") == "0\nSECTION\n"


def test_hex_is_uppercase_and_round_trips():
    f = AsciiFormatter()
    code, value, rest = f.format_hex(5, 0xABC).split("\n")
    assert code == "5"
    assert value == "ABC"
    assert int(value, 16) == 0xABC
    assert rest == ""


def test_int_round_trips():
    f = AsciiFormatter()
    lines = f.format_int(370, -3).splitlines()
    assert lines == ["370", "-3"]


def test_float_default_precision_is_six():
    f = AsciiFormatter()
    assert f.precision == 6
    code, value = f.format_float(40, 1.0 / 3.0).splitlines()
    assert code == "40"
    assert len(value.split(".")[1]) == 6
    assert float(value) == pytest.approx(1.0 / 3.0, abs=1e-6)


def test_set_precision_changes_decimals():
    f = AsciiFormatter()
    f.set_precision(16)
    value = f.format_float(10, 100.0).splitlines()[1]
    assert len(value.split(".")[1]) == 16
    assert float(value) == 100.0


def test_negative_precision_rejected():
    with pytest.raises(ValueError):
        AsciiFormatter().set_precision(-1)


def test_output_concatenates_and_drains():
    f = AsciiFormatter()
    f.write_string(0, "LINE")
    f.write_hex(5, 31)
    f.write_int(70, 1)
    f.write_float(10, 2.5)
    expected = (
        f.format_string(0, "LINE")
        + f.format_hex(5, 31)
        + f.format_int(70, 1)
        + f.format_float(10, 2.5)
    )
    assert f.output() == expected
    assert f.output() == ""


def test_reset_discards_buffer():
    f = AsciiFormatter()
    f.write_string(0, "EOF")
    f.reset()
    assert f.output() == ""


def test_write_to_text_stream():
    f = AsciiFormatter()
    f.write_string(0, "EOF")
    stream = io.StringIO()
    count = f.write_to(stream)
    assert stream.getvalue() == f.format_string(0, "EOF")
    assert count == len(stream.getvalue().encode("utf-8"))
    assert f.output() == ""


def test_write_to_binary_stream():
    f = AsciiFormatter()
    f.write_string(1, "ÄÖ")
    stream = io.BytesIO()
    count = f.write_to(stream)
    assert stream.getvalue() == f.format_string(1, "ÄÖ").encode("utf-8")
    assert count == len(stream.getvalue())


def test_formattable_format_string_and_str():
    marker = _Marker("CLASS")
    f = AsciiFormatter()
    text = marker.format_string(f)
    assert text == f.format_string(0, "CLASS") + f.format_int(70, 3)
    assert str(marker) == text
    assert f.output() == ""


def test_formatter_is_abstract():
    with pytest.raises(TypeError):
        Formatter()