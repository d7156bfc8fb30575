import pytest

from metaphone_utils.encoder.name_buffer import NameBuffer


def test_narrow_uppercases_and_drops():
    assert NameBuffer.from_narrow(b"o'brien-smith").text == "OBRIENSMITH"
    assert NameBuffer.from_narrow(b"a--b").text == "AB"
    assert NameBuffer.from_narrow(b"van Dyke").text == "VAN DYKE"


def test_narrow_accented_letters():
    assert NameBuffer.from_narrow(b"\xe7a\xf1").text == "ÇAÑ"
    assert NameBuffer.from_narrow(b"\xc7\xd1").text == "ÇÑ"
    # other latin-1 letters are not part of the alphabet
    assert NameBuffer.from_narrow(b"caf\xe9").text == "CAF"


def test_wide_filters_then_normalizes():
    assert NameBuffer.from_wide("Ångström").text == "NGSTRM"
    assert NameBuffer.from_wide("Muñoz").text == "MUÑOZ"
    assert NameBuffer.from_wide("çelik").text == "ÇELIK"
    assert NameBuffer.from_wide("李 Li").text == " LI"


def test_from_name_dispatch():
    assert NameBuffer.from_name("smith").text == "SMITH"
    assert NameBuffer.from_name(b"smith").text == "SMITH"
    assert NameBuffer.from_name(bytearray(b"smith")).text == "SMITH"
    with pytest.raises(TypeError):
        NameBuffer.from_name(None)


def test_bounds():
    buf = NameBuffer("ABC")
    assert buf.first == 0
    assert buf.last == 2
    assert len(buf) == 3
    assert NameBuffer("").last == -1


def test_peek_and_window_use_sentinel():
    buf = NameBuffer("ABC")
    assert buf.peek(0) == "A"
    assert buf.peek(-1) == "_"
    assert buf.peek(3) == "_"
    assert buf.peek(50) == "_"
    assert buf.window(0, 3) == "ABC"
    assert buf.window(1, 4) == "BC__"
    assert buf.window(-2, 3) == "__A"
    assert NameBuffer("").window(0, 2) == "__"


def test_immutable():
    buf = NameBuffer("ABC")
    with pytest.raises(AttributeError):
        buf._text = "XYZ"
