import codecs

import pytest

from termcell.encoding import (
    EncodingFallback,
    get_encoding,
    register_encoding,
    set_encoding_fallback,
)


@pytest.fixture(autouse=True)
def restore_fallback():
    yield
    set_encoding_fallback(EncodingFallback.FAIL)


def test_register_gbk_and_decode():
    register_encoding("GBK", "gbk")
    enc = get_encoding("GBK")
    assert enc.decode(bytes([0x82, 0x74]))[0] == "\u5000"


def test_builtin_encodings():
    assert get_encoding("UTF-8").name == "utf-8"
    assert get_encoding("utf8").name == "utf-8"
    assert get_encoding("US-ASCII").name == "ascii"
    assert get_encoding("ISO646").name == "ascii"


def test_lookup_is_case_insensitive():
    register_encoding("KOI8-R", codecs.lookup("koi8-r"))
    assert get_encoding("koi8-r").name == get_encoding("KOI8-R").name == "koi8-r"


def test_unknown_charset_fails_by_default():
    assert get_encoding("no-such-charset") is None


def test_ascii_fallback():
    set_encoding_fallback(EncodingFallback.ASCII)
    assert get_encoding("no-such-charset").name == "ascii"


def test_utf8_fallback():
    set_encoding_fallback(EncodingFallback.UTF8)
    enc = get_encoding("no-such-charset")
    assert enc.decode("\u00e9".encode("utf-8"))[0] == "\u00e9"


def test_register_unknown_codec_raises():
    with pytest.raises(LookupError):
        register_encoding("bogus", "definitely-not-a-codec")