import sys
from unittest import mock

import pytest

from termcell.charset import get_charset


@mock.patch.object(sys, "platform", "linux")
@pytest.mark.parametrize("locale", ["C", "POSIX"])
def test_portable_locales_are_ascii(locale):
    assert get_charset({"LANG": locale}) == "US-ASCII"


@mock.patch.object(sys, "platform", "linux")
def test_locale_without_codeset_is_utf8():
    assert get_charset({"LANG": "en_US"}) == "UTF-8"
    assert get_charset({}) == "UTF-8"


@mock.patch.object(sys, "platform", "linux")
def test_codeset_is_extracted():
    assert get_charset({"LANG": "en_US.ISO8859-15"}) == "ISO8859-15"
    assert get_charset({"LANG": "de_DE.ISO8859-1@euro"}) == "ISO8859-1"


@mock.patch.object(sys, "platform", "linux")
def test_precedence_of_variables():
    environ = {"LC_ALL": "ru_RU.KOI8-R", "LC_CTYPE": "C", "LANG": "ja_JP.EUC-JP"}
    assert get_charset(environ) == "KOI8-R"
    environ["LC_ALL"] = ""
    assert get_charset(environ) == "US-ASCII"
    del environ["LC_CTYPE"]
    assert get_charset(environ) == "EUC-JP"


@mock.patch.object(sys, "platform", "win32")
def test_windows_is_utf16():
    assert get_charset({"LANG": "C"}) == "UTF-16"


@mock.patch.object(sys, "platform", "linux")
def test_reads_process_environment():
    with mock.patch.dict("os.environ", {"LC_ALL": "C"}, clear=True):
        assert get_charset() == "US-ASCII"