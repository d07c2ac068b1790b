import pytest

from ztoolkit.mini import Ini, Variant

SAMPLE = """
; comment
# another comment
[general]
name = demo
port=8080
flag

[ net ]
host = 127.0.0.1
"""


def test_parse_sections_and_values():
    ini = Ini()
    ini.parse(SAMPLE)
    assert ini["general.name"] == "demo"
    assert ini["general.port"] == "8080"
    assert ini["general.flag"] == ""
    assert ini["net.host"] == "127.0.0.1"
    assert len(ini) == 4


def test_parse_crlf_lines():
    ini = Ini()
    ini.parse("[a]\r\nk = v\r\n")
    assert dict(ini) == {"a.k": "v"}


def test_values_are_variants():
    ini = Ini()
    ini["s.n"] = 42
    assert isinstance(ini["s.n"], Variant)
    assert ini["s.n"].to(int) == 42


def test_dump_format():
    ini = Ini()
    ini.parse("[general]\nname=demo\n")
    out = ini.dump()
    assert out.startswith("; auto-generated by mINI class {\r\n")
    assert "\r\n[general]\r\nname=demo\r\n" in out
    assert out.endswith("\r\n; } ---\r\n")


def test_dump_without_header_footer():
    ini = Ini()
    ini["a.x"] = "1"
    assert ini.dump("", "") == "\r\n[a]\r\nx=1\r\n\r\n"


def test_dump_parse_round_trip():
    ini = Ini()
    ini.parse(SAMPLE)
    again = Ini()
    again.parse(ini.dump())
    assert again == ini


def test_file_round_trip(tmp_path):
    path = tmp_path / "conf.ini"
    ini = Ini()
    ini.parse(SAMPLE)
    ini.dump_file(str(path))
    loaded = Ini()
    loaded.parse_file(str(path))
    assert loaded == ini


def test_parse_missing_file(tmp_path):
    with pytest.raises(ValueError, match="invalid ini file"):
        Ini().parse_file(str(tmp_path / "absent.ini"))


def test_variant_conversions():
    assert Variant("123abc").to(int) == 123
    assert Variant("  2.5 rest").to(float) == 2.5
    assert Variant("hello world").to(str) == "hello"
    assert Variant("1").to(bool) is True
    assert Variant("0").to(bool) is False
    assert Variant("yes").to(bool) is False
    assert Variant("abc").to(int) == 0


def test_variant_from_values():
    assert Variant(True) == "1"
    assert Variant(3.14) == "3.140000"
    assert Variant(7) == 7
    assert Variant("7") == "7"


def test_instance_is_shared():
    first = Ini.instance()
    first["shared.key"] = "value"
    try:
        second = Ini.instance()
        assert second["shared.key"] == "value"
    finally:
        del first["shared.key"]