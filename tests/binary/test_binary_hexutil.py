import pytest

from counterparty_unpack.binary import bytes_to_hex, ensure_bytes, hex_to_bytes
from counterparty_unpack.errors import DecodeError


class TestHexConversions:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", b""),
            ("00ff", b"\x00\xff"),
            ("0x00FF", b"\x00\xff"),
            ("434e545250525459", b"CNTRPRTY"),
        ],
    )
    def test_hex_to_bytes(self, text, expected):
        assert hex_to_bytes(text) == expected

    @pytest.mark.parametrize("text", ["abc", "zz", "0x0g", "12 34"])
    def test_hex_to_bytes_rejects_malformed(self, text):
        with pytest.raises(DecodeError):
            hex_to_bytes(text)

    def test_bytes_to_hex_is_lowercase(self):
        assert bytes_to_hex(b"\xab\xcd") == "abcd"


class TestEnsureBytes:
    @pytest.mark.parametrize(
        "value",
        [b"\x01\x02", bytearray(b"\x01\x02"), memoryview(b"\x01\x02"), "0102"],
    )
    def test_accepts_bytes_like_and_hex(self, value):
        assert ensure_bytes(value) == b"\x01\x02"

    @pytest.mark.parametrize("value", [None, 12, ["01"]])
    def test_rejects_other_types(self, value):
        with pytest.raises(DecodeError, match="Invalid payload type"):
            ensure_bytes(value)
