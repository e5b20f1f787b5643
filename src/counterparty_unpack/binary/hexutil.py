"""Hex and bytes-like conversions used at the package boundary."""

from counterparty_unpack.errors import DecodeError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def hex_to_bytes(text: str) -> bytes:
    """Convert a hex string, optionally prefixed with '0x', to bytes.

    Raises:
        DecodeError: If the string has odd length or contains non-hex characters.

    """
    if text.startswith(("0x", "0X")):
        text = text[2:]
    if len(text) % 2:
        raise DecodeError(f"Invalid hex string; odd length {len(text)}")
    if not _HEX_DIGITS.issuperset(text):
        raise DecodeError("Invalid hex string; contains non-hex characters")
    return bytes.fromhex(text)


def bytes_to_hex(data: bytes) -> str:
    return bytes(data).hex()


def ensure_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    """Normalize caller input to an immutable bytes object.

    Strings are treated as hex.
    """
    if isinstance(data, str):
        return hex_to_bytes(data)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise DecodeError(
        f"Invalid payload type; expected bytes or hex str but got {type(data).__name__}"
    )
