"""Compacted subasset longname codec (base 68, digits 1..67)."""

from counterparty_unpack.errors import AssetIdError

SUBASSET_DIGITS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.-_@!"
SUBASSET_BASE = len(SUBASSET_DIGITS) + 1


def expand_subasset_longname(raw: bytes) -> str:
    """Expand compacted bytes into the subasset longname.

    Raises:
        AssetIdError: If a base-68 digit is zero, which no character maps to.

    """
    value = int.from_bytes(raw, "big")
    chars = []
    while value:
        value, digit = divmod(value, SUBASSET_BASE)
        if digit == 0:
            raise AssetIdError("Invalid compacted subasset name; zero digit")
        chars.append(SUBASSET_DIGITS[digit - 1])
    return "".join(reversed(chars))


def compact_subasset_longname(longname: str) -> bytes:
    """Compact a subasset longname into its big-endian integer bytes."""
    value = 0
    for char in longname:
        digit = SUBASSET_DIGITS.find(char)
        if digit < 0:
            raise AssetIdError(f"Invalid character in subasset name: {char!r}")
        value = value * SUBASSET_BASE + digit + 1
    return value.to_bytes((value.bit_length() + 7) // 8, "big")
