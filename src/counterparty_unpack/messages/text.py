"""Text field helpers shared by the decoders."""

from counterparty_unpack.errors import DecodeError

PIPE = "|"


def decode_utf8(raw: bytes, field: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Invalid UTF-8 in {field}: {exc.reason}") from exc


def decode_trailing_text(raw: bytes, field: str) -> str:
    """Decode a text tail that may or may not be a Pascal string.

    The Pascal reading (one length byte, then that many bytes) is accepted
    only when the declared length accounts for every remaining byte; anything
    else is treated as raw UTF-8.
    """
    if not raw:
        return ""
    if raw[0] != len(raw) - 1:
        return decode_utf8(raw, field)
    try:
        return raw[1:].decode("utf-8")
    except UnicodeDecodeError:
        return decode_utf8(raw, field)


def memo_fields(raw: bytes) -> tuple[str | None, str | None]:
    """Return (text, hex) for an optional memo tail.

    Text is None when the memo is absent or is not valid UTF-8; hex is None
    only when the memo is absent.
    """
    if not raw:
        return None, None
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        text = None
    return text, raw.hex()


def split_pipe_fields(payload: bytes, field_count: int, free_text_last: bool = False) -> list[str]:
    """Split a pipe-delimited payload into exactly field_count fields.

    Args:
        payload (bytes): UTF-8 encoded payload.
        field_count (int): Number of fields the message declares.
        free_text_last (bool): If True, the final field is free text and any
            extra fragments are joined back into it with '|'.

    Raises:
        DecodeError: If the payload is empty, not UTF-8, or has the wrong
            number of fields.

    """
    if not payload:
        raise DecodeError("Empty payload")
    parts = decode_utf8(payload, "pipe-delimited payload").split(PIPE)
    if len(parts) < field_count:
        raise DecodeError(
            f"Invalid field count; expected {field_count} but got {len(parts)}"
        )
    if len(parts) > field_count:
        if not free_text_last:
            raise DecodeError(
                f"Invalid field count; expected {field_count} but got {len(parts)}"
            )
        parts = parts[: field_count - 1] + [PIPE.join(parts[field_count - 1 :])]
    return parts


def parse_int_field(text: str, field: str, allow_empty: bool = False) -> int:
    """Parse a non-negative decimal integer field."""
    if text == "" and allow_empty:
        return 0
    if not text.isascii() or not text.isdigit():
        raise DecodeError(f"Invalid integer for {field}: {text!r}")
    return int(text)


def parse_bool_field(text: str, field: str) -> bool:
    if text == "1":
        return True
    if text == "0":
        return False
    raise DecodeError(f"Invalid boolean for {field}: {text!r}")
