"""Issuance decoders.

Four layouts share one record, selected by the type id:

    - 20 ISSUANCE: '>QQ?' (17 bytes, no description) or '>QQ??If' + description.
    - 21 SUBASSET_ISSUANCE: '>QQ?B' + compacted longname + description.
    - 22 LR_ISSUANCE: '>QQ???If' + description (adds lock and reset flags).
    - 23 LR_SUBASSET: '>QQ???B' + compacted longname + description.

Descriptions after a call-price header may be Pascal strings or raw UTF-8;
descriptions after a subasset longname are always raw UTF-8.
"""

from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.errors import DecodeError
from counterparty_unpack.messages.common import (
    DEFAULT_CONTEXT,
    read_asset,
    require_min_length,
)
from counterparty_unpack.messages.records import DecodeContext, Issuance
from counterparty_unpack.messages.text import decode_trailing_text, decode_utf8
from counterparty_unpack.protocol.constants import MessageTypeId
from counterparty_unpack.protocol.subasset import expand_subasset_longname

# >QQ?
BASIC_ISSUANCE_LENGTH = 17
# >QQ??If
ISSUANCE_LENGTH = 26
# >QQ???If
LR_ISSUANCE_LENGTH = 27
# >QQ?B
SUBASSET_HEADER_LENGTH = 18
# >QQ???B
LR_SUBASSET_HEADER_LENGTH = 20


def _read_call_fields(reader: ByteReader) -> tuple[bool, int, float]:
    return reader.read_bool(), reader.read_uint32(), reader.read_float32()


def _read_longname(reader: ByteReader) -> str:
    length = reader.read_uint8()
    if length == 0:
        raise DecodeError("Subasset issuance declares an empty longname")
    return expand_subasset_longname(reader.read_bytes(length))


def _decode_issuance(payload: bytes, ctx: DecodeContext) -> Issuance:
    require_min_length(payload, BASIC_ISSUANCE_LENGTH, "issuance")
    reader = ByteReader(payload)
    asset = read_asset(reader)
    quantity = reader.read_uint64()
    divisible = reader.read_bool()

    if reader.at_end():
        return Issuance(asset=asset, quantity=quantity, divisible=divisible)

    if len(payload) < ISSUANCE_LENGTH:
        raise DecodeError(
            f"Truncated issuance; expected {BASIC_ISSUANCE_LENGTH} or at least "
            f"{ISSUANCE_LENGTH} bytes but got {len(payload)}"
        )

    callable_, call_date, call_price = _read_call_fields(reader)
    description = decode_trailing_text(reader.read_remaining(), "issuance description")
    return Issuance(
        asset=asset,
        quantity=quantity,
        divisible=divisible,
        callable=callable_,
        call_date=call_date,
        call_price=call_price,
        description=description,
    )


def _decode_lr_issuance(payload: bytes, ctx: DecodeContext) -> Issuance:
    require_min_length(payload, LR_ISSUANCE_LENGTH, "issuance")
    reader = ByteReader(payload)
    asset = read_asset(reader)
    quantity = reader.read_uint64()
    divisible = reader.read_bool()
    lock = reader.read_bool()
    reset = reader.read_bool()
    callable_, call_date, call_price = _read_call_fields(reader)
    description = decode_trailing_text(reader.read_remaining(), "issuance description")
    return Issuance(
        asset=asset,
        quantity=quantity,
        divisible=divisible,
        lock=lock,
        reset=reset,
        callable=callable_,
        call_date=call_date,
        call_price=call_price,
        description=description,
    )


def _decode_subasset(payload: bytes, ctx: DecodeContext) -> Issuance:
    require_min_length(payload, SUBASSET_HEADER_LENGTH, "subasset issuance")
    reader = ByteReader(payload)
    asset = read_asset(reader)
    quantity = reader.read_uint64()
    divisible = reader.read_bool()
    longname = _read_longname(reader)
    description = decode_utf8(reader.read_remaining(), "issuance description")
    return Issuance(
        asset=asset,
        quantity=quantity,
        divisible=divisible,
        subasset_longname=longname,
        description=description,
    )


def _decode_lr_subasset(payload: bytes, ctx: DecodeContext) -> Issuance:
    require_min_length(payload, LR_SUBASSET_HEADER_LENGTH, "subasset issuance")
    reader = ByteReader(payload)
    asset = read_asset(reader)
    quantity = reader.read_uint64()
    divisible = reader.read_bool()
    lock = reader.read_bool()
    reset = reader.read_bool()
    longname = _read_longname(reader)
    description = decode_utf8(reader.read_remaining(), "issuance description")
    return Issuance(
        asset=asset,
        quantity=quantity,
        divisible=divisible,
        lock=lock,
        reset=reset,
        subasset_longname=longname,
        description=description,
    )


_LAYOUTS = {
    MessageTypeId.ISSUANCE: _decode_issuance,
    MessageTypeId.SUBASSET_ISSUANCE: _decode_subasset,
    MessageTypeId.LR_ISSUANCE: _decode_lr_issuance,
    MessageTypeId.LR_SUBASSET: _decode_lr_subasset,
}


def decode_issuance(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Issuance:
    """Decode any of the issuance layouts.

    Args:
        payload (bytes): Prefix-stripped message payload.
        ctx (DecodeContext): Selects the layout through its type id; an unset
            type id is treated as a plain issuance.

    Returns:
        Issuance: The decoded record.

    Raises:
        DecodeError: If the payload does not match the selected layout.

    """
    type_id = MessageTypeId.ISSUANCE if ctx.type_id < 0 else ctx.type_id
    layout = _LAYOUTS.get(type_id)
    if layout is None:
        raise DecodeError(f"Not an issuance type id: {type_id}")
    return layout(payload, ctx)
