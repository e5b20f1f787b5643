"""Classic and enhanced send decoders."""

from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.messages.common import (
    DEFAULT_CONTEXT,
    read_address,
    read_asset,
    require_exact_length,
    require_min_length,
)
from counterparty_unpack.messages.records import DecodeContext, EnhancedSend, Send
from counterparty_unpack.messages.text import memo_fields
from counterparty_unpack.protocol.address import PACKED_ADDRESS_LENGTH

# >QQ
SEND_LENGTH = 16
# >QQ21s, followed by an optional memo
ENHANCED_SEND_LENGTH = 16 + PACKED_ADDRESS_LENGTH


def decode_send(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Send:
    """Decode a classic send: asset id and quantity, destination is an output."""
    require_exact_length(payload, SEND_LENGTH, "send")
    reader = ByteReader(payload)
    return Send(asset=read_asset(reader), quantity=reader.read_uint64())


def decode_enhanced_send(
    payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT
) -> EnhancedSend:
    """Decode an enhanced send with packed destination and optional memo."""
    require_min_length(payload, ENHANCED_SEND_LENGTH, "enhanced send")
    reader = ByteReader(payload)
    asset = read_asset(reader)
    quantity = reader.read_uint64()
    destination = read_address(reader, ctx)
    memo, memo_hex = memo_fields(reader.read_remaining())
    return EnhancedSend(
        asset=asset,
        quantity=quantity,
        destination=destination,
        memo=memo,
        memo_hex=memo_hex,
    )
