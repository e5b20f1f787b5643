"""Broadcast and bet decoders (oracle feeds and wagers on them)."""

from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.messages.common import (
    DEFAULT_CONTEXT,
    require_exact_length,
    require_min_length,
)
from counterparty_unpack.messages.records import Bet, Broadcast, DecodeContext
from counterparty_unpack.messages.text import decode_trailing_text

# >IdI, followed by text
BROADCAST_HEADER_LENGTH = 16
# >HIQQdII
BET_LENGTH = 38


def decode_broadcast(
    payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT
) -> Broadcast:
    require_min_length(payload, BROADCAST_HEADER_LENGTH, "broadcast")
    reader = ByteReader(payload)
    timestamp = reader.read_uint32()
    value = reader.read_float64()
    fee_fraction_int = reader.read_uint32()
    text = decode_trailing_text(reader.read_remaining(), "broadcast text")
    return Broadcast(
        timestamp=timestamp,
        value=value,
        fee_fraction_int=fee_fraction_int,
        text=text,
    )


def decode_bet(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Bet:
    require_exact_length(payload, BET_LENGTH, "bet")
    reader = ByteReader(payload)
    return Bet(
        bet_type=reader.read_uint16(),
        deadline=reader.read_uint32(),
        wager_quantity=reader.read_uint64(),
        counterwager_quantity=reader.read_uint64(),
        target_value=reader.read_float64(),
        leverage=reader.read_uint32(),
        expiration=reader.read_uint32(),
    )
