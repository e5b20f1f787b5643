"""Decentralised exchange decoders: order, btcpay and cancel."""

from counterparty_unpack.binary.reader import ByteReader
from counterparty_unpack.messages.common import (
    DEFAULT_CONTEXT,
    read_asset,
    read_hash,
    require_exact_length,
)
from counterparty_unpack.messages.records import BtcPay, Cancel, DecodeContext, Order

# >QQQQHQ
ORDER_LENGTH = 42
# Two 32-byte transaction hashes.
BTCPAY_LENGTH = 64
CANCEL_LENGTH = 32


def decode_order(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Order:
    require_exact_length(payload, ORDER_LENGTH, "order")
    reader = ByteReader(payload)
    return Order(
        give_asset=read_asset(reader),
        give_quantity=reader.read_uint64(),
        get_asset=read_asset(reader),
        get_quantity=reader.read_uint64(),
        expiration=reader.read_uint16(),
        fee_required=reader.read_uint64(),
    )


def decode_btcpay(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> BtcPay:
    """Decode a BTC payment for a matched order; hashes are lowercase hex."""
    require_exact_length(payload, BTCPAY_LENGTH, "btcpay")
    reader = ByteReader(payload)
    return BtcPay(tx0_hash=read_hash(reader), tx1_hash=read_hash(reader))


def decode_cancel(payload: bytes, ctx: DecodeContext = DEFAULT_CONTEXT) -> Cancel:
    require_exact_length(payload, CANCEL_LENGTH, "cancel")
    return Cancel(offer_hash=read_hash(ByteReader(payload)))
