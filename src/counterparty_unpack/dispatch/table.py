"""Closed mapping from message type id to decoder."""

from collections.abc import Callable, Mapping
from types import MappingProxyType

from counterparty_unpack.messages import (
    DecodeContext,
    DecodedRecord,
    decode_attach,
    decode_bet,
    decode_broadcast,
    decode_btcpay,
    decode_cancel,
    decode_destroy,
    decode_detach,
    decode_dispense,
    decode_dispenser,
    decode_dividend,
    decode_enhanced_send,
    decode_fairmint,
    decode_fairminter,
    decode_issuance,
    decode_mpma,
    decode_order,
    decode_send,
    decode_sweep,
    decode_utxo,
)
from counterparty_unpack.protocol.constants import MessageTypeId

Decoder = Callable[[bytes, DecodeContext], DecodedRecord]

DECODERS: Mapping[int, Decoder] = MappingProxyType(
    {
        MessageTypeId.SEND: decode_send,
        MessageTypeId.ENHANCED_SEND: decode_enhanced_send,
        MessageTypeId.MPMA_SEND: decode_mpma,
        MessageTypeId.SWEEP: decode_sweep,
        MessageTypeId.ORDER: decode_order,
        MessageTypeId.BTC_PAY: decode_btcpay,
        MessageTypeId.DISPENSER: decode_dispenser,
        MessageTypeId.DISPENSE: decode_dispense,
        MessageTypeId.ISSUANCE: decode_issuance,
        MessageTypeId.SUBASSET_ISSUANCE: decode_issuance,
        MessageTypeId.LR_ISSUANCE: decode_issuance,
        MessageTypeId.LR_SUBASSET: decode_issuance,
        MessageTypeId.BROADCAST: decode_broadcast,
        MessageTypeId.BET: decode_bet,
        MessageTypeId.DIVIDEND: decode_dividend,
        MessageTypeId.CANCEL: decode_cancel,
        MessageTypeId.FAIRMINTER: decode_fairminter,
        MessageTypeId.FAIRMINT: decode_fairmint,
        MessageTypeId.UTXO: decode_utxo,
        MessageTypeId.ATTACH: decode_attach,
        MessageTypeId.DETACH: decode_detach,
        MessageTypeId.DESTROY: decode_destroy,
    }
)


def get_decoder(type_id: int) -> Decoder | None:
    return DECODERS.get(type_id)


def supported_type_ids() -> tuple[int, ...]:
    return tuple(sorted(DECODERS))
