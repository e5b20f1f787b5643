"""Per-type message decoders and the records they produce."""

from .broadcast import (
    decode_broadcast as decode_broadcast,
)
from .broadcast import (
    decode_bet as decode_bet,
)
from .destroy import (
    decode_destroy as decode_destroy,
)
from .dispenser import (
    decode_dispense as decode_dispense,
)
from .dispenser import (
    decode_dispenser as decode_dispenser,
)
from .dividend import (
    decode_dividend as decode_dividend,
)
from .fairminter import (
    decode_fairmint as decode_fairmint,
)
from .fairminter import (
    decode_fairmint_legacy as decode_fairmint_legacy,
)
from .fairminter import (
    decode_fairminter as decode_fairminter,
)
from .fairminter import (
    decode_fairminter_legacy as decode_fairminter_legacy,
)
from .issuance import (
    decode_issuance as decode_issuance,
)
from .mpma import (
    decode_mpma as decode_mpma,
)
from .negotiate import (
    has_compact_marker as has_compact_marker,
)
from .negotiate import (
    negotiate as negotiate,
)
from .negotiate import (
    probe_compact as probe_compact,
)
from .order import (
    decode_btcpay as decode_btcpay,
)
from .order import (
    decode_cancel as decode_cancel,
)
from .order import (
    decode_order as decode_order,
)
from .records import (
    Attach as Attach,
)
from .records import (
    Bet as Bet,
)
from .records import (
    BtcPay as BtcPay,
)
from .records import (
    Broadcast as Broadcast,
)
from .records import (
    Cancel as Cancel,
)
from .records import (
    DecodeContext as DecodeContext,
)
from .records import (
    DecodedRecord as DecodedRecord,
)
from .records import (
    Destroy as Destroy,
)
from .records import (
    Detach as Detach,
)
from .records import (
    Dispense as Dispense,
)
from .records import (
    Dispenser as Dispenser,
)
from .records import (
    Dividend as Dividend,
)
from .records import (
    EnhancedSend as EnhancedSend,
)
from .records import (
    Fairmint as Fairmint,
)
from .records import (
    Fairminter as Fairminter,
)
from .records import (
    Issuance as Issuance,
)
from .records import (
    MpmaSend as MpmaSend,
)
from .records import (
    MpmaSendItem as MpmaSendItem,
)
from .records import (
    Order as Order,
)
from .records import (
    Send as Send,
)
from .records import (
    Sweep as Sweep,
)
from .records import (
    UtxoMove as UtxoMove,
)
from .send import (
    decode_enhanced_send as decode_enhanced_send,
)
from .send import (
    decode_send as decode_send,
)
from .sweep import (
    decode_sweep as decode_sweep,
)
from .utxo import (
    decode_attach as decode_attach,
)
from .utxo import (
    decode_detach as decode_detach,
)
from .utxo import (
    decode_utxo as decode_utxo,
)

__all__ = [
    "Attach",
    "Bet",
    "BtcPay",
    "Broadcast",
    "Cancel",
    "DecodeContext",
    "DecodedRecord",
    "Destroy",
    "Detach",
    "Dispense",
    "Dispenser",
    "Dividend",
    "EnhancedSend",
    "Fairmint",
    "Fairminter",
    "Issuance",
    "MpmaSend",
    "MpmaSendItem",
    "Order",
    "Send",
    "Sweep",
    "UtxoMove",
    "decode_attach",
    "decode_bet",
    "decode_broadcast",
    "decode_btcpay",
    "decode_cancel",
    "decode_destroy",
    "decode_detach",
    "decode_dispense",
    "decode_dispenser",
    "decode_dividend",
    "decode_enhanced_send",
    "decode_fairmint",
    "decode_fairmint_legacy",
    "decode_fairminter",
    "decode_fairminter_legacy",
    "decode_issuance",
    "decode_mpma",
    "decode_order",
    "decode_send",
    "decode_sweep",
    "decode_utxo",
    "has_compact_marker",
    "negotiate",
    "probe_compact",
]
