"""Protocol constants: magic prefix, message type ids and networks."""

from enum import IntEnum, StrEnum

PREFIX = b"CNTRPRTY"
PREFIX_HEX = PREFIX.hex()
PREFIX_LENGTH = len(PREFIX)

# Prefix plus at least a 1-byte type id.
MIN_MESSAGE_LENGTH = PREFIX_LENGTH + 1

# A leading zero byte marks the legacy 4-byte type id.
LEGACY_TYPE_ID_LENGTH = 4


class Network(StrEnum):
    """Bitcoin network used when rendering segwit addresses."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    REGTEST = "regtest"

    @property
    def bech32_hrp(self) -> str:
        return _BECH32_HRP[self]


_BECH32_HRP = {
    Network.MAINNET: "bc",
    Network.TESTNET: "tb",
    Network.REGTEST: "bcrt",
}


class MessageTypeId(IntEnum):
    """Numeric message type ids understood by the decoder table."""

    SEND = 0
    ENHANCED_SEND = 2
    MPMA_SEND = 3
    SWEEP = 4
    ORDER = 10
    BTC_PAY = 11
    DISPENSER = 12
    DISPENSE = 13
    ISSUANCE = 20
    SUBASSET_ISSUANCE = 21
    LR_ISSUANCE = 22
    LR_SUBASSET = 23
    BROADCAST = 30
    BET = 40
    DIVIDEND = 50
    CANCEL = 70
    FAIRMINTER = 90
    FAIRMINT = 91
    UTXO = 100
    ATTACH = 101
    DETACH = 102
    DESTROY = 110


MESSAGE_TYPE_NAMES: dict[int, str] = {
    MessageTypeId.SEND: "send",
    MessageTypeId.ENHANCED_SEND: "enhanced_send",
    MessageTypeId.MPMA_SEND: "mpma_send",
    MessageTypeId.SWEEP: "sweep",
    MessageTypeId.ORDER: "order",
    MessageTypeId.BTC_PAY: "btcpay",
    MessageTypeId.DISPENSER: "dispenser",
    MessageTypeId.DISPENSE: "dispense",
    MessageTypeId.ISSUANCE: "issuance",
    MessageTypeId.SUBASSET_ISSUANCE: "subasset_issuance",
    MessageTypeId.LR_ISSUANCE: "lr_issuance",
    MessageTypeId.LR_SUBASSET: "lr_subasset",
    MessageTypeId.BROADCAST: "broadcast",
    MessageTypeId.BET: "bet",
    MessageTypeId.DIVIDEND: "dividend",
    MessageTypeId.CANCEL: "cancel",
    MessageTypeId.FAIRMINTER: "fairminter",
    MessageTypeId.FAIRMINT: "fairmint",
    MessageTypeId.UTXO: "utxo",
    MessageTypeId.ATTACH: "attach",
    MessageTypeId.DETACH: "detach",
    MessageTypeId.DESTROY: "destroy",
}

ISSUANCE_TYPE_IDS = frozenset(
    {
        MessageTypeId.ISSUANCE,
        MessageTypeId.SUBASSET_ISSUANCE,
        MessageTypeId.LR_ISSUANCE,
        MessageTypeId.LR_SUBASSET,
    }
)


def message_type_name(type_id: int) -> str:
    """Return the snake_case name for a type id, or 'unknown_<id>'."""
    return MESSAGE_TYPE_NAMES.get(type_id, f"unknown_{type_id}")


def has_prefix(data: bytes) -> bool:
    """Exact byte comparison of the leading magic prefix."""
    return len(data) >= PREFIX_LENGTH and data[:PREFIX_LENGTH] == PREFIX
