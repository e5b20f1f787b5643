"""Per-message parameter schema: how each field compares and how much it matters.

Criticality levels:

    - CRITICAL: funds at risk if wrong (asset, quantity, destination).
    - DANGEROUS: harmful side effects if wrong (lock, reset, status).
    - INFORMATIONAL: metadata with no direct harm (memo, description, tag).

A required parameter must be present in the external data; its absence is
itself a mismatch. Optional parameters are compared only when supplied.
"""

from enum import StrEnum

from msgspec import Struct

from counterparty_unpack.protocol.constants import MessageTypeId


class Criticality(StrEnum):
    CRITICAL = "critical"
    DANGEROUS = "dangerous"
    INFORMATIONAL = "informational"


class FieldKind(StrEnum):
    """Equality rule applied to a field."""

    QUANTITY = "quantity"
    ASSET = "asset"
    ADDRESS = "address"
    HASH = "hash"
    BOOL = "bool"
    FLOAT = "float"
    TEXT = "text"
    SENDS = "sends"


class ParamSpec(Struct, frozen=True):
    name: str
    kind: FieldKind
    criticality: Criticality
    risk: str
    required: bool = False


class MessageSchema(Struct, frozen=True):
    message_type: str
    type_ids: tuple[int, ...]
    params: tuple[ParamSpec, ...]

    def param(self, name: str) -> ParamSpec | None:
        for spec in self.params:
            if spec.name == name:
                return spec
        return None

    def by_criticality(self, criticality: Criticality) -> tuple[ParamSpec, ...]:
        return tuple(spec for spec in self.params if spec.criticality == criticality)


_C = Criticality.CRITICAL
_D = Criticality.DANGEROUS
_I = Criticality.INFORMATIONAL

_ASSET = ParamSpec("asset", FieldKind.ASSET, _C, "Wrong asset = moves the wrong tokens", True)
_QUANTITY = ParamSpec("quantity", FieldKind.QUANTITY, _C, "Wrong amount = moves more than intended", True)
_MEMO = ParamSpec("memo", FieldKind.TEXT, _I, "Metadata only, no direct financial impact")


def _schema(message_type: str, type_ids: tuple[int, ...], *params: ParamSpec) -> MessageSchema:
    return MessageSchema(message_type=message_type, type_ids=type_ids, params=params)


PARAM_SCHEMA: dict[str, MessageSchema] = {
    schema.message_type: schema
    for schema in (
        _schema("send", (MessageTypeId.SEND,), _ASSET, _QUANTITY),
        _schema(
            "enhanced_send",
            (MessageTypeId.ENHANCED_SEND,),
            _ASSET,
            _QUANTITY,
            ParamSpec("destination", FieldKind.ADDRESS, _C, "Wrong address = funds sent to wrong recipient"),
            _MEMO,
        ),
        _schema(
            "mpma_send",
            (MessageTypeId.MPMA_SEND,),
            ParamSpec("sends", FieldKind.SENDS, _C, "Every asset, quantity and destination must match"),
            _MEMO,
        ),
        _schema(
            "sweep",
            (MessageTypeId.SWEEP,),
            ParamSpec("destination", FieldKind.ADDRESS, _C, "Wrong address = everything swept to wrong recipient"),
            ParamSpec("flags", FieldKind.QUANTITY, _D, "Controls what gets swept (balances, ownership)"),
            _MEMO,
        ),
        _schema(
            "order",
            (MessageTypeId.ORDER,),
            ParamSpec("give_asset", FieldKind.ASSET, _C, "Wrong asset = offering wrong tokens", True),
            ParamSpec("give_quantity", FieldKind.QUANTITY, _C, "Wrong amount = offering more than intended", True),
            ParamSpec("get_asset", FieldKind.ASSET, _C, "Wrong asset = receiving wrong tokens", True),
            ParamSpec("get_quantity", FieldKind.QUANTITY, _C, "Wrong amount = bad exchange rate", True),
            ParamSpec("expiration", FieldKind.QUANTITY, _D, "Too short expires before fill, too long locks funds"),
            ParamSpec("fee_required", FieldKind.QUANTITY, _D, "Higher fee = lose more BTC on match"),
        ),
        _schema(
            "btcpay",
            (MessageTypeId.BTC_PAY,),
            ParamSpec("order_match_id", FieldKind.HASH, _C, "Wrong order match = paying for wrong trade"),
        ),
        _schema(
            "dispenser",
            (MessageTypeId.DISPENSER,),
            ParamSpec("asset", FieldKind.ASSET, _C, "Wrong asset = dispensing wrong tokens", True),
            ParamSpec("give_quantity", FieldKind.QUANTITY, _C, "Wrong amount = giving wrong amount per dispense", True),
            ParamSpec("escrow_quantity", FieldKind.QUANTITY, _C, "Wrong amount = locking wrong total amount", True),
            ParamSpec("mainchainrate", FieldKind.QUANTITY, _C, "Wrong rate = selling at wrong price", True),
            ParamSpec("status", FieldKind.QUANTITY, _D, "Dispenser open when it should be closed or vice versa"),
            ParamSpec("open_address", FieldKind.ADDRESS, _D, "Someone else can refill or control the dispenser"),
            ParamSpec("oracle_address", FieldKind.ADDRESS, _D, "Price determined by an untrusted source"),
        ),
        _schema("dispense", (MessageTypeId.DISPENSE,)),
        _schema(
            "issuance",
            (
                MessageTypeId.ISSUANCE,
                MessageTypeId.SUBASSET_ISSUANCE,
                MessageTypeId.LR_ISSUANCE,
                MessageTypeId.LR_SUBASSET,
            ),
            ParamSpec("asset", FieldKind.ASSET, _C, "Wrong asset name = creating or modifying wrong asset", True),
            ParamSpec("quantity", FieldKind.QUANTITY, _C, "Wrong amount = issuing wrong supply", True),
            ParamSpec("divisible", FieldKind.BOOL, _D, "Divisibility cannot change after creation"),
            ParamSpec("lock", FieldKind.BOOL, _D, "Locks supply forever"),
            ParamSpec("reset", FieldKind.BOOL, _D, "Resets the asset; existing holders lose tokens"),
            ParamSpec("description", FieldKind.TEXT, _I, "Asset description, visible but not financial"),
        ),
        _schema(
            "broadcast",
            (MessageTypeId.BROADCAST,),
            ParamSpec("timestamp", FieldKind.QUANTITY, _I, "Broadcast timestamp"),
            ParamSpec("value", FieldKind.FLOAT, _D, "Oracle value may settle dependent contracts"),
            ParamSpec("fee_fraction_int", FieldKind.QUANTITY, _D, "Fee charged to users of this feed"),
            ParamSpec("text", FieldKind.TEXT, _I, "Broadcast message text"),
        ),
        _schema(
            "bet",
            (MessageTypeId.BET,),
            ParamSpec("wager_quantity", FieldKind.QUANTITY, _C, "Wrong amount = wagering more than intended", True),
            ParamSpec("counterwager_quantity", FieldKind.QUANTITY, _C, "Wrong amount = bad odds", True),
            ParamSpec("bet_type", FieldKind.QUANTITY, _D, "Wrong side of the bet"),
            ParamSpec("deadline", FieldKind.QUANTITY, _D, "Bet settles at the wrong time"),
            ParamSpec("target_value", FieldKind.FLOAT, _D, "Bet settles against the wrong value"),
            ParamSpec("leverage", FieldKind.QUANTITY, _D, "Higher leverage = larger loss"),
            ParamSpec("expiration", FieldKind.QUANTITY, _I, "Bet expires at a different block"),
        ),
        _schema(
            "dividend",
            (MessageTypeId.DIVIDEND,),
            ParamSpec("asset", FieldKind.ASSET, _C, "Wrong asset = paying holders of the wrong token", True),
            ParamSpec("quantity_per_unit", FieldKind.QUANTITY, _C, "Wrong amount = paying wrong dividend per unit", True),
            ParamSpec("dividend_asset", FieldKind.ASSET, _C, "Wrong asset = paying dividend in wrong currency"),
        ),
        _schema(
            "cancel",
            (MessageTypeId.CANCEL,),
            ParamSpec("offer_hash", FieldKind.HASH, _C, "Wrong hash = cancelling wrong order or offer"),
        ),
        _schema(
            "fairminter",
            (MessageTypeId.FAIRMINTER,),
            ParamSpec("asset", FieldKind.ASSET, _C, "Asset name for the fair launch", True),
            ParamSpec("price", FieldKind.QUANTITY, _C, "Price per lot; wrong = bad economics", True),
            ParamSpec("quantity_by_price", FieldKind.QUANTITY, _C, "Units per price; changes the effective price", True),
            ParamSpec("hard_cap", FieldKind.QUANTITY, _D, "Maximum supply"),
            ParamSpec("max_mint_per_tx", FieldKind.QUANTITY, _D, "Per-transaction mint limit"),
            ParamSpec("divisible", FieldKind.BOOL, _D, "Divisibility cannot change after creation"),
            ParamSpec("lock_quantity", FieldKind.BOOL, _D, "Locks supply at the hard cap"),
            ParamSpec("lock_description", FieldKind.BOOL, _D, "Locks the description"),
            ParamSpec("description", FieldKind.TEXT, _I, "Asset description"),
        ),
        _schema("fairmint", (MessageTypeId.FAIRMINT,), _ASSET, _QUANTITY),
        _schema(
            "utxo",
            (MessageTypeId.UTXO,),
            _ASSET,
            _QUANTITY,
            ParamSpec("source", FieldKind.TEXT, _C, "Moves balances out of the wrong UTXO"),
            ParamSpec("destination", FieldKind.TEXT, _C, "Moves balances to the wrong UTXO or address"),
        ),
        _schema(
            "attach",
            (MessageTypeId.ATTACH,),
            _ASSET,
            _QUANTITY,
            ParamSpec("destination_vout", FieldKind.QUANTITY, _D, "Attaching to the wrong output"),
        ),
        _schema(
            "detach",
            (MessageTypeId.DETACH,),
            ParamSpec("destination", FieldKind.ADDRESS, _C, "Detached balances go to the wrong address"),
        ),
        _schema(
            "destroy",
            (MessageTypeId.DESTROY,),
            _ASSET,
            _QUANTITY,
            ParamSpec("tag", FieldKind.TEXT, _I, "Just a label, no financial impact"),
        ),
    )
}

_SCHEMA_BY_TYPE_ID: dict[int, MessageSchema] = {
    type_id: schema for schema in PARAM_SCHEMA.values() for type_id in schema.type_ids
}


def get_message_schema(message_type: str) -> MessageSchema | None:
    return PARAM_SCHEMA.get(message_type)


def get_schema_by_type_id(type_id: int) -> MessageSchema | None:
    return _SCHEMA_BY_TYPE_ID.get(type_id)


def critical_params(message_type: str) -> tuple[ParamSpec, ...]:
    schema = PARAM_SCHEMA.get(message_type)
    return schema.by_criticality(Criticality.CRITICAL) if schema else ()


def dangerous_params(message_type: str) -> tuple[ParamSpec, ...]:
    schema = PARAM_SCHEMA.get(message_type)
    return schema.by_criticality(Criticality.DANGEROUS) if schema else ()
